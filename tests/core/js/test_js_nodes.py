"""
Tests for JavaScript Syntax Tree Nodes.

Verifies:
1.  Structural equality and immutability.
2.  `with_changes` returns updated copies.
3.  ESTree type tags.
"""

import dataclasses

import pytest

from es_class_codemod.core.js.nodes import (
  BlockStatement,
  CallExpression,
  ClassDeclaration,
  Comment,
  ExpressionStatement,
  FunctionExpression,
  Identifier,
  MemberExpression,
  ThisExpression,
)


def test_structural_equality():
  a = MemberExpression(ThisExpression(), Identifier("foo"))
  b = MemberExpression(ThisExpression(), Identifier("foo"))
  assert a == b
  assert a != MemberExpression(ThisExpression(), Identifier("bar"))


def test_nodes_are_frozen():
  node = Identifier("foo")
  with pytest.raises(dataclasses.FrozenInstanceError):
    node.name = "bar"


def test_with_changes_returns_copy():
  stmt = ExpressionStatement(CallExpression(Identifier("f")))
  commented = stmt.with_changes(comments=(Comment(" note"),))

  assert stmt.comments == ()
  assert commented.comments == (Comment(" note"),)
  assert commented.expression is stmt.expression


def test_type_tag():
  assert Identifier("x").type == "Identifier"
  assert FunctionExpression().type == "FunctionExpression"


def test_defaults():
  fn = FunctionExpression()
  assert fn.params == ()
  assert fn.body == BlockStatement()

  cls = ClassDeclaration(id=None)
  assert cls.body.body == ()
  assert cls.superclass is None
  assert cls.decorators == ()
