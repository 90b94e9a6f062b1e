"""
Tests for Constructor Synthesis.

Verifies:
1.  No constructor when nothing needs eager initialization.
2.  `super()` is the first statement, followed by assignments in order.
3.  String-literal and computed keys use bracket access.
"""

from hypothesis import given, settings, strategies as st

from es_class_codemod.core.js.nodes import (
  ArrayExpression,
  AssignmentExpression,
  CallExpression,
  Comment,
  ExpressionStatement,
  Identifier,
  Literal,
  MemberExpression,
  ObjectExpression,
  Super,
  ThisExpression,
)
from es_class_codemod.core.model.property import LegacyProperty
from es_class_codemod.core.synthesis.constructor import (
  create_constructor,
  create_super_expression_statement,
  instance_props_to_expressions,
)


def _prop(key, value=None, **kwargs):
  key_node = Identifier(key) if isinstance(key, str) else key
  return LegacyProperty(key=key_node, value=value or ArrayExpression(), **kwargs)


def test_no_props_no_constructor():
  assert create_constructor() == []
  assert create_constructor([]) == []


def test_super_statement():
  assert create_super_expression_statement() == ExpressionStatement(CallExpression(Super(), ()))


def test_constructor_layout(emitter):
  props = [
    _prop("items", comments=(Comment(" cache"),)),
    _prop("options", ObjectExpression()),
  ]
  (constructor,) = create_constructor(props)

  assert constructor.kind == "constructor"
  assert constructor.key == Identifier("constructor")
  assert constructor.value.params == ()
  assert emitter.emit(constructor) == (
    "constructor() {\n  super();\n  // cache\n  this.items = [];\n  this.options = {};\n}"
  )


def test_bracket_access_for_special_keys():
  literal = _prop(Literal("foo-bar"))
  computed = _prop(Identifier("key"), computed=True)
  statements = instance_props_to_expressions([literal, computed])

  assert statements[0].expression == AssignmentExpression(
    "=", MemberExpression(ThisExpression(), Literal("foo-bar"), computed=True), ArrayExpression()
  )
  assert statements[1].expression.left == MemberExpression(ThisExpression(), Identifier("key"), computed=True)


_names = st.lists(st.from_regex(r"[a-z][a-zA-Z0-9]{0,8}", fullmatch=True), min_size=1, max_size=8)


@given(names=_names)
@settings(max_examples=50)
def test_assignment_order_follows_input(names):
  (constructor,) = create_constructor([_prop(name) for name in names])
  statements = constructor.value.body.body

  assert statements[0] == create_super_expression_statement()
  assert [s.expression.left.property.name for s in statements[1:]] == names
