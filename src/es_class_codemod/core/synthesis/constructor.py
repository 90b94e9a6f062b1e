"""
Constructor Synthesis.

Values that must be created per instance (``foo: []`` on a prototype-based
definition is shared by every instance) are assigned in an explicit constructor:

.. code-block:: javascript

    constructor() {
      super();
      this.foo = [];
    }
"""

from typing import List, Sequence

from es_class_codemod.core.js.nodes import (
  AssignmentExpression,
  BlockStatement,
  CallExpression,
  ExpressionStatement,
  FunctionExpression,
  Identifier,
  MemberExpression,
  MethodDefinition,
  Super,
  ThisExpression,
)
from es_class_codemod.core.model.property import LegacyProperty
from es_class_codemod.core.synthesis.utils import needs_computed_access, with_comments
from es_class_codemod.enums import MethodKind


def create_super_expression_statement() -> ExpressionStatement:
  """Creates the bare ``super();`` statement."""
  return ExpressionStatement(CallExpression(Super(), ()))


def instance_props_to_expressions(instance_props: Sequence[LegacyProperty]) -> List[ExpressionStatement]:
  """
  Converts properties into ``this.<key> = <value>;`` statements.

  Args:
      instance_props (Sequence[LegacyProperty]): Properties in assignment order.

  Returns:
      List[ExpressionStatement]: One statement per property, carrying its comments.
  """
  statements = []
  for prop in instance_props:
    target = MemberExpression(ThisExpression(), prop.key, computed=needs_computed_access(prop.key, prop.computed))
    statement = ExpressionStatement(AssignmentExpression("=", target, prop.value))
    statements.append(with_comments(statement, prop))
  return statements


def create_constructor(instance_props: Sequence[LegacyProperty] = ()) -> List[MethodDefinition]:
  """
  Creates the constructor assigning ``instance_props``.

  Args:
      instance_props (Sequence[LegacyProperty]): Properties that need eager
          per-instance initialization.

  Returns:
      List[MethodDefinition]: An empty list when there is nothing to assign (the
      implicit constructor applies), else a single constructor.
  """
  if not instance_props:
    return []

  body = BlockStatement((create_super_expression_statement(), *instance_props_to_expressions(instance_props)))
  return [
    MethodDefinition(
      kind=MethodKind.CONSTRUCTOR.value,
      key=Identifier("constructor"),
      value=FunctionExpression(params=(), body=body),
    )
  ]
