"""
Superclass Delegation Rewriting.

Legacy methods invoke the overridden implementation with ``this._super(...)``.
Native classes use ``super.<method>(...)``. This module rewrites the former into the
latter, matching statements structurally:

- Matched: an expression statement whose expression is exactly
  ``this._super(<args>)``, at any depth of the method body (conditionals, loops,
  nested blocks). The argument list is forwarded untouched.
- Not matched: the call used as a sub-expression (``x = this._super()``,
  ``return this._super()``), other receivers, or other property names.

The rewritten form does not match the pattern, so the rewrite is idempotent.
"""

import logging

from es_class_codemod.core.js.nodes import (
  BlockStatement,
  CallExpression,
  ExpressionStatement,
  Identifier,
  JsNode,
  MemberExpression,
  MethodDefinition,
  Super,
  ThisExpression,
)
from es_class_codemod.core.js.visitor import NodeTransformer, find_all
from es_class_codemod.core.synthesis.utils import needs_computed_access

logger = logging.getLogger(__name__)

SUPER_METHOD_NAME = "_super"


def is_super_delegation(node: JsNode) -> bool:
  """
  Structural predicate for the ``this._super(<args>);`` statement.

  Args:
      node (JsNode): Any node.

  Returns:
      bool: True only for a full expression statement of that exact shape.
  """
  if not isinstance(node, ExpressionStatement):
    return False
  call = node.expression
  if not isinstance(call, CallExpression) or not isinstance(call.callee, MemberExpression):
    return False
  callee = call.callee
  return (
    not callee.computed
    and isinstance(callee.object, ThisExpression)
    and isinstance(callee.property, Identifier)
    and callee.property.name == SUPER_METHOD_NAME
  )


class SuperCallTransformer(NodeTransformer):
  """
  Replaces ``this._super(...)`` statements with ``super.<method>(...)``.

  Attributes:
      method_key (JsNode): Key of the enclosing method.
      computed (bool): True to emit ``super[<key>](...)``.
  """

  def __init__(self, method_key: JsNode, computed: bool = False) -> None:
    self.method_key = method_key
    self.computed = needs_computed_access(method_key, computed)

  def leave_ExpressionStatement(
    self, original_node: ExpressionStatement, updated_node: ExpressionStatement
  ) -> ExpressionStatement:
    if not is_super_delegation(updated_node):
      return updated_node

    super_member = MemberExpression(Super(), self.method_key, computed=self.computed)
    return ExpressionStatement(
      CallExpression(super_member, updated_node.expression.arguments),
      comments=updated_node.comments,
    )


def rewrite_super_calls(body: BlockStatement, method_key: JsNode, computed: bool = False) -> BlockStatement:
  """
  Rewrites every delegation statement inside ``body``.

  Args:
      body (BlockStatement): The method body.
      method_key (JsNode): Name of the method the body belongs to.
      computed (bool): True if the method key is a computed expression.

  Returns:
      BlockStatement: The rewritten body, or ``body`` itself when nothing matched.
  """
  matches = find_all(body, is_super_delegation)
  if not matches:
    return body
  logger.debug("Rewriting %d superclass delegation call(s)", len(matches))
  return SuperCallTransformer(method_key, computed).transform(body)


def replace_super_expressions(method: MethodDefinition) -> MethodDefinition:
  """
  Applies ``rewrite_super_calls`` to a method, keyed to the method's own name.

  Args:
      method (MethodDefinition): The synthesized method.

  Returns:
      MethodDefinition: The rewritten method, or ``method`` itself when unchanged.
  """
  body = rewrite_super_calls(method.value.body, method.key, method.computed)
  if body is method.value.body:
    return method
  return method.with_changes(value=method.value.with_changes(body=body))
