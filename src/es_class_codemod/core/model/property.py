"""
Legacy Property Model.

A ``LegacyProperty`` is one entry of an object-literal class definition, e.g. the
``foo`` in ``Parent.extend({ foo: computed('bar', function() {}) })``, normalized
for the class synthesizers. Records are read-only; the adapter decides the target
``PropertyCategory`` once and every synthesizer dispatches on it.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

from es_class_codemod.core.js.nodes import (
  CallExpression,
  Comment,
  FunctionExpression,
  Identifier,
  JsNode,
  Literal,
  MemberExpression,
  ObjectExpression,
  Property,
)
from es_class_codemod.enums import PropertyCategory, PropertyKind

ACTIONS_PROP_NAME = "actions"


@dataclass(frozen=True)
class LegacyProperty:
  """
  Normalized view of a legacy object-literal property.

  Attributes:
      key: Identifier or computed expression naming the property.
      value: The property's value expression.
      kind: Accessor kind, possibly overridden by the property policy.
      computed: True if ``key`` is a bracketed expression.
      name: Static name of the property, when known.
      comments: Attached comments, copied verbatim to the output.
      call_expr_args: Arguments of the (innermost) macro call, if call-valued.
      callee: Callee of the macro call, if call-valued.
      call_modifiers: Chained modifier calls, e.g. ``readOnly()`` in
          ``computed(...).readOnly()``, in source order.
      is_class_decorator: True if the property becomes a class-level decorator.
      is_call_expression: True if the value is a recognized macro call.
      decorator_names: Names of the decorators the property maps to.
      category: Target construct; derived with ``classify`` when not given.
  """

  key: JsNode
  value: JsNode
  kind: PropertyKind = PropertyKind.INIT
  computed: bool = False
  name: Optional[str] = None
  comments: Tuple[Comment, ...] = ()
  call_expr_args: Tuple[JsNode, ...] = ()
  callee: Optional[JsNode] = None
  call_modifiers: Tuple[CallExpression, ...] = ()
  is_class_decorator: bool = False
  is_call_expression: bool = False
  decorator_names: Tuple[str, ...] = ()
  category: Optional[PropertyCategory] = None

  def __post_init__(self) -> None:
    if self.category is None:
      object.__setattr__(self, "category", classify(self))

  @property
  def type(self) -> str:
    """ESTree type of the value (``"FunctionExpression"``, ``"CallExpression"``, ...)."""
    return self.value.type

  @property
  def is_function(self) -> bool:
    return isinstance(self.value, FunctionExpression)

  @property
  def has_decorators(self) -> bool:
    return bool(self.decorator_names)

  @property
  def last_call_arg(self) -> Optional[JsNode]:
    """Trailing argument of the macro call, or None."""
    return self.call_expr_args[-1] if self.call_expr_args else None

  def with_changes(self, **changes: Any) -> "LegacyProperty":
    """
    Returns a copy with the given fields replaced.

    The category is re-derived from the new fields unless passed explicitly.
    """
    changes.setdefault("category", None)
    return replace(self, **changes)


def classify(prop: LegacyProperty) -> PropertyCategory:
  """
  Decides the target construct for a property.

  Precedence (first match wins): class decorator, function value, macro call,
  ``actions`` hash, plain field. ``actions`` only qualifies when its value is an
  object literal; anything else falls through to a field.

  Args:
      prop (LegacyProperty): The property to classify.

  Returns:
      PropertyCategory: The dispatch tag.
  """
  if prop.is_class_decorator:
    return PropertyCategory.CLASS_DECORATOR
  if prop.is_function:
    return PropertyCategory.METHOD
  if prop.is_call_expression:
    return PropertyCategory.CALL_EXPRESSION
  if prop.name == ACTIONS_PROP_NAME and isinstance(prop.value, ObjectExpression):
    return PropertyCategory.ACTIONS
  return PropertyCategory.FIELD


def get_prop_name(node: Property) -> Optional[str]:
  """
  Returns the static name of an object-literal property.

  Args:
      node (Property): The property node.

  Returns:
      Optional[str]: ``foo`` for ``foo: ...`` and ``'foo': ...``; None for computed keys.
  """
  if node.computed:
    return None
  if isinstance(node.key, Identifier):
    return node.key.name
  if isinstance(node.key, Literal) and isinstance(node.key.value, str):
    return node.key.value
  return None


def get_callee_name(callee: Optional[JsNode]) -> Optional[str]:
  """
  Resolves the name of a call's callee: ``computed`` for both ``computed(...)``
  and ``Ember.computed(...)``.
  """
  if isinstance(callee, Identifier):
    return callee.name
  if isinstance(callee, MemberExpression) and not callee.computed and isinstance(callee.property, Identifier):
    return callee.property.name
  return None
