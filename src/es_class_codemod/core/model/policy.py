"""
Property Policies.

The synthesizers defer three per-property decisions to a ``PropertyPolicy``:

1.  **Eager initialization**: whether the value must be assigned in a constructor
    instead of a field initializer.
2.  **Accessor kind**: the member kind the property declares (``init``/``get``/``set``).
3.  **Value setting**: whether a field keeps the property's value as initializer.

``DefaultPropertyPolicy`` implements the conventions of the decorator-based native
class model; callers with different rules supply their own implementation.
"""

from typing import Protocol

from es_class_codemod.config import CodemodConfig
from es_class_codemod.core.js.nodes import ArrayExpression, FunctionExpression, ObjectExpression
from es_class_codemod.core.model.property import LegacyProperty, get_callee_name
from es_class_codemod.enums import PropertyKind


class PropertyPolicy(Protocol):
  """Per-property decisions consumed by the class synthesizers."""

  def requires_eager_init(self, prop: LegacyProperty) -> bool: ...

  def accessor_kind(self, prop: LegacyProperty) -> PropertyKind: ...

  def should_set_value(self, prop: LegacyProperty) -> bool: ...


class DefaultPropertyPolicy:
  """
  Default per-property decisions.

  Attributes:
      config (CodemodConfig): Supplies the getter macros and value-preserving decorators.
  """

  def __init__(self, config: CodemodConfig) -> None:
    self.config = config

  def requires_eager_init(self, prop: LegacyProperty) -> bool:
    """
    Object and array literals were shared across instances by the prototype-based
    definition; they are assigned per instance in the constructor instead.

    Args:
        prop (LegacyProperty): The property to inspect.

    Returns:
        bool: True for undecorated object/array literal fields.
    """
    if prop.is_class_decorator or prop.is_call_expression or prop.has_decorators:
      return False
    if prop.name == "actions":
      return False
    return isinstance(prop.value, (ObjectExpression, ArrayExpression))

  def accessor_kind(self, prop: LegacyProperty) -> PropertyKind:
    """
    Getter macros with a trailing function declare a getter; everything else keeps
    the kind written in the source.

    Args:
        prop (LegacyProperty): The property to inspect.

    Returns:
        PropertyKind: The declared accessor kind.
    """
    if prop.is_call_expression and isinstance(prop.last_call_arg, FunctionExpression):
      if get_callee_name(prop.callee) in self.config.getter_macros:
        return PropertyKind.GET
    return prop.kind

  def should_set_value(self, prop: LegacyProperty) -> bool:
    """
    Decides if the field keeps its initializer.

    Eager properties are assigned in the constructor. Decorated properties lose the
    initializer unless all of their decorators are value-preserving bindings.

    Args:
        prop (LegacyProperty): The property to inspect.

    Returns:
        bool: True if the field should be declared with the property's value.
    """
    if self.requires_eager_init(prop):
      return False
    if not prop.has_decorators:
      return True
    return all(name in self.config.value_decorators for name in prop.decorator_names)
