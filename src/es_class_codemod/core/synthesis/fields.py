"""
Class Field Synthesis.

Turns a plain data property (``foo: 'bar'``) into a field declaration
(``foo = "bar";``). Whether the initializer is kept is a policy decision: eager
properties are assigned in the constructor, and most decorators take over the value.
"""

from es_class_codemod.core.js.nodes import ClassProperty
from es_class_codemod.core.model.decorators import DecoratorPolicy
from es_class_codemod.core.model.policy import PropertyPolicy
from es_class_codemod.core.model.property import LegacyProperty
from es_class_codemod.core.synthesis.utils import with_comments, with_decorators


def create_class_prop(
  prop: LegacyProperty,
  decorator_policy: DecoratorPolicy,
  property_policy: PropertyPolicy,
) -> ClassProperty:
  """
  Creates the class field for ``prop``.

  Args:
      prop (LegacyProperty): The property to declare.
      decorator_policy (DecoratorPolicy): Supplies the field's decorators.
      property_policy (PropertyPolicy): Decides if the value becomes the initializer.

  Returns:
      ClassProperty: The field, carrying the property's comments and decorators.
  """
  value = prop.value if property_policy.should_set_value(prop) else None
  class_prop = ClassProperty(key=prop.key, value=value, computed=prop.computed)
  return with_decorators(with_comments(class_prop, prop), decorator_policy.instance_decorators(prop))
