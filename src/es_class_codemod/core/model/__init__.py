"""
Legacy Property Model.

Normalized, classified records for the entries of an object-literal class
definition, plus the policies that decide per-property conversion details.
"""

from es_class_codemod.core.model.property import (
  ACTIONS_PROP_NAME,
  LegacyProperty,
  classify,
  get_callee_name,
  get_prop_name,
)
from es_class_codemod.core.model.policy import DefaultPropertyPolicy, PropertyPolicy
from es_class_codemod.core.model.decorators import DecoratorPolicy, DefaultDecoratorPolicy, create_decorator
from es_class_codemod.core.model.adapter import from_property, properties_from_object, unwrap_call

__all__ = [
  "ACTIONS_PROP_NAME",
  "LegacyProperty",
  "classify",
  "get_callee_name",
  "get_prop_name",
  "DefaultPropertyPolicy",
  "PropertyPolicy",
  "DecoratorPolicy",
  "DefaultDecoratorPolicy",
  "create_decorator",
  "from_property",
  "properties_from_object",
  "unwrap_call",
]
