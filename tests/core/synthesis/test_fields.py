"""
Tests for Class Field Synthesis.
"""

from es_class_codemod.core.js.nodes import (
  ArrayExpression,
  ClassProperty,
  Comment,
  Decorator,
  Identifier,
  Literal,
  Property,
)
from es_class_codemod.core.model.adapter import from_property
from es_class_codemod.core.model.property import LegacyProperty
from es_class_codemod.core.synthesis.fields import create_class_prop


def test_plain_field(decorator_policy, property_policy, emitter):
  prop = from_property(Property(Identifier("name"), Literal("x"), comments=(Comment(" label"),)))
  field = create_class_prop(prop, decorator_policy, property_policy)

  assert field == ClassProperty(Identifier("name"), Literal("x"), comments=(Comment(" label"),))
  assert emitter.emit(field) == '// label\nname = "x";'


def test_eager_field_has_no_initializer(decorator_policy, property_policy, emitter):
  prop = from_property(Property(Identifier("items"), ArrayExpression()))
  field = create_class_prop(prop, decorator_policy, property_policy)
  assert field.value is None
  assert emitter.emit(field) == "items;"


def test_value_decorator_keeps_initializer(decorator_policy, property_policy, emitter):
  prop = LegacyProperty(
    key=Identifier("isActive"), value=Literal(True), name="isActive", decorator_names=("className",)
  )
  field = create_class_prop(prop, decorator_policy, property_policy)
  assert field.decorators == (Decorator(Identifier("className")),)
  assert emitter.emit(field) == "@className\nisActive = true;"


def test_computed_key(decorator_policy, property_policy, emitter):
  prop = from_property(Property(Identifier("key"), Literal(1), computed=True))
  assert emitter.emit(create_class_prop(prop, decorator_policy, property_policy)) == "[key] = 1;"
