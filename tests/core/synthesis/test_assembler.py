"""
Tests for Class Assembly.

Verifies:
1.  Dispatch by category, with class decorators kept off the body.
2.  Member order follows the source, with multi-member expansions contiguous.
3.  Class decorators accumulate in source order.
4.  Names, parents and imports of the declaration.
"""

from es_class_codemod.core.js.nodes import (
  ArrayExpression,
  CallExpression,
  ClassProperty,
  Decorator,
  FunctionExpression,
  Identifier,
  ImportDeclaration,
  ImportSpecifier,
  Literal,
  MemberExpression,
  MethodDefinition,
  ObjectExpression,
  Property,
)
from es_class_codemod.core.model.adapter import properties_from_object
from es_class_codemod.core.synthesis.assembler import (
  ClassAssembler,
  create_class,
  create_import_declaration,
  create_import_declarations,
)


def _definition():
  accessors = ObjectExpression(
    (
      Property(Identifier("get"), FunctionExpression(params=(Identifier("key"),)), method=True),
      Property(Identifier("set"), FunctionExpression(params=(Identifier("key"), Identifier("v"))), method=True),
    )
  )
  return ObjectExpression(
    (
      Property(Identifier("tagName"), Literal("section")),
      Property(Identifier("name"), Literal("x")),
      Property(Identifier("full"), CallExpression(Identifier("computed"), (Literal("name"), accessors))),
      Property(Identifier("classNames"), ArrayExpression((Literal("a"), Literal("b")))),
      Property(Identifier("actions"), ObjectExpression((Property(Identifier("go"), FunctionExpression()),))),
      Property(Identifier("render"), FunctionExpression(), method=True),
    )
  )


def test_member_order_and_expansion(decorator_policy, property_policy):
  assembler = ClassAssembler(decorator_policy, property_policy)
  cls = assembler.create_class("Foo", properties_from_object(_definition()), "Component")

  members = cls.body.body
  assert [(type(m).__name__, m.key.name, getattr(m, "kind", None)) for m in members] == [
    ("ClassProperty", "name", None),
    ("MethodDefinition", "full", "get"),
    ("MethodDefinition", "full", "set"),
    ("MethodDefinition", "go", "method"),
    ("MethodDefinition", "render", "method"),
  ]
  assert members[3].decorators == (Decorator(Identifier("action")),)


def test_class_decorators_in_order(decorator_policy, property_policy):
  cls = create_class("Foo", properties_from_object(_definition()), decorator_policy, property_policy)
  assert cls.decorators == (
    Decorator(CallExpression(Identifier("tagName"), (Literal("section"),))),
    Decorator(CallExpression(Identifier("classNames"), (Literal("a"), Literal("b")))),
  )


def test_create_members_dispatch(decorator_policy, property_policy):
  assembler = ClassAssembler(decorator_policy, property_policy)
  props = properties_from_object(_definition())

  assert assembler.create_members(props[0]) == []
  assert isinstance(assembler.create_members(props[1])[0], ClassProperty)
  assert len(assembler.create_members(props[2])) == 2
  assert isinstance(assembler.create_members(props[5])[0], MethodDefinition)


def test_name_and_parent(decorator_policy, property_policy, emitter):
  assembler = ClassAssembler(decorator_policy, property_policy)

  root = assembler.create_class("Foo")
  assert root.id == Identifier("Foo")
  assert root.superclass is None
  assert root.decorators == ()

  anonymous = assembler.create_class(None, super_class_name="Component")
  assert anonymous.id is None
  assert emitter.emit(anonymous) == "class extends Component {}"

  mixed = assembler.create_class("Foo", mixins=[Identifier("Evented")])
  assert mixed.superclass.callee == MemberExpression(Identifier("EmberObject"), Identifier("extend"))


def test_custom_root_class(decorator_policy, property_policy):
  assembler = ClassAssembler(decorator_policy, property_policy, root_class_name="Base")
  cls = assembler.create_class("Foo", mixins=[Identifier("M")])
  assert cls.superclass.callee.object == Identifier("Base")


def test_create_import_declaration(emitter):
  node = create_import_declaration([ImportSpecifier(Identifier("action"))], "@ember-decorators/object")
  assert node == ImportDeclaration((ImportSpecifier(Identifier("action")),), Literal("@ember-decorators/object"))
  assert emitter.emit(node) == 'import { action } from "@ember-decorators/object";'


def test_import_declarations_grouped_by_module():
  paths = {"service": "@ember-decorators/service", "tagName": "@ember-decorators/component"}
  nodes = create_import_declarations(
    ["tagName", "computed", "service", "action"],
    lambda name: paths.get(name, "@ember-decorators/object"),
  )

  assert [n.source for n in nodes] == [
    Literal("@ember-decorators/component"),
    Literal("@ember-decorators/object"),
    Literal("@ember-decorators/service"),
  ]
  assert [[s.imported.name for s in n.specifiers] for n in nodes] == [["tagName"], ["computed", "action"], ["service"]]
  assert create_import_declarations([], lambda name: "x") == []
