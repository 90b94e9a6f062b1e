"""
Tests for the Default Decorator Policy.

Verifies:
1.  Class decorators spread array values into arguments.
2.  Macro decorators drop the trailing body argument and follow modifier order.
3.  The action decorator name is configurable.
"""

from es_class_codemod.config import CodemodConfig
from es_class_codemod.core.js.nodes import (
  ArrayExpression,
  CallExpression,
  Decorator,
  FunctionExpression,
  Identifier,
  Literal,
  ObjectExpression,
)
from es_class_codemod.core.model.decorators import DefaultDecoratorPolicy, create_decorator
from es_class_codemod.core.model.property import LegacyProperty


def _prop(name="foo", value=None, **kwargs) -> LegacyProperty:
  return LegacyProperty(key=Identifier(name), value=value or Literal(1), name=name, **kwargs)


def test_create_decorator():
  assert create_decorator("action") == Decorator(Identifier("action"))
  assert create_decorator("computed", [Literal("a")]) == Decorator(
    CallExpression(Identifier("computed"), (Literal("a"),))
  )


def test_class_decorator_array_value(decorator_policy):
  prop = _prop("classNames", ArrayExpression((Literal("a"), Literal("b"))), is_class_decorator=True)
  assert decorator_policy.class_decorator(prop) == Decorator(
    CallExpression(Identifier("classNames"), (Literal("a"), Literal("b")))
  )


def test_class_decorator_scalar_value(decorator_policy):
  prop = _prop("tagName", Literal("div"), is_class_decorator=True)
  assert decorator_policy.class_decorator(prop) == Decorator(CallExpression(Identifier("tagName"), (Literal("div"),)))


def test_no_decorators(decorator_policy):
  assert decorator_policy.instance_decorators(_prop()) == ()


def test_bare_decorators_for_plain_props(decorator_policy):
  prop = _prop(value=Literal(True), decorator_names=("className", "attribute"))
  assert decorator_policy.instance_decorators(prop) == (
    Decorator(Identifier("className")),
    Decorator(Identifier("attribute")),
  )


def test_macro_decorators(decorator_policy):
  fn = FunctionExpression()
  prop = _prop(
    value=CallExpression(Identifier("computed")),
    is_call_expression=True,
    callee=Identifier("computed"),
    call_expr_args=(Literal("a"), Literal("b"), fn),
    call_modifiers=(CallExpression(Identifier("readOnly")), CallExpression(Identifier("meta"), (Literal(1),))),
    decorator_names=("computed", "readOnly", "meta"),
  )
  assert decorator_policy.instance_decorators(prop) == (
    Decorator(CallExpression(Identifier("computed"), (Literal("a"), Literal("b")))),
    Decorator(Identifier("readOnly")),
    Decorator(CallExpression(Identifier("meta"), (Literal(1),))),
  )


def test_macro_accessor_object_is_dropped(decorator_policy):
  prop = _prop(
    is_call_expression=True,
    callee=Identifier("computed"),
    call_expr_args=(Literal("a"), ObjectExpression()),
    decorator_names=("computed",),
  )
  assert decorator_policy.instance_decorators(prop) == (
    Decorator(CallExpression(Identifier("computed"), (Literal("a"),))),
  )


def test_macro_without_args_is_bare(decorator_policy):
  prop = _prop(is_call_expression=True, callee=Identifier("service"), decorator_names=("service",))
  assert decorator_policy.instance_decorators(prop) == (Decorator(Identifier("service")),)


def test_action_decorators():
  assert DefaultDecoratorPolicy(CodemodConfig()).action_decorators() == (Decorator(Identifier("action")),)
  custom = DefaultDecoratorPolicy(CodemodConfig(action_decorator="handler"))
  assert custom.action_decorators() == (Decorator(Identifier("handler")),)
