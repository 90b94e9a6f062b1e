"""
Decorator Policies.

Decides which decorators a legacy property maps to and in what order. The class
synthesizers treat the result as an opaque ordered sequence and attach it verbatim,
so alternative decorator libraries only need a different ``DecoratorPolicy``.

Default mapping:

- Class decorator props: ``classNames: ['a', 'b']`` -> ``@classNames("a", "b")``.
- Macro props: ``computed('a', fn).readOnly()`` -> ``@computed("a")``, ``@readOnly``.
  The trailing function or object argument is the member body, not a decorator
  argument, and is dropped.
- Plain props with known decorator names: one bare decorator per name.
- Actions: a single ``@action``.
"""

from typing import Protocol, Sequence, Tuple

from es_class_codemod.config import CodemodConfig
from es_class_codemod.core.js.nodes import (
  ArrayExpression,
  CallExpression,
  Decorator,
  FunctionExpression,
  Identifier,
  JsNode,
  ObjectExpression,
)
from es_class_codemod.core.model.property import LegacyProperty


class DecoratorPolicy(Protocol):
  """Supplies ordered decorator constructs for classes, members and actions."""

  def class_decorator(self, prop: LegacyProperty) -> Decorator: ...

  def instance_decorators(self, prop: LegacyProperty) -> Tuple[Decorator, ...]: ...

  def action_decorators(self) -> Tuple[Decorator, ...]: ...


def create_decorator(name: str, args: Sequence[JsNode] = ()) -> Decorator:
  """
  Builds ``@name`` or ``@name(args)``.

  Args:
      name (str): Decorator identifier.
      args (Sequence[JsNode]): Call arguments; the bare form is used when empty.

  Returns:
      Decorator: The decorator node.
  """
  if not args:
    return Decorator(Identifier(name))
  return Decorator(CallExpression(Identifier(name), tuple(args)))


class DefaultDecoratorPolicy:
  """
  Decorator mapping for the decorator-based native class model.

  Attributes:
      config (CodemodConfig): Supplies the action decorator name.
  """

  def __init__(self, config: CodemodConfig) -> None:
    self.config = config

  def class_decorator(self, prop: LegacyProperty) -> Decorator:
    """
    Converts a class-level property into a decorator call. Array values are spread
    into the argument list.

    Args:
        prop (LegacyProperty): A property flagged ``is_class_decorator``.

    Returns:
        Decorator: ``@<name>(<args>)``.
    """
    if isinstance(prop.value, ArrayExpression):
      args = prop.value.elements
    else:
      args = (prop.value,)
    return Decorator(CallExpression(Identifier(prop.name or ""), tuple(args)))

  def instance_decorators(self, prop: LegacyProperty) -> Tuple[Decorator, ...]:
    """
    Derives member decorators from the property's decorator names.

    For macro calls, the first name receives the macro's arguments (minus a trailing
    function/object body) and each following name receives the arguments of the
    matching chained modifier.

    Args:
        prop (LegacyProperty): The property being converted.

    Returns:
        Tuple[Decorator, ...]: Decorators in application order.
    """
    if not prop.decorator_names:
      return ()

    if not prop.is_call_expression:
      return tuple(create_decorator(name) for name in prop.decorator_names)

    head, *rest = prop.decorator_names
    args = prop.call_expr_args
    if isinstance(prop.last_call_arg, (FunctionExpression, ObjectExpression)):
      args = args[:-1]

    decorators = [create_decorator(head, args)]
    for name, modifier in zip(rest, prop.call_modifiers):
      decorators.append(create_decorator(name, modifier.arguments))
    return tuple(decorators)

  def action_decorators(self) -> Tuple[Decorator, ...]:
    """Returns the single decorator marking an action handler."""
    return (create_decorator(self.config.action_decorator),)
