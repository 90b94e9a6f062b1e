"""
Method Synthesis.

Builds class methods from the function-valued parts of a legacy definition:

1.  **Plain methods**: ``foo: function() {}`` / ``foo() {}`` -> ``foo() {}``.
2.  **Macro properties**: ``foo: computed('a', function() {})`` -> a decorated
    getter; ``foo: computed('a', { get(key) {}, set(key, value) {} })`` -> a
    decorated getter/setter pair. Unrecognized macro shapes become fields.
3.  **Action hashes**: every entry of ``actions: { ... }`` -> an ``@action`` method.

Every method body goes through the superclass delegation rewrite.
"""

import logging
from typing import List, Sequence

from es_class_codemod.core.js.nodes import (
  ClassMember,
  ClassProperty,
  Decorator,
  FunctionExpression,
  MethodDefinition,
  ObjectExpression,
  Property,
)
from es_class_codemod.core.model.decorators import DecoratorPolicy
from es_class_codemod.core.model.policy import PropertyPolicy
from es_class_codemod.core.model.property import LegacyProperty, get_prop_name
from es_class_codemod.core.synthesis.fields import create_class_prop
from es_class_codemod.core.synthesis.super_calls import replace_super_expressions
from es_class_codemod.core.synthesis.utils import prepend_comments, with_comments, with_decorators
from es_class_codemod.enums import MethodKind, PropertyKind

logger = logging.getLogger(__name__)


def create_method_prop(prop: LegacyProperty, decorators: Sequence[Decorator] = ()) -> MethodDefinition:
  """
  Transforms a function-valued property into a class method.

  ``init`` properties become ordinary methods, ``get``/``set`` stay accessors.

  Args:
      prop (LegacyProperty): Property whose value is a ``FunctionExpression``.
      decorators (Sequence[Decorator]): Decorators, attached in the given order.

  Returns:
      MethodDefinition: The method with rewritten super calls and copied comments.
  """
  kind = MethodKind.from_property_kind(prop.kind)
  method = MethodDefinition(kind=kind.value, key=prop.key, value=prop.value, computed=prop.computed)
  return with_decorators(with_comments(replace_super_expressions(method), prop), decorators)


def _entry_kind(entry: Property) -> PropertyKind:
  name = get_prop_name(entry)
  if name == PropertyKind.GET.value:
    return PropertyKind.GET
  if name == PropertyKind.SET.value:
    return PropertyKind.SET
  return PropertyKind.INIT


def _is_accessor_hash(obj: ObjectExpression) -> bool:
  return bool(obj.properties) and all(
    isinstance(p, Property) and isinstance(p.value, FunctionExpression) for p in obj.properties
  )


def create_call_expression_prop(
  prop: LegacyProperty,
  decorator_policy: DecoratorPolicy,
  property_policy: PropertyPolicy,
) -> List[ClassMember]:
  """
  Converts a macro property according to the macro call's trailing argument.

  - Function: a single method sharing the property's key and kind.
  - Object of functions (``{ get(key) {}, set(key, value) {} }``): one accessor per
    entry, all sharing the property's key, each without its leading ``key``
    parameter. Decorators and the property's comments go on the first member,
    whose own entry comments they replace.
  - Anything else: a plain field.

  Args:
      prop (LegacyProperty): A property flagged ``is_call_expression``.
      decorator_policy (DecoratorPolicy): Supplies the member decorators.
      property_policy (PropertyPolicy): Used for the field fallback.

  Returns:
      List[ClassMember]: The produced members in order.
  """
  last_arg = prop.last_call_arg

  if isinstance(last_arg, FunctionExpression):
    function_prop = prop.with_changes(value=last_arg)
    return [create_method_prop(function_prop, decorator_policy.instance_decorators(prop))]

  if isinstance(last_arg, ObjectExpression) and _is_accessor_hash(last_arg):
    methods: List[ClassMember] = []
    for entry in last_arg.properties:
      accessor = LegacyProperty(
        key=prop.key,
        value=entry.value.with_changes(params=entry.value.params[1:]),
        kind=_entry_kind(entry),
        computed=prop.computed,
        name=prop.name,
        comments=entry.comments,
      )
      methods.append(create_method_prop(accessor))

    first = with_decorators(with_comments(methods[0], prop), decorator_policy.instance_decorators(prop))
    return [first] + methods[1:]

  logger.debug("Macro property '%s' has no function or accessor argument; declaring a field", prop.name)
  return [create_class_prop(prop, decorator_policy, property_policy)]


def create_action_decorated_props(actions_prop: LegacyProperty, decorator_policy: DecoratorPolicy) -> List[ClassMember]:
  """
  Expands the ``actions`` hash into decorated methods.

  Converts

  .. code-block:: javascript

      actions: {
        foo() {}
      }

  to

  .. code-block:: javascript

      @action
      foo() {}

  Args:
      actions_prop (LegacyProperty): Property whose value is an ``ObjectExpression``.
      decorator_policy (DecoratorPolicy): Supplies the action decorator.

  Returns:
      List[ClassMember]: One member per entry, in entry order. The comments of the
      ``actions`` property go on the first member. Spread entries are skipped
      with a warning.
  """
  action_decorators = decorator_policy.action_decorators()
  members: List[ClassMember] = []

  for entry in actions_prop.value.properties:
    if not isinstance(entry, Property):
      logger.warning("Skipping %s entry of the actions hash; it cannot be migrated", entry.type)
      continue
    action = LegacyProperty(
      key=entry.key,
      value=entry.value,
      kind=PropertyKind(entry.kind),
      computed=entry.computed,
      name=get_prop_name(entry),
      comments=entry.comments,
    )
    if action.is_function:
      members.append(create_method_prop(action, action_decorators))
    else:
      logger.warning("Action '%s' is not a function; declaring it as a field", action.name)
      field = ClassProperty(key=action.key, value=action.value, computed=action.computed)
      members.append(with_comments(field, action))

  if members:
    members[0] = prepend_comments(members[0], actions_prop.comments)
  return members
