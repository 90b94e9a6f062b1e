"""
Property Model Adapter.

Converts the ``Property`` entries of a legacy object-literal class definition into
``LegacyProperty`` records: resolves the static name, unwraps macro calls and their
modifier chains, asks the property policy for the declared accessor kind, and
classifies the result.
"""

import logging
from typing import List, Optional, Tuple

from es_class_codemod.config import CodemodConfig
from es_class_codemod.core.js.nodes import CallExpression, Identifier, MemberExpression, ObjectExpression, Property
from es_class_codemod.core.model.policy import DefaultPropertyPolicy, PropertyPolicy
from es_class_codemod.core.model.property import LegacyProperty, get_callee_name, get_prop_name
from es_class_codemod.enums import PropertyKind

logger = logging.getLogger(__name__)


def unwrap_call(call: CallExpression) -> Tuple[CallExpression, Tuple[CallExpression, ...]]:
  """
  Splits ``macro(a).readOnly().volatile()`` into the macro call and its modifiers.

  Args:
      call (CallExpression): The outermost call of the chain.

  Returns:
      Tuple: The innermost call and the modifier calls (``readOnly()``,
      ``volatile()``) in source order, each with an Identifier callee.
  """
  modifiers = []
  current = call
  while (
    isinstance(current.callee, MemberExpression)
    and not current.callee.computed
    and isinstance(current.callee.object, CallExpression)
    and isinstance(current.callee.property, Identifier)
  ):
    modifiers.append(CallExpression(current.callee.property, current.arguments))
    current = current.callee.object
  return current, tuple(reversed(modifiers))


def from_property(
  node: Property,
  config: Optional[CodemodConfig] = None,
  policy: Optional[PropertyPolicy] = None,
) -> LegacyProperty:
  """
  Adapts one object-literal entry.

  Args:
      node (Property): The source property.
      config (Optional[CodemodConfig]): Naming conventions; defaults apply if None.
      policy (Optional[PropertyPolicy]): Accessor kind policy; the default policy
          for ``config`` if None.

  Returns:
      LegacyProperty: The classified record.
  """
  config = config or CodemodConfig()
  policy = policy or DefaultPropertyPolicy(config)

  name = get_prop_name(node)
  prop = LegacyProperty(
    key=node.key,
    value=node.value,
    kind=PropertyKind(node.kind),
    computed=node.computed,
    name=name,
    comments=node.comments,
  )

  if name is not None and name in config.class_decorator_props:
    prop = prop.with_changes(is_class_decorator=True)
  elif isinstance(node.value, CallExpression):
    inner, modifiers = unwrap_call(node.value)
    callee_name = get_callee_name(inner.callee)
    if callee_name in config.macros or callee_name in config.getter_macros:
      names = (config.decorator_renames.get(callee_name, callee_name),)
      names += tuple(m.callee.name for m in modifiers)
      prop = prop.with_changes(
        is_call_expression=True,
        callee=inner.callee,
        call_expr_args=inner.arguments,
        call_modifiers=modifiers,
        decorator_names=names,
      )

  return prop.with_changes(kind=policy.accessor_kind(prop))


def properties_from_object(
  obj: ObjectExpression,
  config: Optional[CodemodConfig] = None,
  policy: Optional[PropertyPolicy] = None,
) -> List[LegacyProperty]:
  """
  Adapts every entry of an object-literal class definition, preserving order.

  Args:
      obj (ObjectExpression): The definition passed to ``extend``.
      config (Optional[CodemodConfig]): Naming conventions.
      policy (Optional[PropertyPolicy]): Accessor kind policy.

  Returns:
      List[LegacyProperty]: One record per ``Property`` entry. Spread entries
      (``...base``) have no static shape to migrate and are skipped with a warning.
  """
  config = config or CodemodConfig()
  policy = policy or DefaultPropertyPolicy(config)

  props = []
  for entry in obj.properties:
    if not isinstance(entry, Property):
      logger.warning("Skipping %s entry of the class definition; it cannot be migrated", entry.type)
      continue
    props.append(from_property(entry, config, policy))
  return props
