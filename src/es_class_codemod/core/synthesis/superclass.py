"""
Superclass Expression Builder.

Mixins cannot be expressed with single inheritance, so they stay applied through
``extend``: ``Parent.extend(MixinA, MixinB)`` becomes the parent expression of the
native class (``class Foo extends Parent.extend(MixinA, MixinB)``).
"""

import logging
from typing import Optional, Sequence

from es_class_codemod.core.js.nodes import CallExpression, Identifier, JsNode, MemberExpression

logger = logging.getLogger(__name__)


def create_super_class_expression(
  super_class_name: str = "",
  mixins: Sequence[JsNode] = (),
  root_class_name: str = "EmberObject",
) -> Optional[JsNode]:
  """
  Builds the expression the class extends.

  Args:
      super_class_name (str): Name of the parent class, empty for a root class.
      mixins (Sequence[JsNode]): Mixin expressions in application order.
      root_class_name (str): Parent used when mixins are given without a parent
          name, since mixins need a class to be applied to.

  Returns:
      Optional[JsNode]: ``Parent``, ``Parent.extend(M1, M2)``, or None for a root
      class without mixins.
  """
  if mixins:
    parent = super_class_name
    if not parent:
      logger.warning("Mixins without a parent class; applying them to '%s'", root_class_name)
      parent = root_class_name
    return CallExpression(MemberExpression(Identifier(parent), Identifier("extend")), tuple(mixins))

  if not super_class_name:
    return None
  return Identifier(super_class_name)
