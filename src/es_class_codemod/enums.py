"""
Enumerations for es-class-codemod.

This module defines the closed sets of tags used when classifying legacy
object-literal properties and when emitting native class members.
"""

from enum import Enum


class PropertyKind(str, Enum):
  """
  Accessor kind of a legacy object-literal property.

  Mirrors the ``kind`` of an ESTree ``Property`` node.
  """

  INIT = "init"
  GET = "get"
  SET = "set"


class MethodKind(str, Enum):
  """
  Kind of a native class ``MethodDefinition``.
  """

  METHOD = "method"
  GET = "get"
  SET = "set"
  CONSTRUCTOR = "constructor"

  @classmethod
  def from_property_kind(cls, kind: "PropertyKind") -> "MethodKind":
    """
    Maps a property accessor kind onto a method kind.

    ``init`` becomes an ordinary method, ``get``/``set`` pass through.

    Args:
        kind (PropertyKind): Accessor kind of the source property.

    Returns:
        MethodKind: The corresponding method kind.
    """
    if kind == PropertyKind.GET:
      return cls.GET
    if kind == PropertyKind.SET:
      return cls.SET
    return cls.METHOD


class PropertyCategory(str, Enum):
  """
  Target construct chosen for a legacy property.

  Decided once by the property adapter; listed in dispatch precedence order.
  """

  CLASS_DECORATOR = "class_decorator"
  METHOD = "method"  # function-valued
  CALL_EXPRESSION = "call_expression"  # macro-style, e.g. computed(...)
  ACTIONS = "actions"  # the reserved `actions` hash
  FIELD = "field"
