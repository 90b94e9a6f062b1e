"""
JavaScript Syntax Tree Nodes.

This module defines the data structures used to represent the JavaScript constructs
read and produced by the class synthesis engine. Node names and fields follow the
ESTree conventions (``MemberExpression.object``, ``Property.kind``, ...), so trees
produced by an external parser can be mapped onto them one-to-one.

Nodes are immutable: sequences are tuples and ``with_changes`` returns an updated
copy, mirroring the LibCST API. A node attached to a parent is never mutated, so
subtrees can be shared freely between the input and output trees.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Optional, Tuple, Union


@dataclass(frozen=True)
class JsNode:
  """Base class for all JavaScript syntax tree nodes."""

  def with_changes(self, **changes: Any) -> "JsNode":
    """
    Returns a copy of this node with the given fields replaced.

    Args:
        **changes: Field names mapped to their new values.

    Returns:
        JsNode: A new node of the same type.
    """
    return replace(self, **changes)

  @property
  def type(self) -> str:
    """ESTree type tag of the node (e.g. ``"CallExpression"``)."""
    return type(self).__name__


@dataclass(frozen=True)
class Comment(JsNode):
  """
  A source comment attached to a statement, property or class member.

  The value excludes the delimiters, as in ESTree: ``// foo`` has value ``" foo"``.
  """

  value: str
  block: bool = False


# --- Expressions ---


@dataclass(frozen=True)
class Identifier(JsNode):
  name: str


@dataclass(frozen=True)
class ThisExpression(JsNode):
  pass


@dataclass(frozen=True)
class Super(JsNode):
  pass


@dataclass(frozen=True)
class Literal(JsNode):
  """
  A primitive literal. ``raw`` overrides the rendered text when set.
  """

  value: Union[str, int, float, bool, None]
  raw: Optional[str] = None


@dataclass(frozen=True)
class SpreadElement(JsNode):
  argument: JsNode


@dataclass(frozen=True)
class ArrayExpression(JsNode):
  elements: Tuple[JsNode, ...] = ()


@dataclass(frozen=True)
class Property(JsNode):
  """
  One entry of an object literal.

  Attributes:
      key: Identifier, literal, or arbitrary expression when ``computed``.
      value: The property value.
      kind: ``"init"``, ``"get"`` or ``"set"``.
      computed: True for bracketed keys (``[expr]: value``).
      method: True for method shorthand (``foo() {}``).
      shorthand: True for ``{ foo }``.
      comments: Leading comments.
  """

  key: JsNode
  value: JsNode
  kind: str = "init"
  computed: bool = False
  method: bool = False
  shorthand: bool = False
  comments: Tuple[Comment, ...] = ()


@dataclass(frozen=True)
class ObjectExpression(JsNode):
  properties: Tuple[Union[Property, SpreadElement], ...] = ()


@dataclass(frozen=True)
class MemberExpression(JsNode):
  object: JsNode
  property: JsNode
  computed: bool = False


@dataclass(frozen=True)
class CallExpression(JsNode):
  callee: JsNode
  arguments: Tuple[JsNode, ...] = ()


@dataclass(frozen=True)
class AssignmentExpression(JsNode):
  operator: str
  left: JsNode
  right: JsNode


@dataclass(frozen=True)
class BinaryExpression(JsNode):
  """Binary and logical operators (``+``, ``===``, ``&&``, ...)."""

  operator: str
  left: JsNode
  right: JsNode


@dataclass(frozen=True)
class UnaryExpression(JsNode):
  operator: str
  argument: JsNode


# --- Statements ---


@dataclass(frozen=True)
class BlockStatement(JsNode):
  body: Tuple[JsNode, ...] = ()


@dataclass(frozen=True)
class ExpressionStatement(JsNode):
  expression: JsNode
  comments: Tuple[Comment, ...] = ()


@dataclass(frozen=True)
class ReturnStatement(JsNode):
  argument: Optional[JsNode] = None
  comments: Tuple[Comment, ...] = ()


@dataclass(frozen=True)
class IfStatement(JsNode):
  test: JsNode
  consequent: JsNode
  alternate: Optional[JsNode] = None
  comments: Tuple[Comment, ...] = ()


@dataclass(frozen=True)
class WhileStatement(JsNode):
  test: JsNode
  body: JsNode
  comments: Tuple[Comment, ...] = ()


@dataclass(frozen=True)
class VariableDeclarator(JsNode):
  id: JsNode
  init: Optional[JsNode] = None


@dataclass(frozen=True)
class VariableDeclaration(JsNode):
  kind: str
  declarations: Tuple[VariableDeclarator, ...] = ()
  comments: Tuple[Comment, ...] = ()


@dataclass(frozen=True)
class ForOfStatement(JsNode):
  left: JsNode
  right: JsNode
  body: JsNode
  comments: Tuple[Comment, ...] = ()


# --- Functions ---


@dataclass(frozen=True)
class FunctionExpression(JsNode):
  params: Tuple[JsNode, ...] = ()
  body: BlockStatement = field(default_factory=BlockStatement)
  id: Optional[Identifier] = None
  is_async: bool = False
  generator: bool = False


@dataclass(frozen=True)
class ArrowFunctionExpression(JsNode):
  """Arrow function; ``body`` is a block or a bare expression."""

  params: Tuple[JsNode, ...] = ()
  body: JsNode = field(default_factory=BlockStatement)
  is_async: bool = False


# --- Classes ---


@dataclass(frozen=True)
class Decorator(JsNode):
  expression: JsNode


@dataclass(frozen=True)
class ClassProperty(JsNode):
  """A class field declaration (``@dec key = value;``)."""

  key: JsNode
  value: Optional[JsNode] = None
  computed: bool = False
  static: bool = False
  decorators: Tuple[Decorator, ...] = ()
  comments: Tuple[Comment, ...] = ()


@dataclass(frozen=True)
class MethodDefinition(JsNode):
  """
  A class method, accessor or constructor.

  Attributes:
      kind: ``"method"``, ``"get"``, ``"set"`` or ``"constructor"``.
      key: Method name.
      value: The function implementing the member.
  """

  kind: str
  key: JsNode
  value: FunctionExpression
  computed: bool = False
  static: bool = False
  decorators: Tuple[Decorator, ...] = ()
  comments: Tuple[Comment, ...] = ()


ClassMember = Union[ClassProperty, MethodDefinition]


@dataclass(frozen=True)
class ClassBody(JsNode):
  body: Tuple[JsNode, ...] = ()


@dataclass(frozen=True)
class ClassDeclaration(JsNode):
  """
  A native class declaration. ``id`` is None for anonymous classes and
  ``superclass`` is None for root classes.
  """

  id: Optional[Identifier]
  body: ClassBody = field(default_factory=ClassBody)
  superclass: Optional[JsNode] = None
  decorators: Tuple[Decorator, ...] = ()
  comments: Tuple[Comment, ...] = ()


# --- Modules ---


@dataclass(frozen=True)
class ImportSpecifier(JsNode):
  imported: Identifier
  local: Optional[Identifier] = None


@dataclass(frozen=True)
class ImportDefaultSpecifier(JsNode):
  local: Identifier


@dataclass(frozen=True)
class ImportDeclaration(JsNode):
  specifiers: Tuple[JsNode, ...]
  source: Literal
  comments: Tuple[Comment, ...] = ()


@dataclass(frozen=True)
class Program(JsNode):
  body: Tuple[JsNode, ...] = ()
