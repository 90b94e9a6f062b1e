"""
JavaScript Source Emitter.

Renders syntax tree nodes back to JavaScript text. The layout is fixed (one
statement per line, one decorator per line, a blank line between class members)
since downstream tooling is expected to run a formatter over migrated files.

Comments attached to statements, properties and class members are printed on the
lines preceding their construct, followed by the construct's decorators.
"""

from typing import Tuple

from es_class_codemod.core.js.nodes import (
  ArrowFunctionExpression,
  AssignmentExpression,
  BinaryExpression,
  BlockStatement,
  Comment,
  FunctionExpression,
  ImportDeclaration,
  ImportDefaultSpecifier,
  JsNode,
  ObjectExpression,
  UnaryExpression,
  VariableDeclaration,
)

# Expressions that need parentheses when used as a callee or member object.
_LOW_PRECEDENCE = (
  ArrowFunctionExpression,
  AssignmentExpression,
  BinaryExpression,
  FunctionExpression,
  UnaryExpression,
)


class JsEmitter:
  """
  Converts JavaScript syntax tree nodes into source text.
  """

  def __init__(self, indent: int = 2, quote: str = '"') -> None:
    """
    Args:
        indent: Number of spaces per nesting level.
        quote: Quote character used for string literals without a ``raw`` text.
    """
    self.indent = " " * indent
    self.quote = quote

  def emit(self, node: JsNode) -> str:
    """
    Renders a node, including its leading comments and decorators.

    Args:
        node (JsNode): Any expression, statement, class member or program.

    Returns:
        str: JavaScript source text.

    Raises:
        TypeError: If the node type has no rendering rule.
    """
    return self._line(node, 0)

  # --- Plumbing ---

  def _pad(self, level: int) -> str:
    return self.indent * level

  def _emit(self, node: JsNode, level: int) -> str:
    handler = getattr(self, f"_emit_{node.type}", None)
    if handler is None:
      raise TypeError(f"Cannot emit node of type '{node.type}'")
    return handler(node, level)

  def _line(self, node: JsNode, level: int) -> str:
    """Renders a node preceded by its comments and decorators at ``level``."""
    pad = self._pad(level)
    prefix = []
    for comment in getattr(node, "comments", ()):
      prefix.append(self._comment(comment))
    for decorator in getattr(node, "decorators", ()):
      prefix.append(self._emit(decorator, level))
    text = self._emit(node, level)
    return "".join(f"{p}\n{pad}" for p in prefix) + text

  def _comment(self, comment: Comment) -> str:
    if comment.block:
      return f"/*{comment.value}*/"
    return f"//{comment.value}"

  def _wrapped(self, node: JsNode, level: int) -> str:
    text = self._emit(node, level)
    if isinstance(node, _LOW_PRECEDENCE):
      return f"({text})"
    return text

  def _join(self, nodes: Tuple[JsNode, ...], level: int) -> str:
    return ", ".join(self._emit(n, level) for n in nodes)

  def _key(self, key: JsNode, computed: bool, level: int) -> str:
    text = self._emit(key, level)
    return f"[{text}]" if computed else text

  def _function_tail(self, fn: FunctionExpression, level: int) -> str:
    return f"({self._join(fn.params, level)}) {self._emit(fn.body, level)}"

  # --- Expressions ---

  def _emit_Identifier(self, node, level):
    return node.name

  def _emit_ThisExpression(self, node, level):
    return "this"

  def _emit_Super(self, node, level):
    return "super"

  def _emit_Literal(self, node, level):
    if node.raw is not None:
      return node.raw
    value = node.value
    if value is None:
      return "null"
    if isinstance(value, bool):
      return "true" if value else "false"
    if isinstance(value, str):
      escaped = value.replace("\\", "\\\\").replace(self.quote, f"\\{self.quote}").replace("\n", "\\n")
      return f"{self.quote}{escaped}{self.quote}"
    return repr(value)

  def _emit_SpreadElement(self, node, level):
    return f"...{self._emit(node.argument, level)}"

  def _emit_ArrayExpression(self, node, level):
    return f"[{self._join(node.elements, level)}]"

  def _emit_ObjectExpression(self, node, level):
    if not node.properties:
      return "{}"
    inner = self._pad(level + 1)
    entries = ",\n".join(inner + self._line(p, level + 1) for p in node.properties)
    return "{\n" + entries + "\n" + self._pad(level) + "}"

  def _emit_Property(self, node, level):
    key = self._key(node.key, node.computed, level)
    if node.shorthand:
      return key
    if isinstance(node.value, FunctionExpression) and (node.method or node.kind in ("get", "set")):
      prefix = f"{node.kind} " if node.kind in ("get", "set") else ""
      if node.value.is_async:
        prefix = "async " + prefix
      if node.value.generator:
        prefix += "*"
      return f"{prefix}{key}{self._function_tail(node.value, level)}"
    return f"{key}: {self._emit(node.value, level)}"

  def _emit_MemberExpression(self, node, level):
    obj = self._wrapped(node.object, level)
    if node.computed:
      return f"{obj}[{self._emit(node.property, level)}]"
    return f"{obj}.{self._emit(node.property, level)}"

  def _emit_CallExpression(self, node, level):
    return f"{self._wrapped(node.callee, level)}({self._join(node.arguments, level)})"

  def _emit_AssignmentExpression(self, node, level):
    return f"{self._emit(node.left, level)} {node.operator} {self._emit(node.right, level)}"

  def _emit_BinaryExpression(self, node, level):
    left = self._wrapped(node.left, level)
    right = self._wrapped(node.right, level)
    return f"{left} {node.operator} {right}"

  def _emit_UnaryExpression(self, node, level):
    argument = self._wrapped(node.argument, level)
    # `- -1` and `+ +x` must not merge into `--`/`++`
    separator = " " if node.operator.isalpha() or argument.startswith(node.operator) else ""
    return f"{node.operator}{separator}{argument}"

  def _emit_FunctionExpression(self, node, level):
    head = "async function" if node.is_async else "function"
    if node.generator:
      head += "*"
    if node.id is not None:
      head += f" {node.id.name}"
    return head + self._function_tail(node, level)

  def _emit_ArrowFunctionExpression(self, node, level):
    body = self._emit(node.body, level)
    if isinstance(node.body, ObjectExpression):
      body = f"({body})"
    head = "async " if node.is_async else ""
    return f"{head}({self._join(node.params, level)}) => {body}"

  # --- Statements ---

  def _emit_BlockStatement(self, node, level):
    if not node.body:
      return "{}"
    inner = self._pad(level + 1)
    lines = "\n".join(inner + self._line(s, level + 1) for s in node.body)
    return "{\n" + lines + "\n" + self._pad(level) + "}"

  def _emit_ExpressionStatement(self, node, level):
    return f"{self._emit(node.expression, level)};"

  def _emit_ReturnStatement(self, node, level):
    if node.argument is None:
      return "return;"
    return f"return {self._emit(node.argument, level)};"

  def _emit_IfStatement(self, node, level):
    text = f"if ({self._emit(node.test, level)}) {self._emit(node.consequent, level)}"
    if node.alternate is not None:
      text += f" else {self._emit(node.alternate, level)}"
    return text

  def _emit_WhileStatement(self, node, level):
    return f"while ({self._emit(node.test, level)}) {self._emit(node.body, level)}"

  def _emit_VariableDeclarator(self, node, level):
    if node.init is None:
      return self._emit(node.id, level)
    return f"{self._emit(node.id, level)} = {self._emit(node.init, level)}"

  def _declaration(self, node: VariableDeclaration, level: int) -> str:
    return f"{node.kind} {self._join(node.declarations, level)}"

  def _emit_VariableDeclaration(self, node, level):
    return self._declaration(node, level) + ";"

  def _emit_ForOfStatement(self, node, level):
    if isinstance(node.left, VariableDeclaration):
      left = self._declaration(node.left, level)
    else:
      left = self._emit(node.left, level)
    return f"for ({left} of {self._emit(node.right, level)}) {self._emit(node.body, level)}"

  # --- Classes ---

  def _emit_Decorator(self, node, level):
    return f"@{self._emit(node.expression, level)}"

  def _emit_ClassProperty(self, node, level):
    text = "static " if node.static else ""
    text += self._key(node.key, node.computed, level)
    if node.value is not None:
      text += f" = {self._emit(node.value, level)}"
    return text + ";"

  def _emit_MethodDefinition(self, node, level):
    text = "static " if node.static else ""
    if node.value.is_async:
      text += "async "
    if node.kind in ("get", "set"):
      text += f"{node.kind} "
    if node.value.generator:
      text += "*"
    text += self._key(node.key, node.computed, level)
    return text + self._function_tail(node.value, level)

  def _emit_ClassBody(self, node, level):
    if not node.body:
      return "{}"
    inner = self._pad(level + 1)
    members = "\n\n".join(inner + self._line(m, level + 1) for m in node.body)
    return "{\n" + members + "\n" + self._pad(level) + "}"

  def _emit_ClassDeclaration(self, node, level):
    text = "class"
    if node.id is not None:
      text += f" {node.id.name}"
    if node.superclass is not None:
      text += f" extends {self._wrapped(node.superclass, level)}"
    return f"{text} {self._emit(node.body, level)}"

  # --- Modules ---

  def _emit_ImportSpecifier(self, node, level):
    if node.local is None or node.local.name == node.imported.name:
      return node.imported.name
    return f"{node.imported.name} as {node.local.name}"

  def _emit_ImportDefaultSpecifier(self, node, level):
    return node.local.name

  def _emit_ImportDeclaration(self, node, level):
    source = self._emit(node.source, level)
    if not node.specifiers:
      return f"import {source};"
    defaults = [self._emit(s, level) for s in node.specifiers if isinstance(s, ImportDefaultSpecifier)]
    named = [self._emit(s, level) for s in node.specifiers if not isinstance(s, ImportDefaultSpecifier)]
    parts = list(defaults)
    if named:
      parts.append("{ " + ", ".join(named) + " }")
    return f"import {', '.join(parts)} from {source};"

  def _emit_Program(self, node, level):
    text = ""
    previous = None
    for statement in node.body:
      if previous is not None:
        # consecutive imports form one block
        both_imports = isinstance(previous, ImportDeclaration) and isinstance(statement, ImportDeclaration)
        text += "\n" if both_imports else "\n\n"
      text += self._line(statement, level)
      previous = statement
    return text

  def _emit_Comment(self, node, level):
    return self._comment(node)
