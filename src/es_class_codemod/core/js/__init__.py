"""
JavaScript Syntax Tree Package.

A pure Python representation of the JavaScript constructs involved in migrating
object-literal class definitions to native classes:
- ESTree-shaped immutable nodes (the construction interface).
- Structural search and bottom-up rewriting.
- A source emitter for inspection and output.
"""

from es_class_codemod.core.js.nodes import (
  ArrayExpression,
  ArrowFunctionExpression,
  AssignmentExpression,
  BinaryExpression,
  BlockStatement,
  CallExpression,
  ClassBody,
  ClassDeclaration,
  ClassMember,
  ClassProperty,
  Comment,
  Decorator,
  ExpressionStatement,
  ForOfStatement,
  FunctionExpression,
  Identifier,
  IfStatement,
  ImportDeclaration,
  ImportDefaultSpecifier,
  ImportSpecifier,
  JsNode,
  Literal,
  MemberExpression,
  MethodDefinition,
  ObjectExpression,
  Program,
  Property,
  ReturnStatement,
  SpreadElement,
  Super,
  ThisExpression,
  UnaryExpression,
  VariableDeclaration,
  VariableDeclarator,
  WhileStatement,
)
from es_class_codemod.core.js.visitor import NodeTransformer, find_all, iter_nodes
from es_class_codemod.core.js.emitter import JsEmitter

__all__ = [
  "ArrayExpression",
  "ArrowFunctionExpression",
  "AssignmentExpression",
  "BinaryExpression",
  "BlockStatement",
  "CallExpression",
  "ClassBody",
  "ClassDeclaration",
  "ClassMember",
  "ClassProperty",
  "Comment",
  "Decorator",
  "ExpressionStatement",
  "ForOfStatement",
  "FunctionExpression",
  "Identifier",
  "IfStatement",
  "ImportDeclaration",
  "ImportDefaultSpecifier",
  "ImportSpecifier",
  "JsNode",
  "Literal",
  "MemberExpression",
  "MethodDefinition",
  "ObjectExpression",
  "Program",
  "Property",
  "ReturnStatement",
  "SpreadElement",
  "Super",
  "ThisExpression",
  "UnaryExpression",
  "VariableDeclaration",
  "VariableDeclarator",
  "WhileStatement",
  "NodeTransformer",
  "find_all",
  "iter_nodes",
  "JsEmitter",
]
