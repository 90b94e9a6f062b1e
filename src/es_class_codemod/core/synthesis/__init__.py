"""
Class Synthesis Package.

Builders producing native class constructs (fields, methods, constructors,
superclass expressions, class declarations) from legacy properties. All builders
are pure: they return fresh nodes and never modify their inputs.
"""

from es_class_codemod.core.synthesis.assembler import (
  ClassAssembler,
  create_class,
  create_import_declaration,
  create_import_declarations,
)
from es_class_codemod.core.synthesis.constructor import (
  create_constructor,
  create_super_expression_statement,
  instance_props_to_expressions,
)
from es_class_codemod.core.synthesis.fields import create_class_prop
from es_class_codemod.core.synthesis.methods import (
  create_action_decorated_props,
  create_call_expression_prop,
  create_method_prop,
)
from es_class_codemod.core.synthesis.super_calls import (
  SuperCallTransformer,
  is_super_delegation,
  replace_super_expressions,
  rewrite_super_calls,
)
from es_class_codemod.core.synthesis.superclass import create_super_class_expression
from es_class_codemod.core.synthesis.utils import prepend_comments, with_comments, with_decorators

__all__ = [
  "ClassAssembler",
  "create_class",
  "create_import_declaration",
  "create_import_declarations",
  "create_constructor",
  "create_super_expression_statement",
  "instance_props_to_expressions",
  "create_class_prop",
  "create_action_decorated_props",
  "create_call_expression_prop",
  "create_method_prop",
  "SuperCallTransformer",
  "is_super_delegation",
  "replace_super_expressions",
  "rewrite_super_calls",
  "create_super_class_expression",
  "prepend_comments",
  "with_comments",
  "with_decorators",
]
