"""
Class Migration Engine.

Drives the conversion of one legacy object-literal class definition into a native
class declaration:

1.  **Adaptation**: ``Property`` nodes -> classified ``LegacyProperty`` records.
2.  **Assembly**: properties -> class members and class decorators.
3.  **Constructor**: properties needing per-instance initialization are assigned in
    an explicit constructor, inserted as the first member.
4.  **Imports**: one import declaration per module providing the decorators used.
5.  **Emission**: the imports and class are rendered to JavaScript.

Each run is independent; the engine holds configuration and policies only.
"""

from typing import Any, List, Optional, Sequence, Union

from pydantic import BaseModel, Field

from es_class_codemod.config import CodemodConfig
from es_class_codemod.core.js.emitter import JsEmitter
from es_class_codemod.core.js.nodes import (
  CallExpression,
  ClassDeclaration,
  Decorator,
  Identifier,
  JsNode,
  ObjectExpression,
  Program,
)
from es_class_codemod.core.js.visitor import find_all
from es_class_codemod.core.model.adapter import properties_from_object
from es_class_codemod.core.model.decorators import DecoratorPolicy, DefaultDecoratorPolicy
from es_class_codemod.core.model.policy import DefaultPropertyPolicy, PropertyPolicy
from es_class_codemod.core.model.property import LegacyProperty
from es_class_codemod.core.synthesis.assembler import ClassAssembler, create_import_declarations
from es_class_codemod.core.synthesis.constructor import create_constructor
from es_class_codemod.utils.console import log_debug, log_info


class MigrationResult(BaseModel):
  """
  Structured result of a single class migration.
  """

  code: str = Field(default="", description="The generated JavaScript source.")
  class_node: Any = Field(default=None, description="The synthesized ClassDeclaration.")
  import_nodes: List[Any] = Field(default_factory=list, description="Decorator ImportDeclarations, one per module.")
  constructor_created: bool = Field(default=False, description="True if an explicit constructor was added.")
  member_count: int = Field(default=0, description="Number of members in the class body.")
  decorators_used: List[str] = Field(default_factory=list, description="Decorator names, in first-use order.")


def _is_decorator(node: JsNode) -> bool:
  return isinstance(node, Decorator)


def collect_decorator_names(node: JsNode) -> List[str]:
  """
  Lists the names of all decorators under ``node``.

  Class decorators are listed before member decorators, matching the order in
  which they appear in the emitted source.

  Args:
      node (JsNode): Usually a ``ClassDeclaration``.

  Returns:
      List[str]: Unique names in first-use order.
  """
  if isinstance(node, ClassDeclaration):
    decorators = list(node.decorators) + find_all(node.body, _is_decorator)
  else:
    decorators = find_all(node, _is_decorator)

  names = []
  for decorator in decorators:
    expr = decorator.expression
    if isinstance(expr, CallExpression):
      expr = expr.callee
    if isinstance(expr, Identifier) and expr.name not in names:
      names.append(expr.name)
  return names


class ClassMigrationEngine:
  """
  Converts legacy class definitions into native class declarations.
  """

  def __init__(
    self,
    config: Optional[CodemodConfig] = None,
    property_policy: Optional[PropertyPolicy] = None,
    decorator_policy: Optional[DecoratorPolicy] = None,
  ) -> None:
    """
    Args:
        config: Naming and output conventions. Defaults to ``CodemodConfig()``.
        property_policy: Per-property decisions. Defaults to ``DefaultPropertyPolicy``.
        decorator_policy: Decorator mapping. Defaults to ``DefaultDecoratorPolicy``.
    """
    self.config = config or CodemodConfig()
    self.property_policy = property_policy or DefaultPropertyPolicy(self.config)
    self.decorator_policy = decorator_policy or DefaultDecoratorPolicy(self.config)
    self.assembler = ClassAssembler(self.decorator_policy, self.property_policy, self.config.root_class_name)
    self.emitter = JsEmitter(indent=self.config.indent, quote=self.config.quote)

  def adapt(self, definition: Union[ObjectExpression, Sequence[LegacyProperty]]) -> List[LegacyProperty]:
    """
    Normalizes the input into legacy property records.

    Args:
        definition: The object literal passed to ``extend``, or already adapted records.

    Returns:
        List[LegacyProperty]: Records in source order.
    """
    if isinstance(definition, ObjectExpression):
      return properties_from_object(definition, self.config, self.property_policy)
    return list(definition)

  def build_class(
    self,
    props: Sequence[LegacyProperty],
    class_name: Optional[str],
    super_class_name: str = "",
    mixins: Sequence[JsNode] = (),
  ) -> ClassDeclaration:
    """
    Assembles the class and prepends a constructor when eager properties exist.

    Args:
        props (Sequence[LegacyProperty]): Adapted properties.
        class_name (Optional[str]): Class name, None for anonymous.
        super_class_name (str): Parent class name.
        mixins (Sequence[JsNode]): Mixin expressions.

    Returns:
        ClassDeclaration: The final class.
    """
    declaration = self.assembler.create_class(class_name, props, super_class_name, mixins)

    eager_props = [p for p in props if self.property_policy.requires_eager_init(p)]
    constructor = create_constructor(eager_props)
    if not constructor:
      return declaration

    body = declaration.body.with_changes(body=tuple(constructor) + declaration.body.body)
    return declaration.with_changes(body=body)

  def run(
    self,
    definition: Union[ObjectExpression, Sequence[LegacyProperty]],
    class_name: Optional[str],
    super_class_name: str = "",
    mixins: Sequence[JsNode] = (),
  ) -> MigrationResult:
    """
    Migrates one class definition.

    Args:
        definition: The object literal passed to ``extend``, or adapted records.
        class_name: Name of the resulting class; None or empty for anonymous.
        super_class_name: Name of the class being extended; empty for a root class.
        mixins: Mixin expressions passed to ``extend`` before the object literal.

    Returns:
        MigrationResult: Generated code and the synthesized nodes.
    """
    props = self.adapt(definition)
    class_node = self.build_class(props, class_name, super_class_name, mixins)

    decorators_used = collect_decorator_names(class_node)
    import_nodes = []
    if self.config.emit_imports:
      import_nodes = create_import_declarations(decorators_used, self.config.import_path_for)

    program = Program((*import_nodes, class_node))
    code = self.emitter.emit(program)

    constructor_created = any(getattr(m, "kind", None) == "constructor" for m in class_node.body.body)
    log_debug(f"Decorators used by '{class_name or '<anonymous>'}': {decorators_used}")
    log_info(f"Migrated class '{class_name or '<anonymous>'}' ({len(class_node.body.body)} members)")

    return MigrationResult(
      code=code,
      class_node=class_node,
      import_nodes=import_nodes,
      constructor_created=constructor_created,
      member_count=len(class_node.body.body),
      decorators_used=decorators_used,
    )
