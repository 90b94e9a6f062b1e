"""
Class Assembly.

Dispatches every legacy property to its synthesizer and assembles the native class
declaration. Dispatch follows the property's category (first match wins):

1.  Class decorator -> accumulated on the class, no member.
2.  Function value -> method.
3.  Macro call -> method(s) or field, depending on the call's trailing argument.
4.  ``actions`` hash -> one ``@action`` method per entry.
5.  Anything else -> field.

Members keep the input order; a property expanding to several members places them
contiguously at its own position.
"""

from typing import Callable, Dict, List, Optional, Sequence

from es_class_codemod.core.js.nodes import (
  ClassBody,
  ClassDeclaration,
  ClassMember,
  Decorator,
  Identifier,
  ImportDeclaration,
  ImportSpecifier,
  JsNode,
  Literal,
)
from es_class_codemod.core.model.decorators import DecoratorPolicy
from es_class_codemod.core.model.policy import PropertyPolicy
from es_class_codemod.core.model.property import LegacyProperty
from es_class_codemod.core.synthesis.fields import create_class_prop
from es_class_codemod.core.synthesis.methods import (
  create_action_decorated_props,
  create_call_expression_prop,
  create_method_prop,
)
from es_class_codemod.core.synthesis.superclass import create_super_class_expression
from es_class_codemod.core.synthesis.utils import with_decorators
from es_class_codemod.enums import PropertyCategory


class ClassAssembler:
  """
  Builds a ``ClassDeclaration`` from classified legacy properties.

  Attributes:
      decorator_policy (DecoratorPolicy): Supplies class, member and action decorators.
      property_policy (PropertyPolicy): Supplies per-property field decisions.
      root_class_name (str): Parent applied to mixins when no parent is named.
  """

  def __init__(
    self,
    decorator_policy: DecoratorPolicy,
    property_policy: PropertyPolicy,
    root_class_name: str = "EmberObject",
  ) -> None:
    self.decorator_policy = decorator_policy
    self.property_policy = property_policy
    self.root_class_name = root_class_name

  def create_members(self, prop: LegacyProperty) -> List[ClassMember]:
    """
    Converts one non-decorator property into its class member(s).

    Args:
        prop (LegacyProperty): The property to convert.

    Returns:
        List[ClassMember]: Members in output order; empty for class decorators.
    """
    category = prop.category
    if category == PropertyCategory.CLASS_DECORATOR:
      return []
    if category == PropertyCategory.METHOD:
      return [create_method_prop(prop)]
    if category == PropertyCategory.CALL_EXPRESSION:
      return create_call_expression_prop(prop, self.decorator_policy, self.property_policy)
    if category == PropertyCategory.ACTIONS:
      return create_action_decorated_props(prop, self.decorator_policy)
    return [create_class_prop(prop, self.decorator_policy, self.property_policy)]

  def create_class(
    self,
    class_name: Optional[str],
    instance_props: Sequence[LegacyProperty] = (),
    super_class_name: str = "",
    mixins: Sequence[JsNode] = (),
  ) -> ClassDeclaration:
    """
    Creates the class.

    Args:
        class_name (Optional[str]): Name of the class; None or empty for an
            anonymous class.
        instance_props (Sequence[LegacyProperty]): Properties of the legacy
            definition, in source order.
        super_class_name (str): Parent class name, empty for a root class.
        mixins (Sequence[JsNode]): Mixin expressions in application order.

    Returns:
        ClassDeclaration: The assembled class.
    """
    class_body: List[ClassMember] = []
    class_decorators: List[Decorator] = []

    for prop in instance_props:
      if prop.category == PropertyCategory.CLASS_DECORATOR:
        class_decorators.append(self.decorator_policy.class_decorator(prop))
      else:
        class_body.extend(self.create_members(prop))

    declaration = ClassDeclaration(
      id=Identifier(class_name) if class_name else None,
      body=ClassBody(tuple(class_body)),
      superclass=create_super_class_expression(super_class_name, mixins, self.root_class_name),
    )
    return with_decorators(declaration, class_decorators)


def create_class(
  class_name: Optional[str],
  instance_props: Sequence[LegacyProperty],
  decorator_policy: DecoratorPolicy,
  property_policy: PropertyPolicy,
  super_class_name: str = "",
  mixins: Sequence[JsNode] = (),
) -> ClassDeclaration:
  """
  Functional shortcut for ``ClassAssembler(...).create_class(...)``.
  """
  assembler = ClassAssembler(decorator_policy, property_policy)
  return assembler.create_class(class_name, instance_props, super_class_name, mixins)


def create_import_declaration(specifiers: Sequence[JsNode], path: str) -> ImportDeclaration:
  """
  Creates ``import { a, b } from "<path>";``.

  Args:
      specifiers (Sequence[JsNode]): Import specifiers in order.
      path (str): Module path.

  Returns:
      ImportDeclaration: The import statement.
  """
  return ImportDeclaration(tuple(specifiers), Literal(path))


def create_import_declarations(names: Sequence[str], path_for: Callable[[str], str]) -> List[ImportDeclaration]:
  """
  Groups decorator names into one import declaration per module.

  Args:
      names (Sequence[str]): Decorator names in first-use order.
      path_for (Callable[[str], str]): Resolves the module of a name.

  Returns:
      List[ImportDeclaration]: Modules in the order their first name is used;
      names keep their order within each module.
  """
  grouped: Dict[str, List[ImportSpecifier]] = {}
  for name in names:
    grouped.setdefault(path_for(name), []).append(ImportSpecifier(Identifier(name)))
  return [create_import_declaration(specifiers, path) for path, specifiers in grouped.items()]
