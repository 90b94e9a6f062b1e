"""
es-class-codemod Package.

A deterministic class-synthesis engine for migrating object-literal class
definitions built with ``extend`` and mixins to native class syntax with fields,
methods and decorators.

Usage
-----

.. code-block:: python

    from es_class_codemod import transform
    from es_class_codemod.core.js import Identifier, Literal, ObjectExpression, Property

    definition = ObjectExpression((Property(Identifier("name"), Literal("x")),))
    print(transform(definition, "Foo", "EmberObject"))
    # class Foo extends EmberObject {
    #   name = "x";
    # }

Advanced Usage
^^^^^^^^^^^^^^

.. code-block:: python

    from es_class_codemod import ClassMigrationEngine, CodemodConfig

    engine = ClassMigrationEngine(CodemodConfig.load(action_decorator="action"))
    result = engine.run(definition, "Foo", "Component", mixins=[Identifier("Evented")])
    result.class_node  # ClassDeclaration
"""

from typing import Optional, Sequence, Union

from es_class_codemod.config import CodemodConfig
from es_class_codemod.core.engine import ClassMigrationEngine, MigrationResult
from es_class_codemod.core.js.nodes import JsNode, ObjectExpression
from es_class_codemod.core.model.property import LegacyProperty

__version__ = "0.1.0"


def transform(
  definition: Union[ObjectExpression, Sequence[LegacyProperty]],
  class_name: Optional[str],
  super_class_name: str = "",
  mixins: Sequence[JsNode] = (),
  config: Optional[CodemodConfig] = None,
) -> str:
  """
  Migrates a class definition and returns the generated JavaScript.

  Args:
      definition: The object literal passed to ``extend``, or adapted properties.
      class_name: Name of the resulting class; None for an anonymous class.
      super_class_name: Name of the class being extended.
      mixins: Mixin expressions applied before the object literal.
      config: Conventions to apply; defaults to ``CodemodConfig()``.

  Returns:
      str: The import declaration (if decorators are used) and the class.
  """
  engine = ClassMigrationEngine(config=config)
  return engine.run(definition, class_name, super_class_name, mixins).code


__all__ = [
  "ClassMigrationEngine",
  "CodemodConfig",
  "MigrationResult",
  "transform",
  "__version__",
]
