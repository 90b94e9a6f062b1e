"""
Runtime Configuration Store.

Holds the names and conventions the migration relies on (decorator names, macro
names, import paths, output layout). Values are resolved from, in order of
precedence: explicit arguments, the ``[tool.es_class_codemod]`` table of the
nearest ``pyproject.toml``, and the model defaults.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  try:
    import tomli as tomllib
  except ImportError:
    tomllib = None  # type: ignore

TOOL_SECTION = "es_class_codemod"


class CodemodConfig(BaseModel):
  """
  Global configuration container for the class migration engine.
  """

  action_decorator: str = Field("action", description="Decorator applied to every method of the `actions` hash.")
  class_decorator_props: List[str] = Field(
    default_factory=lambda: ["classNames", "classNameBindings", "attributeBindings", "tagName", "layout"],
    description="Property names that become class-level decorators.",
  )
  getter_macros: List[str] = Field(
    default_factory=lambda: ["computed"],
    description="Macros whose trailing function argument becomes a getter.",
  )
  macros: List[str] = Field(
    default_factory=lambda: [
      "alias",
      "and",
      "bool",
      "computed",
      "controller",
      "equal",
      "filterBy",
      "gt",
      "mapBy",
      "not",
      "observer",
      "on",
      "oneWay",
      "or",
      "readOnly",
      "reads",
      "service",
    ],
    description="Callee names whose calls are migrated to decorators rather than field initializers.",
  )
  decorator_renames: Dict[str, str] = Field(
    default_factory=lambda: {"observer": "observes"},
    description="Macro names whose decorator has a different name.",
  )
  value_decorators: List[str] = Field(
    default_factory=lambda: ["className", "attribute"],
    description="Decorators that keep the field initializer in place.",
  )
  decorator_import_path: str = Field(
    "@ember-decorators/object", description="Module the generated decorators are imported from."
  )
  decorator_import_paths: Dict[str, str] = Field(
    default_factory=lambda: {
      **{
        name: "@ember-decorators/component"
        for name in ("attribute", "attributeBindings", "className", "classNameBindings", "classNames", "layout", "tagName")
      },
      **{
        name: "@ember-decorators/object/computed"
        for name in ("alias", "and", "bool", "equal", "filterBy", "gt", "mapBy", "not", "oneWay", "or", "reads")
      },
      "controller": "@ember-decorators/controller",
      "service": "@ember-decorators/service",
    },
    description="Module per decorator name; names not listed are imported from `decorator_import_path`.",
  )
  root_class_name: str = Field("EmberObject", description="Parent class for mixins applied without a named parent.")
  emit_imports: bool = Field(True, description="If True, emit an import declaration for the decorators used.")
  indent: int = Field(2, description="Spaces per indentation level in emitted code.")
  quote: str = Field('"', description="Quote character for emitted string literals.")

  @field_validator("action_decorator", "decorator_import_path", "root_class_name")
  @classmethod
  def validate_non_empty(cls, v: str) -> str:
    """
    Rejects blank names.

    Args:
        v (str): The raw value.

    Returns:
        str: The stripped value.

    Raises:
        ValueError: If the value is empty after stripping.
    """
    v_clean = v.strip()
    if not v_clean:
      raise ValueError("Value must not be empty")
    return v_clean

  @field_validator("class_decorator_props", "getter_macros", "macros", "value_decorators")
  @classmethod
  def validate_identifiers(cls, v: List[str]) -> List[str]:
    """
    Ensures every configured name is a valid JavaScript identifier.

    Args:
        v (List[str]): Configured names.

    Returns:
        List[str]: The names, unchanged.

    Raises:
        ValueError: If a name cannot be used as an identifier.
    """
    for name in v:
      if not name or not (name[0].isalpha() or name[0] in "_$") or not all(c.isalnum() or c in "_$" for c in name):
        raise ValueError(f"Invalid identifier: '{name}'")
    return v

  @field_validator("decorator_import_paths")
  @classmethod
  def validate_import_paths(cls, v: Dict[str, str]) -> Dict[str, str]:
    """Module paths must not be blank."""
    for name, path in v.items():
      if not path.strip():
        raise ValueError(f"Empty import path for decorator '{name}'")
    return {name: path.strip() for name, path in v.items()}

  def import_path_for(self, decorator_name: str) -> str:
    """
    Resolves the module a decorator is imported from.

    Args:
        decorator_name (str): Name of the decorator.

    Returns:
        str: The mapped module, or ``decorator_import_path`` for unmapped names.
    """
    return self.decorator_import_paths.get(decorator_name, self.decorator_import_path)

  @field_validator("indent")
  @classmethod
  def validate_indent(cls, v: int) -> int:
    """Indentation width must be non-negative."""
    if v < 0:
      raise ValueError("indent must be >= 0")
    return v

  @field_validator("quote")
  @classmethod
  def validate_quote(cls, v: str) -> str:
    """Only single or double quotes are accepted."""
    if v not in ("'", '"'):
      raise ValueError(f"Unsupported quote character: {v!r}")
    return v

  @classmethod
  def load(cls, search_path: Optional[Path] = None, **overrides: Any) -> "CodemodConfig":
    """
    Loads configuration from pyproject.toml and applies explicit overrides.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
        **overrides: Field values that take precedence over the TOML settings.
            ``None`` values are ignored.

    Returns:
        CodemodConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    explicit = {k: v for k, v in overrides.items() if v is not None}
    return cls(**{**toml_config, **explicit})


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches ``start_path`` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  if not tomllib:
    return {}, None

  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None
