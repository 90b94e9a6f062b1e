"""
Tests for Configuration Loading and Validation.

Verifies:
1.  Defaults for the decorator-based class model.
2.  Validation of names, indentation and quotes.
3.  Loading of the `[tool.es_class_codemod]` table from pyproject.toml.
4.  Precedence of explicit overrides over TOML settings.
"""

import pytest
from pydantic import ValidationError

from es_class_codemod.config import CodemodConfig, _load_toml_settings


def test_defaults():
  config = CodemodConfig()
  assert config.action_decorator == "action"
  assert "tagName" in config.class_decorator_props
  assert config.getter_macros == ["computed"]
  assert "service" in config.macros
  assert config.decorator_renames == {"observer": "observes"}
  assert config.decorator_import_path == "@ember-decorators/object"
  assert config.root_class_name == "EmberObject"
  assert config.emit_imports is True
  assert config.indent == 2
  assert config.quote == '"'


def test_names_are_stripped():
  assert CodemodConfig(action_decorator="  handler ").action_decorator == "handler"


@pytest.mark.parametrize(
  "field, value",
  [
    ("action_decorator", "   "),
    ("root_class_name", ""),
    ("macros", ["computed", "not-valid"]),
    ("class_decorator_props", ["1abc"]),
    ("value_decorators", [""]),
    ("indent", -1),
    ("quote", "`"),
  ],
)
def test_invalid_values(field, value):
  with pytest.raises(ValidationError):
    CodemodConfig(**{field: value})


def test_identifier_characters():
  config = CodemodConfig(macros=["$computed", "_private", "camelCase2"])
  assert config.macros == ["$computed", "_private", "camelCase2"]


def _write_pyproject(path, body):
  (path / "pyproject.toml").write_text(body, encoding="utf-8")


def test_load_from_pyproject(tmp_path):
  _write_pyproject(
    tmp_path,
    """
[project]
name = "app"

[tool.es_class_codemod]
action_decorator = "handler"
indent = 4
macros = ["tracked"]
""",
  )
  config = CodemodConfig.load(search_path=tmp_path)
  assert config.action_decorator == "handler"
  assert config.indent == 4
  assert config.macros == ["tracked"]
  assert config.root_class_name == "EmberObject"


def test_load_searches_parents(tmp_path):
  _write_pyproject(tmp_path, '[tool.es_class_codemod]\nroot_class_name = "Base"\n')
  nested = tmp_path / "a" / "b"
  nested.mkdir(parents=True)

  settings, found_in = _load_toml_settings(nested)
  assert settings == {"root_class_name": "Base"}
  assert found_in == tmp_path.resolve()


def test_overrides_take_precedence(tmp_path):
  _write_pyproject(tmp_path, '[tool.es_class_codemod]\nindent = 4\nquote = "\'"\n')
  config = CodemodConfig.load(search_path=tmp_path, indent=8, quote=None)
  assert config.indent == 8
  assert config.quote == "'"


def test_missing_section_uses_defaults(tmp_path):
  _write_pyproject(tmp_path, '[project]\nname = "app"\n')
  assert CodemodConfig.load(search_path=tmp_path) == CodemodConfig()


def test_invalid_toml_is_ignored(tmp_path):
  _write_pyproject(tmp_path, "[tool.es_class_codemod\nbroken")
  assert _load_toml_settings(tmp_path) == ({}, None)


def test_invalid_toml_value_rejected(tmp_path):
  _write_pyproject(tmp_path, "[tool.es_class_codemod]\nindent = -2\n")
  with pytest.raises(ValidationError):
    CodemodConfig.load(search_path=tmp_path)


def test_decorator_import_paths():
  config = CodemodConfig()
  assert config.import_path_for("service") == "@ember-decorators/service"
  assert config.import_path_for("classNames") == "@ember-decorators/component"
  assert config.import_path_for("alias") == "@ember-decorators/object/computed"
  assert config.import_path_for("computed") == "@ember-decorators/object"
  assert config.import_path_for("action") == "@ember-decorators/object"


def test_blank_import_path_rejected():
  with pytest.raises(ValidationError):
    CodemodConfig(decorator_import_paths={"service": "  "})
