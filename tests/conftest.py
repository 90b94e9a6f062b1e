"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Default configuration, policies and emitter fixtures.
- Console isolation so captured log output does not leak between tests.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'es_class_codemod' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from es_class_codemod.config import CodemodConfig  # noqa: E402
from es_class_codemod.core.js.emitter import JsEmitter  # noqa: E402
from es_class_codemod.core.model.decorators import DefaultDecoratorPolicy  # noqa: E402
from es_class_codemod.core.model.policy import DefaultPropertyPolicy  # noqa: E402
from es_class_codemod.utils.console import reset_console  # noqa: E402


@pytest.fixture
def config() -> CodemodConfig:
  """Default configuration."""
  return CodemodConfig()


@pytest.fixture
def property_policy(config: CodemodConfig) -> DefaultPropertyPolicy:
  return DefaultPropertyPolicy(config)


@pytest.fixture
def decorator_policy(config: CodemodConfig) -> DefaultDecoratorPolicy:
  return DefaultDecoratorPolicy(config)


@pytest.fixture
def emitter() -> JsEmitter:
  """Emitter with two-space indentation and double quotes."""
  return JsEmitter()


@pytest.fixture(autouse=True)
def isolate_console():
  """Restores the standard output console after each test."""
  yield
  reset_console()
