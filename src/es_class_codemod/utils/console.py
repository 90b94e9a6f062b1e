"""
Central Logging and Console Utilities.

Routes the standard ``logging`` library through a ``rich`` handler bound to a
swappable console. Modules log through ``logging.getLogger(__name__)``; the
``log_*`` helpers are shortcuts for one-off messages from the engine.

The console backend can be replaced at runtime via ``set_console`` (e.g. with a
``Console(file=io.StringIO())`` to capture output in tests), and the logging
handler follows it.

Attributes:
    console (_ConsoleProxy): A global, stable reference to the active Rich Console.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAME = "es_class_codemod"

_THEME = Theme(
  {
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "code": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  Forwards console operations to a replaceable ``rich.console.Console``.

  Attributes:
      _backend (Console): The active Rich Console instance.
      _handler (Optional[RichHandler]): The handler installed on the package logger.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._handler: Optional[RichHandler] = None
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """The currently active Console."""
    return self._backend

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and rebinds the logging handler to it.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Restores a fresh standard output console."""
    self.set_backend(Console(theme=_THEME))

  def _configure_logging(self) -> None:
    """
    Attaches a single RichHandler for the current backend to the package logger.

    Only the ``es_class_codemod`` logger is touched so that host applications keep
    control of the root logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if self._handler is not None:
      logger.removeHandler(self._handler)

    self._handler = RichHandler(
      console=self._backend,
      show_time=False,
      show_path=False,
      markup=False,
      rich_tracebacks=True,
    )
    logger.addHandler(self._handler)
    if logger.level == logging.NOTSET:
      logger.setLevel(logging.INFO)

  def print(self, *args: Any, **kwargs: Any) -> None:
    """Forwards ``print`` calls to the active backend."""
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Global helper to inject a specific console instance.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Global helper to reset logging and console to standard output."""
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active console backend.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def set_log_level(level: int) -> None:
  """
  Sets the verbosity of the package logger.

  Args:
      level (int): A ``logging`` level such as ``logging.DEBUG``.
  """
  logging.getLogger(LOGGER_NAME).setLevel(level)


def log_debug(msg: str) -> None:
  """Logs a debug message on the package logger."""
  logging.getLogger(LOGGER_NAME).debug(msg)


def log_info(msg: str) -> None:
  """Logs an informational message on the package logger."""
  logging.getLogger(LOGGER_NAME).info(msg)


def log_warning(msg: str) -> None:
  """Logs a warning on the package logger."""
  logging.getLogger(LOGGER_NAME).warning(msg)
