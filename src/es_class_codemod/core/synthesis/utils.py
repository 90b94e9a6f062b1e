"""
Attachment helpers shared by the class synthesizers.

Nodes are immutable, so every helper returns an updated copy.
"""

from typing import Sequence, TypeVar

from es_class_codemod.core.js.nodes import Comment, Decorator, JsNode, Literal

T = TypeVar("T", bound=JsNode)


def with_comments(to: T, source) -> T:
  """
  Copies the comments of ``source`` onto ``to``, replacing any it had.

  Args:
      to (JsNode): Target node with a ``comments`` field.
      source: Any object exposing ``comments`` (a node or a LegacyProperty).

  Returns:
      JsNode: Updated copy of ``to``.
  """
  return to.with_changes(comments=tuple(source.comments))


def prepend_comments(to: T, comments: Sequence[Comment]) -> T:
  """Places ``comments`` ahead of the comments ``to`` already carries."""
  if not comments:
    return to
  return to.with_changes(comments=tuple(comments) + tuple(to.comments))


def with_decorators(to: T, decorators: Sequence[Decorator]) -> T:
  """
  Attaches decorators in the given order. An empty sequence leaves ``to`` as is.

  Args:
      to (JsNode): Target node with a ``decorators`` field.
      decorators (Sequence[Decorator]): Decorators in application order.

  Returns:
      JsNode: Updated copy of ``to`` (or ``to`` itself).
  """
  if not decorators:
    return to
  return to.with_changes(decorators=tuple(decorators))


def needs_computed_access(key: JsNode, computed: bool) -> bool:
  """
  True if ``key`` must be accessed with brackets (``obj[key]``) rather than a dot.
  String-literal keys such as ``'foo-bar'`` cannot follow a dot.
  """
  return computed or isinstance(key, Literal)
