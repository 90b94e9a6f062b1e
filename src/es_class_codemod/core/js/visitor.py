"""
Tree Search and Rewriting Utilities.

Provides the traversal primitives the synthesis engine uses to locate and replace
constructs structurally (by node type and field values) rather than textually:

1.  ``iter_nodes`` / ``find_all``: Pre-order search over any subtree.
2.  ``NodeTransformer``: Bottom-up rebuild with LibCST-style
    ``leave_<NodeType>(original_node, updated_node)`` callbacks.

Children are discovered generically from dataclass fields, so new node types
participate in traversal without registration.
"""

from dataclasses import fields
from typing import Any, Callable, Iterator, List

from es_class_codemod.core.js.nodes import JsNode

Predicate = Callable[[JsNode], bool]


def _children(node: JsNode) -> Iterator[JsNode]:
  for f in fields(node):
    value = getattr(node, f.name)
    if isinstance(value, JsNode):
      yield value
    elif isinstance(value, tuple):
      for item in value:
        if isinstance(item, JsNode):
          yield item


def iter_nodes(node: JsNode) -> Iterator[JsNode]:
  """
  Yields ``node`` and every descendant in pre-order.

  Args:
      node (JsNode): Root of the subtree.

  Yields:
      JsNode: Each node of the subtree.
  """
  stack = [node]
  while stack:
    current = stack.pop()
    yield current
    stack.extend(reversed(list(_children(current))))


def find_all(node: JsNode, predicate: Predicate) -> List[JsNode]:
  """
  Collects all nodes in the subtree that satisfy ``predicate``.

  Args:
      node (JsNode): Root of the subtree.
      predicate (Callable): Structural test applied to every node.

  Returns:
      List[JsNode]: Matches in pre-order.
  """
  return [n for n in iter_nodes(node) if predicate(n)]


class NodeTransformer:
  """
  Base class for bottom-up tree rewrites.

  Subclasses define ``leave_<NodeType>(self, original_node, updated_node)`` and
  return the replacement node. Parents are rebuilt only when a child changed, so an
  untouched subtree comes back as the very same object.
  """

  def transform(self, node: JsNode) -> JsNode:
    """
    Rewrites ``node`` and its descendants.

    Args:
        node (JsNode): Root of the subtree.

    Returns:
        JsNode: The rewritten tree (``node`` itself if nothing changed).
    """
    changes = {}
    for f in fields(node):
      value = getattr(node, f.name)
      new_value = self._transform_value(value)
      if new_value is not value:
        changes[f.name] = new_value

    updated = node.with_changes(**changes) if changes else node

    handler = getattr(self, f"leave_{node.type}", None)
    if handler is None:
      return updated
    return handler(node, updated)

  def _transform_value(self, value: Any) -> Any:
    if isinstance(value, JsNode):
      return self.transform(value)
    if isinstance(value, tuple):
      items = tuple(self.transform(v) if isinstance(v, JsNode) else v for v in value)
      if any(new is not old for new, old in zip(items, value)):
        return items
    return value
