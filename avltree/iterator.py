from typing import TYPE_CHECKING, Any, List, Optional, Tuple

from .errors import ConcurrentModificationError
from .node import Node

if TYPE_CHECKING:
    from .tree import AVLTree

_MISSING = object()


class InOrderIterator:
    """Lazy ascending traversal of an AVLTree yielding (key, value) pairs

    The stack holds the nodes still to be visited, each with its right
    subtree pending. A structural change to the tree after the iterator was
    created raises ConcurrentModificationError on the next step.
    """

    def __init__(self, tree: "AVLTree", start: Any = _MISSING):
        self._tree = tree
        self._modifications = tree._modifications
        self._stack: List[Node] = []

        if start is _MISSING:
            self._push_left(tree.root)
        else:
            self._seek(start)

    def _push_left(self, node: Optional[Node]):
        while node is not None:
            self._stack.append(node)
            node = node.left

    def _seek(self, start):
        # keep every node >= start on the way down; a node < start is skipped
        # along with its whole left subtree
        compare = self._tree.comparator
        node = self._tree.root
        while node is not None:
            if compare(node.key, start) < 0:
                node = node.right
            else:
                self._stack.append(node)
                node = node.left

    def __iter__(self):
        return self

    def __next__(self) -> Tuple[Any, Any]:
        if self._modifications != self._tree._modifications:
            raise ConcurrentModificationError("tree changed during iteration")
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.key, node.value
