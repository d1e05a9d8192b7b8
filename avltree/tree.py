import logging
from typing import Any, Iterable, List, Optional, Tuple

from .compare import Comparator, natural_order
from .iterator import InOrderIterator
from .node import Direction, Node, update_height
from .rotation import rebalance
from .validate import check_invariants

logger = logging.getLogger(__name__)

# (ancestor, direction taken from it) pairs from the root down
Path = List[Tuple[Node, Direction]]


class AVLTree:
    """Ordered map of unique keys kept height balanced on every mutation

    Keys are ordered by `comparator`, a function returning a negative, zero
    or positive int. It must be a total order over every key stored, and keys
    must not be mutated in an order-changing way once stored; neither
    condition is checked.

    Not safe for concurrent mutation. Iterators are invalidated by any
    structural change and raise ConcurrentModificationError when stepped
    afterwards.
    """

    def __init__(self, items: Optional[Iterable[Tuple[Any, Any]]] = None,
                 comparator: Optional[Comparator] = None,
                 check_invariants: bool = False):
        self.comparator: Comparator = comparator or natural_order
        self.root: Optional[Node] = None
        self._size = 0
        self._modifications = 0
        self._check_invariants = check_invariants

        for key, value in items or ():
            self.insert(key, value)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self.root is None

    def height(self) -> int:
        return 0 if self.root is None else self.root.height

    def _search(self, key) -> Optional[Node]:
        node = self.root
        while node is not None:
            cmp = self.comparator(key, node.key)
            if cmp == 0:
                return node
            node = node.right if cmp > 0 else node.left
        return None

    def find(self, key, default=None):
        """Returns the value stored under key, or default if it is absent"""
        node = self._search(key)
        if node is None:
            return default
        return node.value

    def contains(self, key) -> bool:
        return self._search(key) is not None

    def insert(self, key, value=None):
        """Stores value under key

        Returns:
            the value previously stored under key, or None if the key is new
        """
        path: Path = []
        node = self.root
        while node is not None:
            cmp = self.comparator(key, node.key)
            if cmp == 0:
                # overwriting a value leaves the shape alone
                previous = node.value
                node.value = value
                return previous
            direction = Direction(int(cmp > 0))
            path.append((node, direction))
            node = node.get_child(direction)

        leaf = Node(key, value)
        if path:
            parent, direction = path[-1]
            parent.set_child(direction, leaf)
        else:
            self.root = leaf

        self._size += 1
        self._modifications += 1
        self._retrace(path, stop_after_rotation=True)
        self._after_mutation()
        return None

    def delete(self, key):
        """Removes key from the tree

        Returns:
            the removed value, or None if the key was not present
        """
        path: Path = []
        node = self.root
        while node is not None:
            cmp = self.comparator(key, node.key)
            if cmp == 0:
                break
            direction = Direction(int(cmp > 0))
            path.append((node, direction))
            node = node.get_child(direction)

        if node is None:
            return None

        removed = node.value

        # with two children, the in-order successor's entry moves up into this
        # node and the successor (which has no left child) is unlinked instead
        if node.left is not None and node.right is not None:
            path.append((node, Direction.RIGHT))
            successor = node.right
            while successor.left is not None:
                path.append((successor, Direction.LEFT))
                successor = successor.left
            node.replace(successor)
            node = successor

        child = node.left if node.left is not None else node.right
        if path:
            parent, direction = path[-1]
            parent.set_child(direction, child)
        else:
            self.root = child

        self._size -= 1
        self._modifications += 1
        self._retrace(path, stop_after_rotation=False)
        self._after_mutation()
        return removed

    def _retrace(self, path: Path, stop_after_rotation: bool):
        """Walks the path bottom-up fixing heights and rotating where needed

        An insert is fully rebalanced by its first rotation, after which only
        heights are refreshed. A delete may need a rotation at every level.
        """
        rotated = False
        for index in range(len(path) - 1, -1, -1):
            node, _ = path[index]
            if rotated and stop_after_rotation:
                update_height(node)
                continue

            subtree = rebalance(node)
            if subtree is node:
                continue

            rotated = True
            if index == 0:
                self.root = subtree
            else:
                parent, direction = path[index - 1]
                parent.set_child(direction, subtree)

    def _after_mutation(self):
        if self._check_invariants:
            check_invariants(self)

    def _edge(self, direction: Direction) -> Optional[Tuple[Any, Any]]:
        node = self.root
        if node is None:
            return None
        while node.get_child(direction) is not None:
            node = node.get_child(direction)
        return node.key, node.value

    def min(self) -> Optional[Tuple[Any, Any]]:
        """Returns the (key, value) pair with the smallest key"""
        return self._edge(Direction.LEFT)

    def max(self) -> Optional[Tuple[Any, Any]]:
        """Returns the (key, value) pair with the largest key"""
        return self._edge(Direction.RIGHT)

    def iterate(self) -> InOrderIterator:
        return InOrderIterator(self)

    def iterate_from(self, key) -> InOrderIterator:
        """Iterates (key, value) pairs in order starting at the first key >= key"""
        return InOrderIterator(self, start=key)

    def keys(self):
        return (key for key, _ in self.iterate())

    def values(self):
        return (value for _, value in self.iterate())

    def clear(self):
        logger.debug("clearing tree of %d nodes", self._size)
        self.root = None
        self._size = 0
        self._modifications += 1

    def __len__(self):
        return self._size

    def __contains__(self, key):
        return self.contains(key)

    def __getitem__(self, key):
        node = self._search(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __iter__(self):
        return self.iterate()

    def __repr__(self):
        return f"{type(self).__name__}({list(self.iterate())!r})"

    def pprint(self, node: Optional[Node], depth=0, direction: str = "ROOT"):
        if node is None:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        return ("\t" * depth + f"|_ {direction} | {node.key}: {node.value} (h={node.height})\n"
                + self.pprint(node.left, depth + 1, Direction.LEFT.name)
                + self.pprint(node.right, depth + 1, Direction.RIGHT.name))
