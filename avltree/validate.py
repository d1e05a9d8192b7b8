from typing import TYPE_CHECKING, Any, Optional, Tuple

from .errors import InvariantViolation
from .node import Node, height

if TYPE_CHECKING:
    from .tree import AVLTree

_UNBOUNDED = object()


def check_invariants(tree: "AVLTree"):
    """Walks the whole tree and raises InvariantViolation on the first fault

    Checks that keys are strictly ordered under the tree's comparator, that
    every stored height is one more than its tallest child, that no node has
    a balance factor outside [-1, 1], and that the node count matches the
    tree's size.
    """
    _, count = _check(tree, tree.root, _UNBOUNDED, _UNBOUNDED)
    if count != tree.size():
        raise InvariantViolation(f"size is {tree.size()} but tree holds {count} nodes")


def _check(tree: "AVLTree", node: Optional[Node], low: Any, high: Any) -> Tuple[int, int]:
    if node is None:
        return 0, 0

    compare = tree.comparator
    if low is not _UNBOUNDED and compare(node.key, low) <= 0:
        raise InvariantViolation(f"key {node.key!r} is not greater than ancestor {low!r}")
    if high is not _UNBOUNDED and compare(node.key, high) >= 0:
        raise InvariantViolation(f"key {node.key!r} is not less than ancestor {high!r}")

    left_height, left_count = _check(tree, node.left, low, node.key)
    right_height, right_count = _check(tree, node.right, node.key, high)

    expected = 1 + max(left_height, right_height)
    if node.height != expected:
        raise InvariantViolation(
            f"node {node.key!r} has height {node.height}, expected {expected}")
    if abs(height(node.left) - height(node.right)) > 1:
        raise InvariantViolation(
            f"node {node.key!r} is unbalanced ({left_height} vs {right_height})")

    return expected, left_count + right_count + 1
