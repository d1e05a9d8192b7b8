import logging

from .node import Direction, Node, balance_factor, update_height

logger = logging.getLogger(__name__)


def rotate(sub: Node, direction: Direction) -> Node:
    """Rotates the subtree rooted at sub in the given direction

    The child of sub opposite to direction takes its place, sub becomes that
    child's `direction` child, and the child's inner subtree moves across to
    sub. Only the two nodes and the transplanted subtree are touched.

    Args:
        sub (Node): root of the subtree to rotate
        direction (Direction): LEFT lifts the right child, RIGHT the left

    Returns:
        Node: the new subtree root, which the caller must link into the
            parent in place of sub
    """
    new_root = sub.get_child(direction.opposite())
    new_child = new_root.get_child(direction)

    sub.set_child(direction.opposite(), new_child)
    new_root.set_child(direction, sub)

    # sub is now below new_root, so its height has to be fixed first
    update_height(sub)
    update_height(new_root)
    return new_root


def rotate_left(x: Node) -> Node:
    return rotate(x, Direction.LEFT)


def rotate_right(x: Node) -> Node:
    return rotate(x, Direction.RIGHT)


def rebalance(node: Node) -> Node:
    """Refreshes the height of node and restores its balance if needed

    Returns the root of the (possibly rotated) subtree.
    """
    update_height(node)
    balance = balance_factor(node)

    if balance > 1:
        # a left child with a balance of zero can only happen after a delete
        # and is handled by the single rotation
        if balance_factor(node.left) < 0:
            logger.debug("left-right rotation at %r", node.key)
            node.left = rotate_left(node.left)
        else:
            logger.debug("left-left rotation at %r", node.key)
        return rotate_right(node)

    if balance < -1:
        if balance_factor(node.right) > 0:
            logger.debug("right-left rotation at %r", node.key)
            node.right = rotate_right(node.right)
        else:
            logger.debug("right-right rotation at %r", node.key)
        return rotate_left(node)

    return node
