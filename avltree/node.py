import enum
from typing import Any, Optional


class Direction(enum.IntEnum):
    LEFT = 0
    RIGHT = 1

    def opposite(self) -> "Direction":
        return Direction(1 - self)


class Node:

    __slots__ = ("key", "value", "left", "right", "height")

    def __init__(self, key, value: Any = None):
        self.key = key
        self.value = value
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None
        # a new node is always placed as a leaf
        self.height = 1

    def get_child(self, direction: Direction) -> Optional["Node"]:
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node

    def replace(self, node: "Node"):
        self.key = node.key
        self.value = node.value

    def __repr__(self):
        return f"Node({self.key!r}: {self.value!r}, h={self.height})"


def height(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return node.height


def balance_factor(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def update_height(node: Node):
    node.height = 1 + max(height(node.left), height(node.right))
