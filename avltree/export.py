from typing import Optional

import networkx as nx

from .node import Direction, Node, balance_factor
from .tree import AVLTree


def to_networkx(tree: AVLTree) -> nx.DiGraph:
    """Exports the current shape of tree as a directed graph

    Graph nodes are the stored keys with `value`, `height` and `balance`
    attributes; edges point from parent to child and carry a `direction`
    attribute ("LEFT" or "RIGHT"). The graph's `root` attribute holds the
    root key, or None for an empty tree.
    """
    G = nx.DiGraph(root=None if tree.root is None else tree.root.key)
    stack = [tree.root] if tree.root is not None else []

    while stack:
        node: Node = stack.pop()
        G.add_node(node.key, value=node.value, height=node.height,
                   balance=balance_factor(node))
        for direction in Direction:
            child: Optional[Node] = node.get_child(direction)
            if child is not None:
                G.add_edge(node.key, child.key, direction=direction.name)
                stack.append(child)
    return G
