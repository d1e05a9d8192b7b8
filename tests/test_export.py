import networkx as nx

from avltree import AVLTree, to_networkx


def test_export_shape():
    tree = AVLTree(items=[(k, str(k)) for k in range(1, 8)])

    G = to_networkx(tree)

    assert nx.is_arborescence(G)
    assert G.graph["root"] == 4
    assert G.number_of_nodes() == len(tree)
    # edges count nodes, height counts levels
    assert nx.dag_longest_path_length(G) == tree.height() - 1
    assert G.nodes[4] == {"value": "4", "height": 3, "balance": 0}
    assert G.edges[4, 2]["direction"] == "LEFT"
    assert G.edges[4, 6]["direction"] == "RIGHT"


def test_export_leaves_and_balance():
    tree = AVLTree(items=[(k, None) for k in [2, 1, 3, 4]])

    G = to_networkx(tree)

    leaves = sorted(n for n in G.nodes if G.out_degree(n) == 0)
    assert leaves == [1, 4]
    assert G.nodes[3]["balance"] == -1
    assert G.nodes[2]["balance"] == -1


def test_export_empty_tree():
    G = to_networkx(AVLTree())

    assert G.number_of_nodes() == 0
    assert G.graph["root"] is None
