import bisect
import random

import pytest

from avltree import AVLTree

N = 10_000


@pytest.fixture(scope="session")
def shuffled():
    values = list(range(N))
    random.Random(0).shuffle(values)
    yield values


def build_tree(values):
    tree = AVLTree()
    for k in values:
        tree.insert(k, k)
    return tree


def build_sorted_list(values):
    s = []
    for k in values:
        bisect.insort(s, k)
    return s


@pytest.mark.benchmark
@pytest.mark.parametrize("build", [build_tree, build_sorted_list], ids=["avl", "bisect"])
def test_insert(benchmark, shuffled, build):
    benchmark(build, shuffled)


@pytest.mark.benchmark
def test_find(benchmark, shuffled):
    tree = build_tree(shuffled)
    benchmark(lambda: [tree.find(k) for k in shuffled])


@pytest.mark.benchmark
def test_delete(benchmark, shuffled):
    def delete_all():
        tree = build_tree(shuffled)
        for k in shuffled:
            tree.delete(k)

    benchmark(delete_all)
