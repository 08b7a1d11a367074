import pytest

from zippers import rose, tree
from zippers.tree import Leaf, Node


def node(value, left=Leaf, right=Leaf):
    return Node(value, left, right)


@pytest.fixture
def binary():
    r"""
            1
          /   \
         2     3
        / \
       4   5
    """
    return node(1, node(2, node(4), node(5)), node(3))


@pytest.fixture
def rose_tree():
    r"""
            a
          /   \
         b     e
         ^     ^
        c d   f g
    """
    leaf = rose.leaf
    return rose.RoseTree('a', (
        rose.RoseTree('b', (leaf('c'), leaf('d'))),
        rose.RoseTree('e', (leaf('f'), leaf('g'))),
    ))


@pytest.fixture
def binary_zipper(binary):
    return tree.from_standard_tree(binary)


@pytest.fixture
def rose_zipper(rose_tree):
    return rose.from_standard_tree(rose_tree)
