import pytest

from bintree.node import Node
from bintree.traversal import inorder, postorder, preorder


@pytest.fixture
def sample():
    root = Node(98)
    left = root.insert_left(12)
    right = root.insert_right(402)
    left.insert_left(6)
    left.insert_right(56)
    right.insert_left(256)
    right.insert_right(512)
    return root


def test_preorder(sample):
    assert list(preorder(sample)) == [98, 12, 6, 56, 402, 256, 512]


def test_inorder(sample):
    assert list(inorder(sample)) == [6, 12, 56, 98, 256, 402, 512]


def test_postorder(sample):
    assert list(postorder(sample)) == [6, 56, 12, 256, 512, 402, 98]


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_empty_tree_yields_nothing(walk):
    assert list(walk(None)) == []


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_single_node(walk):
    assert list(walk(Node(7))) == [7]


@pytest.mark.parametrize("walk", [preorder, inorder, postorder])
def test_traversals_visit_every_value_once(sample, walk):
    assert sorted(walk(sample)) == [6, 12, 56, 98, 256, 402, 512]


def test_inorder_of_search_tree_is_sorted(sample):
    values = list(inorder(sample))
    assert values == sorted(values)


def test_deep_left_chain_does_not_overflow():
    root = Node(0)
    node = root
    for value in range(1, 5000):
        node = node.insert_left(value)
    assert list(preorder(root)) == list(range(5000))
    assert list(inorder(root)) == list(range(4999, -1, -1))
    assert list(postorder(root)) == list(range(4999, -1, -1))


def test_right_chain_orders():
    root = Node(1)
    root.insert_right(2).insert_right(3)
    assert list(preorder(root)) == [1, 2, 3]
    assert list(inorder(root)) == [1, 2, 3]
    assert list(postorder(root)) == [3, 2, 1]