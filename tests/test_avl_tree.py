import math

from hypothesis import given
from hypothesis import strategies as st

from structkit.avl_tree import AVLNode, AVLTree


def _insert(tree, node, key):
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = _insert(tree, node.left, key)
    elif key > node.key:
        node.right = _insert(tree, node.right, key)
    else:
        return node
    return tree._balance_node(node)


def _build(keys):
    tree = AVLTree()
    for key in keys:
        tree._root = _insert(tree, tree._root, key)
    return tree


def test_empty_tree():
    tree = AVLTree()
    assert tree.height() == 0
    assert tree.is_balanced()


def test_sequential_inserts_form_perfect_tree():
    tree = _build(range(1, 8))
    assert tree.height() == 3
    assert tree.is_balanced()
    assert [node.key for node in tree._in_order(tree._root)] == list(range(1, 8))
    assert tree._root.key == 4


def test_degenerate_chain_detected_and_rebalanced():
    tree = AVLTree()
    leaf = AVLNode(3)
    middle = AVLNode(2, right=leaf, height=2)
    top = AVLNode(1, right=middle, height=3)
    tree._root = top
    assert not tree.is_balanced()
    tree._root = tree._balance_node(top)
    assert tree.is_balanced()
    assert tree._root.key == 2
    assert tree.height() == 2


def test_left_right_case():
    tree = AVLTree()
    inner = AVLNode(2)
    left = AVLNode(1, right=inner, height=2)
    top = AVLNode(3, left=left, height=3)
    tree._root = tree._balance_node(top)
    assert tree._root.key == 2
    assert [n.key for n in tree._pre_order(tree._root)] == [2, 1, 3]
    assert tree.is_balanced()


@given(st.lists(st.integers(), max_size=300))
def test_random_inserts_stay_balanced(keys):
    tree = _build(keys)
    distinct = sorted(set(keys))
    assert [node.key for node in tree._in_order(tree._root)] == distinct
    assert tree.is_balanced()
    assert tree.height() <= 1.45 * math.log2(len(distinct) + 2)
    post = [n.key for n in tree._post_order(tree._root)]
    assert post[-1:] == ([tree._root.key] if distinct else [])