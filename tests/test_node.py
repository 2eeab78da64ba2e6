import pytest

from bintrees_kit.node import BinaryTreeNode


def _attach(parent, value, side):
    child = BinaryTreeNode(value, parent)
    setattr(parent, side, child)
    return child


@pytest.fixture
def bst():
    root = BinaryTreeNode(98)
    left = _attach(root, 12, "left")
    right = _attach(root, 402, "right")
    _attach(left, 6, "left")
    _attach(left, 56, "right")
    _attach(right, 256, "left")
    _attach(right, 512, "right")
    return root


@pytest.fixture
def uneven():
    root = BinaryTreeNode(98)
    _attach(root, 12, "left")
    _attach(root, 402, "right")
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def test_constructor_links_parent():
    root = BinaryTreeNode(98)
    child = BinaryTreeNode(12, root)
    assert child.parent is root
    assert child.value == 12
    assert child.left is None and child.right is None


def test_insert_left_pushes_existing_child_down():
    root = BinaryTreeNode(98)
    old = _attach(root, 12, "left")
    new = root.insert_left(54)
    assert root.left is new
    assert new.parent is root
    assert new.left is old
    assert old.parent is new
    assert new.right is None


def test_insert_right_pushes_existing_child_down():
    root = BinaryTreeNode(98)
    old = _attach(root, 402, "right")
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None


def test_insert_into_empty_slot():
    root = BinaryTreeNode(98)
    new = root.insert_left(54)
    assert root.left is new
    assert new.is_leaf()


def test_delete_whole_tree_breaks_links(bst):
    nodes = [bst, bst.left, bst.right, bst.left.left]
    bst.delete()
    for node in nodes:
        assert node.left is None and node.right is None and node.parent is None


def test_is_leaf_and_is_root(uneven):
    assert uneven.is_root()
    assert not uneven.is_leaf()
    assert not uneven.right.is_root()
    assert not uneven.right.is_leaf()
    assert uneven.right.right.is_leaf()


def test_preorder_starts_with_root(bst):
    values = list(bst.preorder())
    assert values[0] == bst.value
    assert values[1] == bst.left.value
    assert values[-1] == bst.right.right.value


def test_inorder_of_search_tree_is_sorted(bst):
    values = list(bst.inorder())
    assert values == sorted([98, 12, 402, 6, 56, 256, 512])


def test_postorder_ends_with_root(bst):
    values = list(bst.postorder())
    assert values[-1] == bst.value
    assert values[0] == bst.left.left.value
    assert sorted(values) == sorted(bst.preorder())


def test_traversals_on_single_node():
    node = BinaryTreeNode(7)
    assert list(node.preorder()) == list(node.inorder()) == list(node.postorder()) == [7]


def test_height_of_leaf_and_parent(uneven):
    leaf = uneven.left.right
    assert leaf.height() == 0
    assert uneven.left.height() == leaf.height() + 1
    assert uneven.height() == uneven.left.height() + 1


def test_depth_grows_by_one_per_level(uneven):
    assert uneven.depth() == 0
    assert uneven.right.depth() == uneven.depth() + 1
    assert uneven.left.right.depth() == uneven.left.depth() + 1


def test_size_matches_traversal(uneven):
    assert uneven.size() == len(list(uneven.preorder()))
    assert uneven.left.right.size() == 1


def test_leaves_and_internal_nodes_partition_size(uneven):
    assert uneven.leaves() + uneven.internal_nodes() == uneven.size()
    leaf = uneven.left.right
    assert leaf.leaves() == 1
    assert leaf.internal_nodes() == 0


def test_balance_of_leaf_is_zero(uneven):
    assert uneven.left.right.balance() == 0


def test_balance_matches_child_heights(bst):
    bst.left.left.insert_left(3)
    assert bst.balance() == bst.left.height() - bst.right.height()
    assert bst.balance() > 0


def test_balance_missing_side_is_minus_one():
    root = BinaryTreeNode(98)
    child = root.insert_left(12)
    assert root.balance() == child.height() + 1
    assert child.balance() == 0


def test_is_full(uneven):
    uneven.left.left = BinaryTreeNode(10, uneven.left)
    assert not uneven.is_full()
    assert uneven.left.is_full()
    assert not uneven.right.is_full()


def test_is_perfect_changes_with_shape():
    root = BinaryTreeNode(98)
    _attach(root, 12, "left")
    _attach(root, 402, "right")
    root.left.insert_right(54)
    root.insert_right(128)
    _attach(root.left, 10, "left")
    _attach(root.right, 10, "left")
    assert root.is_perfect()
    _attach(root.right.right, 10, "left")
    assert not root.is_perfect()
    _attach(root.right.right, 10, "right")
    assert not root.is_perfect()


def test_perfect_tree_size_invariant(bst):
    assert bst.is_perfect()
    assert bst.size() == 2 ** (bst.height() + 1) - 1


def test_sibling(bst):
    assert bst.left.sibling() is bst.right
    assert bst.right.left.sibling() is bst.right.right
    assert bst.sibling() is None


def test_sibling_missing():
    root = BinaryTreeNode(98)
    child = root.insert_left(12)
    assert child.sibling() is None


def test_uncle(bst):
    assert bst.right.left.uncle() is bst.left
    assert bst.left.right.uncle() is bst.right
    assert bst.left.uncle() is None
    assert bst.uncle() is None