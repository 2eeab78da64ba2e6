import io

from bintrees_kit.node import BinaryTreeNode
from bintrees_kit.render import print_tree, render


def _attach(parent, value, side):
    child = BinaryTreeNode(value, parent)
    setattr(parent, side, child)
    return child


def _sample():
    root = BinaryTreeNode(98)
    left = _attach(root, 12, "left")
    right = _attach(root, 402, "right")
    _attach(left, 6, "left")
    _attach(left, 16, "right")
    _attach(right, 256, "left")
    _attach(right, 512, "right")
    return root


def test_render_worked_example():
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert render(_sample()) == expected


def test_render_single_node():
    assert render(BinaryTreeNode(98)) == "(098)\n"


def test_render_empty_tree():
    assert render(None) == ""


def test_line_count_follows_height():
    root = _sample()
    root.left.left.insert_left(3)
    lines = render(root).splitlines()
    assert len(lines) == root.height() + 1


def test_every_value_appears_once():
    root = _sample()
    text = render(root)
    for value in root.preorder():
        assert text.count(f"({value:03d})") == 1


def test_no_trailing_spaces():
    for line in render(_sample()).splitlines():
        assert line == line.rstrip(" ")


def test_print_tree_writes_rendering():
    root = _sample()
    buffer = io.StringIO()
    print_tree(root, buffer)
    assert buffer.getvalue() == render(root)


def test_print_tree_none_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""