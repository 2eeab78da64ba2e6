"""Worked examples that build small trees, draw them and report on them."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from bintrees_kit.node import BinaryTreeNode
from bintrees_kit.render import print_tree

_NULL = "(nil)"


def _child(parent: BinaryTreeNode, value: int) -> BinaryTreeNode:
    return BinaryTreeNode(value, parent)


def _seven_node_tree(left_right: int) -> BinaryTreeNode:
    root = BinaryTreeNode(98)
    root.left = _child(root, 12)
    root.right = _child(root, 402)
    root.left.left = _child(root.left, 6)
    root.left.right = _child(root.left, left_right)
    root.right.left = _child(root.right, 256)
    root.right.right = _child(root.right, 512)
    return root


def _five_node_tree() -> BinaryTreeNode:
    root = BinaryTreeNode(98)
    root.left = _child(root, 12)
    root.right = _child(root, 402)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _relatives_tree() -> BinaryTreeNode:
    root = BinaryTreeNode(98)
    root.left = _child(root, 12)
    root.right = _child(root, 128)
    root.left.right = _child(root.left, 54)
    root.right.right = _child(root.right, 402)
    root.left.left = _child(root.left, 10)
    root.right.left = _child(root.right, 110)
    root.right.right.left = _child(root.right.right, 200)
    root.right.right.right = _child(root.right.right, 512)
    return root


def _example_node(out: TextIO) -> None:
    root = _seven_node_tree(16)
    print_tree(root, out)


def _example_insert(out: TextIO, side: str) -> None:
    root = BinaryTreeNode(98)
    root.left = _child(root, 12)
    root.right = _child(root, 402)
    print_tree(root, out)
    out.write("\n")
    if side == "left":
        root.right.insert_left(128)
        root.insert_left(54)
    else:
        root.left.insert_right(54)
        root.insert_right(128)
    print_tree(root, out)


def _example_delete(out: TextIO) -> None:
    root = _five_node_tree()
    print_tree(root, out)
    root.delete()


def _report_three(
    out: TextIO,
    template: str,
    query: Callable[[BinaryTreeNode], int],
) -> None:
    root = _five_node_tree()
    print_tree(root, out)
    assert root.right is not None and root.right.right is not None
    assert root.left is not None and root.left.right is not None
    for node in (root, root.right, root.right.right if "a " in template else root.left.right):
        out.write(template.format(node.value, int(query(node))))


def _example_traversal(out: TextIO, order: str) -> None:
    root = _seven_node_tree(56)
    print_tree(root, out)
    for value in getattr(root, order)():
        out.write(f"{value}\n")


def _example_balance(out: TextIO) -> None:
    root = _five_node_tree()
    root.insert_left(45)
    assert root.left is not None
    root.left.insert_right(50)
    assert root.left.left is not None
    root.left.left.insert_left(10)
    assert root.left.left.left is not None
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    assert root.right is not None and root.left.left.right is not None
    for node in (root, root.right, root.left.left.right):
        out.write(f"Balance of {node.value}: {node.balance():+d}\n")


def _example_full(out: TextIO) -> None:
    root = _five_node_tree()
    assert root.left is not None and root.right is not None
    root.left.left = _child(root.left, 10)
    print_tree(root, out)
    for node in (root, root.left, root.right):
        out.write(f"Is {node.value} full: {int(node.is_full())}\n")


def _example_perfect(out: TextIO) -> None:
    root = _five_node_tree()
    assert root.left is not None and root.right is not None
    root.left.left = _child(root.left, 10)
    root.right.left = _child(root.right, 10)
    print_tree(root, out)
    out.write(f"Perfect: {int(root.is_perfect())}\n\n")

    last = root.right.right
    assert last is not None
    last.left = _child(last, 10)
    print_tree(root, out)
    out.write(f"Perfect: {int(root.is_perfect())}\n\n")

    last.right = _child(last, 10)
    print_tree(root, out)
    out.write(f"Perfect: {int(root.is_perfect())}\n")


def _describe(node: Optional[BinaryTreeNode]) -> str:
    return _NULL if node is None else str(node.value)


def _example_sibling(out: TextIO) -> None:
    root = _relatives_tree()
    print_tree(root, out)
    assert root.left is not None and root.right is not None
    assert root.right.left is not None and root.left.right is not None
    for node in (root.left, root.right.left, root.left.right, root):
        out.write(f"Sibling of {node.value}: {_describe(node.sibling())}\n")


def _example_uncle(out: TextIO) -> None:
    root = _relatives_tree()
    print_tree(root, out)
    assert root.left is not None and root.right is not None
    assert root.right.left is not None and root.left.right is not None
    for node in (root.right.left, root.left.right, root.left):
        out.write(f"Uncle of {node.value}: {_describe(node.uncle())}\n")


_EXAMPLES: dict[int, Callable[[TextIO], None]] = {
    0: _example_node,
    1: lambda out: _example_insert(out, "left"),
    2: lambda out: _example_insert(out, "right"),
    3: _example_delete,
    4: lambda out: _report_three(out, "Is {} a leaf: {}\n", BinaryTreeNode.is_leaf),
    5: lambda out: _report_three(out, "Is {} a root: {}\n", BinaryTreeNode.is_root),
    6: lambda out: _example_traversal(out, "preorder"),
    7: lambda out: _example_traversal(out, "inorder"),
    8: lambda out: _example_traversal(out, "postorder"),
    9: lambda out: _report_three(out, "Height from {}: {}\n", BinaryTreeNode.height),
    10: lambda out: _report_three(out, "Depth of {}: {}\n", BinaryTreeNode.depth),
    11: lambda out: _report_three(out, "Size of {}: {}\n", BinaryTreeNode.size),
    12: lambda out: _report_three(out, "Leaves in {}: {}\n", BinaryTreeNode.leaves),
    13: lambda out: _report_three(out, "Nodes in {}: {}\n", BinaryTreeNode.internal_nodes),
    14: _example_balance,
    15: _example_full,
    16: _example_perfect,
    17: _example_sibling,
    18: _example_uncle,
}

EXAMPLE_NUMBERS = tuple(sorted(_EXAMPLES))


def run_example(number: int, out: Optional[TextIO] = None) -> None:
    """Run the numbered example, writing its output to ``out`` (stdout by default)."""
    try:
        example = _EXAMPLES[number]
    except KeyError:
        raise ValueError(f"no example numbered {number}") from None
    example(sys.stdout if out is None else out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the examples named on the command line, or all of them."""
    parser = argparse.ArgumentParser(description="Run the binary tree examples.")
    parser.add_argument(
        "numbers",
        nargs="*",
        type=int,
        choices=EXAMPLE_NUMBERS,
        metavar="N",
        help=f"example number ({EXAMPLE_NUMBERS[0]}-{EXAMPLE_NUMBERS[-1]}); all when omitted",
    )
    args = parser.parse_args(argv)
    for number in args.numbers or EXAMPLE_NUMBERS:
        run_example(number, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())