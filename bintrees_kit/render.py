"""Text drawing of a binary tree, one line per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintrees_kit.node import BinaryTreeNode

_ROW_WIDTH = 255


def _put(rows: list[list[str]], level: int, index: int, char: str) -> None:
    if index < 0:
        return
    row = rows[level]
    if index >= len(row):
        row.extend(" " * (index - len(row) + 1))
    row[index] = char


def _layout(node: Optional[BinaryTreeNode], offset: int, level: int, rows: list[list[str]]) -> int:
    if node is None:
        return 0
    is_left = node.parent is not None and node.parent.left is node
    label = f"({node.value:03d})"
    width = len(label)
    left = _layout(node.left, offset, level + 1, rows)
    right = _layout(node.right, offset + left + width, level + 1, rows)
    for i, char in enumerate(label):
        _put(rows, level, offset + left + i, char)
    if level:
        if is_left:
            for i in range(width + right):
                _put(rows, level - 1, offset + left + width // 2 + i, "-")
        else:
            for i in range(left + width):
                _put(rows, level - 1, offset - width // 2 + i, "-")
        _put(rows, level - 1, offset + left + width // 2, ".")
    return left + width + right


def render(tree: Optional[BinaryTreeNode]) -> str:
    """Return the drawing of ``tree``, each line ending in a newline."""
    if tree is None:
        return ""
    rows = [[" "] * _ROW_WIDTH for _ in range(tree.height() + 1)]
    _layout(tree, 0, 0, rows)
    lines = []
    for row in rows:
        line = "".join(row)
        stripped = line.rstrip(" ")
        if len(stripped) < 2:
            stripped = line[:2]
        lines.append(stripped)
    return "".join(f"{line}\n" for line in lines)


def print_tree(tree: Optional[BinaryTreeNode], file: Optional[TextIO] = None) -> None:
    """Write the drawing of ``tree`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render(tree))