"""Binary tree nodes with parent links and the usual structural queries."""

from __future__ import annotations

from typing import Iterator, Optional


class BinaryTreeNode:
    """A node of a binary tree holding an integer value."""

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[BinaryTreeNode] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[BinaryTreeNode] = None
        self.right: Optional[BinaryTreeNode] = None

    def __repr__(self) -> str:
        return f"BinaryTreeNode({self.value!r})"

    # -- structure -------------------------------------------------------

    def insert_left(self, value: int) -> BinaryTreeNode:
        """Insert a new left child; an existing left child becomes its left child."""
        node = BinaryTreeNode(value, self)
        if self.left is not None:
            node.left = self.left
            node.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> BinaryTreeNode:
        """Insert a new right child; an existing right child becomes its right child."""
        node = BinaryTreeNode(value, self)
        if self.right is not None:
            node.right = self.right
            node.right.parent = node
        self.right = node
        return node

    def delete(self) -> None:
        """Detach this subtree from its parent and break every link inside it."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            if parent.right is self:
                parent.right = None
        for node in list(self._nodes_with_level()):
            current = node[0]
            current.parent = None
            current.left = None
            current.right = None

    # -- predicates ------------------------------------------------------

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """True when the node has no parent."""
        return self.parent is None

    def is_full(self) -> bool:
        """True when every node of the subtree has zero or two children."""
        return all(
            (node.left is None) == (node.right is None)
            for node, _ in self._nodes_with_level()
        )

    def is_perfect(self) -> bool:
        """True when the subtree is full and all its leaves share one depth."""
        if not self.is_full():
            return False
        leaf_levels = {level for node, level in self._nodes_with_level() if node.is_leaf()}
        return len(leaf_levels) == 1

    # -- traversals ------------------------------------------------------

    def preorder(self) -> Iterator[int]:
        """Yield values in pre-order: node, left, right."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[int]:
        """Yield values in in-order: left, node, right."""
        stack: list[BinaryTreeNode] = []
        node: Optional[BinaryTreeNode] = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in post-order: left, right, node."""
        reversed_order = []
        stack = [self]
        while stack:
            node = stack.pop()
            reversed_order.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        yield from reversed(reversed_order)

    # -- measurements ----------------------------------------------------

    def height(self) -> int:
        """Number of edges on the longest path down to a leaf."""
        return max(level for _, level in self._nodes_with_level())

    def depth(self) -> int:
        """Number of edges between this node and the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def size(self) -> int:
        """Number of nodes in the subtree."""
        return sum(1 for _ in self._nodes_with_level())

    def leaves(self) -> int:
        """Number of leaves in the subtree."""
        return sum(1 for node, _ in self._nodes_with_level() if node.is_leaf())

    def internal_nodes(self) -> int:
        """Number of nodes in the subtree with at least one child."""
        return sum(1 for node, _ in self._nodes_with_level() if not node.is_leaf())

    def balance(self) -> int:
        """Left height minus right height, counting a missing child as -1."""
        left = self.left.height() if self.left is not None else -1
        right = self.right.height() if self.right is not None else -1
        return left - right

    # -- relatives -------------------------------------------------------

    def sibling(self) -> Optional[BinaryTreeNode]:
        """The other child of this node's parent, or None."""
        parent = self.parent
        if parent is None:
            return None
        return parent.right if parent.left is self else parent.left

    def uncle(self) -> Optional[BinaryTreeNode]:
        """The sibling of this node's parent, or None."""
        if self.parent is None:
            return None
        return self.parent.sibling()

    # -- helpers ---------------------------------------------------------

    def _nodes_with_level(self) -> Iterator[tuple[BinaryTreeNode, int]]:
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            yield node, level
            if node.right is not None:
                stack.append((node.right, level + 1))
            if node.left is not None:
                stack.append((node.left, level + 1))