# bintrees-kit

A small library of linked binary tree nodes. Each node holds an integer value,
a link to its parent and links to its two children. Nodes offer insertion,
traversals, measurements, shape checks and an ASCII drawing of the tree.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Building a tree

```python
from bintrees_kit.node import BinaryTreeNode
from bintrees_kit.render import render, print_tree

root = BinaryTreeNode(98)
left = root.insert_left(12)
right = root.insert_right(402)
left.insert_right(54)
root.insert_right(128)   # 128 takes the right slot; 402 becomes its right child

print_tree(root)
```

`BinaryTreeNode(value, parent=None)` creates a node; it does not attach itself
to the parent, so when building by hand set `parent.left` or `parent.right`
yourself. `insert_left(value)` and `insert_right(value)` create the new node,
attach it directly under the node they are called on and return it; a child
already in that slot moves down one level, to the same side beneath the new
node.

## What a node offers

- `value`, `parent`, `left`, `right`: the node's data and links
- `is_leaf()`: no children; `is_root()`: no parent
- `preorder()`, `inorder()`, `postorder()`: iterators over the subtree's values
- `height()`: edges on the longest downward path (a leaf has height 0)
- `depth()`: edges up to the root
- `size()`: nodes in the subtree
- `leaves()`: leaves in the subtree
- `internal_nodes()`: nodes in the subtree with at least one child
- `balance()`: height of the left child minus height of the right child,
  counting a missing child as -1
- `is_full()`: every node has zero or two children
- `is_perfect()`: full, with all leaves at the same level
- `sibling()`: the other child of the parent; `uncle()`: the parent's
  sibling; each returns `None` when there is none
- `delete()`: detach the subtree from its parent and clear every link inside it

## Drawing

`render(tree)` from `bintrees_kit.render` returns the drawing as a string, one
line per level, each value shown as `(nnn)` (zero-padded to three digits) and
joined to its children by dashed lines; trailing spaces are trimmed.
`render(None)` returns an empty string. `print_tree(tree, file=None)` writes
the same drawing to `file`, or to standard output.

```
       .-------(098)-------.
  .--(012)--.         .--(402)--.
(006)     (016)     (256)     (512)
```

## Demonstrations

`bintrees_kit.demo` holds numbered examples, 0 to 18, one per operation. Each
builds a small tree, draws it and prints the results of the operation.

```
bintrees-demo 9
```

runs example 9 (heights). Several numbers may be given; with none, every
example runs in order. From Python, `bintrees_kit.demo.run_example(number, out)`
writes the same output to any text stream (standard output by default) and
raises `ValueError` for an unknown number.