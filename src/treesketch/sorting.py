"""Sibling ordering shared by every renderer and editor view.

Children are stored in whatever order they were scanned, inserted or loaded. This
ordering is applied each time they are displayed:

1. Folders before files. Error nodes sort with files.
2. Within a kind, unpinned nodes before pinned ones.
3. Pinned nodes by ascending pinned-order key, earliest pinned first.
4. Otherwise by name, ignoring case, with the exact name as final tie-break.
"""

from typing import List, Tuple

from treesketch.file_system_tree.tree_node import TreeNode

SortKey = Tuple[int, int, int, str, str]


def sort_key(node: TreeNode) -> SortKey:
    """Compute the sort key of a node.

    Names compare by code point after case folding, then by exact name, so the order
    does not depend on the user's locale. This differs from locale collation in two
    visible ways: "A" sorts before "a", and punctuation such as "_" sorts after
    digits ("1a" before "_a").

    Example:
        >>> from treesketch.types import NodeKind
        >>> sort_key(TreeNode("Src", kind=NodeKind.FOLDER))
        (0, 0, 0, 'src', 'Src')
    """
    pinned = node.pinned_order is not None
    return (
        0 if node.is_folder else 1,
        1 if pinned else 0,
        node.pinned_order if pinned else 0,
        node.name.casefold(),
        node.name,
    )


def compare_nodes(a: TreeNode, b: TreeNode) -> int:
    """Compare two sibling nodes.

    Returns:
        -1 if a sorts before b, 1 if after, 0 if they are indistinguishable.
    """
    key_a, key_b = sort_key(a), sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sorted_children(node: TreeNode) -> List[TreeNode]:
    """Return a node's children in display order without reordering the node itself."""
    return sorted(node.children, key=sort_key)
