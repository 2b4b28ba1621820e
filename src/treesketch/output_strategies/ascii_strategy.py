"""ASCII-art tree rendering in the style of the Unix ``tree`` command."""

from typing import Iterator

from treesketch.file_system_tree.tree_node import TreeNode
from treesketch.sorting import sorted_children

from .base_strategy import TreeOutputStrategy


class AsciiTreeStrategy(TreeOutputStrategy):
    """Renders a tree with box-drawing connectors.

    The node passed in is printed as a bare name. Every descendant gets a connector,
    "└── " for the last of its sorted siblings and "├── " otherwise, after an indent
    inherited from its ancestors.

    Example:
        >>> from treesketch.types import NodeKind
        >>> root = TreeNode("proj", kind=NodeKind.FOLDER)
        >>> src = TreeNode("src", parent=root, kind=NodeKind.FOLDER)
        >>> _ = TreeNode("main.py", parent=src)
        >>> _ = TreeNode("README.md", parent=root)
        >>> print(AsciiTreeStrategy().render(root), end="")
        proj
        ├── src
        │   └── main.py
        └── README.md
    """

    LAST = "└── "
    BRANCH = "├── "
    BLANK = "    "
    PIPE = "│   "

    def stream_lines(self, node: TreeNode) -> Iterator[str]:
        yield f"{node.name}\n"
        yield from self._stream_children(node, "")

    def _stream_children(self, node: TreeNode, prefix: str) -> Iterator[str]:
        children = sorted_children(node)
        for i, child in enumerate(children):
            is_last = i == len(children) - 1
            yield f"{prefix}{self.LAST if is_last else self.BRANCH}{child.name}\n"
            yield from self._stream_children(child, prefix + (self.BLANK if is_last else self.PIPE))
