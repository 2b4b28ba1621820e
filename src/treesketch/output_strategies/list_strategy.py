"""Markdown-style nested list rendering."""

from typing import Iterator

from treesketch.file_system_tree.tree_node import TreeNode
from treesketch.sorting import sorted_children

from .base_strategy import TreeOutputStrategy


class ListTreeStrategy(TreeOutputStrategy):
    """Renders a tree as a nested list indented by two spaces per level.

    Example:
        >>> from treesketch.types import NodeKind
        >>> root = TreeNode("proj", kind=NodeKind.FOLDER)
        >>> src = TreeNode("src", parent=root, kind=NodeKind.FOLDER)
        >>> _ = TreeNode("main.py", parent=src)
        >>> print(ListTreeStrategy().render(root), end="")
        - proj
          - src
            - main.py
    """

    INDENT = "  "

    def stream_lines(self, node: TreeNode, level: int = 0) -> Iterator[str]:
        yield f"{self.INDENT * level}- {node.name}\n"
        for child in sorted_children(node):
            yield from self.stream_lines(child, level + 1)
