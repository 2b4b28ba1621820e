"""Output strategy base class defining the interface for tree rendering.

Concrete strategies turn a tree into lines of text. They never modify the tree,
and they sort siblings with the shared ordering on every call, so rendering the
same tree content always produces the same text.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from treesketch.file_system_tree.tree_node import TreeNode


class TreeOutputStrategy(ABC):
    """Abstract base class for tree rendering formats.

    Subclasses implement stream_lines(), which yields one line at a time, each
    terminated by a newline. render() joins them into a single string.

    Example:
        >>> class NamesOnly(TreeOutputStrategy):
        ...     def stream_lines(self, node):
        ...         yield f"{node.name}\\n"
        ...         for child in node.children:
        ...             yield from self.stream_lines(child)
        >>> root = TreeNode("root")
        >>> _ = TreeNode("a", parent=root)
        >>> NamesOnly().render(root)
        'root\\na\\n'
    """

    @abstractmethod
    def stream_lines(self, node: TreeNode) -> Iterator[str]:
        """Generate the rendering of node and its subtree line by line.

        Args:
            node: The node to render. Its own name forms the first line.

        Yields:
            Lines of output, each ending with a newline.
        """
        pass

    def render(self, node: TreeNode) -> str:
        """Render node and its subtree as a single string."""
        return "".join(self.stream_lines(node))
