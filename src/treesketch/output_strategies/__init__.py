"""Text renderings of a sketched tree."""

from typing import Dict, Type

from treesketch.file_system_tree.tree_node import TreeNode

from .ascii_strategy import AsciiTreeStrategy
from .base_strategy import TreeOutputStrategy
from .list_strategy import ListTreeStrategy

STRATEGIES: Dict[str, Type[TreeOutputStrategy]] = {
    "ascii": AsciiTreeStrategy,
    "list": ListTreeStrategy,
}


def get_strategy(output_format: str) -> TreeOutputStrategy:
    """Look up the strategy for a format name.

    Raises:
        ValueError: If the format is not supported.
    """
    try:
        return STRATEGIES[output_format]()
    except KeyError:
        raise ValueError(
            f"Unsupported output format: {output_format}. Must be one of: {', '.join(STRATEGIES)}"
        ) from None


def to_ascii_tree(node: TreeNode) -> str:
    return AsciiTreeStrategy().render(node)


def to_list_tree(node: TreeNode) -> str:
    return ListTreeStrategy().render(node)


__all__ = [
    "AsciiTreeStrategy",
    "ListTreeStrategy",
    "STRATEGIES",
    "TreeOutputStrategy",
    "get_strategy",
    "to_ascii_tree",
    "to_list_tree",
]
