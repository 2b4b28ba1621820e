"""Operations offered to an application shell.

These functions tie the scanner, the store, the renderers and the JSON form
together. A shell (a GUI, the bundled CLI, a script) supplies paths and user
choices and shows the returned text and messages; the tree logic stays here.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from treesketch.exceptions import TreeBuildError
from treesketch.exclusion_rules.ignore_file import IGNORE_FILE_NAME
from treesketch.file_system_tree.tree_builder import build_tree
from treesketch.file_system_tree.tree_node import TreeNode
from treesketch.output_strategies import get_strategy
from treesketch.serialization import deserialize_for_load, serialize_for_save
from treesketch.tree_store.store import TreeStore
from treesketch.types import PathType

logger = logging.getLogger(__name__)

__all__ = [
    "ScanResult",
    "build_tree",
    "deserialize_for_load",
    "export_tree",
    "import_tree",
    "render",
    "scan_into",
    "serialize_for_save",
]


def render(tree: TreeNode, output_format: str = "ascii") -> str:
    """Render a tree as text.

    Args:
        tree: Root of the tree to render.
        output_format: "ascii" for box-drawing art, "list" for a nested list.

    Returns:
        The rendering, one line per node.

    Raises:
        ValueError: If the format is not supported.
    """
    return get_strategy(output_format).render(tree)


@dataclass(frozen=True)
class ScanResult:
    """Outcome of scanning a directory into a store.

    Attributes:
        replaced: Whether the store now holds the new scan.
        message: Human-readable description, suitable for display.
        tree: The tree the store holds afterwards.
    """

    replaced: bool
    message: str
    tree: TreeNode


def scan_into(
    store: TreeStore,
    root_path: PathType,
    ignore_names: Optional[Iterable[str]] = None,
    use_ignore_file: bool = False,
    ignore_file_name: str = IGNORE_FILE_NAME,
) -> ScanResult:
    """Scan a directory and make it the store's tree, unless the scan is unusable.

    The current tree is kept when the root cannot be scanned, and also when the
    scan finds nothing (an empty folder, or one whose contents are all excluded).

    Args:
        store: Store whose tree should be replaced.
        root_path: Directory to scan.
        ignore_names: Names to exclude at every level.
        use_ignore_file: Whether to read each directory's ignore file.
        ignore_file_name: Name of the ignore file.

    Returns:
        What happened. Failing to access the root is reported here, not raised.
    """
    try:
        scanned = build_tree(root_path, ignore_names, use_ignore_file, ignore_file_name)
    except (TreeBuildError, NotADirectoryError) as e:
        logger.error("Error generating tree: %s", e)
        return ScanResult(False, f"An error occurred while generating the tree: {e}", store.root)

    if not scanned.children:
        return ScanResult(
            False,
            f'The selected folder "{scanned.name}" or its contents were fully ignored or empty, '
            "resulting in an empty tree. The previous tree has been retained.",
            store.root,
        )

    store.replace_root(scanned)
    return ScanResult(True, "Directory tree generated successfully!", store.root)


def export_tree(store: TreeStore) -> Dict[str, Any]:
    """Serialize the store's tree for saving."""
    return serialize_for_save(store.root)


def import_tree(store: TreeStore, data: Any) -> TreeNode:
    """Replace the store's tree with deserialized data.

    Raises:
        TreeValidationError: If the data is not a valid tree. The store is unchanged.
    """
    root = deserialize_for_load(data)
    store.replace_root(root)
    return root
