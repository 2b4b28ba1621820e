"""JSON form of a sketched tree.

A node is written as an object with a ``name``, a ``type`` of "folder", "file" or
"error", a ``children`` list on folders, and a ``pinnedOrder`` on nodes named
"...". Editing state (ids and collapse flags) is not written; it is reassigned when
a tree is loaded into a store.

Loading is strict. Every node is checked, and a malformed object is rejected with
a TreeValidationError that names the offending node, before it can replace a live
tree.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from treesketch.exceptions import TreeValidationError
from treesketch.file_system_tree.tree_node import DEFAULT_ROOT_NAME, PINNED_NAME, ROOT_ID, TreeNode
from treesketch.types import NodeKind, PathType

logger = logging.getLogger(__name__)

# Older saves use "kind" for the type and "userOrder" for the pinned-order key
TYPE_KEYS = ("type", "kind")
PINNED_KEYS = ("pinnedOrder", "userOrder")


def serialize_for_save(tree: TreeNode) -> Dict[str, Any]:
    """Convert a tree into plain JSON-compatible data.

    Example:
        >>> root = TreeNode("proj", kind=NodeKind.FOLDER, node_id="root", collapsed=True)
        >>> _ = TreeNode("...", parent=root, pinned_order=5)
        >>> serialize_for_save(root)
        {'name': 'proj', 'type': 'folder', 'children': [{'name': '...', 'type': 'file', 'pinnedOrder': 5}]}
    """
    data: Dict[str, Any] = {"name": tree.name, "type": tree.kind.value}
    if tree.is_folder:
        data["children"] = [serialize_for_save(child) for child in tree.children]
    if tree.pinned_order is not None:
        data["pinnedOrder"] = tree.pinned_order
    return data


def validate_shape(candidate: Any) -> bool:
    """Check whether an object looks like a saved tree at the top level.

    The object must have a string ``name``, a ``type`` of "folder" or "file", and a
    list of ``children``. Nested nodes are checked by deserialize_for_load().

    Example:
        >>> validate_shape({"name": "proj", "type": "folder", "children": []})
        True
        >>> validate_shape({"name": "proj", "type": "folder"})
        False
    """
    if not isinstance(candidate, Mapping):
        return False
    node_type = _field(candidate, TYPE_KEYS)
    return (
        isinstance(candidate.get("name"), str)
        and node_type in (NodeKind.FOLDER.value, NodeKind.FILE.value)
        and isinstance(candidate.get("children"), list)
    )


def deserialize_for_load(data: Any) -> TreeNode:
    """Build a tree from data produced by serialize_for_save().

    The root receives the reserved root id and is always a folder. A root without
    a name is called "project_root".

    Args:
        data: Parsed JSON data.

    Returns:
        The root of the new tree. Ids of other nodes are left for a store to assign.

    Raises:
        TreeValidationError: If the data is not a valid tree.
    """
    if not validate_shape(data):
        raise TreeValidationError(
            "expected an object with a string 'name', a 'type' of folder or file, and a 'children' list"
        )

    root = _parse_node(data, "$", parent=None)
    root.kind = NodeKind.FOLDER
    root.node_id = ROOT_ID
    if not root.name:
        root.name = DEFAULT_ROOT_NAME
    return root


def _field(data: Mapping, keys: tuple) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _parse_node(data: Any, location: str, parent: Optional[TreeNode]) -> TreeNode:
    if not isinstance(data, Mapping):
        raise TreeValidationError("node must be an object", location)

    name = data.get("name")
    if not isinstance(name, str):
        raise TreeValidationError("'name' must be a string", location)
    if not name and parent is not None:
        raise TreeValidationError("'name' cannot be empty", location)

    try:
        kind = NodeKind(_field(data, TYPE_KEYS))
    except ValueError:
        raise TreeValidationError("'type' must be one of folder, file, error", location) from None

    children = data.get("children")
    if children is not None and not isinstance(children, list):
        raise TreeValidationError("'children' must be a list", location)
    if kind is NodeKind.FOLDER and children is None:
        raise TreeValidationError("folders must have a 'children' list", location)
    if kind is not NodeKind.FOLDER and children:
        raise TreeValidationError(f"a {kind.value} cannot have children", location)

    pinned_order = _field(data, PINNED_KEYS)
    if name == PINNED_NAME:
        if pinned_order is not None:
            numeric = isinstance(pinned_order, (int, float)) and not isinstance(pinned_order, bool)
            if not numeric or not math.isfinite(pinned_order):
                raise TreeValidationError("'pinnedOrder' must be a number", location)
            pinned_order = int(pinned_order)
    elif pinned_order is not None:
        logger.debug("Dropping pinned order of %r at %s", name, location)
        pinned_order = None

    node = TreeNode(name, parent=parent, kind=kind, pinned_order=pinned_order)
    for i, child in enumerate(children or ()):
        _parse_node(child, f"{location}.children[{i}]", parent=node)
    return node


def dumps_tree(tree: TreeNode) -> str:
    """Serialize a tree to JSON text, indented as in saved files."""
    return json.dumps(serialize_for_save(tree), indent=2, ensure_ascii=False)


def loads_tree(text: str) -> TreeNode:
    """Parse JSON text into a tree.

    Raises:
        TreeValidationError: If the text is not JSON or not a valid tree.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TreeValidationError(f"not valid JSON ({e.msg} at line {e.lineno}, column {e.colno})") from e
    return deserialize_for_load(data)


def save_tree(path: PathType, tree: TreeNode) -> None:
    """Write a tree to a JSON file."""
    Path(path).write_text(dumps_tree(tree) + "\n", encoding="utf-8")
    logger.info("Saved tree %r to %s", tree.name, path)


def load_tree(path: PathType) -> TreeNode:
    """Read a tree from a JSON file.

    Raises:
        OSError: If the file cannot be read.
        TreeValidationError: If the file does not contain a valid tree.
    """
    tree = loads_tree(Path(path).read_text(encoding="utf-8"))
    logger.info("Loaded tree %r from %s", tree.name, path)
    return tree
