"""Node representation for entries in a sketched tree."""

from typing import Any, Optional

from anytree import Node

from treesketch.types import NodeKind

# Reserved identifier of the single root node of a tree
ROOT_ID = "root"

# Name given to a root that has none, e.g. a fresh editor or a nameless import
DEFAULT_ROOT_NAME = "project_root"

# Sentinel name whose nodes carry a pinned-order key and sort last
PINNED_NAME = "..."

ERROR_SUFFIX = " (inaccessible)"


class TreeNode(Node):  # type: ignore
    """Node class representing a folder, file or error placeholder.

    Extends anytree.Node so that every node knows its parent, which keeps parent
    lookups constant-time. Editing state that only matters while the tree is held
    in a store (``node_id`` and ``collapsed``) lives on the node but is never
    persisted.

    Attributes:
        name (str): Display name, the basename for scanned entries.
        kind (NodeKind): Whether the node is a folder, a file or an error placeholder.
        node_id (Optional[str]): Identifier assigned by a TreeStore, None until assigned.
        collapsed (Optional[bool]): Whether an editor view hides the folder's children.
        pinned_order (Optional[int]): Millisecond timestamp, present only on nodes named "...".
        parent (Optional[TreeNode]): The parent node in the tree.
        children (tuple[TreeNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = TreeNode("root", kind=NodeKind.FOLDER)
        >>> child = TreeNode("notes.txt", parent=root)
        >>> child.kind.value
        'file'
        >>> root.is_folder
        True
        >>> child.parent is root
        True
    """

    def __init__(
        self,
        name: str,
        parent: Optional["TreeNode"] = None,
        kind: NodeKind = NodeKind.FILE,
        node_id: Optional[str] = None,
        collapsed: Optional[bool] = None,
        pinned_order: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a TreeNode.

        Args:
            name: The display name of the node.
            parent: The parent node. Defaults to None.
            kind: The node kind. Defaults to NodeKind.FILE.
            node_id: A preassigned identifier. Defaults to None.
            collapsed: Initial collapse state for folders. Defaults to None (unassigned).
            pinned_order: Pinned-order key. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.kind = NodeKind(kind)
        self.node_id = node_id
        self.collapsed = collapsed
        self.pinned_order = pinned_order

    @classmethod
    def error(cls, name: str, parent: Optional["TreeNode"] = None) -> "TreeNode":
        """Create an error placeholder for an entry that could not be read.

        Args:
            name: Basename of the unreadable entry.
            parent: The parent node. Defaults to None.

        Returns:
            A leaf node of kind ERROR whose name flags the entry as inaccessible.

        Example:
            >>> TreeNode.error("secrets").name
            'secrets (inaccessible)'
        """
        return cls(f"{name}{ERROR_SUFFIX}", parent=parent, kind=NodeKind.ERROR)

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    @property
    def is_pinned(self) -> bool:
        return self.pinned_order is not None

    def __repr__(self) -> str:
        return f"TreeNode(name={self.name!r}, kind={self.kind.value!r}, node_id={self.node_id!r})"
