"""Editable in-memory tree with id-based lookup.

A TreeStore owns exactly one tree. Its root always has the reserved id "root" and
is always a folder. Every other node gets an id from a counter that belongs to the
store, so two stores in one process never hand out colliding ids.

Nodes are indexed by id. Parent lookups go through the node's parent reference, so
neither lookup needs to search the tree.
"""

import itertools
import logging
import time
from typing import Callable, Dict, Iterator, Optional, Union

from anytree import PreOrderIter
from anytree.search import find

from treesketch.file_system_tree.tree_node import DEFAULT_ROOT_NAME, PINNED_NAME, ROOT_ID, TreeNode
from treesketch.types import NodeKind

from .results import EditOutcome, EditResult

logger = logging.getLogger(__name__)

DEFAULT_FOLDER_NAME = ("new_folder", "")
DEFAULT_FILE_NAME = ("new_file", ".txt")


def _now_ms() -> int:
    return int(time.time() * 1000)


class TreeStore:
    """Holds one editable tree and applies edits to it.

    Editing operations never raise for expected problems. They return an EditResult
    whose outcome tells the caller what happened and whose message can be shown to
    a user as is.

    Attributes:
        root (TreeNode): The root of the tree. Always a folder with id "root".

    Example:
        >>> store = TreeStore()
        >>> result = store.insert_child("root", NodeKind.FILE)
        >>> result.node.name
        'new_file.txt'
        >>> store.rename(result.node.node_id, "notes.txt").ok
        True
        >>> store.rename(store.insert_child("root", NodeKind.FILE).node.node_id, "notes.txt").outcome.value
        'duplicate-name'
    """

    def __init__(self, root: Optional[TreeNode] = None, clock: Optional[Callable[[], int]] = None) -> None:
        """Initialize a TreeStore.

        Args:
            root: Tree to hold. Defaults to an empty folder named "project_root".
            clock: Source of pinned-order keys, returning milliseconds. Defaults to
                the current time.
        """
        self._counter = itertools.count(1)
        self._index: Dict[str, TreeNode] = {}
        self._clock = clock or _now_ms
        self._last_pin = 0
        self.root = TreeNode(DEFAULT_ROOT_NAME, kind=NodeKind.FOLDER)
        self.replace_root(root if root is not None else self.root)

    # Structure

    @property
    def is_empty(self) -> bool:
        """True if the root has no children."""
        return not self.root.children

    def __iter__(self) -> Iterator[TreeNode]:
        return PreOrderIter(self.root)

    def replace_root(self, root: TreeNode) -> TreeNode:
        """Install a new tree, e.g. a fresh scan or a loaded file.

        The new root is detached from any parent, given the reserved root id, and
        all of its nodes receive ids.

        Args:
            root: Root of the new tree. Must be a folder.

        Returns:
            The previous root.

        Raises:
            ValueError: If root is not a folder.
        """
        if not root.is_folder:
            raise ValueError(f"Tree root must be a folder, got {root.kind.value}")
        previous = self.root
        root.parent = None
        root.node_id = ROOT_ID
        self.root = root
        self._index = {}
        self.assign_identities()
        return previous

    def clear(self) -> TreeNode:
        """Replace the tree with an empty default root and return the previous root."""
        return self.replace_root(TreeNode(DEFAULT_ROOT_NAME, kind=NodeKind.FOLDER))

    def assign_identities(self, node: Optional[TreeNode] = None) -> TreeNode:
        """Give ids and collapse state to the nodes of a subtree that lack them.

        Existing ids are kept. The only exception is an id already held by another
        node of this tree, which would break lookups and is replaced. Folders without
        a collapse state start expanded. Calling this again changes nothing.

        Args:
            node: Subtree to process. Defaults to the whole tree.

        Returns:
            The node that was processed.
        """
        start = node if node is not None else self.root
        for current in PreOrderIter(start):
            holder = self._index.get(current.node_id) if current.node_id is not None else None
            if current.node_id is None or (holder is not None and holder is not current):
                if current.node_id is not None:
                    logger.debug("Reassigning duplicate id %s on %r", current.node_id, current.name)
                current.node_id = self._next_id()
            self._index[current.node_id] = current
            if current.is_folder and current.collapsed is None:
                current.collapsed = False
        return start

    def _next_id(self) -> str:
        while True:
            candidate = f"node-{next(self._counter)}"
            if candidate not in self._index:
                return candidate

    def find_by_id(self, node_id: str) -> Optional[TreeNode]:
        """Find a node of this tree by id.

        Returns:
            The node, or None if no node of this tree has the id.
        """
        node = self._index.get(node_id)
        if node is not None and node.node_id == node_id and node.root is self.root:
            return node

        # The tree was changed behind the store's back; search it instead
        node = find(self.root, lambda n: n.node_id == node_id)
        if node is not None:
            self._index[node_id] = node
        else:
            self._index.pop(node_id, None)
        return node

    def find_parent(self, node_id: str) -> Optional[TreeNode]:
        """Find the parent of a node.

        Returns:
            The parent, or None both for the root and for unknown ids. Use
            find_by_id() to tell these apart.
        """
        node = self.find_by_id(node_id)
        if node is None or node is self.root:
            return None
        return node.parent

    # Mutations

    def insert_child(self, parent_id: str, kind: Union[NodeKind, str]) -> EditResult:
        """Add a new folder or file under a folder.

        The new node gets a default name that no sibling of the same kind has yet:
        "new_folder" or "new_file.txt", then "new_folder_1", "new_file_1.txt" and so
        on. A collapsed parent is expanded so the new node is visible.

        Args:
            parent_id: Id of the folder to add to.
            kind: NodeKind.FOLDER or NodeKind.FILE.

        Returns:
            The result, carrying the new node on success.

        Raises:
            ValueError: If kind is not a folder or file kind.
        """
        kind = NodeKind(kind)
        if kind is NodeKind.ERROR:
            raise ValueError("Only folders and files can be added")

        parent = self.find_by_id(parent_id)
        if parent is None:
            return EditResult.failure(EditOutcome.NOT_FOUND, f"No item with id {parent_id}.")
        if not parent.is_folder:
            return EditResult.failure(
                EditOutcome.NOT_A_FOLDER, "Cannot add items to this. It must be a folder.", parent
            )

        name = self._default_name(parent, kind)
        node = TreeNode(
            name,
            parent=parent,
            kind=kind,
            node_id=self._next_id(),
            collapsed=False if kind is NodeKind.FOLDER else None,
        )
        self._index[node.node_id] = node
        if parent.collapsed:
            parent.collapsed = False
        return EditResult.success(f'Added "{name}" to "{parent.name}".', node)

    @staticmethod
    def _default_name(parent: TreeNode, kind: NodeKind) -> str:
        base, extension = DEFAULT_FOLDER_NAME if kind is NodeKind.FOLDER else DEFAULT_FILE_NAME
        taken = {child.name for child in parent.children if child.kind is kind}
        name = f"{base}{extension}"
        counter = 1
        while name in taken:
            name = f"{base}_{counter}{extension}"
            counter += 1
        return name

    def rename(self, node_id: str, new_name: str) -> EditResult:
        """Rename a node.

        The name is trimmed first. Renaming to "..." pins the node so it sorts after
        its unpinned siblings, and renaming it to anything else unpins it again.

        Args:
            node_id: Id of the node to rename.
            new_name: The new name.

        Returns:
            The result. On failure the tree is unchanged.
        """
        node = self.find_by_id(node_id)
        if node is None:
            return EditResult.failure(EditOutcome.NOT_FOUND, f"No item with id {node_id}.")
        if node.kind is NodeKind.ERROR:
            return EditResult.failure(EditOutcome.NOT_EDITABLE, "Inaccessible items cannot be renamed.", node)

        name = (new_name or "").strip()
        if not name:
            return EditResult.failure(EditOutcome.EMPTY_NAME, "Name cannot be empty.", node)

        if node is not self.root and any(
            sibling is not node and sibling.kind is node.kind and sibling.name == name
            for sibling in node.parent.children
        ):
            return EditResult.failure(
                EditOutcome.DUPLICATE_NAME, f'An item named "{name}" already exists in this directory.', node
            )

        node.name = name
        if name == PINNED_NAME:
            node.pinned_order = self._next_pin()
        else:
            node.pinned_order = None
        return EditResult.success(f'Renamed to "{name}".', node)

    def _next_pin(self) -> int:
        # Strictly increasing, so a later pin always sorts after an earlier one
        self._last_pin = max(self._clock(), self._last_pin + 1)
        return self._last_pin

    def delete_node(self, node_id: str) -> EditResult:
        """Delete a node and its subtree.

        The root itself cannot be deleted. Deleting it removes all of its children
        instead, and the root keeps its id. Asking the user for confirmation is up
        to the caller.

        Args:
            node_id: Id of the node to delete.

        Returns:
            The result, carrying the deleted node (or the cleared root).
        """
        node = self.find_by_id(node_id)
        if node is None:
            return EditResult.failure(EditOutcome.NOT_FOUND, f"No item with id {node_id}.")

        if node is self.root:
            for child in node.children:
                self._unindex(child)
            node.children = []
            return EditResult.success("All tree contents cleared.", node)

        self._unindex(node)
        node.parent = None
        return EditResult.success(f'"{node.name}" deleted successfully.', node)

    def _unindex(self, node: TreeNode) -> None:
        for current in PreOrderIter(node):
            if current.node_id is not None and self._index.get(current.node_id) is current:
                del self._index[current.node_id]

    def toggle_collapse(self, node_id: str) -> EditResult:
        """Flip whether an editor view shows a folder's children.

        Returns:
            The result. Nodes other than folders are left unchanged and reported
            as NOT_A_FOLDER.
        """
        node = self.find_by_id(node_id)
        if node is None:
            return EditResult.failure(EditOutcome.NOT_FOUND, f"No item with id {node_id}.")
        if not node.is_folder:
            return EditResult.failure(EditOutcome.NOT_A_FOLDER, "Only folders can be collapsed.", node)
        node.collapsed = not node.collapsed
        return EditResult.success("Collapsed." if node.collapsed else "Expanded.", node)
