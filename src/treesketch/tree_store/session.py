"""Editor session state kept apart from the tree itself."""

from typing import Optional, Union

from treesketch.file_system_tree.tree_node import TreeNode
from treesketch.types import NodeKind

from .results import EditOutcome, EditResult
from .store import TreeStore


class EditSession:
    """Tracks which node an editor view is renaming.

    Nodes carry no editing focus. A view that lets the user rename in place owns an
    EditSession, which remembers the node being renamed and forwards edits to the
    store. A node that was just added starts out pending rename.

    Attributes:
        store (TreeStore): The store being edited.
        editing_id (Optional[str]): Id of the node being renamed, if any.

    Example:
        >>> session = EditSession(TreeStore())
        >>> added = session.add("root", NodeKind.FOLDER)
        >>> session.editing_id == added.node.node_id
        True
        >>> session.commit_rename("docs").ok, session.editing_id
        (True, None)
    """

    def __init__(self, store: TreeStore) -> None:
        self.store = store
        self.editing_id: Optional[str] = None

    @property
    def editing_node(self) -> Optional[TreeNode]:
        if self.editing_id is None:
            return None
        return self.store.find_by_id(self.editing_id)

    def add(self, parent_id: str, kind: Union[NodeKind, str]) -> EditResult:
        """Insert a node and start renaming it."""
        result = self.store.insert_child(parent_id, kind)
        if result.ok:
            self.editing_id = result.node.node_id
        return result

    def begin_rename(self, node_id: str) -> EditResult:
        node = self.store.find_by_id(node_id)
        if node is None:
            return EditResult.failure(EditOutcome.NOT_FOUND, f"No item with id {node_id}.")
        if node.kind is NodeKind.ERROR:
            return EditResult.failure(EditOutcome.NOT_EDITABLE, "Inaccessible items cannot be renamed.", node)
        self.editing_id = node_id
        return EditResult.success(f'Renaming "{node.name}".', node)

    def commit_rename(self, new_name: str) -> EditResult:
        """Apply the new name to the node being renamed.

        On failure the node stays pending, so the user can correct the name.
        """
        if self.editing_id is None:
            return EditResult.failure(EditOutcome.NOT_FOUND, "Nothing is being renamed.")
        result = self.store.rename(self.editing_id, new_name)
        if result.ok or result.outcome is EditOutcome.NOT_FOUND:
            self.editing_id = None
        return result

    def cancel_rename(self) -> None:
        self.editing_id = None

    def delete(self, node_id: str) -> EditResult:
        """Delete a node, ending the rename if it was the node being renamed."""
        pending = self.editing_node
        result = self.store.delete_node(node_id)
        if result.ok and pending is not None and pending.root is not self.store.root:
            self.editing_id = None
        return result
