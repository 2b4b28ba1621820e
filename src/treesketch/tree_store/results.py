"""Outcomes of tree editing operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from treesketch.file_system_tree.tree_node import TreeNode


class EditOutcome(str, Enum):
    """Result categories of an editing operation.

    Values:
        SUCCESS: The operation was applied
        NOT_FOUND: No node has the given id
        NOT_A_FOLDER: Children can only be added to folders
        EMPTY_NAME: The new name is empty or whitespace
        DUPLICATE_NAME: A sibling of the same kind already has the name
        NOT_EDITABLE: Error placeholders cannot be renamed
    """

    SUCCESS = "success"
    NOT_FOUND = "not-found"
    NOT_A_FOLDER = "not-a-folder"
    EMPTY_NAME = "empty-name"
    DUPLICATE_NAME = "duplicate-name"
    NOT_EDITABLE = "not-editable"


@dataclass(frozen=True)
class EditResult:
    """What happened when an edit was attempted.

    Expected failures such as a duplicate name are reported through this value
    rather than raised, leaving it to the caller to show the message.

    Attributes:
        outcome: The result category.
        message: Human-readable description, suitable for display.
        node: The node that was affected, if any.

    Example:
        >>> result = EditResult.failure(EditOutcome.EMPTY_NAME, "Name cannot be empty.")
        >>> result.ok
        False
        >>> bool(EditResult.success("Renamed."))
        True
    """

    outcome: EditOutcome
    message: str
    node: Optional[TreeNode] = None

    @property
    def ok(self) -> bool:
        return self.outcome is EditOutcome.SUCCESS

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, message: str, node: Optional[TreeNode] = None) -> "EditResult":
        return cls(EditOutcome.SUCCESS, message, node)

    @classmethod
    def failure(cls, outcome: EditOutcome, message: str, node: Optional[TreeNode] = None) -> "EditResult":
        return cls(outcome, message, node)
