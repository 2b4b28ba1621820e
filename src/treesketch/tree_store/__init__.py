"""Editable in-memory trees."""

from .results import EditOutcome, EditResult
from .session import EditSession
from .store import TreeStore

__all__ = [
    "EditOutcome",
    "EditResult",
    "EditSession",
    "TreeStore",
]
