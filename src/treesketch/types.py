from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class NodeKind(str, Enum):
    """Enumeration of node kinds in a sketched tree.

    The values double as the ``type`` field of the JSON exchange format.

    Attributes:
        FOLDER: Directory that may hold children
        FILE: Regular file, always a leaf
        ERROR: Placeholder for a path that could not be read, always a leaf
    """

    FOLDER = "folder"
    FILE = "file"
    ERROR = "error"
