"""Tree model and directory scanning.

This package provides the node type shared by scanned, edited and loaded trees,
and the builder that turns a directory into such a tree while honouring
name-based exclusion rules.
"""

from .tree_builder import TreeBuilder, build_tree
from .tree_node import DEFAULT_ROOT_NAME, PINNED_NAME, ROOT_ID, TreeNode

__all__ = [
    "DEFAULT_ROOT_NAME",
    "PINNED_NAME",
    "ROOT_ID",
    "TreeBuilder",
    "TreeNode",
    "build_tree",
]
