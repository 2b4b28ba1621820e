"""Test configuration and fixtures for treesketch."""

import pytest

from treesketch.file_system_tree.tree_node import TreeNode
from treesketch.types import NodeKind


@pytest.fixture
def project_dir(tmp_path):
    """Create the sample project used across scanner and end-to-end tests."""
    root = tmp_path / "myproj"
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.ext").touch()
    (root / "src" / "util.ext").touch()
    (root / "readme.ext").touch()
    (root / "dist").mkdir()
    return root


@pytest.fixture
def sample_tree():
    """Build a small in-memory tree with folders, files and a pinned node."""
    root = TreeNode("proj", kind=NodeKind.FOLDER)
    src = TreeNode("src", parent=root, kind=NodeKind.FOLDER)
    TreeNode("util.py", parent=src)
    TreeNode("main.py", parent=src)
    TreeNode("zeta.txt", parent=root)
    TreeNode("...", parent=root, pinned_order=100)
    TreeNode("Alpha.txt", parent=root)
    TreeNode("docs", parent=root, kind=NodeKind.FOLDER)
    return root
