"""Tests for the ASCII tree strategy."""

from treesketch.file_system_tree.tree_node import TreeNode
from treesketch.output_strategies import to_ascii_tree
from treesketch.output_strategies.ascii_strategy import AsciiTreeStrategy
from treesketch.types import NodeKind


def test_render_sample_tree(sample_tree):
    expected = (
        "proj\n"
        "├── docs\n"
        "├── src\n"
        "│   ├── main.py\n"
        "│   └── util.py\n"
        "├── Alpha.txt\n"
        "├── zeta.txt\n"
        "└── ...\n"
    )
    assert AsciiTreeStrategy().render(sample_tree) == expected


def test_non_last_folder_keeps_pipe():
    root = TreeNode("root", kind=NodeKind.FOLDER)
    TreeNode("a.txt", parent=root)
    last = TreeNode("zdir", parent=root, kind=NodeKind.FOLDER)
    inner = TreeNode("inner", parent=last, kind=NodeKind.FOLDER)
    TreeNode("deep.txt", parent=inner)
    assert to_ascii_tree(root) == (
        "root\n" "├── zdir\n" "│   └── inner\n" "│       └── deep.txt\n" "└── a.txt\n"
    )


def test_nested_last_branch():
    root = TreeNode("root", kind=NodeKind.FOLDER)
    only = TreeNode("only", parent=root, kind=NodeKind.FOLDER)
    TreeNode("x", parent=only)
    TreeNode("y", parent=only)
    assert to_ascii_tree(root) == "root\n└── only\n    ├── x\n    └── y\n"


def test_root_only():
    assert to_ascii_tree(TreeNode("empty", kind=NodeKind.FOLDER)) == "empty\n"


def test_stream_lines_yields_one_line_per_node(sample_tree):
    lines = list(AsciiTreeStrategy().stream_lines(sample_tree))
    assert len(lines) == len(sample_tree.descendants) + 1
    assert all(line.endswith("\n") for line in lines)


def test_render_is_deterministic_and_pure(sample_tree):
    before = [child.name for child in sample_tree.children]
    first = to_ascii_tree(sample_tree)
    second = to_ascii_tree(sample_tree)
    assert first == second
    assert [child.name for child in sample_tree.children] == before


def test_render_independent_of_insertion_order():
    first = TreeNode("r", kind=NodeKind.FOLDER)
    for name in ["b.txt", "a.txt", "c.txt"]:
        TreeNode(name, parent=first)
    second = TreeNode("r", kind=NodeKind.FOLDER)
    for name in ["c.txt", "a.txt", "b.txt"]:
        TreeNode(name, parent=second)
    assert to_ascii_tree(first) == to_ascii_tree(second)


def test_render_subtree_uses_its_name_as_first_line(sample_tree):
    src = next(child for child in sample_tree.children if child.name == "src")
    assert to_ascii_tree(src) == "src\n├── main.py\n└── util.py\n"
