"""Tests for the editable tree store."""

import pytest

from treesketch.file_system_tree.tree_node import DEFAULT_ROOT_NAME, ROOT_ID, TreeNode
from treesketch.output_strategies import to_ascii_tree
from treesketch.tree_store.results import EditOutcome
from treesketch.tree_store.store import TreeStore
from treesketch.types import NodeKind


class FakeClock:
    def __init__(self, start=1000):
        self.now = start

    def __call__(self):
        return self.now


@pytest.fixture
def store(sample_tree):
    return TreeStore(sample_tree, clock=FakeClock())


def node_named(store, name):
    return next(node for node in store if node.name == name)


class TestIdentities:
    def test_default_store_has_empty_root(self):
        store = TreeStore()
        assert store.root.node_id == ROOT_ID
        assert store.root.name == DEFAULT_ROOT_NAME
        assert store.root.is_folder
        assert store.is_empty

    def test_all_nodes_get_unique_ids(self, store):
        ids = [node.node_id for node in store]
        assert None not in ids
        assert len(ids) == len(set(ids))
        assert store.root.node_id == ROOT_ID

    def test_folders_start_expanded(self, store):
        for node in store:
            if node.is_folder:
                assert node.collapsed is False
            else:
                assert node.collapsed is None

    def test_assign_identities_is_idempotent(self, store):
        before = {node.name: node.node_id for node in store}
        store.assign_identities()
        assert {node.name: node.node_id for node in store} == before

    def test_existing_ids_and_collapse_state_are_kept(self):
        root = TreeNode("r", kind=NodeKind.FOLDER)
        TreeNode("keep", parent=root, kind=NodeKind.FOLDER, node_id="custom", collapsed=True)
        store = TreeStore(root)
        node = store.find_by_id("custom")
        assert node.name == "keep"
        assert node.collapsed is True

    def test_duplicate_ids_are_made_unique(self):
        root = TreeNode("r", kind=NodeKind.FOLDER)
        TreeNode("a", parent=root, node_id="same")
        TreeNode("b", parent=root, node_id="same")
        store = TreeStore(root)
        ids = [node.node_id for node in store]
        assert len(ids) == len(set(ids))

    def test_separate_stores_have_independent_counters(self):
        first = TreeStore()
        second = TreeStore()
        a = first.insert_child(ROOT_ID, NodeKind.FILE).node
        b = second.insert_child(ROOT_ID, NodeKind.FILE).node
        assert a.node_id == b.node_id
        assert first.find_by_id(b.node_id) is a


class TestLookup:
    def test_find_by_id(self, store):
        src = node_named(store, "src")
        assert store.find_by_id(src.node_id) is src
        assert store.find_by_id(ROOT_ID) is store.root
        assert store.find_by_id("node-999") is None

    def test_find_parent(self, store):
        main = node_named(store, "main.py")
        assert store.find_parent(main.node_id) is node_named(store, "src")
        assert store.find_parent(node_named(store, "src").node_id) is store.root

    def test_find_parent_of_root_and_unknown_is_none(self, store):
        assert store.find_parent(ROOT_ID) is None
        assert store.find_parent("missing") is None
        assert store.find_by_id(ROOT_ID) is not None
        assert store.find_by_id("missing") is None

    def test_find_node_attached_outside_store(self, store):
        src = node_named(store, "src")
        stray = TreeNode("stray.txt", parent=src, node_id="stray")
        assert store.find_by_id("stray") is stray

    def test_detached_node_is_not_found(self, store):
        main = node_named(store, "main.py")
        main.parent = None
        assert store.find_by_id(main.node_id) is None


class TestInsert:
    def test_insert_file(self, store):
        result = store.insert_child(ROOT_ID, NodeKind.FILE)
        assert result.ok
        assert result.node.name == "new_file.txt"
        assert result.node.kind is NodeKind.FILE
        assert result.node.parent is store.root
        assert store.find_by_id(result.node.node_id) is result.node

    def test_insert_folder(self, store):
        result = store.insert_child(ROOT_ID, "folder")
        assert result.node.name == "new_folder"
        assert result.node.is_folder
        assert result.node.collapsed is False
        assert result.node.children == ()

    def test_default_names_are_unique_per_kind(self, store):
        names = [store.insert_child(ROOT_ID, NodeKind.FILE).node.name for _ in range(3)]
        assert names == ["new_file.txt", "new_file_1.txt", "new_file_2.txt"]

    def test_default_name_ignores_other_kind(self, store):
        TreeNode("new_folder", parent=store.root)
        assert store.insert_child(ROOT_ID, NodeKind.FOLDER).node.name == "new_folder"

    def test_insert_expands_collapsed_parent(self, store):
        src = node_named(store, "src")
        store.toggle_collapse(src.node_id)
        assert src.collapsed is True
        store.insert_child(src.node_id, NodeKind.FILE)
        assert src.collapsed is False

    def test_insert_into_file_fails(self, store):
        target = node_named(store, "zeta.txt")
        result = store.insert_child(target.node_id, NodeKind.FILE)
        assert not result.ok
        assert result.outcome is EditOutcome.NOT_A_FOLDER
        assert "must be a folder" in result.message
        assert target.children == ()

    def test_insert_into_unknown_parent(self, store):
        result = store.insert_child("missing", NodeKind.FILE)
        assert result.outcome is EditOutcome.NOT_FOUND

    def test_insert_error_kind_rejected(self, store):
        with pytest.raises(ValueError):
            store.insert_child(ROOT_ID, NodeKind.ERROR)


class TestRename:
    def test_rename(self, store):
        node = node_named(store, "zeta.txt")
        result = store.rename(node.node_id, "  omega.txt ")
        assert result.ok
        assert node.name == "omega.txt"

    def test_rename_empty_name(self, store):
        node = node_named(store, "zeta.txt")
        for name in ["", "   "]:
            result = store.rename(node.node_id, name)
            assert result.outcome is EditOutcome.EMPTY_NAME
            assert result.message == "Name cannot be empty."
        assert node.name == "zeta.txt"

    def test_rename_duplicate_name_leaves_tree_unchanged(self, store):
        TreeNode("a.txt", parent=store.root)
        store.assign_identities()
        node = node_named(store, "zeta.txt")
        before = to_ascii_tree(store.root)

        result = store.rename(node.node_id, "a.txt")

        assert result.outcome is EditOutcome.DUPLICATE_NAME
        assert 'An item named "a.txt" already exists' in result.message
        assert to_ascii_tree(store.root) == before

    def test_rename_to_name_of_other_kind_is_allowed(self, store):
        node = node_named(store, "zeta.txt")
        assert store.rename(node.node_id, "docs").ok

    def test_rename_to_same_name(self, store):
        node = node_named(store, "zeta.txt")
        assert store.rename(node.node_id, "zeta.txt").ok

    def test_rename_same_name_in_other_folder_is_allowed(self, store):
        node = node_named(store, "main.py")
        assert store.rename(node.node_id, "zeta.txt").ok

    def test_rename_root(self, store):
        assert store.rename(ROOT_ID, "renamed").ok
        assert store.root.name == "renamed"
        assert store.rename(ROOT_ID, " ").outcome is EditOutcome.EMPTY_NAME

    def test_rename_unknown(self, store):
        assert store.rename("missing", "x").outcome is EditOutcome.NOT_FOUND

    def test_rename_error_node(self, store):
        error = TreeNode.error("locked", parent=store.root)
        store.assign_identities()
        result = store.rename(error.node_id, "unlocked")
        assert result.outcome is EditOutcome.NOT_EDITABLE
        assert error.name == "locked (inaccessible)"

    def test_pinned_order_cycle(self):
        clock = FakeClock(5000)
        store = TreeStore(clock=clock)
        node = store.insert_child(ROOT_ID, NodeKind.FILE).node
        store.insert_child(ROOT_ID, NodeKind.FILE)

        assert store.rename(node.node_id, "...").ok
        assert node.pinned_order == 5000
        assert to_ascii_tree(store.root).splitlines()[-1] == "└── ..."

        assert store.rename(node.node_id, "notes.txt").ok
        assert node.pinned_order is None
        assert to_ascii_tree(store.root).splitlines()[1:] == ["├── new_file_1.txt", "└── notes.txt"]

    def test_pinned_order_is_strictly_increasing(self):
        store = TreeStore(clock=FakeClock(7))
        first = store.insert_child(ROOT_ID, NodeKind.FILE).node
        folder = store.insert_child(ROOT_ID, NodeKind.FOLDER).node
        second = store.insert_child(folder.node_id, NodeKind.FILE).node
        store.rename(first.node_id, "...")
        store.rename(second.node_id, "...")
        assert first.pinned_order < second.pinned_order

    def test_two_pinned_siblings_are_duplicates(self, store):
        node = node_named(store, "zeta.txt")
        result = store.rename(node.node_id, "...")
        assert result.outcome is EditOutcome.DUPLICATE_NAME
        assert node.pinned_order is None


class TestDelete:
    def test_delete_node(self, store):
        src = node_named(store, "src")
        main = node_named(store, "main.py")
        result = store.delete_node(src.node_id)
        assert result.ok
        assert src not in store.root.children
        assert store.find_by_id(src.node_id) is None
        assert store.find_by_id(main.node_id) is None

    def test_delete_root_clears_children(self, store):
        result = store.delete_node(ROOT_ID)
        assert result.ok
        assert store.is_empty
        assert store.find_by_id(ROOT_ID) is store.root
        assert store.root.node_id == ROOT_ID

    def test_delete_unknown(self, store):
        result = store.delete_node("missing")
        assert result.outcome is EditOutcome.NOT_FOUND

    def test_delete_error_node(self, store):
        error = TreeNode.error("locked", parent=store.root)
        store.assign_identities()
        assert store.delete_node(error.node_id).ok


class TestCollapse:
    def test_toggle_collapse(self, store):
        src = node_named(store, "src")
        assert store.toggle_collapse(src.node_id).ok
        assert src.collapsed is True
        store.toggle_collapse(src.node_id)
        assert src.collapsed is False

    def test_toggle_collapse_on_file_is_noop(self, store):
        node = node_named(store, "zeta.txt")
        result = store.toggle_collapse(node.node_id)
        assert result.outcome is EditOutcome.NOT_A_FOLDER
        assert node.collapsed is None

    def test_toggle_collapse_unknown(self, store):
        assert store.toggle_collapse("missing").outcome is EditOutcome.NOT_FOUND


class TestReplace:
    def test_replace_root(self, store):
        new_root = TreeNode("fresh", kind=NodeKind.FOLDER)
        TreeNode("x", parent=new_root)
        previous = store.replace_root(new_root)
        assert previous.name == "proj"
        assert store.root is new_root
        assert new_root.node_id == ROOT_ID
        assert store.find_by_id(previous.children[0].node_id) is None

    def test_replace_root_detaches_subtree(self, store):
        src = node_named(store, "src")
        store.replace_root(src)
        assert src.parent is None
        assert store.root is src

    def test_replace_root_requires_folder(self, store):
        with pytest.raises(ValueError, match="must be a folder"):
            store.replace_root(TreeNode("file.txt"))

    def test_clear(self, store):
        store.clear()
        assert store.root.name == DEFAULT_ROOT_NAME
        assert store.is_empty
