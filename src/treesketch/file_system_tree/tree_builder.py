"""Recursive conversion of a directory into a TreeNode tree.

The builder walks the directory depth-first. Every entry below the root is checked
by basename against the exclusion rules active for its directory, and an excluded
entry is left out together with everything beneath it. The root itself is never
checked, so a user-chosen folder is always scanned.

Only a root that cannot be accessed stops a scan. Anything below the root that
cannot be stat'ed or listed becomes an error node, and the scan carries on with
its siblings.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Iterable, List, Optional, Set, Union

from treesketch.exceptions import RootNotAccessibleError
from treesketch.exclusion_rules.ignore_file import IGNORE_FILE_NAME, collect_ignore_file_patterns
from treesketch.exclusion_rules.name_rules import NameExclusionRules
from treesketch.file_system_tree.file_identifier import FileIdentifier
from treesketch.file_system_tree.tree_node import TreeNode
from treesketch.types import NodeKind, PathType

logger = logging.getLogger(__name__)


class TreeBuilder:
    """Builds a TreeNode tree from a directory on disk.

    Exclusion names come from two places: an explicit list that applies everywhere,
    and, when enabled, the ignore file of each directory. Names from a directory's
    ignore file apply to that directory and all of its descendants. They never leak
    to siblings or ancestors.

    Attributes:
        root_path (Path): The directory to scan.
        exclusion_rules (NameExclusionRules): The explicit exclusion names.
        use_ignore_file (bool): Whether per-directory ignore files are read.
        ignore_file_name (str): Name of the per-directory ignore file.

    Example:
        >>> builder = TreeBuilder("src", ["__pycache__"], use_ignore_file=True)  # doctest: +SKIP
        >>> root = builder.build()  # doctest: +SKIP
        >>> root.name  # doctest: +SKIP
        'src'
    """

    def __init__(
        self,
        root_path: PathType,
        ignore_names: Optional[Union[NameExclusionRules, Iterable[str]]] = None,
        use_ignore_file: bool = False,
        ignore_file_name: str = IGNORE_FILE_NAME,
    ) -> None:
        """Initialize a TreeBuilder.

        Args:
            root_path: Path to the directory to scan. Can be any path-like object.
            ignore_names: Names to exclude at every level, either as an iterable of
                names or as prepared NameExclusionRules. Defaults to none.
            use_ignore_file: Whether to read each directory's ignore file.
                Defaults to False.
            ignore_file_name: Name of the ignore file. Defaults to ".gitignore".
        """
        self.root_path = Path(root_path)
        if isinstance(ignore_names, NameExclusionRules):
            self.exclusion_rules = ignore_names
        else:
            self.exclusion_rules = NameExclusionRules(ignore_names)
        self.use_ignore_file = use_ignore_file
        self.ignore_file_name = ignore_file_name

    def build(self) -> TreeNode:
        """Scan the root directory and return the resulting tree.

        The returned root is always a folder node, possibly without children, so a
        caller can tell "scanned and empty" apart from "could not scan".

        Returns:
            The root node of the new tree.

        Raises:
            RootNotAccessibleError: If the root cannot be stat'ed or listed.
            NotADirectoryError: If the root is not a directory.
        """
        try:
            root_stat = os.stat(self.root_path)
        except OSError as e:
            raise RootNotAccessibleError(str(self.root_path), e.strerror or str(e)) from e

        if not stat.S_ISDIR(root_stat.st_mode):
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        try:
            entries = sorted(os.listdir(self.root_path))
        except OSError as e:
            raise RootNotAccessibleError(str(self.root_path), e.strerror or str(e)) from e

        root = TreeNode(self._root_name(), kind=NodeKind.FOLDER)

        # Identifiers of the directories on the current descent path
        ancestors: Set[FileIdentifier] = set()
        root_id = FileIdentifier.from_stat(root_stat)
        if root_id is not None:
            ancestors.add(root_id)

        self._add_children(root, self.root_path, entries, self.exclusion_rules, ancestors)
        logger.info("Scanned %s: %d entries", self.root_path, len(root.descendants))
        return root

    def _root_name(self) -> str:
        # A symlinked root keeps the name it was chosen by
        name = self.root_path.name
        if name and name not in (".", ".."):
            return name
        resolved_path = self.root_path.resolve()
        # The filesystem root has no basename
        return resolved_path.name or str(resolved_path)

    def _rules_for(self, directory: Path, inherited: NameExclusionRules) -> NameExclusionRules:
        if not self.use_ignore_file:
            return inherited
        return inherited.extended(collect_ignore_file_patterns(directory, self.ignore_file_name))

    def _add_children(
        self,
        node: TreeNode,
        directory: Path,
        entries: List[str],
        inherited: NameExclusionRules,
        ancestors: Set[FileIdentifier],
    ) -> None:
        rules = self._rules_for(directory, inherited)
        for entry in entries:
            if rules.exclude(entry):
                logger.debug("Excluding %s", directory / entry)
                continue
            self._create_node(directory / entry, entry, rules, ancestors, parent=node)

    def _create_node(
        self,
        path: Path,
        name: str,
        rules: NameExclusionRules,
        ancestors: Set[FileIdentifier],
        parent: TreeNode,
    ) -> TreeNode:
        """Recursively create the node for a path below the root."""
        try:
            path_stat = os.stat(path)
        except OSError as e:
            logger.warning("Could not access %s: %s", path, e)
            return TreeNode.error(name, parent=parent)

        if not stat.S_ISDIR(path_stat.st_mode):
            return TreeNode(name, parent=parent, kind=NodeKind.FILE)

        file_id = FileIdentifier.from_stat(path_stat)
        if file_id is not None and file_id in ancestors:
            logger.warning("Not descending into %s: directory loop detected", path)
            return TreeNode.error(name, parent=parent)

        try:
            entries = sorted(os.listdir(path))
        except OSError as e:
            logger.warning("Could not list %s: %s", path, e)
            return TreeNode.error(name, parent=parent)

        node = TreeNode(name, parent=parent, kind=NodeKind.FOLDER)
        if file_id is not None:
            ancestors.add(file_id)
        try:
            self._add_children(node, path, entries, rules, ancestors)
        finally:
            if file_id is not None:
                ancestors.discard(file_id)
        return node


def build_tree(
    root_path: PathType,
    ignore_names: Optional[Iterable[str]] = None,
    use_ignore_file: bool = False,
    ignore_file_name: str = IGNORE_FILE_NAME,
) -> TreeNode:
    """Scan a directory into a new tree.

    Convenience wrapper around TreeBuilder for one-off scans.

    Raises:
        RootNotAccessibleError: If the root cannot be stat'ed or listed.
        NotADirectoryError: If the root is not a directory.
    """
    return TreeBuilder(root_path, ignore_names, use_ignore_file, ignore_file_name).build()
