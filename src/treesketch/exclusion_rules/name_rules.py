"""Exclusion rules based on exact basename matches."""

from os import PathLike
from pathlib import Path
from typing import AbstractSet, FrozenSet, Iterable, List, Optional, Sequence, Union

from treesketch.types import PathType

from .base_rules import BaseExclusionRules
from .ignore_file import collect_ignore_file_patterns

# Names suggested for exclusion when the caller supplies none
DEFAULT_IGNORED_NAMES = (".git", "node_modules", ".DS_Store")


def is_excluded(name: str, active_patterns: AbstractSet[str]) -> bool:
    """Check whether a basename is one of the active patterns.

    Example:
        >>> is_excluded("dist", {"dist", "build"})
        True
        >>> is_excluded("dist.txt", {"dist", "*.txt"})
        False
    """
    return name in active_patterns


def parse_ignore_list(text: Optional[str]) -> List[str]:
    """Split a comma-separated list of names as typed by a user.

    Example:
        >>> parse_ignore_list(" .git, node_modules ,, .DS_Store ")
        ['.git', 'node_modules', '.DS_Store']
        >>> parse_ignore_list("")
        []
    """
    if not text or not text.strip():
        return []
    return [item.strip() for item in text.split(",") if item.strip()]


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules that match entry basenames exactly.

    The rules hold an immutable set of names. During a scan each directory derives
    its own rules with extended(), so names found in a directory's ignore file apply
    to that directory and its descendants but never to its siblings or ancestors.

    Names can also be added in place with add_rule() or load_rules(), which is how a
    caller assembles the explicit ignore list before a scan starts.

    Attributes:
        patterns (FrozenSet[str]): The names currently excluded.

    Example:
        >>> rules = NameExclusionRules([".git"])
        >>> child_rules = rules.extended({"dist"})
        >>> child_rules.exclude("dist"), rules.exclude("dist")
        (True, False)
        >>> rules.add_rule("build")
        >>> sorted(rules.patterns)
        ['.git', 'build']
    """

    def __init__(self, names: Optional[Iterable[str]] = None):
        """Initialize NameExclusionRules.

        Args:
            names: Names to exclude. Surrounding whitespace is stripped and blank
                names are dropped. Defaults to no names.
        """
        self._patterns: FrozenSet[str] = frozenset(n.strip() for n in (names or ()) if n and n.strip())

    @property
    def patterns(self) -> FrozenSet[str]:
        return self._patterns

    def exclude(self, name: str) -> bool:
        return is_excluded(name, self._patterns)

    def has_rules(self) -> bool:
        return bool(self._patterns)

    def extended(self, names: Iterable[str]) -> "NameExclusionRules":
        """Return new rules holding these names plus the given ones.

        Args:
            names: Additional names to exclude.

        Returns:
            The same object when there is nothing new to add, otherwise a new
            NameExclusionRules. The receiver is never modified.
        """
        extra = frozenset(names) - self._patterns
        if not extra:
            return self
        return NameExclusionRules(self._patterns | extra)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Add the names listed in one or more ignore files.

        Args:
            rules_files: Path(s) to ignore files.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.is_file():
                raise FileNotFoundError(f"Rules file not found: {path}")
            self._patterns = self._patterns | collect_ignore_file_patterns(path.parent, path.name)

    def add_rule(self, rule: str) -> None:
        """Add a single name to exclude.

        Raises:
            ValueError: If the name is blank.
        """
        name = rule.strip()
        if not name:
            raise ValueError("Exclusion name cannot be empty")
        self._patterns = self._patterns | {name}

    def __repr__(self) -> str:
        return f"NameExclusionRules({sorted(self._patterns)!r})"
