"""Reading exact-name patterns from per-directory ignore files.

Only the simplest subset of the .gitignore format is understood: each remaining
line names one entry to exclude. Wildcards, negations and nested precedence are
not interpreted, so a line such as ``*.log`` only matches an entry literally
named ``*.log``.
"""

import logging
from pathlib import Path
from typing import Iterable, Set

from treesketch.types import PathType

logger = logging.getLogger(__name__)

IGNORE_FILE_NAME = ".gitignore"


def parse_ignore_lines(lines: Iterable[str]) -> Set[str]:
    """Extract exact-name patterns from the lines of an ignore file.

    Blank lines and comment lines are skipped. One leading and one trailing slash
    are stripped, since patterns are matched against basenames.

    Args:
        lines: Raw lines of an ignore file.

    Returns:
        The set of names listed in the file.

    Example:
        >>> sorted(parse_ignore_lines(["# build output", "/dist/", "", "  .env  ", "*.log"]))
        ['*.log', '.env', 'dist']
    """
    patterns: Set[str] = set()
    for raw_line in lines:
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("/"):
            line = line[1:]
        if line.endswith("/"):
            line = line[:-1]
        # A lone "/" strips down to nothing
        if line:
            patterns.add(line)
    return patterns


def collect_ignore_file_patterns(directory: PathType, file_name: str = IGNORE_FILE_NAME) -> Set[str]:
    """Read the ignore file of a directory, if there is one.

    A missing ignore file is normal and yields an empty set. Any other failure to
    read it is logged and also yields an empty set, so a broken ignore file never
    aborts a scan.

    Args:
        directory: Directory whose ignore file should be read.
        file_name: Name of the ignore file. Defaults to ".gitignore".

    Returns:
        The set of names listed in the ignore file.
    """
    ignore_path = Path(directory) / file_name
    try:
        with open(ignore_path, "r", encoding="utf-8") as f:
            content = f.read().splitlines()
    except FileNotFoundError:
        return set()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Error reading %s: %s", ignore_path, e)
        return set()

    patterns = parse_ignore_lines(content)
    logger.debug("Loaded %d ignore patterns from %s", len(patterns), ignore_path)
    return patterns
