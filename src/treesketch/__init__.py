"""Directory tree sketching utilities.

This package scans a directory into an editable in-memory tree, renders that
tree as ASCII art or as a Markdown-style list, and saves or loads it as JSON.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("treesketch")
except PackageNotFoundError:
    __version__ = "unknown"
