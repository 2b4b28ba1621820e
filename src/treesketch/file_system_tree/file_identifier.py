"""File identifier for recognising a directory reached twice during one descent."""

import os
from typing import NamedTuple, Optional


class FileIdentifier(NamedTuple):
    """Device and inode pair that identifies a directory on disk.

    Following a symlink back into one of its own ancestors would make a scan
    recurse forever. The builder keeps the identifiers of the directories on the
    current descent path and refuses to enter one of them a second time.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.

    Note:
        Some filesystems report an inode number of 0 for every entry. Such
        identifiers are not usable for loop detection, see from_stat().
    """

    device_id: int
    inode_number: int

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> Optional["FileIdentifier"]:
        """Build an identifier from stat information.

        Returns:
            The identifier, or None if the filesystem doesn't report usable inode numbers.

        Example:
            >>> st = os.stat(".")
            >>> FileIdentifier.from_stat(st) == FileIdentifier.from_stat(os.stat("."))
            True
        """
        if stat_result.st_ino == 0:
            return None
        return cls(stat_result.st_dev, stat_result.st_ino)
