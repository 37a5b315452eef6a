"""
Directory entry domain entity.
"""

import os
from dataclasses import dataclass
from enum import Enum

from fsshell.entities.permissions import PermissionSet


class EntryKind(str, Enum):
    """Kind of a listed entry, as displayed by ``ls``."""

    DIRECTORY = "Directory"
    FILE = "File"


@dataclass(frozen=True)
class DirectoryEntry:
    """
    Transient view of one child of a directory, produced for display only.
    """

    path: str
    kind: EntryKind
    size: int
    permissions: PermissionSet

    @property
    def name(self) -> str:
        """Last path component."""
        return os.path.basename(os.path.normpath(self.path))

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def size_display(self) -> str:
        # Directory sizes are not meaningful
        return "-" if self.is_dir else str(self.size)
