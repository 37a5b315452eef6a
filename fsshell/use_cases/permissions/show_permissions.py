"""
Use case for reading the permission bits of an entry.
"""

from fsshell.entities.permissions import PermissionSet
from fsshell.entities.result import Result
from fsshell.use_cases.base import FileSystemUseCase


class ShowPermissionsUseCase(FileSystemUseCase):
    """Use case behind ``perms``."""

    def execute(self, path: str) -> Result[PermissionSet]:
        self._logger.info(f"Reading permissions of {path}")
        return self._run(
            f"reading permissions of {path}",
            lambda: self._file_system.get_permissions(path),
        )
