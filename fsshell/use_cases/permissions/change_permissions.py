"""
Use case for replacing the permission bits of an entry.
"""

from fsshell.entities.permissions import PermissionSet
from fsshell.entities.result import Result
from fsshell.use_cases.base import FileSystemUseCase


class ChangePermissionsUseCase(FileSystemUseCase):
    """Use case behind ``chmod``."""

    def _change(self, path: str, octal: str) -> PermissionSet:
        permissions = PermissionSet.parse_octal(octal)
        self._file_system.set_permissions(path, permissions)
        return permissions

    def execute(self, path: str, octal: str) -> Result[PermissionSet]:
        """
        Replace the permission bits of path with those encoded by octal.

        Args:
            path: Absolute path of the entry
            octal: Octal triple as typed by the user, e.g. ``"755"``

        Returns:
            Result carrying the applied PermissionSet. A malformed octal token
            is an invalid-argument error and leaves the entry untouched.
        """
        self._logger.info(f"Changing permissions of {path} to {octal}")
        return self._run(
            f"changing permissions of {path}", lambda: self._change(path, octal)
        )
