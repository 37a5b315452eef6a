"""
File system port interface defining the contract for shell file operations.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator

from fsshell.entities.entry import DirectoryEntry
from fsshell.entities.permissions import PermissionSet


class FileSystemPort(ABC):
    """Port interface for filesystem operations used by the shell."""

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if path exists and is a directory (symbolic links are followed)."""
        pass

    @abstractmethod
    def canonicalize(self, path: str) -> str:
        """
        Resolve a path to its absolute, symlink-free form.

        Raises:
            OperationFailedError: If resolution fails
        """
        pass

    @abstractmethod
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        """
        List the immediate children of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            DirectoryEntry views sorted by name. Entries whose size cannot be
            read are reported with size 0.

        Raises:
            OperationFailedError: If the directory cannot be enumerated
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> None:
        """
        Create an empty file, truncating an existing one.

        Raises:
            OperationFailedError: If the file cannot be opened for writing
        """
        pass

    @abstractmethod
    def make_directory(self, path: str) -> None:
        """
        Create exactly one directory level.

        Raises:
            OperationFailedError: If the target exists or a parent is missing
        """
        pass

    @abstractmethod
    def remove(self, path: str) -> None:
        """
        Delete a file, or a directory and everything below it.

        Raises:
            NotFoundError: If path does not exist
            OperationFailedError: If deletion fails
        """
        pass

    @abstractmethod
    def copy(self, source: str, destination: str) -> None:
        """
        Copy a file, or a directory recursively, overwriting existing files.

        Raises:
            NotFoundError: If source does not exist
            OperationFailedError: If copying fails
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> None:
        """
        Rename source to destination.

        Raises:
            NotFoundError: If source does not exist
            OperationFailedError: If the move fails
        """
        pass

    @abstractmethod
    def walk(self, root: str) -> Iterator[str]:
        """
        Yield the path of every descendant of root, depth first.

        Raises:
            OperationFailedError: When a directory cannot be enumerated; the
                walk stops at that point.
        """
        pass

    @abstractmethod
    def get_permissions(self, path: str) -> PermissionSet:
        """
        Raises:
            NotFoundError: If path does not exist
            OperationFailedError: If the status cannot be read
        """
        pass

    @abstractmethod
    def set_permissions(self, path: str, permissions: PermissionSet) -> None:
        """
        Replace the permission bits of path entirely.

        Raises:
            NotFoundError: If path does not exist
            OperationFailedError: If the change fails
        """
        pass
