"""
Local file system adapter implementation for shell operations.
"""

import errno
import logging
import os
import shutil
from collections.abc import Iterator

from typing_extensions import override

from fsshell.entities.entry import DirectoryEntry, EntryKind
from fsshell.entities.permissions import PermissionSet
from fsshell.exceptions import NotFoundError, OperationFailedError
from fsshell.ports.files.file_system_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _require_exists(self, path: str, message: str = "Path not found") -> None:
        """
        Raises:
            NotFoundError: If path does not exist
        """
        if not os.path.exists(path):
            raise NotFoundError(f"{message}: {path}")

    def _children(self, directory: str) -> list[os.DirEntry[str]]:
        """List a directory's children sorted by name; lets OSError through."""
        with os.scandir(directory) as it:
            return sorted(it, key=lambda entry: entry.name)

    def _read_permissions(self, path: str) -> PermissionSet:
        try:
            mode = os.stat(path).st_mode
        except OSError:
            # Dangling symbolic link: fall back to the link itself
            try:
                mode = os.lstat(path).st_mode
            except OSError as e:
                self._logger.debug(f"Could not read permissions of {path}: {e}")
                return PermissionSet()
        return PermissionSet.from_mode(mode)

    def _describe(self, path: str) -> DirectoryEntry:
        """Build a DirectoryEntry; size lookup failures are reported as 0."""
        is_dir = os.path.isdir(path)
        size = 0
        if os.path.isfile(path):
            try:
                size = os.path.getsize(path)
            except OSError as e:
                self._logger.debug(f"Could not read size of {path}: {e}")
        return DirectoryEntry(
            path=path,
            kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
            size=size,
            permissions=self._read_permissions(path),
        )

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def canonicalize(self, path: str) -> str:
        try:
            return os.path.realpath(path)
        except OSError as e:
            raise OperationFailedError(f"Error changing directory: {e}")

    @override
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        """
        List the immediate children of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of DirectoryEntry views sorted by name

        Raises:
            OperationFailedError: If the directory cannot be enumerated
        """
        try:
            children = self._children(directory)
        except OSError as e:
            raise OperationFailedError(f"Error listing directory: {e}")
        return [self._describe(child.path) for child in children]

    @override
    def create_file(self, path: str) -> None:
        try:
            # Opening for write truncates an existing file
            with open(path, "w", encoding="utf-8"):
                pass
        except OSError as e:
            raise OperationFailedError(f"Failed to create file: {e}")

    @override
    def make_directory(self, path: str) -> None:
        try:
            os.mkdir(path)
        except OSError as e:
            raise OperationFailedError(f"Error creating directory: {e}")

    def _remove_tree(self, root: str) -> None:
        """Delete root and its descendants, children before parents."""
        stack: list[tuple[str, bool]] = [(root, False)]
        while stack:
            directory, emptied = stack.pop()
            if emptied:
                os.rmdir(directory)
                continue
            stack.append((directory, True))
            for child in self._children(directory):
                if child.is_dir(follow_symlinks=False):
                    stack.append((child.path, False))
                else:
                    os.remove(child.path)

    @override
    def remove(self, path: str) -> None:
        self._require_exists(path)
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                self._remove_tree(path)
            else:
                os.remove(path)
        except OSError as e:
            raise OperationFailedError(f"Error deleting path: {e}")
        self._logger.debug(f"Removed {path}")

    def _copy_file(self, source: str, destination: str) -> None:
        shutil.copyfile(source, destination)
        shutil.copymode(source, destination)

    def _copy_tree(self, source: str, destination: str) -> None:
        """
        Copy source into destination, merging with anything already there.

        Symbolic links are followed, so a directory reached through several
        links is copied once per link. A link back to one of its own
        ancestors is skipped.
        """
        source_real = os.path.realpath(source)
        destination_real = os.path.realpath(destination)
        if os.path.commonpath([source_real, destination_real]) == source_real:
            raise OperationFailedError(
                f"Error copying: cannot copy a directory into itself: {source} -> {destination}"
            )

        # (source dir, destination dir, real paths of the source's ancestors)
        stack: list[tuple[str, str, frozenset[str]]] = [(source, destination, frozenset())]
        while stack:
            src_dir, dst_dir, ancestors = stack.pop()
            real = os.path.realpath(src_dir)
            if real in ancestors:
                self._logger.debug(f"Skipping directory cycle at {src_dir}")
                continue
            os.makedirs(dst_dir, exist_ok=True)
            chain = ancestors | {real}
            for child in self._children(src_dir):
                target = os.path.join(dst_dir, child.name)
                if child.is_dir():
                    stack.append((child.path, target, chain))
                else:
                    self._copy_file(child.path, target)

    @override
    def copy(self, source: str, destination: str) -> None:
        self._require_exists(source, "Source not found")
        try:
            if os.path.isdir(source):
                self._copy_tree(source, destination)
            else:
                self._copy_file(source, destination)
        except OSError as e:
            raise OperationFailedError(f"Error copying: {e}")

    @override
    def move(self, source: str, destination: str) -> None:
        self._require_exists(source, "Source not found")
        try:
            os.rename(source, destination)
            return
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise OperationFailedError(f"Error moving/renaming: {e}")
        self._logger.info(f"Cross-device move, copying {source} to {destination}")
        try:
            shutil.move(source, destination)
        except OSError as e:
            raise OperationFailedError(f"Error moving/renaming: {e}")

    @override
    def walk(self, root: str) -> Iterator[str]:
        """
        Yield every descendant of root in depth-first pre-order.

        Children are visited in name order. Symbolic links to directories are
        reported but not descended into.

        Raises:
            OperationFailedError: When a directory cannot be enumerated
        """
        try:
            pending = list(reversed(self._children(root)))
        except OSError as e:
            raise OperationFailedError(f"Search error: {e}")
        while pending:
            entry = pending.pop()
            yield entry.path
            if entry.is_dir(follow_symlinks=False):
                try:
                    pending.extend(reversed(self._children(entry.path)))
                except OSError as e:
                    raise OperationFailedError(f"Search error: {e}")

    @override
    def get_permissions(self, path: str) -> PermissionSet:
        self._require_exists(path, "Not found")
        try:
            return PermissionSet.from_mode(os.stat(path).st_mode)
        except OSError as e:
            raise OperationFailedError(f"Error reading permissions: {e}")

    @override
    def set_permissions(self, path: str, permissions: PermissionSet) -> None:
        self._require_exists(path, "Not found")
        try:
            os.chmod(path, permissions.to_mode())
        except OSError as e:
            raise OperationFailedError(f"Error changing permissions: {e}")
