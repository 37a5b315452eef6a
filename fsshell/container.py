"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Any

from rich.console import Console

from fsshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from fsshell.ports.files.file_system_port import FileSystemPort
from fsshell.shell.dispatcher import CommandDispatcher, ShellUseCases
from fsshell.shell.session import ShellSession
from fsshell.use_cases.files.change_directory import ChangeDirectoryUseCase
from fsshell.use_cases.files.copy_entry import CopyEntryUseCase
from fsshell.use_cases.files.create_file import CreateFileUseCase
from fsshell.use_cases.files.delete_entry import DeleteEntryUseCase
from fsshell.use_cases.files.find_entries import FindEntriesUseCase
from fsshell.use_cases.files.list_directory import ListDirectoryUseCase
from fsshell.use_cases.files.make_directory import MakeDirectoryUseCase
from fsshell.use_cases.files.move_entry import MoveEntryUseCase
from fsshell.use_cases.permissions.change_permissions import ChangePermissionsUseCase
from fsshell.use_cases.permissions.show_permissions import ShowPermissionsUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.

    Adapters and use cases are stateless and shared; each session gets its own
    dispatcher from ``create_dispatcher``.
    """

    def __init__(self):
        self._instances: dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def _use_case(self, key: str, factory: type) -> Any:
        if key not in self._instances:
            self._instances[key] = factory(self.get_file_system(), self._logger)
        return self._instances[key]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        return self._use_case("list_directory_use_case", ListDirectoryUseCase)

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        return self._use_case("change_directory_use_case", ChangeDirectoryUseCase)

    def get_create_file_use_case(self) -> CreateFileUseCase:
        return self._use_case("create_file_use_case", CreateFileUseCase)

    def get_make_directory_use_case(self) -> MakeDirectoryUseCase:
        return self._use_case("make_directory_use_case", MakeDirectoryUseCase)

    def get_delete_entry_use_case(self) -> DeleteEntryUseCase:
        return self._use_case("delete_entry_use_case", DeleteEntryUseCase)

    def get_copy_entry_use_case(self) -> CopyEntryUseCase:
        return self._use_case("copy_entry_use_case", CopyEntryUseCase)

    def get_move_entry_use_case(self) -> MoveEntryUseCase:
        return self._use_case("move_entry_use_case", MoveEntryUseCase)

    def get_find_entries_use_case(self) -> FindEntriesUseCase:
        return self._use_case("find_entries_use_case", FindEntriesUseCase)

    def get_show_permissions_use_case(self) -> ShowPermissionsUseCase:
        return self._use_case("show_permissions_use_case", ShowPermissionsUseCase)

    def get_change_permissions_use_case(self) -> ChangePermissionsUseCase:
        return self._use_case("change_permissions_use_case", ChangePermissionsUseCase)

    def get_shell_use_cases(self) -> ShellUseCases:
        """
        Get the bundle of use cases a dispatcher delegates to.

        Returns:
            ShellUseCases with injected dependencies
        """
        return ShellUseCases(
            list_directory=self.get_list_directory_use_case(),
            change_directory=self.get_change_directory_use_case(),
            create_file=self.get_create_file_use_case(),
            make_directory=self.get_make_directory_use_case(),
            delete_entry=self.get_delete_entry_use_case(),
            copy_entry=self.get_copy_entry_use_case(),
            move_entry=self.get_move_entry_use_case(),
            find_entries=self.get_find_entries_use_case(),
            show_permissions=self.get_show_permissions_use_case(),
            change_permissions=self.get_change_permissions_use_case(),
        )

    def create_dispatcher(
        self, session: ShellSession, console: Console, err_console: Console
    ) -> CommandDispatcher:
        """Build a dispatcher bound to one session."""
        return CommandDispatcher(
            session,
            self.get_shell_use_cases(),
            console,
            err_console,
            logger=self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
