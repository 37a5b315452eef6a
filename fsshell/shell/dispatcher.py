"""
Command dispatcher: maps the first token of a line to a use case and reports
the outcome.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

from rich.console import Console

from fsshell.entities.result import Result
from fsshell.exceptions import InvalidArgumentError
from fsshell.shell.rendering import (
    UNKNOWN_COMMAND,
    format_listing,
    print_error,
    print_help,
    print_plain,
    usage_for,
)
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

Handler = Callable[[tuple[str, ...]], Result[Any]]


@dataclass(frozen=True)
class ParsedCommand:
    """A command name and its positional arguments."""

    name: str
    args: tuple[str, ...] = ()

    @classmethod
    def parse(cls, line: str) -> Optional["ParsedCommand"]:
        """Split a line on whitespace; None for a blank line."""
        tokens = line.split()
        if not tokens:
            return None
        return cls(tokens[0], tuple(tokens[1:]))


@dataclass(frozen=True)
class ShellUseCases:
    """The use cases a dispatcher delegates to."""

    list_directory: ListDirectoryUseCase
    change_directory: ChangeDirectoryUseCase
    create_file: CreateFileUseCase
    make_directory: MakeDirectoryUseCase
    delete_entry: DeleteEntryUseCase
    copy_entry: CopyEntryUseCase
    move_entry: MoveEntryUseCase
    find_entries: FindEntriesUseCase
    show_permissions: ShowPermissionsUseCase
    change_permissions: ChangePermissionsUseCase


class CommandDispatcher:
    """
    Dispatches parsed commands for one session.

    ``execute`` runs a command and returns its Result without printing;
    ``dispatch`` parses a raw line, executes it and prints output to the
    console and errors to the error console.
    """

    def __init__(
        self,
        session: ShellSession,
        use_cases: ShellUseCases,
        console: Console,
        err_console: Console,
        logger: Optional[logging.Logger] = None,
    ):
        self.session = session
        self._use_cases = use_cases
        self._console = console
        self._err_console = err_console
        self._logger = logger or logging.getLogger(__name__)

        # name -> (required argument count, handler)
        self._handlers: dict[str, tuple[int, Handler]] = {
            "ls": (0, self._ls),
            "pwd": (0, self._pwd),
            "cd": (1, self._cd),
            "touch": (1, self._touch),
            "mkdir": (1, self._mkdir),
            "rm": (1, self._rm),
            "cp": (2, self._cp),
            "mv": (2, self._mv),
            "find": (1, self._find),
            "perms": (1, self._perms),
            "chmod": (2, self._chmod),
        }
        self._renderers: dict[str, Callable[[Any], None]] = {
            "ls": self._render_listing,
            "pwd": self._render_line,
            "find": self._render_lines,
            "perms": self._render_permissions,
        }

    @property
    def commands(self) -> list[str]:
        return [*self._handlers, "help", "exit"]

    # -------- handlers --------

    def _ls(self, args: tuple[str, ...]) -> Result[Any]:
        return self._use_cases.list_directory.execute(self.session.cwd)

    def _pwd(self, args: tuple[str, ...]) -> Result[Any]:
        return Result.success(self.session.cwd)

    def _cd(self, args: tuple[str, ...]) -> Result[Any]:
        result = self._use_cases.change_directory.execute(self.session.cwd, args[0])
        if result.ok and result.value:
            self.session.change_directory(result.value)
        return result

    def _touch(self, args: tuple[str, ...]) -> Result[Any]:
        return self._use_cases.create_file.execute(self.session.resolve(args[0]))

    def _mkdir(self, args: tuple[str, ...]) -> Result[Any]:
        return self._use_cases.make_directory.execute(self.session.resolve(args[0]))

    def _rm(self, args: tuple[str, ...]) -> Result[Any]:
        return self._use_cases.delete_entry.execute(self.session.resolve(args[0]))

    def _cp(self, args: tuple[str, ...]) -> Result[Any]:
        return self._use_cases.copy_entry.execute(
            self.session.resolve(args[0]), self.session.resolve(args[1])
        )

    def _mv(self, args: tuple[str, ...]) -> Result[Any]:
        return self._use_cases.move_entry.execute(
            self.session.resolve(args[0]), self.session.resolve(args[1])
        )

    def _find(self, args: tuple[str, ...]) -> Result[Any]:
        return self._use_cases.find_entries.execute(self.session.cwd, args[0])

    def _perms(self, args: tuple[str, ...]) -> Result[Any]:
        return self._use_cases.show_permissions.execute(self.session.resolve(args[0]))

    def _chmod(self, args: tuple[str, ...]) -> Result[Any]:
        return self._use_cases.change_permissions.execute(
            self.session.resolve(args[0]), args[1]
        )

    # -------- renderers --------

    def _render_listing(self, entries: Any) -> None:
        for line in format_listing(self.session.cwd, entries):
            print_plain(self._console, line)

    def _render_line(self, value: Any) -> None:
        print_plain(self._console, str(value))

    def _render_lines(self, values: Any) -> None:
        for value in values:
            print_plain(self._console, str(value))

    def _render_permissions(self, permissions: Any) -> None:
        print_plain(self._console, f"Permissions: {permissions.to_symbolic()}")

    # -------- entry points --------

    def execute(self, name: str, args: tuple[str, ...] = ()) -> Result[Any]:
        """
        Run one command without printing anything.

        Args:
            name: Command name (``ls``, ``cd``, ...)
            args: Positional arguments; extra arguments are ignored

        Returns:
            The use case Result. A missing required argument or an unknown
            command yields an invalid-argument failure.
        """
        if name not in self._handlers:
            return Result.failure(InvalidArgumentError(f"Unknown command: {name}"))
        required, handler = self._handlers[name]
        if len(args) < required:
            return Result.failure(
                InvalidArgumentError(f"{name}: missing operand (usage: {usage_for(name)})")
            )
        return handler(args[:required])

    def report(self, name: str, result: Result[Any]) -> None:
        """Print a Result: payload first (possibly partial), then the error."""
        renderer = self._renderers.get(name)
        if renderer is not None and result.value is not None:
            renderer(result.value)
        if not result.ok:
            self._logger.debug(f"{name} failed ({result.kind}): {result.message}")
            print_error(self._err_console, result.message)

    def dispatch(self, line: str) -> bool:
        """
        Handle one input line.

        Returns:
            False when the session should end (``exit``), True otherwise
        """
        command = ParsedCommand.parse(line)
        if command is None:
            return True
        if command.name == "exit":
            return False
        if command.name == "help":
            print_help(self._console)
            return True
        if command.name not in self._handlers:
            print_plain(self._console, UNKNOWN_COMMAND)
            return True
        self.report(command.name, self.execute(command.name, command.args))
        return True
