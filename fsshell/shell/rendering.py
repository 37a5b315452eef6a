"""
Text rendering for the interactive shell.
"""

from typing import IO, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fsshell.entities.entry import DirectoryEntry

HEADER = "=== Simple Linux File Explorer (Python / Console) ==="
UNKNOWN_COMMAND = "Unknown command. Type 'help'."
FAREWELL = "Bye."

# (usage, description) in display order
COMMAND_REFERENCE: tuple[tuple[str, str], ...] = (
    ("ls", "list current directory"),
    ("pwd", "show current directory"),
    ("cd <dir>", "change directory (use .. to go up)"),
    ("touch <file>", "create empty file (truncates an existing one)"),
    ("mkdir <dir>", "create directory"),
    ("rm <name>", "delete file or directory (recursive)"),
    ("cp <src> <dest>", "copy file or directory"),
    ("mv <src> <dest>", "move or rename"),
    ("find <name>", "search recursively"),
    ("perms <name>", "show permissions"),
    ("chmod <name> <octal>", "change permissions (e.g., 755)"),
    ("help", "show help"),
    ("exit", "exit program"),
)

NAME_WIDTH = 40
COLUMN_WIDTH = 12
RULE_WIDTH = 80


def make_console(
    file: Optional[IO[str]] = None, *, stderr: bool = False, color: bool = True
) -> Console:
    """
    Build a console for shell output.

    Emoji codes and automatic highlighting are disabled so that file names are
    printed verbatim.
    """
    return Console(
        file=file,
        stderr=stderr,
        no_color=not color,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


def usage_for(command: str) -> str:
    for usage, _ in COMMAND_REFERENCE:
        if usage.split()[0] == command:
            return usage
    return command


def _row(name: str, kind: str, size: str, perms: str) -> str:
    return f"{name:<{NAME_WIDTH}}{kind:<{COLUMN_WIDTH}}{size:<{COLUMN_WIDTH}}{perms:<{COLUMN_WIDTH}}"


def format_listing(directory: str, entries: list[DirectoryEntry]) -> list[str]:
    """Fixed-width listing lines: title, header, rule, one row per entry."""
    lines = [f"Listing: {directory}", _row("Name", "Type", "Size", "Perms"), "-" * RULE_WIDTH]
    for entry in entries:
        lines.append(
            _row(
                entry.name,
                entry.kind.value,
                entry.size_display,
                entry.permissions.to_symbolic(),
            )
        )
    return lines


def print_plain(console: Console, text: str) -> None:
    console.print(text, markup=False)


def print_error(console: Console, message: str) -> None:
    console.print(escape(message), style="red")


def print_banner(console: Console) -> None:
    console.print(
        Panel(
            f"{HEADER}\nType 'help' for commands, 'exit' or Ctrl+D to quit.",
            title="fsshell",
            border_style="cyan",
            box=box.ROUNDED,
        )
    )


def print_help(console: Console) -> None:
    tbl = Table(title="Commands", box=box.MINIMAL_DOUBLE_HEAD)
    tbl.add_column("Command", style="cyan", no_wrap=True)
    tbl.add_column("Description")
    for usage, description in COMMAND_REFERENCE:
        tbl.add_row(escape(usage), description)
    console.print(tbl)
