"""Path helpers for resolving command arguments against a working directory.

Unlike the process-wide ``os.getcwd()``, the base directory is always passed in
explicitly so that several shell sessions can coexist in one process.
"""

from __future__ import annotations

import os


def resolve_against(base: str, name: str) -> str:
    """Return name if it is absolute, otherwise name joined onto base."""
    if os.path.isabs(name):
        return name
    return os.path.join(base, name)


def parent_of(path: str) -> str:
    """Parent directory of path; the root is its own parent."""
    return os.path.dirname(os.path.normpath(path)) or path


def initial_directory() -> str:
    return os.path.abspath(os.getcwd())
