"""
Result of a shell operation: a success payload or a categorized error.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from fsshell.exceptions import ErrorKind, ShellError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a use case.

    A failed result may still carry a partial value (e.g. the matches a
    search printed before the walk was aborted).
    """

    value: Optional[T] = None
    error: Optional[ShellError] = None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ShellError, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        """Error category, or None on success."""
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""
