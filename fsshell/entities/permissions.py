"""
Permission set domain entity.

Nine independent flags, {owner, group, other} x {read, write, execute},
convertible to and from:

- a 9-character symbolic string such as ``rwxr-xr-x``;
- an octal triple written as a decimal number such as ``755``;
- a platform mode integer such as ``0o755``.
"""

import stat
from dataclasses import astuple, dataclass

from fsshell.exceptions import InvalidArgumentError

# (symbol, platform bit) for each flag, in display order
_FLAG_BITS: tuple[tuple[str, int], ...] = (
    ("r", stat.S_IRUSR),
    ("w", stat.S_IWUSR),
    ("x", stat.S_IXUSR),
    ("r", stat.S_IRGRP),
    ("w", stat.S_IWGRP),
    ("x", stat.S_IXGRP),
    ("r", stat.S_IROTH),
    ("w", stat.S_IWOTH),
    ("x", stat.S_IXOTH),
)


def _digit_flags(digit: int) -> tuple[bool, bool, bool]:
    # Only the low three bits of a digit are meaningful
    return bool(digit & 4), bool(digit & 2), bool(digit & 1)


@dataclass(frozen=True)
class PermissionSet:
    """Immutable POSIX owner/group/other read-write-execute flags."""

    owner_read: bool = False
    owner_write: bool = False
    owner_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False

    @classmethod
    def from_octal(cls, value: int) -> "PermissionSet":
        """
        Decode an octal triple given as a decimal number (e.g. ``644``).

        Each decimal digit is taken modulo 10; digits 8 and 9 contribute
        only their low three bits.

        Raises:
            InvalidArgumentError: If value is negative
        """
        if value < 0:
            raise InvalidArgumentError(f"Invalid octal permissions: {value}")
        owner = (value // 100) % 10
        group = (value // 10) % 10
        other = value % 10
        return cls(*_digit_flags(owner), *_digit_flags(group), *_digit_flags(other))

    @classmethod
    def parse_octal(cls, text: str) -> "PermissionSet":
        """
        Parse a user-supplied octal token such as ``"755"``.

        Raises:
            InvalidArgumentError: If the token is not a non-negative integer
        """
        token = (text or "").strip()
        if not (token.isascii() and token.isdigit()):
            raise InvalidArgumentError(f"Invalid octal permissions: '{text}'")
        return cls.from_octal(int(token))

    @classmethod
    def from_symbolic(cls, text: str) -> "PermissionSet":
        """
        Decode a 9-character string such as ``rw-r--r--``.

        Raises:
            InvalidArgumentError: If the string is malformed
        """
        if len(text) != len(_FLAG_BITS):
            raise InvalidArgumentError(f"Invalid permission string: '{text}'")
        flags: list[bool] = []
        for char, (symbol, _) in zip(text, _FLAG_BITS):
            if char == symbol:
                flags.append(True)
            elif char == "-":
                flags.append(False)
            else:
                raise InvalidArgumentError(f"Invalid permission string: '{text}'")
        return cls(*flags)

    @classmethod
    def from_mode(cls, mode: int) -> "PermissionSet":
        """Build from a platform mode integer (e.g. ``os.stat().st_mode``)."""
        return cls(*(bool(mode & bit) for _, bit in _FLAG_BITS))

    def flags(self) -> tuple[bool, ...]:
        return astuple(self)

    def to_octal(self) -> int:
        """Encode as an octal triple written as a decimal number (``0o755`` -> ``755``)."""
        digits = []
        for start in (0, 3, 6):
            read, write, execute = self.flags()[start : start + 3]
            digits.append(4 * read + 2 * write + execute)
        return digits[0] * 100 + digits[1] * 10 + digits[2]

    def to_mode(self) -> int:
        """Encode as platform permission bits suitable for ``os.chmod``."""
        mode = 0
        for flag, (_, bit) in zip(self.flags(), _FLAG_BITS):
            if flag:
                mode |= bit
        return mode

    def to_symbolic(self) -> str:
        return "".join(
            symbol if flag else "-"
            for flag, (symbol, _) in zip(self.flags(), _FLAG_BITS)
        )

    def __str__(self) -> str:
        return self.to_symbolic()
