"""
Tests for the PermissionSet entity.
"""

import pytest

from fsshell.entities.permissions import PermissionSet
from fsshell.exceptions import ErrorKind, InvalidArgumentError


class TestPermissionSetOctal:
    """Decoding and encoding of octal triples."""

    @pytest.mark.parametrize(
        "octal, symbolic",
        [
            (755, "rwxr-xr-x"),
            (644, "rw-r--r--"),
            (600, "rw-------"),
            (777, "rwxrwxrwx"),
            (0, "---------"),
            (7, "------rwx"),
            (40, "---r-----"),
        ],
    )
    def test_from_octal(self, octal, symbolic):
        """Each digit maps to read=4, write=2, execute=1."""
        assert PermissionSet.from_octal(octal).to_symbolic() == symbolic

    def test_from_octal_sets_named_flags(self):
        """The owner digit drives the owner flags."""
        perms = PermissionSet.from_octal(750)

        assert perms.owner_read and perms.owner_write and perms.owner_execute
        assert perms.group_read and not perms.group_write and perms.group_execute
        assert not (perms.other_read or perms.other_write or perms.other_execute)

    def test_digits_above_seven_use_low_bits(self):
        """Digits 8 and 9 only contribute their low three bits."""
        assert PermissionSet.from_octal(988).to_symbolic() == "--x------"
        assert PermissionSet.from_octal(999).to_symbolic() == "--x--x--x"

    def test_only_last_three_digits_are_used(self):
        """Digits are taken modulo 10 from the last three positions."""
        assert PermissionSet.from_octal(1755) == PermissionSet.from_octal(755)

    def test_negative_value_is_rejected(self):
        """Negative numbers are not an octal triple."""
        with pytest.raises(InvalidArgumentError, match="Invalid octal permissions"):
            PermissionSet.from_octal(-1)

    def test_to_octal(self):
        """Encoding returns the digits as a decimal number."""
        assert PermissionSet.from_symbolic("rw-r-----").to_octal() == 640
        assert PermissionSet.from_octal(755).to_octal() == 755
        assert PermissionSet().to_octal() == 0


class TestPermissionSetParsing:
    """Parsing user-supplied octal tokens."""

    def test_parse_octal(self):
        assert PermissionSet.parse_octal("644").to_symbolic() == "rw-r--r--"

    def test_parse_octal_with_leading_zero(self):
        """A leading zero does not change the triple."""
        assert PermissionSet.parse_octal("0755") == PermissionSet.from_octal(755)

    @pytest.mark.parametrize("token", ["abc", "", "-1", "7a5", "7.5", "0x1ff"])
    def test_parse_octal_rejects_non_numeric(self, token):
        """Malformed tokens are invalid arguments."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            PermissionSet.parse_octal(token)

        assert exc_info.value.kind is ErrorKind.INVALID_ARGUMENT


class TestPermissionSetSymbolic:
    """Symbolic string conversions."""

    def test_from_symbolic(self):
        perms = PermissionSet.from_symbolic("rwxr-x--x")

        assert perms.to_octal() == 751
        assert str(perms) == "rwxr-x--x"

    @pytest.mark.parametrize("text", ["rwx", "rwxrwxrwxr", "rwxrwxrwz", "wrx------"])
    def test_from_symbolic_rejects_malformed(self, text):
        """Wrong length, unknown letters and misplaced letters are rejected."""
        with pytest.raises(InvalidArgumentError, match="Invalid permission string"):
            PermissionSet.from_symbolic(text)

    def test_default_is_no_permissions(self):
        assert PermissionSet().to_symbolic() == "---------"


class TestPermissionSetMode:
    """Platform mode integer conversions."""

    def test_to_mode(self):
        assert PermissionSet.from_octal(755).to_mode() == 0o755
        assert PermissionSet.from_octal(644).to_mode() == 0o644

    def test_from_mode_ignores_file_type_bits(self):
        """st_mode of a regular file carries type bits above the permissions."""
        assert PermissionSet.from_mode(0o100644).to_symbolic() == "rw-r--r--"
        assert PermissionSet.from_mode(0o40755).to_symbolic() == "rwxr-xr-x"

    def test_from_mode_ignores_special_bits(self):
        """setuid/setgid/sticky are outside the nine-bit model."""
        assert PermissionSet.from_mode(0o4755) == PermissionSet.from_octal(755)
