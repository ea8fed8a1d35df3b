"""
Identifier parsing and pagination argument validation
"""

import re

from .errors import InvalidArgument

TAKE_DEFAULT = 30
TAKE_MIN = 1
TAKE_MAX = 50
SKIP_DEFAULT = 0

# Bounds of the Integer primary key columns
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1

_STRICT_ID = re.compile(r"[0-9]+")
_LENIENT_ID = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def _in_key_range(key: int) -> int | None:
    """Keys no row can have are reported like any other unknown id."""
    if key < MIN_ID or key > MAX_ID:
        return None
    return key


def parse_id(raw: str) -> int | None:
    """Parse an identifier made only of ASCII digits; None for anything else."""
    if not isinstance(raw, str) or not _STRICT_ID.fullmatch(raw):
        return None
    return _in_key_range(int(raw))


def parse_id_lenient(raw: str) -> int | None:
    """Parse the leading integer of an identifier, ignoring trailing garbage.

    Read paths accept ids such as ``" 7"``, ``"42abc"`` or ``"0x1A"``; writes
    go through :func:`parse_id` instead.
    """
    if not isinstance(raw, str):
        return None
    match = _LENIENT_ID.match(raw)
    if match is None:
        return None

    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        key = int(hex_digits, 16)
    else:
        key = int(digits)
    return _in_key_range(-key if sign == "-" else key)


def validate_take(value: int | None, minimum: int = TAKE_MIN, maximum: int = TAKE_MAX) -> int:
    if value is None:
        return TAKE_DEFAULT
    if value < minimum or value > maximum:
        raise InvalidArgument("take", value, minimum, maximum)
    return value


def validate_skip(value: int | None) -> int:
    if value is None:
        return SKIP_DEFAULT
    if value < 0:
        raise InvalidArgument("skip", value, 0)
    return value
