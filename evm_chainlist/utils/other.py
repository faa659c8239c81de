import re
from typing import Any

from ..constants import INDEX_TYPES

_INT_PATTERN = re.compile(
    r"^([+-]?)(0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+|0[0-7]+|0|[1-9][0-9]*)$"
)


def parse_int(value: str) -> int | None:
    """
    Parses an integer written in decimal, hexadecimal (0x), binary (0b)
    or octal (0o or a leading zero) notation.

    :return: The integer, or None if the string is not an integer literal
    """
    match = _INT_PATTERN.match(value.strip())
    if not match:
        return None

    sign, digits = match.groups()
    prefix = digits[:2].lower()
    if prefix == "0x":
        number = int(digits[2:], 16)
    elif prefix == "0b":
        number = int(digits[2:], 2)
    elif prefix == "0o":
        number = int(digits[2:], 8)
    elif len(digits) > 1 and digits[0] == "0":
        number = int(digits[1:], 8)
    else:
        number = int(digits)
    return -number if sign == "-" else number


def is_int(value: str) -> bool:
    return parse_int(value) is not None


def normalize_int(value: Any) -> Any:
    """Converts integer-like strings to int, returns anything else unchanged."""
    if isinstance(value, str):
        number = parse_int(value)
        if number is not None:
            return number
    return value


def _as_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        return parse_int(value)
    return None


def equal_int(value1: Any, value2: Any) -> bool:
    number1 = _as_number(value1)
    number2 = _as_number(value2)
    return number1 is not None and number1 == number2


def is_index_value(value: Any) -> bool:
    return isinstance(value, INDEX_TYPES) and not isinstance(value, bool)
