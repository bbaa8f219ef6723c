"""
Number formatting helpers.

Inputs may be numbers or numeric strings; they are formatted from their
string form, so no float rounding is applied. Floats are rendered
positionally (never in exponent notation) before grouping.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Tuple, Union

Numeric = Union[int, float, str]


def _group_thousands(digits: str) -> str:
    """Insert `,` every three digits counting from the right."""
    sign = ""
    if digits[:1] in ("-", "+"):
        sign, digits = digits[0], digits[1:]
    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    if digits:
        groups.insert(0, digits)
    return sign + ",".join(groups)


def _split(num: object, default: str) -> Tuple[str, str]:
    if isinstance(num, float) and num:
        text = format(Decimal(repr(num)), "f")
    else:
        text = str(num or default)
    integer, _, fraction = text.partition(".")
    return integer, fraction


def format_int_to_thousands(num: Numeric | None) -> str:
    """
    Format the integer part of `num` with thousands separators.

    >>> format_int_to_thousands("1234567")
    '1,234,567'
    >>> format_int_to_thousands(1234.56)
    '1,234'
    """
    integer, _ = _split(num, "0")
    return _group_thousands(integer)


def format_num_to_thousands(num: Numeric | None) -> str:
    """
    Format `num` with thousands separators, keeping its fractional part.

    A missing fractional part defaults to "00"; an existing one is kept as is.

    >>> format_num_to_thousands("1234.5")
    '1,234.5'
    >>> format_num_to_thousands(1234)
    '1,234.00'
    """
    integer, fraction = _split(num, "0.00")
    return f"{_group_thousands(integer)}.{fraction or '00'}"


def zero_pad(num: Numeric) -> str:
    """Prefix a single "0" when the value is below ten."""
    if float(num) < 10:
        return f"0{num}"
    return str(num)


__all__ = ["format_int_to_thousands", "format_num_to_thousands", "zero_pad"]
