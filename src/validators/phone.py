"""Mobile phone number check."""

from __future__ import annotations

import re

# 11 digits: leading 1, a carrier digit from 3/4/5/7/8, then nine digits.
PHONE_PATTERN = re.compile(r"1[34578][0-9]\d{4}\d{4}")


def is_phone(num: object) -> bool:
    """Return True when `num` is an 11-digit mainland mobile number."""
    if num is None or isinstance(num, bool):
        return False
    return PHONE_PATTERN.fullmatch(str(num)) is not None


__all__ = ["PHONE_PATTERN", "is_phone"]
