"""String helpers."""

from __future__ import annotations

import html
import re

_UNDERSCORE_LETTER = re.compile(r"_([a-z])", re.IGNORECASE)


def hump(key: str) -> str:
    """
    Convert snake_case to camelCase.

    Only the single letter following each underscore is upper-cased and the
    underscore consumed; underscores before digits or other underscores stay.

    >>> hump("user_first_name")
    'userFirstName'
    """
    return _UNDERSCORE_LETTER.sub(lambda m: m.group(1).upper(), key)


def unescape_html(text: str) -> str:
    """Replace HTML character references (`&amp;`, `&#39;`, ...) with their characters."""
    return html.unescape(text)


__all__ = ["hump", "unescape_html"]
