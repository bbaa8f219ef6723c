"""
Helpers package for the formatting helpers.

Exports the peripheral record, number, date and string helpers. Each one is
a standalone, stateless function.
"""

from src.helpers.dates import get_last_months, split_date
from src.helpers.numbers import format_int_to_thousands, format_num_to_thousands, zero_pad
from src.helpers.records import array_to_object, assign, each_array, is_empty_object
from src.helpers.text import hump, unescape_html

__all__ = [
    # Records
    "array_to_object",
    "assign",
    "each_array",
    "is_empty_object",
    # Numbers
    "format_int_to_thousands",
    "format_num_to_thousands",
    "zero_pad",
    # Dates
    "get_last_months",
    "split_date",
    # Strings
    "hump",
    "unescape_html",
]
