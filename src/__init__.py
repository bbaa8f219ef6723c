"""
Formatting Helpers - small, stateless helpers for application code.

This package collects independent string, array, number and date helpers:

- Redirect URL validation against a trusted domain allow-list
- Leaf discovery in nested record trees
- Thousands-separator number formatting and zero padding
- Compact date string punctuation and recent-month listings
- Record indexing, merging and snake_case to camelCase conversion
- Mobile phone number checks

Every helper is a pure, synchronous function over caller-supplied values.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from src.config import Settings, get_settings
from src.domain.models import DatePattern, DomainAllowList
from src.errors import HelperError, NotASequenceError
from src.helpers import (
    array_to_object,
    assign,
    each_array,
    format_int_to_thousands,
    format_num_to_thousands,
    get_last_months,
    hump,
    is_empty_object,
    split_date,
    unescape_html,
    zero_pad,
)
from src.tree import collect_leaves, iter_leaves
from src.utils.logging import configure_logging, get_logger
from src.validators import (
    AllowListURLValidator,
    URLValidator,
    get_default_validator,
    is_allowed_url,
    is_phone,
)

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain values
    "DatePattern",
    "DomainAllowList",
    # Errors
    "HelperError",
    "NotASequenceError",
    # Validators
    "AllowListURLValidator",
    "URLValidator",
    "get_default_validator",
    "is_allowed_url",
    "is_phone",
    # Tree
    "collect_leaves",
    "iter_leaves",
    # Helpers
    "array_to_object",
    "assign",
    "each_array",
    "format_int_to_thousands",
    "format_num_to_thousands",
    "get_last_months",
    "hump",
    "is_empty_object",
    "split_date",
    "unescape_html",
    "zero_pad",
    # Logging
    "configure_logging",
    "get_logger",
]
