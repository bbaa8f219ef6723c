"""
Validators package for the formatting helpers.

Re-exports the validator interfaces and the concrete checks so downstream
code can import from `src.validators` directly.
"""

from src.validators.abstract import AbstractURLValidator, URLValidator
from src.validators.allowlist import (
    AllowListURLValidator,
    build_pattern,
    get_default_validator,
    is_allowed_url,
)
from src.validators.phone import PHONE_PATTERN, is_phone

__all__ = [
    # Abstracts
    "AbstractURLValidator",
    "URLValidator",
    # URL allow-list
    "AllowListURLValidator",
    "build_pattern",
    "get_default_validator",
    "is_allowed_url",
    # Phone
    "PHONE_PATTERN",
    "is_phone",
]
