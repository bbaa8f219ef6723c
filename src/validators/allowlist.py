"""
Allow-list redirect URL validator.

A URL is accepted when it starts with an optional scheme (`http://`,
`https://` or protocol-relative `//`), an optional subdomain or user-info
prefix ending in `.` or `@`, one of the trusted root domains, an optional
`:port` and an optional `/path`.

The pattern is anchored at the start only. A string such as
`https://example.com.evil.net` is therefore accepted, because its beginning
conforms. Pass `strict=True` (or set STRICT_URL_MATCHING) to require the
whole string to conform.

Usage:
    from src.domain.models import DomainAllowList
    from src.validators.allowlist import AllowListURLValidator

    validator = AllowListURLValidator(DomainAllowList.of(["example.com"]))
    validator.is_allowed("https://sub.example.com/path")  # True
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Optional

from src.config import get_settings
from src.domain.models import DomainAllowList
from src.utils.logging import get_logger
from src.validators.abstract import AbstractURLValidator, URLValidator

log = get_logger(__name__)

_SCHEME = r"((http://)|(https://)|(//))?"
_PREFIX = r"([0-9a-zA-Z._:\-]*[.@])?"
_PORT = r"(:[0-9]+)?"
_PATH = r"(/.*)?"


def build_pattern(allow_list: DomainAllowList, strict: bool = False) -> re.Pattern[str]:
    """Compile the matching pattern for an allow-list."""
    domains = "|".join(f"({re.escape(domain)})" for domain in allow_list.domains)
    source = f"{_SCHEME}{_PREFIX}({domains}){_PORT}{_PATH}"
    if strict:
        source += r"\Z"
    return re.compile(source)


class AllowListURLValidator(AbstractURLValidator):
    """
    Purely syntactic redirect URL check against trusted root domains.

    No DNS resolution and no normalization (percent-decoding, backslash
    handling) take place. Domain matching is case-sensitive.
    """

    name: str = "allowlist"

    def __init__(self, allow_list: DomainAllowList, strict: bool = False) -> None:
        self._allow_list = allow_list
        self._strict = strict
        self._pattern = build_pattern(allow_list, strict=strict)
        log.debug(
            "URL validator ready",
            extra={"domains": list(allow_list.domains), "strict": strict},
        )

    @property
    def allow_list(self) -> DomainAllowList:
        return self._allow_list

    @property
    def strict(self) -> bool:
        return self._strict

    def is_allowed(self, url: object) -> bool:
        if not isinstance(url, str) or not url:
            log.debug("Rejected non-string or empty URL", extra={"url": repr(url)})
            return False
        match = self._pattern.match(url)
        allowed = bool(match and match.group(0))
        if not allowed:
            log.debug("Rejected URL", extra={"url": url, "strict": self._strict})
        return allowed


@lru_cache(maxsize=1)
def get_default_validator() -> AllowListURLValidator:
    """
    Validator built from settings (ALLOWED_DOMAINS, STRICT_URL_MATCHING).
    """
    settings = get_settings()
    return AllowListURLValidator(
        DomainAllowList.of(settings.allowed_domains),
        strict=settings.strict_url_matching,
    )


def is_allowed_url(url: object, validator: Optional[URLValidator] = None) -> bool:
    """
    Check a redirect URL against the allow-list.

    Parameters
    ----------
    url : object
        Candidate URL. Non-strings are rejected rather than raising.
    validator : URLValidator, optional
        Validator to use. Defaults to the one built from settings.
    """
    return (validator or get_default_validator()).is_allowed(url)


__all__ = [
    "AllowListURLValidator",
    "build_pattern",
    "get_default_validator",
    "is_allowed_url",
]
