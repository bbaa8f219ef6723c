"""
Abstract validator interfaces for the formatting helpers.

URL validators implement the URLValidator protocol so callers (and the CLI)
can swap the allow-list based implementation for an alternate one in tests.
"""

from __future__ import annotations

import abc
from typing import Protocol, runtime_checkable


@runtime_checkable
class URLValidator(Protocol):
    """
    Common interface for redirect URL validators.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    """

    name: str

    def is_allowed(self, url: object) -> bool:
        """
        Decide whether `url` may be used as a redirect target.

        Implementations must never raise; anything that is not an acceptable
        URL string yields False.
        """
        ...


class AbstractURLValidator(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses set `name` and implement `is_allowed`.
    """

    name: str

    @abc.abstractmethod
    def is_allowed(self, url: object) -> bool:  # pragma: no cover - interface only
        """Return True when the URL is acceptable."""
        raise NotImplementedError

    def __call__(self, url: object) -> bool:
        return self.is_allowed(url)


__all__ = [
    "URLValidator",
    "AbstractURLValidator",
]
