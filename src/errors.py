"""Error definitions for the formatting helpers."""

from __future__ import annotations


class HelperError(Exception):
    """Base class for helper errors."""


class NotASequenceError(HelperError, TypeError):
    """Raised when a helper expecting a list or tuple receives something else."""

    def __init__(self, value: object, argument: str = "arr") -> None:
        super().__init__(
            f"Invalid argument '{argument}': expected a list or tuple, "
            f"got {type(value).__name__}."
        )
        self.value = value
        self.argument = argument


__all__ = ["HelperError", "NotASequenceError"]
