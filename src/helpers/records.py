"""
Array and record helpers.

These operate on plain lists and dicts as produced by JSON decoding.
"""

from __future__ import annotations

from collections.abc import Mapping, Sized
from typing import Any, Callable, Dict, Optional, Sequence

from src.errors import NotASequenceError
from src.utils.logging import get_logger

log = get_logger(__name__)


def array_to_object(arr: Sequence[Mapping[str, Any]], key: str) -> Dict[Any, Dict[str, Any]]:
    """
    Index a list of records by one of their fields.

    The key field is removed from each stored record; the caller's records
    are left untouched. Records whose key is missing or falsy are skipped and
    later records overwrite earlier ones with the same key.

    Raises
    ------
    NotASequenceError
        When `arr` is not a list or tuple.
    """
    if not isinstance(arr, (list, tuple)):
        log.error("array_to_object expects a list", extra={"got": type(arr).__name__})
        raise NotASequenceError(arr)

    indexed: Dict[Any, Dict[str, Any]] = {}
    for record in arr:
        if not isinstance(record, Mapping):
            continue
        name = record.get(key)
        if not name:
            continue
        indexed[name] = {k: v for k, v in record.items() if k != key}
    return indexed


def assign(target: Optional[Dict[str, Any]], data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Copy `data`'s fields onto `target` in place and return it."""
    if target is None:
        target = {}
    if data:
        target.update(data)
    return target


def each_array(arr: Sequence[Any], callback: Callable[[Any, int], Any]) -> None:
    """
    Call `callback(element, index)` for each element.

    Iteration stops as soon as the callback returns exactly False; other
    falsy results (None, 0, "") do not stop it.
    """
    for index, element in enumerate(arr):
        if callback(element, index) is False:
            break


def _has_attributes(obj: object) -> bool:
    if getattr(obj, "__dict__", None):
        return True
    for klass in type(obj).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        if any(hasattr(obj, slot) for slot in slots if slot not in ("__dict__", "__weakref__")):
            return True
    return False


def is_empty_object(obj: object) -> bool:
    """
    True when `obj` has no keys.

    Mappings and sized containers (lists, strings) are empty when their length
    is zero; other objects when no instance or slot attribute is set.
    """
    if obj is None:
        return True
    if isinstance(obj, (Mapping, Sized)):
        return len(obj) == 0
    return not _has_attributes(obj)


__all__ = ["array_to_object", "assign", "each_array", "is_empty_object"]
