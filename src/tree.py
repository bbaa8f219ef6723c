"""
Leaf discovery for nested record trees.

A tree is a sequence of mappings; each mapping may hold a child sequence
under a caller-chosen key. A node whose child value is absent, empty or not
a sequence is a leaf. Entries that are not mappings at all are leaves too.

Usage:
    from src.tree import collect_leaves, iter_leaves

    tree = [{"id": 1, "children": [{"id": 2}, {"id": 3, "children": []}]}]
    [leaf["id"] for leaf in iter_leaves(tree, "children")]  # [2, 3]
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Callable, Iterator

Node = Any


def _is_branch_list(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _children(node: Node, child_key: str) -> Sequence[Node] | None:
    if not isinstance(node, Mapping):
        return None
    children = node.get(child_key)
    if _is_branch_list(children) and len(children) > 0:
        return children
    return None


def iter_leaves(nodes: object, child_key: str) -> Iterator[Node]:
    """
    Yield every leaf of `nodes` in left-to-right, depth-first order.

    Internal nodes are never yielded and the input is never modified. A node
    object appearing in several branches is yielded once per occurrence.
    Anything other than a non-empty list-like `nodes` yields nothing.
    """
    if not _is_branch_list(nodes) or not nodes:
        return
    for node in nodes:  # type: ignore[union-attr]
        children = _children(node, child_key)
        if children is None:
            yield node
        else:
            yield from iter_leaves(children, child_key)


def collect_leaves(nodes: object, child_key: str, visit: Callable[[Node], Any]) -> None:
    """Invoke `visit` once per leaf, in the order `iter_leaves` produces them."""
    for leaf in iter_leaves(nodes, child_key):
        visit(leaf)


__all__ = ["collect_leaves", "iter_leaves"]
