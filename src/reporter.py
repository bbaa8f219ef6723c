"""
Rich rendering for CLI output.

Tables are printed to a Console supplied by the caller (defaulting to stdout)
so tests can capture them.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table


def _cell(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return escape(json.dumps(value, ensure_ascii=False, sort_keys=True))
    return "" if value is None else escape(str(value))


def print_checks(
    title: str,
    checks: Sequence[Tuple[str, bool]],
    console: Optional[Console] = None,
) -> None:
    """
    Render a pass/fail table, one row per checked value.
    """
    console = console or Console()

    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Value", style="cyan", overflow="fold")
    table.add_column("Result", justify="center")

    for value, allowed in checks:
        verdict = "[bold green]allowed[/bold green]" if allowed else "[bold red]rejected[/bold red]"
        table.add_row(escape(value), verdict)

    console.print(table)


def print_leaves(leaves: Iterable[Any], console: Optional[Console] = None) -> None:
    """
    Render tree leaves as a table.

    Mapping leaves get one column per field, in first-seen order; other leaves
    are shown in a single "Value" column.
    """
    console = console or Console()
    rows: List[Any] = list(leaves)

    if not rows:
        console.print("[yellow]No leaves found.[/yellow]")
        return

    columns: List[str] = []
    for leaf in rows:
        if isinstance(leaf, dict):
            for key in leaf:
                if key not in columns:
                    columns.append(str(key))

    table = Table(title="Tree Leaves", box=box.ROUNDED, caption=f"{len(rows)} leaf node(s)")
    table.add_column("#", justify="right", style="magenta")
    for column in columns or ["Value"]:
        table.add_column(escape(column), style="cyan", overflow="fold")

    for index, leaf in enumerate(rows, start=1):
        if columns and isinstance(leaf, dict):
            table.add_row(str(index), *(_cell(leaf.get(column)) for column in columns))
        elif columns:
            table.add_row(str(index), _cell(leaf), *([""] * (len(columns) - 1)))
        else:
            table.add_row(str(index), _cell(leaf))

    console.print(table)


__all__ = ["print_checks", "print_leaves"]
