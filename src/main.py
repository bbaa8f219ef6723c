from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from src.config import get_settings
from src.domain.models import DatePattern, DomainAllowList
from src.errors import HelperError
from src.helpers.dates import get_last_months, split_date
from src.helpers.numbers import format_int_to_thousands, format_num_to_thousands
from src.helpers.records import array_to_object
from src.helpers.text import hump
from src.reporter import print_checks, print_leaves
from src.tree import iter_leaves
from src.utils.logging import configure_logging, get_logger
from src.validators.allowlist import AllowListURLValidator
from src.validators.phone import is_phone

app = typer.Typer(help="Formatting helpers CLI.")
log = get_logger(__name__)
err_console = Console(stderr=True)


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)


def _load_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid JSON: {exc}") from exc


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.json_logs} | "
        f"allowed_domains={','.join(settings.allowed_domains)} "
        f"strict={settings.strict_url_matching} | date_pattern={settings.default_date_pattern.value}"
    )


@app.command("check-url")
def check_url(
    urls: List[str] = typer.Argument(..., help="Redirect URLs to validate."),
    domains: Optional[List[str]] = typer.Option(
        None,
        "--domain",
        "-d",
        help="Trusted root domain (repeatable). Defaults to ALLOWED_DOMAINS.",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--loose",
        help="Require the whole URL to conform. Defaults to STRICT_URL_MATCHING.",
    ),
) -> None:
    """
    Validate redirect URLs against the domain allow-list. Exits 1 if any is rejected.
    """
    settings = get_settings()
    try:
        allow_list = DomainAllowList.of(domains or settings.allowed_domains)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--domain") from exc

    validator = AllowListURLValidator(
        allow_list, strict=settings.strict_url_matching if strict is None else strict
    )
    checks = [(url, validator.is_allowed(url)) for url in urls]
    print_checks("Redirect URL Check", checks)
    if not all(allowed for _, allowed in checks):
        raise typer.Exit(code=1)


@app.command("check-phone")
def check_phone(numbers: List[str] = typer.Argument(..., help="Phone numbers to check.")) -> None:
    """
    Check mobile phone numbers. Exits 1 if any is invalid.
    """
    checks = [(number, is_phone(number)) for number in numbers]
    print_checks("Phone Number Check", checks)
    if not all(ok for _, ok in checks):
        raise typer.Exit(code=1)


@app.command()
def thousands(
    value: str = typer.Argument(..., help="Number to format."),
    decimal: bool = typer.Option(
        False, "--decimal", help="Keep the fractional part (defaults to .00)."
    ),
) -> None:
    """
    Format a number with thousands separators.
    """
    formatter = format_num_to_thousands if decimal else format_int_to_thousands
    typer.echo(formatter(value))


@app.command("split-date")
def split_date_command(
    value: str = typer.Argument(..., help="Compact date string, e.g. 20170224093015."),
    pattern: Optional[DatePattern] = typer.Option(
        None, "--pattern", "-p", help="Output pattern. Defaults to DEFAULT_DATE_PATTERN."
    ),
) -> None:
    """
    Punctuate a compact date or datetime string.
    """
    result = split_date(value, pattern or get_settings().default_date_pattern)
    typer.echo(result or "")


@app.command("last-months")
def last_months(
    count: int = typer.Option(1, "--count", "-n", min=1, help="Number of months."),
) -> None:
    """
    List the months before the current one as YYYYMM, most recent first.
    """
    for month in get_last_months(count):
        typer.echo(month)


@app.command()
def camel(keys: List[str] = typer.Argument(..., help="snake_case keys.")) -> None:
    """
    Convert snake_case keys to camelCase.
    """
    for key in keys:
        typer.echo(hump(key))


@app.command()
def leaves(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file holding the tree."),
    child_key: str = typer.Option("children", "--child-key", "-k", help="Field holding child nodes."),
    as_json: bool = typer.Option(False, "--json", help="Print leaves as a JSON array."),
) -> None:
    """
    List the leaf nodes of a JSON tree in depth-first order.
    """
    tree = _load_json(path)
    found = list(iter_leaves(tree, child_key))
    log.debug("Collected leaves", extra={"path": str(path), "leaves": len(found)})
    if as_json:
        typer.echo(json.dumps(found, ensure_ascii=False, indent=2))
    else:
        print_leaves(found)


@app.command()
def index(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file holding a list of records."),
    key: str = typer.Option(..., "--key", "-k", help="Field to index records by."),
) -> None:
    """
    Convert a JSON list of records into an object keyed by one field.
    """
    records = _load_json(path)
    try:
        indexed = array_to_object(records, key)
    except HelperError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    typer.echo(json.dumps(indexed, ensure_ascii=False, indent=2))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
