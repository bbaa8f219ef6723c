"""
Pytest configuration for the formatting helpers.

Provides fixtures for:
- A small allow-list and validators built from it
- A sample record tree
- Settings isolation (environment and cached instances)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Generator

import pytest

from src.config import get_settings
from src.domain.models import DomainAllowList
from src.validators.allowlist import AllowListURLValidator, get_default_validator

_SETTINGS_ENV = (
    "APP_ENV",
    "LOG_LEVEL",
    "JSON_LOGS",
    "ALLOWED_DOMAINS",
    "STRICT_URL_MATCHING",
    "DEFAULT_DATE_PATTERN",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """
    Clear settings env vars and caches so each test sees defaults.

    Runs from an empty directory so a developer's `.env` is never picked up,
    and restores root logging the CLI may have reconfigured.
    """
    root = logging.getLogger()
    level = root.level
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    get_default_validator.cache_clear()
    yield
    for handler in [h for h in root.handlers if h.get_name() == "default"]:
        root.removeHandler(handler)
    root.setLevel(level)
    get_settings.cache_clear()
    get_default_validator.cache_clear()


@pytest.fixture
def example_allow_list() -> DomainAllowList:
    return DomainAllowList.of(["example.com", "trusted.org"])


@pytest.fixture
def loose_validator(example_allow_list: DomainAllowList) -> AllowListURLValidator:
    return AllowListURLValidator(example_allow_list)


@pytest.fixture
def strict_validator(example_allow_list: DomainAllowList) -> AllowListURLValidator:
    return AllowListURLValidator(example_allow_list, strict=True)


@pytest.fixture
def sample_tree() -> list[dict[str, Any]]:
    """
    Three-level tree with leaves 2, 4, 5 and 6 in document order.
    """
    return [
        {"id": 1, "children": [{"id": 2}, {"id": 3, "children": [{"id": 4}, {"id": 5, "children": []}]}]},
        {"id": 6, "children": None},
    ]


@pytest.fixture
def tree_file(tmp_path: Path, sample_tree: list[dict[str, Any]]) -> Path:
    path = tmp_path / "tree.json"
    path.write_text(json.dumps(sample_tree), encoding="utf-8")
    return path
