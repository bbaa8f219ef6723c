from __future__ import annotations

import pytest
from pydantic import ValidationError

from src import config
from src.config import DEFAULT_ALLOWED_DOMAINS, Settings
from src.domain.models import DatePattern, DomainAllowList


def test_get_settings_defaults() -> None:
    settings = config.get_settings()
    assert settings.app_env == "development"
    assert settings.log_level == "INFO"
    assert settings.json_logs is False
    assert settings.allowed_domains == DEFAULT_ALLOWED_DOMAINS
    assert settings.strict_url_matching is False
    assert settings.default_date_pattern is DatePattern.DATETIME


def test_get_settings_is_cached() -> None:
    assert config.get_settings() is config.get_settings()


def test_allowed_domains_accepts_comma_separated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_DOMAINS", " example.com ,trusted.org,")

    assert Settings().allowed_domains == ["example.com", "trusted.org"]


def test_allowed_domains_accepts_json_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_DOMAINS", '["example.com", "trusted.org"]')

    assert Settings().allowed_domains == ["example.com", "trusted.org"]


def test_settings_read_dotenv_file(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("LOG_LEVEL=DEBUG\nDEFAULT_DATE_PATTERN=YYYY/MM/DD\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.log_level == "DEBUG"
    assert settings.default_date_pattern is DatePattern.SLASHED_DATE


def test_allow_list_strips_and_deduplicates() -> None:
    allow_list = DomainAllowList.of([" example.com", "trusted.org", "example.com"])

    assert allow_list.domains == ("example.com", "trusted.org")


def test_allow_list_accepts_single_string() -> None:
    assert DomainAllowList(domains="example.com").domains == ("example.com",)


@pytest.mark.parametrize(
    "domain",
    ["https://example.com", "example.com/path", "user@example.com", "example.com:80", "localhost", "", "exa mple.com"],
)
def test_allow_list_rejects_non_bare_domains(domain: str) -> None:
    with pytest.raises(ValidationError):
        DomainAllowList.of([domain])


def test_allow_list_must_not_be_empty() -> None:
    with pytest.raises(ValidationError):
        DomainAllowList.of([])


def test_allow_list_is_immutable(example_allow_list: DomainAllowList) -> None:
    with pytest.raises(ValidationError):
        example_allow_list.domains = ("evil.net",)  # type: ignore[misc]
