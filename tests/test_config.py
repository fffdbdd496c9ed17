import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from optres import Ok, Settings, get_settings
from optres.config import JSON_INDENT_VAR


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(JSON_INDENT_VAR, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_when_unset() -> None:
    assert Settings.from_env() == Ok(Settings(json_indent=2))


@pytest.mark.parametrize("raw, expected", [("0", 0), ("4", 4), (" 3 ", 3), ("none", None), ("NONE", None), ("", 2)])
def test_valid_indent(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None) -> None:
    monkeypatch.setenv(JSON_INDENT_VAR, raw)
    assert Settings.from_env() == Ok(Settings(json_indent=expected))


@pytest.mark.parametrize("raw", ["two", "-1", "1.5"])
def test_invalid_indent_is_err(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv(JSON_INDENT_VAR, raw)
    result = Settings.from_env()
    assert result.is_err()
    assert isinstance(result.unwrap_err(), ValueError)
    assert JSON_INDENT_VAR in str(result.unwrap_err())


def test_get_settings_falls_back_with_warning(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv(JSON_INDENT_VAR, "wide")
    with caplog.at_level(logging.WARNING, logger="optres.config"):
        settings = get_settings()
    assert settings == Settings()
    assert any("Ignoring invalid" in r.getMessage() for r in caplog.records)


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(JSON_INDENT_VAR, "5")
    first = get_settings()
    monkeypatch.setenv(JSON_INDENT_VAR, "1")
    assert get_settings() is first
    assert first.json_indent == 5


def test_dotenv_file_is_read_without_loading(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPTRES_UNRELATED_KEY", raising=False)
    (tmp_path / ".env").write_text(f"{JSON_INDENT_VAR}=7\nOPTRES_UNRELATED_KEY=x\n")
    assert Settings.from_env() == Ok(Settings(json_indent=7))
    assert JSON_INDENT_VAR not in os.environ
    assert "OPTRES_UNRELATED_KEY" not in os.environ


def test_process_environment_wins_over_dotenv_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text(f"{JSON_INDENT_VAR}=7\n")
    monkeypatch.setenv(JSON_INDENT_VAR, "1")
    assert Settings.from_env() == Ok(Settings(json_indent=1))
