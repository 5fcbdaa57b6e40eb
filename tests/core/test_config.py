"""Unit tests for fen_printer/core/config.py"""

import pytest
from pydantic import ValidationError

from fen_printer.core.config import PrinterSettings


def test_defaults(clean_env: None) -> None:
    settings = PrinterSettings.from_env()
    assert settings.log_level == "WARNING"
    assert settings.show_source_name is True
    assert settings.encoding == "utf-8-sig"


def test_from_env(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FEN_PRINTER_LOG_LEVEL", "debug")
    monkeypatch.setenv("FEN_PRINTER_SHOW_SOURCE_NAME", "false")
    monkeypatch.setenv("FEN_PRINTER_ENCODING", "latin-1")
    settings = PrinterSettings.from_env()
    assert settings.log_level == "DEBUG"
    assert settings.show_source_name is False
    assert settings.encoding == "latin-1"


@pytest.mark.parametrize("level", ["loud", "", "WARN"])
def test_unknown_log_level(level: str) -> None:
    with pytest.raises(ValidationError):
        PrinterSettings(log_level=level)


@pytest.mark.parametrize("encoding", ["no-such-codec", "utf-9"])
def test_unknown_encoding(encoding: str) -> None:
    with pytest.raises(ValidationError):
        PrinterSettings(encoding=encoding)


def test_overrides_take_precedence(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    """A bad level in the environment does not matter when the command line supplies a good one."""
    monkeypatch.setenv("FEN_PRINTER_LOG_LEVEL", "loud")
    settings = PrinterSettings.from_env(log_level="info")
    assert settings.log_level == "INFO"
