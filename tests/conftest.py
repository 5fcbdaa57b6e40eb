"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import sys
from pathlib import Path
from typing import Callable, Generator

import pytest
from loguru import logger

from fen_printer.core.config import PrinterSettings


@pytest.fixture
def write_fen_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Call the inner function with the file content (and optionally the file name) to get a file on disk."""

    def _write(content: str, name: str = "board.fen") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings() -> PrinterSettings:
    return PrinterSettings()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure settings from the environment running the tests do not leak in."""
    for name in PrinterSettings.model_fields:
        monkeypatch.delenv(f"FEN_PRINTER_{name.upper()}", raising=False)


@pytest.fixture(autouse=True)
def restore_logger() -> Generator[None, None, None]:
    """The CLI swaps loguru sinks. Put the default stderr sink back after every test."""
    try:
        yield
    finally:
        logger.remove()
        logger.add(sys.stderr)
