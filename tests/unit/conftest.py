"""Shared test fixtures."""

from pathlib import Path

import pytest

from tests.unit.fakes import UNSORTED_DOC


@pytest.fixture
def unsorted_file(tmp_path: Path) -> Path:
    path = tmp_path / "groceries.md"
    path.write_text(UNSORTED_DOC, encoding="utf-8")
    return path


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """Path of a settings file that does not exist yet."""
    return tmp_path / "config" / "settings.json"
