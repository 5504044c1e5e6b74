"""Tests for domain models."""

import pytest

from checklist_reorder.models.checklist import Caret, Line, ReorderConfig


def test_config_is_frozen() -> None:
    config = ReorderConfig()
    with pytest.raises(AttributeError):
        config.statuses = ("- [ ]",)  # type: ignore[misc]


def test_default_config_tables() -> None:
    config = ReorderConfig()
    assert config.statuses == ("- [ ]", "- [/]", "- [x]", "- [-]", "- [>]", "- [<]")
    assert config.sorted_statuses == ("- [x]", "- [-]")
    assert config.sorted_substrings == ("🔺", "⏫", "🔽", "⏬")
    assert config.ignore_substrings == ("#donotsort",)


def test_line_is_sub_item_only_when_indented_checklist() -> None:
    assert Line("  - [ ] a", is_root_checklist=False, is_checklist_anywhere=True).is_sub_item
    assert not Line("- [ ] a", is_root_checklist=True, is_checklist_anywhere=True).is_sub_item
    assert not Line("text").is_sub_item


def test_caret_defaults_to_document_start() -> None:
    assert Caret() == Caret(line=0, ch=0)
