"""Tests for line classification."""

from checklist_reorder.core.classifier import (
    classify,
    is_checklist_anywhere,
    is_root_checklist,
    usable_matchers,
)
from checklist_reorder.models.checklist import ReorderConfig

STATUSES = ReorderConfig().statuses


def test_root_checklist_line() -> None:
    line = classify("- [x] done", STATUSES)
    assert line.is_root_checklist
    assert line.is_checklist_anywhere
    assert not line.is_sub_item


def test_indented_checklist_line_is_sub_item() -> None:
    line = classify("    - [ ] child", STATUSES)
    assert not line.is_root_checklist
    assert line.is_checklist_anywhere
    assert line.is_sub_item


def test_plain_lines_are_not_checklists() -> None:
    for text in ["", "plain", "- bullet", "  - [?] unknown status", "[ ] no dash"]:
        line = classify(text, STATUSES)
        assert not line.is_root_checklist, text
        assert not line.is_checklist_anywhere, text


def test_has_caret_is_carried() -> None:
    assert classify("- [ ] a", STATUSES, has_caret=True).has_caret
    assert not classify("- [ ] a", STATUSES).has_caret


def test_empty_prefixes_never_match() -> None:
    statuses = ["", "   ", "- [ ]"]
    assert usable_matchers(statuses) == ["- [ ]"]
    assert not is_root_checklist("plain text", statuses)
    assert not is_checklist_anywhere("plain text", statuses)
    assert is_root_checklist("- [ ] task", statuses)


def test_custom_statuses() -> None:
    statuses = ["* [ ]", "* [x]"]
    assert is_root_checklist("* [x] star", statuses)
    assert not is_root_checklist("- [x] dash", statuses)
