"""Tests for the reorder entry point."""

from checklist_reorder.core.engine import reorder
from checklist_reorder.models.checklist import IgnoreScope, ReorderConfig, ReorderStatus
from tests.unit.fakes import SORTED_DOC, UNSORTED_DOC


def test_reorder_document() -> None:
    result = reorder(UNSORTED_DOC)
    assert result.changed is True
    assert result.status is ReorderStatus.REORDERED
    assert result.text == SORTED_DOC


def test_reorder_is_idempotent() -> None:
    first = reorder(UNSORTED_DOC, 3, 4)
    second = reorder(first.text, first.caret_line, first.caret_column)
    assert second.changed is False
    assert second.status is ReorderStatus.UNCHANGED
    assert second.text == first.text
    assert second.caret_line == first.caret_line


def test_text_without_checklists_is_untouched() -> None:
    text = "# Title\n\nSome prose.\n- a bullet\n"
    result = reorder(text, 2, 3)
    assert result.changed is False
    assert result.status is ReorderStatus.NO_CHECKLISTS
    assert result.text == text
    assert (result.caret_line, result.caret_column) == (2, 3)


def test_sort_example_with_caret() -> None:
    config = ReorderConfig(sorted_statuses=("- [x]",))
    result = reorder("- [ ] a\n- [x] b\n- [ ] c", caret_line=0, caret_column=5, config=config)
    assert result.text == "- [x] b\n- [ ] a\n- [ ] c"
    assert result.caret_line == 1
    assert result.caret_column == 5


def test_child_follows_parent() -> None:
    result = reorder("- [ ] parent\n  - [ ] child\n- [x] other", caret_line=1)
    assert result.text == "- [x] other\n- [ ] parent\n  - [ ] child"
    assert result.caret_line == 2


def test_priority_markers_sort_within_status_group() -> None:
    result = reorder("- [ ] later 🔽\n- [ ] now 🔺")
    assert result.text == "- [ ] now 🔺\n- [ ] later 🔽"


def test_ignore_marker_above_block() -> None:
    text = "#donotsort\n- [ ] a\n- [x] b"
    result = reorder(text)
    assert result.changed is False
    assert result.status is ReorderStatus.UNCHANGED
    assert result.text == text


def test_ignore_marker_only_exempts_next_block() -> None:
    text = "#donotsort\n- [ ] a\n- [x] b\nmore\n- [ ] c\n- [x] d"
    result = reorder(text)
    assert result.text == "#donotsort\n- [ ] a\n- [x] b\nmore\n- [x] d\n- [ ] c"


def test_same_block_scope_sorts_despite_marker_above() -> None:
    config = ReorderConfig(ignore_scope=IgnoreScope.SAME_BLOCK)
    result = reorder("#donotsort\n- [ ] a\n- [x] b", config=config)
    assert result.text == "#donotsort\n- [x] b\n- [ ] a"


def test_caret_out_of_bounds_is_clamped() -> None:
    assert reorder("- [ ] a\n- [x] b", caret_line=99).caret_line == 0
    assert reorder("- [ ] a\n- [x] b", caret_line=-5).caret_line == 1


def test_unchanged_result_reports_clamped_caret() -> None:
    result = reorder("- [x] b\n- [ ] a", caret_line=40, caret_column=2)
    assert result.changed is False
    assert result.caret_line == 1


def test_orphan_sub_item_is_dropped_when_document_changes() -> None:
    result = reorder("- [x] done\ntext\n  - [ ] orphan\n- [ ] a")
    assert result.changed is True
    assert result.text == "- [x] done\ntext\n- [ ] a"


def test_orphan_sub_item_kept_when_nothing_to_sort() -> None:
    text = "  - [ ] only indented"
    result = reorder(text)
    assert result.status is ReorderStatus.NO_CHECKLISTS
    assert result.text == text


def test_crlf_line_endings_are_preserved() -> None:
    result = reorder("- [ ] a\r\n- [x] b\r\n")
    assert result.text == "- [x] b\r\n- [ ] a\r\n"


def test_malformed_config_entries_do_not_match_everything() -> None:
    config = ReorderConfig(statuses=("", " ", "- [ ]"), sorted_statuses=("", "- [ ]"))
    text = "plain\nmore plain"
    assert reorder(text, config=config).status is ReorderStatus.NO_CHECKLISTS


def test_duplicate_config_entries_are_harmless() -> None:
    config = ReorderConfig(sorted_statuses=("- [x]", "- [x]"), sorted_substrings=("🔺", "🔺"))
    result = reorder("- [ ] a\n- [x] b", config=config)
    assert result.text == "- [x] b\n- [ ] a"


def test_empty_document() -> None:
    result = reorder("")
    assert result.changed is False
    assert result.text == ""
    assert result.caret_line == 0
