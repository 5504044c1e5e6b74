"""Split classified lines into blocks of checklist and plain content."""

from collections.abc import Iterable, Sequence

from loguru import logger

from checklist_reorder.core.classifier import usable_matchers
from checklist_reorder.models.checklist import Block, IgnoreScope, Line, LineNode, ReorderConfig


def contains_ignore_marker(text: str, ignore_substrings: Iterable[str]) -> bool:
    """Check whether a line contains any ignore marker."""
    return any(marker in text for marker in usable_matchers(ignore_substrings))


def segment(lines: Sequence[Line], config: ReorderConfig) -> list[Block]:
    """Group lines into blocks.

    A block boundary falls wherever ``is_checklist_anywhere`` changes between
    two adjacent lines, so a root item and its indented children stay in one
    block. Sub-items are attached to the last root item of their block. A
    sub-item with no root item before it in the block is dropped.

    With ``IgnoreScope.PRECEDING`` an ignore marker seen anywhere since the
    previous checklist block closed exempts the next checklist block. With
    ``IgnoreScope.SAME_BLOCK`` only markers inside the block itself count.

    Args:
        lines: Classified lines in document order.
        config: Matching tables and ignore scope.

    Returns:
        Blocks in document order.
    """
    blocks: list[Block] = []
    nodes: list[LineNode] = []
    last_root_index: int | None = None
    marker_since_last_checklist_block = False
    marker_in_block = False

    for i, line in enumerate(lines):
        if contains_ignore_marker(line.text, config.ignore_substrings):
            marker_since_last_checklist_block = True
            marker_in_block = True

        if line.is_sub_item:
            if last_root_index is not None:
                nodes[last_root_index].sub_lines.append(LineNode(line))
            else:
                logger.debug("Dropping sub-item on line {} with no parent item: {!r}", i, line.text)
        else:
            nodes.append(LineNode(line))
            if line.is_root_checklist:
                last_root_index = len(nodes) - 1

        is_last = i + 1 == len(lines)
        if is_last or lines[i + 1].is_checklist_anywhere != line.is_checklist_anywhere:
            has_checklists = last_root_index is not None
            ignored = False
            if has_checklists:
                if config.ignore_scope is IgnoreScope.SAME_BLOCK:
                    ignored = marker_in_block
                else:
                    ignored = marker_since_last_checklist_block
                marker_since_last_checklist_block = False

            blocks.append(Block(nodes=nodes, has_checklists=has_checklists, ignored=ignored))
            nodes = []
            last_root_index = None
            marker_in_block = False

    return blocks
