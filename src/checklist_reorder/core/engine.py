"""Reorder entry point: text and caret in, text and caret out."""

from checklist_reorder.core.classifier import classify, usable_matchers
from checklist_reorder.core.reassembler import reassemble
from checklist_reorder.core.segmenter import segment
from checklist_reorder.core.sorter import sort_block
from checklist_reorder.models.checklist import ReorderConfig, ReorderResult, ReorderStatus

LINE_SEPARATOR = "\n"


def clamp_caret_line(caret_line: int, line_count: int) -> int:
    return max(0, min(caret_line, line_count - 1))


def reorder(
    text: str,
    caret_line: int = 0,
    caret_column: int = 0,
    config: ReorderConfig | None = None,
) -> ReorderResult:
    """Reorder the checklist blocks of a document.

    A pure function of its arguments; running it again on its own output
    yields no further change.

    Args:
        text: The whole document.
        caret_line: Zero-based caret line; clamped into the document.
        caret_column: Caret character offset, passed through unchanged.
        config: Matching tables, defaults when omitted.

    Returns:
        ReorderResult. When ``changed`` is False, ``text`` is the input and
        the caret is the (clamped) input caret.
    """
    config = config or ReorderConfig()
    raw_lines = text.split(LINE_SEPARATOR)
    caret_line = clamp_caret_line(caret_line, len(raw_lines))

    statuses = usable_matchers(config.statuses)
    lines = [classify(raw, statuses, has_caret=i == caret_line) for i, raw in enumerate(raw_lines)]
    blocks = segment(lines, config)

    if not any(block.has_checklists for block in blocks):
        return ReorderResult(
            changed=False,
            text=text,
            caret_line=caret_line,
            caret_column=caret_column,
            status=ReorderStatus.NO_CHECKLISTS,
        )

    sorted_blocks = [sort_block(block, config) for block in blocks]
    new_lines, new_caret_line = reassemble(sorted_blocks, fallback_caret=caret_line)
    new_text = LINE_SEPARATOR.join(new_lines)

    if new_text == text:
        return ReorderResult(
            changed=False,
            text=text,
            caret_line=caret_line,
            caret_column=caret_column,
            status=ReorderStatus.UNCHANGED,
        )

    return ReorderResult(
        changed=True,
        text=new_text,
        caret_line=new_caret_line,
        caret_column=caret_column,
        status=ReorderStatus.REORDERED,
    )
