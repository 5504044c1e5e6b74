"""Flatten blocks back into lines and find where the caret ended up."""

from collections.abc import Iterable

from checklist_reorder.models.checklist import Block


def reassemble(blocks: Iterable[Block], *, fallback_caret: int) -> tuple[list[str], int]:
    """Flatten blocks into output lines.

    Each root item is emitted followed by its sub-items. The caret line is the
    flat index of the element that carried the caret before sorting, or
    ``fallback_caret`` when no element did.

    Returns:
        (lines, caret_line) tuple.
    """
    out: list[str] = []
    caret_line: int | None = None

    for block in blocks:
        for node in block.nodes:
            if node.line.has_caret:
                caret_line = len(out)
            out.append(node.text)
            for sub in node.sub_lines:
                if sub.line.has_caret:
                    caret_line = len(out)
                out.append(sub.text)

    return out, fallback_caret if caret_line is None else caret_line
