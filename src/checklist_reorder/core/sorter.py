"""Sort root items of a checklist block by status and priority rank."""

from collections.abc import Sequence
from dataclasses import replace

from loguru import logger

from checklist_reorder.models.checklist import Block, LineNode, ReorderConfig


def status_rank(text: str, sorted_statuses: Sequence[str]) -> int:
    """Return 1 + index of the first status prefix the line starts with, else 0."""
    for index, prefix in enumerate(sorted_statuses):
        if prefix and prefix.strip() and text.startswith(prefix):
            return index + 1
    return 0


def priority_rank(text: str, sorted_substrings: Sequence[str]) -> int:
    """Return ``len(table) - (1 + index)`` for the first marker found in the line, else 0.

    Markers listed earlier get a higher rank. The last marker in the table
    ranks 0, the same as a line without any marker.
    """
    for index, marker in enumerate(sorted_substrings):
        if marker and marker.strip() and marker in text:
            return len(sorted_substrings) - (index + 1)
    return 0


def _sort_key(node: LineNode) -> tuple[int, int]:
    return node.status_rank, node.priority_rank


def sort_block(block: Block, config: ReorderConfig) -> Block:
    """Return the block with its root items sorted.

    Items with a higher status rank come first, then items with a higher
    priority rank. Items matching no sorted status (rank 0) end up last.

    Blocks without root checklist items and ignored blocks are returned as is.
    The sort is stable, so items with equal ranks keep their relative order.
    Sub-items travel with their parent.
    """
    if not block.has_checklists or block.ignored:
        if block.ignored:
            logger.debug("Skipping ignored block starting with {!r}", block.nodes[0].text)
        return block

    ranked = [
        replace(
            node,
            status_rank=status_rank(node.text, config.sorted_statuses),
            priority_rank=priority_rank(node.text, config.sorted_substrings),
        )
        for node in block.nodes
    ]
    # reverse=True keeps equal items in their original order.
    return block.with_nodes(sorted(ranked, key=_sort_key, reverse=True))
