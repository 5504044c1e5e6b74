"""Domain models for checklist reordering."""

from dataclasses import dataclass, field, replace
from enum import Enum

from checklist_reorder.config import (
    DEFAULT_IGNORE_SUBSTRINGS,
    DEFAULT_SORTED_STATUSES,
    DEFAULT_SORTED_SUBSTRINGS,
    DEFAULT_STATUSES,
)


class IgnoreScope(str, Enum):
    """Where an ignore marker has to appear to exempt a checklist block."""

    PRECEDING = "preceding"
    SAME_BLOCK = "same-block"


class ReorderStatus(str, Enum):
    """Outcome of a reorder request."""

    REORDERED = "reordered"
    UNCHANGED = "unchanged"
    NO_CHECKLISTS = "no-checklists"
    NO_DOCUMENT = "no-document"
    DISABLED = "disabled"


@dataclass(frozen=True)
class Caret:
    """A caret position: zero-based line and character offset."""

    line: int = 0
    ch: int = 0


@dataclass(frozen=True)
class ReorderConfig:
    """Matching tables used by a reorder pass."""

    statuses: tuple[str, ...] = DEFAULT_STATUSES
    sorted_statuses: tuple[str, ...] = DEFAULT_SORTED_STATUSES
    sorted_substrings: tuple[str, ...] = DEFAULT_SORTED_SUBSTRINGS
    ignore_substrings: tuple[str, ...] = DEFAULT_IGNORE_SUBSTRINGS
    ignore_scope: IgnoreScope = IgnoreScope.PRECEDING


@dataclass(frozen=True)
class Line:
    """One source line together with its classification."""

    text: str
    is_root_checklist: bool = False
    is_checklist_anywhere: bool = False
    has_caret: bool = False

    @property
    def is_sub_item(self) -> bool:
        return self.is_checklist_anywhere and not self.is_root_checklist


@dataclass
class LineNode:
    """A root-level line in a block, with the sub-items attached to it."""

    line: Line
    sub_lines: list["LineNode"] = field(default_factory=list)
    status_rank: int = 0
    priority_rank: int = 0

    @property
    def text(self) -> str:
        return self.line.text


@dataclass
class Block:
    """A maximal run of lines sharing the same checklist class."""

    nodes: list[LineNode] = field(default_factory=list)
    has_checklists: bool = False
    ignored: bool = False

    def with_nodes(self, nodes: list[LineNode]) -> "Block":
        return replace(self, nodes=nodes)


@dataclass(frozen=True)
class ReorderResult:
    """Result of a reorder pass.

    ``changed`` is False whenever ``text`` equals the input; the caller must
    then leave both the buffer and the caret alone.
    """

    changed: bool
    text: str
    caret_line: int
    caret_column: int
    status: ReorderStatus
