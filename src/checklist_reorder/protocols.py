"""Protocols for the host side of a reorder pass."""

from typing import Protocol, runtime_checkable

from checklist_reorder.models.checklist import Caret


@runtime_checkable
class BufferProtocol(Protocol):
    """Protocol for an editable text buffer with a caret."""

    def get_text(self) -> str:
        """Return the whole document text."""
        ...

    def set_text(self, text: str) -> None:
        """Replace the whole document text."""
        ...

    def get_caret(self) -> Caret:
        """Return the current caret position."""
        ...

    def set_caret(self, caret: Caret) -> None:
        """Move the caret."""
        ...
