"""Reorder markdown checklist items by status and priority."""

from checklist_reorder.core.engine import reorder
from checklist_reorder.host.buffers import FileBuffer, TextBuffer
from checklist_reorder.host.service import ReorderService
from checklist_reorder.host.trigger import PendingFlag
from checklist_reorder.models.checklist import (
    Caret,
    IgnoreScope,
    ReorderConfig,
    ReorderResult,
    ReorderStatus,
)
from checklist_reorder.protocols import BufferProtocol

__all__ = [
    "BufferProtocol",
    "Caret",
    "FileBuffer",
    "IgnoreScope",
    "PendingFlag",
    "ReorderConfig",
    "ReorderResult",
    "ReorderService",
    "ReorderStatus",
    "TextBuffer",
    "reorder",
]
