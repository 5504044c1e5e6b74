"""Apply reorder passes to host buffers."""

from pathlib import Path

from loguru import logger

from checklist_reorder.core.engine import reorder
from checklist_reorder.host.trigger import PendingFlag
from checklist_reorder.models.checklist import Caret, ReorderResult, ReorderStatus
from checklist_reorder.models.settings import DocumentPolicy, Settings
from checklist_reorder.protocols import BufferProtocol


class ReorderService:
    """Run reorder passes against buffers on behalf of a host.

    The service owns the pending-trigger flag. Event sources call
    ``on_trigger``; the host's periodic check calls ``tick``.
    """

    def __init__(
        self, settings: Settings | None = None, pending: PendingFlag | None = None
    ) -> None:
        self.settings = settings or Settings()
        self.pending = pending or PendingFlag()

    def on_trigger(self) -> None:
        """Record that the content may have changed."""
        self.pending.mark_pending()

    def tick(
        self, buffer: BufferProtocol | None, document: str | Path | None = None
    ) -> ReorderResult | None:
        """Reorder once if a trigger arrived since the last tick.

        Returns:
            The result of the pass, or None if nothing was pending.
        """
        if not self.pending.consume_if_pending():
            return None
        return self.reorder_buffer(buffer, document)

    def reorder_buffer(
        self, buffer: BufferProtocol | None, document: str | Path | None = None
    ) -> ReorderResult:
        """Reorder a buffer in place.

        The buffer and caret are only written when the text actually changed.

        Args:
            buffer: The active buffer, or None when the host has no document open.
            document: Key for the per-document opt-out lookup.
        """
        if buffer is None:
            logger.warning("No active document to reorder")
            return ReorderResult(
                changed=False,
                text="",
                caret_line=0,
                caret_column=0,
                status=ReorderStatus.NO_DOCUMENT,
            )

        caret = buffer.get_caret()
        if self.settings.document_policy(document) is DocumentPolicy.DISABLED:
            logger.debug("Reordering disabled for {}", document)
            return ReorderResult(
                changed=False,
                text=buffer.get_text(),
                caret_line=caret.line,
                caret_column=caret.ch,
                status=ReorderStatus.DISABLED,
            )

        result = reorder(buffer.get_text(), caret.line, caret.ch, self.settings.to_config())
        if result.changed:
            buffer.set_text(result.text)
            buffer.set_caret(Caret(line=result.caret_line, ch=result.caret_column))
            logger.info("Reordered checklists in {}", document or "buffer")
        else:
            logger.debug("Nothing to reorder in {} ({})", document or "buffer", result.status.value)
        return result
