"""Buffer providers: an in-memory buffer and a file on disk."""

from pathlib import Path

from loguru import logger

from checklist_reorder.models.checklist import Caret


class TextBuffer:
    """In-memory text buffer with a caret."""

    def __init__(self, text: str = "", caret: Caret | None = None) -> None:
        self.text = text
        self.caret = caret or Caret()

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text

    def get_caret(self) -> Caret:
        return self.caret

    def set_caret(self, caret: Caret) -> None:
        self.caret = caret


class FileBuffer:
    """A UTF-8 file used as a buffer.

    The file is read on every ``get_text`` and only written by ``set_text``.
    Line endings are kept as they are on disk. The caret lives in memory.
    """

    def __init__(
        self, path: str | Path, caret: Caret | None = None, *, dry_run: bool = False
    ) -> None:
        self.path = Path(path)
        self.caret = caret or Caret()
        self.dry_run = dry_run

    def get_text(self) -> str:
        with open(self.path, encoding="utf-8", newline="") as f:
            return f.read()

    def set_text(self, text: str) -> None:
        if self.dry_run:
            logger.debug("Dry run, not writing {}", self.path)
            return
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            f.write(text)

    def get_caret(self) -> Caret:
        return self.caret

    def set_caret(self, caret: Caret) -> None:
        self.caret = caret
