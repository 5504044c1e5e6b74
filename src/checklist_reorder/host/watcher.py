"""Watch files on disk and reorder them when they change."""

import time
from collections.abc import Callable, Iterable
from pathlib import Path

from loguru import logger

from checklist_reorder.config import MIN_SLEEP_SECONDS
from checklist_reorder.host.buffers import FileBuffer
from checklist_reorder.host.service import ReorderService
from checklist_reorder.models.checklist import ReorderResult
from checklist_reorder.models.settings import Settings


def _mtime(path: Path) -> int | None:
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        return None


class Watcher:
    """Poll file modification times and run reorders on a fixed interval.

    Every file gets its own service and pending flag. A modification marks the
    file pending; the next tick runs at most one reorder for it.
    """

    def __init__(
        self,
        paths: Iterable[str | Path],
        settings: Settings | None = None,
        *,
        interval: float | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.interval = self.settings.interval_seconds if interval is None else max(0.0, interval)
        self._services = {Path(p): ReorderService(self.settings) for p in paths}
        self._mtimes: dict[Path, int | None] = {}

    def poll(self) -> None:
        """Mark every file whose modification time moved as pending."""
        for path, service in self._services.items():
            mtime = _mtime(path)
            first_seen = path not in self._mtimes
            previous = self._mtimes.get(path)
            self._mtimes[path] = mtime
            if first_seen and mtime is None:
                continue
            if first_seen or mtime != previous:
                service.on_trigger()

    def tick(self) -> list[ReorderResult]:
        """Poll once and process pending files."""
        self.poll()
        results: list[ReorderResult] = []
        for path, service in self._services.items():
            buffer = FileBuffer(path) if path.exists() else None
            try:
                result = service.tick(buffer, path)
            except (OSError, UnicodeDecodeError):
                logger.opt(exception=True).warning("Could not reorder {}, retrying next tick", path)
                service.on_trigger()
                continue
            if result is None:
                continue
            if result.changed:
                # Our own write must not count as a new modification.
                self._mtimes[path] = _mtime(path)
            results.append(result)
        return results

    def run(
        self, *, max_ticks: int | None = None, sleep: Callable[[float], None] = time.sleep
    ) -> None:
        """Tick forever, or ``max_ticks`` times, sleeping ``interval`` in between.

        The pause is never shorter than ``MIN_SLEEP_SECONDS``.
        """
        logger.info("Watching {} file(s) every {}s", len(self._services), self.interval)
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            self.tick()
            ticks += 1
            if max_ticks is None or ticks < max_ticks:
                sleep(max(self.interval, MIN_SLEEP_SECONDS))
