"""Clipboard poller.

Samples the clipboard on a fixed cadence from a background thread and feeds
every successful read into a :class:`HistoryCache`. The cache decides whether
the value is new; the poller does no comparison of its own.
"""

import logging
import threading
import time
from typing import Optional

from cliphistory.clipboard import ClipboardSource
from cliphistory.constants import POLL_INTERVAL
from cliphistory.services.history import HistoryCache

logger = logging.getLogger(__name__)


class HistoryPoller:
    """Background thread that samples the clipboard into the history."""

    def __init__(
        self,
        cache: HistoryCache,
        source: ClipboardSource,
        poll_interval: float = POLL_INTERVAL,
    ) -> None:
        """Initialise the poller.

        Args:
            cache: History that receives every clipboard read.
            source: Clipboard to sample.
            poll_interval: Seconds between two ticks.
        """
        if poll_interval <= 0:
            raise ValueError(f"Poll interval must be positive, got {poll_interval}")
        self._cache = cache
        self._source = source
        self.poll_interval = poll_interval
        self._lock = threading.Lock()
        self._stop_event: Optional[threading.Event] = None
        self._poll_thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._poll_thread is not None and self._poll_thread.is_alive()

    def start(self) -> None:
        with self._lock:
            if self._poll_thread is not None:
                logger.debug("HistoryPoller already running")
                return

            # a poll thread only watches the event it was started with
            self._stop_event = threading.Event()
            self._poll_thread = threading.Thread(
                target=self._poll_loop, args=(self._stop_event,),
                name="history-poller", daemon=True)
            self._poll_thread.start()
        logger.info(f"Polling {self._source!r} every {self.poll_interval}s")

    def stop(self, timeout: float = 1.0) -> None:
        with self._lock:
            thread = self._poll_thread
            if thread is None:
                return
            self._stop_event.set()
            self._poll_thread = None

        thread.join(timeout=timeout)
        if thread.is_alive():
            logger.warning(f"Poll thread still busy after {timeout}s, it exits after the current read")
        logger.info("Clipboard polling stopped")

    def poll_once(self) -> bool:
        """Sample the clipboard once.

        Returns:
            ``True`` if the history gained an entry.
        """
        try:
            content = self._source.read()
        except Exception as e:
            logger.error(f"Failed to fetch clipboard content: {e}")
            return False

        return self._cache.insert(content)

    def _poll_loop(self, stop_event: threading.Event) -> None:
        next_tick = time.monotonic()

        while not stop_event.is_set():
            self.poll_once()

            next_tick += self.poll_interval
            now = time.monotonic()
            if next_tick < now:
                # overran one or more ticks, drop them
                next_tick = now
            stop_event.wait(next_tick - now)

    def __enter__(self) -> "HistoryPoller":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
