import threading

from cliphistory.clipboard.base import ClipboardSource


class MemoryClipboard(ClipboardSource):
    """Process-local clipboard for headless hosts."""

    name = "memory"

    def __init__(self, initial: str = "") -> None:
        self._lock = threading.Lock()
        self._text = initial

    def read(self) -> str:
        with self._lock:
            return self._text

    def write(self, text: str) -> None:
        with self._lock:
            self._text = text
