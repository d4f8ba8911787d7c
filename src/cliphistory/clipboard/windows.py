import time

import win32clipboard as wc

from cliphistory.clipboard.base import ClipboardError, ClipboardSource

OPEN_ATTEMPTS = 3
OPEN_RETRY_DELAY = 0.05


class WindowsClipboard(ClipboardSource):
    """Clipboard access through pywin32 (CF_UNICODETEXT)."""

    name = "windows"

    def _open(self) -> None:
        # another process may hold the clipboard for a moment
        last_error = None
        for _ in range(OPEN_ATTEMPTS):
            try:
                wc.OpenClipboard()
                return
            except Exception as e:
                last_error = e
                time.sleep(OPEN_RETRY_DELAY)
        raise ClipboardError(f"Could not open clipboard: {last_error}") from last_error

    def read(self) -> str:
        self._open()
        try:
            if not wc.IsClipboardFormatAvailable(wc.CF_UNICODETEXT):
                raise ClipboardError("Clipboard does not contain text")
            try:
                return wc.GetClipboardData(wc.CF_UNICODETEXT)
            except Exception as e:
                raise ClipboardError(f"Could not read clipboard: {e}") from e
        finally:
            wc.CloseClipboard()

    def write(self, text: str) -> None:
        self._open()
        try:
            wc.EmptyClipboard()
            wc.SetClipboardData(wc.CF_UNICODETEXT, text)
        except Exception as e:
            raise ClipboardError(f"Could not set clipboard: {e}") from e
        finally:
            wc.CloseClipboard()
