from typing import List, Optional

import pytest

from cliphistory.clipboard import ClipboardError, ClipboardSource
from cliphistory.services import HistoryCache


class FakeClipboard(ClipboardSource):
    """Scriptable clipboard: queue reads, record writes, inject failures."""

    name = "fake"

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.writes: List[str] = []
        self.read_error: Optional[Exception] = None
        self.write_error: Optional[Exception] = None
        self.reads = 0

    def read(self) -> str:
        self.reads += 1
        if self.read_error is not None:
            raise self.read_error
        return self.text

    def write(self, text: str) -> None:
        if self.write_error is not None:
            raise self.write_error
        self.writes.append(text)
        self.text = text


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def cache() -> HistoryCache:
    return HistoryCache()


@pytest.fixture
def broken_clipboard() -> FakeClipboard:
    fake = FakeClipboard()
    fake.read_error = ClipboardError("xclip exited with 1")
    fake.write_error = ClipboardError("xclip exited with 1")
    return fake
