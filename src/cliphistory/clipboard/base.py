from abc import ABC, abstractmethod


class ClipboardError(Exception):
    """Raised when the clipboard cannot be read or written."""


class ClipboardSource(ABC):
    """Read/write access to the current clipboard text."""

    name = "base"

    @abstractmethod
    def read(self) -> str:
        """Return the current clipboard text. Raises ClipboardError."""

    @abstractmethod
    def write(self, text: str) -> None:
        """Replace the clipboard text. Raises ClipboardError."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
