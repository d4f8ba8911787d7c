try:
    from AppKit import NSPasteboard, NSPasteboardTypeString
    HAS_APPKIT = True
except ImportError:
    HAS_APPKIT = False

from cliphistory.clipboard.base import ClipboardError, ClipboardSource


class MacOSClipboard(ClipboardSource):
    """Clipboard access through the general NSPasteboard."""

    name = "macos"

    def _pasteboard(self):
        if not HAS_APPKIT:
            raise ClipboardError("AppKit is not available (install pyobjc-framework-Cocoa)")
        return NSPasteboard.generalPasteboard()

    def read(self) -> str:
        pasteboard = self._pasteboard()
        text = pasteboard.stringForType_(NSPasteboardTypeString)
        if text is None:
            raise ClipboardError("Clipboard does not contain text")
        return str(text)

    def write(self, text: str) -> None:
        pasteboard = self._pasteboard()
        pasteboard.clearContents()
        if not pasteboard.setString_forType_(text, NSPasteboardTypeString):
            raise ClipboardError("Could not set clipboard")
