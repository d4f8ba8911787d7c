"""
Cross-platform clipboard access.

This package provides clipboard text access across different operating
systems through a unified interface.
"""

from cliphistory.clipboard.base import ClipboardError, ClipboardSource
from cliphistory.clipboard.factory import (
    BACKENDS,
    get_clipboard_class,
    get_clipboard_source,
)
from cliphistory.clipboard.memory import MemoryClipboard

__all__ = [
    'BACKENDS',
    'ClipboardError',
    'ClipboardSource',
    'MemoryClipboard',
    'get_clipboard_class',
    'get_clipboard_source',
]
