"""
Platform-specific clipboard factory.

This module picks the clipboard implementation for the current platform, or
the one named on the command line.
"""

import platform
from typing import Type

from cliphistory.clipboard.base import ClipboardSource

BACKENDS = ("auto", "linux", "windows", "macos", "memory")

_SYSTEM_BACKENDS = {
    "Linux": "linux",
    "Windows": "windows",
    "Darwin": "macos",
}


def get_clipboard_class(backend: str = "auto") -> Type[ClipboardSource]:
    """
    Get the ClipboardSource implementation for ``backend``.

    Args:
        backend: One of ``BACKENDS``. ``auto`` selects by platform.

    Returns:
        Type[ClipboardSource]: The clipboard class

    Raises:
        NotImplementedError: If the backend or platform is not supported
    """
    if backend == "auto":
        system = platform.system()
        if system not in _SYSTEM_BACKENDS:
            raise NotImplementedError(f"Platform '{system}' is not supported")
        backend = _SYSTEM_BACKENDS[system]

    if backend == "windows":
        from cliphistory.clipboard.windows import WindowsClipboard
        return WindowsClipboard
    elif backend == "linux":
        from cliphistory.clipboard.linux import LinuxClipboard
        return LinuxClipboard
    elif backend == "macos":
        from cliphistory.clipboard.macos import MacOSClipboard
        return MacOSClipboard
    elif backend == "memory":
        from cliphistory.clipboard.memory import MemoryClipboard
        return MemoryClipboard
    else:
        raise NotImplementedError(f"Clipboard backend '{backend}' is not supported")


def get_clipboard_source(backend: str = "auto") -> ClipboardSource:
    """Create the clipboard source for ``backend``."""
    clipboard_class = get_clipboard_class(backend)
    return clipboard_class()
