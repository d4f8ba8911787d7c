import os
import shutil
import subprocess
from typing import List, Optional, Tuple

from cliphistory.clipboard.base import ClipboardError, ClipboardSource

COMMAND_TIMEOUT = 1.5

# (tool that must be on PATH, read command, write command)
_Tool = Tuple[str, List[str], List[str]]

_WAYLAND: _Tool = ("wl-paste", ["wl-paste", "--no-newline"], ["wl-copy"])
_XCLIP: _Tool = (
    "xclip",
    ["xclip", "-selection", "clipboard", "-o"],
    ["xclip", "-selection", "clipboard", "-i"],
)
_XSEL: _Tool = (
    "xsel",
    ["xsel", "--clipboard", "--output"],
    ["xsel", "--clipboard", "--input"],
)


class LinuxClipboard(ClipboardSource):
    """Clipboard access through wl-clipboard, xclip or xsel."""

    name = "linux"

    def _tools(self) -> List[_Tool]:
        tools = []
        if os.environ.get("WAYLAND_DISPLAY"):
            tools.append(_WAYLAND)
        tools.extend([_XCLIP, _XSEL])
        return tools

    def _find_tool(self) -> Optional[_Tool]:
        for tool in self._tools():
            if shutil.which(tool[0]):
                return tool
        return None

    def _require_tool(self) -> _Tool:
        tool = self._find_tool()
        if tool is None:
            raise ClipboardError(
                "No clipboard utility found (install wl-clipboard, xclip or xsel)")
        return tool

    def _run_command(self, command: List[str], data: Optional[bytes] = None) -> bytes:
        try:
            result = subprocess.run(
                command,
                input=data,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=True,
                timeout=COMMAND_TIMEOUT,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or b"").decode("utf-8", errors="replace").strip()
            raise ClipboardError(f"{command[0]} exited with {e.returncode}: {stderr}") from e
        except subprocess.TimeoutExpired as e:
            raise ClipboardError(f"{command[0]} timed out after {COMMAND_TIMEOUT}s") from e
        except OSError as e:
            raise ClipboardError(f"Could not run {command[0]}: {e}") from e
        return result.stdout

    def read(self) -> str:
        _, read_command, _ = self._require_tool()
        output = self._run_command(read_command)
        return output.decode("utf-8", errors="replace")

    def write(self, text: str) -> None:
        _, _, write_command = self._require_tool()
        self._run_command(write_command, data=text.encode("utf-8"))
