# aicodeview/clipboard/copier.py
import asyncio
import shutil
import subprocess
import sys
from typing import Callable, List, Optional

from aicodeview.config import settings
from aicodeview.errors import ClipboardError
from aicodeview.state import StateStore, ViewState
from aicodeview.utils import get_logger

logger = get_logger("clipboard")

ClipboardWriter = Callable[[str], None]

LINUX_COMMANDS = [
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def _clipboard_command() -> Optional[List[str]]:
    if sys.platform == "darwin":
        return ["pbcopy"]
    if sys.platform.startswith("win"):
        return ["clip"]
    for cmd in LINUX_COMMANDS:
        if shutil.which(cmd[0]):
            return cmd
    return None


def system_clipboard_writer(text: str) -> None:
    """Pipe text into the platform clipboard tool."""
    cmd = _clipboard_command()
    if cmd is None:
        raise ClipboardError()
    try:
        proc = subprocess.run(cmd, input=text, text=True, capture_output=True, timeout=5)
    except (OSError, subprocess.SubprocessError) as e:
        raise ClipboardError() from e
    if proc.returncode != 0:
        logger.warning("%s exited with %d: %s", cmd[0], proc.returncode, proc.stderr.strip())
        raise ClipboardError()


class ClipboardService:
    """Copies the published code and drives the transient `copied` flag."""

    def __init__(
        self,
        store: StateStore,
        writer: ClipboardWriter = system_clipboard_writer,
        reset_ms: Optional[int] = None,
    ):
        self.store = store
        self.writer = writer
        self.reset_ms = settings.COPY_RESET_MS if reset_ms is None else reset_ms
        self._reset_handle: Optional[asyncio.TimerHandle] = None

    async def copy(self) -> ViewState:
        code = self.store.snapshot().generated_code
        if not code:
            # nothing generated yet, nothing to copy
            return self.store.snapshot()
        try:
            await asyncio.to_thread(self.writer, code)
        except Exception as e:
            logger.exception("Failed to copy: %s", e)
            self.store.replace(error=ClipboardError.user_message)
            raise ClipboardError() from e

        if self._reset_handle is not None:
            self._reset_handle.cancel()
        self._reset_handle = asyncio.get_running_loop().call_later(
            self.reset_ms / 1000, self._clear_copied
        )
        return self.store.replace(copied=True)

    def _clear_copied(self) -> None:
        self._reset_handle = None
        self.store.replace(copied=False)
