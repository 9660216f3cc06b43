import threading
from typing import Literal

from pydantic import BaseModel, ConfigDict

Language = Literal["python", "javascript", "java", "cpp", "php"]

DEFAULT_LANGUAGE: Language = "javascript"


class ViewState(BaseModel):
    """Everything a rendering layer needs to draw the page.

    Frozen: a new instance is published for every change, so a snapshot
    handed out earlier never changes under its holder.
    """

    model_config = ConfigDict(frozen=True)

    input_text: str = ""
    generated_code: str = ""
    language: Language = DEFAULT_LANGUAGE
    error: str = ""
    loading: bool = False
    copied: bool = False

    @property
    def char_count(self) -> int:
        return len(self.input_text)


class StateStore:
    """Holds the single current ViewState and swaps it on update.

    replace() is a read-copy-assign; the lock keeps writers on different
    threads from dropping each other's fields.
    """

    def __init__(self, initial: ViewState | None = None):
        self._state = initial or ViewState()
        self._lock = threading.Lock()

    def snapshot(self) -> ViewState:
        return self._state

    def replace(self, **changes) -> ViewState:
        with self._lock:
            self._state = self._state.model_copy(update=changes)
            return self._state
