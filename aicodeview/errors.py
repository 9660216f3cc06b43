# aicodeview/errors.py
from typing import Optional

GENERIC_ERROR_MESSAGE = "An error occurred. Please try again."
INPUT_TOO_SHORT_MESSAGE = "Please enter at least 3 characters to generate code."
CLIPBOARD_ERROR_MESSAGE = "Failed to copy to clipboard. Please try again."
IN_PROGRESS_MESSAGE = "A generation is already in progress."


class AICodeViewError(Exception):
    """Base error. `user_message` is the string shown to the user."""

    user_message: str = GENERIC_ERROR_MESSAGE

    def __init__(self, user_message: Optional[str] = None):
        if user_message:
            self.user_message = user_message
        super().__init__(self.user_message)


class InputTooShortError(AICodeViewError):
    user_message = INPUT_TOO_SHORT_MESSAGE


class GenerationInProgressError(AICodeViewError):
    user_message = IN_PROGRESS_MESSAGE


class TransportError(AICodeViewError):
    """The POST itself failed (DNS, connection reset, transport timeout)."""


class RemoteError(AICodeViewError):
    """Non-2xx status, or a 2xx body that doesn't have the expected shape."""

    def __init__(self, user_message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(user_message)
        self.status_code = status_code


class ClipboardError(AICodeViewError):
    user_message = CLIPBOARD_ERROR_MESSAGE
