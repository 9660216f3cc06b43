# aicodeview/generation/orchestrator.py
from typing import Optional

from aicodeview.detectors.lang_detect import detect_language
from aicodeview.errors import (
    GENERIC_ERROR_MESSAGE,
    AICodeViewError,
    GenerationInProgressError,
    InputTooShortError,
)
from aicodeview.formatter.reindent import format_code
from aicodeview.generation.gemini_client import GeminiClient
from aicodeview.generation.prompt import build_prompt
from aicodeview.state import StateStore, ViewState
from aicodeview.utils import get_logger

logger = get_logger("orchestrator")

MIN_INPUT_CHARS = 3


class GenerationOrchestrator:
    """
    Runs one generation cycle: validate, prompt, POST, detect, format, publish.

    Only one cycle may be in flight; a second call made while one is
    outstanding is rejected with GenerationInProgressError instead of racing
    the first one for the published state.
    """

    def __init__(self, store: StateStore, client: GeminiClient):
        self.store = store
        self.client = client

    def set_input(self, text: str) -> ViewState:
        return self.store.replace(input_text=text)

    async def generate(self, input_text: Optional[str] = None) -> ViewState:
        if self.store.snapshot().loading:
            raise GenerationInProgressError()

        if input_text is not None:
            self.store.replace(input_text=input_text)
        description = self.store.snapshot().input_text

        if len(description.strip()) < MIN_INPUT_CHARS:
            self.store.replace(error=InputTooShortError.user_message)
            raise InputTooShortError()

        # no await between the loading check and this write
        self.store.replace(loading=True, error="", copied=False)
        try:
            text = await self.client.generate_content(build_prompt(description))
            language = detect_language(text)
            code = format_code(text, language)
            self.store.replace(generated_code=code, language=language)
            logger.info("Generated %d chars of %s", len(code), language)
        except AICodeViewError as e:
            logger.warning("Generation failed (%s): %s", type(e).__name__, e.user_message)
            self.store.replace(error=e.user_message)
        except Exception:
            logger.exception("Generation failed unexpectedly")
            self.store.replace(error=GENERIC_ERROR_MESSAGE)
        finally:
            self.store.replace(loading=False)
        return self.store.snapshot()
