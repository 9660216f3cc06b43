# aicodeview/generation/gemini_client.py
import time
from typing import Any, Optional

import httpx

from aicodeview.config import settings
from aicodeview.errors import GENERIC_ERROR_MESSAGE, RemoteError, TransportError
from aicodeview.generation.prompt import build_request_body
from aicodeview.utils import get_logger, mask_api_key

logger = get_logger("gemini_client")

NO_RESPONSE_TEXT = "No response generated"


def extract_candidate_text(body: Any) -> str:
    """
    Pull candidates[0].content.parts[0].text out of a generateContent reply.

    Empty candidates/parts, a missing content block or an empty text all
    yield NO_RESPONSE_TEXT. A body with no candidates list, or a content
    block with no parts list, is malformed and raises RemoteError.
    """
    if not isinstance(body, dict) or not isinstance(body.get("candidates"), list):
        raise RemoteError(GENERIC_ERROR_MESSAGE)
    candidates = body["candidates"]
    if not candidates or not isinstance(candidates[0], dict):
        return NO_RESPONSE_TEXT
    content = candidates[0].get("content")
    if content is None:
        return NO_RESPONSE_TEXT
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        raise RemoteError(GENERIC_ERROR_MESSAGE)
    if not parts or not isinstance(parts[0], dict):
        return NO_RESPONSE_TEXT
    text = parts[0].get("text")
    if not text or not isinstance(text, str):
        return NO_RESPONSE_TEXT
    return text


def extract_error_message(response: httpx.Response) -> Optional[str]:
    """error.message from an error body, or None when absent or unparseable."""
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if not isinstance(error, dict):
        return None
    message = error.get("message")
    return message if isinstance(message, str) and message else None


class GeminiClient:
    """One generateContent POST per call. No retries."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.API_KEY
        self.api_url = api_url or settings.API_URL
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS
        if not self.api_key:
            logger.warning("API_KEY not set, generation requests will be rejected by the endpoint")

    @property
    def request_url(self) -> str:
        return f"{self.api_url}?key={self.api_key or ''}"

    async def generate_content(self, prompt: str) -> str:
        body = build_request_body(prompt)
        started = time.monotonic()
        logger.info("Gemini: POST %s prompt length=%d", mask_api_key(self.request_url), len(prompt))
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.request_url, json=body)
        except httpx.HTTPError as e:
            logger.exception("Gemini: transport failure: %s", type(e).__name__)
            raise TransportError(GENERIC_ERROR_MESSAGE) from e

        elapsed_ms = (time.monotonic() - started) * 1000
        if not response.is_success:
            message = extract_error_message(response)
            logger.warning(
                "Gemini: status=%d after %.0fms message=%s",
                response.status_code, elapsed_ms, message,
            )
            raise RemoteError(message or GENERIC_ERROR_MESSAGE, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("Gemini: non-JSON success body after %.0fms", elapsed_ms)
            raise RemoteError(GENERIC_ERROR_MESSAGE, status_code=response.status_code) from e

        text = extract_candidate_text(payload)
        logger.info("Gemini: collected text length=%d after %.0fms", len(text), elapsed_ms)
        return text


__all__ = ["GeminiClient", "extract_candidate_text", "extract_error_message", "NO_RESPONSE_TEXT"]
