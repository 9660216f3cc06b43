import pytest
import respx

from aicodeview.generation.gemini_client import GeminiClient
from aicodeview.state import StateStore

API_URL = "https://gemini.test/v1beta/generate"
API_KEY = "test-key"


class FakeClient:
    """Stands in for GeminiClient. Returns `text`, raises `error`, or waits on `gate`."""

    def __init__(self, text="console.log(1)", error=None, gate=None):
        self.text = text
        self.error = error
        self.gate = gate
        self.prompts = []

    async def generate_content(self, prompt):
        self.prompts.append(prompt)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def store():
    return StateStore()


@pytest.fixture
def gemini_client():
    return GeminiClient(api_key=API_KEY, api_url=API_URL)


@pytest.fixture
def gemini_api():
    with respx.mock(assert_all_called=False) as mock:
        yield mock
