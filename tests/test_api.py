import pytest
from fastapi.testclient import TestClient

from aicodeview.clipboard.copier import ClipboardService
from aicodeview.errors import (
    CLIPBOARD_ERROR_MESSAGE,
    IN_PROGRESS_MESSAGE,
    INPUT_TOO_SHORT_MESSAGE,
    RemoteError,
)
from aicodeview.generation.orchestrator import GenerationOrchestrator
from aicodeview.main import APP_VERSION, app, get_clipboard, get_orchestrator
from aicodeview.state import StateStore
from conftest import FakeClient
from sample_replies import FENCED_JS


class Harness:
    def __init__(self):
        self.store = StateStore()
        self.gemini = FakeClient(text=FENCED_JS)
        self.copied = []
        self.copy_error = None
        self.orchestrator = GenerationOrchestrator(self.store, self.gemini)
        self.clipboard = ClipboardService(self.store, self._write, reset_ms=2000)

    def _write(self, text):
        if self.copy_error is not None:
            raise self.copy_error
        self.copied.append(text)


@pytest.fixture
def harness():
    h = Harness()
    app.dependency_overrides[get_orchestrator] = lambda: h.orchestrator
    app.dependency_overrides[get_clipboard] = lambda: h.clipboard
    yield h
    app.dependency_overrides.clear()


@pytest.fixture
def client(harness):
    with TestClient(app) as c:
        yield c


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "version": APP_VERSION}


def test_initial_state(client):
    body = client.get("/v1/state").json()
    assert body == {
        "input_text": "",
        "char_count": 0,
        "generated_code": "",
        "language": "javascript",
        "error": "",
        "loading": False,
        "copied": False,
    }


def test_input_updates_char_count(client):
    body = client.put("/v1/input", json={"text": "sort a list"}).json()
    assert body["input_text"] == "sort a list"
    assert body["char_count"] == 11


def test_generate(client, harness):
    r = client.post("/v1/generate", json={"text": "print one"})
    assert r.status_code == 200
    body = r.json()
    assert body["generated_code"] == "console.log(1)"
    assert body["language"] == "javascript"
    assert body["loading"] is False
    assert harness.gemini.prompts[0].startswith("Generate code for: print one\n")


def test_generate_from_stored_input(client, harness):
    client.put("/v1/input", json={"text": "stored description"})
    r = client.post("/v1/generate", json={})
    assert r.status_code == 200
    assert harness.gemini.prompts[0].startswith("Generate code for: stored description\n")


def test_generate_short_input(client, harness):
    r = client.post("/v1/generate", json={"text": "ab"})
    assert r.status_code == 400
    assert r.json()["detail"] == INPUT_TOO_SHORT_MESSAGE
    assert harness.gemini.prompts == []
    assert client.get("/v1/state").json()["error"] == INPUT_TOO_SHORT_MESSAGE


def test_generate_remote_failure_is_reported_in_state(client, harness):
    harness.gemini.error = RemoteError("quota exceeded", status_code=429)
    r = client.post("/v1/generate", json={"text": "anything"})
    assert r.status_code == 200
    body = r.json()
    assert body["error"] == "quota exceeded"
    assert body["generated_code"] == ""


def test_generate_while_in_flight(client, harness):
    harness.store.replace(loading=True)
    r = client.post("/v1/generate", json={"text": "anything"})
    assert r.status_code == 409
    assert r.json()["detail"] == IN_PROGRESS_MESSAGE


def test_copy(client, harness):
    client.post("/v1/generate", json={"text": "print one"})
    r = client.post("/v1/copy")
    assert r.status_code == 200
    assert r.json()["copied"] is True
    assert harness.copied == ["console.log(1)"]


def test_copy_failure(client, harness):
    harness.copy_error = OSError("no display")
    client.post("/v1/generate", json={"text": "print one"})
    r = client.post("/v1/copy")
    assert r.status_code == 500
    assert r.json()["detail"] == CLIPBOARD_ERROR_MESSAGE
    assert client.get("/v1/state").json()["error"] == CLIPBOARD_ERROR_MESSAGE


def test_copy_before_any_generation_is_a_no_op(client, harness):
    r = client.post("/v1/copy")
    assert r.status_code == 200
    assert r.json()["copied"] is False
    assert harness.copied == []


def test_input_edit_does_not_lose_generation_result(client, harness):
    client.post("/v1/generate", json={"text": "print one"})
    client.put("/v1/input", json={"text": "print two"})

    body = client.get("/v1/state").json()
    assert body["generated_code"] == "console.log(1)"
    assert body["loading"] is False
    assert client.post("/v1/generate", json={}).status_code == 200
