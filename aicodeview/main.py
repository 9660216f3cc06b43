from fastapi import Depends, FastAPI, HTTPException

from aicodeview.clipboard.copier import ClipboardService
from aicodeview.config import settings
from aicodeview.errors import ClipboardError, GenerationInProgressError, InputTooShortError
from aicodeview.generation.gemini_client import GeminiClient
from aicodeview.generation.orchestrator import GenerationOrchestrator
from aicodeview.schemas import GenerateRequest, HealthResponse, InputRequest, StateResponse
from aicodeview.state import StateStore
from aicodeview.utils import get_logger

logger = get_logger("aicodeview")

APP_VERSION = settings.PROJECT_VERSION
app = FastAPI(title="AICodeView code generation service", version=APP_VERSION)

# one page, one state: the store is shared by the orchestrator and the clipboard
_store = StateStore()
_orchestrator = GenerationOrchestrator(_store, GeminiClient())
_clipboard = ClipboardService(_store)


def get_orchestrator() -> GenerationOrchestrator:
    return _orchestrator


def get_clipboard() -> ClipboardService:
    return _clipboard


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(ok=True, version=APP_VERSION)


@app.get("/v1/state", response_model=StateResponse)
async def read_state(orchestrator: GenerationOrchestrator = Depends(get_orchestrator)):
    return StateResponse.from_state(orchestrator.store.snapshot())


@app.put("/v1/input", response_model=StateResponse)
async def update_input(req: InputRequest, orchestrator: GenerationOrchestrator = Depends(get_orchestrator)):
    return StateResponse.from_state(orchestrator.set_input(req.text))


@app.post("/v1/generate", response_model=StateResponse)
async def generate(req: GenerateRequest, orchestrator: GenerationOrchestrator = Depends(get_orchestrator)):
    try:
        state = await orchestrator.generate(req.text)
    except InputTooShortError as e:
        raise HTTPException(400, e.user_message)
    except GenerationInProgressError as e:
        raise HTTPException(409, e.user_message)
    # remote/transport failures are already folded into state.error
    return StateResponse.from_state(state)


@app.post("/v1/copy", response_model=StateResponse)
async def copy_code(clipboard: ClipboardService = Depends(get_clipboard)):
    try:
        state = await clipboard.copy()
    except ClipboardError as e:
        raise HTTPException(500, e.user_message)
    return StateResponse.from_state(state)
