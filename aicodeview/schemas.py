from pydantic import BaseModel, Field
from typing import Optional

from aicodeview.state import Language, ViewState


class InputRequest(BaseModel):
    # Sent on every edit of the description box.
    text: str = Field("", description="Current description text")


class GenerateRequest(BaseModel):
    # Omitting text generates from the last stored input.
    text: Optional[str] = Field(None, description="Natural-language description of the code to generate")


class StateResponse(BaseModel):
    input_text: str
    char_count: int
    generated_code: str
    language: Language
    error: str
    loading: bool
    copied: bool

    @classmethod
    def from_state(cls, state: ViewState) -> "StateResponse":
        return cls(char_count=state.char_count, **state.model_dump())


class HealthResponse(BaseModel):
    ok: bool
    version: str
