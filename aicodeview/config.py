import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_API_URL = (
    "https://generativelanguage.googleapis.com/v1beta/models/"
    "gemini-2.0-flash:generateContent"
)


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


class Settings:
    PROJECT_NAME: str = "AICodeView"
    PROJECT_VERSION: str = "0.1.0"

    # Gemini generateContent endpoint; the key is appended as ?key=
    API_KEY: Optional[str] = os.getenv("API_KEY")
    API_URL: str = os.getenv("API_URL", DEFAULT_API_URL)

    # unset means wait for the endpoint indefinitely
    REQUEST_TIMEOUT_SECONDS: Optional[float] = _optional_float(
        os.getenv("REQUEST_TIMEOUT_SECONDS")
    )

    # how long the "copied" indicator stays on
    COPY_RESET_MS: int = int(os.getenv("COPY_RESET_MS", "2000"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
