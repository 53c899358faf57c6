import os
from enum import Enum
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_MODEL = "gemini-2.5-flash"

# Origins of the public frontend and its local dev servers
DEFAULT_ALLOWED_ORIGINS = [
    "https://wiradp.github.io",
    "http://localhost:5500",
    "http://127.0.0.1:5500",
    "http://localhost:8888",
]


class NormalizationMode(str, Enum):
    STRICT = "strict"
    LENIENT = "lenient"


class Settings(BaseModel):
    """Process configuration, built once and handed to the app factory."""

    model_config = ConfigDict(frozen=True)

    gemini_api_key: str
    model_name: str = DEFAULT_MODEL
    temperature: float = 0
    max_output_tokens: int = 1024
    allowed_origins: List[str] = list(DEFAULT_ALLOWED_ORIGINS)
    normalization: NormalizationMode = NormalizationMode.STRICT
    admin_api_key: Optional[str] = None
    service_name: str = "scamcheck-gateway"

    @field_validator("gemini_api_key")
    def api_key_must_not_be_empty(cls, v):
        if not v or not v.strip():
            raise ValueError("GEMINI_API_KEY not found in environment variables")
        return v

    @field_validator("allowed_origins")
    def strip_trailing_slashes(cls, v):
        return [origin.rstrip("/") for origin in v if origin.strip()]

    def generation_config(self) -> dict:
        return {
            "temperature": self.temperature,
            "top_p": 0.95,
            "top_k": 64,
            "max_output_tokens": self.max_output_tokens,
            "response_mime_type": "text/plain",
        }


def _split_list(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_settings() -> Settings:
    """Read settings from the environment (and a .env file when present)."""
    load_dotenv()

    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key:
        raise ValueError("GEMINI_API_KEY not found in environment variables")

    mode = os.getenv("NORMALIZATION_MODE", NormalizationMode.STRICT.value).strip().lower()
    try:
        normalization = NormalizationMode(mode)
    except ValueError:
        raise ValueError(f"NORMALIZATION_MODE must be 'strict' or 'lenient', got {mode!r}") from None

    origins = os.getenv("ALLOWED_ORIGINS")

    return Settings(
        gemini_api_key=api_key,
        model_name=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        temperature=float(os.getenv("GEMINI_TEMPERATURE", 0)),
        max_output_tokens=int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", 1024)),
        allowed_origins=_split_list(origins) if origins is not None else list(DEFAULT_ALLOWED_ORIGINS),
        normalization=normalization,
        admin_api_key=os.getenv("ADMIN_API_KEY") or None,
        service_name=os.getenv("SERVICE_NAME", "scamcheck-gateway"),
    )
