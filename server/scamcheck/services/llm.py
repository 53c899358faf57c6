from typing import Optional, Protocol

import google.generativeai as genai

from scamcheck.core.errors import UpstreamError
from scamcheck.core.logger import add_log


class Classifier(Protocol):
    """Anything that turns a prompt into a text completion."""

    def complete(self, prompt: str) -> str:
        ...


class GeminiClassifier:
    """Google Gemini completion client."""

    def __init__(self, api_key: str, model_name: str, generation_config: Optional[dict] = None):
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self.model = genai.GenerativeModel(
            model_name=model_name,
            generation_config=generation_config,
        )
        add_log(f"[GEMINI] Client initialized for model {model_name}")

    def complete(self, prompt: str) -> str:
        try:
            response = self.model.generate_content(prompt)
        except Exception as e:
            raise UpstreamError(details={"exception": repr(e)}) from e

        try:
            parts = response.parts
            text = response.text if parts else None
        except ValueError as e:
            # The SDK raises here when the prompt itself was blocked
            raise UpstreamError(details={"exception": repr(e)}) from e

        # Blocked or truncated answers come back without parts
        if not parts:
            finish_reason = response.candidates[0].finish_reason if response.candidates else "unknown"
            raise UpstreamError(details={"finish_reason": str(finish_reason)})

        add_log(f"[GEMINI_OK] {self.model_name} answered")
        return text
