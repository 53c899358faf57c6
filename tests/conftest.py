from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from scamcheck.app import create_app
from scamcheck.core.config import Settings
from scamcheck.core.logger import clear_logs


class FakeClassifier:
    """Returns a canned completion (or raises) and records every prompt."""

    def __init__(self, completion: str = "", error: Optional[Exception] = None):
        self.completion = completion
        self.error = error
        self.prompts: List[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.completion


SCAM_COMPLETION = """```json
{
  "category": "Scam",
  "confidence": "HIGH",
  "sentiment": "Positive",
  "explanation": "The message promises a free prize and pushes the reader to click an unknown link.",
  "risk_indicators": ["Too-good-to-be-true prize", "Urgent call to action", "Unverified link"],
  "language": "English"
}
```"""


@pytest.fixture(autouse=True)
def _reset_logs():
    clear_logs()
    yield
    clear_logs()


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="test-key", admin_api_key="admin-secret")


@pytest.fixture
def fake_classifier() -> FakeClassifier:
    return FakeClassifier(completion=SCAM_COMPLETION)


@pytest.fixture
def client(settings: Settings, fake_classifier: FakeClassifier):
    app = create_app(settings, classifier=fake_classifier)
    with TestClient(app) as test_client:
        yield test_client
