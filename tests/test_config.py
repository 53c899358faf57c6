import pytest

from scamcheck.core import config
from scamcheck.core.config import DEFAULT_ALLOWED_ORIGINS, NormalizationMode, load_settings

ENV_VARS = [
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "GEMINI_TEMPERATURE",
    "GEMINI_MAX_OUTPUT_TOKENS",
    "ALLOWED_ORIGINS",
    "NORMALIZATION_MODE",
    "ADMIN_API_KEY",
    "SERVICE_NAME",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's local .env out of these tests
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: False)


def test_missing_api_key_raises(monkeypatch) -> None:
    with pytest.raises(ValueError, match="GEMINI_API_KEY"):
        load_settings()


def test_defaults(monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "key")
    settings = load_settings()
    assert settings.model_name == "gemini-2.5-flash"
    assert settings.allowed_origins == DEFAULT_ALLOWED_ORIGINS
    assert settings.normalization == NormalizationMode.STRICT
    assert settings.admin_api_key is None
    assert settings.generation_config()["max_output_tokens"] == 1024


def test_overrides(monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-1.5-flash")
    monkeypatch.setenv("GEMINI_TEMPERATURE", "0.3")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://example.org/, http://localhost:3000")
    monkeypatch.setenv("NORMALIZATION_MODE", "Lenient")
    monkeypatch.setenv("ADMIN_API_KEY", "ops")

    settings = load_settings()
    assert settings.model_name == "gemini-1.5-flash"
    assert settings.temperature == 0.3
    assert settings.allowed_origins == ["https://example.org", "http://localhost:3000"]
    assert settings.normalization == NormalizationMode.LENIENT
    assert settings.admin_api_key == "ops"


def test_invalid_normalization_mode(monkeypatch) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "key")
    monkeypatch.setenv("NORMALIZATION_MODE", "loose")
    with pytest.raises(ValueError, match="NORMALIZATION_MODE"):
        load_settings()
