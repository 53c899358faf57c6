"""
Reconcile a parsed model answer into the fixed ClassificationResult schema.

Models sometimes answer with localized keys (mostly Indonesian) or leave
fields out, so every field is resolved from a prioritized alias list and
falls back to a documented default.
"""
import re
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from scamcheck.core.config import NormalizationMode
from scamcheck.core.logger import add_log
from scamcheck.models.schemas import Category, ClassificationResult, Confidence, Sentiment

FIELD_ALIASES: Dict[str, List[str]] = {
    "category": ["category", "kategori", "classification", "label"],
    "confidence": ["confidence", "keyakinan", "tingkat_keyakinan"],
    "sentiment": ["sentiment", "sentimen"],
    "explanation": ["explanation", "penjelasan", "reason", "alasan"],
    "risk_indicators": ["risk_indicators", "indikator_bahaya", "indikator_risiko", "red_flags"],
    "language": ["language", "bahasa", "detected_language"],
}

FIELD_DEFAULTS: Dict[str, Any] = {
    "category": "Unknown",
    "confidence": "N/A",
    "sentiment": "N/A",
    "explanation": "No explanation provided.",
    "risk_indicators": [],
    "language": "Unknown",
}

ENUM_FIELDS: Dict[str, Type[Enum]] = {
    "category": Category,
    "confidence": Confidence,
    "sentiment": Sentiment,
}


def _is_present(value: Any) -> bool:
    return value is not None and value != "" and value != []


def resolve_field(payload: Dict[str, Any], field: str) -> Any:
    """Return the first present alias value for a field, or its default."""
    for key in FIELD_ALIASES[field]:
        value = payload.get(key)
        if _is_present(value):
            return value
    default = FIELD_DEFAULTS[field]
    return list(default) if isinstance(default, list) else default


def _enum_key(value: str) -> str:
    return re.sub(r"[\s_\-]+", "", value).lower()


def canonical_enum_value(enum_cls: Type[Enum], value: Any) -> Optional[str]:
    """Map "online_gambling", "high" and similar spellings onto the canonical label."""
    if not isinstance(value, str):
        return None
    key = _enum_key(value)
    for member in enum_cls:
        if _enum_key(member.value) == key:
            return member.value
    return None


def coerce_indicators(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return []
    indicators = []
    for item in value:
        if item is None:
            continue
        text = str(item).strip()
        if text:
            indicators.append(text)
    return indicators


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


def normalize_result(payload: Dict[str, Any], mode: NormalizationMode = NormalizationMode.STRICT) -> ClassificationResult:
    """
    Build a complete ClassificationResult from a parsed model answer.

    Args:
        payload: The JSON object returned by the model
        mode: STRICT maps enum fields onto canonical labels and clears
            indicators for safe content; LENIENT only fills aliases and defaults

    Returns:
        ClassificationResult with every field populated
    """
    resolved = {field: resolve_field(payload, field) for field in FIELD_ALIASES}

    if mode == NormalizationMode.STRICT:
        for field, enum_cls in ENUM_FIELDS.items():
            canonical = canonical_enum_value(enum_cls, resolved[field])
            if canonical is None:
                if resolved[field] != FIELD_DEFAULTS[field]:
                    add_log(f"[NORMALIZE] Unrecognized {field} value {resolved[field]!r}, using default")
                canonical = FIELD_DEFAULTS[field]
            resolved[field] = canonical

    resolved["risk_indicators"] = coerce_indicators(resolved["risk_indicators"])
    if mode == NormalizationMode.STRICT and resolved["category"] == Category.SAFE.value:
        resolved["risk_indicators"] = []

    for field in ("category", "confidence", "sentiment", "explanation", "language"):
        resolved[field] = _as_text(resolved[field])

    return ClassificationResult(**resolved)
