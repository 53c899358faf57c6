from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional


class Category(str, Enum):
    SCAM = "Scam"
    ONLINE_GAMBLING = "Online Gambling"
    HOAX = "Hoax"
    SAFE = "Safe"


class Confidence(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Sentiment(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class AnalyzeRequest(BaseModel):
    # Emptiness is checked by the gateway so it can answer before any model call
    text: Optional[str] = None

    class Config:
        extra = "allow"


class ClassificationResult(BaseModel):
    category: str
    confidence: str
    sentiment: str
    explanation: str
    risk_indicators: List[str] = Field(default_factory=list)
    language: str


class ErrorResponse(BaseModel):
    error: str
