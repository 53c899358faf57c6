"""
Classification gateway: text in, normalized ClassificationResult out.

One prompt, one classifier call, no retries. Any failure is raised as a
GatewayError for the HTTP layer to translate.
"""
import asyncio
import time
from typing import Optional

from scamcheck.core.config import NormalizationMode
from scamcheck.core.errors import FormatError, GatewayError, UpstreamError, ValidationError
from scamcheck.core.logger import add_log
from scamcheck.models.schemas import ClassificationResult
from scamcheck.services.llm import Classifier
from scamcheck.services.normalizer import normalize_result
from scamcheck.services.parsing import parse_completion
from scamcheck.utils.prompt_builder import build_classification_prompt


class ClassificationGateway:

    def __init__(self, classifier: Classifier, normalization: NormalizationMode = NormalizationMode.STRICT):
        self.classifier = classifier
        self.normalization = normalization

    async def classify(self, text: Optional[str]) -> ClassificationResult:
        if not isinstance(text, str) or not text.strip():
            raise ValidationError()

        start_time = time.time()
        add_log(f"[ANALYZE_START] Classifying {len(text)} characters")

        prompt = build_classification_prompt(text)

        try:
            raw = await asyncio.to_thread(self.classifier.complete, prompt)
        except GatewayError:
            raise
        except Exception as e:
            # Logged once by the HTTP error handler
            raise UpstreamError(details={"exception": repr(e)}) from e

        add_log(f"[RAW_COMPLETION] {raw}")
        if not isinstance(raw, str):
            raise FormatError(details={"reason": f"completion is {type(raw).__name__}, not text"})

        payload = parse_completion(raw)
        result = normalize_result(payload, self.normalization)

        duration = (time.time() - start_time) * 1000
        add_log(f"[ANALYZE_END] {result.category} ({result.confidence}) in {duration:.2f}ms")
        return result
