"""
Recover the JSON object from a model completion.

Models regularly wrap their answer in a markdown fence or add prose around it,
so the completion goes through extraction, sanitization and a strict parse.
"""
import json
import re
from typing import Any, Dict

from scamcheck.core.errors import FormatError

# ```json\n{...}\n``` or ```{...}```; a tag only counts when followed by whitespace or the payload
FENCED_BLOCK = re.compile(r"```(?:[\w+-]+(?=[\s{\[]))?\s*(.*?)\s*```", re.DOTALL)


def extract_json(text: str) -> str:
    """
    Pull the JSON-looking part out of a completion.

    Priority: interior of a fenced block, then the span from the first "{" to
    the last "}", otherwise the text unchanged.
    """
    match = FENCED_BLOCK.search(text)
    if match and match.group(1):
        return match.group(1)

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end > start:
        return text[start:end + 1]

    return text


def sanitize_json(candidate: str) -> str:
    """Drop raw newlines, which models sometimes emit inside string values."""
    return candidate.replace("\n", "").replace("\r", "")


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_completion(raw: str) -> Dict[str, Any]:
    """
    Extract, sanitize and strictly parse a completion into a JSON object.

    The raw completion is logged by the caller; FormatError details only
    carry the parse failure reason.
    """
    candidate = sanitize_json(extract_json(raw))

    # ValueError covers JSONDecodeError, NaN/Infinity and integers over the digit limit
    try:
        parsed = json.loads(candidate, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise FormatError(details={"reason": f"{type(e).__name__}: {str(e)[:200]}"}) from e

    if not isinstance(parsed, dict):
        raise FormatError(details={"reason": f"expected a JSON object, got {type(parsed).__name__}"})

    return parsed
