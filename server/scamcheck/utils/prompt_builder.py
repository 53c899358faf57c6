from scamcheck.models.schemas import Category, Confidence, Sentiment

RESULT_KEYS = ["category", "confidence", "sentiment", "explanation", "risk_indicators", "language"]

CLASSIFICATION_PROMPT = """
Analyze the following message. Your primary goal is to determine if it is {categories}.
You MUST return a single, valid JSON object and nothing else. Do not use markdown formatting like ```json.
The JSON object must have these exact English keys: {keys}.

- "category": Must be one of {categories}.
- "confidence": Must be one of {confidences}.
- "sentiment": Must be one of {sentiments}.
- "explanation": A 1-2 sentence explanation in the same language as the input text.
- "risk_indicators": An array of strings listing warning signs, in the same language as the input text. If the category is "Safe", this MUST be an empty array [].
- "language": The detected language name in English.

Text to analyze:
```
{text}
```
"""


def _quoted(values) -> str:
    return ", ".join(f'"{value}"' for value in values)


def build_classification_prompt(text: str) -> str:
    return CLASSIFICATION_PROMPT.format(
        categories=_quoted(c.value for c in Category),
        confidences=_quoted(c.value for c in Confidence),
        sentiments=_quoted(s.value for s in Sentiment),
        keys=_quoted(RESULT_KEYS),
        text=text,
    ).strip()
