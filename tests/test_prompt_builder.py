from scamcheck.utils.prompt_builder import build_classification_prompt


def test_prompt_lists_keys_and_value_domains() -> None:
    prompt = build_classification_prompt("Hello there")
    for key in ("category", "confidence", "sentiment", "explanation", "risk_indicators", "language"):
        assert f'"{key}"' in prompt
    assert '"Scam", "Online Gambling", "Hoax", "Safe"' in prompt
    assert '"LOW", "MEDIUM", "HIGH"' in prompt
    assert '"Positive", "Negative", "Neutral"' in prompt
    assert "same language as the input text" in prompt


def test_prompt_embeds_text_verbatim_in_a_fence() -> None:
    text = "Klaim bonus {100%} sekarang!"
    prompt = build_classification_prompt(text)
    assert f"```\n{text}\n```" in prompt
    assert prompt.endswith("```")
