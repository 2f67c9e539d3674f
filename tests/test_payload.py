from src.gemini_proxy.payload import SUGGESTIONS_SCHEMA, build_payload, build_url
from src.gemini_proxy.types import PromptRequest

def test_plain_prompt_has_no_generation_config():
    payload = build_payload(PromptRequest(prompt="hi"))
    assert payload == {"contents": [{"role": "user", "parts": [{"text": "hi"}]}]}
    assert "generationConfig" not in payload

def test_json_mode_adds_suggestions_schema():
    payload = build_payload(PromptRequest(prompt="hi", is_json=True))
    assert payload["generationConfig"] == {
        "responseMimeType": "application/json",
        "responseSchema": {
            "type": "OBJECT",
            "properties": {"suggestions": {"type": "ARRAY", "items": {"type": "STRING"}}},
        },
    }

def test_json_mode_copies_schema():
    payload = build_payload(PromptRequest(prompt="hi", is_json=True))
    payload["generationConfig"]["responseSchema"]["properties"].clear()
    assert "suggestions" in SUGGESTIONS_SCHEMA["properties"]

def test_url_has_model_and_method(settings):
    assert build_url(settings) == "https://example.test/v1beta/models/gemini-test:generateContent"
