"""Upstream request construction (generateContent)."""
from __future__ import annotations

import copy
from typing import Any, Dict

from .settings import Settings
from .types import PromptRequest

# The only structured-output shape the frontend asks for.
SUGGESTIONS_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "suggestions": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
        }
    },
}

def build_url(settings: Settings) -> str:
    # The key travels as the `key` query parameter, added by the caller.
    return f"{settings.base_url}/models/{settings.model}:generateContent"

def build_payload(req: PromptRequest) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "contents": [{"role": "user", "parts": [{"text": req.prompt}]}],
    }
    if req.is_json:
        payload["generationConfig"] = {
            "responseMimeType": "application/json",
            "responseSchema": copy.deepcopy(SUGGESTIONS_SCHEMA),
        }
    return payload
