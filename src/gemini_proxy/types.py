"""Transient records for one handler invocation.

None of these outlive the call that created them.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

JSON_HEADERS = {"Content-Type": "application/json"}

class _Missing:
    """Marks a field that is absent, as opposed to a JSON null."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "MISSING"

MISSING: Any = _Missing()

@dataclass(frozen=True)
class InboundRequest:
    method: str
    body: Optional[str] = None

@dataclass(frozen=True)
class PromptRequest:
    prompt: str
    is_json: bool = False

@dataclass
class ProxyResponse:
    status_code: int
    body: str = ""
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def json(cls, status_code: int, data: Dict[str, Any]) -> "ProxyResponse":
        # MISSING fields are left off the wire; None is sent as null.
        clean = {k: v for k, v in data.items() if v is not MISSING}
        return cls(status_code, json.dumps(clean, ensure_ascii=False), dict(JSON_HEADERS))

    def to_envelope(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"statusCode": self.status_code, "body": self.body}
        if self.headers:
            out["headers"] = dict(self.headers)
        return out
