"""Gemini REST client (generateContent).

One POST per call. No retries, no caching: every call reaches the network.
"""
from __future__ import annotations

from typing import Any, Dict

import requests

from .errors import UpstreamError
from .extract import dig
from .logging_util import get_logger
from .payload import build_url
from .settings import Settings
from .types import MISSING

logger = get_logger(__name__)

def error_message(error_data: Any) -> Any:
    """`error.message` from an upstream error body.

    A body without an `error` (or with `error: null`) raises, which ends up
    as the generic 500. Any other `error` value yields its `message`, or
    MISSING when it has none.
    """
    err = error_data["error"]
    if err is None:
        raise TypeError("upstream error body has a null 'error'")
    if not isinstance(err, dict):
        return MISSING
    return dig(err, "message")

class GeminiClient:
    def __init__(self, settings: Settings):
        self.settings = settings

    def generate(self, payload: Dict[str, Any]) -> Any:
        """Return the decoded success body, or raise UpstreamError.

        requests.RequestException and JSON decode errors are left to the caller.
        """
        url = build_url(self.settings)
        headers = {"Content-Type": "application/json"}

        r = requests.post(
            url,
            params={"key": self.settings.api_key},
            headers=headers,
            json=payload,
            timeout=self.settings.timeout,
        )

        if not 200 <= r.status_code < 300:
            error_data = r.json()
            raise UpstreamError(r.status_code, error_message(error_data), error_data)

        return r.json()
