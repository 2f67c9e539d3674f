"""ProxyHandler: one inbound request, one upstream call, one response.

Flow:
- Validating: verb check, body decode, credential check
- Calling-Upstream: GeminiClient.generate
- Responding: map the result or the failure to a ProxyResponse

Every path ends in a ProxyResponse. Failures the taxonomy does not name are
logged and collapsed into the generic 500 so internals never reach the caller.
"""
from __future__ import annotations

import json
import math
from typing import Any, Optional

from .errors import ConfigurationError, MethodNotAllowed, UpstreamError
from .extract import extract_text
from .logging_util import get_logger, log_step, request_logger
from .payload import build_payload
from .settings import Settings
from .types import InboundRequest, PromptRequest, ProxyResponse
from .upstream import GeminiClient

logger = get_logger(__name__)

MISSING_KEY_MESSAGE = "API key is not configured on the server."
GENERIC_ERROR_MESSAGE = "An error occurred in the server function."

def is_truthy(v: Any) -> bool:
    """Truthiness as the frontend's JavaScript sees it: empty lists and objects count as true."""
    if v is None or v is False:
        return False
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return v != 0 and not math.isnan(v)
    if isinstance(v, str):
        return v != ""
    return True

def parse_body(body: Optional[str]) -> PromptRequest:
    data = json.loads(body)
    if not isinstance(data, dict):
        raise ValueError(f"request body must be a JSON object, got {type(data).__name__}")

    prompt = data.get("prompt")
    if not isinstance(prompt, str):
        raise ValueError("request body is missing a string 'prompt'")

    return PromptRequest(prompt=prompt, is_json=is_truthy(data.get("isJson")))

class ProxyHandler:
    def __init__(self, settings: Settings, client: Optional[GeminiClient] = None):
        self.settings = settings
        self.client = client or GeminiClient(settings)

    def handle(self, request: InboundRequest, request_id: Optional[str] = None) -> ProxyResponse:
        log = request_logger(logger, request_id)
        try:
            return self._handle(request, log)
        except MethodNotAllowed:
            return ProxyResponse(MethodNotAllowed.status_code)
        except ConfigurationError as e:
            log.warning("Configuration error: %s", e)
            return ProxyResponse.json(ConfigurationError.status_code, {"error": str(e)})
        except UpstreamError as e:
            log.error("Gemini API error (status=%s): %s", e.status_code, e.payload)
            return ProxyResponse.json(e.status_code, {"error": e.message})
        except Exception as e:
            log.exception("Server function error: %s", e)
            return ProxyResponse.json(500, {"error": GENERIC_ERROR_MESSAGE})

    def _handle(self, request: InboundRequest, log) -> ProxyResponse:
        if request.method != "POST":
            raise MethodNotAllowed(request.method)

        log_step(log, "1", "parse body")
        prompt_req = parse_body(request.body)

        log_step(log, "2", "check credential")
        if not self.settings.has_api_key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        log_step(log, "3", "build payload")
        payload = build_payload(prompt_req)

        log_step(log, "4", "call upstream")
        result = self.client.generate(payload)

        log_step(log, "5", "extract text")
        return ProxyResponse.json(200, {"text": extract_text(result)})
