"""Serverless entrypoint (Netlify Functions / AWS Lambda).

Design goals:
- Keep this file small and stable; the real logic lives in src/gemini_proxy.
- Settings and the handler are built once per process and reused by every
  invocation. Nothing else is shared between invocations.

Expected event shapes (minimal):
1) Netlify / API Gateway REST:
   {"httpMethod": "POST", "body": "{\"prompt\":\"hi\",\"isJson\":false}"}

2) API Gateway HTTP API (payload v2):
   {"requestContext": {"http": {"method": "POST"}}, "body": "...", "isBase64Encoded": false}

Return:
- {"statusCode": int, "headers": {...}, "body": str}; the 405 response has an empty body
"""
import base64
from typing import Any, Dict, Optional

from src.gemini_proxy.handler import GENERIC_ERROR_MESSAGE, ProxyHandler
from src.gemini_proxy.logging_util import get_logger, request_logger
from src.gemini_proxy.settings import load_settings
from src.gemini_proxy.types import InboundRequest, ProxyResponse

logger = get_logger(__name__)

_settings = load_settings()
_handler = ProxyHandler(_settings)

def _event_method(event: Dict[str, Any]) -> str:
    method = event.get("httpMethod")
    if method:
        return method
    http = (event.get("requestContext") or {}).get("http") or {}
    return http.get("method") or ""

def _event_body(event: Dict[str, Any]) -> Optional[str]:
    body = event.get("body")
    if body is not None and event.get("isBase64Encoded"):
        return base64.b64decode(body).decode("utf-8")
    return body

def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    request_id = getattr(context, "aws_request_id", None)
    try:
        request = InboundRequest(method=_event_method(event), body=_event_body(event))
    except Exception as e:
        request_logger(logger, request_id).exception("Failed to read event: %s", e)
        return ProxyResponse.json(500, {"error": GENERIC_ERROR_MESSAGE}).to_envelope()

    return _handler.handle(request, request_id=request_id).to_envelope()

# AWS Lambda looks for `lambda_handler` by convention; Netlify looks for `handler`.
lambda_handler = handler
