"""Failure kinds the handler maps to outbound responses.

Anything not listed here is an unhandled failure and becomes the generic 500.
"""
from __future__ import annotations

from typing import Any

class ProxyError(Exception):
    pass

class MethodNotAllowed(ProxyError):
    status_code = 405

class ConfigurationError(ProxyError):
    status_code = 500

class UpstreamError(ProxyError):
    """Upstream answered, but with a non-2xx status."""

    def __init__(self, status_code: int, message: Any, payload: Any = None):
        super().__init__(f"upstream http {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.payload = payload
