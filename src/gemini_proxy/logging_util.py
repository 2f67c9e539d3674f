"""Request-scoped logging.

Every line carries the invocation's request id (`-` outside a request), so
concurrent invocations sharing one log stream can be told apart.
Use `request_logger(logger, request_id)` inside a handler call and pass the
result to `log_step`.
"""
from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "GEMINI_PROXY_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(name)s:%(lineno)d [%(request_id)s] - %(message)s"
NO_REQUEST = "-"

AnyLogger = Union[logging.Logger, logging.LoggerAdapter]

class RequestIdFilter(logging.Filter):
    """Fills in `request_id` for records logged outside a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = NO_REQUEST
        return True

def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(os.environ.get(LOG_LEVEL_ENV, "INFO").upper())

    h = logging.StreamHandler()
    h.addFilter(RequestIdFilter())
    h.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(h)

    return logger

def request_logger(logger: logging.Logger, request_id: Optional[str]) -> logging.LoggerAdapter:
    return logging.LoggerAdapter(logger, {"request_id": request_id or NO_REQUEST})

def log_step(logger: AnyLogger, step: str, msg: str):
    logger.info("[STEP %s] %s", step, msg)
