"""Process-wide configuration.

Design:
- Built once per process (module import in lambda_function.py) and injected
  into the handler. Never mutated, never re-read during a request.
- Environment variables win; src/configs/proxy.yaml supplies defaults.
- A missing API key is not an error here. The handler reports it per request.
"""
from __future__ import annotations

import hashlib
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .logging_util import get_logger

logger = get_logger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash-preview-05-20"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT = 30.0

API_KEY_ENV = "GEMINI_API_KEY"
MODEL_ENV = "GEMINI_MODEL"
BASE_URL_ENV = "GEMINI_BASE_URL"
TIMEOUT_ENV = "GEMINI_TIMEOUT"

_DEFAULTS_FILE = Path(__file__).resolve().parents[1] / "configs" / "proxy.yaml"

@dataclass(frozen=True)
class Settings:
    api_key: Optional[str]
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    def key_fingerprint(self) -> str:
        if not self.api_key:
            return "len=0"
        sha8 = hashlib.sha256(self.api_key.encode("utf-8")).hexdigest()[:8]
        return f"len={len(self.api_key)} sha8={sha8}"

def sanitize_api_key(raw: Optional[str]) -> str:
    k = (raw or "").strip()
    k = k.strip(' "\'`')
    k = k.strip("“”‘’")
    return k

def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except Exception as e:
        logger.error("Failed to load YAML: %s (%s)", path, e)
        return {}
    if not isinstance(data, dict):
        logger.error("Ignoring %s: top level is not a mapping", path)
        return {}
    return data

def _to_float(v: Any, default: float) -> float:
    if v is None or v == "":
        return default
    try:
        return float(v)
    except (TypeError, ValueError):
        logger.warning("Invalid timeout %r, using %s", v, default)
        return default

def load_settings(env: Optional[Mapping[str, str]] = None, defaults_file: Optional[Path] = None) -> Settings:
    env = os.environ if env is None else env
    file_cfg = _load_yaml(defaults_file or _DEFAULTS_FILE)

    api_key = sanitize_api_key(env.get(API_KEY_ENV)) or None
    model = (env.get(MODEL_ENV) or "").strip() or str(file_cfg.get("model") or DEFAULT_MODEL)
    base_url = (env.get(BASE_URL_ENV) or "").strip() or str(file_cfg.get("base_url") or DEFAULT_BASE_URL)
    timeout = _to_float(env.get(TIMEOUT_ENV), _to_float(file_cfg.get("timeout"), DEFAULT_TIMEOUT))

    settings = Settings(api_key=api_key, model=model, base_url=base_url.rstrip("/"), timeout=timeout)
    logger.info(
        "Loaded settings: model=%s base_url=%s timeout=%s key=%s",
        settings.model, settings.base_url, settings.timeout, settings.key_fingerprint(),
    )
    return settings
