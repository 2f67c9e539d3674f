"""Lenient navigation through upstream JSON.

A missing key, an out-of-range index or a value of the wrong type along the
path yields MISSING instead of raising. A JSON null at the end of the path is
returned as None, so callers can tell "absent" from "explicitly null".
"""
from __future__ import annotations

from typing import Any, Union

from .types import MISSING

PathSegment = Union[str, int]

TEXT_PATH = ("candidates", 0, "content", "parts", 0, "text")

def dig(data: Any, *path: PathSegment) -> Any:
    cur = data
    for seg in path:
        if cur is None:
            return MISSING
        if isinstance(seg, int):
            if not isinstance(cur, list) or not 0 <= seg < len(cur):
                return MISSING
            cur = cur[seg]
        else:
            if not isinstance(cur, dict) or seg not in cur:
                return MISSING
            cur = cur[seg]
    return cur

def extract_text(result: Any) -> Any:
    """First candidate's first part text, MISSING, or None for a JSON null."""
    # Only the segments below the body are optional; a null body is a failure.
    if result is None:
        raise TypeError("upstream success body is null")
    return dig(result, *TEXT_PATH)
