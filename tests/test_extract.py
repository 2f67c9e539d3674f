import pytest

from src.gemini_proxy.extract import dig, extract_text
from src.gemini_proxy.types import MISSING

def test_extract_text_happy_path():
    assert extract_text({"candidates": [{"content": {"parts": [{"text": "hello"}]}}]}) == "hello"

def test_extract_text_missing_segments():
    assert extract_text({}) is MISSING
    assert extract_text({"candidates": []}) is MISSING
    assert extract_text({"candidates": [{}]}) is MISSING
    assert extract_text({"candidates": [{"content": None}]}) is MISSING
    assert extract_text({"candidates": [{"content": {"parts": []}}]}) is MISSING
    assert extract_text({"candidates": [{"content": {"parts": [{}]}}]}) is MISSING

def test_extract_text_wrong_types_are_missing():
    assert extract_text([1, 2]) is MISSING
    assert extract_text("text") is MISSING
    assert extract_text({"candidates": {"0": "x"}}) is MISSING
    assert extract_text({"candidates": ["nope"]}) is MISSING

def test_extract_text_keeps_explicit_null():
    assert extract_text({"candidates": [{"content": {"parts": [{"text": None}]}}]}) is None

def test_extract_text_null_body_raises():
    with pytest.raises(TypeError):
        extract_text(None)

def test_dig_index_bounds():
    assert dig({"a": [1, 2, 3]}, "a", 2) == 3
    assert dig({"a": [1]}, "a", 5) is MISSING
    assert dig({"a": [1]}, "a", -1) is MISSING
