import json

import pytest
import requests

from src.gemini_proxy.settings import Settings

class FakeResponse:
    def __init__(self, status_code=200, data=None, text=None):
        self.status_code = status_code
        self._data = data
        self.text = text if text is not None else json.dumps(data)

    def json(self):
        return json.loads(self.text)

class PostRecorder:
    """Stands in for requests.post and remembers every call."""

    def __init__(self):
        self.calls = []
        self.responses = []
        self.exc = None

    def queue(self, resp):
        self.responses.append(resp)

    def __call__(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

@pytest.fixture
def fake_post(monkeypatch):
    rec = PostRecorder()
    monkeypatch.setattr(requests, "post", rec)
    return rec

@pytest.fixture
def settings():
    return Settings(api_key="test-key", model="gemini-test", base_url="https://example.test/v1beta", timeout=5)

def ok_body(text="hello"):
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}
