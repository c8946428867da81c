import logging
import os

import pytest
from requests.structures import CaseInsensitiveDict

os.environ.setdefault("ENVIRONMENT", "testing")

class FakeResponse:
    def __init__(self, headers=None, status_code=200):
        self.headers = CaseInsensitiveDict(headers or {})
        self.status_code = status_code

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False

class FakeSession:
    """Records HEAD calls and replays a canned response or error"""

    def __init__(self, headers=None, status_code=200, error=None):
        self.response = FakeResponse(headers, status_code)
        self.error = error
        self.calls = []
        self.closed = False

    def head(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True

@pytest.fixture
def make_session():
    """Build a FakeSession with the given Content-Length or error"""
    def _make(content_length=None, error=None, **headers):
        if content_length is not None:
            headers["Content-Length"] = str(content_length)
        return FakeSession(headers=headers, error=error)
    return _make

@pytest.fixture
def restore_root_logging():
    """Put back root logger handlers replaced by setup_logging"""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
