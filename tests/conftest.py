#!/usr/bin/env python3
"""Shared pytest fixtures for the gpt-translate test suite.

Centralizes the fake HTTP response factory, the patched requests.post and
the patched clipboard so no test touches the network or the real
clipboard.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Ensure project root is on sys.path
BASE_DIR = Path(__file__).resolve().parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))


# ---------------------------------------------------------------------------
# HTTP helpers
# ---------------------------------------------------------------------------
def make_chat_body(*contents, error=None):
    """Build a chat-completions JSON body with one choice per content."""
    body = {
        "choices": [
            {"index": i, "message": {"role": "assistant", "content": c}}
            for i, c in enumerate(contents)
        ],
    }
    if error is not None:
        body["error"] = error
    return body


def make_http_response(status_code=200, json_body=None, text=None,
                       headers=None, reason="OK"):
    """Build a MagicMock standing in for requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    resp.headers = headers or {"Content-Type": "application/json"}
    resp.text = text if text is not None else ""
    if json_body is not None:
        resp.json.return_value = json_body
    else:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    return resp


@pytest.fixture
def http_response():
    """Factory fixture for fake HTTP responses."""
    return make_http_response


@pytest.fixture
def chat_body():
    """Factory fixture for chat-completions response bodies."""
    return make_chat_body


@pytest.fixture
def mock_post():
    """Patch requests.post as seen by the OpenAI translator."""
    with patch("gpt_translate.llm.openai_provider.requests.post") as post:
        yield post


@pytest.fixture
def clipboard():
    """Patch pyperclip.copy; the returned list collects copied text."""
    copied = []
    with patch(
        "gpt_translate.pipeline.output_sink.pyperclip.copy",
        side_effect=copied.append,
    ):
        yield copied


@pytest.fixture
def fake_home(tmp_path, monkeypatch):
    """Point the home directory at tmp_path and return it."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    return tmp_path


@pytest.fixture
def write_secret(fake_home):
    """Write ~/.config/openapi/secret.yml under the fake home."""
    def _write(content: str) -> Path:
        path = fake_home / ".config" / "openapi" / "secret.yml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path
    return _write
