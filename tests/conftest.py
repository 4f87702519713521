from unittest.mock import MagicMock

import pytest
import requests


def make_response(payload=None, status_code=200, text=None):
    response = MagicMock()
    response.status_code = status_code
    if payload is None:
        response.text = text or ""
        response.json.side_effect = requests.JSONDecodeError("Expecting value", response.text, 0)
    else:
        response.json.return_value = payload
        response.text = text or str(payload)
    return response


@pytest.fixture
def mock_post(monkeypatch):
    post = MagicMock()
    monkeypatch.setattr("gtranslate.client.requests.post", post)
    return post


@pytest.fixture
def base_env():
    return {"GOOGLE_ACCESS_KEY": "token-123"}
