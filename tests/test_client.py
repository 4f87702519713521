import pytest
import requests

from gtranslate.client import (
    DEFAULT_ENDPOINT,
    DEFAULT_TIMEOUT,
    ResponseError,
    TransportError,
    build_payload,
    get_timeout,
    parse_translation,
    translate,
)
from gtranslate.resolver import RequestDescriptor, UsageError
from tests.conftest import make_response

REQUEST = RequestDescriptor("en", "fr", "Hello")


def test_build_payload():
    assert build_payload(REQUEST) == {"source": "en", "target": "fr", "q": "Hello"}


def test_translate_success(mock_post, base_env):
    mock_post.return_value = make_response({"data": {"translations": [{"translatedText": "Bonjour"}]}})

    assert translate(REQUEST, base_env) == "Bonjour"

    mock_post.assert_called_once_with(
        DEFAULT_ENDPOINT,
        json={"source": "en", "target": "fr", "q": "Hello"},
        headers={"Authorization": "Bearer token-123"},
        timeout=DEFAULT_TIMEOUT,
    )


def test_only_first_translation_is_used(mock_post, base_env):
    mock_post.return_value = make_response(
        {"data": {"translations": [{"translatedText": "one"}, {"translatedText": "two"}]}}
    )
    assert translate(REQUEST, base_env) == "one"


def test_endpoint_and_timeout_overrides(mock_post):
    mock_post.return_value = make_response({"data": {"translations": [{"translatedText": "Hallo"}]}})
    env = {"GOOGLE_ACCESS_KEY": "k", "GT_TRANSLATE_URL": "http://localhost:9000/v2", "GT_TIMEOUT": "2.5"}

    translate(REQUEST, env)

    args, kwargs = mock_post.call_args
    assert args == ("http://localhost:9000/v2",)
    assert kwargs["timeout"] == 2.5


def test_missing_access_key_never_calls_api(mock_post):
    with pytest.raises(UsageError) as excinfo:
        translate(REQUEST, {})
    assert "https://cloud.google.com/translate/docs/setup" in str(excinfo.value)
    mock_post.assert_not_called()


@pytest.mark.parametrize("raw", ["soon", "0", "-3", "nan", "inf", "-inf"])
def test_bad_timeout(raw):
    with pytest.raises(UsageError, match="GT_TIMEOUT"):
        get_timeout({"GT_TIMEOUT": raw})


def test_default_timeout():
    assert get_timeout({}) == DEFAULT_TIMEOUT


def test_connection_error_becomes_transport_error(mock_post, base_env):
    mock_post.side_effect = requests.ConnectionError("connection refused")
    with pytest.raises(TransportError, match="connection refused"):
        translate(REQUEST, base_env)


def test_timeout_becomes_transport_error(mock_post, base_env):
    mock_post.side_effect = requests.Timeout("read timed out")
    with pytest.raises(TransportError):
        translate(REQUEST, base_env)


def test_non_json_body(mock_post, base_env):
    mock_post.return_value = make_response(status_code=502, text="<html>Bad Gateway</html>")
    with pytest.raises(ResponseError, match="not JSON"):
        translate(REQUEST, base_env)


def test_provider_error_envelope(mock_post, base_env):
    mock_post.return_value = make_response(
        {"error": {"code": 401, "message": "Request had invalid authentication credentials."}},
        status_code=401,
    )
    with pytest.raises(ResponseError) as excinfo:
        translate(REQUEST, base_env)
    assert str(excinfo.value) == "401 Request had invalid authentication credentials."


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"data": {}},
        {"data": {"translations": []}},
        {"data": {"translations": [{}]}},
        {"data": {"translations": [{"translatedText": 5}]}},
        [],
        "text",
    ],
)
def test_unexpected_shapes(body):
    with pytest.raises(ResponseError):
        parse_translation(body)
