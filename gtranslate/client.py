"""Call the Google Cloud Translation v2 REST endpoint."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Mapping, Optional

import requests

from gtranslate.resolver import RequestDescriptor, UsageError, get_optional_env_var

logger = logging.getLogger("gtranslate.client")

DEFAULT_ENDPOINT = "https://translation.googleapis.com/language/translate/v2"
DEFAULT_TIMEOUT = 15.0
ACCESS_KEY_VAR = "GOOGLE_ACCESS_KEY"
ENDPOINT_VAR = "GT_TRANSLATE_URL"
TIMEOUT_VAR = "GT_TIMEOUT"
SETUP_DOCS_URL = "https://cloud.google.com/translate/docs/setup"


class TranslationError(Exception):
    """The API call did not produce a translation."""


class TransportError(TranslationError):
    """The request never got a response (connection refused, timeout, ...)."""


class ResponseError(TranslationError):
    """The response body is not a translation payload."""


def get_access_key(environ: Optional[Mapping[str, str]] = None) -> str:
    access_key = get_optional_env_var(ACCESS_KEY_VAR, environ)
    if not access_key:
        raise UsageError(
            f"A Google access key is required. See this for how to create one: {SETUP_DOCS_URL}"
        )
    return access_key


def get_endpoint(environ: Optional[Mapping[str, str]] = None) -> str:
    return get_optional_env_var(ENDPOINT_VAR, environ) or DEFAULT_ENDPOINT


def get_timeout(environ: Optional[Mapping[str, str]] = None) -> float:
    raw = get_optional_env_var(TIMEOUT_VAR, environ).strip()
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise UsageError(f"{TIMEOUT_VAR} must be a number of seconds, got {raw!r}") from None
    if not math.isfinite(timeout) or timeout <= 0:
        raise UsageError(f"{TIMEOUT_VAR} must be a finite number greater than zero, got {raw!r}")
    return timeout


def build_payload(request: RequestDescriptor) -> Dict[str, str]:
    return {
        "source": request.input_language,
        "target": request.output_language,
        "q": request.text,
    }


def parse_translation(data: Any) -> str:
    """Return the first ``translatedText`` of a v2 response body.

    Anything else, including the provider's ``{"error": {...}}`` envelope,
    raises ``ResponseError`` with a description of what came back.
    """
    if isinstance(data, dict) and isinstance(data.get("error"), dict):
        error = data["error"]
        raise ResponseError(f"{error.get('code', 'unknown')} {error.get('message', 'no message')}".strip())
    try:
        translated = data["data"]["translations"][0]["translatedText"]
    except (KeyError, IndexError, TypeError) as error:
        raise ResponseError(f"unexpected response shape, missing {error}") from error
    if not isinstance(translated, str):
        raise ResponseError(f"translatedText is not a string: {translated!r}")
    return translated


def translate(request: RequestDescriptor, environ: Optional[Mapping[str, str]] = None) -> str:
    access_key = get_access_key(environ)
    endpoint = get_endpoint(environ)
    timeout = get_timeout(environ)
    headers = {"Authorization": f"Bearer {access_key}"}

    logger.info("POST %s (%s -> %s)", endpoint, request.input_language, request.output_language)
    try:
        response = requests.post(endpoint, json=build_payload(request), headers=headers, timeout=timeout)
    except requests.RequestException as error:
        raise TransportError(str(error)) from error
    logger.debug("Status: %s", response.status_code)

    try:
        data = response.json()
    except requests.JSONDecodeError as error:
        snippet = response.text[:200]
        raise ResponseError(f"response is not JSON: {snippet!r}") from error
    return parse_translation(data)
