"""Turn command-line arguments and environment defaults into a translation request."""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from gtranslate.languages import LANGUAGE_NAMES, is_allowed

logger = logging.getLogger("gtranslate.resolver")

INPUT_LANGUAGE_VAR = "GT_INPUT_LANGUAGE"
OUTPUT_LANGUAGE_VAR = "GT_OUTPUT_LANGUAGE"
HELP_FLAG = "--help"

# Codes on the command line are lowercase letters only, so "zh-CN" must come
# from the environment.
ARGUMENT_PATTERN = re.compile(
    r"^(-i (?P<input_language>[a-z]+))?(\s*-o (?P<output_language>[a-z]+))?(?P<text>.*)$",
    re.DOTALL,
)


class UsageError(Exception):
    """The invocation cannot be turned into a valid request."""


class HelpRequested(UsageError):
    def __init__(self) -> None:
        super().__init__("Help requested")


@dataclass(frozen=True)
class RequestDescriptor:
    input_language: str
    output_language: str
    text: str


def get_optional_env_var(key: str, environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    return env.get(key) or ""


def parse_arguments(argv: Sequence[str], environ: Optional[Mapping[str, str]] = None) -> RequestDescriptor:
    """Merge ``GT_*`` environment defaults with ``-i``/``-o`` overrides.

    Raises ``HelpRequested`` when ``--help`` appears anywhere in the arguments
    and ``UsageError`` when either language ends up empty. Codes are not
    checked against the allow-list here; see ``validate_request``.
    """
    args = " ".join(argv)
    if HELP_FLAG in args:
        raise HelpRequested()

    input_language = get_optional_env_var(INPUT_LANGUAGE_VAR, environ)
    output_language = get_optional_env_var(OUTPUT_LANGUAGE_VAR, environ)
    text = ""

    match = ARGUMENT_PATTERN.match(args)
    if match:
        if match.group("input_language"):
            input_language = match.group("input_language")
        if match.group("output_language"):
            output_language = match.group("output_language")
        text = match.group("text").strip()

    if not input_language:
        raise UsageError("No input language provided. Type --help to see allowed languages")
    if not output_language:
        raise UsageError("No output language provided. Type --help to see allowed languages")

    return RequestDescriptor(input_language, output_language, text)


def validate_request(request: RequestDescriptor) -> RequestDescriptor:
    if not is_allowed(request.input_language):
        raise UsageError("Input language is not allowed. Type --help to see allowed languages")
    if not is_allowed(request.output_language):
        raise UsageError("Output language is not allowed. Type --help to see allowed languages")
    logger.debug(
        "Resolved request %s -> %s (%d chars)",
        LANGUAGE_NAMES[request.input_language],
        LANGUAGE_NAMES[request.output_language],
        len(request.text),
    )
    return request


def resolve_request(argv: Sequence[str], environ: Optional[Mapping[str, str]] = None) -> RequestDescriptor:
    return validate_request(parse_arguments(argv, environ))
