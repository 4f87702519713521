"""Command line entry point: ``google-translate [-i <code>] [-o <code>] <text>``."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional, Sequence

from dotenv import load_dotenv

from gtranslate.client import ResponseError, TransportError, translate
from gtranslate.languages import LANGUAGE_TABLE, format_language_line
from gtranslate.resolver import HelpRequested, UsageError, get_optional_env_var, resolve_request

logger = logging.getLogger("gtranslate")

LOG_LEVEL_VAR = "GT_LOG_LEVEL"

HELP_HEADER = """
To translate something using google translate, use the format
`google-translate -i <input_language> -o <output_language> <text to translate>`.

You may also provide the input language with the environment variable GT_INPUT_LANGUAGE
and output language with environment variable GT_OUTPUT_LANGUAGE.

This requires an environment variable GOOGLE_ACCESS_KEY which can be retrieved with `gcloud auth application-default print-access-token`

The allowed languages are:
"""


def render_help() -> str:
    lines = [format_language_line(name, codes, standard) for name, codes, standard in LANGUAGE_TABLE]
    return HELP_HEADER + "\n" + "\n".join(lines)


def print_help() -> None:
    print(render_help())


def load_env_file(directory: Optional[Path] = None) -> None:
    """Load ``.env`` from the working directory without overriding exported variables."""
    env_file = (directory or Path.cwd()) / ".env"
    if env_file.exists():
        load_dotenv(env_file, override=False)


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> None:
    level_name = get_optional_env_var(LOG_LEVEL_VAR, environ).upper() or "WARNING"
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if environ is None:
        load_env_file()
        environ = os.environ
    configure_logging(environ)

    try:
        request = resolve_request(argv, environ)
        translation = translate(request, environ)
    except HelpRequested:
        print_help()
        return 1
    except UsageError as error:
        print(error)
        return 1
    except TransportError as error:
        print(f"Could not reach the translation API: {error}")
        return 1
    except ResponseError as error:
        logger.debug("API call failed", exc_info=True)
        print(f"There was the following error with the API call: {error}")
        return 0

    print(translation)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
