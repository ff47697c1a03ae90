#!/usr/bin/env python3
"""gpt-translate command line entry point.

Pipeline: resolve input text -> resolve API token -> one chat-completion
request -> print (and copy) the translation. Any failure is logged as
fatal and the process exits 1.

Usage:
    gpt-translate -f en -t es Hello world
    cat notes.txt | gpt-translate -t de --no-copy
    gpt-translate -a sk-... -t fr -v "Good morning"
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from gpt_translate import __version__
from gpt_translate.compat.platform_utils import ensure_utf8_console
from gpt_translate.config.credentials import resolve_api_token
from gpt_translate.config.settings import DEFAULT_LANGUAGE, TranslateSettings
from gpt_translate.llm.openai_provider import OpenAITranslator
from gpt_translate.pipeline.input_resolver import resolve_input_text
from gpt_translate.pipeline.output_sink import emit_translation
from gpt_translate.resilience.errors import (
    ClipboardError,
    ConfigurationError,
    InputError,
    TranslateError,
)

logger = logging.getLogger("gpt_translate.cli")

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpt-translate",
        description="Translate text with the OpenAI chat completions API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Text is taken from the arguments, or from stdin when piped.\n"
               "Without -a, the token is read from ~/.config/openapi/secret.yml (api_token).",
    )
    parser.add_argument("text", nargs="*", help="Text to translate")
    parser.add_argument("-f", "--from", dest="source_lang", default=DEFAULT_LANGUAGE,
                        help="Source language (default: en)")
    parser.add_argument("-t", "--to", dest="target_lang", default=DEFAULT_LANGUAGE,
                        help="Target language (default: en)")
    parser.add_argument("-a", "--api-token", dest="api_token", default=None,
                        help="OpenAI API token (optional)")
    parser.add_argument("-cp", "--copy", dest="copy", default=True,
                        action=argparse.BooleanOptionalAction,
                        help="Copy output to clipboard (-cp=false also disables)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose mode (default: false)")
    parser.add_argument("-V", "--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


# Spellings accepted for "-flag=value" on boolean flags (Go flag syntax).
_BOOL_VALUES = {
    "1": True, "t": True, "T": True, "true": True, "TRUE": True, "True": True,
    "0": False, "f": False, "F": False, "false": False, "FALSE": False, "False": False,
}

# flag -> (argv form when true, argv form when false; None means drop)
_BOOL_FLAGS = {
    "-cp": ("--copy", "--no-copy"),
    "--copy": ("--copy", "--no-copy"),
    "-v": ("--verbose", None),
    "--verbose": ("--verbose", None),
}


def _expand_bool_flags(parser: argparse.ArgumentParser, argv: List[str]) -> List[str]:
    """Rewrite ``-cp=false`` style arguments into plain argparse flags."""
    out: List[str] = []
    for i, arg in enumerate(argv):
        if arg == "--":
            out.extend(argv[i:])
            break
        name, sep, value = arg.partition("=")
        if not sep or name not in _BOOL_FLAGS:
            out.append(arg)
            continue
        if value not in _BOOL_VALUES:
            parser.error(f"invalid boolean value {value!r} for {name}")
        on, off = _BOOL_FLAGS[name]
        replacement = on if _BOOL_VALUES[value] else off
        if replacement:
            out.append(replacement)
    return out


def parse_cli_args(argv: List[str]) -> argparse.Namespace:
    parser = build_parser()
    return parser.parse_args(_expand_bool_flags(parser, list(argv)))


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger("gpt_translate").setLevel(level)


def run_pipeline(settings: TranslateSettings, stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None) -> str:
    """Run one translation end to end and return the translated text."""
    text = resolve_input_text(settings.text_args, stream=stdin)
    if not text:
        logger.warning("No text to translate; sending an empty request")

    token = resolve_api_token(settings.api_token)
    if settings.verbose:
        logger.debug("OpenAI Token: %s", token)

    translator = OpenAITranslator(token, verbose=settings.verbose)
    translated = translator.translate(settings.source_lang, settings.target_lang, text)

    emit_translation(translated, copy=settings.copy_to_clipboard, stream=stdout)
    return translated


def _fatal_prefix(exc: TranslateError) -> str:
    if isinstance(exc, InputError):
        return "Failed to read input"
    if isinstance(exc, ConfigurationError):
        return "Failed to load API token"
    if isinstance(exc, ClipboardError):
        return "Failed to copy translation to clipboard"
    return "Translation failed"


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = parse_cli_args(argv)
    settings = TranslateSettings.from_args(args)

    _configure_logging(settings.verbose)
    ensure_utf8_console()

    if settings.verbose:
        logger.debug("Verbose mode enabled.")

    try:
        run_pipeline(settings, stdin=stdin, stdout=stdout)
    except KeyboardInterrupt:
        return 130
    except TranslateError as exc:
        logger.critical("%s: %s", _fatal_prefix(exc), exc)
        return 1
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":  # pragma: no cover
    run()
