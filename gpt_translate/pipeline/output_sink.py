"""Print the translation and optionally copy it to the clipboard."""

import logging
import sys
from typing import Optional, TextIO

import pyperclip

from gpt_translate.resilience.errors import ClipboardError

logger = logging.getLogger("gpt_translate.output")


def copy_to_clipboard(text: str) -> None:
    """Write *text* to the system clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available or the
            write fails.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(str(exc) or "clipboard unavailable") from exc
    logger.debug("Copied %d characters to clipboard", len(text))


def emit_translation(text: str, copy: bool = True,
                     stream: Optional[TextIO] = None) -> None:
    """Print *text* as one line, then copy it if *copy* is set."""
    if stream is None:
        stream = sys.stdout
    print(text, file=stream)
    stream.flush()

    if copy:
        copy_to_clipboard(text)
