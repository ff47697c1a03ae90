"""Resolve the text to translate from positional args or piped stdin."""

import io
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from gpt_translate.compat.platform_utils import is_interactive
from gpt_translate.resilience.errors import InputError

logger = logging.getLogger("gpt_translate.input")


def _read_lines(stream: TextIO) -> List[str]:
    lines: List[str] = []
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        lines.append(line)
    return lines


def _lenient_reader(stream: TextIO) -> TextIO:
    """Re-decode a byte-backed stream as UTF-8, replacing invalid bytes.

    Streams without a ``buffer`` (e.g. StringIO) are already text and are
    returned unchanged.
    """
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        return stream
    return io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")


def resolve_input_text(args: Sequence[str], stream: Optional[TextIO] = None) -> str:
    """Return the text to translate.

    Positional arguments win and are joined with single spaces; stdin is
    not touched in that case. Otherwise a non-interactive *stream*
    (default ``sys.stdin``) is read in full and its lines joined with
    single spaces. Bytes that are not valid UTF-8 become U+FFFD. An
    interactive terminal yields the empty string.

    Raises:
        InputError: If stdin cannot be inspected or read.
    """
    if args:
        return " ".join(args)

    if stream is None:
        stream = sys.stdin

    try:
        interactive = is_interactive(stream)
    except (AttributeError, ValueError, OSError) as exc:
        raise InputError(f"error reading stdin: {exc}") from exc

    if interactive:
        logger.debug("No positional text and stdin is a terminal")
        return ""

    reader = _lenient_reader(stream)
    try:
        return " ".join(_read_lines(reader))
    except (OSError, ValueError) as exc:
        raise InputError(f"error reading stdin: {exc}") from exc
    finally:
        if reader is not stream:
            reader.detach()
