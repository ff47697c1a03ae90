#!/usr/bin/env python3
"""Cross-platform helpers for gpt-translate.

Centralizes home-directory lookup, the terminal check on standard input
and UTF-8 console setup.

Usage:
    from gpt_translate.compat.platform_utils import (
        IS_WINDOWS, get_home_dir, get_config_dir, is_interactive,
        ensure_utf8_console,
    )
"""

import platform
import sys
from pathlib import Path
from typing import Optional, TextIO


# ---------------------------------------------------------------------------
# Platform detection constants
# ---------------------------------------------------------------------------
PLATFORM_NAME: str = platform.system()   # "Windows", "Darwin", "Linux"
IS_WINDOWS: bool = PLATFORM_NAME == "Windows"


# ---------------------------------------------------------------------------
# Directory utilities
# ---------------------------------------------------------------------------
def get_home_dir() -> Path:
    """Return user home directory cross-platform.

    Raises RuntimeError when no home directory can be determined.
    """
    return Path.home()


def get_config_dir() -> Path:
    """Return the user-level config directory (``~/.config``).

    The same location is used on every platform so the secret file path
    stays fixed.
    """
    return get_home_dir() / ".config"


# ---------------------------------------------------------------------------
# Console utilities
# ---------------------------------------------------------------------------
def is_interactive(stream: Optional[TextIO] = None) -> bool:
    """Return True if *stream* (default stdin) is attached to a terminal.

    Raises ValueError/OSError when the stream is closed or unusable, and
    AttributeError when there is no stream at all.
    """
    if stream is None:
        stream = sys.stdin
    if stream is None:
        raise AttributeError("standard input is not available")
    return stream.isatty()


def ensure_utf8_console():
    """Ensure stdout supports UTF-8 on Windows.

    Safe to call on any platform (no-op on Unix).
    """
    if not IS_WINDOWS:
        return
    try:
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    except (AttributeError, OSError):
        import io as _io
        sys.stdout = _io.TextIOWrapper(
            sys.stdout.buffer, encoding="utf-8", errors="replace"
        )
