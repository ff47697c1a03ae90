#!/usr/bin/env python3
"""Allow ``python -m gpt_translate``."""

from gpt_translate.cli.main import run

if __name__ == "__main__":
    run()
