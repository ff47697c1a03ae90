"""gpt-translate: translate text from the command line via an LLM chat endpoint.

Usage::

    gpt-translate -f en -t es "Hello world"
    echo "Bonjour" | gpt-translate -f fr -t en --no-copy
"""

__version__ = "1.1.0"

__all__ = ["__version__"]
