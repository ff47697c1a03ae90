#!/usr/bin/env python3
"""gpt-translate: Structured Exception Hierarchy.

Every stage of the pipeline raises a subclass of TranslateError so the CLI
can report a single fatal message and exit non-zero. Nothing here is
retried; ``retryable`` only describes the failure.

Usage:
    from gpt_translate.resilience.errors import ConfigurationError

    raise ConfigurationError("API token not found in config file", config_key="api_token")
"""


class TranslateError(Exception):
    """Base exception for all gpt-translate errors.

    Attributes:
        service: Name of the stage or service that failed (e.g. "openai").
        retryable: Whether the failure is likely to be transient.
    """

    def __init__(self, message: str, service: str = "", retryable: bool = False):
        super().__init__(message)
        self.service = service
        self.retryable = retryable


class InputError(TranslateError):
    """Standard input could not be inspected or read."""

    def __init__(self, message: str):
        super().__init__(message, service="input", retryable=False)


class ConfigurationError(TranslateError):
    """Configuration error: missing or invalid credential configuration."""

    def __init__(self, message: str, config_key: str = ""):
        super().__init__(message, service="config", retryable=False)
        self.config_key = config_key


class RequestBuildError(TranslateError):
    """The chat request could not be serialized."""

    def __init__(self, message: str):
        super().__init__(message, service="openai", retryable=False)


class TransportError(TranslateError):
    """Transport failure: connection refused, DNS, TLS, reset.

    Transient by nature, but the CLI does not retry.
    """

    def __init__(self, message: str):
        super().__init__(message, service="openai", retryable=True)


class ProtocolError(TranslateError):
    """The API answered, but not with a usable translation."""

    def __init__(self, message: str, retryable: bool = False):
        super().__init__(message, service="openai", retryable=retryable)


class APIStatusError(ProtocolError):
    """Non-200 HTTP status from the chat endpoint.

    Attributes:
        status_code: HTTP status returned by the API.
        body: Raw response body, kept for diagnostics.
    """

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(
            f"unexpected status code from OpenAI API: {status_code}",
            retryable=status_code == 429 or status_code >= 500,
        )
        self.status_code = status_code
        self.body = body


class APIResponseError(ProtocolError):
    """In-band error object reported by the API, even inside a 200 envelope.

    Attributes:
        error_type: The ``error.type`` field of the response.
    """

    def __init__(self, message: str, error_type: str = ""):
        super().__init__(message)
        self.error_type = error_type


class ResponseParseError(ProtocolError):
    """Response body is not the JSON object the API is expected to return."""


class NoTranslationError(TranslateError):
    """The API returned no choices."""

    def __init__(self, message: str = "no translation found in response"):
        super().__init__(message, service="openai", retryable=False)


class ClipboardError(TranslateError):
    """Writing the translation to the system clipboard failed."""

    def __init__(self, message: str):
        super().__init__(message, service="clipboard", retryable=False)
