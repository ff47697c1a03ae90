"""OpenAI Chat Completions translator.

Uses requests.post() against the chat-completions endpoint directly so
the raw status code and the in-band ``error`` envelope are both visible:

- non-200 status            -> APIStatusError
- ``error.message`` non-empty -> APIResponseError (checked even on 200)
- no choices                -> NoTranslationError

Exactly one request per call; no retries and no timeout.
"""

import logging
from typing import Dict, Optional

import requests

from gpt_translate.llm.provider import (
    DEFAULT_MODEL,
    ChatResponse,
    build_translation_request,
)
from gpt_translate.resilience.errors import (
    APIResponseError,
    APIStatusError,
    NoTranslationError,
    ResponseParseError,
    TransportError,
)

logger = logging.getLogger("gpt_translate.llm.openai")

CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"


class OpenAITranslator:
    """Single-shot translator backed by the OpenAI chat endpoint."""

    def __init__(self, api_key: str, endpoint: str = CHAT_COMPLETIONS_URL,
                 model: str = DEFAULT_MODEL, verbose: bool = False,
                 timeout: Optional[float] = None):
        self._api_key = api_key
        self._endpoint = endpoint
        self._model = model
        self._verbose = verbose
        self._timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }

    def translate(self, source_lang: str, target_lang: str, text: str) -> str:
        """Translate *text* and return the first choice, whitespace-trimmed.

        Raises:
            TransportError: The request could not be sent.
            APIStatusError: HTTP status other than 200.
            ResponseParseError: Body is not a JSON object.
            APIResponseError: The API reported an error in the body.
            NoTranslationError: The response carried no choices.
        """
        payload = build_translation_request(
            source_lang, target_lang, text, model=self._model,
        ).to_json()

        if self._verbose:
            logger.debug("Request Payload: %s", payload)

        try:
            resp_http = requests.post(
                self._endpoint,
                data=payload.encode("utf-8"),
                headers=self._headers(),
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.debug("OpenAI request to %s failed: %s", self._endpoint, exc)
            raise TransportError(f"failed to execute HTTP request: {exc}") from exc

        if resp_http.status_code != 200:
            if self._verbose:
                logger.debug("Response Status: %s %s", resp_http.status_code, resp_http.reason)
                logger.debug("Response Headers: %s", dict(resp_http.headers))
                logger.debug("Response Body: %s", resp_http.text)
            raise APIStatusError(resp_http.status_code, body=resp_http.text)

        try:
            data = resp_http.json()
        except ValueError as exc:
            raise ResponseParseError(f"failed to unmarshal response JSON: {exc}") from exc

        response = ChatResponse.from_dict(data)

        if response.error.message:
            if self._verbose:
                logger.debug(
                    "OpenAI API Error: %s (Type: %s)",
                    response.error.message, response.error.type,
                )
            raise APIResponseError(response.error.message, error_type=response.error.type)

        if response.choices:
            return response.choices[0].message.content.strip()

        raise NoTranslationError()


def translate(api_key: str, source_lang: str, target_lang: str, text: str,
              verbose: bool = False) -> str:
    """Translate *text* with a one-off OpenAITranslator."""
    return OpenAITranslator(api_key, verbose=verbose).translate(
        source_lang, target_lang, text,
    )
