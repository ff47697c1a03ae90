"""Chat-completion layer used for translation.

Usage::

    from gpt_translate.llm import OpenAITranslator

    translator = OpenAITranslator(api_key="sk-...")
    print(translator.translate("en", "es", "Hello"))
"""

from gpt_translate.llm.openai_provider import (
    CHAT_COMPLETIONS_URL,
    OpenAITranslator,
    translate,
)
from gpt_translate.llm.provider import (
    DEFAULT_MODEL,
    SYSTEM_PROMPT,
    ChatChoice,
    ChatError,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    build_translation_request,
)

__all__ = [
    "CHAT_COMPLETIONS_URL",
    "DEFAULT_MODEL",
    "SYSTEM_PROMPT",
    "ChatChoice",
    "ChatError",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "OpenAITranslator",
    "build_translation_request",
    "translate",
]
