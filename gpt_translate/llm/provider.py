"""Chat-completion request/response records and the translation prompt.

Defines the wire shapes exchanged with an OpenAI-style
``/v1/chat/completions`` endpoint and the builder for the fixed
two-message translation exchange.
"""

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from gpt_translate.resilience.errors import RequestBuildError, ResponseParseError

SYSTEM_PROMPT = "You are a translator that only gives the translated text"
USER_PROMPT_TEMPLATE = "Translate this from {source} to {target}: {text}"
DEFAULT_MODEL = "gpt-4o-mini"


# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------
@dataclass
class ChatMessage:
    """One role/content pair."""
    role: str = "user"
    content: str = ""


@dataclass
class ChatRequest:
    """Chat-completion request body."""
    model: str = DEFAULT_MODEL
    messages: List[ChatMessage] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [asdict(m) for m in self.messages],
        }

    def to_json(self) -> str:
        """Serialize to the request body. Same inputs give identical bytes."""
        try:
            return json.dumps(self.to_dict(), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise RequestBuildError(f"failed to marshal JSON payload: {exc}") from exc


def build_translation_request(source_lang: str, target_lang: str,
                              text: str, model: str = DEFAULT_MODEL) -> ChatRequest:
    """Build the system + user exchange asking for a bare translation."""
    return ChatRequest(
        model=model,
        messages=[
            ChatMessage(role="system", content=SYSTEM_PROMPT),
            ChatMessage(
                role="user",
                content=USER_PROMPT_TEMPLATE.format(
                    source=source_lang, target=target_lang, text=text,
                ),
            ),
        ],
    )


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------
@dataclass
class ChatChoice:
    message: ChatMessage = field(default_factory=ChatMessage)


@dataclass
class ChatError:
    """In-band error object; empty message means no error."""
    message: str = ""
    type: str = ""


@dataclass
class ChatResponse:
    """Parsed chat-completion response."""
    choices: List[ChatChoice] = field(default_factory=list)
    error: ChatError = field(default_factory=ChatError)

    @classmethod
    def from_dict(cls, data: Any) -> "ChatResponse":
        """Build from a decoded JSON body.

        Missing or null ``error``/``choices``/``content`` fields are
        treated as empty. Anything that is not a JSON object raises
        ResponseParseError.
        """
        if not isinstance(data, dict):
            raise ResponseParseError(
                f"failed to unmarshal response JSON: expected object, got {type(data).__name__}"
            )

        err = data.get("error") or {}
        if not isinstance(err, dict):
            raise ResponseParseError("failed to unmarshal response JSON: 'error' is not an object")
        error = ChatError(
            message=str(err.get("message") or ""),
            type=str(err.get("type") or ""),
        )

        raw_choices = data.get("choices") or []
        if not isinstance(raw_choices, list):
            raise ResponseParseError("failed to unmarshal response JSON: 'choices' is not an array")

        choices: List[ChatChoice] = []
        for raw in raw_choices:
            msg = raw.get("message") if isinstance(raw, dict) else None
            if msg is None:
                msg = {}
            if not isinstance(raw, dict) or not isinstance(msg, dict):
                raise ResponseParseError("failed to unmarshal response JSON: malformed choice")
            choices.append(ChatChoice(message=ChatMessage(
                role=str(msg.get("role") or ""),
                content=str(msg.get("content") or ""),
            )))

        return cls(choices=choices, error=error)
