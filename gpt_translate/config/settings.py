"""Explicit run configuration, built once from the command line."""

from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_LANGUAGE = "en"


@dataclass
class TranslateSettings:
    """Everything one invocation needs, passed down the pipeline."""
    source_lang: str = DEFAULT_LANGUAGE
    target_lang: str = DEFAULT_LANGUAGE
    api_token: Optional[str] = None          # None/"" -> read secret.yml
    copy_to_clipboard: bool = True
    verbose: bool = False
    text_args: List[str] = field(default_factory=list)

    @classmethod
    def from_args(cls, args) -> "TranslateSettings":
        """Build settings from an argparse Namespace."""
        return cls(
            source_lang=args.source_lang,
            target_lang=args.target_lang,
            api_token=args.api_token,
            copy_to_clipboard=args.copy,
            verbose=args.verbose,
            text_args=list(args.text or []),
        )
