"""Runtime settings and credential resolution.

Usage::

    from gpt_translate.config import TranslateSettings, resolve_api_token

    settings = TranslateSettings(source_lang="en", target_lang="es")
    token = resolve_api_token(settings.api_token)
"""

from gpt_translate.config.credentials import (
    default_config_path,
    load_token_from_config,
    resolve_api_token,
)
from gpt_translate.config.settings import TranslateSettings

__all__ = [
    "TranslateSettings",
    "default_config_path",
    "load_token_from_config",
    "resolve_api_token",
]
