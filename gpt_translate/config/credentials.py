"""API token resolution.

An explicit token (``-a/--api-token``) always wins. Without one, the
token is read from the ``api_token`` key of ``~/.config/openapi/secret.yml``.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from gpt_translate.compat.platform_utils import get_config_dir
from gpt_translate.resilience.errors import ConfigurationError

logger = logging.getLogger("gpt_translate.config")

SECRET_DIR_NAME = "openapi"
SECRET_FILE_NAME = "secret.yml"
TOKEN_KEY = "api_token"


def default_config_path() -> Path:
    """Return the fixed secret file location under the user's home.

    Raises:
        ConfigurationError: If the home directory cannot be determined.
    """
    try:
        return get_config_dir() / SECRET_DIR_NAME / SECRET_FILE_NAME
    except (RuntimeError, KeyError) as exc:
        raise ConfigurationError(
            f"failed to retrieve home directory: {exc}"
        ) from exc


def load_token_from_config(config_path=None) -> str:
    """Read the API token from the YAML secret file.

    Args:
        config_path: Override for the secret file; defaults to
            ``~/.config/openapi/secret.yml``.

    Returns:
        The non-empty token string.

    Raises:
        ConfigurationError: If the file is unreadable, is not valid YAML,
            or has no usable ``api_token`` value.
    """
    path = Path(config_path) if config_path else default_config_path()
    logger.debug("Reading API token from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"failed to read config file: {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"failed to parse config file: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"failed to parse config file: expected a mapping, got {type(data).__name__}"
        )

    token = data.get(TOKEN_KEY)
    if not isinstance(token, str) or not token:
        raise ConfigurationError(
            "API token not found in config file", config_key=TOKEN_KEY
        )
    return token


def resolve_api_token(explicit_token: Optional[str], config_path=None) -> str:
    """Return *explicit_token* verbatim if given, else the config file token."""
    if explicit_token:
        return explicit_token
    return load_token_from_config(config_path)
