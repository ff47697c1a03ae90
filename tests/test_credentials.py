"""Tests for gpt_translate.config.credentials (API token resolution).

Covers flag-over-file precedence, the fixed secret file path, and every
ConfigurationError branch: missing home, unreadable file, bad YAML and
missing/empty token.
"""

from unittest.mock import patch

import pytest

from gpt_translate.config.credentials import (
    default_config_path,
    load_token_from_config,
    resolve_api_token,
)
from gpt_translate.resilience.errors import ConfigurationError


# ---------------------------------------------------------------------------
# Precedence
# ---------------------------------------------------------------------------

class TestPrecedence:
    """An explicit token always wins over the config file."""

    def test_explicit_token_wins_over_file(self, write_secret):
        write_secret("api_token: from-file\n")
        assert resolve_api_token("from-flag") == "from-flag"

    def test_explicit_token_used_verbatim(self, fake_home):
        assert resolve_api_token("  sk-raw  ") == "  sk-raw  "

    def test_file_not_read_when_flag_given(self, fake_home):
        with patch("gpt_translate.config.credentials.load_token_from_config") as load:
            resolve_api_token("sk-flag")
        load.assert_not_called()

    @pytest.mark.parametrize("explicit", [None, ""])
    def test_falls_back_to_file(self, write_secret, explicit):
        write_secret("api_token: sk-file\n")
        assert resolve_api_token(explicit) == "sk-file"


# ---------------------------------------------------------------------------
# Config file loading
# ---------------------------------------------------------------------------

class TestLoadTokenFromConfig:

    def test_default_path_under_home(self, fake_home):
        assert default_config_path() == fake_home / ".config" / "openapi" / "secret.yml"

    def test_reads_api_token(self, write_secret):
        write_secret("api_token: sk-abc123\n")
        assert load_token_from_config() == "sk-abc123"

    def test_unknown_keys_ignored(self, write_secret):
        write_secret("organization: acme\napi_token: sk-xyz\n")
        assert load_token_from_config() == "sk-xyz"

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "other.yml"
        path.write_text("api_token: sk-other\n", encoding="utf-8")
        assert load_token_from_config(path) == "sk-other"

    def test_missing_file(self, fake_home):
        with pytest.raises(ConfigurationError, match="failed to read config file"):
            load_token_from_config()

    def test_unparsable_yaml(self, write_secret):
        write_secret("api_token: [unclosed\n")
        with pytest.raises(ConfigurationError, match="failed to parse config file"):
            load_token_from_config()

    def test_non_mapping_document(self, write_secret):
        write_secret("- just\n- a list\n")
        with pytest.raises(ConfigurationError, match="failed to parse config file"):
            load_token_from_config()

    @pytest.mark.parametrize("content", [
        "",
        "api_token:\n",
        'api_token: ""\n',
        "other: value\n",
        "api_token: 12345\n",
    ])
    def test_missing_or_empty_token(self, write_secret, content):
        write_secret(content)
        with pytest.raises(ConfigurationError, match="API token not found") as exc_info:
            load_token_from_config()
        assert exc_info.value.config_key == "api_token"

    def test_home_directory_unavailable(self):
        with patch(
            "gpt_translate.config.credentials.get_config_dir",
            side_effect=RuntimeError("Could not determine home directory."),
        ):
            with pytest.raises(ConfigurationError, match="failed to retrieve home directory"):
                load_token_from_config()
