"""Unit tests for settings resolution."""

import base64
import logging
from unittest.mock import MagicMock

import pytest

from slash_command import Settings, load_settings


@pytest.fixture
def secrets():
    client = MagicMock()
    client.get_secret_value.return_value = {"SecretString": "from-secrets-manager\n"}
    return client


class TestLoadSettings:
    def test_defaults_open_mode(self):
        settings = load_settings(environ={})
        assert settings == Settings(slack_token=None, log_level="INFO")
        assert settings.open_mode is True

    def test_empty_token_is_open_mode(self):
        assert load_settings(environ={"SLACK_TOKEN": ""}).open_mode is True

    def test_token_from_env(self, secrets):
        env = {"SLACK_TOKEN": "abc", "SLACK_TOKEN_SECRET_NAME": "slack/token", "LOG_LEVEL": "debug"}
        settings = load_settings(environ=env, secrets_client=secrets)
        assert settings.slack_token == "abc"
        assert settings.log_level == "DEBUG"
        secrets.get_secret_value.assert_not_called()

    def test_token_from_secrets_manager(self, secrets):
        settings = load_settings(environ={"SLACK_TOKEN_SECRET_NAME": "slack/token"}, secrets_client=secrets)
        assert settings.slack_token == "from-secrets-manager"
        assert settings.open_mode is False
        secrets.get_secret_value.assert_called_once_with(SecretId="slack/token")

    def test_binary_secret(self):
        client = MagicMock()
        client.get_secret_value.return_value = {"SecretBinary": base64.b64encode(b"bin-token")}
        settings = load_settings(environ={"SLACK_TOKEN_SECRET_NAME": "slack/token"}, secrets_client=client)
        assert settings.slack_token == "bin-token"

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("SLACK_TOKEN", "env-token")
        monkeypatch.delenv("SLACK_TOKEN_SECRET_NAME", raising=False)
        assert load_settings().slack_token == "env-token"

    def test_legacy_lowercase_token(self, secrets):
        settings = load_settings(environ={"slack_token": "legacy"}, secrets_client=secrets)
        assert settings.slack_token == "legacy"
        secrets.get_secret_value.assert_not_called()

    def test_uppercase_token_wins(self):
        assert load_settings(environ={"SLACK_TOKEN": "new", "slack_token": "legacy"}).slack_token == "new"

    @pytest.mark.parametrize("level", ["verbose", "", "  "])
    def test_unknown_log_level_falls_back(self, level):
        assert load_settings(environ={"LOG_LEVEL": level}).log_level == "INFO"

    def test_log_level_usable_by_logging(self):
        level = load_settings(environ={"LOG_LEVEL": " warning "}).log_level
        assert level == "WARNING"
        logging.getLogger("slash_command.tests").setLevel(level)
