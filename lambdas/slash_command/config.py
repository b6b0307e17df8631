import base64
import logging
import os
from dataclasses import dataclass

import boto3

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    slack_token: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def open_mode(self) -> bool:
        return not self.slack_token


def get_secret_value(name: str, secrets_client=None) -> str:
    secrets = secrets_client or boto3.client("secretsmanager")
    resp = secrets.get_secret_value(SecretId=name)
    if "SecretString" in resp:
        return resp["SecretString"]
    return base64.b64decode(resp["SecretBinary"]).decode()


def _log_level(value: str | None) -> str:
    level = (value or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning({"invalid_log_level": value, "using": DEFAULT_LOG_LEVEL})
        return DEFAULT_LOG_LEVEL
    return level


def load_settings(environ=None, secrets_client=None) -> Settings:
    env = os.environ if environ is None else environ
    # slack_token: name used by older deployments
    token = env.get("SLACK_TOKEN") or env.get("slack_token")
    secret_name = env.get("SLACK_TOKEN_SECRET_NAME")
    if not token and secret_name:
        token = get_secret_value(secret_name, secrets_client).strip()
    return Settings(slack_token=token or None, log_level=_log_level(env.get("LOG_LEVEL")))
