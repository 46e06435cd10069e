"""Configuration settings for the forecast client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger("forecast.config")

DEFAULT_BASE_URL = "https://api.darksky.net/forecast"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


@dataclass
class Settings:
    """Client configuration loaded from environment variables."""

    log_level: str = os.getenv("FORECAST_LOG_LEVEL", "INFO")
    base_url: str = os.getenv("FORECAST_BASE_URL", DEFAULT_BASE_URL)
    timeout: float = float(os.getenv("FORECAST_TIMEOUT", "10.0"))

    # Credential lookup
    api_key_parameter: str = os.getenv("FORECAST_API_KEY_PARAMETER", "/forecast/api_key")
    aws_region: str = os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or "us-east-1"


settings = Settings()


@lru_cache(maxsize=1)
def _get_ssm_client():
    return boto3.client("ssm", region_name=settings.aws_region)


@lru_cache(maxsize=1)
def get_api_key() -> str:
    """Return the forecast API key.

    ``FORECAST_API_KEY`` wins when set. Otherwise the key is read from AWS SSM
    Parameter Store under ``settings.api_key_parameter`` and cached in-memory
    to avoid repeated SSM calls. Any failure results in a runtime error.
    """

    value = os.getenv("FORECAST_API_KEY")
    if value:
        return value

    try:
        response = _get_ssm_client().get_parameter(
            Name=settings.api_key_parameter, WithDecryption=True
        )
        value = response.get("Parameter", {}).get("Value")
    except (ClientError, BotoCoreError) as exc:
        raise RuntimeError("Unable to load forecast API key from SSM") from exc

    if not value:
        raise RuntimeError("Forecast API key not configured in SSM")

    logger.debug("Loaded forecast API key from SSM parameter %s", settings.api_key_parameter)
    return value


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for scripts using the client."""

    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)


__all__ = ["DEFAULT_BASE_URL", "Settings", "configure_logging", "get_api_key", "settings"]
