"""
Settings resolution for fetch-lifecycle.

Each transport setting resolves from the explicit argument, then its
FETCH_LIFECYCLE_* environment variable, then the config mapping, then the
default.
"""
import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_BASE_URL = "FETCH_LIFECYCLE_BASE_URL"
ENV_TIMEOUT = "FETCH_LIFECYCLE_TIMEOUT"
ENV_FOLLOW_REDIRECTS = "FETCH_LIFECYCLE_FOLLOW_REDIRECTS"
ENV_LOG_LEVEL = "FETCH_LIFECYCLE_LOG_LEVEL"

DEFAULT_BASE_URL = "http://localhost"
DEFAULT_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "WARNING"

# Setting name -> environment variable
SETTING_ENV_KEYS = {
    "base_url": ENV_BASE_URL,
    "timeout": ENV_TIMEOUT,
    "follow_redirects": ENV_FOLLOW_REDIRECTS,
}


def resolve_setting(name: str, arg: Any, config: Optional[Dict[str, Any]], default: Any) -> Any:
    if arg is not None:
        return arg
    env_value = os.getenv(SETTING_ENV_KEYS[name])
    if env_value is not None:
        return env_value
    return (config or {}).get(name, default)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes", "on")
    return bool(value)


def _as_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


class TransportSettings(BaseModel):
    """Settings for the default HTTP transport."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    headers: Dict[str, str] = Field(default_factory=dict)
    follow_redirects: bool = True

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")


def load_settings(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    follow_redirects: Optional[bool] = None,
    config: Optional[Dict[str, Any]] = None,
    env_file: Optional[str] = None,
) -> TransportSettings:
    """Build TransportSettings from arguments, environment and config."""
    if env_file and os.path.exists(env_file):
        load_dotenv(env_file)

    return TransportSettings(
        base_url=resolve_setting("base_url", base_url, config, DEFAULT_BASE_URL),
        timeout=_as_float(resolve_setting("timeout", timeout, config, DEFAULT_TIMEOUT), DEFAULT_TIMEOUT),
        headers=(config or {}).get("headers", {}),
        follow_redirects=_as_bool(resolve_setting("follow_redirects", follow_redirects, config, True)),
    )


def configure_logging(level: Optional[str] = None) -> int:
    """Apply the resolved log level to the package logger and return it."""
    name = (level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.getLogger("fetch_lifecycle").setLevel(numeric)
    return numeric
