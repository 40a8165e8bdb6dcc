"""
Instagram Graph API configuration.

Credentials are read once from the environment at process entry and passed
around as an immutable InstagramConfig. When the user ID or access token is
missing the server runs in simulation mode and never touches the network.

Environment:
    INSTAGRAM_USER_ID        Instagram professional account ID
    INSTAGRAM_ACCESS_TOKEN   Long-lived access token
    API_VERSION              Graph API version (default v22.0)
    BASE_URL                 Graph API host (default https://graph.instagram.com)
    INSTAGRAM_HTTP_TIMEOUT   Seconds per HTTP call (default 30)
"""

import os
import logging
from dataclasses import dataclass

logger = logging.getLogger("InstagramConfig")

DEFAULT_API_VERSION = "v22.0"
DEFAULT_BASE_URL = "https://graph.instagram.com"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class InstagramConfig:
    user_id: str = ""
    access_token: str = ""
    api_version: str = DEFAULT_API_VERSION
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @property
    def is_live(self) -> bool:
        return bool(self.user_id and self.access_token)

    @property
    def messages_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_version}/{self.user_id}/messages"


def _mask(value: str) -> str:
    return f"***{value[-4:]}" if value else "not set"


def load_config(environ: dict | None = None) -> InstagramConfig:
    """Build an InstagramConfig from *environ* (defaults to os.environ)."""
    env = os.environ if environ is None else environ

    raw_timeout = env.get("INSTAGRAM_HTTP_TIMEOUT", "")
    try:
        timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
    except ValueError:
        logger.warning(f"Ignoring invalid INSTAGRAM_HTTP_TIMEOUT={raw_timeout!r}")
        timeout = DEFAULT_TIMEOUT

    return InstagramConfig(
        user_id=env.get("INSTAGRAM_USER_ID", "") or "",
        access_token=env.get("INSTAGRAM_ACCESS_TOKEN", "") or "",
        api_version=env.get("API_VERSION") or DEFAULT_API_VERSION,
        base_url=env.get("BASE_URL") or DEFAULT_BASE_URL,
        timeout=timeout,
    )


def log_config(config: InstagramConfig) -> None:
    """Log the loaded configuration with secrets masked."""
    logger.info("Environment loaded:")
    logger.info(f"  INSTAGRAM_USER_ID: {_mask(config.user_id)}")
    logger.info(f"  INSTAGRAM_ACCESS_TOKEN: {_mask(config.access_token)}")
    logger.info(f"  API_VERSION: {config.api_version}")
    logger.info(f"  BASE_URL: {config.base_url}")
    if not config.is_live:
        logger.info("INSTAGRAM_USER_ID or INSTAGRAM_ACCESS_TOKEN missing - running in simulation mode")
