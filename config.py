"""Environment-driven settings for the notifier."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)

DEFAULT_SITE_URL = "https://community.preciousplastic.com"


def load_environment() -> None:
    """Load variables from ENV_FILE (default .env) if the file exists."""
    env_path = Path(os.getenv("ENV_FILE", ".env"))
    if env_path.is_file():
        load_dotenv(env_path)


@dataclass(frozen=True, slots=True)
class Settings:
    webhook_url: str = ""
    site_url: str = DEFAULT_SITE_URL
    request_timeout: float | None = None

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the process environment.

        DISCORD_WEBHOOK_URL may be empty; dispatch then becomes a no-op.
        """
        load_environment()

        return cls(
            webhook_url=os.getenv("DISCORD_WEBHOOK_URL", "").strip(),
            site_url=os.getenv("SITE_URL", DEFAULT_SITE_URL).strip().rstrip("/"),
            request_timeout=_parse_timeout(os.getenv("DISCORD_TIMEOUT_SECONDS")),
        )


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        LOGGER.warning("Ignoring invalid DISCORD_TIMEOUT_SECONDS=%r", raw)
        return None
    return value if value > 0 else None
