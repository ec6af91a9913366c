"""Environment-driven settings. Call load_dotenv() before load_settings()."""

import os
from dataclasses import dataclass

from loguru import logger

DEMO_KEY = "DEMO_KEY"
DEFAULT_TIMEOUT = 10.0
SUPPORTED_LANGS = ("en", "ko")


@dataclass(frozen=True)
class Settings:
    api_key: str
    timeout: float = DEFAULT_TIMEOUT  # Seconds per request
    lang: str = "en"
    log_level: str = "INFO"

    @property
    def uses_demo_key(self) -> bool:
        """True when running on the shared, heavily rate-limited demo key."""
        return self.api_key == DEMO_KEY


def _read_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        logger.warning("NASADASH_TIMEOUT={!r} is not a number, using {}", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    if value <= 0:
        logger.warning("NASADASH_TIMEOUT must be positive, using {}", DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return value


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Settings with DEMO_KEY substituted when NASA_API_KEY is unset or blank.
    """
    env = os.environ if environ is None else environ

    api_key = (env.get("NASA_API_KEY") or "").strip() or DEMO_KEY
    if api_key == DEMO_KEY:
        logger.warning("NASA_API_KEY not set, falling back to DEMO_KEY (rate limited)")

    lang = (env.get("NASADASH_LANG") or "en").strip().lower()
    if lang not in SUPPORTED_LANGS:
        lang = "en"

    return Settings(
        api_key=api_key,
        timeout=_read_timeout(env.get("NASADASH_TIMEOUT")),
        lang=lang,
        log_level=(env.get("NASADASH_LOG_LEVEL") or "INFO").strip().upper(),
    )
