"""Runtime configuration read from environment variables (.env supported)."""

import os
from collections.abc import Mapping
from dataclasses import dataclass

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


@dataclass(frozen=True)
class Config:
    """Endpoints and request settings for a lookup."""

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    language: str = "en"  # Geocoder display language for resolved names
    timeout: float = 10.0  # Seconds, applied to each request
    log_level: str = "INFO"


def _parse_timeout(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"WEATHERNOW_TIMEOUT must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"WEATHERNOW_TIMEOUT must be positive, got {raw!r}")
    return value


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Build a Config from WEATHERNOW_* variables.

    Call ``load_dotenv()`` first if a .env file should be honored.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Config with unset variables left at their defaults.

    Raises:
        ValueError: If WEATHERNOW_TIMEOUT is not a positive number.
    """
    env = os.environ if environ is None else environ
    defaults = Config()
    timeout = env.get("WEATHERNOW_TIMEOUT")
    return Config(
        geocoding_url=env.get("WEATHERNOW_GEOCODING_URL", defaults.geocoding_url),
        forecast_url=env.get("WEATHERNOW_FORECAST_URL", defaults.forecast_url),
        language=env.get("WEATHERNOW_LANGUAGE", defaults.language),
        timeout=_parse_timeout(timeout) if timeout else defaults.timeout,
        log_level=env.get("WEATHERNOW_LOG_LEVEL", defaults.log_level).upper(),
    )
