"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from crowflies.formatting import Unit

DEFAULT_GEOIP_URL = "http://ip-api.com/json/"


@dataclass
class LocatorConfig:
    """Configuration for the IP geolocation lookup."""

    base_url: str = DEFAULT_GEOIP_URL
    timeout_seconds: float = 10.0
    max_retries: int = 2
    retry_backoff_base: float = 2.0

    def overall_timeout(self) -> float:
        """Seconds to allow for a whole lookup: every attempt plus the backoff between them."""
        attempts = self.max_retries + 1
        backoff = sum(self.retry_backoff_base ** i for i in range(self.max_retries))
        return attempts * self.timeout_seconds + backoff


@dataclass
class Settings:
    unit: Unit = Unit.IMPERIAL
    log_level: str = "WARNING"
    locator: LocatorConfig = field(default_factory=LocatorConfig)


def load_settings(env: dict[str, str] | None = None) -> Settings:
    """Build Settings from CROWFLIES_* environment variables."""
    env = os.environ if env is None else env
    return Settings(
        unit=Unit.parse(env.get("CROWFLIES_UNIT", Unit.IMPERIAL.value)),
        log_level=env.get("CROWFLIES_LOG_LEVEL", "WARNING").upper(),
        locator=LocatorConfig(
            base_url=env.get("CROWFLIES_GEOIP_URL", DEFAULT_GEOIP_URL),
            timeout_seconds=float(env.get("CROWFLIES_LOCATE_TIMEOUT", 10)),
            max_retries=int(env.get("CROWFLIES_GEOIP_RETRIES", 2)),
        ),
    )
