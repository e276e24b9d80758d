"""Application settings loaded from environment variables."""

import logging
import os
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel


DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class Settings(BaseModel):
    """Runtime settings for the review API and the SRS clock."""

    timezone: str = ""  # IANA zone name; empty means the system local zone
    log_level: str = "INFO"
    cors_origins: list[str] = DEFAULT_CORS_ORIGINS.split(",")

    def zoneinfo(self) -> ZoneInfo | None:
        """Get the configured zone, or None to use the system local zone.

        Raises:
            ValueError: If the configured name is not a known IANA zone
        """
        if not self.timezone:
            return None
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {self.timezone}") from e

    def log_level_value(self) -> int:
        """Get the numeric logging level.

        Raises:
            ValueError: If the configured name is not a standard level
        """
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings from environment variables."""
    origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)

    return Settings(
        timezone=os.getenv("STUDYTRACK_TIMEZONE", "").strip(),
        log_level=os.getenv("STUDYTRACK_LOG_LEVEL", "INFO").upper(),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
    )
