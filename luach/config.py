"""Configuration management for Luach."""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Immutable application configuration."""

    log_level: str = "INFO"
    in_israel: bool = False  # Israel or diaspora holiday and parsha schedule

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        raw_in_israel = os.getenv("LUACH_IN_ISRAEL", "false").lower()
        if raw_in_israel not in ("true", "false"):
            raise ValueError(f"LUACH_IN_ISRAEL must be 'true' or 'false', got {raw_in_israel!r}")

        config = cls(log_level=log_level, in_israel=raw_in_israel == "true")
        logger.debug(f"Schedule: {'Israel' if config.in_israel else 'diaspora'}")
        return config

    def setup_logging(self) -> None:
        """Configure application logging."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper()),
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
