"""
Configuration settings for the Invoice Record Store
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Explicit application settings, passed to the app factory and the database layer"""

    env: str = "PROD"  # PROD or QA
    database_url: Optional[str] = None
    port: int = 8080
    allowed_origins: List[str] = field(default_factory=lambda: ["http://localhost:3000"])
    db_pool_min_size: int = 2
    db_pool_max_size: int = 10
    db_command_timeout: float = 60
    auto_create_schema: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from process environment"""
        return cls(
            env=os.getenv("ENV", "PROD"),
            database_url=os.getenv("DATABASE_URL"),
            port=int(os.getenv("PORT", 8080)),
            allowed_origins=_env_list("ALLOWED_ORIGINS", "http://localhost:3000"),
            db_pool_min_size=int(os.getenv("DB_POOL_MIN_SIZE", 2)),
            db_pool_max_size=int(os.getenv("DB_POOL_MAX_SIZE", 10)),
            db_command_timeout=float(os.getenv("DB_COMMAND_TIMEOUT", 60)),
            auto_create_schema=_env_bool("AUTO_CREATE_SCHEMA", True),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


# Global settings instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
        logger.info(f"Environment: {_settings.env}")
        if not _settings.database_url:
            logger.warning("DATABASE_URL not set - database will be unavailable until configured")
    return _settings
