# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Defaults for Tago instances built with Tago.from_config(),
#   read from environment variables / .env file.
#   A Tago built directly (Tago(name="gorm2")) never reads this.
#
# CLASSES:
# --------
# - TagoConfig (dataclass)
#     tag_name: str      (default "tago")     TAGO_TAG_NAME
#     separator: str     (default ".")        TAGO_SEPARATOR
#     log_level: str     (default "WARNING")  TAGO_LOG_LEVEL
#
# FUNCTIONS:
# ----------
# - get_config() -> TagoConfig
#     Load .env using python-dotenv, construct TagoConfig.
#     Returns the same singleton on repeated calls.
#
# - configure_logging(config: TagoConfig | None = None) -> None
#     Set the level of the "tago" logger. Never called by the library.
#     An unknown level name raises ValueError naming the setting.
#
# USAGE:
# ------
#   from tago.config import get_config
#   config = get_config()
#   print(config.tag_name)
#
# ==============================================

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class TagoConfig:
    """Extraction defaults."""
    tag_name: str = "tago"
    separator: str = "."
    log_level: str = "WARNING"


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")

# Singleton instance
_config_instance: Optional[TagoConfig] = None


def get_config() -> TagoConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        TagoConfig: Extraction defaults
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env from the working directory; existing variables are kept
    load_dotenv(dotenv_path=Path.cwd() / ".env")

    log_level = os.getenv("TAGO_LOG_LEVEL", "WARNING").upper()
    _validate_log_level(log_level, "TAGO_LOG_LEVEL")

    _config_instance = TagoConfig(
        tag_name=os.getenv("TAGO_TAG_NAME", "tago"),
        separator=os.getenv("TAGO_SEPARATOR", "."),
        log_level=log_level,
    )

    return _config_instance


def configure_logging(config: Optional[TagoConfig] = None) -> None:
    """
    Apply the configured log level to the "tago" logger.

    Handlers are left to the application.

    Raises:
        ValueError: If config.log_level is not a logging level name
    """
    config = config or get_config()
    level = config.log_level.upper()
    _validate_log_level(level, "TagoConfig.log_level")
    logging.getLogger("tago").setLevel(level)


def _validate_log_level(level: str, source: str) -> None:
    if level not in LOG_LEVELS:
        raise ValueError(
            f"{source} must be one of {', '.join(LOG_LEVELS)}, got {level!r}"
        )
