"""
LightBnB data access layer: users, reservations and property listings on PostgreSQL.
"""

from typing import Optional
import logging

from lightbnb.config import Settings, get_settings
from lightbnb.store import LightBnBStore
from lightbnb.repositories.result import Found, NotFound, Failed

__version__ = "1.0.0"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging at the given level, or the configured log_level."""
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


__all__ = [
    "Settings",
    "get_settings",
    "LightBnBStore",
    "Found",
    "NotFound",
    "Failed",
    "configure_logging",
]
