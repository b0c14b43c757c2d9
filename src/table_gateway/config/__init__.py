"""Configuration management for table_gateway.

Runtime settings are loaded from environment variables with validation using
Pydantic BaseSettings. DAO definition files are loaded through
``table_gateway.config.dao_loader``.

Usage:
    >>> from table_gateway.config import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'
"""

from table_gateway.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
