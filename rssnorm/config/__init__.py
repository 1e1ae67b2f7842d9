"""
Configuration Management.

Settings are loaded with Pydantic Settings from (in order of precedence):
1. Environment variables prefixed with RSSNORM_
2. .env file
3. Default values

Example:
    from rssnorm.config import get_settings

    settings = get_settings()
    algorithm = settings.hash_algorithm
"""

from rssnorm.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
