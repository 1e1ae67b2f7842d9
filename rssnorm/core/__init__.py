"""
Core infrastructure modules for rssnorm.

Provides common utilities used across the package:
- exceptions: Standardized exception hierarchy
- container: Collaborators injected into the normalizers
- logging: structlog configuration
"""

from rssnorm.core.exceptions import (
    RSSNormError,
    CollaboratorError,
    DateParseError,
    URLResolutionError,
    ConfigurationError,
)

from rssnorm.core.container import (
    Collaborators,
    get_collaborators,
    reset_collaborators,
    utc_now,
)

from rssnorm.core.logging import configure_logging

__all__ = [
    # Exceptions
    "RSSNormError",
    "CollaboratorError",
    "DateParseError",
    "URLResolutionError",
    "ConfigurationError",
    # Collaborators
    "Collaborators",
    "get_collaborators",
    "reset_collaborators",
    "utc_now",
    # Logging
    "configure_logging",
]
