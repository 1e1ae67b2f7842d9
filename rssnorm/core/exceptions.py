"""
Core exception hierarchy for rssnorm.

Collaborators raise these. The normalizers catch the recoverable ones and
substitute defaults, so none of them escape a transform.
"""

from typing import Any, Optional


# =============================================================================
# Base Exceptions
# =============================================================================


class RSSNormError(Exception):
    """Base exception for all rssnorm errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Collaborator Errors
# =============================================================================


class CollaboratorError(RSSNormError):
    """Base exception for failures inside a normalization collaborator."""

    pass


class DateParseError(CollaboratorError):
    """Raised when a date string matches no known format."""

    def __init__(self, value: str, reason: Optional[str] = None):
        self.value = value
        details = {"value": value}
        if reason:
            details["reason"] = reason
        super().__init__(f"Unable to parse date: {value!r}", details)


class URLResolutionError(CollaboratorError):
    """Raised when a reference cannot be anchored to a base URL."""

    def __init__(self, base: str, ref: str, reason: Optional[str] = None):
        self.base = base
        self.ref = ref
        details = {"base": base, "ref": ref}
        if reason:
            details["reason"] = reason
        super().__init__(f"Unable to resolve {ref!r} against {base!r}", details)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(RSSNormError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        self.config_key = config_key
        details = {"config_key": config_key} if config_key else None
        super().__init__(message, details)
