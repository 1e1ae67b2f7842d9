"""
Collaborator container for the normalizers.

Bundles the pure functions a transform delegates to (date parsing, hashing,
markup stripping, URL resolution), the clock, and the logger, so that
normalizers receive them explicitly instead of reaching for module globals.

Usage:
    collaborators = Collaborators.from_settings(get_settings())
    normalizer = FeedNormalizer(collaborators)

    # Tests swap individual pieces
    frozen = collaborators.replace(now=lambda: FIXED_TIME)
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import partial
from typing import Any, Callable

import structlog

from rssnorm.config.settings import Settings, get_settings
from rssnorm.core.exceptions import ConfigurationError
from rssnorm.services import absolute_url, content_hash, parse_date, strip_tags

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Collaborators:
    """
    Immutable set of services used by ItemNormalizer and FeedNormalizer.

    Attributes:
        parse_date: str -> datetime, raises DateParseError.
        content_hash: str -> hex digest.
        strip_tags: str -> text without markup.
        absolute_url: (base, ref) -> str, raises URLResolutionError.
        now: () -> aware datetime used when no publish date is usable.
        logger: Structured logger for recoverable diagnostics.
    """

    parse_date: Callable[[str], datetime] = parse_date
    content_hash: Callable[[str], str] = content_hash
    strip_tags: Callable[[str], str] = strip_tags
    absolute_url: Callable[[str, str], str] = absolute_url
    now: Callable[[], datetime] = utc_now
    logger: Any = field(default_factory=lambda: structlog.get_logger("rssnorm"))

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Collaborators:
        """
        Build collaborators honouring hash_algorithm and assume_utc.

        Raises:
            ConfigurationError: If the configured hash algorithm is unusable.
        """
        settings = settings or get_settings()
        hasher = partial(content_hash, algorithm=settings.hash_algorithm)
        try:
            hasher("")
        except ConfigurationError:
            logger.error(
                "collaborators_creation_failed",
                hash_algorithm=settings.hash_algorithm,
            )
            raise

        return cls(
            parse_date=partial(parse_date, assume_utc=settings.assume_utc),
            content_hash=hasher,
        )

    def replace(self, **changes: Any) -> Collaborators:
        """Return a copy with the given collaborators swapped."""
        return dataclasses.replace(self, **changes)


_collaborators: Collaborators | None = None


def get_collaborators() -> Collaborators:
    """
    Get the shared collaborators instance.

    Created from settings on first use.
    """
    global _collaborators
    if _collaborators is None:
        _collaborators = Collaborators.from_settings()
    return _collaborators


def reset_collaborators() -> None:
    """Drop the shared instance so the next call rebuilds it from settings."""
    global _collaborators
    _collaborators = None
