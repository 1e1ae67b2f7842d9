"""
rssnorm - RSS feed normalization core.

This package turns a decoded RSS document into a canonical, deduplicated
feed representation:
- models: Raw input tree, Media RSS extensions, and canonical output models
- normalization: Link relation checks, enclosure aggregation, item and feed transforms
- services: Default pure collaborators (dates, hashing, markup, URLs)
- core: Exceptions, collaborator container, logging setup
- config: Pydantic settings

Example:
    from rssnorm import normalize_feed
    from rssnorm.models import RawFeed

    feed = normalize_feed(RawFeed.model_validate(decoded))
"""

from rssnorm.normalization import normalize_feed

__version__ = "0.1.0"

__all__ = ["normalize_feed", "__version__"]
