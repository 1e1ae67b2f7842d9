"""Normalization pipeline for decoded RSS documents.

Converts the dialect-specific raw tree into canonical Feed and Entry models:
- relations: Atom link relation filter
- enclosures: Enclosure aggregation and deduplication
- item: Per-item field resolution
- feed: Feed-level resolution and entry finishing
"""

from rssnorm.normalization.candidates import first_non_empty
from rssnorm.normalization.enclosures import aggregate_enclosures, original_enclosure_url
from rssnorm.normalization.feed import FeedNormalizer, normalize_feed
from rssnorm.normalization.item import ItemNormalizer
from rssnorm.normalization.relations import is_valid_link_relation

__all__ = [
    "FeedNormalizer",
    "ItemNormalizer",
    "aggregate_enclosures",
    "first_non_empty",
    "is_valid_link_relation",
    "normalize_feed",
    "original_enclosure_url",
]
