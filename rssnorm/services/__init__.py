"""
Default normalization collaborators.

Pure functions the normalizers delegate to:
- dates: RFC 822 / ISO 8601 date parsing
- hashing: content-address digests for entry identity
- markup: HTML tag stripping
- urls: absolute URL resolution
"""

from rssnorm.services.dates import parse_date
from rssnorm.services.hashing import content_hash
from rssnorm.services.markup import strip_tags
from rssnorm.services.urls import absolute_url, is_absolute_url

__all__ = [
    "parse_date",
    "content_hash",
    "strip_tags",
    "absolute_url",
    "is_absolute_url",
]
