"""
Data models for rssnorm.

- raw: Decoded RSS document tree (input)
- media: Media RSS extension elements
- canonical: Normalized feed, entries and enclosures (output)
"""

from rssnorm.models.canonical import Enclosure, Entry, Feed
from rssnorm.models.media import (
    MediaContent,
    MediaExtensions,
    MediaGroup,
    MediaPeerLink,
    MediaThumbnail,
)
from rssnorm.models.raw import (
    ATOM_NAMESPACE,
    RawAuthor,
    RawCommentLink,
    RawEnclosure,
    RawFeed,
    RawItem,
    RawLink,
)

__all__ = [
    # Input
    "ATOM_NAMESPACE",
    "RawAuthor",
    "RawCommentLink",
    "RawEnclosure",
    "RawFeed",
    "RawItem",
    "RawLink",
    # Media RSS
    "MediaContent",
    "MediaExtensions",
    "MediaGroup",
    "MediaPeerLink",
    "MediaThumbnail",
    # Output
    "Enclosure",
    "Entry",
    "Feed",
]
