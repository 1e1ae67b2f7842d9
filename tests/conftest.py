"""
Pytest Configuration and Shared Fixtures.

This module provides common fixtures for all tests:

- fixed_now: Frozen normalization time
- mock_logger: MagicMock standing in for the structured logger
- collaborators: Default collaborators with frozen clock and mock logger
- sample_item: Item using several RSS dialects at once
- sample_feed: Channel wrapping sample_item
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from rssnorm.core.container import Collaborators
from rssnorm.models import (
    ATOM_NAMESPACE,
    MediaExtensions,
    MediaThumbnail,
    RawAuthor,
    RawCommentLink,
    RawEnclosure,
    RawFeed,
    RawItem,
    RawLink,
)


@pytest.fixture
def fixed_now() -> datetime:
    """Return the frozen normalization time."""
    return datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def mock_logger() -> MagicMock:
    """Return a logger double that records calls."""
    return MagicMock()


@pytest.fixture
def collaborators(fixed_now, mock_logger) -> Collaborators:
    """Return default collaborators with a frozen clock and mock logger."""
    return Collaborators(now=lambda: fixed_now, logger=mock_logger)


@pytest.fixture
def sample_item() -> RawItem:
    """Return an item mixing plain RSS, Atom, Dublin Core and Media RSS."""
    return RawItem(
        guid="tag:blog.example,2024:post-1",
        title="  First post  ",
        links=[
            RawLink(data="/posts/1"),
            RawLink(namespace=ATOM_NAMESPACE, href="https://blog.example/hub", rel="hub"),
        ],
        comment_links=[RawCommentLink(data=" https://blog.example/posts/1#comments ")],
        description="<p>Short</p>",
        encoded_content="<p>Full body</p>",
        pub_date="Fri, 01 Mar 2024 08:00:00 +0000",
        authors=[RawAuthor(inner="<b>Jane Doe</b>")],
        enclosures=[
            RawEnclosure(url="https://cdn.example/ep1.mp3", type="audio/mpeg", length="1024"),
        ],
        media=MediaExtensions(
            media_thumbnails=[MediaThumbnail(url="https://cdn.example/ep1.jpg")],
        ),
    )


@pytest.fixture
def sample_feed(sample_item) -> RawFeed:
    """Return a channel wrapping sample_item."""
    return RawFeed(
        title=" Example Blog ",
        links=[
            RawLink(data=" http://blog.example/ "),
            RawLink(
                namespace=ATOM_NAMESPACE,
                href=" http://blog.example/feed.xml ",
                rel="self",
            ),
        ],
        language="en",
        items=[sample_item],
    )
