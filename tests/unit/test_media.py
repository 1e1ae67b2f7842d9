"""Unit tests for Media RSS elements and size parsing."""

import pytest

from rssnorm.models import (
    MediaContent,
    MediaExtensions,
    MediaGroup,
    MediaPeerLink,
    MediaThumbnail,
    RawEnclosure,
)
from rssnorm.models.media import parse_size


class TestParseSize:
    """Test byte count parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("12345", 12345),
            (" 42 ", 42),
            ("+1024", 1024),
            ("++1", 0),
            ("+", 0),
            ("", 0),
            ("abc", 0),
            ("-5", 0),
            ("1_000", 0),
            ("12.5", 0),
        ],
    )
    def test_parse_size(self, value, expected):
        assert parse_size(value) == expected

    def test_enclosure_size_uses_length(self):
        """RawEnclosure.size() parses the length attribute."""
        assert RawEnclosure(url="u", length="2048").size() == 2048
        assert RawEnclosure(url="u").size() == 0


class TestMediaMimeTypes:
    """Test mime type derivation per media element."""

    def test_thumbnail_is_image(self):
        thumbnail = MediaThumbnail(url="https://cdn.example/a.jpg")

        assert thumbnail.mime_type() == "image/*"
        assert thumbnail.size() == 0

    def test_content_declared_type_wins(self):
        content = MediaContent(url="u", type="video/mp4", medium="audio")

        assert content.mime_type() == "video/mp4"

    @pytest.mark.parametrize(
        "medium,expected",
        [
            ("image", "image/*"),
            ("video", "video/*"),
            ("audio", "audio/*"),
            ("document", "application/octet-stream"),
            ("", "application/octet-stream"),
        ],
    )
    def test_content_type_from_medium(self, medium, expected):
        assert MediaContent(url="u", medium=medium).mime_type() == expected

    def test_content_size_from_file_size(self):
        assert MediaContent(url="u", file_size="500").size() == 500
        assert MediaContent(url="u", file_size="big").size() == 0

    def test_peer_link_defaults(self):
        assert MediaPeerLink(url="u").mime_type() == "application/octet-stream"
        assert MediaPeerLink(url="u", type="application/x-bittorrent").mime_type() == (
            "application/x-bittorrent"
        )


class TestMediaExtensions:
    """Test group flattening in accessors."""

    @pytest.fixture
    def media(self):
        """Media elements split between direct children and two groups."""
        return MediaExtensions(
            media_thumbnails=[MediaThumbnail(url="t1")],
            media_contents=[MediaContent(url="c1")],
            media_groups=[
                MediaGroup(
                    media_thumbnails=[MediaThumbnail(url="t2")],
                    media_contents=[MediaContent(url="c2")],
                ),
                MediaGroup(media_peer_links=[MediaPeerLink(url="p1")]),
            ],
        )

    def test_direct_children_before_groups(self, media):
        assert [t.url for t in media.thumbnails()] == ["t1", "t2"]
        assert [c.url for c in media.contents()] == ["c1", "c2"]
        assert [p.url for p in media.peer_links()] == ["p1"]

    def test_empty_by_default(self):
        media = MediaExtensions()

        assert media.thumbnails() == []
        assert media.contents() == []
        assert media.peer_links() == []
