"""Media RSS extension elements attached to feed items.

Models media:thumbnail, media:content and media:peerLink, either directly on
an item or wrapped in media:group, and flattens them through plain accessor
methods.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MIME_TYPE = "application/octet-stream"


def parse_size(value: str) -> int:
    """Parse a byte count attribute; empty or malformed values give 0."""
    digits = value.strip()
    if digits.startswith("+"):
        digits = digits[1:]
    # isdigit() alone lets through unicode digits int() rejects
    if not digits.isdigit():
        return 0
    try:
        return int(digits, 10)
    except ValueError:
        return 0


class MediaThumbnail(BaseModel):
    """media:thumbnail element."""

    model_config = ConfigDict(frozen=True)

    url: str = ""

    def mime_type(self) -> str:
        return "image/*"

    def size(self) -> int:
        return 0


class MediaContent(BaseModel):
    """media:content element."""

    model_config = ConfigDict(frozen=True)

    url: str = ""
    type: str = ""
    medium: str = ""
    file_size: str = ""

    def mime_type(self) -> str:
        """Declared type, or a wildcard derived from the medium attribute."""
        if self.type:
            return self.type
        if self.medium in ("image", "video", "audio"):
            return f"{self.medium}/*"
        return DEFAULT_MIME_TYPE

    def size(self) -> int:
        return parse_size(self.file_size)


class MediaPeerLink(BaseModel):
    """media:peerLink element (torrent or other P2P reference)."""

    model_config = ConfigDict(frozen=True)

    url: str = ""
    type: str = ""

    def mime_type(self) -> str:
        return self.type or DEFAULT_MIME_TYPE

    def size(self) -> int:
        return 0


class MediaGroup(BaseModel):
    """media:group wrapper holding alternative renditions."""

    model_config = ConfigDict(frozen=True)

    media_thumbnails: list[MediaThumbnail] = Field(default_factory=list)
    media_contents: list[MediaContent] = Field(default_factory=list)
    media_peer_links: list[MediaPeerLink] = Field(default_factory=list)


class MediaExtensions(BaseModel):
    """All Media RSS elements found on one item.

    Accessors return direct children first, then each group's children in
    document order.
    """

    model_config = ConfigDict(frozen=True)

    media_thumbnails: list[MediaThumbnail] = Field(default_factory=list)
    media_contents: list[MediaContent] = Field(default_factory=list)
    media_peer_links: list[MediaPeerLink] = Field(default_factory=list)
    media_groups: list[MediaGroup] = Field(default_factory=list)

    def thumbnails(self) -> list[MediaThumbnail]:
        items = list(self.media_thumbnails)
        for group in self.media_groups:
            items.extend(group.media_thumbnails)
        return items

    def contents(self) -> list[MediaContent]:
        items = list(self.media_contents)
        for group in self.media_groups:
            items.extend(group.media_contents)
        return items

    def peer_links(self) -> list[MediaPeerLink]:
        items = list(self.media_peer_links)
        for group in self.media_groups:
            items.extend(group.media_peer_links)
        return items
