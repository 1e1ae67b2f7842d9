"""Enclosure aggregation across RSS and Media RSS sources.

Sources are merged in priority order: media thumbnails, RSS enclosures,
media contents, media peer links. A URL already emitted by any earlier
source is skipped, so the first occurrence keeps its position.
"""

import posixpath
from typing import Iterable, Protocol

from rssnorm.models.canonical import Enclosure
from rssnorm.models.raw import RawEnclosure, RawItem


class MediaSource(Protocol):
    url: str

    def mime_type(self) -> str: ...

    def size(self) -> int: ...


def original_enclosure_url(enclosure: RawEnclosure, original_link: str) -> str:
    """Undo feedburner's redirect proxy for an enclosure URL.

    The original link replaces the enclosure URL when the latter contains
    the original link's filename.
    """
    if original_link:
        # Trailing slashes are ignored so a directory link never yields ""
        filename = posixpath.basename(original_link.rstrip("/")) or "/"
        if filename in enclosure.url:
            return original_link
    return enclosure.url


class _EnclosureCollector:
    def __init__(self):
        self.enclosures: list[Enclosure] = []
        self._seen: set[str] = set()

    def add(self, url: str, mime_type: str, size: int) -> None:
        if url in self._seen:
            return
        self._seen.add(url)
        self.enclosures.append(Enclosure(url=url, mime_type=mime_type, size=size))

    def add_media(self, items: Iterable[MediaSource]) -> None:
        for item in items:
            self.add(item.url, item.mime_type(), item.size())


def aggregate_enclosures(item: RawItem) -> list[Enclosure]:
    """Merge all attached-media sources of an item into one ordered list.

    Args:
        item: Raw item carrying enclosures and Media RSS elements.

    Returns:
        Enclosures deduplicated by URL, in source priority order.
    """
    collector = _EnclosureCollector()

    collector.add_media(item.media.thumbnails())

    for enclosure in item.enclosures:
        collector.add(
            original_enclosure_url(enclosure, item.original_enclosure_link),
            enclosure.type,
            enclosure.size(),
        )

    collector.add_media(item.media.contents())
    collector.add_media(item.media.peer_links())

    return collector.enclosures
