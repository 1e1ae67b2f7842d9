"""Per-item normalization.

Resolves each canonical field of an entry from the redundant RSS dialect
sources an item may carry, in a fixed priority order.
"""

from datetime import datetime

from rssnorm.core.container import Collaborators, get_collaborators
from rssnorm.core.exceptions import DateParseError
from rssnorm.models.canonical import Entry
from rssnorm.models.raw import ATOM_NAMESPACE, RawItem
from rssnorm.normalization.candidates import first_non_empty
from rssnorm.normalization.enclosures import aggregate_enclosures
from rssnorm.normalization.relations import is_valid_link_relation


class ItemNormalizer:
    """Transforms a RawItem into an Entry.

    Feed-level finishing (author fallback and stripping, URL anchoring,
    title fallback) is left to FeedNormalizer.
    """

    def __init__(self, collaborators: Collaborators | None = None):
        self.collaborators = collaborators or get_collaborators()
        self.logger = self.collaborators.logger

    def url(self, item: RawItem) -> str:
        """Entry URL: feedburner origLink, else the first usable link in document order.

        A link is usable when it is an Atom link with an href and a content
        relation, or when it carries a text body.
        """
        if item.original_link:
            return item.original_link.strip()

        for link in item.links:
            if (
                link.namespace == ATOM_NAMESPACE
                and link.href
                and is_valid_link_relation(link.rel)
            ):
                return link.href.strip()

            if link.data:
                return link.data.strip()

        return ""

    def comments_url(self, item: RawItem) -> str:
        for link in item.comment_links:
            if link.namespace == "":
                return link.data.strip()
        return ""

    def published_date(self, item: RawItem) -> datetime:
        """Publish date from dc:date or pubDate, defaulting to now."""
        value = first_non_empty([item.date, item.pub_date])
        if not value:
            return self.collaborators.now()

        try:
            return self.collaborators.parse_date(value)
        except DateParseError as e:
            self.logger.warning("rss_date_parse_failed", value=value, error=str(e))
            return self.collaborators.now()

    def author(self, item: RawItem) -> str:
        for author in item.authors:
            value = first_non_empty([author.name, author.inner])
            if value:
                return value
        return item.creator

    def content(self, item: RawItem) -> str:
        return first_non_empty([item.encoded_content, item.description])

    def hash(self, item: RawItem, url: str) -> str:
        """Identity hash of the guid, or of the resolved URL without one."""
        value = first_non_empty([item.guid, url])
        if not value:
            return ""
        return self.collaborators.content_hash(value)

    def transform(self, item: RawItem) -> Entry:
        url = self.url(item)
        return Entry(
            url=url,
            comments_url=self.comments_url(item),
            date=self.published_date(item),
            author=self.author(item),
            hash=self.hash(item, url),
            content=self.content(item),
            title=item.title.strip(),
            enclosures=aggregate_enclosures(item),
        )
