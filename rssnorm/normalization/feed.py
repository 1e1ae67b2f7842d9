"""Feed-level normalization.

Resolves the channel's site URL, feed URL and title, runs every item through
ItemNormalizer and applies the fallbacks that need feed context.
"""

from rssnorm.core.container import Collaborators, get_collaborators
from rssnorm.core.exceptions import URLResolutionError
from rssnorm.models.canonical import Entry, Feed
from rssnorm.models.raw import ATOM_NAMESPACE, RawFeed
from rssnorm.normalization.candidates import first_non_empty
from rssnorm.normalization.item import ItemNormalizer


class FeedNormalizer:
    """Transforms a RawFeed into a Feed.

    Stateless apart from its collaborators: the same instance may normalize
    independent documents concurrently.

    Example:
        normalizer = FeedNormalizer()
        feed = normalizer.transform(raw_feed)
    """

    def __init__(self, collaborators: Collaborators | None = None):
        """Initialize the feed normalizer.

        Args:
            collaborators: Services for dates, hashing, markup and URLs.
                Defaults to the shared instance built from settings.
        """
        self.collaborators = collaborators or get_collaborators()
        self.logger = self.collaborators.logger
        self.items = ItemNormalizer(self.collaborators)

    def site_url(self, feed: RawFeed) -> str:
        for link in feed.links:
            if link.namespace == "":
                return link.data.strip()
        return ""

    def feed_url(self, feed: RawFeed) -> str:
        for link in feed.links:
            if link.namespace == ATOM_NAMESPACE:
                return link.href.strip()
        return ""

    def finish_entry(self, entry: Entry, feed: RawFeed, site_url: str) -> Entry:
        """Apply feed-context fallbacks to a normalized entry.

        Args:
            entry: Entry produced by ItemNormalizer.
            feed: Source document, for the channel iTunes author.
            site_url: Resolved site URL of the feed.

        Returns:
            Entry with author, URL and title finalized.
        """
        author = first_non_empty([entry.author, feed.itunes_author])
        author = self.collaborators.strip_tags(author).strip()

        url = entry.url
        if not url:
            url = site_url
        else:
            try:
                url = self.collaborators.absolute_url(site_url, url)
            except URLResolutionError as e:
                self.logger.debug("rss_entry_url_unresolved", url=url, reason=str(e))

        title = first_non_empty([entry.title, url])

        return entry.model_copy(update={"author": author, "url": url, "title": title})

    def transform(self, feed: RawFeed) -> Feed:
        """Normalize a decoded RSS document.

        Args:
            feed: Raw document from the XML decoder.

        Returns:
            Canonical feed with entries in document order.
        """
        site_url = self.site_url(feed)
        title = first_non_empty([feed.title.strip(), site_url])

        entries = [
            self.finish_entry(self.items.transform(item), feed, site_url)
            for item in feed.items
        ]

        self.logger.debug(
            "feed_normalized",
            site_url=site_url,
            entries=len(entries),
        )

        return Feed(
            title=title,
            site_url=site_url,
            feed_url=self.feed_url(feed),
            entries=entries,
        )


def normalize_feed(feed: RawFeed, collaborators: Collaborators | None = None) -> Feed:
    """Normalize a raw feed with default or supplied collaborators."""
    return FeedNormalizer(collaborators).transform(feed)
