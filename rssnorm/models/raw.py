"""Raw RSS document tree, as produced by the XML decoder.

Fields mirror the RSS 2.0 channel/item elements plus the namespaced
extensions the normalizer reads (feedburner, Dublin Core, content, iTunes,
Atom links). Every string defaults to "" and every list to empty, matching
what a decoder yields for absent elements.
"""

from pydantic import BaseModel, ConfigDict, Field

from rssnorm.models.media import MediaExtensions, parse_size

ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"


class RawLink(BaseModel):
    """<link> or <atom:link> element.

    namespace is "" for plain RSS links and ATOM_NAMESPACE for Atom links.
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    data: str = ""
    href: str = ""
    rel: str = ""


class RawCommentLink(BaseModel):
    """<comments> element."""

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    data: str = ""


class RawAuthor(BaseModel):
    """<author> element; inner keeps the raw markup between the tags."""

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    data: str = ""
    name: str = ""
    inner: str = ""


class RawEnclosure(BaseModel):
    """<enclosure url type length> element."""

    model_config = ConfigDict(frozen=True)

    url: str = ""
    type: str = ""
    length: str = ""

    def size(self) -> int:
        return parse_size(self.length)


class RawItem(BaseModel):
    """<item> element with its extension fields."""

    model_config = ConfigDict(frozen=True)

    guid: str = ""
    title: str = ""
    links: list[RawLink] = Field(default_factory=list)
    original_link: str = Field("", description="feedburner:origLink")
    comment_links: list[RawCommentLink] = Field(default_factory=list)
    description: str = ""
    encoded_content: str = Field("", description="content:encoded")
    pub_date: str = ""
    date: str = Field("", description="dc:date")
    authors: list[RawAuthor] = Field(default_factory=list)
    creator: str = Field("", description="dc:creator")
    enclosures: list[RawEnclosure] = Field(default_factory=list)
    original_enclosure_link: str = Field(
        "", description="feedburner:origEnclosureLink"
    )
    media: MediaExtensions = Field(default_factory=MediaExtensions)


class RawFeed(BaseModel):
    """<rss><channel> document."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    links: list[RawLink] = Field(default_factory=list)
    language: str = ""
    description: str = ""
    pub_date: str = ""
    itunes_author: str = Field("", description="itunes:author on the channel")
    items: list[RawItem] = Field(default_factory=list)
