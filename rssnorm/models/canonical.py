"""Canonical feed and entry models handed to storage and rendering layers."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Enclosure(BaseModel):
    """Media attachment referenced by an entry."""

    model_config = ConfigDict(frozen=True)

    url: str
    mime_type: str = ""
    size: int = Field(default=0, ge=0, description="Size in bytes, 0 when unknown")


class Entry(BaseModel):
    """Dialect-independent representation of one feed item."""

    model_config = ConfigDict(frozen=True)

    url: str = ""
    comments_url: str = ""
    date: datetime
    author: str = ""
    hash: str = Field("", description="Content-address identity of the entry")
    content: str = ""
    title: str = ""
    enclosures: list[Enclosure] = Field(default_factory=list)


class Feed(BaseModel):
    """Normalized feed with its entries in document order."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    site_url: str = ""
    feed_url: str = ""
    entries: list[Entry] = Field(default_factory=list)
