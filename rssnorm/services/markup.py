"""HTML markup stripping."""

from bs4 import BeautifulSoup


def strip_tags(value: str) -> str:
    """Remove HTML tags and decode entities, keeping only the text."""
    if not value or "<" not in value and "&" not in value:
        return value
    return BeautifulSoup(value, "html.parser").get_text()
