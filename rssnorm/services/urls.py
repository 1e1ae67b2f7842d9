"""Absolute URL resolution for entry links."""

from urllib.parse import urljoin, urlparse

from rssnorm.core.exceptions import URLResolutionError


def is_absolute_url(value: str) -> bool:
    """Check whether value carries both a scheme and a network location."""
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    return bool(parsed.scheme) and bool(parsed.netloc)


def absolute_url(base: str, ref: str) -> str:
    """Resolve ref against base.

    Args:
        base: Base URL, usually the feed's site URL.
        ref: Possibly relative reference.

    Returns:
        ref unchanged when it is already absolute, "https:" + ref for a
        protocol-relative ref, otherwise the joined URL.

    Raises:
        URLResolutionError: If ref is relative and base is not an absolute
            URL, or either value is malformed.
    """
    if ref.startswith("//"):
        ref = "https:" + ref

    if is_absolute_url(ref):
        return ref

    if not is_absolute_url(base):
        raise URLResolutionError(base, ref, "base URL is not absolute")

    try:
        return urljoin(base, ref)
    except ValueError as e:
        raise URLResolutionError(base, ref, str(e)) from e
