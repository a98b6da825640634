"""Text normalization utilities for production title matching."""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")
_FOOTNOTE = re.compile(r"\s?\[\d+\]")


def normalise_title(title: str) -> str:
    """
    Normalize a production title into the key used to match sources.

    Both sources must go through this function; any difference in the
    key silently breaks matching.

    - Lowercase: "Hamilton" → "hamilton"
    - Punctuation and non-ASCII dropped: "Hadestown!" → "hadestown"
    - Whitespace collapsed and trimmed: "  The   Outsiders " → "the outsiders"

    Args:
        title: Raw production title

    Returns:
        Normalized title suitable for matching
    """
    title = title.lower()

    # Keep only ASCII letters, digits and whitespace
    title = _NON_ALNUM.sub("", title)

    title = _WHITESPACE.sub(" ", title)

    return title.strip()


def strip_footnotes(text: str) -> str:
    """
    Remove bracketed reference markers from table text.

    Examples:
        "Wicked[12]" → "Wicked"
        "Chicago [3] revival" → "Chicago revival"
    """
    return _FOOTNOTE.sub("", text)


def clean_text(text: str) -> str:
    """Collapse internal whitespace and strip the ends."""
    return _WHITESPACE.sub(" ", text).strip()


def absolute_url(url: str | None, origin: str) -> str | None:
    """
    Resolve a scraped href/src against the site it came from.

    Args:
        url: Raw attribute value (may be missing)
        origin: Scheme and host of the page, without a trailing slash

    Returns:
        Absolute URL, or None if there was nothing to resolve
    """
    if not url:
        return None
    url = url.strip()
    if not url:
        return None

    # Protocol-relative: "//host/path"
    if url.startswith("//"):
        return f"https:{url}"

    # Site-relative: "/path"
    if url.startswith("/"):
        return f"{origin.rstrip('/')}{url}"

    return url
