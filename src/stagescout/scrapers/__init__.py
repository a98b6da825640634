"""Source registry for mapping source kinds to scraper classes."""

from typing import Type

from stagescout.scrapers.base import BaseSource
from stagescout.scrapers.models import (
    FetchFailure,
    FetchResult,
    RawListing,
    RawReference,
)
from stagescout.scrapers.playbill import PlaybillSource
from stagescout.scrapers.wikipedia import WikipediaSource

# Registry mapping source kinds (also the cache keys) to source classes
SOURCE_REGISTRY: dict[str, Type[BaseSource]] = {
    "listing": PlaybillSource,
    "reference": WikipediaSource,
}


def get_source(kind: str) -> BaseSource | None:
    """
    Get a source instance by kind.

    Args:
        kind: The source kind ("listing" or "reference")

    Returns:
        Source instance configured from settings, or None if kind not found
    """
    source_class = SOURCE_REGISTRY.get(kind)
    if source_class:
        return source_class()
    return None


__all__ = [
    "SOURCE_REGISTRY",
    "get_source",
    "BaseSource",
    "FetchFailure",
    "FetchResult",
    "PlaybillSource",
    "RawListing",
    "RawReference",
    "WikipediaSource",
]
