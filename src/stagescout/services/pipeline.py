"""Pipeline orchestrating the cached source fetches and the join."""

import asyncio
import logging

from stagescout.schemas.show import MergedShow
from stagescout.scrapers import get_source
from stagescout.scrapers.base import BaseSource
from stagescout.scrapers.models import RawListing, RawReference
from stagescout.services.cache import TTLCache
from stagescout.services.show_matcher import enrich_shows

logger = logging.getLogger(__name__)

LISTING_CACHE_KEY = "listing"
REFERENCE_CACHE_KEY = "reference"


class ShowPipeline:
    """
    Fetch both sources through the cache and merge them.

    Both fetches run concurrently. Sources never raise, so an outage in
    one still lets the other's records through (the join then simply
    yields fewer or no shows).
    """

    def __init__(
        self,
        listing_source: BaseSource[RawListing] | None = None,
        reference_source: BaseSource[RawReference] | None = None,
        cache: TTLCache | None = None,
    ) -> None:
        self.listing_source = listing_source or get_source(LISTING_CACHE_KEY)
        self.reference_source = reference_source or get_source(REFERENCE_CACHE_KEY)
        self.cache = cache or TTLCache()

    async def get_listings(self) -> list[RawListing]:
        return await self.cache.get_or_fetch(LISTING_CACHE_KEY, self.listing_source.fetch)

    async def get_references(self) -> list[RawReference]:
        return await self.cache.get_or_fetch(REFERENCE_CACHE_KEY, self.reference_source.fetch)

    async def run(self) -> list[MergedShow]:
        """
        Produce the current merged show list.

        Returns:
            Merged shows; an empty list means there is nothing to display
        """
        listings, references = await asyncio.gather(
            self.get_listings(),
            self.get_references(),
        )
        shows = enrich_shows(listings, references)
        if not shows:
            logger.warning(
                f"Pipeline produced no shows ({len(listings)} listings, "
                f"{len(references)} reference rows)"
            )
        return shows


# Process-wide pipeline, created on first use
_pipeline: ShowPipeline | None = None


def get_pipeline() -> ShowPipeline:
    """
    Dependency for FastAPI providing the shared pipeline.

    The pipeline owns the process-wide cache, so every request sees the
    same cache entries.
    """
    global _pipeline
    if _pipeline is None:
        _pipeline = ShowPipeline()
    return _pipeline


def reset_pipeline() -> None:
    """Drop the shared pipeline and its cache."""
    global _pipeline
    _pipeline = None
