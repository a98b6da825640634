"""Show matching service joining the listing and reference sources."""

import logging

from stagescout.config import settings
from stagescout.schemas.show import MergedShow
from stagescout.scrapers.models import RawListing, RawReference
from stagescout.utils.text import normalise_title

logger = logging.getLogger(__name__)

FALLBACK_LINK = "#"


def index_listings(listings: list[RawListing]) -> dict[str, RawListing]:
    """Map normalised title to the first listing carrying it."""
    index: dict[str, RawListing] = {}
    for listing in listings:
        index.setdefault(normalise_title(listing.title), listing)
    return index


def index_references(references: list[RawReference]) -> dict[str, RawReference]:
    """
    Map normalised title to reference row.

    When several rows share a title (e.g. two productions of the same
    show) the later row replaces the earlier one but keeps its position.
    """
    index: dict[str, RawReference] = {}
    for reference in references:
        key = normalise_title(reference.title)
        if key in index:
            logger.debug(f"Duplicate reference title '{reference.title}', keeping later row")
        index[key] = reference
    return index


def enrich_shows(
    listings: list[RawListing],
    references: list[RawReference],
    fallback_poster_url: str | None = None,
) -> list[MergedShow]:
    """
    Inner-join references with listings on normalised title.

    Only productions present in both sources are returned, in reference
    order. Metadata comes from the reference row; poster and link come
    from the listing.

    Args:
        listings: Records from the listing source
        references: Records from the reference source
        fallback_poster_url: Poster used when a listing has none
            (uses settings if not provided)

    Returns:
        Merged shows, at most one per normalised title
    """
    poster_default = fallback_poster_url or settings.fallback_poster_url
    listing_index = index_listings(listings)

    merged: list[MergedShow] = []
    for key, reference in index_references(references).items():
        match = listing_index.get(key)
        if match is None:
            continue

        merged.append(
            MergedShow(
                title=reference.title,
                type=reference.category,
                opening_date_text=reference.opening_date_text,
                closing_date_text=reference.closing_date_text,
                poster_image_url=match.poster_image_url or poster_default,
                detail_link=match.detail_link or FALLBACK_LINK,
            )
        )

    logger.info(
        f"Matched {len(merged)} shows from {len(listings)} listings "
        f"and {len(references)} reference rows"
    )
    return merged
