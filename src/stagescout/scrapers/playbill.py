"""Playbill listing scraper using BeautifulSoup HTML parsing."""

import logging

from bs4 import BeautifulSoup, Tag

from stagescout.config import settings
from stagescout.scrapers.base import BaseSource
from stagescout.scrapers.models import RawListing
from stagescout.utils.text import absolute_url, clean_text

logger = logging.getLogger(__name__)


class PlaybillSource(BaseSource[RawListing]):
    """
    Listing source: the Playbill Broadway shows page.

    Each production is a <div class="show-container"> holding the title
    link in div.prod-title and the poster in div.cover-container. Links
    and images may be site-relative or protocol-relative.
    """

    name = "Playbill"

    def __init__(
        self,
        url: str | None = None,
        origin: str | None = None,
        timeout: float | None = None,
    ) -> None:
        super().__init__(url or settings.listing_url, timeout=timeout)
        self.origin = origin or settings.listing_origin

    def _parse_html(self, html: str) -> list[RawListing]:
        """Parse show containers from the listings page."""
        soup = BeautifulSoup(html, "html.parser")
        listings: list[RawListing] = []
        for container in soup.select("div.show-container"):
            try:
                listing = self._parse_container(container)
                if listing:
                    listings.append(listing)
            except Exception as e:
                logger.warning(f"Playbill: failed to parse show container: {e}")
        return listings

    def _parse_container(self, container: Tag) -> RawListing | None:
        """Parse a single show container into a RawListing."""
        anchor = container.select_one("div.prod-title a")
        if anchor is None:
            return None

        title = clean_text(anchor.get_text())
        link = absolute_url(anchor.get("href"), self.origin)
        if not title or not link:
            return None

        # Poster: first image in the cover block
        poster_url = None
        image = container.select_one("div.cover-container img")
        if image is not None:
            poster_url = absolute_url(image.get("src"), self.origin)

        return RawListing(title=title, detail_link=link, poster_image_url=poster_url)
