"""Wikipedia reference-table scraper using BeautifulSoup HTML parsing."""

import logging

from bs4 import BeautifulSoup, Tag

from stagescout.config import settings
from stagescout.scrapers.base import BaseSource
from stagescout.scrapers.models import RawReference
from stagescout.utils.text import clean_text, strip_footnotes

logger = logging.getLogger(__name__)

# Column layout of the theatres table
MIN_CELLS = 7
PRODUCTION_COL = 3
CATEGORY_COL = 4
OPENING_COL = 5
CLOSING_COL = 6


class WikipediaSource(BaseSource[RawReference]):
    """
    Reference source: the Broadway theatres table on Wikipedia.

    The first table.wikitable lists one theatre per row with the current
    production, its category, and opening/closing dates. Header cells are
    <th>, so only <td> cells are counted. Production names carry
    footnote markers like "[12]" which are stripped.
    """

    name = "Wikipedia"

    def __init__(self, url: str | None = None, timeout: float | None = None) -> None:
        super().__init__(url or settings.reference_url, timeout=timeout)

    def _parse_html(self, html: str) -> list[RawReference]:
        """Parse production rows from the first wikitable."""
        soup = BeautifulSoup(html, "html.parser")
        table = soup.select_one("table.wikitable")
        if table is None:
            logger.warning("Wikipedia: no wikitable found on page")
            return []

        references: list[RawReference] = []
        # First row is the header
        for row in table.find_all("tr")[1:]:
            try:
                reference = self._parse_row(row)
                if reference:
                    references.append(reference)
            except Exception as e:
                logger.warning(f"Wikipedia: failed to parse table row: {e}")
        return references

    @staticmethod
    def _cell_text(cell: Tag) -> str:
        return cell.get_text().strip()

    def _parse_row(self, row: Tag) -> RawReference | None:
        """Parse a single table row into a RawReference."""
        cells = row.find_all("td")
        if len(cells) < MIN_CELLS:
            return None

        title = clean_text(strip_footnotes(cells[PRODUCTION_COL].get_text()))
        if not title:
            return None

        return RawReference(
            title=title,
            category=self._cell_text(cells[CATEGORY_COL]) or "Unknown",
            opening_date_text=self._cell_text(cells[OPENING_COL]) or "N/A",
            closing_date_text=self._cell_text(cells[CLOSING_COL]) or "N/A",
        )
