"""Unit tests for the Wikipedia reference-table scraper."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from stagescout.scrapers.models import FetchFailure
from stagescout.scrapers.wikipedia import WikipediaSource

FIXTURE_DIR = Path(__file__).parent / "fixtures" / "wikipedia"


@pytest.fixture
def source() -> WikipediaSource:
    return WikipediaSource(url="https://en.wikipedia.org/wiki/Broadway_theatre")


@pytest.fixture
def fixture_html() -> str:
    return (FIXTURE_DIR / "broadway_theatre.html").read_text()


def table(*rows: str) -> str:
    header = "<tr>" + "<th>h</th>" * 7 + "</tr>"
    return f'<table class="wikitable">{header}{"".join(rows)}</table>'


def row(*cells: str) -> str:
    return "<tr>" + "".join(f"<td>{c}</td>" for c in cells) + "</tr>"


# ---------------------------------------------------------------------------
# _parse_html — pure parsing, no HTTP
# ---------------------------------------------------------------------------


class TestWikipediaParseHtml:
    def test_extracts_qualifying_rows_from_first_table(
        self, source: WikipediaSource, fixture_html: str
    ) -> None:
        references = source._parse_html(fixture_html)
        assert [r.title for r in references] == ["Wicked", "Hamilton", "Oh, Mary!"]

    def test_strips_footnote_markers(self, source: WikipediaSource, fixture_html: str) -> None:
        titles = [r.title for r in source._parse_html(fixture_html)]
        assert not any("[" in t for t in titles)

    def test_reads_category_and_dates(self, source: WikipediaSource, fixture_html: str) -> None:
        wicked = source._parse_html(fixture_html)[0]
        assert wicked.category == "Musical"
        assert wicked.opening_date_text == "2003-10-30"
        assert wicked.closing_date_text == "Open-ended"

    def test_defaults_blank_cells(self, source: WikipediaSource, fixture_html: str) -> None:
        references = source._parse_html(fixture_html)
        hamilton, oh_mary = references[1], references[2]
        assert hamilton.closing_date_text == "N/A"
        assert oh_mary.category == "Unknown"
        assert oh_mary.opening_date_text == "N/A"
        assert oh_mary.closing_date_text == "2026-01-04"

    def test_row_with_six_cells_is_excluded(self, source: WikipediaSource) -> None:
        html = table(row("T", "A", "1", "Six Cells", "Play", "2025-01-01"))
        assert source._parse_html(html) == []

    def test_row_with_seven_cells_is_included(self, source: WikipediaSource) -> None:
        html = table(row("T", "A", "1", "Seven Cells", "Play", "2025-01-01", "2025-02-01"))
        assert [r.title for r in source._parse_html(html)] == ["Seven Cells"]

    def test_row_with_extra_cells_is_included(self, source: WikipediaSource) -> None:
        html = table(row("T", "A", "1", "Eight Cells", "Play", "2025", "2026", "extra"))
        assert [r.title for r in source._parse_html(html)] == ["Eight Cells"]

    def test_row_with_empty_production_is_excluded(self, source: WikipediaSource) -> None:
        html = table(row("T", "A", "1", " [4] ", "Play", "2025", "2026"))
        assert source._parse_html(html) == []

    def test_skips_first_row_even_with_td_cells(self, source: WikipediaSource) -> None:
        html = (
            '<table class="wikitable">'
            + row("T", "A", "1", "Header Like", "Play", "2025", "2026")
            + row("T", "A", "1", "Real Show", "Play", "2025", "2026")
            + "</table>"
        )
        assert [r.title for r in source._parse_html(html)] == ["Real Show"]

    def test_returns_empty_list_without_wikitable(self, source: WikipediaSource) -> None:
        assert source._parse_html("<table><tr><td>x</td></tr></table>") == []


# ---------------------------------------------------------------------------
# fetch — mocked HTTP
# ---------------------------------------------------------------------------


class TestWikipediaFetch:
    async def test_returns_references_from_mocked_response(
        self, source: WikipediaSource, fixture_html: str
    ) -> None:
        mock_response = MagicMock()
        mock_response.text = fixture_html
        mock_response.raise_for_status = MagicMock()

        mock_client = AsyncMock()
        mock_client.get = AsyncMock(return_value=mock_response)
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)

        with patch("httpx.AsyncClient", return_value=mock_client):
            references = await source.fetch()

        assert len(references) == 3

    async def test_returns_empty_list_on_http_error(self, source: WikipediaSource) -> None:
        mock_client = AsyncMock()
        mock_client.get = AsyncMock(side_effect=Exception("Connection refused"))
        mock_client.__aenter__ = AsyncMock(return_value=mock_client)
        mock_client.__aexit__ = AsyncMock(return_value=False)

        with patch("httpx.AsyncClient", return_value=mock_client):
            result = await source.fetch_result()
            references = await source.fetch()

        assert result.failure == FetchFailure.NETWORK
        assert references == []


class TestWikipediaCellText:
    def test_metadata_cells_are_trimmed_only(self, source: WikipediaSource) -> None:
        html = table(
            row("T", "A", "1", "Chicago", " Musical\n  revival ", " 1996-11-14 ", "\nOpen-ended\n")
        )
        chicago = source._parse_html(html)[0]
        assert chicago.category == "Musical\n  revival"
        assert chicago.opening_date_text == "1996-11-14"
        assert chicago.closing_date_text == "Open-ended"

    def test_production_name_whitespace_is_collapsed(self, source: WikipediaSource) -> None:
        html = table(row("T", "A", "1", " The\n  Outsiders [7] ", "Musical", "2024", "N/A"))
        assert source._parse_html(html)[0].title == "The Outsiders"
