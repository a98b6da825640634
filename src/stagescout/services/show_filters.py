"""Filtering, sorting and date helpers for the merged show list.

These are pure functions of the merged list plus an explicit "today", so
the presentation layer can filter and sort without touching the sources.
"""

import re
from collections.abc import Iterable
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from stagescout.config import settings

if TYPE_CHECKING:
    from stagescout.schemas.show import MergedShow

MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_MONTH_YEAR = re.compile(r"(" + "|".join(MONTHS) + r")\s+(\d{4})")
_YEAR = re.compile(r"\d{4}")

# Date texts that mean "no date"
NO_DATE_TEXTS = {"", "N/A", "Open-ended"}


class CategoryFilter(str, Enum):
    ALL = "all"
    MUSICAL = "musical"
    PLAY = "play"
    OTHER = "other"


class SortOrder(str, Enum):
    A_Z = "a-z"
    Z_A = "z-a"
    OPENING_EARLIEST = "opening-earliest"
    OPENING_LATEST = "opening-latest"


def get_today() -> date:
    """Current date in the theatre district's timezone (FastAPI dependency)."""
    return datetime.now(ZoneInfo(settings.timezone)).date()


def parse_show_date(text: str | None) -> date | None:
    """
    Parse the free-text dates printed in the reference table.

    Tries, in order: an ISO date anywhere in the text, "Month YYYY"
    (first of the month), then a bare year (January 1).

    Examples:
        "2003-10-30Wicked opened" → 2003-10-30
        "August 2025" → 2025-08-01
        "1996" → 1996-01-01
        "Open-ended" → None
    """
    if text is None or text.strip() in NO_DATE_TEXTS:
        return None

    m = _ISO_DATE.search(text)
    if m:
        try:
            return date.fromisoformat(m.group(0))
        except ValueError:
            pass

    m = _MONTH_YEAR.search(text)
    if m:
        year = int(m.group(2))
        if year >= 1:
            return date(year, MONTHS.index(m.group(1)) + 1, 1)

    m = _YEAR.search(text)
    if m:
        year = int(m.group(0))
        if year >= 1:
            return date(year, 1, 1)

    return None


def format_show_date(text: str | None) -> str:
    """Render a date text as "Oct 30, 2003", falling back to the raw text."""
    parsed = parse_show_date(text)
    if parsed is None:
        return text or "N/A"
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"


def is_in_previews(opening_date_text: str | None, today: date) -> bool:
    """A production is in previews when its opening date is still ahead."""
    opening = parse_show_date(opening_date_text)
    return opening is not None and opening > today


def _matches_category(show_type: str, category: CategoryFilter) -> bool:
    show_type = show_type.lower()
    if category == CategoryFilter.MUSICAL:
        return "musical" in show_type
    if category == CategoryFilter.PLAY:
        return "play" in show_type
    if category == CategoryFilter.OTHER:
        return "musical" not in show_type and "play" not in show_type
    return True


def filter_shows(
    shows: Iterable["MergedShow"],
    category: CategoryFilter = CategoryFilter.ALL,
    previews_only: bool = False,
    search: str | None = None,
    today: date | None = None,
) -> list["MergedShow"]:
    """
    Filter shows by category, previews status and title search.

    Args:
        shows: Merged shows
        category: Category bucket to keep
        previews_only: Keep only productions that have not opened yet
        search: Case-insensitive substring of the title
        today: Reference date for previews (defaults to get_today())

    Returns:
        Matching shows in their original order
    """
    if today is None:
        today = get_today()
    term = search.lower().strip() if search else ""

    result = []
    for show in shows:
        if not _matches_category(show.type or "", category):
            continue
        if previews_only and not is_in_previews(show.opening_date_text, today):
            continue
        if term and term not in re.sub(r"\s+", " ", show.title.lower()):
            continue
        result.append(show)
    return result


def sort_shows(shows: Iterable["MergedShow"], order: SortOrder = SortOrder.A_Z) -> list["MergedShow"]:
    """
    Sort shows by title or opening date.

    Shows without a parseable opening date sort last for "earliest" and
    first for "latest".
    """
    shows = list(shows)
    if order == SortOrder.A_Z:
        return sorted(shows, key=lambda s: s.title.casefold())
    if order == SortOrder.Z_A:
        return sorted(shows, key=lambda s: s.title.casefold(), reverse=True)

    def opening_key(show: "MergedShow") -> date:
        return parse_show_date(show.opening_date_text) or date.max

    if order == SortOrder.OPENING_EARLIEST:
        return sorted(shows, key=opening_key)
    if order == SortOrder.OPENING_LATEST:
        return sorted(shows, key=opening_key, reverse=True)
    return shows
