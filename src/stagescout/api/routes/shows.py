"""Shows API endpoints."""

import logging
from datetime import date

from fastapi import APIRouter, Depends, Query

from stagescout.schemas import MergedShow, ShowCard, ShowsQuery, ShowsResponse
from stagescout.services.pipeline import ShowPipeline, get_pipeline
from stagescout.services.show_filters import (
    CategoryFilter,
    SortOrder,
    filter_shows,
    format_show_date,
    get_today,
    is_in_previews,
    sort_shows,
)

logger = logging.getLogger(__name__)
router = APIRouter()

NO_DATA_MESSAGE = "No Broadway shows found at this time."
NO_MATCHES_MESSAGE = "No shows found"


def to_card(show: MergedShow, today: date) -> ShowCard:
    """Attach display fields to a merged show."""
    return ShowCard(
        **show.model_dump(),
        in_previews=is_in_previews(show.opening_date_text, today),
        opening_date_display=format_show_date(show.opening_date_text),
        closing_date_display=format_show_date(show.closing_date_text),
    )


@router.get("/shows", response_model=ShowsResponse)
async def get_shows(
    category: CategoryFilter = Query(CategoryFilter.ALL, description="all, musical, play or other"),
    sort: SortOrder = Query(SortOrder.A_Z, description="a-z, z-a, opening-earliest, opening-latest"),
    previews_only: bool = Query(False, description="Only productions that have not opened yet"),
    search: str | None = Query(None, description="Case-insensitive title search"),
    pipeline: ShowPipeline = Depends(get_pipeline),
    today: date = Depends(get_today),
) -> ShowsResponse:
    """
    Current Broadway productions found in both sources.

    When neither source yields a matched production the response carries
    empty_state=true so the client renders a "no data" message instead
    of an empty grid.
    """
    query = ShowsQuery(
        category=category, sort=sort, previews_only=previews_only, search=search
    )
    shows = await pipeline.run()

    if not shows:
        return ShowsResponse(
            shows=[],
            total_shows=0,
            total_matching=0,
            empty_state=True,
            message=NO_DATA_MESSAGE,
            query=query,
        )

    matching = filter_shows(
        shows,
        category=category,
        previews_only=previews_only,
        search=search,
        today=today,
    )
    matching = sort_shows(matching, sort)

    return ShowsResponse(
        shows=[to_card(show, today) for show in matching],
        total_shows=len(shows),
        total_matching=len(matching),
        empty_state=False,
        message=None if matching else NO_MATCHES_MESSAGE,
        query=query,
    )
