"""Pydantic schemas for merged show data."""

from pydantic import BaseModel, Field

from stagescout.services.show_filters import CategoryFilter, SortOrder


class MergedShow(BaseModel):
    """
    A production present in both sources.

    Title, type and dates come from the reference table; poster and
    detail link come from the listing.
    """

    title: str
    type: str
    opening_date_text: str
    closing_date_text: str
    poster_image_url: str
    detail_link: str = "#"


class ShowCard(MergedShow):
    """Merged show with display fields for the presentation layer."""

    in_previews: bool
    opening_date_display: str
    closing_date_display: str


class ShowsQuery(BaseModel):
    """Query parameters for the shows listing."""

    category: CategoryFilter = CategoryFilter.ALL
    sort: SortOrder = SortOrder.A_Z
    previews_only: bool = False
    search: str | None = None


class ShowsResponse(BaseModel):
    """Response for the shows endpoint."""

    shows: list[ShowCard] = Field(default_factory=list)
    total_shows: int
    total_matching: int
    empty_state: bool
    message: str | None = None
    query: ShowsQuery
