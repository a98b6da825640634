"""Pydantic schemas for API requests and responses."""

from stagescout.schemas.show import MergedShow, ShowCard, ShowsQuery, ShowsResponse

__all__ = [
    "MergedShow",
    "ShowCard",
    "ShowsQuery",
    "ShowsResponse",
]
