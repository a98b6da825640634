"""Data models for source scrapers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar


@dataclass
class RawListing:
    """
    Raw production data from the listing source.

    Provides the poster image and detail link for a production that is
    currently on sale. Title and detail link are required; records
    missing either are dropped by the scraper.
    """

    title: str  # Title as it appears on the listing page
    detail_link: str  # Absolute URL of the production page
    poster_image_url: str | None = None  # Absolute poster URL, if any

    def __post_init__(self) -> None:
        """Validate that the required fields are present."""
        if not self.title:
            raise ValueError("title is required")
        if not self.detail_link:
            raise ValueError("detail_link is required")


@dataclass
class RawReference:
    """
    Raw production data from the reference table.

    Source of truth for category and run dates.
    """

    title: str  # Production name with footnote markers removed
    category: str = "Unknown"  # e.g. "Musical", "Play", "Revival"
    opening_date_text: str = "N/A"  # Free text as printed in the table
    closing_date_text: str = "N/A"


class FetchFailure(str, Enum):
    """Why a source fetch degraded to an empty result."""

    NETWORK = "network"
    PARSE = "parse"


T = TypeVar("T")


@dataclass
class FetchResult(Generic[T]):
    """Records from one source fetch plus the reason it failed, if it did."""

    records: list[T] = field(default_factory=list)
    failure: FetchFailure | None = None
    error: str | None = None
    exception: Exception | None = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def failed(cls, failure: FetchFailure, error: Exception) -> "FetchResult[T]":
        return cls(
            records=[],
            failure=failure,
            error=f"{type(error).__name__}: {error}",
            exception=error,
        )
