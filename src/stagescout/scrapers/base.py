"""Base source interface for the upstream scrapers."""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

import httpx

from stagescout.config import settings
from stagescout.scrapers.models import FetchFailure, FetchResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseSource(ABC, Generic[T]):
    """
    Abstract base class for the upstream sources.

    Subclasses only implement _parse_html. Fetching, timeouts and failure
    isolation live here so that no source can raise into the pipeline.
    """

    name: str = "source"

    def __init__(self, url: str, timeout: float | None = None) -> None:
        """
        Initialize the source.

        Args:
            url: Page to fetch
            timeout: Request timeout in seconds (uses settings if not provided)
        """
        self.url = url
        self.timeout = timeout if timeout is not None else settings.scrape_timeout

    @abstractmethod
    def _parse_html(self, html: str) -> list[T]:
        """
        Extract records from the page HTML.

        Individual malformed records should be skipped, not raised.
        An exception escaping this method is reported as a parse failure.
        """

    async def fetch_result(self) -> FetchResult[T]:
        """
        Fetch and parse the source page.

        Returns:
            FetchResult with the records, or an empty result tagged with
            the failure reason

        Raises:
            Never. Network and parse errors are captured in the result.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True
            ) as client:
                response = await client.get(
                    self.url, headers={"User-Agent": settings.user_agent}
                )
                response.raise_for_status()
                html = response.text
        except Exception as e:
            return FetchResult.failed(FetchFailure.NETWORK, e)

        try:
            records = self._parse_html(html)
        except Exception as e:
            return FetchResult.failed(FetchFailure.PARSE, e)

        return FetchResult(records=records)

    async def fetch(self) -> list[T]:
        """
        Fetch records, degrading to an empty list on any failure.

        The failure reason is logged so outages stay visible to operators.
        """
        result = await self.fetch_result()
        if not result.ok:
            logger.error(
                f"{self.name} fetch failed ({result.failure.value}) for {self.url}: {result.error}",
                exc_info=result.exception,
            )
            return []

        logger.info(f"{self.name}: found {len(result.records)} records")
        return result.records
