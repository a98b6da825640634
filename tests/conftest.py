"""Shared test fixtures."""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI

from stagescout.api.routes import health, shows
from stagescout.services.pipeline import reset_pipeline


@pytest.fixture
def test_app() -> FastAPI:
    """Minimal FastAPI app without the APScheduler lifespan, for API tests."""
    app = FastAPI()
    app.include_router(health.router)
    app.include_router(shows.router, prefix="/api")
    return app


@pytest.fixture(autouse=True)
def _fresh_pipeline() -> Iterator[None]:
    """Each test starts without the process-wide pipeline and its cache."""
    reset_pipeline()
    yield
    reset_pipeline()


class FakeClock:
    """Manually advanced monotonic clock for cache tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
