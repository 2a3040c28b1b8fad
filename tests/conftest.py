"""
Test infrastructure for the Blog Reader API.

Strategy
--------
- Each test gets its own freshly seeded ArticleRepository with zero fetch
  latency, so tests never sleep and never see each other's likes or
  comments.
- The app's get_repository dependency is overridden to return that
  repository; the module-level singleton is never touched.
- httpx's ASGITransport does not run the lifespan, so the seeding that
  normally happens at startup is done here instead.
"""
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.repository import ArticleRepository, get_repository

SIGNED_IN = {"X-Viewer-Name": "Jordan Lee", "X-Viewer-Avatar": "https://example.com/jordan.png"}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def repo() -> ArticleRepository:
    """A seeded repository with no simulated latency."""
    repository = ArticleRepository(delay=0)
    repository.seed()
    return repository


@pytest_asyncio.fixture
async def async_client(repo: ArticleRepository) -> AsyncClient:
    """
    Yield an httpx.AsyncClient wired to the FastAPI app via ASGITransport,
    with the repository dependency pointed at the per-test *repo*.
    """
    app.dependency_overrides[get_repository] = lambda: repo
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.pop(get_repository, None)


@pytest.fixture
def signed_in() -> dict:
    """Request headers identifying a signed-in viewer."""
    return dict(SIGNED_IN)
