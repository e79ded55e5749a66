import httpx
import pytest
from httpx import ASGITransport

from prospector.schemas.gemini import GroundingChunk, MapsChunk, ModelOutput, WebChunk
from prospector.schemas.query import QueryPlan
from prospector.services.history import HistoryStore, JsonFileStore


class StubRetriever:
    """Deterministic stand-in for the Gemini client."""

    def __init__(self, output: ModelOutput | None = None, error: Exception | None = None):
        self.output = output or ModelOutput()
        self.error = error
        self.plans: list[QueryPlan] = []

    async def generate(self, plan: QueryPlan) -> ModelOutput:
        self.plans.append(plan)
        if self.error is not None:
            raise self.error
        return self.output


@pytest.fixture
def make_retriever():
    return StubRetriever


@pytest.fixture
def maps_chunk():
    def _make(title: str | None = "Acme Co", uri: str = "https://maps.google.com/?cid=1"):
        return GroundingChunk(maps=MapsChunk(title=title, uri=uri, placeId="places/abc"))
    return _make


@pytest.fixture
def web_chunk():
    def _make(title: str | None = "Acme Co - Home", uri: str = "https://acme.example"):
        return GroundingChunk(web=WebChunk(title=title, uri=uri))
    return _make


@pytest.fixture
def history(tmp_path):
    return HistoryStore(JsonFileStore(tmp_path / "history"))


@pytest.fixture
def mock_env(monkeypatch, tmp_path):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setenv("HISTORY_DIR", str(tmp_path / "app-history"))


@pytest.fixture
async def client(mock_env):
    from prospector.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
