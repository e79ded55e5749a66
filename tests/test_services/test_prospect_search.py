import threading

import httpx
import pytest

from prospector.exceptions.custom import (
    EmptyResultError,
    FoundButUnsynthesizedError,
    GeminiError,
    MalformedPayloadError,
    NoCandidatesError,
    RateLimitError,
    TransportFailureError,
)
from prospector.schemas.gemini import ModelOutput
from prospector.schemas.pipeline import PipelineStage, StageStatus
from prospector.schemas.search import SearchRequest
from prospector.services.history import HistoryStore, JsonFileStore
from prospector.services.prospect_search import ProspectSearchService

FENCED = (
    '```json\n[{"name":"Acme Co","phone":"N/A","email":"","address":"1 Main St",'
    '"city":"Baltimore","state":"MD","zip":"21201","notes":"Industrial"}]\n```'
)

REQUEST = SearchRequest(location="  Baltimore, MD  ", segment="Industrial and Manufacturing")


async def test_search_fenced_response(make_retriever, maps_chunk, history):
    retriever = make_retriever(ModelOutput(text=FENCED, citations=[maps_chunk()]))
    service = ProspectSearchService(retriever, history)

    response = await service.search(REQUEST)

    [prospect] = response.result.prospects
    assert prospect.name == "Acme Co"
    assert prospect.phone == ""
    assert prospect.zip == "21201"
    assert response.result.sources[0].kind == "maps"
    assert response.pipeline.synthesis == StageStatus.success


async def test_search_uses_trimmed_location(make_retriever, history):
    retriever = make_retriever(ModelOutput(text=FENCED))
    await ProspectSearchService(retriever, history).search(REQUEST)

    assert '"Baltimore, MD"' in retriever.plans[0].prompt
    assert history.load()[0].params.location == "Baltimore, MD"


async def test_search_records_history(make_retriever, history):
    service = ProspectSearchService(make_retriever(ModelOutput(text=FENCED)), history)

    response = await service.search(REQUEST)

    saved = history.load()
    assert len(saved) == 1
    assert saved[0].id == response.search_id
    assert saved[0].result_count == 1
    assert saved[0].params == REQUEST


async def test_search_no_brackets_no_citations(make_retriever, history):
    service = ProspectSearchService(make_retriever(ModelOutput(text="Nothing found nearby.")), history)

    with pytest.raises(NoCandidatesError):
        await service.search(REQUEST)
    assert history.load() == []


async def test_search_no_brackets_two_citations(make_retriever, maps_chunk, web_chunk, history):
    retriever = make_retriever(
        ModelOutput(text="I found a few places.", citations=[maps_chunk(), web_chunk()])
    )

    with pytest.raises(FoundButUnsynthesizedError) as exc_info:
        await ProspectSearchService(retriever, history).search(REQUEST)

    assert exc_info.value.citation_count == 2
    assert "Found 2 locations" in exc_info.value.message


async def test_search_malformed_payload(make_retriever, history):
    retriever = make_retriever(ModelOutput(text='Here: [{"name": "Acme",]'))

    with pytest.raises(MalformedPayloadError):
        await ProspectSearchService(retriever, history).search(REQUEST)
    assert history.load() == []


async def test_search_empty_array(make_retriever, history):
    retriever = make_retriever(ModelOutput(text="[]"))

    with pytest.raises(EmptyResultError):
        await ProspectSearchService(retriever, history).search(REQUEST)
    assert history.load() == []


@pytest.mark.parametrize(
    ("error", "stage", "status_code"),
    [
        (GeminiError("Google Maps grounding failed", status_code=500), PipelineStage.geospatial, 502),
        (GeminiError("Google Search unavailable", status_code=503), PipelineStage.search, 502),
        (GeminiError("API key not valid", status_code=400), PipelineStage.synthesis, 502),
        (httpx.ReadTimeout("timed out"), PipelineStage.synthesis, 502),
        (RateLimitError("Gemini"), PipelineStage.synthesis, 429),
    ],
)
async def test_search_transport_failure(make_retriever, history, error, stage, status_code):
    service = ProspectSearchService(make_retriever(error=error), history)

    with pytest.raises(TransportFailureError) as exc_info:
        await service.search(REQUEST)

    assert exc_info.value.stage == stage
    assert exc_info.value.status_code == status_code
    assert exc_info.value.__cause__ is error
    assert history.load() == []


async def test_search_does_not_retry(make_retriever, history):
    retriever = make_retriever(error=GeminiError("boom", status_code=500))

    with pytest.raises(TransportFailureError):
        await ProspectSearchService(retriever, history).search(REQUEST)
    assert len(retriever.plans) == 1


async def test_search_records_history_off_event_loop(make_retriever, tmp_path):
    threads: list[threading.Thread] = []

    class _ThreadRecordingStore(HistoryStore):
        def record(self, request, result):
            threads.append(threading.current_thread())
            return super().record(request, result)

    history = _ThreadRecordingStore(JsonFileStore(tmp_path))
    service = ProspectSearchService(make_retriever(ModelOutput(text=FENCED)), history)

    response = await service.search(REQUEST)

    assert threads and threads[0] is not threading.main_thread()
    assert history.load()[0].id == response.search_id
