import asyncio
import logging

import httpx

from prospector.exceptions.custom import GeminiError, RateLimitError, TransportFailureError
from prospector.mappers.error_classifier import classify
from prospector.mappers.prospect_normalizer import normalize
from prospector.mappers.query_builder import build_query
from prospector.mappers.response_extractor import extract, parse_records
from prospector.schemas.gemini import ModelOutput
from prospector.schemas.pipeline import PipelineStatus
from prospector.schemas.search import SearchRequest, SearchResponse, SearchResult
from prospector.services.gemini import ProspectRetriever
from prospector.services.history import HistoryStore

logger = logging.getLogger(__name__)


def _describe_error(exc: Exception) -> str:
    if isinstance(exc, RateLimitError):
        return str(exc)
    if isinstance(exc, GeminiError):
        return f"HTTP {exc.status_code}: {exc.message}"
    if isinstance(exc, httpx.TimeoutException):
        return f"Timed out ({type(exc).__name__})"
    text = str(exc).strip()
    return text or type(exc).__name__


class ProspectSearchService:
    def __init__(self, retriever: ProspectRetriever, history: HistoryStore):
        self._retriever = retriever
        self._history = history

    async def _retrieve(self, request: SearchRequest) -> ModelOutput:
        plan = build_query(request)
        try:
            return await self._retriever.generate(plan)
        except (GeminiError, RateLimitError, httpx.HTTPError) as exc:
            stage = classify(exc)
            detail = _describe_error(exc)
            logger.error("Retrieval for %r failed at %s: %s", request.location, stage, detail)
            status_code = 429 if isinstance(exc, RateLimitError) else 502
            raise TransportFailureError(
                f"Failed to fetch prospects ({stage} stage): {detail}",
                stage=stage,
                status_code=status_code,
            ) from exc

    async def search(self, request: SearchRequest) -> SearchResponse:
        logger.info(
            "Searching prospects: location=%r segment=%r sub_segment=%r coordinates=%s",
            request.location, request.segment, request.sub_segment,
            request.coordinates is not None,
        )
        output = await self._retrieve(request)

        payload = extract(output.text, output.citations)
        prospects = normalize(parse_records(payload.records_json_slice))
        result = SearchResult(prospects=prospects, sources=payload.sources)
        logger.info(
            "Found %d prospects and %d sources for %r",
            len(prospects), len(payload.sources), request.location,
        )

        history = await asyncio.to_thread(self._history.record, request, result)
        return SearchResponse(
            search_id=history[0].id,
            result=result,
            pipeline=PipelineStatus.completed(),
        )
