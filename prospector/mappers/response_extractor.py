import json
import logging

from pydantic import BaseModel

from prospector.exceptions.custom import (
    FoundButUnsynthesizedError,
    MalformedPayloadError,
    NoCandidatesError,
)
from prospector.schemas.gemini import GroundingChunk
from prospector.schemas.search import GroundingSource

logger = logging.getLogger(__name__)

MAPS_DEFAULT_TITLE = "Google Maps Location"
WEB_DEFAULT_TITLE = "Web Source"


class ExtractedPayload(BaseModel):
    records_json_slice: str
    sources: list[GroundingSource] = []


def map_citations(citations: list[GroundingChunk]) -> list[GroundingSource]:
    sources: list[GroundingSource] = []
    for chunk in citations:
        if chunk.maps is not None:
            sources.append(GroundingSource(
                title=chunk.maps.title or MAPS_DEFAULT_TITLE,
                uri=chunk.maps.uri or "",
                kind="maps",
            ))
        elif chunk.web is not None:
            sources.append(GroundingSource(
                title=chunk.web.title or WEB_DEFAULT_TITLE,
                uri=chunk.web.uri or "",
                kind="web",
            ))
    return sources


def extract(raw_text: str, citations: list[GroundingChunk]) -> ExtractedPayload:
    """Isolate the JSON array embedded in a model response.

    Everything outside the first ``[`` and the last ``]`` (prose, Markdown
    fences) is discarded.
    """
    start = raw_text.find("[")
    end = raw_text.rfind("]")
    if start == -1 or end == -1 or end < start:
        if citations:
            logger.warning(
                "Model returned %d citations but no JSON array", len(citations)
            )
            raise FoundButUnsynthesizedError(len(citations))
        raise NoCandidatesError()

    return ExtractedPayload(
        records_json_slice=raw_text[start:end + 1],
        sources=map_citations(citations),
    )


def parse_records(records_json_slice: str):
    try:
        return json.loads(records_json_slice)
    except (json.JSONDecodeError, ValueError) as exc:
        logger.error("Could not parse prospect payload: %s", exc)
        raise MalformedPayloadError(str(exc)) from exc
