import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from prospector.schemas.pipeline import PipelineStatus

from .custom import NoCandidatesError, ProspectSearchError

logger = logging.getLogger(__name__)


async def prospect_search_error_handler(_request: Request, exc: ProspectSearchError) -> JSONResponse:
    if isinstance(exc, NoCandidatesError):
        logger.warning("No prospects found: %s", exc.message)
    else:
        logger.error("Prospect search failed at %s: %s", exc.stage, exc.message)

    pipeline = PipelineStatus.started().failed_at(exc.stage)
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.message,
            "stage": exc.stage.value,
            "pipeline": pipeline.model_dump(mode="json"),
        },
    )
