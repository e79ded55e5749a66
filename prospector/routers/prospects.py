from fastapi import APIRouter

from prospector.dependencies import ProspectSearchDep
from prospector.schemas.search import SearchRequest, SearchResponse
from prospector.segments import MARKET_SEGMENTS, MarketSegment

router = APIRouter()


@router.post("/prospects/search", response_model=SearchResponse)
async def search_prospects(
    request: SearchRequest,
    service: ProspectSearchDep,
) -> SearchResponse:
    return await service.search(request)


@router.get("/segments", response_model=list[MarketSegment])
async def list_segments() -> list[MarketSegment]:
    return MARKET_SEGMENTS
