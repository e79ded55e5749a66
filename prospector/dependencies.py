from typing import Annotated

from fastapi import Depends, Request

from prospector.services.history import HistoryStore
from prospector.services.prospect_search import ProspectSearchService


def get_prospect_search_service(request: Request) -> ProspectSearchService:
    return request.app.state.prospect_search_service


def get_history_store(request: Request) -> HistoryStore:
    return request.app.state.history_store


ProspectSearchDep = Annotated[ProspectSearchService, Depends(get_prospect_search_service)]
HistoryDep = Annotated[HistoryStore, Depends(get_history_store)]
