from fastapi import APIRouter, HTTPException, Response

from prospector.dependencies import HistoryDep
from prospector.schemas.search import SavedSearch

router = APIRouter(prefix="/history")


@router.get("", response_model=list[SavedSearch])
def list_history(history: HistoryDep) -> list[SavedSearch]:
    return history.load()


@router.get("/{search_id}", response_model=SavedSearch)
def get_saved_search(search_id: str, history: HistoryDep) -> SavedSearch:
    saved = history.get(search_id)
    if saved is None:
        raise HTTPException(status_code=404, detail="Saved search not found")
    return saved


@router.delete("/{search_id}", response_model=list[SavedSearch])
def delete_saved_search(search_id: str, history: HistoryDep) -> list[SavedSearch]:
    return history.remove(search_id)


@router.delete("", status_code=204)
def clear_history(history: HistoryDep) -> Response:
    history.clear()
    return Response(status_code=204)
