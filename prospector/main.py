import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from prospector.config import Settings
from prospector.exceptions.custom import ProspectSearchError
from prospector.exceptions.handlers import prospect_search_error_handler
from prospector.routers.history import router as history_router
from prospector.routers.prospects import router as prospects_router
from prospector.services.gemini import GeminiService
from prospector.services.history import HistoryStore, JsonFileStore
from prospector.services.prospect_search import ProspectSearchService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        gemini = GeminiService(
            client,
            settings.gemini_api_key,
            model=settings.gemini_model,
            temperature=settings.gemini_temperature,
        )
        history = HistoryStore(
            JsonFileStore(settings.history_dir),
            capacity=settings.history_capacity,
        )

        app.state.history_store = history
        app.state.prospect_search_service = ProspectSearchService(gemini, history)

        yield


app = FastAPI(title="State Chemical Prospector", lifespan=lifespan)

app.add_exception_handler(ProspectSearchError, prospect_search_error_handler)

app.include_router(prospects_router)
app.include_router(history_router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
