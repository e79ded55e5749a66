from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, field_validator, model_validator

from prospector.schemas.pipeline import PipelineStatus

CURRENT_LOCATION = "Current Location"


class Coordinates(BaseModel):
    model_config = {"frozen": True}

    latitude: float
    longitude: float


class SearchRequest(BaseModel):
    model_config = {"frozen": True}

    location: str
    segment: str | None = None
    sub_segment: str | None = None
    coordinates: Coordinates | None = None

    @field_validator("location")
    @classmethod
    def _strip_location(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please enter a city, state, or region.")
        return value

    @field_validator("segment", "sub_segment")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @model_validator(mode="after")
    def _sentinel_needs_coordinates(self) -> SearchRequest:
        if self.location == CURRENT_LOCATION and self.coordinates is None:
            raise ValueError(f'"{CURRENT_LOCATION}" requires coordinates')
        return self


class Prospect(BaseModel):
    name: str
    phone: str = ""
    email: str = ""
    address: str
    city: str
    state: str = ""
    zip: str
    notes: str


class GroundingSource(BaseModel):
    title: str
    uri: str = ""
    kind: Literal["maps", "web"]


class SearchResult(BaseModel):
    prospects: list[Prospect] = []
    sources: list[GroundingSource] = []


class SavedSearch(BaseModel):
    model_config = {"frozen": True}

    id: str
    timestamp: datetime
    params: SearchRequest
    result_count: int
    results: SearchResult


class SearchResponse(BaseModel):
    search_id: str
    result: SearchResult
    pipeline: PipelineStatus
