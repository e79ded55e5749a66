from pydantic import BaseModel


class Part(BaseModel):
    text: str | None = None


class Content(BaseModel):
    role: str | None = None
    parts: list[Part] = []


class WebChunk(BaseModel):
    uri: str | None = None
    title: str | None = None


class MapsChunk(BaseModel):
    uri: str | None = None
    title: str | None = None
    placeId: str | None = None


class GroundingChunk(BaseModel):
    web: WebChunk | None = None
    maps: MapsChunk | None = None


class GroundingMetadata(BaseModel):
    groundingChunks: list[GroundingChunk] = []
    webSearchQueries: list[str] = []


class Candidate(BaseModel):
    content: Content | None = None
    finishReason: str | None = None
    groundingMetadata: GroundingMetadata | None = None


class GenerateContentResponse(BaseModel):
    candidates: list[Candidate] = []


class ModelOutput(BaseModel):
    """Free-form model text plus the grounding citations it used."""

    text: str = ""
    citations: list[GroundingChunk] = []
