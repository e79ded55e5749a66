import logging
from typing import Protocol

import httpx

from prospector.exceptions.custom import GeminiError, RateLimitError
from prospector.schemas.gemini import GenerateContentResponse, ModelOutput
from prospector.schemas.query import QueryPlan

logger = logging.getLogger(__name__)

API_URL = "https://generativelanguage.googleapis.com/v1beta"
MODEL = "gemini-2.5-flash"
TEMPERATURE = 0.1


class ProspectRetriever(Protocol):
    async def generate(self, plan: QueryPlan) -> ModelOutput: ...


def build_payload(plan: QueryPlan, temperature: float) -> dict:
    payload: dict = {
        "systemInstruction": {"parts": [{"text": plan.instruction}]},
        "contents": [{"role": "user", "parts": [{"text": plan.prompt}]}],
        "tools": plan.tool_config.tools,
        # responseMimeType/responseSchema are not allowed alongside the
        # googleMaps tool, so the JSON is parsed out of free text.
        "generationConfig": {"temperature": temperature},
    }
    bias = plan.tool_config.location_bias
    if bias is not None:
        payload["toolConfig"] = {
            "retrievalConfig": {
                "latLng": {"latitude": bias.latitude, "longitude": bias.longitude},
            },
        }
    return payload


class GeminiService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        model: str = MODEL,
        temperature: float = TEMPERATURE,
    ):
        self._client = client
        self._headers = {"x-goog-api-key": api_key}
        self._url = f"{API_URL}/models/{model}:generateContent"
        self._temperature = temperature

    async def generate(self, plan: QueryPlan) -> ModelOutput:
        payload = build_payload(plan, self._temperature)

        logger.info("Requesting grounded prospects from Gemini")
        resp = await self._client.post(self._url, json=payload, headers=self._headers)

        if resp.status_code == 429:
            raise RateLimitError("Gemini")
        if resp.status_code >= 400:
            raise GeminiError(resp.text, status_code=resp.status_code)

        try:
            data = GenerateContentResponse(**resp.json())
        except (ValueError, TypeError) as exc:
            raise GeminiError(
                f"Invalid Gemini response: {exc}", status_code=resp.status_code
            ) from exc

        return self._parse_response(data)

    @staticmethod
    def _parse_response(data: GenerateContentResponse) -> ModelOutput:
        if not data.candidates:
            logger.warning("Gemini returned no candidates")
            return ModelOutput()

        candidate = data.candidates[0]
        parts = candidate.content.parts if candidate.content else []
        text = "".join(part.text for part in parts if part.text)
        citations = (
            candidate.groundingMetadata.groundingChunks
            if candidate.groundingMetadata else []
        )
        logger.info(
            "Gemini response: %d chars, %d citations, finish=%s",
            len(text), len(citations), candidate.finishReason,
        )
        return ModelOutput(text=text, citations=citations)
