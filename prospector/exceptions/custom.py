from prospector.schemas.pipeline import PipelineStage


class GeminiError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")


class ProspectSearchError(Exception):
    """A search that could not produce a prospect list.

    ``stage`` names the pipeline stage flagged as failed in diagnostics.
    """

    status_code = 502

    def __init__(self, message: str, stage: PipelineStage = PipelineStage.synthesis):
        self.message = message
        self.stage = stage
        super().__init__(message)


class NoCandidatesError(ProspectSearchError):
    status_code = 404

    def __init__(
        self,
        message: str = (
            "No verified prospects were found for this territory. "
            "Try broadening the search area or choosing a wider segment."
        ),
    ):
        super().__init__(message, stage=PipelineStage.geospatial)


class EmptyResultError(NoCandidatesError):
    pass


class FoundButUnsynthesizedError(ProspectSearchError):
    def __init__(self, citation_count: int):
        self.citation_count = citation_count
        super().__init__(
            f"Found {citation_count} locations, but the synthesis step could not "
            "turn them into a prospect list.",
            stage=PipelineStage.synthesis,
        )


class MalformedPayloadError(ProspectSearchError):
    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(
            "Could not parse the data returned by the AI. Please try again.",
            stage=PipelineStage.synthesis,
        )


class TransportFailureError(ProspectSearchError):
    def __init__(self, message: str, stage: PipelineStage, status_code: int = 502):
        super().__init__(message, stage=stage)
        self.status_code = status_code
