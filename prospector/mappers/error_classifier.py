from prospector.schemas.pipeline import PipelineStage

# Case-sensitive hints, checked in order. Anything else is blamed on synthesis.
STAGE_HINTS: list[tuple[PipelineStage, tuple[str, ...]]] = [
    (PipelineStage.geospatial, ("Maps",)),
    (PipelineStage.search, ("Search",)),
]


def classify(error: BaseException | str) -> PipelineStage:
    """Guess which grounding stage an upstream failure came from.

    This sniffs the error text, so it is a heuristic: a typed failure from
    the retrieval client would be more reliable.
    """
    message = error if isinstance(error, str) else getattr(error, "message", None) or str(error)
    for stage, hints in STAGE_HINTS:
        if any(hint in message for hint in hints):
            return stage
    return PipelineStage.synthesis
