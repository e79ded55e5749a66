from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class PipelineStage(StrEnum):
    geospatial = "geospatial"
    search = "search"
    synthesis = "synthesis"


class StageStatus(StrEnum):
    idle = "idle"
    processing = "processing"
    success = "success"
    error = "error"


# Execution order of the grounded retrieval.
STAGE_ORDER = (PipelineStage.geospatial, PipelineStage.search, PipelineStage.synthesis)


class PipelineStatus(BaseModel):
    """Per-stage diagnostic display of a single search."""

    geospatial: StageStatus = StageStatus.idle
    search: StageStatus = StageStatus.idle
    synthesis: StageStatus = StageStatus.idle

    @classmethod
    def started(cls) -> PipelineStatus:
        return cls(**{stage.value: StageStatus.processing for stage in STAGE_ORDER})

    @classmethod
    def completed(cls) -> PipelineStatus:
        return cls(**{stage.value: StageStatus.success for stage in STAGE_ORDER})

    def failed_at(self, stage: PipelineStage) -> PipelineStatus:
        """Mark ``stage`` failed; earlier stages ran, later ones keep their state."""
        updates: dict[str, StageStatus] = {}
        for current in STAGE_ORDER:
            if current == stage:
                updates[current.value] = StageStatus.error
                break
            updates[current.value] = StageStatus.success
        return self.model_copy(update=updates)
