from pydantic import BaseModel

from prospector.schemas.search import Coordinates


class ToolConfig(BaseModel):
    tools: list[dict] = []
    location_bias: Coordinates | None = None


class QueryPlan(BaseModel):
    instruction: str
    prompt: str
    tool_config: ToolConfig
