from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from mirrorstream.models.media import StreamDescriptor


# ===========================
# Resolution Stages
# ===========================
Stage = Literal["metadata", "search", "match", "auth", "details", "season", "episodes", "episode"]


# ===========================
# Resolution Outcomes
# ===========================
class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    stream: StreamDescriptor


class Empty(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["empty"] = "empty"
    reason: str


# Upstream network failure at a given stage
class Fault(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["fault"] = "fault"
    stage: Stage
    reason: str


ResolutionResult = Union[Success, Empty, Fault]
