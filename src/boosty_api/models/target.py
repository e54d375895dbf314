"""Campaign target (goal) data models."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from boosty_api.models.common import ApiModel


class TargetType(str, Enum):
    MONEY = "money"
    SUBSCRIBERS = "subscribers"


class Target(ApiModel):
    id: int
    description: str = ""
    blogger_id: int | None = None
    blogger_url: str = ""
    priority: int = 0
    created_at: int | None = None
    target_sum: float = 0.0
    current_sum: float = 0.0
    finish_time: int | None = None
    type: str = TargetType.MONEY.value


class TargetResponse(ApiModel):
    data: list[Target] = Field(default_factory=list)
