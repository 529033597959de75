from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from retro.models.entities import BurdenEnum, UserEnum


class ResponsibilityUpdate(BaseModel):
    brought_topic: BurdenEnum | None
    pushed_execution: BurdenEnum | None
    main_burden: BurdenEnum | None


class ResponsibilityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    decision_id: int
    user_id: UserEnum
    brought_topic: BurdenEnum | None
    pushed_execution: BurdenEnum | None
    main_burden: BurdenEnum | None
    created_at: datetime
    updated_at: datetime


class ResponsibilityComparisonResponse(BaseModel):
    mine: ResponsibilityResponse
    partner: ResponsibilityResponse
