from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from retro.models.entities import AssessmentItemTypeEnum, AssessmentStatusEnum, UserEnum


class AssessmentItemInput(BaseModel):
    type: AssessmentItemTypeEnum
    text: str = Field(min_length=1, max_length=500)
    sort_order: int = Field(ge=0)


class AssessmentUpdate(BaseModel):
    # All keys are required: the client always resends the complete form.
    rating: int | None = Field(ge=1, le=5)
    would_do_again: bool | None
    biggest_ignored_risk: str | None = Field(max_length=1000)
    items: list[AssessmentItemInput]


class AssessmentItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    assessment_id: int
    type: AssessmentItemTypeEnum
    text: str
    sort_order: int


class AssessmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    decision_id: int
    user_id: UserEnum
    rating: int | None
    would_do_again: bool | None
    biggest_ignored_risk: str | None
    status: AssessmentStatusEnum
    created_at: datetime
    updated_at: datetime
    items: list[AssessmentItemResponse]


class AssessmentLockResponse(BaseModel):
    locked: bool


class AssessmentStatusResponse(BaseModel):
    a_locked: bool
    b_locked: bool


class AssessmentComparisonResponse(BaseModel):
    mine: AssessmentResponse
    partner: AssessmentResponse
