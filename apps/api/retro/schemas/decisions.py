from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from retro.models.entities import DecisionStatusEnum, UserEnum


class DecisionCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    period: str = Field(min_length=1, max_length=100)
    context: str = Field(min_length=1, max_length=2000)
    financial_scale: str = Field(min_length=1, max_length=200)
    emotional_impact: str = Field(min_length=1, max_length=500)


class DecisionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    period: str
    context: str
    financial_scale: str
    emotional_impact: str
    status: DecisionStatusEnum
    approved_by_a: bool
    approved_by_b: bool
    created_by: UserEnum
    created_at: datetime
    updated_at: datetime


class DecisionListResponse(BaseModel):
    items: list[DecisionResponse]
