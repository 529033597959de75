from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from retro.models.entities import MetaConclusionTypeEnum


class SharedConclusionUpdate(BaseModel):
    text: str = Field(min_length=1, max_length=5000)


class SharedConclusionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    decision_id: int
    text: str
    created_at: datetime
    updated_at: datetime


class MetaConclusionCreate(BaseModel):
    type: MetaConclusionTypeEnum
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=2000)


class MetaConclusionUpdate(BaseModel):
    type: MetaConclusionTypeEnum | None = None
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1, max_length=2000)


class MetaConclusionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: MetaConclusionTypeEnum
    title: str
    description: str
    created_at: datetime
    updated_at: datetime


class MetaConclusionListResponse(BaseModel):
    items: list[MetaConclusionResponse]
