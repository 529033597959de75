from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from retro.models.entities import MetaConclusionTypeEnum


class GlobalStatusResponse(BaseModel):
    total_decisions: int
    approved_decisions: int
    closed_decisions: int
    partner_last_seen: datetime | None


class RatingBucket(BaseModel):
    rating: int
    count: int


class WouldDoAgainBucket(BaseModel):
    would_do_again: bool
    count: int


class RatingDiff(BaseModel):
    decision_id: int
    name: str
    rating_a: int
    rating_b: int
    diff: int


class MetaConclusionCount(BaseModel):
    type: MetaConclusionTypeEnum
    count: int


class DashboardResponse(BaseModel):
    total_decisions: int
    approved_decisions: int
    ratings: list[RatingBucket]
    would_do_again: list[WouldDoAgainBucket]
    rating_diffs: list[RatingDiff]
    meta_counts: list[MetaConclusionCount]
