from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from retro.core.auth import CallerContext, get_caller
from retro.core.db import get_db
from retro.schemas.status import (
    DashboardResponse,
    GlobalStatusResponse,
    MetaConclusionCount,
    RatingBucket,
    RatingDiff,
    WouldDoAgainBucket,
)
from retro.services import presence
from retro.services.dashboard import (
    decision_counts,
    meta_conclusion_counts,
    rating_differences,
    rating_distribution,
    would_do_again_distribution,
)

router = APIRouter(prefix="/v1/status", tags=["status"])


@router.get("", response_model=GlobalStatusResponse)
def get_global_status(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """
    Polled by both clients every few seconds; doubles as the caller's presence heartbeat.
    """
    presence.mark_seen(caller.user_id)
    total, approved, closed = decision_counts(db)
    return GlobalStatusResponse(
        total_decisions=total,
        approved_decisions=approved,
        closed_decisions=closed,
        partner_last_seen=presence.last_seen(caller.partner_id),
    )


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    db: Session = Depends(get_db),
    _: CallerContext = Depends(get_caller),
):
    total, approved, closed = decision_counts(db)
    return DashboardResponse(
        total_decisions=total,
        approved_decisions=approved + closed,
        ratings=[RatingBucket(rating=rating, count=count) for rating, count in rating_distribution(db)],
        would_do_again=[
            WouldDoAgainBucket(would_do_again=value, count=count) for value, count in would_do_again_distribution(db)
        ],
        rating_diffs=[RatingDiff(**row) for row in rating_differences(db)],
        meta_counts=[MetaConclusionCount(type=meta_type, count=count) for meta_type, count in meta_conclusion_counts(db)],
    )
