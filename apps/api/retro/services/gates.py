"""
Lock-driven access rules.

Edit gate: a party may change their assessment or responsibility only while their
own assessment is not locked. Responsibility has no lock of its own.

Reveal gate: partner data is readable only once both assessments are locked. It is
evaluated against the store on every call, never cached.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from retro.core.errors import ForbiddenError
from retro.models.entities import Assessment, AssessmentStatusEnum, UserEnum


def find_assessment(db: Session, decision_id: int, user_id: UserEnum, *, for_update: bool = False) -> Assessment | None:
    query = select(Assessment).where(Assessment.decision_id == decision_id, Assessment.user_id == user_id)
    if for_update:
        query = query.with_for_update()
    return db.execute(query).scalar_one_or_none()


def require_editable(db: Session, decision_id: int, user_id: UserEnum) -> Assessment | None:
    assessment = find_assessment(db, decision_id, user_id, for_update=True)
    if assessment is not None and assessment.is_locked:
        raise ForbiddenError("assessment is locked")
    return assessment


def lock_status(db: Session, decision_id: int) -> tuple[bool, bool]:
    locked = set(
        db.execute(
            select(Assessment.user_id).where(
                Assessment.decision_id == decision_id,
                Assessment.status == AssessmentStatusEnum.locked,
            )
        ).scalars().all()
    )
    return UserEnum.a in locked, UserEnum.b in locked


def both_locked(db: Session, decision_id: int) -> bool:
    a_locked, b_locked = lock_status(db, decision_id)
    return a_locked and b_locked


def require_both_locked(db: Session, decision_id: int) -> None:
    if not both_locked(db, decision_id):
        raise ForbiddenError("both assessments must be locked")
