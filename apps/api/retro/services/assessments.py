from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import update
from sqlalchemy.orm import Session

from retro.core.errors import InvalidStateError, NotFoundError
from retro.models.entities import (
    Assessment,
    AssessmentItem,
    AssessmentItemTypeEnum,
    AssessmentStatusEnum,
    DecisionStatusEnum,
    UserEnum,
)
from retro.schemas.assessments import AssessmentUpdate
from retro.services.completeness import assessment_completeness_errors
from retro.services.decisions import get_decision
from retro.services.gates import find_assessment, lock_status, require_editable
from retro.services.responsibilities import find_responsibility
from retro.services.upserts import insert_missing

logger = logging.getLogger(__name__)


def get_my_assessment(db: Session, decision_id: int, user_id: UserEnum) -> Assessment | None:
    get_decision(db, decision_id)
    return find_assessment(db, decision_id, user_id)


def update_my_assessment(db: Session, decision_id: int, user_id: UserEnum, payload: AssessmentUpdate) -> Assessment:
    decision = get_decision(db, decision_id)
    if decision.status != DecisionStatusEnum.approved:
        raise InvalidStateError("decision must be approved before it can be assessed")

    assessment = require_editable(db, decision_id, user_id)
    now = datetime.now(timezone.utc)
    if assessment is None:
        insert_missing(
            db, Assessment, {"decision_id": decision_id, "user_id": user_id}, created_at=now, updated_at=now
        )
        assessment = require_editable(db, decision_id, user_id)

    assessment.rating = payload.rating
    assessment.would_do_again = payload.would_do_again
    assessment.biggest_ignored_risk = payload.biggest_ignored_risk
    assessment.updated_at = now
    # Full replacement in display order; orphaned items are deleted in the same flush.
    assessment.items = [
        AssessmentItem(type=item.type, text=item.text, sort_order=item.sort_order)
        for item in sorted(payload.items, key=lambda item: item.sort_order)
    ]
    db.flush()
    return assessment


def lock_my_assessment(db: Session, decision_id: int, user_id: UserEnum) -> None:
    get_decision(db, decision_id)
    assessment = find_assessment(db, decision_id, user_id, for_update=True)
    if assessment is None:
        raise NotFoundError("fill in the assessment first")
    if assessment.is_locked:
        raise InvalidStateError("assessment is already locked")

    responsibility = find_responsibility(db, decision_id, user_id)
    errors = assessment_completeness_errors(
        rating=assessment.rating,
        would_do_again=assessment.would_do_again,
        biggest_ignored_risk=assessment.biggest_ignored_risk,
        pros_count=sum(1 for item in assessment.items if item.type == AssessmentItemTypeEnum.pro),
        cons_count=sum(1 for item in assessment.items if item.type == AssessmentItemTypeEnum.con),
        responsibility_complete=responsibility is not None and responsibility.is_complete,
    )
    if errors:
        raise InvalidStateError("; ".join(errors), reasons=errors)

    locked = db.execute(
        update(Assessment)
        .where(Assessment.id == assessment.id, Assessment.status == AssessmentStatusEnum.editable)
        .values(status=AssessmentStatusEnum.locked, updated_at=datetime.now(timezone.utc))
        .execution_options(synchronize_session=False)
    )
    if locked.rowcount == 0:
        raise InvalidStateError("assessment is already locked")
    db.refresh(assessment)
    logger.info("assessment for decision %s locked by %s", decision_id, user_id.value)


def assessment_status(db: Session, decision_id: int) -> tuple[bool, bool]:
    get_decision(db, decision_id)
    return lock_status(db, decision_id)
