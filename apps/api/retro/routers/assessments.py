from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from retro.core.auth import CallerContext, get_caller
from retro.core.db import get_db
from retro.models.entities import Assessment
from retro.schemas.assessments import (
    AssessmentComparisonResponse,
    AssessmentLockResponse,
    AssessmentResponse,
    AssessmentStatusResponse,
    AssessmentUpdate,
)
from retro.services.assessments import (
    assessment_status,
    get_my_assessment,
    lock_my_assessment,
    update_my_assessment,
)
from retro.services.comparison import compare_assessments

router = APIRouter(prefix="/v1/decisions/{decision_id}/assessments", tags=["assessments"])


def _to_assessment_response(assessment: Assessment) -> AssessmentResponse:
    return AssessmentResponse.model_validate(assessment, from_attributes=True)


@router.get("/mine", response_model=AssessmentResponse | None)
def get_mine(
    decision_id: int,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    assessment = get_my_assessment(db, decision_id, caller.user_id)
    if assessment is None:
        return None
    return _to_assessment_response(assessment)


@router.put("/mine", response_model=AssessmentResponse)
def update_mine(
    decision_id: int,
    payload: AssessmentUpdate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    assessment = update_my_assessment(db, decision_id, caller.user_id, payload)
    db.commit()
    db.refresh(assessment)
    return _to_assessment_response(assessment)


@router.post("/mine/lock", response_model=AssessmentLockResponse)
def lock_mine(
    decision_id: int,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    lock_my_assessment(db, decision_id, caller.user_id)
    db.commit()
    return AssessmentLockResponse(locked=True)


@router.get("/status", response_model=AssessmentStatusResponse)
def get_status(
    decision_id: int,
    db: Session = Depends(get_db),
    _: CallerContext = Depends(get_caller),
):
    a_locked, b_locked = assessment_status(db, decision_id)
    return AssessmentStatusResponse(a_locked=a_locked, b_locked=b_locked)


@router.get("/compare", response_model=AssessmentComparisonResponse)
def compare(
    decision_id: int,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    comparison = compare_assessments(db, decision_id, caller.user_id)
    return AssessmentComparisonResponse(
        mine=_to_assessment_response(comparison.mine),
        partner=_to_assessment_response(comparison.partner),
    )
