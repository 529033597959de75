from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from retro.core.auth import CallerContext, get_caller
from retro.core.db import get_db
from retro.models.entities import Responsibility
from retro.schemas.responsibilities import (
    ResponsibilityComparisonResponse,
    ResponsibilityResponse,
    ResponsibilityUpdate,
)
from retro.services.comparison import compare_responsibilities
from retro.services.responsibilities import get_my_responsibility, update_my_responsibility

router = APIRouter(prefix="/v1/decisions/{decision_id}/responsibilities", tags=["responsibilities"])


def _to_responsibility_response(responsibility: Responsibility) -> ResponsibilityResponse:
    return ResponsibilityResponse.model_validate(responsibility, from_attributes=True)


@router.get("/mine", response_model=ResponsibilityResponse | None)
def get_mine(
    decision_id: int,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    responsibility = get_my_responsibility(db, decision_id, caller.user_id)
    if responsibility is None:
        return None
    return _to_responsibility_response(responsibility)


@router.put("/mine", response_model=ResponsibilityResponse)
def update_mine(
    decision_id: int,
    payload: ResponsibilityUpdate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    responsibility = update_my_responsibility(db, decision_id, caller.user_id, payload)
    db.commit()
    db.refresh(responsibility)
    return _to_responsibility_response(responsibility)


@router.get("/compare", response_model=ResponsibilityComparisonResponse)
def compare(
    decision_id: int,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    comparison = compare_responsibilities(db, decision_id, caller.user_id)
    return ResponsibilityComparisonResponse(
        mine=_to_responsibility_response(comparison.mine),
        partner=_to_responsibility_response(comparison.partner),
    )
