from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from retro.core.auth import CallerContext, get_caller
from retro.core.db import get_db
from retro.models.entities import Decision
from retro.schemas.decisions import DecisionCreate, DecisionListResponse, DecisionResponse
from retro.services.decisions import (
    approve_decision,
    close_decision,
    create_decision,
    get_decision,
    list_decisions,
)

router = APIRouter(prefix="/v1/decisions", tags=["decisions"])


def _to_decision_response(decision: Decision) -> DecisionResponse:
    return DecisionResponse.model_validate(decision, from_attributes=True)


@router.get("", response_model=DecisionListResponse)
def list_all_decisions(
    db: Session = Depends(get_db),
    _: CallerContext = Depends(get_caller),
):
    return DecisionListResponse(items=[_to_decision_response(item) for item in list_decisions(db)])


@router.post("", response_model=DecisionResponse, status_code=201)
def propose_decision(
    payload: DecisionCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    decision = create_decision(db, payload, caller.user_id)
    db.commit()
    db.refresh(decision)
    return _to_decision_response(decision)


@router.get("/{decision_id}", response_model=DecisionResponse)
def get_one_decision(
    decision_id: int,
    db: Session = Depends(get_db),
    _: CallerContext = Depends(get_caller),
):
    return _to_decision_response(get_decision(db, decision_id))


@router.post("/{decision_id}/approve", response_model=DecisionResponse)
def approve(
    decision_id: int,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    decision = approve_decision(db, decision_id, caller.user_id)
    db.commit()
    db.refresh(decision)
    return _to_decision_response(decision)


@router.post("/{decision_id}/close", response_model=DecisionResponse)
def close(
    decision_id: int,
    db: Session = Depends(get_db),
    _: CallerContext = Depends(get_caller),
):
    decision = close_decision(db, decision_id)
    db.commit()
    db.refresh(decision)
    return _to_decision_response(decision)
