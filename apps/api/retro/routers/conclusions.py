from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from retro.core.auth import CallerContext, get_caller
from retro.core.db import get_db
from retro.schemas.conclusions import SharedConclusionResponse, SharedConclusionUpdate
from retro.services.conclusions import get_shared_conclusion, upsert_shared_conclusion

router = APIRouter(prefix="/v1/decisions/{decision_id}/conclusion", tags=["conclusions"])


@router.get("", response_model=SharedConclusionResponse | None)
def get_conclusion(
    decision_id: int,
    db: Session = Depends(get_db),
    _: CallerContext = Depends(get_caller),
):
    conclusion = get_shared_conclusion(db, decision_id)
    if conclusion is None:
        return None
    return SharedConclusionResponse.model_validate(conclusion, from_attributes=True)


@router.put("", response_model=SharedConclusionResponse)
def update_conclusion(
    decision_id: int,
    payload: SharedConclusionUpdate,
    db: Session = Depends(get_db),
    _: CallerContext = Depends(get_caller),
):
    conclusion = upsert_shared_conclusion(db, decision_id, payload.text)
    db.commit()
    db.refresh(conclusion)
    return SharedConclusionResponse.model_validate(conclusion, from_attributes=True)
