from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from retro.core.auth import CallerContext, get_caller
from retro.core.db import get_db
from retro.models.entities import MetaConclusion
from retro.schemas.conclusions import (
    MetaConclusionCreate,
    MetaConclusionListResponse,
    MetaConclusionResponse,
    MetaConclusionUpdate,
)
from retro.services.conclusions import (
    create_meta_conclusion,
    delete_meta_conclusion,
    list_meta_conclusions,
    update_meta_conclusion,
)

router = APIRouter(prefix="/v1/meta-conclusions", tags=["meta-conclusions"])


def _to_meta_response(meta: MetaConclusion) -> MetaConclusionResponse:
    return MetaConclusionResponse.model_validate(meta, from_attributes=True)


@router.get("", response_model=MetaConclusionListResponse)
def list_all(
    db: Session = Depends(get_db),
    _: CallerContext = Depends(get_caller),
):
    return MetaConclusionListResponse(items=[_to_meta_response(item) for item in list_meta_conclusions(db)])


@router.post("", response_model=MetaConclusionResponse, status_code=201)
def create(
    payload: MetaConclusionCreate,
    db: Session = Depends(get_db),
    _: CallerContext = Depends(get_caller),
):
    meta = create_meta_conclusion(db, payload)
    db.commit()
    db.refresh(meta)
    return _to_meta_response(meta)


@router.patch("/{meta_id}", response_model=MetaConclusionResponse)
def update(
    meta_id: int,
    payload: MetaConclusionUpdate,
    db: Session = Depends(get_db),
    _: CallerContext = Depends(get_caller),
):
    meta = update_meta_conclusion(db, meta_id, payload)
    db.commit()
    db.refresh(meta)
    return _to_meta_response(meta)


@router.delete("/{meta_id}", status_code=204)
def delete(
    meta_id: int,
    db: Session = Depends(get_db),
    _: CallerContext = Depends(get_caller),
):
    delete_meta_conclusion(db, meta_id)
    db.commit()
