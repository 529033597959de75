from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from retro.core.errors import NotFoundError
from retro.models.entities import MetaConclusion, SharedConclusion
from retro.schemas.conclusions import MetaConclusionCreate, MetaConclusionUpdate
from retro.services.decisions import get_decision
from retro.services.gates import require_both_locked
from retro.services.upserts import insert_missing

logger = logging.getLogger(__name__)


def find_shared_conclusion(db: Session, decision_id: int, *, for_update: bool = False) -> SharedConclusion | None:
    query = select(SharedConclusion).where(SharedConclusion.decision_id == decision_id)
    if for_update:
        query = query.with_for_update()
    return db.execute(query).scalar_one_or_none()


def get_shared_conclusion(db: Session, decision_id: int) -> SharedConclusion | None:
    get_decision(db, decision_id)
    require_both_locked(db, decision_id)
    return find_shared_conclusion(db, decision_id)


def upsert_shared_conclusion(db: Session, decision_id: int, text: str) -> SharedConclusion:
    get_decision(db, decision_id)
    require_both_locked(db, decision_id)
    now = datetime.now(timezone.utc)
    conclusion = find_shared_conclusion(db, decision_id, for_update=True)
    if conclusion is None:
        insert_missing(db, SharedConclusion, {"decision_id": decision_id}, text=text, created_at=now, updated_at=now)
        conclusion = find_shared_conclusion(db, decision_id, for_update=True)
    conclusion.text = text
    conclusion.updated_at = now
    db.flush()
    logger.info("shared conclusion for decision %s written", decision_id)
    return conclusion


def list_meta_conclusions(db: Session) -> list[MetaConclusion]:
    return list(
        db.execute(
            select(MetaConclusion).order_by(MetaConclusion.created_at.desc(), MetaConclusion.id.desc())
        ).scalars().all()
    )


def get_meta_conclusion(db: Session, meta_id: int) -> MetaConclusion:
    meta = db.get(MetaConclusion, meta_id)
    if meta is None:
        raise NotFoundError("meta conclusion not found")
    return meta


def create_meta_conclusion(db: Session, payload: MetaConclusionCreate) -> MetaConclusion:
    now = datetime.now(timezone.utc)
    meta = MetaConclusion(
        type=payload.type,
        title=payload.title,
        description=payload.description,
        created_at=now,
        updated_at=now,
    )
    db.add(meta)
    db.flush()
    return meta


def update_meta_conclusion(db: Session, meta_id: int, payload: MetaConclusionUpdate) -> MetaConclusion:
    meta = get_meta_conclusion(db, meta_id)
    if payload.type is not None:
        meta.type = payload.type
    if payload.title is not None:
        meta.title = payload.title
    if payload.description is not None:
        meta.description = payload.description
    meta.updated_at = datetime.now(timezone.utc)
    db.flush()
    return meta


def delete_meta_conclusion(db: Session, meta_id: int) -> None:
    meta = get_meta_conclusion(db, meta_id)
    db.delete(meta)
    db.flush()
