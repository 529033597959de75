from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.orm import Session

from retro.models.entities import Responsibility, UserEnum
from retro.schemas.responsibilities import ResponsibilityUpdate
from retro.services.decisions import get_decision
from retro.services.gates import require_editable
from retro.services.upserts import insert_missing


def find_responsibility(db: Session, decision_id: int, user_id: UserEnum) -> Responsibility | None:
    return db.execute(
        select(Responsibility).where(Responsibility.decision_id == decision_id, Responsibility.user_id == user_id)
    ).scalar_one_or_none()


def get_my_responsibility(db: Session, decision_id: int, user_id: UserEnum) -> Responsibility | None:
    get_decision(db, decision_id)
    return find_responsibility(db, decision_id, user_id)


def update_my_responsibility(
    db: Session, decision_id: int, user_id: UserEnum, payload: ResponsibilityUpdate
) -> Responsibility:
    get_decision(db, decision_id)
    require_editable(db, decision_id, user_id)

    now = datetime.now(timezone.utc)
    responsibility = find_responsibility(db, decision_id, user_id)
    if responsibility is None:
        insert_missing(
            db, Responsibility, {"decision_id": decision_id, "user_id": user_id}, created_at=now, updated_at=now
        )
        responsibility = find_responsibility(db, decision_id, user_id)

    responsibility.brought_topic = payload.brought_topic
    responsibility.pushed_execution = payload.pushed_execution
    responsibility.main_burden = payload.main_burden
    responsibility.updated_at = now
    db.flush()
    return responsibility
