from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from retro.core.errors import InvalidStateError, NotFoundError
from retro.models.entities import Decision, DecisionStatusEnum, UserEnum
from retro.schemas.decisions import DecisionCreate

logger = logging.getLogger(__name__)


def _approval_column(user_id: UserEnum):
    return Decision.approved_by_a if user_id == UserEnum.a else Decision.approved_by_b


def list_decisions(db: Session) -> list[Decision]:
    return list(db.execute(select(Decision).order_by(Decision.created_at.desc(), Decision.id.desc())).scalars().all())


def get_decision(db: Session, decision_id: int) -> Decision:
    decision = db.get(Decision, decision_id)
    if decision is None:
        raise NotFoundError("decision not found")
    return decision


def create_decision(db: Session, payload: DecisionCreate, creator: UserEnum) -> Decision:
    now = datetime.now(timezone.utc)
    decision = Decision(
        name=payload.name,
        period=payload.period,
        context=payload.context,
        financial_scale=payload.financial_scale,
        emotional_impact=payload.emotional_impact,
        status=DecisionStatusEnum.proposal,
        approved_by_a=False,
        approved_by_b=False,
        created_by=creator,
        created_at=now,
        updated_at=now,
    )
    db.add(decision)
    db.flush()
    logger.info("decision %s proposed by %s", decision.id, creator.value)
    # The creator approves their own proposal through the regular approval path.
    return approve_decision(db, decision.id, creator)


def approve_decision(db: Session, decision_id: int, user_id: UserEnum) -> Decision:
    """
    Record ``user_id``'s approval and promote the decision once both flags are set.

    Both writes are conditional on ``status == proposal``.
    """
    decision = get_decision(db, decision_id)
    if decision.status != DecisionStatusEnum.proposal:
        raise InvalidStateError("decision is not a proposal")

    now = datetime.now(timezone.utc)
    flagged = db.execute(
        update(Decision)
        .where(Decision.id == decision_id, Decision.status == DecisionStatusEnum.proposal)
        .values({_approval_column(user_id): True, Decision.updated_at: now})
        .execution_options(synchronize_session=False)
    )
    if flagged.rowcount == 0:
        raise InvalidStateError("decision is not a proposal")

    promoted = db.execute(
        update(Decision)
        .where(
            Decision.id == decision_id,
            Decision.status == DecisionStatusEnum.proposal,
            Decision.approved_by_a.is_(True),
            Decision.approved_by_b.is_(True),
        )
        .values(status=DecisionStatusEnum.approved, updated_at=now)
        .execution_options(synchronize_session=False)
    )
    db.refresh(decision)
    if promoted.rowcount:
        logger.info("decision %s approved by both parties", decision_id)
    return decision


def close_decision(db: Session, decision_id: int) -> Decision:
    decision = get_decision(db, decision_id)
    if decision.status != DecisionStatusEnum.approved:
        raise InvalidStateError("only approved decisions can be closed")

    closed = db.execute(
        update(Decision)
        .where(Decision.id == decision_id, Decision.status == DecisionStatusEnum.approved)
        .values(status=DecisionStatusEnum.closed, updated_at=datetime.now(timezone.utc))
        .execution_options(synchronize_session=False)
    )
    if closed.rowcount == 0:
        raise InvalidStateError("only approved decisions can be closed")
    db.refresh(decision)
    logger.info("decision %s closed", decision_id)
    return decision
