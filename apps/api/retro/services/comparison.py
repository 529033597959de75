from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from retro.core.errors import NotFoundError
from retro.models.entities import Assessment, Responsibility, UserEnum
from retro.services.decisions import get_decision
from retro.services.gates import find_assessment, require_both_locked
from retro.services.responsibilities import find_responsibility

T = TypeVar("T")


@dataclass(frozen=True)
class Comparison(Generic[T]):
    """Caller-relative view over the two stored records of one decision."""

    mine: T
    partner: T


def compare_assessments(db: Session, decision_id: int, caller: UserEnum) -> Comparison[Assessment]:
    get_decision(db, decision_id)
    require_both_locked(db, decision_id)
    mine = find_assessment(db, decision_id, caller)
    partner = find_assessment(db, decision_id, caller.partner)
    if mine is None or partner is None:
        raise NotFoundError("both assessments must exist")
    return Comparison(mine=mine, partner=partner)


def compare_responsibilities(db: Session, decision_id: int, caller: UserEnum) -> Comparison[Responsibility]:
    get_decision(db, decision_id)
    require_both_locked(db, decision_id)
    mine = find_responsibility(db, decision_id, caller)
    partner = find_responsibility(db, decision_id, caller.partner)
    if mine is None or partner is None:
        raise NotFoundError("both responsibilities must exist")
    return Comparison(mine=mine, partner=partner)
