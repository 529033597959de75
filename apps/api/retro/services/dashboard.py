from __future__ import annotations

from sqlalchemy import and_, func, select
from sqlalchemy.orm import Session, aliased

from retro.models.entities import (
    Assessment,
    AssessmentStatusEnum,
    Decision,
    DecisionStatusEnum,
    MetaConclusion,
    MetaConclusionTypeEnum,
    UserEnum,
)


def decision_counts(db: Session) -> tuple[int, int, int]:
    rows = db.execute(select(Decision.status, func.count(Decision.id)).group_by(Decision.status)).all()
    by_status = {status: count for status, count in rows}
    total = sum(by_status.values())
    return (
        total,
        by_status.get(DecisionStatusEnum.approved, 0),
        by_status.get(DecisionStatusEnum.closed, 0),
    )


def _locked_pair():
    assessment_a = aliased(Assessment)
    assessment_b = aliased(Assessment)

    def _on(alias, user_id: UserEnum):
        return and_(
            alias.decision_id == Decision.id,
            alias.user_id == user_id,
            alias.status == AssessmentStatusEnum.locked,
        )

    return assessment_a, assessment_b, _on(assessment_a, UserEnum.a), _on(assessment_b, UserEnum.b)


def _revealed_decision_ids():
    """Decisions whose two assessments are both locked; only these may feed assessment figures."""
    assessment_a, assessment_b, on_a, on_b = _locked_pair()
    return select(Decision.id).join(assessment_a, on_a).join(assessment_b, on_b)


def rating_distribution(db: Session) -> list[tuple[int, int]]:
    rows = db.execute(
        select(Assessment.rating, func.count(Assessment.id))
        .where(
            Assessment.rating.is_not(None),
            Assessment.decision_id.in_(_revealed_decision_ids()),
        )
        .group_by(Assessment.rating)
        .order_by(Assessment.rating.asc())
    ).all()
    return [(int(rating), int(count)) for rating, count in rows]


def would_do_again_distribution(db: Session) -> list[tuple[bool, int]]:
    rows = db.execute(
        select(Assessment.would_do_again, func.count(Assessment.id))
        .where(
            Assessment.would_do_again.is_not(None),
            Assessment.decision_id.in_(_revealed_decision_ids()),
        )
        .group_by(Assessment.would_do_again)
        .order_by(Assessment.would_do_again.asc())
    ).all()
    return [(bool(value), int(count)) for value, count in rows]


def rating_differences(db: Session) -> list[dict]:
    assessment_a, assessment_b, on_a, on_b = _locked_pair()
    rows = db.execute(
        select(Decision.id, Decision.name, assessment_a.rating, assessment_b.rating)
        .join(assessment_a, on_a)
        .join(assessment_b, on_b)
        .order_by(Decision.id.asc())
    ).all()
    return [
        {
            "decision_id": decision_id,
            "name": name,
            "rating_a": rating_a,
            "rating_b": rating_b,
            "diff": abs(rating_a - rating_b),
        }
        for decision_id, name, rating_a, rating_b in rows
    ]


def meta_conclusion_counts(db: Session) -> list[tuple[MetaConclusionTypeEnum, int]]:
    rows = db.execute(
        select(MetaConclusion.type, func.count(MetaConclusion.id))
        .group_by(MetaConclusion.type)
        .order_by(MetaConclusion.type.asc())
    ).all()
    return [(meta_type, int(count)) for meta_type, count in rows]
