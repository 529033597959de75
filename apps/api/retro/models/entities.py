from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Enum as SqlEnum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from retro.models.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserEnum(str, Enum):
    a = "A"
    b = "B"

    @property
    def partner(self) -> "UserEnum":
        return UserEnum.b if self is UserEnum.a else UserEnum.a


class DecisionStatusEnum(str, Enum):
    proposal = "proposal"
    approved = "approved"
    closed = "closed"


class AssessmentStatusEnum(str, Enum):
    editable = "editable"
    locked = "locked"


class AssessmentItemTypeEnum(str, Enum):
    pro = "pro"
    con = "con"


class BurdenEnum(str, Enum):
    me = "me"
    partner = "partner"
    both = "both"
    dont_remember = "dont_remember"


class MetaConclusionTypeEnum(str, Enum):
    bias = "bias"
    rule = "rule"
    red_flag = "red_flag"


def _values_enum(enum_cls: type[Enum], name: str) -> SqlEnum:
    return SqlEnum(enum_cls, name=name, values_callable=lambda cls: [item.value for item in cls])


user_sql_enum = _values_enum(UserEnum, "userenum")
burden_sql_enum = _values_enum(BurdenEnum, "burdenenum")


class Decision(Base):
    __tablename__ = "decisions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    period: Mapped[str] = mapped_column(String(100), nullable=False)
    context: Mapped[str] = mapped_column(Text, nullable=False)
    financial_scale: Mapped[str] = mapped_column(String(200), nullable=False)
    emotional_impact: Mapped[str] = mapped_column(String(500), nullable=False)
    status: Mapped[DecisionStatusEnum] = mapped_column(
        _values_enum(DecisionStatusEnum, "decisionstatusenum"), default=DecisionStatusEnum.proposal, nullable=False
    )
    approved_by_a: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    approved_by_b: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_by: Mapped[UserEnum] = mapped_column(user_sql_enum, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)


class Assessment(Base):
    __tablename__ = "assessments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    decision_id: Mapped[int] = mapped_column(ForeignKey("decisions.id"), nullable=False)
    user_id: Mapped[UserEnum] = mapped_column(user_sql_enum, nullable=False)
    rating: Mapped[int | None] = mapped_column(Integer)
    would_do_again: Mapped[bool | None] = mapped_column(Boolean)
    biggest_ignored_risk: Mapped[str | None] = mapped_column(Text)
    status: Mapped[AssessmentStatusEnum] = mapped_column(
        _values_enum(AssessmentStatusEnum, "assessmentstatusenum"),
        default=AssessmentStatusEnum.editable,
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)

    items: Mapped[list["AssessmentItem"]] = relationship(
        back_populates="assessment",
        cascade="all, delete-orphan",
        order_by=lambda: [AssessmentItem.sort_order, AssessmentItem.id],
    )

    __table_args__ = (
        UniqueConstraint("decision_id", "user_id", name="uq_assessments_decision_user"),
        CheckConstraint("rating IS NULL OR (rating >= 1 AND rating <= 5)", name="ck_assessment_rating_range"),
    )

    @property
    def is_locked(self) -> bool:
        return self.status == AssessmentStatusEnum.locked


class AssessmentItem(Base):
    __tablename__ = "assessment_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    assessment_id: Mapped[int] = mapped_column(ForeignKey("assessments.id", ondelete="CASCADE"), nullable=False)
    type: Mapped[AssessmentItemTypeEnum] = mapped_column(
        _values_enum(AssessmentItemTypeEnum, "assessmentitemtypeenum"), nullable=False
    )
    text: Mapped[str] = mapped_column(String(500), nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    assessment: Mapped[Assessment] = relationship(back_populates="items")


class Responsibility(Base):
    __tablename__ = "responsibilities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    decision_id: Mapped[int] = mapped_column(ForeignKey("decisions.id"), nullable=False)
    user_id: Mapped[UserEnum] = mapped_column(user_sql_enum, nullable=False)
    brought_topic: Mapped[BurdenEnum | None] = mapped_column(burden_sql_enum)
    pushed_execution: Mapped[BurdenEnum | None] = mapped_column(burden_sql_enum)
    main_burden: Mapped[BurdenEnum | None] = mapped_column(burden_sql_enum)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("decision_id", "user_id", name="uq_responsibilities_decision_user"),)

    @property
    def is_complete(self) -> bool:
        return None not in (self.brought_topic, self.pushed_execution, self.main_burden)


class SharedConclusion(Base):
    __tablename__ = "shared_conclusions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    decision_id: Mapped[int] = mapped_column(ForeignKey("decisions.id"), nullable=False, unique=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)


class MetaConclusion(Base):
    __tablename__ = "meta_conclusions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    type: Mapped[MetaConclusionTypeEnum] = mapped_column(
        _values_enum(MetaConclusionTypeEnum, "metaconclusiontypeenum"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow, nullable=False)


Index("ix_decisions_status", Decision.status)
Index("ix_decisions_created_at", Decision.created_at)
Index("ix_assessment_items_assessment_type", AssessmentItem.assessment_id, AssessmentItem.type)
Index("ix_meta_conclusions_created_at", MetaConclusion.created_at)
