"""initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


ENUMS = {
    "userenum": ("A", "B"),
    "decisionstatusenum": ("proposal", "approved", "closed"),
    "assessmentstatusenum": ("editable", "locked"),
    "assessmentitemtypeenum": ("pro", "con"),
    "burdenenum": ("me", "partner", "both", "dont_remember"),
    "metaconclusiontypeenum": ("bias", "rule", "red_flag"),
}


def _enum(name: str) -> sa.Enum:
    # Postgres types are created once up front and shared between tables.
    values = ENUMS[name]
    return sa.Enum(*values, name=name).with_variant(
        postgresql.ENUM(*values, name=name, create_type=False), "postgresql"
    )


user_enum = _enum("userenum")
burden_enum = _enum("burdenenum")


def upgrade() -> None:
    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        for name, values in ENUMS.items():
            postgresql.ENUM(*values, name=name).create(bind, checkfirst=True)

    op.create_table(
        "decisions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("period", sa.String(length=100), nullable=False),
        sa.Column("context", sa.Text(), nullable=False),
        sa.Column("financial_scale", sa.String(length=200), nullable=False),
        sa.Column("emotional_impact", sa.String(length=500), nullable=False),
        sa.Column(
            "status",
            _enum("decisionstatusenum"),
            nullable=False,
            server_default="proposal",
        ),
        sa.Column("approved_by_a", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("approved_by_b", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_by", user_enum, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_decisions_status", "decisions", ["status"])
    op.create_index("ix_decisions_created_at", "decisions", ["created_at"])

    op.create_table(
        "assessments",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("decision_id", sa.Integer(), sa.ForeignKey("decisions.id"), nullable=False),
        sa.Column("user_id", user_enum, nullable=False),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("would_do_again", sa.Boolean(), nullable=True),
        sa.Column("biggest_ignored_risk", sa.Text(), nullable=True),
        sa.Column(
            "status",
            _enum("assessmentstatusenum"),
            nullable=False,
            server_default="editable",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("decision_id", "user_id", name="uq_assessments_decision_user"),
        sa.CheckConstraint("rating IS NULL OR (rating >= 1 AND rating <= 5)", name="ck_assessment_rating_range"),
    )

    op.create_table(
        "assessment_items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "assessment_id",
            sa.Integer(),
            sa.ForeignKey("assessments.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("type", _enum("assessmentitemtypeenum"), nullable=False),
        sa.Column("text", sa.String(length=500), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_assessment_items_assessment_type", "assessment_items", ["assessment_id", "type"])

    op.create_table(
        "responsibilities",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("decision_id", sa.Integer(), sa.ForeignKey("decisions.id"), nullable=False),
        sa.Column("user_id", user_enum, nullable=False),
        sa.Column("brought_topic", burden_enum, nullable=True),
        sa.Column("pushed_execution", burden_enum, nullable=True),
        sa.Column("main_burden", burden_enum, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("decision_id", "user_id", name="uq_responsibilities_decision_user"),
    )

    op.create_table(
        "shared_conclusions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("decision_id", sa.Integer(), sa.ForeignKey("decisions.id"), nullable=False, unique=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "meta_conclusions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("type", _enum("metaconclusiontypeenum"), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_meta_conclusions_created_at", "meta_conclusions", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_meta_conclusions_created_at", table_name="meta_conclusions")
    op.drop_table("meta_conclusions")
    op.drop_table("shared_conclusions")
    op.drop_table("responsibilities")
    op.drop_index("ix_assessment_items_assessment_type", table_name="assessment_items")
    op.drop_table("assessment_items")
    op.drop_table("assessments")
    op.drop_index("ix_decisions_created_at", table_name="decisions")
    op.drop_index("ix_decisions_status", table_name="decisions")
    op.drop_table("decisions")
    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        for name in reversed(list(ENUMS)):
            postgresql.ENUM(name=name).drop(bind, checkfirst=True)
