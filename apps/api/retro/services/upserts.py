"""
Row creation for the one-per-key records (assessment, responsibility, shared conclusion).

``insert_missing`` creates the row with ``INSERT ... ON CONFLICT DO NOTHING`` on its
unique key. When two first saves overlap, the second insert is a no-op and both
writers go on to update the same row, so the later commit wins.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def insert_missing(db: Session, model: type, key: dict[str, Any], **values: Any) -> None:
    insert = _INSERTS[db.get_bind().dialect.name]
    stmt = insert(model).values(**key, **values).on_conflict_do_nothing(index_elements=list(key))
    db.execute(stmt)
