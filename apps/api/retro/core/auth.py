from __future__ import annotations

from dataclasses import dataclass

from fastapi import Header, HTTPException

from retro.models.entities import UserEnum


@dataclass(frozen=True)
class CallerContext:
    user_id: UserEnum

    @property
    def partner_id(self) -> UserEnum:
        return self.user_id.partner


def get_caller(
    x_user_id: str | None = Header(default=None, alias="X-User-Id"),
) -> CallerContext:
    """
    Identity boundary.

    The two parties identify themselves with X-User-Id set to exactly "A" or "B".
    Anything else (missing, lowercase, a third value) is rejected.
    """
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="missing auth header (X-User-Id: A or B)")
    try:
        user_id = UserEnum(x_user_id)
    except ValueError:
        raise HTTPException(status_code=401, detail="X-User-Id must be A or B") from None
    return CallerContext(user_id=user_id)
