from __future__ import annotations

import threading
from datetime import datetime, timezone

from retro.models.entities import UserEnum

# Process-local and not persisted; a restart simply forgets who was seen when.
_last_seen_lock = threading.Lock()
_last_seen: dict[UserEnum, datetime] = {}


def mark_seen(user_id: UserEnum, at: datetime | None = None) -> datetime:
    seen_at = at or datetime.now(timezone.utc)
    with _last_seen_lock:
        _last_seen[user_id] = seen_at
    return seen_at


def last_seen(user_id: UserEnum) -> datetime | None:
    with _last_seen_lock:
        return _last_seen.get(user_id)


def reset() -> None:
    with _last_seen_lock:
        _last_seen.clear()
