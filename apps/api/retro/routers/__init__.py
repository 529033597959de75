from retro.routers import (
    assessments,
    conclusions,
    decisions,
    health,
    meta_conclusions,
    responsibilities,
    status,
)

__all__ = [
    "health",
    "decisions",
    "assessments",
    "responsibilities",
    "conclusions",
    "meta_conclusions",
    "status",
]
