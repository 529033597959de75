from __future__ import annotations

RATING_REQUIRED = "rating is required"
WOULD_DO_AGAIN_REQUIRED = "would_do_again must be answered yes or no"
RISK_REQUIRED = "biggest ignored risk is required"
PRO_REQUIRED = "at least one pro is required"
CON_REQUIRED = "at least one con is required"
RESPONSIBILITY_REQUIRED = "responsibility must be filled in before locking"


def assessment_completeness_errors(
    *,
    rating: int | None,
    would_do_again: bool | None,
    biggest_ignored_risk: str | None,
    pros_count: int,
    cons_count: int,
    responsibility_complete: bool,
) -> list[str]:
    """
    Returns every reason the assessment cannot be locked yet. Empty list means OK.
    """
    errors: list[str] = []
    if rating is None:
        errors.append(RATING_REQUIRED)
    if would_do_again is None:
        errors.append(WOULD_DO_AGAIN_REQUIRED)
    if not (biggest_ignored_risk or "").strip():
        errors.append(RISK_REQUIRED)
    if pros_count == 0:
        errors.append(PRO_REQUIRED)
    if cons_count == 0:
        errors.append(CON_REQUIRED)
    if not responsibility_complete:
        errors.append(RESPONSIBILITY_REQUIRED)
    return errors
