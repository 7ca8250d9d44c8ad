"""Classify a screening against today's date."""

from datetime import date

from screenwise.domain.models import ScreeningStatus
from screenwise.services.due_dates import add_months

DUE_SOON_MONTHS = 3


def classify_status(
    today: date,
    due_date: date,
    *,
    is_upcoming_band: bool = False,
    completed_today: bool = False,
    due_soon_months: int = DUE_SOON_MONTHS,
) -> ScreeningStatus:
    """
    overdue: due date has passed.
    due: due within the next ``due_soon_months`` calendar months (inclusive).
    upcoming: anything later, or the band itself has not started yet.
    completed: only right after an explicit completion, until the new due date elapses.
    """
    if completed_today and due_date >= today:
        return ScreeningStatus.COMPLETED
    if is_upcoming_band:
        return ScreeningStatus.UPCOMING
    if due_date < today:
        return ScreeningStatus.OVERDUE
    if due_date <= add_months(today, due_soon_months):
        return ScreeningStatus.DUE
    return ScreeningStatus.UPCOMING
