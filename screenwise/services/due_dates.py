"""
Due-date arithmetic for screening schedules.

All arithmetic is calendar based: adding N months keeps the day of month,
clamped to the last day of the target month when it does not exist there.
"""

from dataclasses import dataclass
from datetime import date

from dateutil.relativedelta import relativedelta

from screenwise.domain.models import AgeBand

UPCOMING_NOTE = "Will become relevant in {years} years"


def add_months(start: date, months: int) -> date:
    return start + relativedelta(months=months)


def add_years(start: date, years: int) -> date:
    return start + relativedelta(years=years)


def join_notes(*parts: str | None) -> str | None:
    kept = [p.strip().rstrip(".") for p in parts if p and p.strip()]
    return ". ".join(kept) if kept else None


@dataclass(frozen=True)
class DueDateResult:
    due_date: date
    notes: str | None = None


def calculate_due_date(
    today: date,
    last_completed_date: date | None,
    min_months: int,
    band: AgeBand,
    *,
    is_upcoming: bool,
    age: int,
) -> DueDateResult:
    """
    Compute the next due date for a matched band.

    Upcoming band: due the year the person reaches ``band.min``; completion
    history is ignored. Current band: ``last_completed_date + min_months``, or
    today when there is no history ("never done" reads as due now).
    """
    if is_upcoming:
        years = band.min - age
        return DueDateResult(
            due_date=add_years(today, years),
            notes=join_notes(UPCOMING_NOTE.format(years=years), band.notes),
        )

    if last_completed_date is not None:
        due = add_months(last_completed_date, min_months)
    else:
        due = today

    return DueDateResult(due_date=due, notes=join_notes(band.notes))
