"""Recording that a screening was done and working out when it is next due."""

from datetime import date

import structlog

from screenwise.domain.models import Guideline, Person
from screenwise.services.age_bands import match_age_band
from screenwise.services.due_dates import add_months
from screenwise.services.frequency import DEFAULT_FREQUENCY_MONTHS

logger = structlog.get_logger(__name__)


def calculate_next_due_date(
    guideline: Guideline,
    person: Person | None,
    from_date: date,
    default_months: int = DEFAULT_FREQUENCY_MONTHS,
) -> date:
    """
    Earliest date the screening should be repeated.

    Uses the minimum interval of the person's current band, then the
    guideline default, then ``default_months``.
    """
    months: int | None = None
    if person is not None:
        current = match_age_band(person.age, guideline.age_ranges).current
        if current is not None:
            months = current.frequency_months
    months = months or guideline.frequency_months or default_months
    return add_months(from_date, months)


def mark_completed(
    guideline: Guideline, person: Person | None, today: date | None = None
) -> Guideline:
    """Return a copy of ``guideline`` completed ``today`` with its next due date set."""
    today = today or date.today()
    next_due = calculate_next_due_date(guideline, person, today)
    logger.info(
        "guideline_marked_completed",
        guideline_id=guideline.id,
        completed_on=today.isoformat(),
        next_due_date=next_due.isoformat(),
    )
    return guideline.model_copy(
        update={"last_completed_date": today, "next_due_date": next_due}
    )
