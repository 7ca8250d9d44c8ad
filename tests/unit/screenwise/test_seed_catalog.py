"""Sanity checks on the built-in guidelines and the schedules they produce."""

from datetime import date

import structlog

from screenwise.config import LoggingConfig
from screenwise.data.catalog import seed_guidelines
from screenwise.domain.models import SYSTEM_OWNER, Person, ScreeningStatus, Visibility
from screenwise.observability import configure_logging
from screenwise.services.filters import recommend
from screenwise.services.schedule import ScheduleAssembler


def test_seed_guidelines_are_public_system_records() -> None:
    guidelines = seed_guidelines()

    assert len({g.id for g in guidelines}) == len(guidelines)
    assert all(g.visibility == Visibility.PUBLIC for g in guidelines)
    assert all(g.created_by == SYSTEM_OWNER for g in guidelines)
    assert all(g.age_ranges for g in guidelines)


def test_recommendations_for_38_year_old_woman() -> None:
    person = Person(age=38, gender="female")

    recs = recommend(seed_guidelines(), person, years_ahead=10)

    current = {r.guideline.id for r in recs.current}
    upcoming = {r.guideline.id for r in recs.upcoming}
    assert current == {"breast_screening", "cervical_screening", "blood_pressure"}
    assert upcoming == {"colorectal_screening"}


def test_seed_schedule_has_no_failed_entries() -> None:
    today = date(2025, 6, 15)
    person = Person(age=60, gender="male")
    entries = ScheduleAssembler().assemble(person, seed_guidelines(), None, today)

    by_id = {e.guideline_id: e for e in entries}
    assert by_id["colorectal_screening"].status == ScreeningStatus.DUE
    assert by_id["prostate_screening"].age_range_label == "50-69"
    assert all(e.due_date is not None or e.notes for e in entries)


def test_configure_logging_console_and_json() -> None:
    configure_logging(LoggingConfig(level="DEBUG", format="console"))
    structlog.get_logger("test").debug("console_configured")

    configure_logging(LoggingConfig(level="INFO", format="json"))
    structlog.get_logger("test").info("json_configured")
