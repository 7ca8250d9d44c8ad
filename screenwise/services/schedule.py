"""
Schedule assembly: guidelines + person + today -> screening schedule.

Key patterns:
- Pure, synchronous computation over already-fetched data
- Explicit Result type for per-guideline failures
- Error boundary per guideline (one bad record never sinks the batch)
"""

from collections.abc import Collection, Iterable
from dataclasses import dataclass
from datetime import date
from typing import Generic, Literal, TypeVar

import structlog

from screenwise.config import ScheduleConfig
from screenwise.domain.errors import MalformedGuidelineError
from screenwise.domain.models import (
    Guideline,
    Person,
    ScheduleEntry,
    ScreeningStatus,
    UserPreferences,
)
from screenwise.services.age_bands import match_age_band
from screenwise.services.due_dates import calculate_due_date
from screenwise.services.frequency import resolve_frequency
from screenwise.services.status import classify_status

logger = structlog.get_logger(__name__)

NOT_APPLICABLE_NOTE = "No longer recommended for your age"

ScheduleSort = Literal["completed_first", "due_date"]

ValueT = TypeVar("ValueT")
ErrorT = TypeVar("ErrorT", bound=BaseException)


@dataclass(frozen=True)
class Result(Generic[ValueT, ErrorT]):
    """
    Outcome of building one schedule entry: an entry or the error that stopped it.

    The assembler decides what a failed guideline turns into instead of
    catching around the whole batch.
    """

    value: ValueT | None = None
    error: ErrorT | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Result needs exactly one of value or error")

    @classmethod
    def ok(cls, value: ValueT) -> "Result[ValueT, ErrorT]":
        return cls(value=value)

    @classmethod
    def err(cls, error: ErrorT) -> "Result[ValueT, ErrorT]":
        return cls(error=error)

    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ValueT:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_err(self) -> ErrorT:
        if self.error is None:
            raise ValueError("unwrap_err() called on an entry result")
        return self.error


def select_guidelines(
    guidelines: Iterable[Guideline], preferences: UserPreferences | None
) -> list[Guideline]:
    """Guidelines the user tracks, in catalogue order; all of them without a preference."""
    if preferences is None or not preferences.selected_guideline_ids:
        return list(guidelines)
    selected = set(preferences.selected_guideline_ids)
    return [g for g in guidelines if g.id in selected]


def sort_schedule(entries: list[ScheduleEntry], sort: ScheduleSort | None) -> list[ScheduleEntry]:
    if sort == "completed_first":
        return sorted(entries, key=lambda e: e.status != ScreeningStatus.COMPLETED)
    if sort == "due_date":
        return sorted(entries, key=lambda e: (e.due_date is None, e.due_date or date.max))
    return list(entries)


class ScheduleAssembler:
    """
    Builds a person's screening schedule one guideline at a time.

    Each guideline runs through band matching, frequency resolution, due-date
    calculation and status classification. Any failure is contained to that
    guideline, which becomes an "upcoming / Unknown" placeholder entry.
    """

    def __init__(self, config: ScheduleConfig | None = None) -> None:
        self.config = config or ScheduleConfig()
        self.logger = logger.bind(component="schedule_assembler")

    def assemble(
        self,
        person: Person | None,
        guidelines: Iterable[Guideline],
        preferences: UserPreferences | None = None,
        today: date | None = None,
        *,
        completed_ids: Collection[str] = (),
        sort: ScheduleSort | None = None,
    ) -> list[ScheduleEntry]:
        if person is None:
            self.logger.info("schedule_skipped_no_profile")
            return []

        today = today or date.today()
        entries: list[ScheduleEntry] = []
        failures = 0

        for guideline in select_guidelines(guidelines, preferences):
            result = self.build_entry(
                guideline, person, today, completed=guideline.id in completed_ids
            )
            if result.is_ok():
                entries.append(result.unwrap())
                continue

            failures += 1
            error = result.unwrap_err()
            self.logger.warning(
                "guideline_processing_failed",
                guideline_id=guideline.id,
                error=str(error),
                error_type=type(error).__name__,
            )
            entries.append(self._placeholder(guideline))

        self.logger.info(
            "schedule_assembled",
            user_id=person.user_id,
            total_entries=len(entries),
            failed_guidelines=failures,
            today=today.isoformat(),
        )
        return sort_schedule(entries, sort)

    def build_entry(
        self,
        guideline: Guideline,
        person: Person,
        today: date,
        completed: bool = False,
    ) -> Result[ScheduleEntry, Exception]:
        try:
            return Result.ok(self._compute_entry(guideline, person, today, completed))
        except Exception as e:
            return Result.err(e)

    def _compute_entry(
        self, guideline: Guideline, person: Person, today: date, completed: bool
    ) -> ScheduleEntry:
        if not guideline.age_ranges:
            raise MalformedGuidelineError(guideline.id, "no age ranges defined")

        match = match_age_band(person.age, guideline.age_ranges)
        frequency = resolve_frequency(
            match.band, guideline, default_months=self.config.default_frequency_months
        )

        if match.band is None:
            return ScheduleEntry(
                guideline_id=guideline.id,
                name=guideline.name,
                description=guideline.description,
                frequency_text=frequency.text,
                status=ScreeningStatus.UPCOMING,
                due_date=None,
                last_completed_date=guideline.last_completed_date,
                notes=NOT_APPLICABLE_NOTE,
            )

        due = calculate_due_date(
            today,
            guideline.last_completed_date,
            frequency.min_months,
            match.band,
            is_upcoming=match.is_upcoming,
            age=person.age,
        )
        status = classify_status(
            today,
            due.due_date,
            is_upcoming_band=match.is_upcoming,
            completed_today=completed,
            due_soon_months=self.config.due_soon_months,
        )

        return ScheduleEntry(
            guideline_id=guideline.id,
            name=guideline.name,
            description=guideline.description,
            frequency_text=frequency.text,
            status=status,
            due_date=due.due_date,
            last_completed_date=guideline.last_completed_date,
            notes=due.notes,
            is_future=match.is_upcoming,
            age_range_label=match.band.label,
        )

    @staticmethod
    def _placeholder(guideline: Guideline) -> ScheduleEntry:
        return ScheduleEntry(
            guideline_id=guideline.id,
            name=guideline.name,
            description=guideline.description,
            status=ScreeningStatus.UPCOMING,
            due_date=None,
            last_completed_date=guideline.last_completed_date,
        )
