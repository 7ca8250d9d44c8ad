"""Tests for marking screenings complete."""

from collections.abc import Callable
from datetime import date

from screenwise.domain.models import Guideline, Person
from screenwise.services.completion import calculate_next_due_date, mark_completed

GuidelineFactory = Callable[..., Guideline]


class TestCalculateNextDueDate:
    def test_uses_current_band_minimum(self, make_guideline: GuidelineFactory) -> None:
        guideline = make_guideline(
            bands=[
                {"min": 21, "max": 29, "frequencyMonths": 36},
                {"min": 30, "max": 65, "frequencyMonths": 60},
            ],
            frequency_months=12,
        )
        assert calculate_next_due_date(guideline, Person(age=35), date(2025, 6, 15)) == date(
            2030, 6, 15
        )

    def test_falls_back_to_guideline_interval(self, make_guideline: GuidelineFactory) -> None:
        guideline = make_guideline(bands=[{"min": 18}], frequency_months=24)
        assert calculate_next_due_date(guideline, Person(age=40), date(2025, 1, 31)) == date(
            2027, 1, 31
        )

    def test_without_profile_uses_guideline_then_default(
        self, make_guideline: GuidelineFactory
    ) -> None:
        from_date = date(2025, 6, 15)
        assert calculate_next_due_date(make_guideline(), None, from_date) == date(2026, 6, 15)
        assert calculate_next_due_date(
            make_guideline(), None, from_date, default_months=6
        ) == date(2025, 12, 15)


class TestMarkCompleted:
    def test_returns_updated_copy(self, make_guideline: GuidelineFactory, today: date) -> None:
        guideline = make_guideline(bands=[{"min": 18, "frequencyMonths": 12}])

        updated = mark_completed(guideline, Person(age=40), today)

        assert updated.last_completed_date == today
        assert updated.next_due_date == date(2026, 6, 15)
        assert guideline.last_completed_date is None
        assert updated.id == guideline.id
