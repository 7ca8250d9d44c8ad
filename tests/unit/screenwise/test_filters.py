"""Tests for catalogue browsing helpers and schedule filtering."""

from collections.abc import Callable
from datetime import date

import pytest

from screenwise.domain.models import Guideline, Person, ScheduleEntry, ScreeningStatus
from screenwise.services.filters import (
    available_tags,
    filter_schedule,
    is_gender_relevant,
    recommend,
    relevant_guidelines,
    search_guidelines,
    upcoming_guidelines,
)

GuidelineFactory = Callable[..., Guideline]


@pytest.fixture
def catalogue(make_guideline: GuidelineFactory) -> list[Guideline]:
    return [
        make_guideline(
            "prostate",
            name="Prostate Cancer Screening",
            genders=["male"],
            bands=[{"min": 40, "max": 49}, {"min": 50}],
            visibility="public",
            tags=["cancer", "men's health"],
            category="Cancer Screening",
        ),
        make_guideline(
            "mammogram",
            name="Mammogram",
            description="Breast cancer screening",
            genders=["female"],
            bands=[{"min": 40, "max": 74}],
            visibility="public",
            tags=["cancer", "women's health"],
            category="Cancer Screening",
        ),
        make_guideline(
            "bp",
            name="Blood Pressure Check",
            bands=[{"min": 18}],
            visibility="public",
            tags=["heart"],
            category="Cardiovascular",
        ),
        make_guideline(
            "colorectal",
            name="Colorectal Cancer Screening",
            bands=[{"min": 45, "max": 75}],
            visibility="public",
            tags=["cancer", "colonoscopy"],
            category="Cancer Screening",
        ),
        make_guideline("mine", name="My Private Check", bands=[{"min": 30}], created_by="u1"),
    ]


class TestGenderAndAge:
    def test_gender_relevance(self, catalogue: list[Guideline]) -> None:
        prostate, mammogram, bp = catalogue[0], catalogue[1], catalogue[2]
        assert is_gender_relevant(prostate, "male")
        assert not is_gender_relevant(prostate, "female")
        assert is_gender_relevant(mammogram, "female")
        assert is_gender_relevant(bp, "other")

    def test_relevant_now(self, catalogue: list[Guideline]) -> None:
        person = Person(age=42, gender="female")
        assert [g.id for g in relevant_guidelines(catalogue, person)] == [
            "mammogram",
            "bp",
            "mine",
        ]

    def test_upcoming_within_window(self, catalogue: list[Guideline]) -> None:
        person = Person(age=42, gender="male")
        assert [g.id for g in upcoming_guidelines(catalogue, person, years_ahead=5)] == [
            "colorectal"
        ]
        assert upcoming_guidelines(catalogue, person, years_ahead=2) == []

    def test_recommend_only_public_and_marks_selection(self, catalogue: list[Guideline]) -> None:
        person = Person(age=42, gender="male")
        recs = recommend(catalogue, person, selected_ids={"bp"})

        assert [(r.guideline.id, r.is_selected) for r in recs.current] == [
            ("prostate", False),
            ("bp", True),
        ]
        assert [r.guideline.id for r in recs.upcoming] == ["colorectal"]


class TestSearch:
    def test_query_matches_name_description_and_tags(self, catalogue: list[Guideline]) -> None:
        assert {g.id for g in search_guidelines(catalogue, None, query="BREAST")} == {"mammogram"}
        assert {g.id for g in search_guidelines(catalogue, None, query="colonoscopy")} == {
            "colorectal"
        }

    def test_category_filter(self, catalogue: list[Guideline]) -> None:
        result = search_guidelines(catalogue, None, category="Cardiovascular")
        assert [g.id for g in result] == ["bp"]
        assert len(search_guidelines(catalogue, None, category="All Categories")) == 5

    def test_ranked_when_profile_known(self, catalogue: list[Guideline]) -> None:
        result = search_guidelines(catalogue, Person(age=38), query="cancer")
        assert [g.id for g in result] == ["prostate", "mammogram", "colorectal"]

    def test_available_tags_first_seen_order(self, catalogue: list[Guideline]) -> None:
        assert available_tags(catalogue) == [
            "cancer",
            "men's health",
            "women's health",
            "heart",
            "colonoscopy",
        ]


class TestFilterSchedule:
    @pytest.fixture
    def entries(self) -> list[ScheduleEntry]:
        return [
            ScheduleEntry(
                guideline_id="a", name="A", status=ScreeningStatus.DUE, due_date=date(2025, 7, 1)
            ),
            ScheduleEntry(
                guideline_id="b",
                name="B",
                status=ScreeningStatus.OVERDUE,
                due_date=date(2025, 1, 1),
            ),
            ScheduleEntry(
                guideline_id="c",
                name="C",
                status=ScreeningStatus.UPCOMING,
                due_date=date(2032, 6, 15),
                is_future=True,
                notes="Will become relevant in 7 years",
            ),
        ]

    def test_status_filter(self, entries: list[ScheduleEntry]) -> None:
        result = filter_schedule(entries, ["due", ScreeningStatus.UPCOMING])
        assert [e.guideline_id for e in result] == ["a", "c"]

    def test_time_frame_toggles(self, entries: list[ScheduleEntry]) -> None:
        statuses = list(ScreeningStatus)
        assert [e.guideline_id for e in filter_schedule(entries, statuses, show_future=False)] == [
            "a",
            "b",
        ]
        assert [e.guideline_id for e in filter_schedule(entries, statuses, show_current=False)] == [
            "c"
        ]
        assert filter_schedule(entries, statuses, show_current=False, show_future=False) == []
