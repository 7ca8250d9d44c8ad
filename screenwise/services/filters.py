"""
Browsing helpers over a guideline catalogue and a computed schedule.

Everything here is a pure function of its inputs; none of it mutates the
guidelines it is handed.
"""

from collections.abc import Collection, Iterable
from dataclasses import dataclass, field

from screenwise.domain.models import (
    Gender,
    Guideline,
    GuidelineGender,
    Person,
    ScheduleEntry,
    ScreeningStatus,
    Visibility,
)
from screenwise.services.age_bands import is_currently_applicable
from screenwise.services.relevance import rank_by_relevance

ALL_CATEGORIES = "All Categories"


def is_gender_relevant(guideline: Guideline, gender: Gender | str) -> bool:
    value = gender.value if isinstance(gender, Gender) else gender
    return GuidelineGender.ALL in guideline.genders or any(
        g.value == value for g in guideline.genders
    )


def _starts_within(guideline: Guideline, age: int, years_ahead: int) -> bool:
    return any(age < band.min <= age + years_ahead for band in guideline.age_ranges)


def relevant_guidelines(guidelines: Iterable[Guideline], person: Person) -> list[Guideline]:
    """Guidelines that apply to the person right now."""
    return [
        g
        for g in guidelines
        if is_gender_relevant(g, person.gender) and is_currently_applicable(g, person.age)
    ]


def upcoming_guidelines(
    guidelines: Iterable[Guideline], person: Person, years_ahead: int = 5
) -> list[Guideline]:
    """Guidelines that do not apply yet but will within ``years_ahead`` years."""
    return [
        g
        for g in guidelines
        if is_gender_relevant(g, person.gender)
        and not is_currently_applicable(g, person.age)
        and _starts_within(g, person.age, years_ahead)
    ]


@dataclass(frozen=True)
class Recommendation:
    guideline: Guideline
    is_selected: bool = False


@dataclass(frozen=True)
class Recommendations:
    current: list[Recommendation] = field(default_factory=list)
    upcoming: list[Recommendation] = field(default_factory=list)


def recommend(
    guidelines: Iterable[Guideline],
    person: Person,
    selected_ids: Collection[str] = (),
    years_ahead: int = 5,
) -> Recommendations:
    """Split public guidelines into those that apply now and those coming up."""
    public = [g for g in guidelines if g.visibility == Visibility.PUBLIC]
    selected = set(selected_ids)
    return Recommendations(
        current=[
            Recommendation(g, g.id in selected) for g in relevant_guidelines(public, person)
        ],
        upcoming=[
            Recommendation(g, g.id in selected)
            for g in upcoming_guidelines(public, person, years_ahead)
        ],
    )


def search_guidelines(
    guidelines: Iterable[Guideline],
    person: Person | None,
    query: str = "",
    category: str | None = None,
) -> list[Guideline]:
    """Text and category filter, ranked by age relevance when a profile is known."""
    filtered = list(guidelines)

    needle = query.strip().lower()
    if needle:
        filtered = [
            g
            for g in filtered
            if needle in g.name.lower()
            or needle in g.description.lower()
            or any(needle in tag.lower() for tag in g.tags)
        ]

    if category and category != ALL_CATEGORIES:
        filtered = [g for g in filtered if g.category == category]

    if person is None:
        return filtered
    return rank_by_relevance(filtered, person)


def available_tags(guidelines: Iterable[Guideline]) -> list[str]:
    seen: dict[str, None] = {}
    for guideline in guidelines:
        for tag in guideline.tags:
            seen.setdefault(tag, None)
    return list(seen)


def filter_schedule(
    entries: Iterable[ScheduleEntry],
    statuses: Collection[ScreeningStatus | str],
    show_current: bool = True,
    show_future: bool = True,
) -> list[ScheduleEntry]:
    """Keep entries with a wanted status and in a wanted time frame."""
    wanted = {ScreeningStatus(s) for s in statuses}
    return [
        e
        for e in entries
        if e.status in wanted
        and ((show_current and not e.is_future) or (show_future and e.is_future))
    ]
