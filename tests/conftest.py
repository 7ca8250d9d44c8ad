"""Shared fixtures for the screenwise test suite."""

from collections.abc import Callable
from datetime import date
from typing import Any

import pytest

from screenwise.domain.models import Guideline, Person

GuidelineFactory = Callable[..., Guideline]


def build_guideline(
    guideline_id: str = "g1", bands: list[dict[str, Any]] | None = None, **fields: Any
) -> Guideline:
    """Guideline with sensible defaults; ``bands`` are plain dicts."""
    data: dict[str, Any] = {
        "id": guideline_id,
        "name": f"Guideline {guideline_id}",
        "age_ranges": bands if bands is not None else [{"min": 18}],
    }
    data.update(fields)
    return Guideline.model_validate(data)


@pytest.fixture
def make_guideline() -> GuidelineFactory:
    return build_guideline


@pytest.fixture
def today() -> date:
    return date(2025, 6, 15)


@pytest.fixture
def person() -> Person:
    return Person(age=38, gender="female", user_id="user-1")
