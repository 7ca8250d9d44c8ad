"""
Record-store adapters: raw rows and API payloads to domain models.

Two shapes reach us:
- database rows: snake_case, age bands nested under ``guideline_age_ranges``
  with ``min_age``/``max_age``, dates as ISO datetimes
- client payloads: camelCase, age bands under ``ageRanges`` with ``min``/``max``

Everything is normalized here so the schedule engine only sees one
canonical Guideline/AgeBand/Person.
"""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

import structlog

from screenwise.domain.models import Guideline, Person, age_on

logger = structlog.get_logger(__name__)

_AGE_BAND_KEYS = ("guideline_age_ranges", "age_ranges", "ageRanges")
_DATE_KEYS = (
    "last_completed_date",
    "lastCompletedDate",
    "next_due_date",
    "nextDueDate",
)


def parse_date(value: Any) -> date | None:
    """Accept dates, datetimes and ISO date or datetime strings (``Z`` suffix included)."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    raise TypeError(f"Cannot interpret {value!r} as a date")


def guideline_from_record(row: dict[str, Any]) -> Guideline:
    data = {k: v for k, v in row.items() if k not in _AGE_BAND_KEYS}

    bands = next((row[k] for k in _AGE_BAND_KEYS if row.get(k) is not None), [])
    data["age_ranges"] = list(bands)

    for key in _DATE_KEYS:
        if key in data:
            data[key] = parse_date(data[key])

    return Guideline.model_validate(data)


def _band_less(row: dict[str, Any], index: int) -> Guideline:
    """Keep what still validates of a rejected row, minus its age bands."""
    stripped = {k: v for k, v in row.items() if k not in _AGE_BAND_KEYS}
    try:
        return guideline_from_record(stripped)
    except (ValueError, TypeError):
        return Guideline(
            id=str(row.get("id") or f"invalid_record_{index}"),
            name=str(row.get("name") or "Invalid guideline"),
        )


def guidelines_from_records(rows: Iterable[dict[str, Any]]) -> list[Guideline]:
    """
    Convert a batch of rows one record at a time.

    A row that fails validation (non-numeric ages, inverted bands, bad dates)
    is logged and loaded without age bands, so the schedule assembler turns it
    into an "Unknown" placeholder instead of the whole load failing.
    """
    guidelines: list[Guideline] = []
    for index, row in enumerate(rows):
        try:
            guidelines.append(guideline_from_record(row))
        except (ValueError, TypeError) as e:
            logger.warning(
                "guideline_record_invalid",
                guideline_id=row.get("id"),
                error=str(e),
                error_type=type(e).__name__,
            )
            guidelines.append(_band_less(row, index))
    return guidelines


def person_from_record(row: dict[str, Any], today: date | None = None) -> Person:
    """Build a Person from a profile row; age comes from the date of birth when present."""
    today = today or date.today()
    dob = parse_date(row.get("date_of_birth") or row.get("dateOfBirth"))
    age = age_on(dob, today) if dob is not None else int(row.get("age") or 0)

    first = row.get("first_name") or row.get("firstName") or ""
    last = row.get("last_name") or row.get("lastName") or ""
    name = row.get("name") or f"{first} {last}".strip()

    is_admin = row.get("admin_role") == "admin" or bool(row.get("is_admin") or row.get("isAdmin"))

    return Person(
        age=age,
        gender=row.get("gender") or "other",
        date_of_birth=dob,
        user_id=row.get("user_id") or row.get("userId"),
        is_admin=is_admin,
        name=name,
    )


def guideline_to_record(guideline: Guideline) -> dict[str, Any]:
    """Snake_case row for the record store, bands nested the way the store returns them."""
    row = guideline.model_dump(mode="json", exclude={"age_ranges"})
    row["guideline_age_ranges"] = [
        {
            "min_age": band.min,
            "max_age": band.max,
            "label": band.label,
            "frequency": band.frequency,
            "frequency_months": band.frequency_months,
            "frequency_months_max": band.frequency_months_max,
            "notes": band.notes,
        }
        for band in guideline.age_ranges
    ]
    return row
