"""Adapters between raw record-store rows / client payloads and screenwise models."""

from .mapping import (
    guideline_from_record,
    guideline_to_record,
    guidelines_from_records,
    parse_date,
    person_from_record,
)

__all__ = [
    "guideline_from_record",
    "guideline_to_record",
    "guidelines_from_records",
    "parse_date",
    "person_from_record",
]
