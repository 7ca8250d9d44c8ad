"""Locate the age band of a guideline that applies to a person."""

from dataclasses import dataclass

from screenwise.domain.models import AgeBand, Guideline


@dataclass(frozen=True)
class BandMatch:
    """Band containing the age now, or failing that the nearest band still ahead."""

    current: AgeBand | None = None
    next: AgeBand | None = None

    @property
    def band(self) -> AgeBand | None:
        return self.current or self.next

    @property
    def is_upcoming(self) -> bool:
        return self.current is None and self.next is not None


def match_age_band(age: int, bands: list[AgeBand]) -> BandMatch:
    """
    Find the current band for ``age``, else the nearest future band.

    Overlapping bands resolve to the first one in declaration order. Among
    future bands the smallest ``min`` wins, first occurrence on ties.
    """
    for band in bands:
        if band.contains(age):
            return BandMatch(current=band)

    upcoming: AgeBand | None = None
    for band in bands:
        if band.min > age and (upcoming is None or band.min < upcoming.min):
            upcoming = band
    return BandMatch(next=upcoming)


def is_currently_applicable(guideline: Guideline, age: int) -> bool:
    return any(band.contains(age) for band in guideline.age_ranges)
