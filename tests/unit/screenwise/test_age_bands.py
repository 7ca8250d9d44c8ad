"""
Tests for age band matching.

Property-based tests pin the boundary behaviour; example tests pin the
first-match-wins ordering that guideline authors rely on.
"""

from hypothesis import given
from hypothesis import strategies as st

from screenwise.domain.models import AgeBand
from screenwise.services.age_bands import BandMatch, match_age_band


class TestMatchAgeBand:
    @given(age=st.integers(min_value=18, max_value=150))
    def test_open_ended_band_is_current_from_its_min(self, age: int) -> None:
        band = AgeBand(min=18)
        match = match_age_band(age, [band])
        assert match.current == band
        assert match.next is None

    @given(
        low=st.integers(min_value=0, max_value=100),
        width=st.integers(min_value=0, max_value=50),
    )
    def test_both_boundaries_are_inclusive(self, low: int, width: int) -> None:
        band = AgeBand(min=low, max=low + width)
        assert match_age_band(low, [band]).current == band
        assert match_age_band(low + width, [band]).current == band

    def test_nearest_future_band_when_none_current(self) -> None:
        bands = [AgeBand(min=60, max=69), AgeBand(min=45, max=49), AgeBand(min=50, max=59)]
        match = match_age_band(38, bands)
        assert match.current is None
        assert match.next == bands[1]
        assert match.is_upcoming
        assert match.band == bands[1]

    def test_future_band_ties_resolve_to_first_declared(self) -> None:
        first = AgeBand(min=45, max=49, label="first")
        second = AgeBand(min=45, max=54, label="second")
        assert match_age_band(40, [first, second]).next == first

    def test_overlapping_bands_first_declared_wins(self) -> None:
        broad = AgeBand(min=40, max=74, label="broad")
        narrow = AgeBand(min=45, max=49, label="narrow")

        assert match_age_band(47, [broad, narrow]).current == broad
        assert match_age_band(47, [narrow, broad]).current == narrow

    def test_past_every_band_matches_nothing(self) -> None:
        match = match_age_band(80, [AgeBand(min=21, max=29), AgeBand(min=30, max=65)])
        assert match == BandMatch()
        assert match.band is None
        assert not match.is_upcoming

    def test_gap_between_bands_points_to_next(self) -> None:
        bands = [AgeBand(min=21, max=29), AgeBand(min=40, max=65)]
        match = match_age_band(35, bands)
        assert match.current is None
        assert match.next == bands[1]

    def test_current_band_takes_precedence_over_future(self) -> None:
        bands = [AgeBand(min=50, max=59), AgeBand(min=30, max=49)]
        match = match_age_band(40, bands)
        assert match.current == bands[1]
        assert match.next is None
        assert not match.is_upcoming
