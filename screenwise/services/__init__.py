"""
Core services for the application.

This package contains the schedule derivation engine (band matching,
frequency resolution, due dates, status, relevance, assembly) and the
catalogue and screening services built on top of it.
"""

from .age_bands import BandMatch, match_age_band
from .catalog import GuidelineCatalog, GuidelineStore, InMemoryGuidelineStore
from .due_dates import DueDateResult, add_months, calculate_due_date
from .frequency import ResolvedFrequency, resolve_frequency
from .profile_cache import ProfileCache
from .relevance import rank_by_relevance, relevance_score
from .schedule import Result, ScheduleAssembler
from .screening import ScreeningService
from .status import classify_status

__all__ = [
    "BandMatch",
    "DueDateResult",
    "GuidelineCatalog",
    "GuidelineStore",
    "InMemoryGuidelineStore",
    "ProfileCache",
    "ResolvedFrequency",
    "Result",
    "ScheduleAssembler",
    "ScreeningService",
    "add_months",
    "calculate_due_date",
    "classify_status",
    "match_age_band",
    "rank_by_relevance",
    "relevance_score",
    "resolve_frequency",
]
