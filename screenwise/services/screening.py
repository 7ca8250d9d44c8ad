"""
Async façade: resolve a user's data from the record store, then compute.

The store round-trips are the only awaits; schedule derivation itself is the
synchronous ScheduleAssembler.
"""

from collections.abc import Awaitable, Callable
from datetime import date

import structlog

from screenwise.config import AppConfig, get_config
from screenwise.domain.errors import ProfileNotFoundError
from screenwise.domain.models import Guideline, Person, ScheduleEntry
from screenwise.services.catalog import GuidelineCatalog
from screenwise.services.completion import mark_completed
from screenwise.services.profile_cache import ProfileCache
from screenwise.services.relevance import rank_by_relevance
from screenwise.services.schedule import ScheduleAssembler, ScheduleSort

logger = structlog.get_logger(__name__)

ProfileLoader = Callable[[str], Awaitable[Person | None]]


class ScreeningService:
    """Per-user schedule and browsing views backed by a guideline catalogue."""

    def __init__(
        self,
        catalog: GuidelineCatalog,
        profile_loader: ProfileLoader,
        profiles: ProfileCache | None = None,
        assembler: ScheduleAssembler | None = None,
        config: AppConfig | None = None,
    ) -> None:
        self.config = config or get_config()
        self.catalog = catalog
        self.profile_loader = profile_loader
        self.profiles = profiles or ProfileCache(self.config.cache.profile_ttl_seconds)
        self.assembler = assembler or ScheduleAssembler(self.config.schedule)
        self.logger = logger.bind(component="screening_service")

    async def profile(self, user_id: str) -> Person | None:
        person = self.profiles.get(user_id)
        if person is not None:
            return person

        person = await self.profile_loader(user_id)
        if person is None:
            self.logger.warning("profile_not_found", user_id=user_id)
            return None
        self.profiles.put(person)
        return person

    async def schedule_for(
        self,
        user_id: str,
        today: date | None = None,
        *,
        completed_ids: frozenset[str] = frozenset(),
        sort: ScheduleSort | None = None,
    ) -> list[ScheduleEntry]:
        person = await self.profile(user_id)
        if person is None:
            return []

        guidelines = await self.catalog.visible_to(user_id)
        preferences = await self.catalog.preferences(user_id)
        return self.assembler.assemble(
            person,
            guidelines,
            preferences,
            today,
            completed_ids=completed_ids,
            sort=sort,
        )

    async def ranked_for(self, user_id: str) -> list[Guideline]:
        person = await self.profile(user_id)
        guidelines = await self.catalog.visible_to(user_id)
        return rank_by_relevance(
            guidelines, person, sentinel=self.config.schedule.relevance_sentinel
        )

    async def complete(
        self, user_id: str, guideline_id: str, today: date | None = None
    ) -> tuple[Guideline, ScheduleEntry]:
        """
        Mark a screening done today.

        Returns the updated guideline for the caller to write back and the
        ``completed`` schedule entry to display until the next due date.
        """
        person = await self.profile(user_id)
        if person is None:
            raise ProfileNotFoundError(user_id)

        today = today or date.today()
        guideline = await self.catalog.get(guideline_id, user_id)
        updated = mark_completed(guideline, person, today)
        entry = self.assembler.build_entry(updated, person, today, completed=True).unwrap()
        return updated, entry
