"""Short-lived cache of person profiles, owned by whoever builds the service."""

import time
from collections.abc import Callable

import structlog

from screenwise.domain.models import Person

logger = structlog.get_logger(__name__)


class ProfileCache:
    """
    TTL cache keyed by user id.

    The clock is injectable so expiry can be tested without sleeping.
    Expired entries are dropped on read.
    """

    def __init__(self, ttl_seconds: float, clock: Callable[[], float] = time.monotonic) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[float, Person]] = {}
        self.logger = logger.bind(component="profile_cache")

    def get(self, user_id: str) -> Person | None:
        entry = self._entries.get(user_id)
        if entry is None:
            return None
        stored_at, person = entry
        if self._clock() - stored_at >= self.ttl_seconds:
            del self._entries[user_id]
            self.logger.debug("profile_cache_expired", user_id=user_id)
            return None
        return person

    def put(self, person: Person) -> None:
        if person.user_id is None:
            raise ValueError("cannot cache a profile without a user_id")
        self._entries[person.user_id] = (self._clock(), person)

    def invalidate(self, user_id: str | None = None) -> None:
        """Drop one user's profile, or everything when no user is given."""
        if user_id is None:
            self._entries.clear()
        else:
            self._entries.pop(user_id, None)

    def __len__(self) -> int:
        return len(self._entries)
