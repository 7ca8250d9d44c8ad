"""
Guideline catalogue: visibility, ownership and edit permissions.

The record store itself is external. ``GuidelineStore`` is the protocol the
catalogue talks to; ``InMemoryGuidelineStore`` is a dict-backed implementation
used by tests and the console report.
"""

import uuid
from typing import Protocol

import structlog

from screenwise.domain.errors import GuidelineNotFoundError, GuidelinePermissionError
from screenwise.domain.models import Guideline, Person, UserPreferences, Visibility

logger = structlog.get_logger(__name__)


class GuidelineStore(Protocol):
    """
    Key-based record store for guidelines and per-user selections.

    Async because real implementations sit behind a network client.
    """

    async def get(self, guideline_id: str) -> Guideline | None: ...

    async def list_all(self) -> list[Guideline]: ...

    async def insert(self, guideline: Guideline) -> None: ...

    async def update(self, guideline: Guideline) -> None: ...

    async def delete(self, guideline_id: str) -> None: ...

    async def get_selections(self, user_id: str) -> list[str]: ...

    async def add_selection(self, user_id: str, guideline_id: str) -> None: ...

    async def remove_selection(self, user_id: str, guideline_id: str) -> None: ...

    async def remove_guideline_selections(self, guideline_id: str) -> None: ...


class InMemoryGuidelineStore:
    """Dict-backed GuidelineStore. Insertion order is catalogue order."""

    def __init__(self, guidelines: list[Guideline] | None = None) -> None:
        self._guidelines: dict[str, Guideline] = {g.id: g for g in guidelines or []}
        self._selections: dict[str, list[str]] = {}

    async def get(self, guideline_id: str) -> Guideline | None:
        return self._guidelines.get(guideline_id)

    async def list_all(self) -> list[Guideline]:
        return list(self._guidelines.values())

    async def insert(self, guideline: Guideline) -> None:
        if guideline.id in self._guidelines:
            raise ValueError(f"Guideline {guideline.id!r} already exists")
        self._guidelines[guideline.id] = guideline

    async def update(self, guideline: Guideline) -> None:
        if guideline.id not in self._guidelines:
            raise GuidelineNotFoundError(guideline.id)
        self._guidelines[guideline.id] = guideline

    async def delete(self, guideline_id: str) -> None:
        self._guidelines.pop(guideline_id, None)

    async def get_selections(self, user_id: str) -> list[str]:
        return list(self._selections.get(user_id, []))

    async def add_selection(self, user_id: str, guideline_id: str) -> None:
        selected = self._selections.setdefault(user_id, [])
        if guideline_id not in selected:
            selected.append(guideline_id)

    async def remove_selection(self, user_id: str, guideline_id: str) -> None:
        selected = self._selections.get(user_id, [])
        if guideline_id in selected:
            selected.remove(guideline_id)

    async def remove_guideline_selections(self, guideline_id: str) -> None:
        for selected in self._selections.values():
            if guideline_id in selected:
                selected.remove(guideline_id)


class GuidelineCatalog:
    """
    Permission-checked operations over a GuidelineStore.

    Rules:
    - public guidelines are visible to everyone, private ones to their creator
    - only admins may publish (or keep published) a guideline
    - only the creator or an admin may edit or delete
    """

    def __init__(self, store: GuidelineStore) -> None:
        self.store = store
        self.logger = logger.bind(component="guideline_catalog")

    async def visible_to(self, user_id: str | None) -> list[Guideline]:
        return [g for g in await self.store.list_all() if g.is_visible_to(user_id)]

    async def get(self, guideline_id: str, user_id: str | None = None) -> Guideline:
        guideline = await self.store.get(guideline_id)
        if guideline is None or not guideline.is_visible_to(user_id):
            raise GuidelineNotFoundError(guideline_id)
        return guideline

    async def add(self, guideline: Guideline, user: Person) -> Guideline:
        visibility = guideline.visibility
        if visibility == Visibility.PUBLIC and not user.is_admin:
            visibility = Visibility.PRIVATE

        stored = guideline.model_copy(
            update={"visibility": visibility, "created_by": user.user_id}
        )
        await self.store.insert(stored)
        self.logger.info(
            "guideline_added",
            guideline_id=stored.id,
            user_id=user.user_id,
            visibility=stored.visibility.value,
        )
        return stored

    async def update(self, guideline: Guideline, user: Person) -> Guideline:
        original = await self.store.get(guideline.id)
        if original is None:
            raise GuidelineNotFoundError(guideline.id)
        self._check_can_modify(original, user, "update")

        visibility = guideline.visibility
        if visibility == Visibility.PUBLIC and not user.is_admin:
            visibility = Visibility.PRIVATE

        stored = guideline.model_copy(
            update={"visibility": visibility, "created_by": original.created_by}
        )
        await self.store.update(stored)
        self.logger.info("guideline_updated", guideline_id=stored.id, user_id=user.user_id)
        return stored

    async def delete(self, guideline_id: str, user: Person) -> None:
        """Delete a guideline and every user's selection of it."""
        original = await self.store.get(guideline_id)
        if original is None:
            raise GuidelineNotFoundError(guideline_id)
        self._check_can_modify(original, user, "delete")

        await self.store.remove_guideline_selections(guideline_id)
        await self.store.delete(guideline_id)
        self.logger.info("guideline_deleted", guideline_id=guideline_id, user_id=user.user_id)

    async def personalize(self, guideline_id: str, user: Person) -> Guideline:
        """Private copy of a visible guideline that the user can then edit freely."""
        original = await self.get(guideline_id, user.user_id)
        copy = original.model_copy(
            update={
                "id": f"personal_{uuid.uuid4().hex[:12]}",
                "name": f"{original.name} (Personalized)",
                "visibility": Visibility.PRIVATE,
                "created_by": user.user_id,
                "original_guideline_id": original.id,
                "last_completed_date": None,
                "next_due_date": None,
            },
            deep=True,
        )
        await self.store.insert(copy)
        self.logger.info(
            "guideline_personalized",
            guideline_id=copy.id,
            original_guideline_id=original.id,
            user_id=user.user_id,
        )
        return copy

    async def select(self, user_id: str, guideline_id: str) -> None:
        await self.get(guideline_id, user_id)
        await self.store.add_selection(user_id, guideline_id)

    async def deselect(self, user_id: str, guideline_id: str) -> None:
        await self.store.remove_selection(user_id, guideline_id)

    async def preferences(self, user_id: str) -> UserPreferences:
        return UserPreferences(selected_guideline_ids=await self.store.get_selections(user_id))

    @staticmethod
    def _check_can_modify(guideline: Guideline, user: Person, action: str) -> None:
        if user.is_admin:
            return
        if user.user_id is None or guideline.created_by != user.user_id:
            raise GuidelinePermissionError(guideline.id, user.user_id, action)
