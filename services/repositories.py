"""
services/repositories.py
────────────────────────────────────────────────────────────────────────
Typed repositories over a KeyValueStore. JSON encode/decode happens here
and nowhere else.

Key layout (prefix defaults to "metafit"):

    {prefix}_user               current profile
    {prefix}_weight_{id}        weight observations
    {prefix}_meals_{id}         meal catalog snapshot
    {prefix}_exercises_{id}     exercise catalog snapshot
    {prefix}_plans_{id}         daily plans
"""
from __future__ import annotations

import logging
from typing import Generic, List, TypeVar

from pydantic import TypeAdapter

from config import settings
from core.models.meal import Exercise, Meal
from core.models.plan import DailyPlan
from core.models.profile import Profile
from core.models.weight import WeightObservation
from services.storage import KeyValueStore

_LOG = logging.getLogger(__name__)

T = TypeVar("T")


class ProfileRepository:
    def __init__(self, store: KeyValueStore, prefix: str | None = None) -> None:
        self._store = store
        self._key = f"{prefix or settings.storage_key_prefix}_user"

    async def load(self) -> Profile | None:
        raw = await self._store.get(self._key)
        return Profile.model_validate_json(raw) if raw else None

    async def save(self, profile: Profile) -> None:
        await self._store.set(self._key, profile.model_dump_json())

    async def clear(self) -> None:
        await self._store.remove(self._key)


class _ListRepository(Generic[T]):
    """A JSON array of `item_type` stored under `{prefix}_{kind}_{profile_id}`."""

    kind: str
    item_type: type

    def __init__(self, store: KeyValueStore, prefix: str | None = None) -> None:
        self._store = store
        self._prefix = prefix or settings.storage_key_prefix
        self._adapter: TypeAdapter[List[T]] = TypeAdapter(List[self.item_type])  # type: ignore[name-defined]

    def key(self, profile_id: str) -> str:
        return f"{self._prefix}_{self.kind}_{profile_id}"

    async def load(self, profile_id: str) -> List[T] | None:
        """None when nothing was ever stored, [] for a stored empty list."""
        raw = await self._store.get(self.key(profile_id))
        if raw is None:
            return None
        return self._adapter.validate_json(raw)

    async def save(self, profile_id: str, items: List[T]) -> None:
        await self._store.set(self.key(profile_id), self._adapter.dump_json(items).decode())
        _LOG.debug("saved %d %s for %s", len(items), self.kind, profile_id)


class WeightRepository(_ListRepository[WeightObservation]):
    kind = "weight"
    item_type = WeightObservation


class MealRepository(_ListRepository[Meal]):
    kind = "meals"
    item_type = Meal


class ExerciseRepository(_ListRepository[Exercise]):
    kind = "exercises"
    item_type = Exercise


class PlanRepository(_ListRepository[DailyPlan]):
    kind = "plans"
    item_type = DailyPlan


class Repositories:
    """Bundle handed to Session / HealthStore."""

    def __init__(self, store: KeyValueStore, prefix: str | None = None) -> None:
        self.store = store
        self.profiles = ProfileRepository(store, prefix)
        self.weights = WeightRepository(store, prefix)
        self.meals = MealRepository(store, prefix)
        self.exercises = ExerciseRepository(store, prefix)
        self.plans = PlanRepository(store, prefix)
