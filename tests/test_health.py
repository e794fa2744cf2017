# tests/test_health.py
from __future__ import annotations

import asyncio
from datetime import date

from core.health import HealthStore
from core.models.profile import Profile
from services.repositories import Repositories
from services.storage import MemoryKeyValueStore

DAY = date(2026, 3, 10)

PROFILE = Profile(
    id="p1",
    name="Demo User",
    email="demo@example.com",
    age=35,
    weight=95,
    height=170,
    bmi=32.9,
    weight_goal=75,
)


def _store(profile: Profile = PROFILE, repos: Repositories | None = None) -> HealthStore:
    repos = repos or Repositories(MemoryKeyValueStore(), prefix="metafit")
    return asyncio.run(HealthStore(profile, repos, today=lambda: DAY).load())


def test_first_load_seeds_ledger_with_profile_weight():
    store = _store()
    assert [(o.date, o.weight) for o in store.ledger.observations] == [(DAY, 95)]


def test_no_seed_for_profile_without_weight():
    fresh = PROFILE.model_copy(update={"weight": 0.0})
    assert len(_store(fresh).ledger) == 0


def test_weight_records_persist_and_keep_duplicates():
    repos = Repositories(MemoryKeyValueStore(), prefix="metafit")
    store = _store(repos=repos)
    asyncio.run(store.add_weight_record(94))
    asyncio.run(store.add_weight_record(93))
    assert len(store.ledger) == 3

    reloaded = _store(repos=repos)
    assert [o.weight for o in reloaded.ledger.observations] == [95, 94, 93]
    assert asyncio.run(repos.store.get("metafit_weight_p1")) is not None


def test_generate_twice_same_day_appends_and_lookup_returns_first():
    repos = Repositories(MemoryKeyValueStore(), prefix="metafit")
    store = _store(repos=repos)
    first = asyncio.run(store.generate_recommendations())
    asyncio.run(store.generate_recommendations())

    assert len(store.plans) == 2
    assert store.plan_for(DAY) is first
    assert len(_store(repos=repos).plans) == 2


def test_ensure_recommendations_only_when_empty():
    store = _store()
    asyncio.run(store.ensure_recommendations())
    asyncio.run(store.ensure_recommendations())
    assert len(store.plans) == 1
    assert len(store.meals) == 3 and len(store.exercises) == 4


def test_dashboard_against_profile_weight():
    store = _store()
    asyncio.run(store.add_weight_record(85))
    summary = store.dashboard()
    assert summary.latest_weight == 85
    assert summary.weight_lost == 10
    assert summary.progress_percent == 50
    assert summary.today_plan is None


def test_goal_progress_uses_newest_dated_entry():
    days = [DAY]
    repos = Repositories(MemoryKeyValueStore(), prefix="metafit")
    store = asyncio.run(HealthStore(PROFILE, repos, today=lambda: days[-1]).load())
    asyncio.run(store.add_weight_record(85))
    # same date as the seed entry: stable sort keeps the seed first
    assert store.goal_progress() == 0

    days.append(date(2026, 3, 11))
    asyncio.run(store.add_weight_record(85))
    assert store.goal_progress() == 50
