# tests/test_storage.py
from __future__ import annotations

import asyncio
from datetime import date

from sqlalchemy.ext.asyncio import create_async_engine

from core.recommendation import build_daily_plan, catalog
from core.models.weight import WeightObservation
from services.repositories import Repositories
from services.storage import MemoryKeyValueStore, SqlKeyValueStore


def test_memory_store_get_set_remove():
    async def run():
        kv = MemoryKeyValueStore()
        assert await kv.get("k") is None
        await kv.set("k", "v")
        assert await kv.get("k") == "v"
        await kv.remove("k")
        await kv.remove("k")            # removing twice is fine
        return await kv.get("k")

    assert asyncio.run(run()) is None


def test_sql_store_roundtrip(tmp_path):
    async def run():
        eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'kv.db'}")
        kv = SqlKeyValueStore(eng)
        await kv.set("a", "1")
        await kv.set("a", "2")
        value = await kv.get("a")
        await kv.remove("a")
        gone = await kv.get("a")
        await eng.dispose()
        return value, gone

    assert asyncio.run(run()) == ("2", None)


def test_repositories_use_documented_keys():
    async def run():
        kv = MemoryKeyValueStore()
        repos = Repositories(kv, prefix="metafit")
        meals, exercises = catalog()
        await repos.weights.save("p1", [WeightObservation(date=date(2026, 3, 1), weight=95)])
        await repos.meals.save("p1", meals)
        await repos.exercises.save("p1", exercises)
        await repos.plans.save("p1", [build_daily_plan(date(2026, 3, 1), meals, exercises)])
        return kv.keys(), await repos.plans.load("p1"), await repos.weights.load("p2")

    keys, plans, missing = asyncio.run(run())
    assert keys == ["metafit_exercises_p1", "metafit_meals_p1", "metafit_plans_p1", "metafit_weight_p1"]
    assert plans[0].meals.breakfast.name == "Green Protein Smoothie"
    assert missing is None


def test_dispose_engine_resets_cache(monkeypatch):
    from services import db

    monkeypatch.setattr(db, "_ENGINE", None)

    async def run():
        first = await db.engine()
        await db.dispose_engine()
        await db.dispose_engine()          # second call is a no-op
        return first, db._ENGINE

    first, after = asyncio.run(run())
    assert first is not None
    assert after is None
