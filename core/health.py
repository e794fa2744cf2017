"""
core/health.py
────────────────────────────────────────────────────────────────────────
Per-profile health state: weight ledger, recommended catalog and daily
plans. Every mutation is persisted through the repositories right away.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List

import pandas as pd

from core.models.meal import Exercise, Meal
from core.models.plan import DailyPlan
from core.models.profile import Profile
from core.models.weight import WeightObservation
from core.recommendation import build_daily_plan, catalog, plan_for
from core.weight_ledger import WeightLedger
from services.repositories import Repositories

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSummary:
    latest_weight: float
    weight_lost: float          # profile weight − latest weight
    progress_percent: float     # capped at 100, may be negative
    today_plan: DailyPlan | None


class HealthStore:
    def __init__(
        self,
        profile: Profile,
        repos: Repositories,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._profile = profile
        self._repos = repos
        self._today = today
        self.ledger = WeightLedger(today=today)
        self.meals: List[Meal] = []
        self.exercises: List[Exercise] = []
        self.plans: List[DailyPlan] = []

    @property
    def profile(self) -> Profile:
        return self._profile

    # ─────────────────────────────── load ─────────────────────────── #
    async def load(self) -> "HealthStore":
        pid = self._profile.id
        stored = await self._repos.weights.load(pid)
        if stored is not None:
            self.ledger = WeightLedger(stored, today=self._today)
        elif self._profile.weight:
            # first visit after onboarding: start the log at the profile weight
            self.ledger = WeightLedger(today=self._today)
            self.ledger.record(self._profile.weight)
            await self._repos.weights.save(pid, self.ledger.observations)

        self.meals = await self._repos.meals.load(pid) or []
        self.exercises = await self._repos.exercises.load(pid) or []
        self.plans = await self._repos.plans.load(pid) or []
        return self

    # ─────────────────────────────── weight ───────────────────────── #
    async def add_weight_record(self, weight: float) -> WeightObservation:
        obs = self.ledger.record(weight)
        await self._repos.weights.save(self._profile.id, self.ledger.observations)
        return obs

    def latest_weight(self) -> float:
        return self.ledger.latest(self._profile.weight)

    def weight_history(self) -> pd.DataFrame:
        return self.ledger.history()

    def goal_progress(self) -> float:
        return self.ledger.progress(self._profile.weight_goal)

    # ─────────────────────────────── plans ────────────────────────── #
    async def generate_recommendations(self) -> DailyPlan:
        """
        Refresh the catalog and append a plan for today. Calling this twice
        on one day appends a second plan; `plan_for()` keeps returning the
        first one.
        """
        pid = self._profile.id
        self.meals, self.exercises = catalog()
        plan = build_daily_plan(self._today(), self.meals, self.exercises)
        self.plans = [*self.plans, plan]

        await self._repos.meals.save(pid, self.meals)
        await self._repos.exercises.save(pid, self.exercises)
        await self._repos.plans.save(pid, self.plans)
        _LOG.info("generated plan for %s on %s (%d plans)", pid, plan.date, len(self.plans))
        return plan

    async def ensure_recommendations(self) -> None:
        if not self.meals or not self.exercises:
            await self.generate_recommendations()

    def plan_for(self, day: date) -> DailyPlan | None:
        return plan_for(self.plans, day)

    # ─────────────────────────────── dashboard ────────────────────── #
    def dashboard(self) -> DashboardSummary:
        """
        Dashboard figures measure against the profile weight, not the first
        logged observation as the progress screen does.
        """
        start = self._profile.weight
        latest = self.latest_weight()
        progress = 0.0
        if start > 0 and start == self._profile.weight_goal:
            progress = 100.0
        elif start > 0:
            progress = min((start - latest) / (start - self._profile.weight_goal) * 100, 100.0)
        return DashboardSummary(
            latest_weight=latest,
            weight_lost=round(start - latest, 1),
            progress_percent=round(progress, 1),
            today_plan=self.plan_for(self._today()),
        )
