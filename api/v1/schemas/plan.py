from __future__ import annotations

from pydantic import BaseModel

from core.models.meal import Exercise, Meal
from core.models.plan import DailyPlan


class CatalogOut(BaseModel):
    meals: list[Meal]
    exercises: list[Exercise]


class DashboardOut(BaseModel):
    latest_weight: float
    weight_lost: float
    progress_percent: float
    today_plan: DailyPlan | None
    featured_meals: list[Meal]
    featured_exercises: list[Exercise]
