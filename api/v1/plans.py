# api/v1/plans.py
from __future__ import annotations
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from core.health import HealthStore
from core.models.plan import DailyPlan
from api.v1.deps import get_health
from api.v1.schemas import CatalogOut, DashboardOut

router = APIRouter()

# how many catalog entries the dashboard shows per kind
_FEATURED = 2


@router.get("/plans/catalog", response_model=CatalogOut)
async def read_catalog(health: HealthStore = Depends(get_health)) -> CatalogOut:
    return CatalogOut(meals=health.meals, exercises=health.exercises)


@router.post("/plans/generate", response_model=DailyPlan, status_code=status.HTTP_201_CREATED)
async def generate_plan(health: HealthStore = Depends(get_health)) -> DailyPlan:
    return await health.generate_recommendations()


@router.get("/plans/{day}", response_model=DailyPlan)
async def read_plan(day: date, health: HealthStore = Depends(get_health)) -> DailyPlan:
    plan = health.plan_for(day)
    if plan is None:
        raise HTTPException(status_code=404, detail=f"No plan for {day.isoformat()}")
    return plan


@router.get("/dashboard", response_model=DashboardOut)
async def dashboard(health: HealthStore = Depends(get_health)) -> DashboardOut:
    # first dashboard visit fills an empty catalog
    await health.ensure_recommendations()
    summary = health.dashboard()
    return DashboardOut(
        latest_weight=summary.latest_weight,
        weight_lost=summary.weight_lost,
        progress_percent=summary.progress_percent,
        today_plan=summary.today_plan,
        featured_meals=health.meals[:_FEATURED],
        featured_exercises=health.exercises[:_FEATURED],
    )
