from __future__ import annotations

import pandas as pd
from fastapi import APIRouter, Depends, status

from core.health import HealthStore
from core.models.weight import WeightObservation
from core.profile_calc import simple_classify
from core.validation import validate_weight_entry
from api.v1.deps import get_health
from api.v1.schemas import ProgressOut, WeightIn, WeightRow

router = APIRouter()


@router.get("", response_model=list[WeightRow])
async def list_weights(health: HealthStore = Depends(get_health)) -> list[WeightRow]:
    df = health.weight_history()
    return [
        WeightRow(
            date=row.date,
            weight=float(row.weight),
            delta=None if pd.isna(row.delta) else float(row.delta),
        )
        for row in df.itertuples(index=False)
    ]


@router.post("", response_model=WeightObservation, status_code=status.HTTP_201_CREATED)
async def add_weight(
    body: WeightIn,
    health: HealthStore = Depends(get_health),
) -> WeightObservation:
    weight = validate_weight_entry(body.weight)
    return await health.add_weight_record(weight)


@router.get("/progress", response_model=ProgressOut)
async def weight_progress(health: HealthStore = Depends(get_health)) -> ProgressOut:
    profile = health.profile
    df = health.weight_history()
    obs = health.ledger.observations
    return ProgressOut(
        initial_weight=obs[0].weight if obs else None,
        current_weight=float(df.iloc[0]["weight"]) if not df.empty else profile.weight,
        goal_weight=profile.weight_goal,
        percent=round(health.goal_progress(), 1),
        bmi=profile.bmi,
        bmi_label=simple_classify(profile.bmi),
    )
