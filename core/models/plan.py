from datetime import date

from pydantic import BaseModel, Field

from .meal import Exercise, Meal


class PlanMeals(BaseModel):
    breakfast: Meal
    lunch: Meal
    dinner: Meal
    snacks: list[Meal] = Field(default_factory=list)


class DailyPlan(BaseModel):
    date: date
    meals: PlanMeals
    exercises: list[Exercise] = Field(default_factory=list)
    water_intake: int = 0
    notes: str = ""
