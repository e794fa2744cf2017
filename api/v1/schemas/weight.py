from datetime import date

from pydantic import BaseModel

from .profile import FormValue


class WeightIn(BaseModel):
    weight: FormValue = None


class WeightRow(BaseModel):
    date: date
    weight: float
    delta: float | None     # vs. the previous (older) entry, negative = loss


class ProgressOut(BaseModel):
    initial_weight: float | None
    current_weight: float
    goal_weight: float
    percent: float
    bmi: float
    bmi_label: str
