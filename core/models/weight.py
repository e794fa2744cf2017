from datetime import date

from pydantic import BaseModel, ConfigDict


class WeightObservation(BaseModel):
    date: date
    weight: float   # kg

    model_config = ConfigDict(frozen=True)
