from enum import Enum

from pydantic import BaseModel, ConfigDict


class Meal(BaseModel):
    id: str
    name: str
    description: str
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    image_url: str
    ingredients: tuple[str, ...] = ()
    instructions: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)


class Difficulty(str, Enum):
    beginner = "Beginner"
    intermediate = "Intermediate"
    advanced = "Advanced"


class Exercise(BaseModel):
    id: str
    name: str
    description: str
    video_url: str
    duration_min: int
    calories_burned: float
    difficulty: Difficulty
    tags: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)
