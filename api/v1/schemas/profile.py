from __future__ import annotations

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr

from core.profile_calc import BmiCategory

# form values arrive as typed text or numbers; core.validation parses them.
# strict so JSON booleans are rejected instead of coerced to 1.0 / 0.0
FormValue = StrictStr | StrictFloat | StrictInt | None


class ProfileOut(BaseModel):
    id: str
    name: str
    email: str
    age: int
    weight: float
    height: float
    bmi: float
    weight_goal: float
    bmi_category: BmiCategory
    onboarded: bool


class ProfileEditIn(BaseModel):
    name: str | None = None
    age: FormValue = None
    weight: FormValue = None
    height: FormValue = None
    weight_goal: FormValue = None


class OnboardingIn(BaseModel):
    age: FormValue = None
    weight: FormValue = None
    height: FormValue = None
    weight_goal: FormValue = None


class StepCheckOut(BaseModel):
    step: int
    ok: bool
    errors: dict[str, str]
