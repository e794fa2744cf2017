from pydantic import BaseModel, ConfigDict


class Profile(BaseModel):
    id: str
    name: str
    email: str
    age: int = 0            # years
    weight: float = 0.0     # kg
    height: float = 0.0     # cm
    bmi: float = 0.0        # derived, see core.profile_calc
    weight_goal: float = 0.0

    model_config = ConfigDict(frozen=True)

    @property
    def onboarded(self) -> bool:
        return self.age > 0 and self.weight > 0 and self.height > 0
