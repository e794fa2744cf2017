from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.errors import ValidationError
from core.models.profile import Profile
from core.session import Session
from core.validation import LAST_STEP, OnboardingWizard, validate_profile_edit, validate_step
from api.v1.deps import current_profile, get_app_session, profile_out
from api.v1.schemas import OnboardingIn, ProfileEditIn, ProfileOut, StepCheckOut

router = APIRouter()


# ───────────────────────── read ─────────────────────────────
@router.get("", response_model=ProfileOut)
async def read_profile(profile: Profile = Depends(current_profile)) -> ProfileOut:
    return profile_out(profile)


# ───────────────────────── edit ─────────────────────────────
@router.patch("", response_model=ProfileOut)
async def edit_profile(
    body: ProfileEditIn,
    profile: Profile = Depends(current_profile),
    session: Session = Depends(get_app_session),
) -> ProfileOut:
    # the edit form is always submitted whole; blanks fall back to stored values
    merged = {**profile.model_dump(), **body.model_dump(exclude_none=True)}
    changes = validate_profile_edit(merged)
    return profile_out(await session.update_profile(**changes))


# ───────────────────────── onboarding ───────────────────────
@router.post("/onboarding/steps/{step}", response_model=StepCheckOut)
async def check_onboarding_step(
    step: int,
    body: OnboardingIn,
    _: Profile = Depends(current_profile),
) -> StepCheckOut:
    if not 1 <= step <= LAST_STEP:
        errors = {"step": f"step must be between 1 and {LAST_STEP}"}
    else:
        errors = validate_step(step, body.model_dump())
    return StepCheckOut(step=step, ok=not errors, errors=errors)


@router.post("/onboarding", response_model=ProfileOut, status_code=status.HTTP_200_OK)
async def complete_onboarding(
    body: OnboardingIn,
    _: Profile = Depends(current_profile),
    session: Session = Depends(get_app_session),
) -> ProfileOut:
    wizard = OnboardingWizard()
    wizard.update(**body.model_dump())
    # walk the steps so an early failure reports that step's fields only
    while wizard.next_step():
        pass
    if wizard.step < LAST_STEP:
        raise ValidationError(wizard.errors)
    changes = wizard.submit()
    return profile_out(await session.update_profile(**changes))
