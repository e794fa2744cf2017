# api/v1/deps.py
from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.errors import NotAuthenticatedError, SimulatedAuthError
from core.health import HealthStore
from core.models.profile import Profile
from core.profile_calc import classify
from core.session import Session
from services.auth import verify_token
from api.v1.schemas import ProfileOut

_bearer = HTTPBearer(auto_error=False)


def get_app_session(request: Request) -> Session:
    return request.app.state.session


async def current_profile(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
    session: Session = Depends(get_app_session),
) -> Profile:
    if creds is None:
        raise NotAuthenticatedError("missing bearer token")
    profile_id = verify_token(creds.credentials)
    profile = session.require_profile()
    # token must belong to the profile the session currently holds
    if profile.id != profile_id:
        raise SimulatedAuthError("token does not match active session")
    return profile


async def get_health(
    request: Request,
    profile: Profile = Depends(current_profile),
) -> HealthStore:
    store = HealthStore(profile, request.app.state.repos, today=request.app.state.today)
    return await store.load()


def profile_out(profile: Profile) -> ProfileOut:
    return ProfileOut(
        **profile.model_dump(),
        bmi_category=classify(profile.bmi),
        onboarded=profile.onboarded,
    )
