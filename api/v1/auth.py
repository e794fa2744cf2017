from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.models.profile import Profile
from core.session import Session
from core.validation import validate_registration
from services.auth import create_token
from api.v1.deps import current_profile, get_app_session, profile_out
from api.v1.schemas import LoginIn, RegisterIn, TokenOut

router = APIRouter()


def _token_for(profile: Profile) -> TokenOut:
    return TokenOut(access_token=create_token(profile.id), profile=profile_out(profile))


@router.post("/login", response_model=TokenOut)
async def login(
    body: LoginIn,
    session: Session = Depends(get_app_session),
) -> TokenOut:
    profile = await session.login(body.email, body.password)
    return _token_for(profile)


@router.post("/register", response_model=TokenOut, status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterIn,
    session: Session = Depends(get_app_session),
) -> TokenOut:
    validate_registration(body.name, body.email, body.password, body.confirm_password)
    profile = await session.register(body.name, body.email, body.password)
    return _token_for(profile)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    _: Profile = Depends(current_profile),
    session: Session = Depends(get_app_session),
) -> Response:
    await session.logout()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
