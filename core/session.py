"""
core/session.py
────────────────────────────────────────────────────────────────────────
Explicit session object: Unauthenticated ⇄ Authenticated(profile).

Login is a mock – any credentials succeed after a short artificial delay
and a placeholder profile is fabricated. Replace `_authenticate()` with a
real credential check before exposing this anywhere.
"""
from __future__ import annotations

import asyncio
import logging
import uuid
from enum import Enum
from typing import Any

from config import settings
from core.errors import NotAuthenticatedError
from core.models.profile import Profile
from core.profile_calc import update_profile
from services.repositories import ProfileRepository

_LOG = logging.getLogger(__name__)

# biometrics handed to every mock login
_DEMO_BIOMETRICS = dict(age=35, weight=95.0, height=170.0, bmi=32.9, weight_goal=75.0)


class SessionState(str, Enum):
    unauthenticated = "unauthenticated"
    authenticated = "authenticated"


def profile_id_for(email: str) -> str:
    """Stable opaque id so the same email always reaches the same data."""
    return uuid.uuid5(uuid.NAMESPACE_URL, f"mailto:{email.strip().lower()}").hex


class Session:
    def __init__(
        self,
        profiles: ProfileRepository,
        auth_delay: float | None = None,
    ) -> None:
        self._profiles = profiles
        self._delay = settings.auth_delay_seconds if auth_delay is None else auth_delay
        self._profile: Profile | None = None

    # ─────────────────────────────── state ────────────────────────── #
    @property
    def profile(self) -> Profile | None:
        return self._profile

    @property
    def is_authenticated(self) -> bool:
        return self._profile is not None

    @property
    def state(self) -> SessionState:
        return SessionState.authenticated if self.is_authenticated else SessionState.unauthenticated

    def require_profile(self) -> Profile:
        if self._profile is None:
            raise NotAuthenticatedError("no active session")
        return self._profile

    async def restore(self) -> Profile | None:
        self._profile = await self._profiles.load()
        if self._profile is not None:
            _LOG.info("restored session for %s", self._profile.id)
        return self._profile

    # ─────────────────────────────── auth ─────────────────────────── #
    async def _authenticate(self, email: str, password: str) -> None:
        # simulated round-trip; credentials are not checked
        await asyncio.sleep(self._delay)

    async def login(self, email: str, password: str) -> Profile:
        await self._authenticate(email, password)
        profile = Profile(
            id=profile_id_for(email),
            name="Demo User",
            email=email,
            **_DEMO_BIOMETRICS,
        )
        await self._activate(profile)
        _LOG.info("login %s", profile.id)
        return profile

    async def register(self, name: str, email: str, password: str) -> Profile:
        await self._authenticate(email, password)
        # biometrics stay zero until onboarding
        profile = Profile(id=profile_id_for(email), name=name, email=email)
        await self._activate(profile)
        _LOG.info("registered %s", profile.id)
        return profile

    async def logout(self) -> None:
        if self._profile is not None:
            _LOG.info("logout %s", self._profile.id)
        self._profile = None
        await self._profiles.clear()

    # ─────────────────────────────── edit ─────────────────────────── #
    async def update_profile(self, **changes: Any) -> Profile:
        profile = update_profile(self.require_profile(), changes)
        await self._activate(profile)
        return profile

    async def _activate(self, profile: Profile) -> None:
        self._profile = profile
        await self._profiles.save(profile)
