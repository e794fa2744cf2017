from __future__ import annotations

from pydantic import BaseModel

from .profile import ProfileOut


class LoginIn(BaseModel):
    email: str
    password: str


class RegisterIn(BaseModel):
    name: str
    email: str
    password: str
    confirm_password: str


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
    profile: ProfileOut
