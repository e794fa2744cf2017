from datetime import datetime, timedelta, timezone

import jwt

from config import settings
from core.errors import SimulatedAuthError

_ALGO = "HS256"

def create_token(profile_id: str, ttl_minutes: int | None = None) -> str:
    ttl = ttl_minutes if ttl_minutes is not None else settings.token_ttl_minutes
    exp = datetime.now(timezone.utc) + timedelta(minutes=ttl)
    payload = {"sub": profile_id, "exp": exp}
    return jwt.encode(payload, settings.jwt_secret, algorithm=_ALGO)

def verify_token(token: str) -> str:
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[_ALGO])
    except jwt.PyJWTError as exc:
        raise SimulatedAuthError("Invalid credentials") from exc
    return payload["sub"]
