# api/v1/router.py
from fastapi import APIRouter

from . import auth, plans, profile, weights

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
api_router.include_router(profile.router, prefix="/profile", tags=["Profile"])
api_router.include_router(weights.router, prefix="/weights", tags=["Weights"])

# plans + dashboard share the health store dependency
api_router.include_router(plans.router, tags=["Plans"])
