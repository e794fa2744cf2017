"""Re-export individual schema modules for easy imports."""

from .auth import LoginIn, RegisterIn, TokenOut
from .profile import OnboardingIn, ProfileEditIn, ProfileOut, StepCheckOut
from .weight import ProgressOut, WeightIn, WeightRow
from .plan import CatalogOut, DashboardOut

__all__ = [
    "LoginIn",
    "RegisterIn",
    "TokenOut",
    "OnboardingIn",
    "ProfileEditIn",
    "ProfileOut",
    "StepCheckOut",
    "ProgressOut",
    "WeightIn",
    "WeightRow",
    "CatalogOut",
    "DashboardOut",
]
