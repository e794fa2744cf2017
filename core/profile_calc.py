"""
core/profile_calc.py
────────────────────────────────────────────────────────────────────────
Derived profile metrics:

1. BMI        weight(kg) / height(m)², one decimal
2. Category   five-level WHO-style label (strict `>` thresholds)
3. Merge      partial profile updates, recomputing BMI only when the
              update carries both weight and height
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from core.errors import InvalidInputError
from core.models.profile import Profile

Logger = logging.getLogger(__name__)


class BmiCategory(str, Enum):
    normal = "Normal"
    overweight = "Overweight"
    obesity_1 = "Obesity I"
    obesity_2 = "Obesity II"
    obesity_3 = "Obesity III"


# highest threshold first; boundary values fall into the lower category
_THRESHOLDS: tuple[tuple[float, BmiCategory], ...] = (
    (40, BmiCategory.obesity_3),
    (35, BmiCategory.obesity_2),
    (30, BmiCategory.obesity_1),
    (25, BmiCategory.overweight),
)


# ──────────────────────────────────────────────────────────────────────
#  BMI
# ──────────────────────────────────────────────────────────────────────
def compute_bmi(weight_kg: float, height_cm: float) -> float:
    if height_cm <= 0:
        raise InvalidInputError(f"height must be positive, got {height_cm!r}")
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 1)


def classify(bmi: float) -> BmiCategory:
    for limit, category in _THRESHOLDS:
        if bmi > limit:
            return category
    return BmiCategory.normal


def simple_classify(bmi: float) -> str:
    """Three-level label used on the progress screen."""
    if bmi > 30:
        return "Obesity"
    if bmi > 25:
        return "Overweight"
    return "Normal"


# ──────────────────────────────────────────────────────────────────────
#  Profile merge
# ──────────────────────────────────────────────────────────────────────
_MUTABLE_FIELDS = frozenset({"name", "email", "age", "weight", "height", "weight_goal"})


def update_profile(profile: Profile, changes: dict[str, Any]) -> Profile:
    """
    Return `profile` with `changes` merged in.

    BMI is recomputed only when `changes` carries a non-zero weight *and*
    height; a weight-only edit keeps the previous (possibly stale) BMI.
    """
    unknown = set(changes) - _MUTABLE_FIELDS
    if unknown:
        raise InvalidInputError(f"cannot update profile fields: {sorted(unknown)}")

    updates = dict(changes)
    if changes.get("weight") and changes.get("height"):
        updates["bmi"] = compute_bmi(changes["weight"], changes["height"])
    elif "weight" in changes or "height" in changes:
        Logger.debug("profile %s: partial biometrics, BMI left at %s", profile.id, profile.bmi)

    return profile.model_copy(update=updates)
