"""
core/validation.py
────────────────────────────────────────────────────────────────────────
Range checks for user-typed biometrics.

Every `check_*` function takes the raw form value (str / number / None)
and returns an error message or None. `OnboardingWizard` gates its three
steps on these; the profile-edit, weight-entry and registration forms
have their own wrappers.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Mapping

from core.errors import ValidationError

_LOG = logging.getLogger(__name__)

AGE_RANGE = (18, 100)
WEIGHT_RANGE = (40.0, 300.0)
HEIGHT_RANGE = (120, 250)

Errors = Dict[str, str]


# ───────────────────────────── parsing ───────────────────────────── #
def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    return num if math.isfinite(num) else None


def _to_int(value: Any) -> int | None:
    num = _to_float(value)
    if num is None or not num.is_integer():
        return None
    return int(num)


# ──────────────────────────── per field ──────────────────────────── #
def check_age(value: Any) -> str | None:
    if _blank(value):
        return "Age is required"
    age = _to_int(value)
    if age is None:
        return "Age must be a whole number"
    lo, hi = AGE_RANGE
    if not lo <= age <= hi:
        return f"Age must be between {lo} and {hi} years"
    return None


def check_weight(value: Any) -> str | None:
    if _blank(value):
        return "Weight is required"
    weight = _to_float(value)
    if weight is None:
        return "Weight must be a number"
    lo, hi = WEIGHT_RANGE
    if not lo <= weight <= hi:
        return f"Weight must be between {lo:g} and {hi:g} kg"
    return None


def check_height(value: Any) -> str | None:
    if _blank(value):
        return "Height is required"
    height = _to_int(value)
    if height is None:
        return "Height must be a whole number"
    lo, hi = HEIGHT_RANGE
    if not lo <= height <= hi:
        return f"Height must be between {lo} and {hi} cm"
    return None


def check_weight_goal(value: Any, current_weight: Any = None) -> str | None:
    if _blank(value):
        return "Goal weight is required"
    goal = _to_float(value)
    if goal is None:
        return "Goal weight must be a number"
    lo, hi = WEIGHT_RANGE
    if not lo <= goal <= hi:
        return f"Goal weight must be between {lo:g} and {hi:g} kg"
    # an unparseable current weight is reported by check_weight, not here
    current = _to_float(current_weight)
    if current is not None and goal >= current:
        return "Goal weight must be less than current weight"
    return None


# ──────────────────────────── onboarding ─────────────────────────── #
_STEP_CHECKS: Dict[int, Dict[str, Callable[[Mapping[str, Any]], str | None]]] = {
    1: {"age": lambda v: check_age(v.get("age"))},
    2: {
        "weight": lambda v: check_weight(v.get("weight")),
        "height": lambda v: check_height(v.get("height")),
    },
    3: {"weight_goal": lambda v: check_weight_goal(v.get("weight_goal"), v.get("weight"))},
}
LAST_STEP = max(_STEP_CHECKS)


def validate_step(step: int, values: Mapping[str, Any]) -> Errors:
    if step not in _STEP_CHECKS:
        raise ValueError(f"unknown onboarding step {step}")
    errors: Errors = {}
    for field, check in _STEP_CHECKS[step].items():
        msg = check(values)
        if msg:
            errors[field] = msg
    return errors


class OnboardingWizard:
    """
    Three-step questionnaire: age → weight & height → goal weight.
    `next_step()` only advances when the current step is clean.
    """

    def __init__(self) -> None:
        self.step = 1
        self.values: Dict[str, Any] = {}
        self.errors: Errors = {}

    def update(self, **values: Any) -> None:
        self.values.update(values)

    def next_step(self) -> bool:
        self.errors = validate_step(self.step, self.values)
        if self.errors or self.step >= LAST_STEP:
            return False
        self.step += 1
        return True

    def previous_step(self) -> None:
        if self.step > 1:
            self.step -= 1
            self.errors = {}

    def submit(self) -> Dict[str, Any]:
        """Re-validate the goal step and return the profile changes to commit."""
        self.errors = validate_step(LAST_STEP, self.values)
        if self.errors:
            raise ValidationError(self.errors)
        return {
            "age": _to_int(self.values.get("age")),
            "weight": _to_float(self.values.get("weight")),
            "height": _to_int(self.values.get("height")),
            "weight_goal": _to_float(self.values.get("weight_goal")),
        }


# ───────────────────────────── other forms ───────────────────────── #
def validate_profile_edit(values: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Profile screen: name plus the four biometrics. Unlike onboarding the
    goal is only range-checked, not compared with the current weight.
    """
    errors: Errors = {}
    if _blank(values.get("name")):
        errors["name"] = "Name is required"
    for field, check in (
        ("age", check_age),
        ("weight", check_weight),
        ("height", check_height),
        ("weight_goal", check_weight_goal),
    ):
        msg = check(values.get(field))
        if msg:
            errors[field] = msg
    if errors:
        raise ValidationError(errors)
    return {
        "name": str(values["name"]).strip(),
        "age": _to_int(values["age"]),
        "weight": _to_float(values["weight"]),
        "height": _to_int(values["height"]),
        "weight_goal": _to_float(values["weight_goal"]),
    }


def validate_weight_entry(value: Any) -> float:
    weight = _to_float(value)
    if weight is None or weight <= 0:
        _LOG.warning("rejected weight entry %r", value)
        raise ValidationError({"weight": "Please enter a valid weight"})
    return weight


def validate_registration(name: Any, email: Any, password: Any, confirm: Any) -> None:
    errors: Errors = {}
    if _blank(name):
        errors["name"] = "Name is required"
    if _blank(email):
        errors["email"] = "Email is required"
    if password != confirm:
        errors["confirm_password"] = "Passwords do not match"
    if errors:
        raise ValidationError(errors)
