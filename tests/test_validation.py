# tests/test_validation.py
from __future__ import annotations

import pytest

from core.errors import ValidationError
from core.validation import (
    OnboardingWizard,
    check_age,
    check_height,
    check_weight,
    check_weight_goal,
    validate_profile_edit,
    validate_registration,
    validate_step,
    validate_weight_entry,
)


# ── single fields ───────────────────────────────────────────────────
def test_age_bounds():
    assert check_age(17) is not None
    assert check_age(18) is None
    assert check_age("100") is None
    assert check_age(101) is not None


def test_age_required_and_integer():
    assert check_age("") == "Age is required"
    assert check_age(None) == "Age is required"
    assert check_age("30.5") is not None
    assert check_age("abc") is not None


def test_weight_bounds_accept_reals():
    assert check_weight(39.9) is not None
    assert check_weight("40") is None
    assert check_weight(300.0) is None
    assert check_weight(300.1) is not None


def test_height_bounds():
    assert check_height(119) is not None
    assert check_height("120") is None
    assert check_height(250) is None
    assert check_height(251) is not None


def test_goal_must_be_below_current_weight():
    assert check_weight_goal(90, current_weight=90) == "Goal weight must be less than current weight"
    assert check_weight_goal(89.99, current_weight=90) is None


def test_goal_range_checked_before_comparison():
    assert "between" in check_weight_goal(35, current_weight=90)


# ── steps / wizard ──────────────────────────────────────────────────
def test_validate_step_reports_only_that_steps_fields():
    errs = validate_step(2, {"age": 5, "weight": 20})
    assert set(errs) == {"weight", "height"}


def test_unknown_step():
    with pytest.raises(ValueError):
        validate_step(4, {})


def test_wizard_blocks_on_invalid_step():
    wiz = OnboardingWizard()
    wiz.update(age=17)
    assert wiz.next_step() is False
    assert wiz.step == 1
    assert "age" in wiz.errors

    wiz.update(age=30)
    assert wiz.next_step() is True
    assert wiz.step == 2


def test_wizard_full_run_and_submit():
    wiz = OnboardingWizard()
    wiz.update(age="35")
    assert wiz.next_step()
    wiz.update(weight="95", height="170")
    assert wiz.next_step()
    assert wiz.step == 3
    wiz.update(weight_goal="75")
    assert wiz.submit() == {"age": 35, "weight": 95.0, "height": 170, "weight_goal": 75.0}


def test_wizard_submit_revalidates_goal():
    wiz = OnboardingWizard()
    wiz.update(age=35, weight=95, height=170, weight_goal=95)
    with pytest.raises(ValidationError) as exc:
        wiz.submit()
    assert "weight_goal" in exc.value.errors


def test_wizard_previous_step():
    wiz = OnboardingWizard()
    wiz.update(age=35)
    wiz.next_step()
    wiz.previous_step()
    assert wiz.step == 1
    wiz.previous_step()
    assert wiz.step == 1


# ── other forms ─────────────────────────────────────────────────────
def test_profile_edit_does_not_compare_goal_with_weight():
    out = validate_profile_edit(
        {"name": " Ana ", "age": 40, "weight": 80, "height": 165, "weight_goal": 85}
    )
    assert out["name"] == "Ana"
    assert out["weight_goal"] == 85


def test_profile_edit_collects_all_errors():
    with pytest.raises(ValidationError) as exc:
        validate_profile_edit({"name": "", "age": 10, "weight": 80, "height": 300})
    assert set(exc.value.errors) == {"name", "age", "height", "weight_goal"}


@pytest.mark.parametrize("value", ["", "abc", 0, -3, None, "nan"])
def test_weight_entry_rejects(value):
    with pytest.raises(ValidationError):
        validate_weight_entry(value)


def test_weight_entry_accepts_text():
    assert validate_weight_entry("91.4") == 91.4


def test_registration_password_mismatch():
    with pytest.raises(ValidationError) as exc:
        validate_registration("Ana", "ana@example.com", "secret", "other")
    assert exc.value.errors == {"confirm_password": "Passwords do not match"}
    validate_registration("Ana", "ana@example.com", "secret", "secret")
