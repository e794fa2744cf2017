# tests/test_profile_calc.py
from __future__ import annotations

import math
import pytest

from core.errors import InvalidInputError
from core.models.profile import Profile
from core.profile_calc import BmiCategory, classify, compute_bmi, simple_classify, update_profile

DEMO = Profile(
    id="p1",
    name="Demo User",
    email="demo@example.com",
    age=35,
    weight=95,
    height=170,
    bmi=32.9,
    weight_goal=75,
)


# ── BMI ─────────────────────────────────────────────────────────────
def test_bmi_rounds_to_one_decimal():
    assert compute_bmi(95, 170) == 32.9


def test_bmi_formula():
    expected = 70 / (1.75 * 1.75)      # 22.857…
    assert math.isclose(compute_bmi(70, 175), round(expected, 1))


@pytest.mark.parametrize("height", [0, -170])
def test_bmi_rejects_non_positive_height(height):
    with pytest.raises(InvalidInputError):
        compute_bmi(95, height)


# ── classification ──────────────────────────────────────────────────
@pytest.mark.parametrize(
    "bmi, expected",
    [
        (32.9, BmiCategory.obesity_1),
        (25, BmiCategory.normal),
        (25.1, BmiCategory.overweight),
        (30, BmiCategory.overweight),
        (35, BmiCategory.obesity_1),
        (40, BmiCategory.obesity_2),
        (40.0001, BmiCategory.obesity_3),
        (18, BmiCategory.normal),
    ],
)
def test_classify_thresholds_are_strict(bmi, expected):
    assert classify(bmi) == expected


def test_category_values_are_display_labels():
    assert classify(32.9).value == "Obesity I"


def test_simple_classify():
    assert simple_classify(32.9) == "Obesity"
    assert simple_classify(27) == "Overweight"
    assert simple_classify(30) == "Overweight"
    assert simple_classify(22) == "Normal"


# ── merge ───────────────────────────────────────────────────────────
def test_update_with_weight_and_height_recomputes_bmi():
    updated = update_profile(DEMO, {"weight": 80, "height": 170})
    assert updated.bmi == compute_bmi(80, 170)
    assert updated.weight == 80
    assert DEMO.weight == 95          # input profile untouched


def test_weight_only_update_keeps_stale_bmi():
    updated = update_profile(DEMO, {"weight": 80})
    assert updated.weight == 80
    assert updated.bmi == 32.9


def test_zero_weight_does_not_trigger_bmi():
    updated = update_profile(DEMO, {"weight": 0, "height": 170})
    assert updated.bmi == DEMO.bmi


def test_update_rejects_unknown_fields():
    with pytest.raises(InvalidInputError):
        update_profile(DEMO, {"id": "other"})
