"""
core/recommendation.py
────────────────────────────────────────────────────────────────────────
Fixed meal / exercise catalog and daily-plan assembly.

There is no personalisation here: `catalog()` always returns the same
entries and `build_daily_plan()` always picks the same indices. The
catalog doubles as seed data for a future recommender.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Sequence, Tuple

from core.errors import InvalidInputError
from core.models.meal import Exercise, Meal
from core.models.plan import DailyPlan, PlanMeals

_LOG = logging.getLogger(__name__)

# catalog indices used for every plan
BREAKFAST_IDX = 2
LUNCH_IDX = 0
DINNER_IDX = 1
EXERCISE_IDXS = (0, 2)

# ────────────────────────────────────────────────────────────────────
_DEFAULT_MEALS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Chicken & Avocado Salad",
        "description": "Protein-rich salad with healthy fats, low in carbohydrates.",
        "calories": 350, "protein_g": 30, "carbs_g": 15, "fat_g": 20,
        "image_url": "https://images.unsplash.com/photo-1512621776951-a57141f2eefd?auto=format&fit=crop&w=500&q=60",
        "ingredients": [
            "150 g grilled chicken breast",
            "1 medium avocado",
            "2 cups mixed lettuce",
            "1 medium tomato",
            "1 tbsp olive oil",
            "Lemon juice to taste",
            "Salt and pepper to taste",
        ],
        "instructions": [
            "Grill the chicken breast with a little salt and pepper.",
            "Wash and chop the lettuce and tomato.",
            "Dice the avocado.",
            "Combine everything in a bowl.",
            "Dress with olive oil, lemon juice, salt and pepper.",
        ],
        "tags": ["high protein", "low carb", "healthy"],
    },
    {
        "id": "2",
        "name": "Baked Salmon with Vegetables",
        "description": "Rich in omega-3 fatty acids and high-quality protein.",
        "calories": 420, "protein_g": 35, "carbs_g": 10, "fat_g": 25,
        "image_url": "https://images.unsplash.com/photo-1467003909585-2f8a72700288?auto=format&fit=crop&w=500&q=60",
        "ingredients": [
            "180 g salmon fillet",
            "1 medium zucchini",
            "1 red bell pepper",
            "1 medium onion",
            "2 tbsp olive oil",
            "Lemon juice",
            "Herbs (thyme, rosemary)",
            "Salt and pepper to taste",
        ],
        "instructions": [
            "Preheat the oven to 180 °C.",
            "Slice the vegetables into medium pieces.",
            "Place salmon and vegetables on a baking tray.",
            "Drizzle with olive oil, lemon juice, salt, pepper and herbs.",
            "Bake 20-25 minutes until the salmon is cooked through.",
        ],
        "tags": ["omega-3", "low carb", "high protein"],
    },
    {
        "id": "3",
        "name": "Green Protein Smoothie",
        "description": "Nutritious shake for breakfast or after a workout.",
        "calories": 250, "protein_g": 20, "carbs_g": 25, "fat_g": 8,
        "image_url": "https://images.unsplash.com/photo-1556881286-fc6915169721?auto=format&fit=crop&w=500&q=60",
        "ingredients": [
            "1 scoop unflavoured whey protein",
            "1 medium banana",
            "1 handful spinach",
            "1 tbsp almond butter",
            "250 ml unsweetened almond milk",
            "Ice to taste",
        ],
        "instructions": [
            "Add all ingredients to a blender.",
            "Blend until smooth.",
            "Serve immediately.",
        ],
        "tags": ["high protein", "post-workout", "breakfast"],
    },
]

_DEFAULT_EXERCISES: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Low-intensity walk",
        "description": "Moderate-pace walk, suitable for beginners living with obesity.",
        "video_url": "https://www.youtube.com/watch?v=example1",
        "duration_min": 30, "calories_burned": 150, "difficulty": "Beginner",
        "tags": ["cardio", "low impact", "beginner"],
    },
    {
        "id": "2",
        "name": "Water aerobics",
        "description": "Pool routine that reduces the load on the joints.",
        "video_url": "https://www.youtube.com/watch?v=example2",
        "duration_min": 45, "calories_burned": 300, "difficulty": "Beginner",
        "tags": ["aquatic", "low impact", "joints"],
    },
    {
        "id": "3",
        "name": "Beginner yoga",
        "description": "Adapted yoga routine that improves flexibility and balance.",
        "video_url": "https://www.youtube.com/watch?v=example3",
        "duration_min": 20, "calories_burned": 120, "difficulty": "Beginner",
        "tags": ["yoga", "flexibility", "relaxation"],
    },
    {
        "id": "4",
        "name": "Chair strength training",
        "description": "Strength exercises using a chair for support.",
        "video_url": "https://www.youtube.com/watch?v=example4",
        "duration_min": 25, "calories_burned": 180, "difficulty": "Beginner",
        "tags": ["strength", "chair", "toning"],
    },
]


def catalog() -> Tuple[List[Meal], List[Exercise]]:
    meals = [Meal.model_validate(m) for m in _DEFAULT_MEALS]
    exercises = [Exercise.model_validate(e) for e in _DEFAULT_EXERCISES]
    return meals, exercises


def build_daily_plan(
    day: date,
    meals: Sequence[Meal],
    exercises: Sequence[Exercise],
) -> DailyPlan:
    """
    Fixed-index selection: smoothie / salad / salmon, walk + yoga.
    Raises InvalidInputError when the catalog is too short to pick from.
    """
    need_meals = max(BREAKFAST_IDX, LUNCH_IDX, DINNER_IDX) + 1
    need_ex = max(EXERCISE_IDXS) + 1
    if len(meals) < need_meals or len(exercises) < need_ex:
        raise InvalidInputError(
            f"catalog too small: need {need_meals} meals / {need_ex} exercises, "
            f"got {len(meals)} / {len(exercises)}"
        )

    plan = DailyPlan(
        date=day,
        meals=PlanMeals(
            breakfast=meals[BREAKFAST_IDX],
            lunch=meals[LUNCH_IDX],
            dinner=meals[DINNER_IDX],
            snacks=[],
        ),
        exercises=[exercises[i] for i in EXERCISE_IDXS],
        water_intake=0,
        notes="",
    )
    _LOG.debug("built plan for %s", day)
    return plan


def plan_for(plans: Sequence[DailyPlan], day: date) -> DailyPlan | None:
    """First plan whose date matches; later same-date plans are never returned."""
    return next((p for p in plans if p.date == day), None)
