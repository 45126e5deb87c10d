"""Food macro table and logger enumerations.

Macros are per the serving named in the food label (e.g. "Oats (100g)").
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodMacros:
    protein: float  # g
    carbs: float  # g
    fats: float  # g
    calories: float  # kcal


COMMON_FOODS: dict[str, dict[str, FoodMacros]] = {
    "Protein Sources": {
        "Chicken Breast (100g)": FoodMacros(31, 0, 3.6, 165),
        "Eggs (1 large)": FoodMacros(6, 0.6, 5, 70),
        "Greek Yogurt (100g)": FoodMacros(10, 4, 0, 59),
        "Tuna (100g)": FoodMacros(30, 0, 1, 132),
        "Salmon (100g)": FoodMacros(25, 0, 12, 208),
        "Protein Powder (1 scoop)": FoodMacros(24, 3, 1, 120),
        "Cottage Cheese (100g)": FoodMacros(11, 3.4, 4.3, 98),
    },
    "Carbohydrates": {
        "Oats (100g)": FoodMacros(17, 66, 7, 389),
        "Brown Rice (100g cooked)": FoodMacros(2.6, 23, 0.9, 111),
        "Sweet Potato (100g)": FoodMacros(2, 20, 0.1, 86),
        "Banana (1 medium)": FoodMacros(1.3, 27, 0.3, 105),
        "White Rice (100g cooked)": FoodMacros(2.7, 28, 0.3, 130),
        "Pasta (100g cooked)": FoodMacros(5, 25, 0.9, 131),
    },
    "Healthy Fats": {
        "Almonds (28g)": FoodMacros(6, 6, 14, 164),
        "Avocado (100g)": FoodMacros(2, 9, 15, 160),
        "Olive Oil (1 tbsp)": FoodMacros(0, 0, 14, 119),
        "Peanut Butter (2 tbsp)": FoodMacros(8, 6, 16, 188),
        "Walnuts (28g)": FoodMacros(4, 4, 18, 185),
    },
    "Supplements": {
        "Creatine (5g)": FoodMacros(0, 0, 0, 0),
        "Whey Protein (1 scoop)": FoodMacros(24, 3, 1, 120),
        "Casein Protein (1 scoop)": FoodMacros(24, 3, 1, 120),
        "BCAA (1 serving)": FoodMacros(5, 0, 0, 20),
    },
    "Dairy": {
        "Milk (250ml)": FoodMacros(8, 12, 8, 150),
        "Low-fat Milk (250ml)": FoodMacros(8, 12, 2.5, 102),
        "Cheese (28g)": FoodMacros(7, 1, 9, 113),
    },
}

MEAL_TYPES: tuple[str, ...] = (
    "Breakfast",
    "Mid-Morning Snack",
    "Lunch",
    "Afternoon Snack",
    "Pre-Workout",
    "Post-Workout",
    "Dinner",
    "Evening Snack",
)

WORKOUT_TYPES: tuple[str, ...] = (
    "Push Day (Chest, Shoulders, Triceps)",
    "Pull Day (Back, Biceps)",
    "Leg Day",
    "Upper Body",
    "Lower Body",
    "Full Body",
    "Cardio",
    "Swimming",
    "Recovery/Stretching",
)

MACHINES: tuple[str, ...] = (
    "Barbell",
    "Dumbbell",
    "Cable Machine",
    "Smith Machine",
    "Leg Press Machine",
    "Lat Pulldown Machine",
    "Seated Row Machine",
    "Chest Press Machine",
    "Shoulder Press Machine",
    "Leg Curl Machine",
    "Leg Extension Machine",
    "Calf Raise Machine",
    "Free Weights",
    "Bodyweight",
)


def find_food(name: str) -> FoodMacros | None:
    """Look up a food by its exact label across all groups.

    Used to auto-fill macros when a known food is picked in the logger.
    """
    for foods in COMMON_FOODS.values():
        if name in foods:
            return foods[name]
    return None


def food_names() -> list[str]:
    """All food labels, grouped in table order."""
    return [name for foods in COMMON_FOODS.values() for name in foods]
