"""Static lookup tables: foods, meal types, workout types, equipment."""

from planner_engine.lookup.food_data import (
    COMMON_FOODS,
    MACHINES,
    MEAL_TYPES,
    WORKOUT_TYPES,
    FoodMacros,
    find_food,
    food_names,
)

__all__ = [
    "COMMON_FOODS",
    "FoodMacros",
    "MACHINES",
    "MEAL_TYPES",
    "WORKOUT_TYPES",
    "find_food",
    "food_names",
]
