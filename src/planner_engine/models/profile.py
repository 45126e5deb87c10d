"""User profile with nutrition and hydration goals."""

from __future__ import annotations

from dataclasses import dataclass

from planner_engine.models.enums import PROTEIN_GOAL_G, WATER_GOAL_ML


@dataclass(frozen=True)
class UserProfile:
    display_name: str = ""
    height_cm: float | None = None
    current_weight_kg: float | None = None
    target_weight_kg: float | None = None
    age: int | None = None
    gender: str = ""
    activity_level: str = ""
    water_goal_ml: int = WATER_GOAL_ML
    calorie_goal: int | None = None
    protein_goal_g: int | None = None
    carb_goal_g: int | None = None
    fat_goal_g: int | None = None

    @property
    def effective_protein_goal(self) -> int:
        return self.protein_goal_g or PROTEIN_GOAL_G
