"""Weekly aggregation: seven daily logs reduced to series and scalar stats.

Missing days are zero-filled before averaging, so every average divides
by the seven calendar days of the week rather than by the number of days
with data. A week without logging is meant to score low.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Iterable, Mapping

import numpy as np
import pandas as pd

from planner_engine.models.daily_log import DailyLog
from planner_engine.models.entries import MealEntry
from planner_engine.models.enums import DAYS_PER_WEEK, FALLBACK_BODY_WEIGHT_KG
from planner_engine.models.profile import UserProfile
from planner_engine.models.report import (
    DailyNutrition,
    DailyWater,
    DatedWorkout,
    WeeklyAggregate,
    WeeklyStats,
    WeightPoint,
)
from planner_engine.models.schedule import week_start_for

_MACROS = ("protein", "carbs", "fats", "calories")
_ZERO_FILLED = (*_MACROS, "meal_count", "water")
_COLUMNS = ("date", *_ZERO_FILLED, "weight")


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (64.5 -> 65)."""
    return int(math.floor(value + 0.5))


def daily_totals(meals: Iterable[MealEntry]) -> dict[str, float]:
    """Sum protein, carbs, fats and calories over a day's meals."""
    totals = dict.fromkeys(_MACROS, 0.0)
    for meal in meals:
        totals["protein"] += meal.protein
        totals["carbs"] += meal.carbs
        totals["fats"] += meal.fats
        totals["calories"] += meal.calories
    return totals


def percent_of_goal(value: float, goal: float) -> float:
    """Progress towards a goal in percent, capped at 100.

    Args:
        value: Amount achieved (grams, ml, kcal).
        goal: Target amount. Non-positive goals count as unmet.

    Returns:
        Percentage in [0, 100].
    """
    if goal <= 0:
        return 0.0
    return float(min(max(value, 0.0) / goal * 100.0, 100.0))


def _daily_frame(logs: Mapping[date, DailyLog], start: date) -> pd.DataFrame:
    """One row per calendar day of the week, zero-filled where nothing was logged."""
    days = [start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]
    records = []
    for day in days:
        log = logs.get(day)
        if log is None:
            continue
        totals = daily_totals(log.meals)
        records.append(
            {
                "date": day,
                **totals,
                "meal_count": len(log.meals),
                "water": log.water,
                "weight": log.weight if log.weight and log.weight > 0 else np.nan,
            }
        )

    frame = pd.DataFrame(records, columns=list(_COLUMNS)).set_index("date").reindex(days)
    frame[list(_ZERO_FILLED)] = frame[list(_ZERO_FILLED)].fillna(0).astype(np.float64)
    frame["weight"] = pd.to_numeric(frame["weight"], errors="coerce")
    return frame


def aggregate_week(
    logs: Mapping[date, DailyLog],
    week_start: date,
    profile: UserProfile | None = None,
) -> WeeklyAggregate:
    """Reduce one Monday-anchored week of daily logs.

    Args:
        logs: Daily logs keyed by date. Days outside the week are ignored,
            missing days count as empty.
        week_start: Any date in the week; normalized to its Monday.
        profile: Supplies goals and the fallback body weight.

    Returns:
        WeeklyAggregate with per-day series and WeeklyStats.
    """
    profile = profile or UserProfile()
    start = week_start_for(week_start)
    end = start + timedelta(days=DAYS_PER_WEEK - 1)
    frame = _daily_frame(logs, start)

    workouts = tuple(
        DatedWorkout(date=day, entry=entry)
        for day in frame.index
        if day in logs
        for entry in logs[day].workouts
    )
    nutrition = tuple(
        DailyNutrition(
            date=day,
            protein=float(row.protein),
            carbs=float(row.carbs),
            fats=float(row.fats),
            calories=float(row.calories),
            meal_count=int(row.meal_count),
        )
        for day, row in frame.iterrows()
    )
    water = tuple(DailyWater(date=day, intake_ml=int(row.water)) for day, row in frame.iterrows())

    weight_series = frame["weight"].dropna()
    weights = tuple(WeightPoint(date=day, weight_kg=float(kg)) for day, kg in weight_series.items())
    if not weights:
        fallback = profile.current_weight_kg or FALLBACK_BODY_WEIGHT_KG
        weights = (WeightPoint(date=start, weight_kg=float(fallback)),)

    stats = _weekly_stats(frame, workouts, weights, profile)
    return WeeklyAggregate(
        profile=profile,
        start_date=start,
        end_date=end,
        workouts=workouts,
        nutrition=nutrition,
        water=water,
        weights=weights,
        stats=stats,
    )


def _weekly_stats(
    frame: pd.DataFrame,
    workouts: tuple[DatedWorkout, ...],
    weights: tuple[WeightPoint, ...],
    profile: UserProfile,
) -> WeeklyStats:
    protein = frame["protein"].to_numpy()
    water = frame["water"].to_numpy()

    weight_change = 0.0
    if len(weights) > 1:
        weight_change = round(weights[-1].weight_kg - weights[0].weight_kg, 1)

    workout_types: list[str] = []
    for dated in workouts:
        kind = dated.entry.workout_type
        if kind and kind not in workout_types:
            workout_types.append(kind)

    volume = float(np.sum([dated.entry.volume for dated in workouts])) if workouts else 0.0

    return WeeklyStats(
        total_workouts=len(workouts),
        average_protein=round_half_up(float(np.mean(protein))),
        average_calories=round_half_up(float(frame["calories"].mean())),
        average_water=round_half_up(float(np.mean(water))),
        protein_goal_days=int(np.count_nonzero(protein >= profile.effective_protein_goal)),
        water_goal_days=int(np.count_nonzero(water >= profile.water_goal_ml)),
        weight_change=weight_change,
        workout_types=tuple(workout_types),
        total_volume=volume,
    )
