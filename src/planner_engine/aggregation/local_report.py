"""Deterministic weekly report built from the aggregates alone.

Used whenever the language model is unconfigured, fails, or answers with
nothing usable. The result is flagged ``is_demo``.
"""

from __future__ import annotations

from planner_engine.aggregation.weekly import round_half_up
from planner_engine.models.enums import DAYS_PER_WEEK, WORKOUTS_PER_WEEK_TARGET
from planner_engine.models.report import WeeklyAggregate, WeeklyReport
from planner_engine.reconciliation.projection import format_number

WATER_IMPROVEMENT_THRESHOLD_ML = 3500

RECOMMENDATIONS = (
    "Focus on compound movements: bench press, squats, deadlifts for maximum muscle activation",
    "Time protein intake around workouts: 25-30g within 2 hours post-workout",
    "Ensure 7-9 hours sleep for optimal recovery and muscle growth",
    "Track measurements (chest, shoulders, arms) for physique progress beyond weight",
)


def build_local_report(aggregate: WeeklyAggregate, generated_at: str = "") -> WeeklyReport:
    """Summarize a week from its stats without calling out to a model.

    Args:
        aggregate: Output of aggregate_week().
        generated_at: ISO timestamp to stamp on the report.

    Returns:
        WeeklyReport with ``is_demo=True`` and non-empty strengths and
        recommendations.
    """
    stats = aggregate.stats
    protein_goal = aggregate.profile.effective_protein_goal
    water_goal = aggregate.profile.water_goal_ml
    gaining = stats.weight_change > 0
    weight_change = format_number(stats.weight_change)

    summary = (
        f"Strong week with {stats.total_workouts} workouts completed! "
        f"Your average protein intake of {stats.average_protein}g shows dedication to muscle building goals. "
        + (
            "Positive weight trend indicates muscle gain progress."
            if gaining
            else "Weight stability suggests good body composition maintenance."
        )
    )

    strengths = [
        f"Completed {stats.total_workouts} workout sessions this week",
        f"Averaged {stats.average_protein}g protein daily "
        f"({stats.protein_goal_days}/{DAYS_PER_WEEK} days hit {protein_goal}g+ goal)",
        f"Maintained {stats.average_water}ml daily water intake",
    ]
    if stats.workout_types:
        strengths.append(f"Diverse training with {', '.join(stats.workout_types)} workouts")

    improvements = []
    if stats.average_protein < protein_goal:
        improvements.append(
            f"Increase protein intake to {protein_goal}-{protein_goal + 10}g daily for optimal muscle protein synthesis"
        )
    if stats.average_water < WATER_IMPROVEMENT_THRESHOLD_ML:
        improvements.append(f"Boost daily water intake to {water_goal / 1000:g}L, especially on workout days")
    if stats.total_workouts < WORKOUTS_PER_WEEK_TARGET:
        improvements.append(
            f"Aim for {WORKOUTS_PER_WEEK_TARGET}-{WORKOUTS_PER_WEEK_TARGET + 1} workout sessions per week for consistent progress"
        )
    improvements.append("Consider tracking progressive overload by gradually increasing weights")

    insights = (
        f"Your {format_number(stats.total_volume)}kg total training volume shows serious commitment. "
        "For defined abs and strong shoulders, maintain current protein levels while ensuring "
        "progressive overload in key lifts. "
        f"Weight trend of {weight_change}kg suggests "
        f"{'lean muscle gain' if gaining else 'body recomposition'} progress."
    )

    protein_rate = round_half_up(stats.protein_goal_days / DAYS_PER_WEEK * 100)
    water_rate = round_half_up(stats.water_goal_days / DAYS_PER_WEEK * 100)
    consistency = "excellent" if stats.total_workouts >= WORKOUTS_PER_WEEK_TARGET else "needs improvement"
    trends = (
        f"Training consistency is {consistency}. "
        f"Nutrition adherence at {protein_rate}% for protein goals. "
        f"Hydration compliance at {water_rate}%. "
        "Focus on consistency for maximum physique development."
    )

    return WeeklyReport(
        summary=summary,
        strengths=tuple(strengths),
        improvements=tuple(improvements),
        recommendations=RECOMMENDATIONS,
        insights=insights,
        trends=trends,
        stats=stats,
        generated_at=generated_at,
        is_demo=True,
    )
