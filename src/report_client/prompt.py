"""Prompt text for the weekly analysis."""

from __future__ import annotations

from planner_engine.aggregation import round_half_up
from planner_engine.models.enums import DAYS_PER_WEEK
from planner_engine.models.report import WeeklyAggregate
from planner_engine.reconciliation.projection import format_number

SYSTEM_PROMPT = (
    "You are FitTrack AI, an expert fitness and nutrition coach specializing in muscle building "
    "and physique development. You analyze user data to provide actionable insights for achieving "
    "defined abs, strong shoulders, and arms. Be specific, motivational, and data-driven in your "
    "recommendations."
)

SECTION_REQUESTS = (
    "WEEKLY PERFORMANCE SUMMARY (2-3 sentences)",
    "KEY STRENGTHS (what's going well)",
    "AREAS FOR IMPROVEMENT (specific actionable items)",
    "NEXT WEEK RECOMMENDATIONS (3-4 specific suggestions)",
    "MUSCLE BUILDING INSIGHTS (protein timing, workout progression)",
    "TREND ANALYSIS (weight, strength, consistency patterns)",
)


def _daily_average(values: list[float]) -> int:
    return round_half_up(sum(values) / DAYS_PER_WEEK) if values else 0


def _or_unknown(value: float | None, unit: str) -> str:
    return f"{format_number(value)}{unit}" if value else "unknown"


def build_analysis_prompt(aggregate: WeeklyAggregate) -> str:
    """Render the user message for one week of aggregates."""
    profile = aggregate.profile
    stats = aggregate.stats
    protein_goal = profile.effective_protein_goal
    height = _or_unknown(profile.height_cm, "cm")
    weight = _or_unknown(profile.current_weight_kg, "kg")

    workout_lines = [
        f"- {d.entry.exercise}: {d.entry.sets}x{d.entry.reps} @ {format_number(d.entry.weight)}kg"
        f" ({d.entry.workout_type or 'unspecified'})"
        for d in aggregate.workouts
    ]
    weight_lines = [f"{p.date.isoformat()}: {format_number(p.weight_kg)}kg" for p in aggregate.weights]

    lines = [
        f"Analyze this week's fitness data for a {height}, {weight} individual aiming for a muscular physique:",
        "",
        "USER PROFILE:",
        f"- Height: {height}",
        f"- Current Weight: {weight}",
        "- Goal: Defined abs, strong shoulders, arms",
        "- Target: Lean muscle gain",
        "",
        f"WEEKLY DATA ({aggregate.start_date.isoformat()} to {aggregate.end_date.isoformat()}):",
        "",
        f"WORKOUTS COMPLETED: {stats.total_workouts} sessions",
        *workout_lines,
        "",
        "NUTRITION SUMMARY:",
        f"- Daily Avg Protein: {stats.average_protein}g (Goal: {protein_goal}-{protein_goal + 10}g)",
        f"- Daily Avg Carbs: {_daily_average([n.carbs for n in aggregate.nutrition])}g",
        f"- Daily Avg Fats: {_daily_average([n.fats for n in aggregate.nutrition])}g",
        f"- Daily Avg Calories: {stats.average_calories}",
        "",
        "HYDRATION:",
        f"- Daily Avg Water: {stats.average_water}ml (Goal: {profile.water_goal_ml}ml)",
        f"- Days Goal Met: {stats.water_goal_days}/{DAYS_PER_WEEK}",
        "",
        "WEIGHT TREND:",
        *weight_lines,
        "",
        "Please provide:",
        *(f"{i}. {request}" for i, request in enumerate(SECTION_REQUESTS, start=1)),
        "",
        "Keep response concise, motivational, and focused on physique goals.",
    ]
    return "\n".join(lines)
