"""Planner engine: daily logs, weekly schedules and their reconciliation."""
