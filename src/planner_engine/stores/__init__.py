"""Document stores for daily logs, schedules, profiles and reports."""

from planner_engine.stores.base import DocumentStore, report_id_for
from planner_engine.stores.json_file import JsonFileStore
from planner_engine.stores.memory import MemoryStore

__all__ = ["DocumentStore", "JsonFileStore", "MemoryStore", "report_id_for"]
