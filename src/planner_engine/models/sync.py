"""Outcome of a reconciliation pass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto


class SyncDirection(IntEnum):
    LOG_TO_SCHEDULE = auto()
    SCHEDULE_TO_LOG = auto()


class SyncStatus(IntEnum):
    APPLIED = auto()  # a write was performed
    UNCHANGED = auto()  # nothing differed, no write
    SKIPPED = auto()  # another pass held the (user, day) slot
    FAILED = auto()  # the store rejected the write


@dataclass(frozen=True)
class SyncResult:
    direction: SyncDirection
    status: SyncStatus
    writes: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status in (SyncStatus.APPLIED, SyncStatus.UNCHANGED)


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a user action: the primary write plus any follow-up passes."""

    saved: bool
    syncs: tuple[SyncResult, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.saved and all(s.status != SyncStatus.FAILED for s in self.syncs)
