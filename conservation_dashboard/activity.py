"""Session activity log: record changes, reports, exports and emails."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Iterable

from .models import ActivityAction, ActivityCategory, ActivityEntry
from .pipeline import Criteria, ViewResult, compute_aggregates, run_view
from .views import ACTIVITY_VIEW

logger = logging.getLogger(__name__)

SYSTEM_USER = "System"


class ActivityLog:
    """Append-only list of ``ActivityEntry`` records, newest id last."""

    def __init__(
        self,
        entries: Iterable[ActivityEntry] = (),
        now: Callable[[], datetime] = datetime.now,
        user: str = SYSTEM_USER,
    ) -> None:
        self._entries: tuple[ActivityEntry, ...] = tuple(entries)
        self._now = now
        self.user = user

    @property
    def entries(self) -> tuple[ActivityEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def record(
        self,
        action: ActivityAction | str,
        category: ActivityCategory | str,
        description: str,
        *,
        record_id: int | None = None,
        success: bool = True,
        user: str | None = None,
    ) -> ActivityEntry:
        entry = ActivityEntry(
            id=self._entries[-1].id + 1 if self._entries else 1,
            timestamp=self._now(),
            user=user or self.user,
            action=action,
            category=category,
            description=description,
            record_id=record_id,
            success=success,
        )
        self._entries = (*self._entries, entry)
        logger.info("Activity %s [%s]: %s", entry.action.value, entry.category.value, entry.description)
        return entry

    def recent(self, limit: int = 5) -> tuple[ActivityEntry, ...]:
        if limit <= 0:
            return ()
        return tuple(reversed(self._entries[-limit:]))

    def query(self, criteria: Criteria | None = None, sort_key: Any = ACTIVITY_VIEW.default_sort) -> ViewResult:
        return run_view(self._entries, ACTIVITY_VIEW, criteria, sort_key)

    def aggregates(self) -> dict[str, float | int]:
        return compute_aggregates(self._entries, ACTIVITY_VIEW)
