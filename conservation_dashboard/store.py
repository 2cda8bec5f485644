"""In-memory record stores backing the dashboard views."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from . import sample_data
from .activity import ActivityLog
from .models import (
    ActivityAction,
    ActivityCategory,
    ActivityEntry,
    ImpactAssessment,
    ProjectSite,
    RecordModel,
    ValidationError,
    VolunteerAssignment,
)
from .pipeline import Criteria, ViewResult, compute_aggregates, run_view
from .views import DOMAINS, Domain, get_domain

logger = logging.getLogger(__name__)

_DEFAULT_SORT = object()


def next_record_id(records: Iterable[RecordModel]) -> int:
    return max((record.id for record in records), default=0) + 1


def find_record(records: Iterable[RecordModel], record_id: int) -> RecordModel | None:
    return next((record for record in records if record.id == record_id), None)


def insert_record(
    records: tuple[RecordModel, ...],
    domain: Domain,
    values: Mapping[str, Any],
) -> tuple[tuple[RecordModel, ...], RecordModel]:
    """Return a new tuple with a record built from ``values`` over the template."""

    merged = {**domain.template(), **values, "id": next_record_id(records)}
    record = domain.record_type.from_dict(merged)
    return (*records, record), record


def replace_record(
    records: tuple[RecordModel, ...],
    record_id: int,
    changes: Mapping[str, Any],
) -> tuple[tuple[RecordModel, ...], RecordModel | None]:
    """Return a new tuple with the matching record rebuilt from ``changes``."""

    current = find_record(records, record_id)
    if current is None:
        return records, None

    if "id" in changes and changes["id"] != record_id:
        raise ValidationError(type(current).__name__, {"id": "Record id cannot be changed."})

    updated = current.with_changes(**{key: value for key, value in changes.items() if key != "id"})
    return tuple(updated if record.id == record_id else record for record in records), updated


def remove_record(
    records: tuple[RecordModel, ...],
    record_id: int,
) -> tuple[tuple[RecordModel, ...], bool]:
    remaining = tuple(record for record in records if record.id != record_id)
    return remaining, len(remaining) != len(records)


def _describe(record: RecordModel) -> str:
    title = getattr(record, "name", "") or getattr(record, "title", "")
    return f"{title} (#{record.id})" if title else f"#{record.id}"


def _warn_on_drift(record: RecordModel) -> None:
    drift = getattr(record, "remaining_drift", 0)
    if drift:
        logger.warning(
            "%s #%s stores remaining=%s but amount - awarded=%s (drift %s).",
            type(record).__name__,
            record.id,
            getattr(record, "remaining", None),
            getattr(record, "expected_remaining", None),
            drift,
        )


class RecordStore:
    """Create, edit, delete and query one view's records.

    Every change swaps ``records`` for a new tuple, so a caller holding the old
    tuple can detect the change by identity.
    """

    def __init__(
        self,
        domain: Domain,
        records: Iterable[RecordModel] = (),
        activity: ActivityLog | None = None,
    ) -> None:
        self.domain = domain
        self.activity = activity
        self._records: tuple[RecordModel, ...] = tuple(records)

        for record in self._records:
            if not isinstance(record, domain.record_type):
                raise TypeError(
                    f"{domain.view.name} store holds {domain.record_type.__name__} records, "
                    f"got {type(record).__name__}."
                )
        ids = [record.id for record in self._records]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate record ids in {domain.view.name} seed data.")

    @classmethod
    def for_view(
        cls,
        name: str,
        records: Iterable[RecordModel] = (),
        activity: ActivityLog | None = None,
    ) -> RecordStore:
        return cls(get_domain(name), records, activity)

    @property
    def name(self) -> str:
        return self.domain.view.name

    @property
    def records(self) -> tuple[RecordModel, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def get(self, record_id: int) -> RecordModel | None:
        return find_record(self._records, record_id)

    def _log(self, action: ActivityAction, verb: str, record: RecordModel) -> None:
        if self.activity is None:
            return
        self.activity.record(
            action,
            ActivityCategory(self.name),
            f"{verb} {self.domain.view.export_name} {_describe(record)}",
            record_id=record.id,
        )

    def add(self, **values: Any) -> int:
        self._records, record = insert_record(self._records, self.domain, values)
        logger.debug("Created %s #%s.", type(record).__name__, record.id)
        _warn_on_drift(record)
        self._log(ActivityAction.RECORD_CREATED, "Created", record)
        return record.id

    def update(self, record_id: int, **changes: Any) -> bool:
        records, updated = replace_record(self._records, record_id, changes)
        if updated is None:
            logger.warning("Update skipped: no %s record with id %s.", self.name, record_id)
            return False

        self._records = records
        logger.debug("Updated %s #%s.", type(updated).__name__, record_id)
        _warn_on_drift(updated)
        self._log(ActivityAction.RECORD_UPDATED, "Updated", updated)
        return True

    def delete(self, record_id: int) -> bool:
        current = self.get(record_id)
        if current is None:
            logger.warning("Delete skipped: no %s record with id %s.", self.name, record_id)
            return False

        self._records, _ = remove_record(self._records, record_id)
        logger.debug("Deleted %s record #%s.", self.name, record_id)
        self._log(ActivityAction.RECORD_DELETED, "Deleted", current)
        return True

    def query(
        self,
        criteria: Criteria | None = None,
        sort_key: Any = _DEFAULT_SORT,
    ) -> ViewResult:
        key = self.domain.view.default_sort if sort_key is _DEFAULT_SORT else sort_key
        return run_view(self._records, self.domain.view, criteria, key)

    def aggregates(self) -> dict[str, float | int]:
        return compute_aggregates(self._records, self.domain.view)


class Workspace:
    """One store per view plus the read-only reference tables."""

    def __init__(
        self,
        stores: Mapping[str, RecordStore],
        assignments: Iterable[VolunteerAssignment] = (),
        impact_assessments: Iterable[ImpactAssessment] = (),
        project_sites: Iterable[ProjectSite] = (),
        activity: ActivityLog | None = None,
    ) -> None:
        missing = sorted(set(DOMAINS) - set(stores))
        if missing:
            raise ValueError(f"Workspace is missing stores for: {', '.join(missing)}.")
        self._stores = dict(stores)
        self.assignments = tuple(assignments)
        self.impact_assessments = tuple(impact_assessments)
        self.project_sites = tuple(project_sites)
        self.activity = activity if activity is not None else ActivityLog()
        for store in self._stores.values():
            if store.activity is None:
                store.activity = self.activity

    @classmethod
    def from_samples(cls) -> Workspace:
        seeds = sample_data.seed_records()
        activity = ActivityLog()
        return cls(
            stores={name: RecordStore.for_view(name, records, activity) for name, records in seeds.items()},
            assignments=sample_data.volunteer_assignments(),
            impact_assessments=sample_data.impact_assessments(),
            project_sites=sample_data.project_sites(),
            activity=activity,
        )

    def __getitem__(self, name: str) -> RecordStore:
        get_domain(name)
        return self._stores[name]

    def recent_activity(self, limit: int = 5) -> tuple[ActivityEntry, ...]:
        return self.activity.recent(limit)

    @property
    def donors(self) -> RecordStore:
        return self._stores["donors"]

    @property
    def grants(self) -> RecordStore:
        return self._stores["grants"]

    @property
    def surveys(self) -> RecordStore:
        return self._stores["surveys"]

    @property
    def volunteers(self) -> RecordStore:
        return self._stores["volunteers"]

    @property
    def compliance(self) -> RecordStore:
        return self._stores["compliance"]

    @property
    def reports(self) -> RecordStore:
        return self._stores["reports"]

    @property
    def projects(self) -> RecordStore:
        return self._stores["projects"]
