"""Filter, sort and summarize record lists for the dashboard views."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Sequence


INACTIVE_CRITERIA = {"", "all", "All"}


@dataclass(frozen=True)
class Criteria:
    status: str | None = None
    type: str | None = None
    search_term: str = ""


@dataclass(frozen=True)
class SortOption:
    """A named ordering: ``key`` extracts the value, ``descending`` flips it."""

    label: str
    key: Callable[[Any], Any]
    descending: bool = False
    text: bool = False


@dataclass(frozen=True)
class ViewDefinition:
    """How one dashboard view filters, orders and summarizes its records."""

    name: str
    export_name: str
    search_fields: tuple[str, ...]
    status_field: str | None = None
    type_field: str | None = None
    sort_options: Mapping[str, SortOption] = field(default_factory=dict)
    default_sort: str | None = None
    aggregates: Mapping[str, Callable[[Sequence[Any]], float | int]] = field(default_factory=dict)


@dataclass(frozen=True)
class ViewResult:
    records: tuple[Any, ...]
    aggregates: dict[str, float | int]


def safe_average(total: float, count: int) -> float:
    if count <= 0:
        return 0
    return total / count


def is_active_criterion(value: str | None) -> bool:
    return value is not None and value not in INACTIVE_CRITERIA


def _field_text(value: Any) -> Iterable[str]:
    if value is None:
        return ()
    if isinstance(value, Enum):
        return (str(value.value),)
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(text for item in value for text in _field_text(item))
    return (str(value),)


def _field_value(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def matches_search(record: Any, search_fields: Iterable[str], search_term: str) -> bool:
    # only the empty string disables search; whitespace is part of the term
    if not search_term:
        return True
    needle = search_term.lower()
    for name in search_fields:
        for text in _field_text(_field_value(record, name)):
            if needle in text.lower():
                return True
    return False


def _matches_exact(record: Any, field_name: str | None, expected: str | None) -> bool:
    if field_name is None or not is_active_criterion(expected):
        return True
    value = _field_value(record, field_name)
    if isinstance(value, Enum):
        value = value.value
    return value == expected


def filter_records(
    records: Iterable[Any],
    view: ViewDefinition,
    criteria: Criteria | None = None,
) -> list[Any]:
    active = criteria or Criteria()
    return [
        record
        for record in records
        if _matches_exact(record, view.status_field, active.status)
        and _matches_exact(record, view.type_field, active.type)
        and matches_search(record, view.search_fields, active.search_term)
    ]


def sort_records(
    records: Iterable[Any],
    view: ViewDefinition,
    sort_key: str | None = None,
) -> list[Any]:
    items = list(records)
    if sort_key is None:
        return items

    option = view.sort_options.get(sort_key)
    if option is None:
        known = ", ".join(sorted(view.sort_options)) or "none"
        raise ValueError(f"Unknown sort key {sort_key!r} for {view.name}; expected one of: {known}.")

    present = []
    missing = []
    for record in items:
        value = option.key(record)
        if value is None:
            missing.append(record)
        else:
            present.append((value, record))

    if option.text:
        present.sort(key=lambda pair: (str(pair[0]).casefold(), str(pair[0])), reverse=option.descending)
    else:
        present.sort(key=lambda pair: pair[0], reverse=option.descending)

    # records without a value always trail, in source order
    return [record for _, record in present] + missing


def compute_aggregates(records: Sequence[Any], view: ViewDefinition) -> dict[str, float | int]:
    source = list(records)
    return {name: compute(source) for name, compute in view.aggregates.items()}


def run_view(
    records: Sequence[Any],
    view: ViewDefinition,
    criteria: Criteria | None = None,
    sort_key: str | None = None,
) -> ViewResult:
    """Filter and sort for display; aggregate over the full, unfiltered list."""

    visible = sort_records(filter_records(records, view, criteria), view, sort_key)
    return ViewResult(records=tuple(visible), aggregates=compute_aggregates(records, view))
