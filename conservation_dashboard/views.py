"""View definitions and create templates for each dashboard domain."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Sequence

from .models import (
    ComplianceItem,
    Donor,
    Grant,
    Priority,
    Project,
    RecordModel,
    Report,
    Survey,
    Volunteer,
)
from .pipeline import SortOption, ViewDefinition, safe_average


def _total(attribute: str) -> Callable[[Sequence[Any]], float]:
    def compute(records: Sequence[Any]) -> float:
        return sum(getattr(record, attribute) or 0 for record in records)

    return compute


def _count_where(attribute: str, *values: str) -> Callable[[Sequence[Any]], int]:
    def compute(records: Sequence[Any]) -> int:
        return sum(1 for record in records if getattr(record, attribute) in values)

    return compute


def _average(attribute: str) -> Callable[[Sequence[Any]], float]:
    def compute(records: Sequence[Any]) -> float:
        return safe_average(_total(attribute)(records), len(records))

    return compute


def _count(records: Sequence[Any]) -> int:
    return len(records)


def _attr(attribute: str) -> Callable[[Any], Any]:
    return lambda record: getattr(record, attribute)


_PRIORITY_RANK = {
    Priority.CRITICAL.value: 0,
    Priority.HIGH.value: 1,
    Priority.MEDIUM.value: 2,
    Priority.LOW.value: 3,
}


DONOR_VIEW = ViewDefinition(
    name="donors",
    export_name="donor",
    search_fields=("name", "email", "location"),
    status_field="tier",
    type_field="type",
    sort_options={
        "total_donated": SortOption("Total donated", _attr("total_donated"), descending=True),
        "name": SortOption("Name", _attr("name"), text=True),
        "last_donation": SortOption("Last donation", _attr("last_donation"), descending=True),
    },
    default_sort="total_donated",
    aggregates={
        "total_donors": _count,
        "total_donated": _total("total_donated"),
        "average_donation": _average("total_donated"),
        "major_donors": _count_where("tier", "Major"),
    },
)

GRANT_VIEW = ViewDefinition(
    name="grants",
    export_name="grant",
    search_fields=("title", "funder"),
    status_field="status",
    type_field="category",
    sort_options={
        "remaining": SortOption("Remaining (lowest first)", _attr("remaining")),
        "amount": SortOption("Grant value", _attr("amount"), descending=True),
        "title": SortOption("Title", _attr("title"), text=True),
        "end_date": SortOption("End date (soonest first)", _attr("end_date")),
    },
    aggregates={
        "total_grants": _count,
        "total_grant_value": _total("amount"),
        "total_awarded": _total("awarded"),
        "total_remaining": _total("remaining"),
        "active_grants": _count_where("status", "Active"),
        "average_progress": _average("progress"),
    },
)

SURVEY_VIEW = ViewDefinition(
    name="surveys",
    export_name="survey",
    search_fields=("name", "location", "observer"),
    status_field="status",
    sort_options={
        "date": SortOption("Date", _attr("date"), descending=True),
        "name": SortOption("Name", _attr("name"), text=True),
        "species": SortOption("Species count", _attr("species_count"), descending=True),
    },
    default_sort="date",
    aggregates={
        "total_surveys": _count,
        "completed_surveys": _count_where("status", "completed"),
        "in_progress_surveys": _count_where("status", "in_progress"),
        "total_species": _total("species_count"),
        "total_images": _total("images"),
        "average_species": _average("species_count"),
    },
)

VOLUNTEER_VIEW = ViewDefinition(
    name="volunteers",
    export_name="volunteer",
    search_fields=("name", "email", "skills"),
    status_field="status",
    type_field="experience",
    sort_options={
        "name": SortOption("Name", _attr("name"), text=True),
        "hours_logged": SortOption("Hours logged", _attr("hours_logged"), descending=True),
        "joined": SortOption("Joined", _attr("joined"), descending=True),
    },
    aggregates={
        "total_volunteers": _count,
        "active_volunteers": _count_where("status", "active"),
        "total_hours": _total("hours_logged"),
        "pending_volunteers": _count_where("status", "pending"),
        "average_hours": _average("hours_logged"),
    },
)

COMPLIANCE_VIEW = ViewDefinition(
    name="compliance",
    export_name="compliance",
    search_fields=("title", "reviewer"),
    status_field="status",
    type_field="type",
    sort_options={
        "due_date": SortOption("Due date (soonest first)", _attr("due_date")),
        "title": SortOption("Title", _attr("title"), text=True),
        "priority": SortOption(
            "Priority",
            lambda record: _PRIORITY_RANK.get(record.priority.value),
        ),
    },
    aggregates={
        "total_items": _count,
        "compliant": _count_where("status", "Compliant"),
        "at_risk": _count_where("status", "At Risk"),
        "in_review": _count_where("status", "In Review"),
        "critical_items": _count_where("priority", "Critical"),
    },
)

REPORT_VIEW = ViewDefinition(
    name="reports",
    export_name="report",
    search_fields=("title", "author", "description"),
    status_field="status",
    type_field="type",
    sort_options={
        "last_updated": SortOption("Last updated", _attr("last_updated"), descending=True),
        "title": SortOption("Title", _attr("title"), text=True),
        "downloads": SortOption("Downloads", _attr("downloads"), descending=True),
    },
    default_sort="last_updated",
    aggregates={
        "total_reports": _count,
        "published_reports": _count_where("status", "published"),
        "total_downloads": _total("downloads"),
        "pending_reports": _count_where("status", "draft", "in_review"),
    },
)

PROJECT_VIEW = ViewDefinition(
    name="projects",
    export_name="project",
    search_fields=("name", "location"),
    status_field="status",
    type_field="priority",
    sort_options={
        "progress": SortOption("Progress", _attr("progress"), descending=True),
        "budget": SortOption("Budget", _attr("budget"), descending=True),
        "name": SortOption("Name", _attr("name"), text=True),
    },
    aggregates={
        "total_projects": _count,
        "active_projects": _count_where("status", "Active"),
        "total_budget": _total("budget"),
        "total_spent": _total("spent"),
        "average_progress": _average("progress"),
    },
)

ACTIVITY_VIEW = ViewDefinition(
    name="activity",
    export_name="activity_log",
    search_fields=("description", "user", "action"),
    status_field="action",
    type_field="category",
    sort_options={
        # ids grow with every entry, so they order entries logged within the same second
        "newest": SortOption("Newest first", _attr("id"), descending=True),
        "oldest": SortOption("Oldest first", _attr("id")),
        "user": SortOption("User", _attr("user"), text=True),
    },
    default_sort="newest",
    aggregates={
        "total_activities": _count,
        "failed_actions": lambda records: sum(1 for record in records if not record.success),
        "records_changed": _count_where("action", "RECORD_CREATED", "RECORD_UPDATED", "RECORD_DELETED"),
        "reports_generated": _count_where("action", "REPORT_GENERATED"),
    },
)


def _today() -> str:
    return date.today().isoformat()


def donor_template() -> dict[str, Any]:
    return {
        "type": "Individual",
        "tier": "Regular",
        "total_donated": 0,
        "donation_count": 0,
        "last_donation": _today(),
        "interests": (),
    }


def grant_template() -> dict[str, Any]:
    return {"status": "Pending", "amount": 0, "awarded": 0, "requirements": (), "milestones": ()}


def survey_template() -> dict[str, Any]:
    return {"status": "planned", "species_count": 0, "images": 0, "equipment": ()}


def volunteer_template() -> dict[str, Any]:
    return {
        "experience": "Beginner",
        "status": "pending",
        "hours_logged": 0,
        "next_assignment": None,
        "joined": _today(),
    }


def compliance_template() -> dict[str, Any]:
    return {"status": "In Review", "priority": "Medium", "last_review": _today()}


def report_template() -> dict[str, Any]:
    return {"status": "draft", "downloads": 0, "created_date": _today(), "last_updated": _today()}


def project_template() -> dict[str, Any]:
    return {"status": "Planning", "priority": "Medium", "progress": 0, "spent": 0}


@dataclass(frozen=True)
class Domain:
    """Everything a store needs to manage one view's records."""

    view: ViewDefinition
    record_type: type[RecordModel]
    template: Callable[[], dict[str, Any]]


DOMAINS: dict[str, Domain] = {
    "donors": Domain(DONOR_VIEW, Donor, donor_template),
    "grants": Domain(GRANT_VIEW, Grant, grant_template),
    "surveys": Domain(SURVEY_VIEW, Survey, survey_template),
    "volunteers": Domain(VOLUNTEER_VIEW, Volunteer, volunteer_template),
    "compliance": Domain(COMPLIANCE_VIEW, ComplianceItem, compliance_template),
    "reports": Domain(REPORT_VIEW, Report, report_template),
    "projects": Domain(PROJECT_VIEW, Project, project_template),
}


def get_domain(name: str) -> Domain:
    try:
        return DOMAINS[name]
    except KeyError:
        known = ", ".join(sorted(DOMAINS))
        raise KeyError(f"Unknown view {name!r}; expected one of: {known}.") from None


def format_currency(amount: float | None) -> str:
    return f"${amount or 0:,.0f}"


def format_percent(value: float | None) -> str:
    return f"{value or 0:.1f}%"
