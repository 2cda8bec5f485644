"""Typed records for every dashboard domain.

Records are frozen dataclasses. Construction coerces enumerated fields and
nested collections and validates the rest, raising ``ValidationError`` with one
message per offending field. ``dataclasses.replace`` re-runs the same checks,
so an edited record is validated exactly like a new one.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Mapping


class ValidationError(ValueError):
    """Raised when a record cannot be built from the supplied values."""

    def __init__(self, record_type: str, errors: Mapping[str, str]) -> None:
        self.record_type = record_type
        self.errors = dict(errors)
        details = "; ".join(f"{name}: {message}" for name, message in self.errors.items())
        super().__init__(f"Invalid {record_type} ({details})")


class Severity(str, Enum):
    POSITIVE = "positive"
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"
    NEUTRAL = "neutral"


class Classification(str, Enum):
    """Closed string enumeration with a semantic severity."""

    @property
    def severity(self) -> Severity:
        return _SEVERITIES.get(type(self), {}).get(self.value, Severity.NEUTRAL)


class DonorType(Classification):
    INDIVIDUAL = "Individual"
    FOUNDATION = "Foundation"
    ORGANIZATION = "Organization"
    CORPORATE = "Corporate"


class DonorTier(Classification):
    MAJOR = "Major"
    REGULAR = "Regular"
    SUPPORTER = "Supporter"


class EngagementLevel(Classification):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class GrantStatus(Classification):
    ACTIVE = "Active"
    IN_REVIEW = "In Review"
    COMPLETED = "Completed"
    PENDING = "Pending"
    AT_RISK = "At Risk"


class SurveyStatus(Classification):
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    PLANNED = "planned"
    CANCELLED = "cancelled"


class VolunteerStatus(Classification):
    ACTIVE = "active"
    PENDING = "pending"
    INACTIVE = "inactive"


class ExperienceLevel(Classification):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    EXPERIENCED = "Experienced"
    EXPERT = "Expert"


class AssignmentStatus(Classification):
    CONFIRMED = "confirmed"
    NEEDS_VOLUNTEERS = "needs_volunteers"
    OPEN = "open"


class ComplianceStatus(Classification):
    COMPLIANT = "Compliant"
    AT_RISK = "At Risk"
    IN_REVIEW = "In Review"


class ComplianceType(Classification):
    ENVIRONMENTAL = "Environmental Compliance"
    FINANCIAL = "Financial Compliance"
    REGULATORY = "Regulatory Compliance"


class Priority(Classification):
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class RequirementStatus(Classification):
    COMPLETE = "Complete"
    IN_PROGRESS = "In Progress"
    PENDING = "Pending"
    OVERDUE = "Overdue"


class RiskLevel(Classification):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class ReportStatus(Classification):
    PUBLISHED = "published"
    DRAFT = "draft"
    IN_REVIEW = "in_review"
    SCHEDULED = "scheduled"


class ReportType(Classification):
    IMPACT = "Impact Report"
    COMPLIANCE = "Compliance Report"
    ANALYTICS = "Analytics Report"
    SCIENTIFIC = "Scientific Report"


class ProjectStatus(Classification):
    ACTIVE = "Active"
    PLANNING = "Planning"
    COMPLETED = "Completed"
    ON_HOLD = "On Hold"


class ActivityAction(Classification):
    RECORD_CREATED = "RECORD_CREATED"
    RECORD_UPDATED = "RECORD_UPDATED"
    RECORD_DELETED = "RECORD_DELETED"
    REPORT_GENERATED = "REPORT_GENERATED"
    REPORT_FAILED = "REPORT_FAILED"
    DATA_EXPORT = "DATA_EXPORT"
    EMAIL_SENT = "EMAIL_SENT"


class ActivityCategory(Classification):
    DONORS = "donors"
    GRANTS = "grants"
    SURVEYS = "surveys"
    VOLUNTEERS = "volunteers"
    COMPLIANCE = "compliance"
    REPORTS = "reports"
    PROJECTS = "projects"
    ANALYTICS = "analytics"
    DATA_ACCESS = "data_access"
    COMMUNICATION = "communication"


_SEVERITIES: dict[type, dict[str, Severity]] = {
    DonorTier: {
        "Major": Severity.POSITIVE,
        "Regular": Severity.INFO,
        "Supporter": Severity.NEUTRAL,
    },
    EngagementLevel: {
        "High": Severity.POSITIVE,
        "Medium": Severity.WARNING,
        "Low": Severity.CRITICAL,
    },
    GrantStatus: {
        "Active": Severity.POSITIVE,
        "In Review": Severity.WARNING,
        "Completed": Severity.INFO,
        "Pending": Severity.NEUTRAL,
        "At Risk": Severity.CRITICAL,
    },
    SurveyStatus: {
        "completed": Severity.POSITIVE,
        "in_progress": Severity.INFO,
        "planned": Severity.WARNING,
        "cancelled": Severity.CRITICAL,
    },
    VolunteerStatus: {
        "active": Severity.POSITIVE,
        "pending": Severity.WARNING,
        "inactive": Severity.NEUTRAL,
    },
    AssignmentStatus: {
        "confirmed": Severity.POSITIVE,
        "needs_volunteers": Severity.WARNING,
        "open": Severity.INFO,
    },
    ComplianceStatus: {
        "Compliant": Severity.POSITIVE,
        "At Risk": Severity.CRITICAL,
        "In Review": Severity.WARNING,
    },
    Priority: {
        "Critical": Severity.CRITICAL,
        "High": Severity.WARNING,
        "Medium": Severity.INFO,
        "Low": Severity.POSITIVE,
    },
    RequirementStatus: {
        "Complete": Severity.POSITIVE,
        "In Progress": Severity.INFO,
        "Pending": Severity.NEUTRAL,
        "Overdue": Severity.CRITICAL,
    },
    RiskLevel: {
        "Low": Severity.POSITIVE,
        "Medium": Severity.WARNING,
        "High": Severity.CRITICAL,
    },
    ReportStatus: {
        "published": Severity.POSITIVE,
        "draft": Severity.WARNING,
        "in_review": Severity.INFO,
        "scheduled": Severity.NEUTRAL,
    },
    ProjectStatus: {
        "Active": Severity.POSITIVE,
        "Planning": Severity.INFO,
        "Completed": Severity.NEUTRAL,
        "On Hold": Severity.WARNING,
    },
    ActivityAction: {
        "RECORD_CREATED": Severity.POSITIVE,
        "RECORD_UPDATED": Severity.INFO,
        "RECORD_DELETED": Severity.WARNING,
        "REPORT_GENERATED": Severity.POSITIVE,
        "REPORT_FAILED": Severity.CRITICAL,
        "DATA_EXPORT": Severity.INFO,
        "EMAIL_SENT": Severity.INFO,
    },
}


def _label(field_name: str) -> str:
    return field_name.replace("_", " ").capitalize()


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _iso_date(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    if not text:
        return None
    # stored dates are always canonical YYYY-MM-DD so string order is date order
    return date.fromisoformat(text).isoformat()


def _set(instance: Any, name: str, value: Any) -> None:
    object.__setattr__(instance, name, value)


def _coerce_enum(instance: Any, name: str, enum_type: type[Enum]) -> None:
    value = getattr(instance, name)
    try:
        _set(instance, name, enum_type(value))
    except ValueError:
        choices = ", ".join(member.value for member in enum_type)
        raise ValueError(f"Must be one of: {choices}.") from None


class RecordModel:
    """Shared construction checks for the frozen record dataclasses."""

    ENUM_FIELDS: Mapping[str, type[Enum]] = {}
    NESTED_FIELDS: Mapping[str, Callable[[Any], Any]] = {}
    DATE_FIELDS: tuple[str, ...] = ()
    REQUIRED_TEXT: tuple[str, ...] = ()
    NON_NEGATIVE: tuple[str, ...] = ()
    PERCENT_FIELDS: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        errors: dict[str, str] = {}

        for name, enum_type in self.ENUM_FIELDS.items():
            try:
                _coerce_enum(self, name, enum_type)
            except ValueError as exc:
                errors[name] = str(exc)

        for name, build in self.NESTED_FIELDS.items():
            try:
                _set(self, name, tuple(build(item) for item in getattr(self, name) or ()))
            except (TypeError, ValueError) as exc:
                errors[name] = f"Invalid entry: {exc}"

        for name in self.DATE_FIELDS:
            try:
                _set(self, name, _iso_date(getattr(self, name)))
            except ValueError:
                errors[name] = "Use a YYYY-MM-DD date."

        for name in self.REQUIRED_TEXT:
            value = getattr(self, name)
            cleaned = value.strip() if isinstance(value, str) else ""
            if not cleaned:
                errors[name] = f"{_label(name)} is required."
            else:
                _set(self, name, cleaned)

        for name in self.NON_NEGATIVE + self.PERCENT_FIELDS:
            value = getattr(self, name)
            if not _is_number(value):
                errors[name] = f"{_label(name)} must be a number."
            elif value < 0:
                errors[name] = f"{_label(name)} cannot be negative."

        for name in self.PERCENT_FIELDS:
            value = getattr(self, name)
            if name not in errors and value > 100:
                errors[name] = f"{_label(name)} must be between 0 and 100."

        self.validate(errors)
        if errors:
            raise ValidationError(type(self).__name__, errors)

    def validate(self, errors: dict[str, str]) -> None:
        """Hook for domain-specific checks; add messages to ``errors``."""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(item.name for item in fields(cls))  # type: ignore[arg-type]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):  # type: ignore[no-untyped-def]
        unknown = sorted(set(data) - set(cls.field_names()))
        if unknown:
            raise ValidationError(cls.__name__, {name: "Unknown field." for name in unknown})
        return cls(**data)

    def with_changes(self, **changes: Any):  # type: ignore[no-untyped-def]
        unknown = sorted(set(changes) - set(self.field_names()))
        if unknown:
            raise ValidationError(type(self).__name__, {name: "Unknown field." for name in unknown})
        return replace(self, **changes)  # type: ignore[type-var]

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))  # type: ignore[call-overload]


def _nested(item_type: type) -> Callable[[Any], Any]:
    def build(item: Any) -> Any:
        if isinstance(item, item_type):
            return item
        if isinstance(item, Mapping):
            return item_type(**item)
        raise TypeError(f"expected {item_type.__name__} or mapping, got {type(item).__name__}")

    return build


def _text(item: Any) -> str:
    if not isinstance(item, str) or not item.strip():
        raise ValueError("entries must be non-empty text")
    return item.strip()


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not _is_number(self.lat) or not -90 <= self.lat <= 90:
            raise ValueError("latitude must be between -90 and 90")
        if not _is_number(self.lng) or not -180 <= self.lng <= 180:
            raise ValueError("longitude must be between -180 and 180")


def _coordinates(value: Any) -> Coordinates | None:
    if value is None or isinstance(value, Coordinates):
        return value
    lat = value.get("lat")
    lng = value.get("lng")
    if lat in (None, "") and lng in (None, ""):
        return None
    return Coordinates(lat=float(lat), lng=float(lng))


@dataclass(frozen=True)
class Donor(RecordModel):
    id: int = 0
    name: str = ""
    email: str = ""
    phone: str = ""
    type: DonorType = DonorType.INDIVIDUAL
    location: str = ""
    total_donated: float = 0
    last_donation: str | None = None
    donation_count: int = 0
    tier: DonorTier = DonorTier.REGULAR
    engagement: EngagementLevel = EngagementLevel.MEDIUM
    interests: tuple[str, ...] = ()
    contact_person: str = ""
    notes: str = ""

    ENUM_FIELDS = {"type": DonorType, "tier": DonorTier, "engagement": EngagementLevel}
    NESTED_FIELDS = {"interests": _text}
    DATE_FIELDS = ("last_donation",)
    REQUIRED_TEXT = ("name", "email")
    NON_NEGATIVE = ("total_donated", "donation_count")

    def validate(self, errors: dict[str, str]) -> None:
        if "email" not in errors and "@" not in self.email:
            errors["email"] = "Email must contain '@'."


@dataclass(frozen=True)
class GrantRequirement:
    task: str
    due: str
    completed: bool = False


@dataclass(frozen=True)
class GrantMilestone:
    name: str
    date: str
    completed: bool = False
    payment: float = 0


@dataclass(frozen=True)
class Grant(RecordModel):
    id: int = 0
    title: str = ""
    funder: str = ""
    amount: float = 0
    awarded: float = 0
    remaining: float | None = None
    status: GrantStatus = GrantStatus.PENDING
    start_date: str | None = None
    end_date: str | None = None
    progress: float = 0
    category: str = ""
    requirements: tuple[GrantRequirement, ...] = ()
    milestones: tuple[GrantMilestone, ...] = ()

    ENUM_FIELDS = {"status": GrantStatus}
    NESTED_FIELDS = {
        "requirements": _nested(GrantRequirement),
        "milestones": _nested(GrantMilestone),
    }
    DATE_FIELDS = ("start_date", "end_date")
    REQUIRED_TEXT = ("title", "funder")
    NON_NEGATIVE = ("amount", "awarded")
    PERCENT_FIELDS = ("progress",)

    def validate(self, errors: dict[str, str]) -> None:
        # remaining is stored, not derived; only fill it in when it was never given
        if self.remaining is None and "amount" not in errors and "awarded" not in errors:
            _set(self, "remaining", self.amount - self.awarded)
        elif self.remaining is not None and not _is_number(self.remaining):
            errors["remaining"] = "Remaining must be a number."
        elif self.remaining is not None and self.remaining < 0:
            errors["remaining"] = "Remaining cannot be negative."
        if (
            self.start_date
            and self.end_date
            and "start_date" not in errors
            and "end_date" not in errors
            and self.end_date < self.start_date
        ):
            errors["end_date"] = "End date cannot be before the start date."

    @property
    def expected_remaining(self) -> float:
        return self.amount - self.awarded

    @property
    def remaining_drift(self) -> float:
        return (self.remaining or 0) - self.expected_remaining

    @property
    def utilization_percent(self) -> float:
        if self.amount <= 0:
            return 0.0
        return self.awarded / self.amount * 100

    @property
    def milestone_completion_percent(self) -> float:
        if not self.milestones:
            return 0.0
        completed = sum(1 for milestone in self.milestones if milestone.completed)
        return completed / len(self.milestones) * 100

    @property
    def requirement_completion_percent(self) -> float:
        if not self.requirements:
            return 0.0
        completed = sum(1 for requirement in self.requirements if requirement.completed)
        return completed / len(self.requirements) * 100

    def days_remaining(self, today: date | None = None) -> int | None:
        if not self.end_date:
            return None
        current = today or date.today()
        return (date.fromisoformat(self.end_date) - current).days


@dataclass(frozen=True)
class Survey(RecordModel):
    id: int = 0
    name: str = ""
    location: str = ""
    date: str | None = None
    status: SurveyStatus = SurveyStatus.PLANNED
    species_count: int = 0
    observer: str = ""
    weather: str = ""
    images: int = 0
    notes: str = ""
    coordinates: Coordinates | None = None
    duration: str = ""
    equipment: tuple[str, ...] = ()

    ENUM_FIELDS = {"status": SurveyStatus}
    NESTED_FIELDS = {"equipment": _text}
    DATE_FIELDS = ("date",)
    REQUIRED_TEXT = ("name", "location")
    NON_NEGATIVE = ("species_count", "images")

    def validate(self, errors: dict[str, str]) -> None:
        try:
            _set(self, "coordinates", _coordinates(self.coordinates))
        except (AttributeError, TypeError, ValueError):
            errors["coordinates"] = "Coordinates need a numeric lat and lng."


@dataclass(frozen=True)
class Volunteer(RecordModel):
    id: int = 0
    name: str = ""
    email: str = ""
    phone: str = ""
    skills: tuple[str, ...] = ()
    experience: ExperienceLevel = ExperienceLevel.BEGINNER
    status: VolunteerStatus = VolunteerStatus.PENDING
    hours_logged: float = 0
    next_assignment: str | None = None
    availability: tuple[str, ...] = ()
    training: tuple[str, ...] = ()
    joined: str | None = None

    ENUM_FIELDS = {"experience": ExperienceLevel, "status": VolunteerStatus}
    NESTED_FIELDS = {"skills": _text, "availability": _text, "training": _text}
    DATE_FIELDS = ("next_assignment", "joined")
    REQUIRED_TEXT = ("name", "email")
    NON_NEGATIVE = ("hours_logged",)


@dataclass(frozen=True)
class VolunteerAssignment(RecordModel):
    id: int = 0
    title: str = ""
    date: str | None = None
    time: str = ""
    location: str = ""
    volunteers: tuple[str, ...] = ()
    supervisor: str = ""
    type: str = ""
    status: AssignmentStatus = AssignmentStatus.OPEN

    ENUM_FIELDS = {"status": AssignmentStatus}
    NESTED_FIELDS = {"volunteers": _text}
    DATE_FIELDS = ("date",)
    REQUIRED_TEXT = ("title",)


@dataclass(frozen=True)
class ComplianceRequirement:
    item: str
    status: RequirementStatus
    date: str

    def __post_init__(self) -> None:
        _coerce_enum(self, "status", RequirementStatus)


@dataclass(frozen=True)
class ComplianceItem(RecordModel):
    id: int = 0
    title: str = ""
    type: ComplianceType = ComplianceType.ENVIRONMENTAL
    status: ComplianceStatus = ComplianceStatus.IN_REVIEW
    due_date: str | None = None
    last_review: str | None = None
    reviewer: str = ""
    priority: Priority = Priority.MEDIUM
    requirements: tuple[ComplianceRequirement, ...] = ()
    documents: tuple[str, ...] = ()

    ENUM_FIELDS = {"type": ComplianceType, "status": ComplianceStatus, "priority": Priority}
    NESTED_FIELDS = {"requirements": _nested(ComplianceRequirement), "documents": _text}
    DATE_FIELDS = ("due_date", "last_review")
    REQUIRED_TEXT = ("title",)

    @property
    def completion_percent(self) -> float:
        if not self.requirements:
            return 0.0
        complete = sum(
            1 for requirement in self.requirements if requirement.status == RequirementStatus.COMPLETE
        )
        return complete / len(self.requirements) * 100

    @property
    def overdue_requirements(self) -> tuple[ComplianceRequirement, ...]:
        return tuple(
            requirement
            for requirement in self.requirements
            if requirement.status == RequirementStatus.OVERDUE
        )


@dataclass(frozen=True)
class ImpactAssessment(RecordModel):
    id: int = 0
    project: str = ""
    period: str = ""
    biodiversity_score: float = 0
    carbon_sequestration: str = ""
    habitat_restored: str = ""
    species_protected: int = 0
    community_benefit: str = ""
    economic_value: str = ""
    sustainability: float = 0
    risk_level: RiskLevel = RiskLevel.LOW

    ENUM_FIELDS = {"risk_level": RiskLevel}
    REQUIRED_TEXT = ("project",)
    NON_NEGATIVE = ("biodiversity_score", "species_protected")
    PERCENT_FIELDS = ("sustainability",)


@dataclass(frozen=True)
class Report(RecordModel):
    id: int = 0
    title: str = ""
    type: ReportType = ReportType.IMPACT
    status: ReportStatus = ReportStatus.DRAFT
    created_date: str | None = None
    last_updated: str | None = None
    author: str = ""
    period: str = ""
    metrics: dict[str, float] = field(default_factory=dict)
    stakeholders: tuple[str, ...] = ()
    file_size: str = ""
    downloads: int = 0
    description: str = ""

    ENUM_FIELDS = {"type": ReportType, "status": ReportStatus}
    NESTED_FIELDS = {"stakeholders": _text}
    DATE_FIELDS = ("created_date", "last_updated")
    REQUIRED_TEXT = ("title", "author")
    NON_NEGATIVE = ("downloads",)

    def validate(self, errors: dict[str, str]) -> None:
        if not isinstance(self.metrics, Mapping):
            errors["metrics"] = "Metrics must be a mapping of name to value."
            return
        _set(self, "metrics", dict(self.metrics))


@dataclass(frozen=True)
class ProjectObjective:
    id: int
    text: str
    completed: bool = False


@dataclass(frozen=True)
class ProjectMilestone:
    id: int
    name: str
    date: str
    completed: bool = False


@dataclass(frozen=True)
class ProjectRisk:
    id: int
    risk: str
    probability: RiskLevel
    impact: RiskLevel

    def __post_init__(self) -> None:
        _coerce_enum(self, "probability", RiskLevel)
        _coerce_enum(self, "impact", RiskLevel)


@dataclass(frozen=True)
class Project(RecordModel):
    id: int = 0
    name: str = ""
    status: ProjectStatus = ProjectStatus.PLANNING
    priority: Priority = Priority.MEDIUM
    progress: float = 0
    budget: float = 0
    spent: float = 0
    start_date: str | None = None
    end_date: str | None = None
    location: str = ""
    manager: str = ""
    team: tuple[str, ...] = ()
    description: str = ""
    objectives: tuple[ProjectObjective, ...] = ()
    milestones: tuple[ProjectMilestone, ...] = ()
    risks: tuple[ProjectRisk, ...] = ()

    ENUM_FIELDS = {"status": ProjectStatus, "priority": Priority}
    NESTED_FIELDS = {
        "team": _text,
        "objectives": _nested(ProjectObjective),
        "milestones": _nested(ProjectMilestone),
        "risks": _nested(ProjectRisk),
    }
    DATE_FIELDS = ("start_date", "end_date")
    REQUIRED_TEXT = ("name", "location")
    NON_NEGATIVE = ("budget", "spent")
    PERCENT_FIELDS = ("progress",)

    @property
    def budget_used_percent(self) -> float:
        if self.budget <= 0:
            return 0.0
        return self.spent / self.budget * 100

    @property
    def budget_health(self) -> Severity:
        used = self.budget_used_percent
        if used > 90:
            return Severity.CRITICAL
        if used > 75:
            return Severity.WARNING
        return Severity.POSITIVE

    @property
    def objectives_completed(self) -> int:
        return sum(1 for objective in self.objectives if objective.completed)


@dataclass(frozen=True)
class ProjectSite(RecordModel):
    id: int = 0
    name: str = ""
    organization: str = ""
    location: str = ""
    latitude: float = 0
    longitude: float = 0
    area_hectares: float = 0
    status: str = "active"
    budget: float = 0
    species_count: int = 0

    REQUIRED_TEXT = ("name",)
    NON_NEGATIVE = ("area_hectares", "budget", "species_count")

    def validate(self, errors: dict[str, str]) -> None:
        try:
            Coordinates(lat=self.latitude, lng=self.longitude)
        except ValueError as exc:
            errors["latitude"] = str(exc)


TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _timestamp(value: Any) -> str:
    if isinstance(value, datetime):
        return value.strftime(TIMESTAMP_FORMAT)
    return datetime.fromisoformat(str(value).strip()).strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class ActivityEntry(RecordModel):
    """One line of the activity log: who did what, to which area, and when."""

    id: int = 0
    timestamp: str = ""
    user: str = "System"
    action: ActivityAction = ActivityAction.RECORD_UPDATED
    category: ActivityCategory = ActivityCategory.REPORTS
    description: str = ""
    record_id: int | None = None
    success: bool = True

    ENUM_FIELDS = {"action": ActivityAction, "category": ActivityCategory}
    REQUIRED_TEXT = ("user", "description")

    def validate(self, errors: dict[str, str]) -> None:
        try:
            _set(self, "timestamp", _timestamp(self.timestamp))
        except ValueError:
            errors["timestamp"] = "Use a YYYY-MM-DD HH:MM:SS timestamp."
