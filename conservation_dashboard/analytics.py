"""Summary metrics embedded in generated conservation reports."""

from __future__ import annotations

import math
from collections import Counter
from datetime import date
from enum import Enum
from typing import Any, Iterable, Mapping, Sequence

from .pipeline import safe_average


MOCK_DONATION_SPLIT = (
    (0.4, "Forest Conservation", "2024-01-15"),
    (0.3, "Marine Protection", "2024-06-20"),
    (0.3, "Wildlife Sanctuary", "2024-09-10"),
)


def _get(item: Any, name: str, default: Any = None) -> Any:
    if isinstance(item, Mapping):
        value = item.get(name, default)
    else:
        value = getattr(item, name, default)
    if isinstance(value, Enum):
        return value.value
    return default if value is None else value


def _number(item: Any, name: str) -> float:
    value = _get(item, name, 0)
    return value if isinstance(value, (int, float)) and not isinstance(value, bool) else 0


def mock_donations(donor: Any) -> list[dict[str, Any]]:
    total = _number(donor, "total_donated")
    return [
        {"amount": total * share, "project_name": project_name, "date": donated_on}
        for share, project_name, donated_on in MOCK_DONATION_SPLIT
    ]


def calculate_donor_impact(donations: Sequence[Any]) -> dict[str, float | int]:
    projects = {_get(donation, "project_id") or _get(donation, "project_name") for donation in donations}
    return {
        "total_amount": sum(_number(donation, "amount") for donation in donations),
        "projects_supported": len(projects),
        "conservation_areas": len(donations) * 2.5,
        "species_protected": len(donations) * 15,
    }


def generate_conservation_metrics(donations: Sequence[Any]) -> dict[str, float | int]:
    return {
        "carbon_offset": sum(_number(donation, "amount") for donation in donations) * 0.1,
        "habitat_protected": len(donations) * 50,
        "communities_impacted": math.ceil(len(donations) / 3),
        "research_projects": math.ceil(len(donations) / 5),
    }


def projects_from_donations(donations: Iterable[Any]) -> list[str]:
    names: list[str] = []
    for donation in donations:
        name = _get(donation, "project_name") or "General Conservation"
        if name not in names:
            names.append(name)
    return names


def assess_grant_compliance(grant: Any, milestones: Sequence[Any]) -> dict[str, Any]:
    completed = sum(1 for milestone in milestones if _get(milestone, "completed", False))
    upcoming = next((milestone for milestone in milestones if not _get(milestone, "completed", False)), None)
    status = _get(grant, "status")
    return {
        "completion_rate": safe_average(completed * 100, len(milestones)),
        "on_schedule": status == "Active",
        "risk_level": "High" if status == "At Risk" else "Low",
        "next_deadline": _get(upcoming, "date") if upcoming is not None else None,
    }


def generate_financial_summary(grant: Any) -> dict[str, float]:
    amount = _number(grant, "amount")
    awarded = _number(grant, "awarded")
    return {
        "total_awarded": amount,
        "amount_received": awarded,
        "remaining": amount - awarded,
        "utilization_rate": awarded / amount * 100 if amount > 0 else 0,
    }


def analyze_timeline(grant: Any, milestones: Sequence[Any], today: date | None = None) -> dict[str, Any]:
    end_date = _get(grant, "end_date")
    progress = _number(grant, "progress")
    days_remaining = None
    if end_date:
        days_remaining = (date.fromisoformat(end_date) - (today or date.today())).days
    return {
        "days_remaining": days_remaining,
        "percent_complete": progress,
        "on_track": days_remaining is not None and days_remaining > 0 and progress > 50,
        "milestones_completed": sum(1 for milestone in milestones if _get(milestone, "completed", False)),
        "total_milestones": len(milestones),
    }


def _threat(survey: Any) -> float | None:
    value = _get(survey, "threat_level")
    return value if isinstance(value, (int, float)) and not isinstance(value, bool) else None


def analyze_biodiversity(surveys: Sequence[Any]) -> dict[str, float | int]:
    threatened = [survey for survey in surveys if (_threat(survey) or 0) > 7]
    return {
        "total_species": sum(_number(survey, "species_count") for survey in surveys),
        "threatened_species": len(threatened),
        "new_species_found": math.ceil(len(surveys) * 0.1),
        "biodiversity_index": safe_average(
            sum(_number(survey, "conservation_score") for survey in surveys),
            len(surveys),
        ),
    }


def assess_threats(surveys: Sequence[Any]) -> dict[str, float | int]:
    levels = [_threat(survey) for survey in surveys]
    # surveys without a recorded threat level land in no bucket
    return {
        "high": sum(1 for level in levels if level is not None and level >= 8),
        "medium": sum(1 for level in levels if level is not None and 5 <= level < 8),
        "low": sum(1 for level in levels if level is not None and level < 5),
        "average_threat_level": safe_average(sum(level or 0 for level in levels), len(surveys)),
    }


def generate_recommendations(surveys: Sequence[Any]) -> list[str]:
    recommendations: list[str] = []
    for survey in surveys:
        name = _get(survey, "name", "unnamed site")
        threat = _threat(survey)
        if threat is not None and threat >= 8:
            recommendations.append(f"Immediate intervention required at {name}")
        if _number(survey, "species_count") < 100:
            recommendations.append(f"Biodiversity enhancement needed at {name}")
        score = _get(survey, "conservation_score")
        if isinstance(score, (int, float)) and score < 5:
            recommendations.append(f"Conservation strategy review for {name}")
    return recommendations or ["Continue current conservation efforts"]


def extract_gis_data(surveys: Iterable[Any]) -> list[dict[str, Any]]:
    points = []
    for survey in surveys:
        coordinates = _get(survey, "coordinates")
        location = None
        if coordinates is not None:
            location = {"lat": _get(coordinates, "lat"), "lng": _get(coordinates, "lng")}
        points.append(
            {
                "location": location,
                "name": _get(survey, "name"),
                "status": _get(survey, "status"),
                "threat_level": _threat(survey),
                "conservation_score": _get(survey, "conservation_score"),
            }
        )
    return points


def calculate_volunteer_impact(volunteers: Sequence[Any]) -> dict[str, float | int]:
    active = sum(1 for volunteer in volunteers if _get(volunteer, "status") == "active")
    return {
        "total_volunteers": len(volunteers),
        "total_hours": sum(_number(volunteer, "hours_logged") for volunteer in volunteers),
        "average_engagement": safe_average(
            sum(_number(volunteer, "engagement_score") for volunteer in volunteers),
            len(volunteers),
        ),
        "retention_rate": safe_average(active * 100, len(volunteers)),
    }


def analyze_skill_distribution(volunteers: Iterable[Any]) -> dict[str, int]:
    counts: Counter[str] = Counter()
    for volunteer in volunteers:
        counts.update(_get(volunteer, "skills", ()) or ())
    return dict(counts)


def volunteer_projects(volunteers: Iterable[Any]) -> list[str]:
    projects: list[str] = []
    for volunteer in volunteers:
        for project in _get(volunteer, "projects", ()) or ():
            if project not in projects:
                projects.append(project)
    return projects
