from __future__ import annotations

import sys
from datetime import date

import pytest

from conservation_dashboard import sample_data
from conservation_dashboard.models import (
    ComplianceItem,
    Coordinates,
    DonorTier,
    Grant,
    GrantStatus,
    Priority,
    Project,
    Severity,
    Survey,
    ValidationError,
)
from conservation_dashboard.pipeline import sort_records
from conservation_dashboard.views import SURVEY_VIEW


def test_classifications_carry_severity() -> None:
    assert GrantStatus.AT_RISK.severity == Severity.CRITICAL
    assert GrantStatus("Active").severity == Severity.POSITIVE
    assert DonorTier.MAJOR.severity == Severity.POSITIVE
    assert Priority.CRITICAL.severity == Severity.CRITICAL
    assert GrantStatus.ACTIVE == "Active"


def test_validation_error_reports_each_field() -> None:
    with pytest.raises(ValidationError) as excinfo:
        Grant(title=" ", funder="NSF", amount=-5, progress=140, status="Someday")

    errors = excinfo.value.errors
    assert set(errors) == {"title", "amount", "progress", "status"}
    assert isinstance(excinfo.value, ValueError)
    assert "Grant" in str(excinfo.value)


def test_dates_are_normalized_and_checked() -> None:
    grant = Grant(title="Dune Repair", funder="Coastal Trust", start_date=date(2025, 1, 1), end_date="2025-06-30")

    assert grant.start_date == "2025-01-01"

    with pytest.raises(ValidationError) as excinfo:
        Grant(title="Dune Repair", funder="Coastal Trust", start_date="2025-06-30", end_date="2025-01-01")
    assert "end_date" in excinfo.value.errors

    with pytest.raises(ValidationError) as excinfo:
        Grant(title="Dune Repair", funder="Coastal Trust", start_date="June 1st")
    assert "start_date" in excinfo.value.errors


def test_grant_derived_figures() -> None:
    grant = sample_data.grants()[0]

    assert grant.expected_remaining == 700000
    assert grant.remaining_drift == 0
    assert grant.utilization_percent == pytest.approx(72.0)
    assert grant.milestone_completion_percent == 50
    assert grant.requirement_completion_percent == pytest.approx(100 / 3)
    assert grant.days_remaining(today=date(2026, 12, 1)) == 30
    assert Grant(title="Empty", funder="Nobody").utilization_percent == 0


def test_survey_coordinates_are_parsed_and_validated() -> None:
    survey = sample_data.surveys()[0]

    assert survey.coordinates == Coordinates(lat=44.4280, lng=-110.5885)
    assert Survey(name="No Fix", location="Unknown").coordinates is None

    with pytest.raises(ValidationError) as excinfo:
        Survey(name="Bad Fix", location="Nowhere", coordinates={"lat": 95, "lng": 0})
    assert "coordinates" in excinfo.value.errors


def test_project_budget_health_thresholds() -> None:
    def project(spent: float, budget: float = 100) -> Project:
        return Project(name="Wetland", location="Delta", budget=budget, spent=spent)

    assert project(95).budget_health == Severity.CRITICAL
    assert project(80).budget_health == Severity.WARNING
    assert project(75).budget_health == Severity.POSITIVE
    assert project(10, budget=0).budget_used_percent == 0
    assert project(10, budget=0).budget_health == Severity.POSITIVE


def test_compliance_completion_and_overdue() -> None:
    item = sample_data.compliance_items()[1]

    assert isinstance(item, ComplianceItem)
    assert item.completion_percent == 25
    assert [requirement.item for requirement in item.overdue_requirements] == ["Quarterly Financial Report"]


def test_to_dict_returns_plain_values() -> None:
    survey = sample_data.surveys()[0].to_dict()

    assert survey["status"] == "completed"
    assert survey["coordinates"] == {"lat": 44.4280, "lng": -110.5885}
    assert survey["equipment"] == ["Binoculars", "Camera", "GPS tracker", "Field notebook"]


def test_with_changes_revalidates() -> None:
    donor = sample_data.donors()[0]

    assert donor.with_changes(tier="Regular").tier == DonorTier.REGULAR
    with pytest.raises(ValidationError):
        donor.with_changes(total_donated=-1)
    with pytest.raises(ValidationError):
        donor.with_changes(nickname="GEF")


@pytest.mark.skipif(sys.version_info < (3, 11), reason="compact ISO dates parse from Python 3.11")
def test_compact_dates_are_stored_canonically() -> None:
    survey = Survey(name="Night Count", location="Marsh", date="20240101")

    assert survey.date == "2024-01-01"
    assert sort_records([survey, *sample_data.surveys()], SURVEY_VIEW, "date")[-1] is survey

    with pytest.raises(ValidationError) as excinfo:
        Grant(title="Dune Repair", funder="Coastal Trust", start_date="2024-06-01", end_date="20240101")
    assert "end_date" in excinfo.value.errors


def test_grant_remaining_cannot_be_negative() -> None:
    with pytest.raises(ValidationError) as excinfo:
        Grant(title="Kelp Beds", funder="Coastal Trust", amount=100, awarded=50, remaining=-10)
    assert set(excinfo.value.errors) == {"remaining"}

    with pytest.raises(ValidationError):
        sample_data.grants()[0].with_changes(remaining=-1)

    assert Grant(title="Kelp Beds", funder="Coastal Trust", amount=100, awarded=100, remaining=0).remaining == 0
