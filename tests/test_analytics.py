from __future__ import annotations

from datetime import date

import pytest

from conservation_dashboard import analytics, sample_data


def test_mock_donations_split_total() -> None:
    donor = sample_data.donors()[3]

    gifts = analytics.mock_donations(donor)

    assert [gift["project_name"] for gift in gifts] == [
        "Forest Conservation",
        "Marine Protection",
        "Wildlife Sanctuary",
    ]
    assert sum(gift["amount"] for gift in gifts) == pytest.approx(50000)


def test_donor_impact_and_conservation_metrics() -> None:
    gifts = [
        {"amount": 100, "project_name": "Kelp Forest"},
        {"amount": 300, "project_name": "Kelp Forest"},
        {"amount": 600, "project_name": "Salmon Run"},
    ]

    impact = analytics.calculate_donor_impact(gifts)
    metrics = analytics.generate_conservation_metrics(gifts)

    assert impact == {
        "total_amount": 1000,
        "projects_supported": 2,
        "conservation_areas": 7.5,
        "species_protected": 45,
    }
    assert metrics["carbon_offset"] == pytest.approx(100)
    assert metrics["communities_impacted"] == 1
    assert metrics["research_projects"] == 1
    assert analytics.projects_from_donations(gifts) == ["Kelp Forest", "Salmon Run"]
    assert analytics.projects_from_donations([{"amount": 5}]) == ["General Conservation"]


def test_grant_compliance_and_timeline() -> None:
    grant = sample_data.grants()[1]

    compliance = analytics.assess_grant_compliance(grant, grant.milestones)
    timeline = analytics.analyze_timeline(grant, grant.milestones, today=date(2025, 12, 1))
    finances = analytics.generate_financial_summary(grant)

    assert compliance["completion_rate"] == pytest.approx(100 / 3)
    assert compliance["on_schedule"] is False
    assert compliance["risk_level"] == "Low"
    assert compliance["next_deadline"] == "2025-03-31"
    assert timeline["days_remaining"] == 30
    assert timeline["on_track"] is False
    assert timeline["total_milestones"] == 3
    assert finances["utilization_rate"] == pytest.approx(100 / 3)


def test_grant_analytics_handle_empty_inputs() -> None:
    compliance = analytics.assess_grant_compliance({"status": "At Risk"}, [])

    assert compliance["completion_rate"] == 0
    assert compliance["risk_level"] == "High"
    assert compliance["next_deadline"] is None
    assert analytics.generate_financial_summary({"amount": 0, "awarded": 0})["utilization_rate"] == 0
    assert analytics.analyze_timeline({}, [])["days_remaining"] is None


def test_survey_analysis_buckets_threats() -> None:
    surveys = [
        {"name": "Ridge", "species_count": 150, "threat_level": 9, "conservation_score": 8},
        {"name": "Creek", "species_count": 40, "threat_level": 6, "conservation_score": 4},
        {"name": "Meadow", "species_count": 200, "threat_level": 2},
        {"name": "Unscored", "species_count": 120},
    ]

    threats = analytics.assess_threats(surveys)
    biodiversity = analytics.analyze_biodiversity(surveys)
    recommendations = analytics.generate_recommendations(surveys)

    assert threats["high"] == 1
    assert threats["medium"] == 1
    assert threats["low"] == 1
    assert threats["average_threat_level"] == pytest.approx(17 / 4)
    assert biodiversity["total_species"] == 510
    assert biodiversity["threatened_species"] == 1
    assert biodiversity["new_species_found"] == 1
    assert recommendations == [
        "Immediate intervention required at Ridge",
        "Biodiversity enhancement needed at Creek",
        "Conservation strategy review for Creek",
    ]


def test_survey_analysis_of_nothing() -> None:
    assert analytics.analyze_biodiversity([])["biodiversity_index"] == 0
    assert analytics.assess_threats([])["average_threat_level"] == 0
    assert analytics.generate_recommendations([]) == ["Continue current conservation efforts"]


def test_gis_data_uses_survey_coordinates() -> None:
    points = analytics.extract_gis_data(sample_data.surveys())

    assert points[0]["location"] == {"lat": 44.4280, "lng": -110.5885}
    assert points[0]["status"] == "completed"
    assert analytics.extract_gis_data([{"name": "Nowhere"}])[0]["location"] is None


def test_volunteer_analytics() -> None:
    volunteers = sample_data.volunteers()

    impact = analytics.calculate_volunteer_impact(volunteers)
    skills = analytics.analyze_skill_distribution(volunteers)

    assert impact["total_volunteers"] == 4
    assert impact["total_hours"] == 376
    assert impact["retention_rate"] == 75
    assert skills["First Aid"] == 1
    assert sum(skills.values()) == 12
    assert analytics.calculate_volunteer_impact([])["retention_rate"] == 0
    assert analytics.volunteer_projects([{"projects": ["Dunes", "Kelp"]}, {"projects": ["Kelp"]}]) == [
        "Dunes",
        "Kelp",
    ]
