from __future__ import annotations

import pytest

from conservation_dashboard import sample_data
from conservation_dashboard.pipeline import (
    Criteria,
    SortOption,
    ViewDefinition,
    compute_aggregates,
    filter_records,
    matches_search,
    run_view,
    safe_average,
    sort_records,
)
from conservation_dashboard.views import (
    COMPLIANCE_VIEW,
    DONOR_VIEW,
    GRANT_VIEW,
    PROJECT_VIEW,
    REPORT_VIEW,
    SURVEY_VIEW,
    VOLUNTEER_VIEW,
    get_domain,
)


CRITERIA_GRID = [
    Criteria(),
    Criteria(status="Major"),
    Criteria(status="Regular", type="Individual"),
    Criteria(type="Foundation"),
    Criteria(search_term="ocean"),
    Criteria(status="All", type="all", search_term=""),
    Criteria(status="Supporter"),
]


def test_filter_returns_subset_matching_every_active_predicate() -> None:
    donors = sample_data.donors()

    for criteria in CRITERIA_GRID:
        result = filter_records(donors, DONOR_VIEW, criteria)
        assert all(donor in donors for donor in result)
        for donor in result:
            if criteria.status not in (None, "", "all", "All"):
                assert donor.tier.value == criteria.status
            if criteria.type not in (None, "", "all", "All"):
                assert donor.type.value == criteria.type
            assert matches_search(donor, DONOR_VIEW.search_fields, criteria.search_term)


def test_filter_is_idempotent() -> None:
    donors = sample_data.donors()

    for criteria in CRITERIA_GRID:
        once = filter_records(donors, DONOR_VIEW, criteria)
        assert filter_records(once, DONOR_VIEW, criteria) == once


def test_inactive_criteria_keep_every_record() -> None:
    donors = sample_data.donors()

    assert filter_records(donors, DONOR_VIEW, Criteria(status="all", type="All")) == list(donors)
    assert filter_records(donors, DONOR_VIEW, None) == list(donors)


def test_search_is_case_insensitive_and_covers_list_fields() -> None:
    donors = sample_data.donors()
    volunteers = sample_data.volunteers()

    by_location = filter_records(donors, DONOR_VIEW, Criteria(search_term="SEATTLE"))
    assert [donor.name for donor in by_location] == ["Green Earth Foundation"]

    by_skill = filter_records(volunteers, VOLUNTEER_VIEW, Criteria(search_term="bird"))
    assert [volunteer.name for volunteer in by_skill] == ["James Wilson"]

    assert matches_search({"name": "Coral Reef"}, ("name",), "REEF")
    assert matches_search({"name": "Coral Reef"}, ("name",), "")


def test_search_term_is_matched_as_typed() -> None:
    donors = sample_data.donors()

    assert filter_records(donors, DONOR_VIEW, Criteria(search_term="Seattle ")) == []
    assert filter_records(donors, DONOR_VIEW, Criteria(search_term="   ")) == []
    assert filter_records(donors, DONOR_VIEW, Criteria(search_term="Seattle, ")) == [donors[0]]
    assert not matches_search({"name": "Coral Reef"}, ("name",), "  reef ")
    assert matches_search({"name": "Coral Reef"}, ("name",), "l r")


def test_major_tier_filter_returns_expected_donors() -> None:
    donors = sample_data.donors()

    result = filter_records(donors, DONOR_VIEW, Criteria(status="Major"))

    assert {donor.name for donor in result} == {
        "Green Earth Foundation",
        "Ocean Conservation Society",
        "TechForGood Corporation",
    }


def test_aggregates_ignore_filter_and_sort() -> None:
    donors = sample_data.donors()

    for criteria in CRITERIA_GRID:
        for sort_key in (None, "name", "total_donated", "last_donation"):
            result = run_view(donors, DONOR_VIEW, criteria, sort_key)
            assert result.aggregates["total_donated"] == 265000
            assert result.aggregates["average_donation"] == 66250
            assert result.aggregates["total_donors"] == 4
            assert result.aggregates["major_donors"] == 3


def test_descending_numeric_sort_is_non_increasing() -> None:
    donors = sample_data.donors()

    ordered = sort_records(donors, DONOR_VIEW, "total_donated")
    totals = [donor.total_donated for donor in ordered]

    assert totals == sorted(totals, reverse=True)
    assert ordered[0].name == "Green Earth Foundation"


def test_text_sort_ignores_case() -> None:
    records = [{"name": "beta"}, {"name": "Alpha"}, {"name": "gamma"}]
    view = ViewDefinition(
        name="names",
        export_name="name",
        search_fields=("name",),
        sort_options={"name": SortOption("Name", lambda row: row["name"], text=True)},
    )

    assert [row["name"] for row in sort_records(records, view, "name")] == ["Alpha", "beta", "gamma"]


def test_grants_sorted_by_remaining_start_with_completed_corridor() -> None:
    grants = sample_data.grants()

    ordered = sort_records(grants, GRANT_VIEW, "remaining")

    assert ordered[0].title == "Wildlife Corridor Development"
    assert [grant.remaining for grant in ordered] == [0, 700000, 800000]


def test_missing_sort_values_trail_in_source_order() -> None:
    surveys = list(sample_data.surveys())
    undated = surveys[0].with_changes(id=10, date=None)
    records = [undated, *surveys]

    ordered = sort_records(records, SURVEY_VIEW, "date")

    assert ordered[-1] is undated
    assert [survey.date for survey in ordered[:-1]] == ["2024-12-10", "2024-12-08", "2024-12-05"]


def test_no_sort_key_keeps_source_order() -> None:
    donors = sample_data.donors()

    assert sort_records(donors, DONOR_VIEW, None) == list(donors)


def test_unknown_sort_key_is_rejected() -> None:
    with pytest.raises(ValueError):
        sort_records(sample_data.donors(), DONOR_VIEW, "favorite_color")


def test_empty_inputs_are_safe() -> None:
    assert filter_records([], DONOR_VIEW, Criteria(status="Major", search_term="x")) == []
    assert safe_average(100, 0) == 0

    aggregates = compute_aggregates([], DONOR_VIEW)
    assert aggregates == {
        "total_donors": 0,
        "total_donated": 0,
        "average_donation": 0,
        "major_donors": 0,
    }


def test_get_domain_rejects_unknown_view() -> None:
    assert get_domain("grants").view is GRANT_VIEW

    with pytest.raises(KeyError):
        get_domain("invoices")


def test_every_view_aggregates_the_sample_data() -> None:
    assert compute_aggregates(sample_data.grants(), GRANT_VIEW) == {
        "total_grants": 3,
        "total_grant_value": 4550000,
        "total_awarded": 3050000,
        "total_remaining": 1500000,
        "active_grants": 1,
        "average_progress": pytest.approx(205 / 3),
    }
    assert compute_aggregates(sample_data.surveys(), SURVEY_VIEW) == {
        "total_surveys": 3,
        "completed_surveys": 1,
        "in_progress_surveys": 1,
        "total_species": 57,
        "total_images": 90,
        "average_species": 19,
    }
    assert compute_aggregates(sample_data.volunteers(), VOLUNTEER_VIEW) == {
        "total_volunteers": 4,
        "active_volunteers": 3,
        "total_hours": 376,
        "pending_volunteers": 1,
        "average_hours": 94,
    }
    assert compute_aggregates(sample_data.compliance_items(), COMPLIANCE_VIEW) == {
        "total_items": 4,
        "compliant": 2,
        "at_risk": 1,
        "in_review": 1,
        "critical_items": 1,
    }
    assert compute_aggregates(sample_data.projects(), PROJECT_VIEW) == {
        "total_projects": 3,
        "active_projects": 1,
        "total_budget": 550000,
        "total_spent": 322500,
        "average_progress": pytest.approx(190 / 3),
    }


def test_pending_reports_count_drafts_and_reviews() -> None:
    reports = sample_data.reports()

    aggregates = compute_aggregates(reports, REPORT_VIEW)

    assert aggregates == {
        "total_reports": 4,
        "published_reports": 1,
        "total_downloads": 40,
        "pending_reports": 2,
    }
    republished = [report.with_changes(status="published") for report in reports]
    assert compute_aggregates(republished, REPORT_VIEW)["pending_reports"] == 0


@pytest.mark.parametrize(
    ("records", "view", "sort_key", "expected_ids"),
    [
        (sample_data.donors(), DONOR_VIEW, "total_donated", [1, 2, 4, 3]),
        (sample_data.donors(), DONOR_VIEW, "name", [1, 2, 3, 4]),
        (sample_data.donors(), DONOR_VIEW, "last_donation", [2, 1, 3, 4]),
        (sample_data.grants(), GRANT_VIEW, "remaining", [3, 1, 2]),
        (sample_data.grants(), GRANT_VIEW, "amount", [1, 2, 3]),
        (sample_data.grants(), GRANT_VIEW, "title", [1, 2, 3]),
        (sample_data.grants(), GRANT_VIEW, "end_date", [3, 2, 1]),
        (sample_data.surveys(), SURVEY_VIEW, "date", [1, 2, 3]),
        (sample_data.surveys(), SURVEY_VIEW, "name", [2, 3, 1]),
        (sample_data.surveys(), SURVEY_VIEW, "species", [2, 1, 3]),
        (sample_data.volunteers(), VOLUNTEER_VIEW, "name", [4, 1, 2, 3]),
        (sample_data.volunteers(), VOLUNTEER_VIEW, "hours_logged", [3, 2, 1, 4]),
        (sample_data.volunteers(), VOLUNTEER_VIEW, "joined", [4, 1, 2, 3]),
        (sample_data.compliance_items(), COMPLIANCE_VIEW, "due_date", [2, 1, 4, 3]),
        (sample_data.compliance_items(), COMPLIANCE_VIEW, "title", [4, 1, 2, 3]),
        (sample_data.compliance_items(), COMPLIANCE_VIEW, "priority", [2, 1, 4, 3]),
        (sample_data.reports(), REPORT_VIEW, "last_updated", [1, 4, 3, 2]),
        (sample_data.reports(), REPORT_VIEW, "title", [4, 2, 1, 3]),
        (sample_data.reports(), REPORT_VIEW, "downloads", [1, 3, 2, 4]),
        (sample_data.projects(), PROJECT_VIEW, "progress", [3, 1, 2]),
        (sample_data.projects(), PROJECT_VIEW, "budget", [1, 2, 3]),
        (sample_data.projects(), PROJECT_VIEW, "name", [1, 2, 3]),
    ],
)
def test_sample_data_sort_orders(records, view, sort_key, expected_ids) -> None:  # type: ignore[no-untyped-def]
    assert [record.id for record in sort_records(records, view, sort_key)] == expected_ids


def test_critical_compliance_items_sort_first() -> None:
    items = sample_data.compliance_items()
    low = items[2].with_changes(id=5, priority="Low")

    ordered = sort_records([low, *items], COMPLIANCE_VIEW, "priority")

    assert ordered[0].priority.value == "Critical"
    assert ordered[-1] is low


def test_descending_sort_keeps_ties_in_source_order() -> None:
    reports = sample_data.reports()
    # reports 1 and 4 were both last updated on 2024-12-10
    forward = sort_records(reports, REPORT_VIEW, "last_updated")
    backward = sort_records(reversed(reports), REPORT_VIEW, "last_updated")

    assert [report.id for report in forward[:2]] == [1, 4]
    assert [report.id for report in backward[:2]] == [4, 1]

    donors = [donor.with_changes(total_donated=5000) for donor in sample_data.donors()]
    assert sort_records(donors, DONOR_VIEW, "total_donated") == donors
