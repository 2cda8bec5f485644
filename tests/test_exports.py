from __future__ import annotations

import json

from conservation_dashboard import sample_data
from conservation_dashboard.exports import export_csv, export_records, records_frame, write_export
from conservation_dashboard.mapping import map_frame, site_points, survey_points
from conservation_dashboard.pipeline import Criteria, filter_records
from conservation_dashboard.views import DONOR_VIEW, GRANT_VIEW, SURVEY_VIEW


def test_json_export_of_filtered_records() -> None:
    majors = filter_records(sample_data.donors(), DONOR_VIEW, Criteria(status="Major"))

    filename, text = export_records(DONOR_VIEW, majors)

    rows = json.loads(text)
    assert filename == "donor_data.json"
    assert [row["name"] for row in rows] == [
        "Green Earth Foundation",
        "Ocean Conservation Society",
        "TechForGood Corporation",
    ]
    assert rows[0]["interests"] == ["Wildlife Protection", "Forest Conservation"]
    assert rows[0]["tier"] == "Major"


def test_json_export_of_nothing_is_empty_array() -> None:
    filename, text = export_records(SURVEY_VIEW, [])

    assert filename == "survey_data.json"
    assert json.loads(text) == []


def test_csv_export_flattens_nested_fields() -> None:
    grants = sample_data.grants()

    frame = records_frame(grants)
    filename, data = export_csv(GRANT_VIEW, grants)

    assert filename == "grant_data.csv"
    assert list(frame["title"]) == [grant.title for grant in grants]
    assert frame.loc[0, "milestones"] == "4 items"
    assert data.decode("utf-8").splitlines()[0].startswith("id,title,funder")


def test_write_export_creates_directory(tmp_path) -> None:  # type: ignore[no-untyped-def]
    filename, text = export_records(DONOR_VIEW, sample_data.donors())

    path = write_export(tmp_path / "nested" / "exports", filename, text)

    assert path.read_text(encoding="utf-8") == text


def test_map_points_from_surveys_and_sites() -> None:
    surveys = list(sample_data.surveys())
    surveys.append(surveys[0].with_changes(id=9, coordinates=None))

    points = survey_points(surveys) + site_points(sample_data.project_sites())
    frame = map_frame(points)

    assert len(points) == 8
    assert list(frame.columns) == ["lat", "lon", "name", "kind", "status"]
    assert set(frame["kind"]) == {"survey", "site"}
    assert frame.loc[0, "lon"] == -110.5885


def test_empty_map_frame_keeps_columns() -> None:
    frame = map_frame([])

    assert frame.empty
    assert list(frame.columns) == ["lat", "lon", "name", "kind", "status"]
