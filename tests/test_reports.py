from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime

import pytest

from conservation_dashboard import sample_data
from conservation_dashboard.reports import (
    CANCELLED,
    CancelToken,
    RenderError,
    ReportFailure,
    ReportGenerator,
    ReportSuccess,
    page_count,
    report_size_mb,
    report_title,
)


def _build_generator(delay: float = 0, **kwargs) -> ReportGenerator:  # type: ignore[no-untyped-def]
    return ReportGenerator(
        organization_name="Cascade Wildlands",
        delay_seconds=delay,
        clock=lambda: 1733850000.5,
        now=lambda: datetime(2024, 12, 10, 9, 30),
        **kwargs,
    )


def test_generate_builds_document_from_payload() -> None:
    generator = _build_generator()
    data = {"total": 3, "notes": "ok"}

    result = asyncio.run(generator.generate(data, "general"))

    assert isinstance(result, ReportSuccess)
    document = result.document
    assert document.filename == "general_report_1733850000500.pdf"
    assert document.download_name == "general_report_1733850000500.json"
    assert document.pages == 8
    assert document.size_mb == 2.5

    payload = json.loads(document.content)
    assert payload["title"] == "Conservation Platform General Report"
    assert payload["organization"] == "Cascade Wildlands"
    assert payload["generated"] == "2024-12-10T09:30:00"
    assert payload["data"] == data


def test_page_count_and_size_follow_data() -> None:
    assert page_count({}) == 8
    assert page_count({str(index): index for index in range(6)}) == 9
    assert page_count([1, 2, 3]) == 8
    assert report_size_mb({"blob": "x" * 2_000_000}) == 4.5
    assert report_title("unknown") == "Conservation Report"


def test_donor_report_uses_mock_donations() -> None:
    generator = _build_generator()
    donor = sample_data.donors()[0]

    result = asyncio.run(generator.generate_donor_report(donor))

    assert result.ok
    payload = json.loads(result.document.content)
    assert result.document.filename.startswith("donor_impact_report_")
    assert [gift["amount"] for gift in payload["data"]["donations"]] == pytest.approx([50000, 37500, 37500])
    assert payload["data"]["total_impact"]["total_amount"] == pytest.approx(125000)
    assert payload["data"]["projects"] == ["Forest Conservation", "Marine Protection", "Wildlife Sanctuary"]
    assert payload["data"]["donor"]["tier"] == "Major"


def test_grant_and_volunteer_reports_include_analytics() -> None:
    generator = _build_generator()
    grant = sample_data.grants()[0]

    grant_result = asyncio.run(generator.download_report("grant", {"grant": grant}))
    volunteer_result = asyncio.run(
        generator.download_report("volunteer", {"volunteers": sample_data.volunteers()})
    )

    grant_payload = json.loads(grant_result.document.content)["data"]
    assert grant_payload["compliance"]["completion_rate"] == 50
    assert grant_payload["financial_summary"]["remaining"] == 700000
    volunteer_payload = json.loads(volunteer_result.document.content)["data"]
    assert volunteer_payload["total_hours"] == 376
    assert volunteer_payload["impact_metrics"]["retention_rate"] == 75


def test_second_request_for_same_key_fails_fast() -> None:
    generator = _build_generator(delay=0.05)
    donor = sample_data.donors()[1]

    async def run_both():  # type: ignore[no-untyped-def]
        first = asyncio.create_task(generator.generate_donor_report(donor))
        await asyncio.sleep(0)
        assert generator.is_pending(f"donor:{donor.id}")
        second = await generator.generate_donor_report(donor)
        return await first, second

    first, second = asyncio.run(run_both())

    assert isinstance(first, ReportSuccess)
    assert isinstance(second, ReportFailure)
    assert "already being generated" in second.reason
    assert not generator.is_pending(f"donor:{donor.id}")


def test_different_keys_generate_concurrently() -> None:
    generator = _build_generator(delay=0.01)
    donors = sample_data.donors()

    async def run_all():  # type: ignore[no-untyped-def]
        return await asyncio.gather(*(generator.generate_donor_report(donor) for donor in donors))

    results = asyncio.run(run_all())

    assert all(result.ok for result in results)


def test_cancelled_generation_returns_failure() -> None:
    generator = _build_generator(delay=5)

    async def run_cancelled():  # type: ignore[no-untyped-def]
        token = CancelToken()
        task = asyncio.create_task(generator.generate({"a": 1}, "general", cancel_token=token))
        await asyncio.sleep(0)
        token.cancel()
        return await task

    result = asyncio.run(run_cancelled())

    assert result == ReportFailure(CANCELLED)
    assert not generator.is_pending("general")


def test_renderer_failure_surfaces_as_result(caplog) -> None:  # type: ignore[no-untyped-def]
    def broken_renderer(payload):  # type: ignore[no-untyped-def]
        raise RenderError("printer on fire")

    generator = _build_generator(renderer=broken_renderer)

    with caplog.at_level(logging.ERROR):
        result = asyncio.run(generator.generate({"a": 1}, "compliance"))

    assert result == ReportFailure("printer on fire")
    assert "printer on fire" in caplog.text

    retry = asyncio.run(_build_generator().generate({"a": 1}, "compliance"))
    assert retry.ok


def test_save_writes_json_file(tmp_path) -> None:  # type: ignore[no-untyped-def]
    result = asyncio.run(_build_generator().generate({"a": 1}, "survey_analysis"))

    path = result.document.save(tmp_path / "exports")

    assert path.name == "survey_analysis_report_1733850000500.json"
    assert json.loads(path.read_text(encoding="utf-8"))["type"] == "survey_analysis"
