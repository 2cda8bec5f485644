"""Simulated conservation report generation.

Generation waits for a configurable delay, builds a payload of fabricated
metrics and renders it. The default renderer emits JSON, so a "PDF" report is
a JSON document carrying a ``.pdf`` filename. Results are returned as
``ReportSuccess`` or ``ReportFailure``; nothing here mutates the records it
reports on, so a failed generation can simply be requested again.
"""

from __future__ import annotations

import asyncio
import json
import logging
import math
import time
from dataclasses import dataclass, is_dataclass, asdict
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Sequence, Union

from . import analytics
from .activity import ActivityLog
from .config import DEFAULT_ORG_NAME, DEFAULT_REPORT_DELAY_SECONDS, Settings
from .models import ActivityAction, ActivityCategory

logger = logging.getLogger(__name__)


REPORT_TITLES = {
    "general": "Conservation Platform General Report",
    "donor_impact": "Donor Impact & Conservation Report",
    "grant_compliance": "Grant Compliance & Financial Report",
    "survey_analysis": "Field Survey & Biodiversity Analysis Report",
    "volunteer_impact": "Volunteer Impact & Engagement Report",
    "compliance": "Compliance & Risk Assessment Report",
}

BASE_REPORT_SIZE_MB = 2.5
BASE_PAGE_COUNT = 8


class RenderError(Exception):
    """Raised by a renderer that could not produce a document."""


def report_title(report_type: str) -> str:
    return REPORT_TITLES.get(report_type, "Conservation Report")


def _json_default(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, indent: int | None = 2) -> str:
    return json.dumps(value, indent=indent, default=_json_default, ensure_ascii=False)


def render_json(payload: Mapping[str, Any]) -> bytes:
    try:
        return to_json(payload).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise RenderError(f"Report data could not be serialized: {exc}") from exc


def report_size_mb(data: Any) -> float:
    return round(BASE_REPORT_SIZE_MB + len(to_json(data, indent=None)) / 1_000_000, 2)


def page_count(data: Any) -> int:
    complexity = len(data) if isinstance(data, Mapping) else 0
    return max(BASE_PAGE_COUNT, math.ceil(complexity * 1.5))


@dataclass(frozen=True)
class GeneratedDocument:
    filename: str
    report_type: str
    size_mb: float
    pages: int
    content: bytes

    @property
    def download_name(self) -> str:
        # content is JSON whatever the nominal extension says
        return self.filename.removesuffix(".pdf") + ".json"

    def save(self, directory: str | Path) -> Path:
        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / self.download_name
        path.write_bytes(self.content)
        logger.info("Saved %s report to %s.", self.report_type, path)
        return path


@dataclass(frozen=True)
class ReportSuccess:
    document: GeneratedDocument
    ok: bool = True


@dataclass(frozen=True)
class ReportFailure:
    reason: str
    ok: bool = False


ReportResult = Union[ReportSuccess, ReportFailure]

CANCELLED = "cancelled"


class CancelToken:
    """Lets a caller abandon a pending generation."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()


class ReportGenerator:
    """Generate simulated reports, one in-flight job per key at a time."""

    def __init__(
        self,
        organization_name: str = DEFAULT_ORG_NAME,
        delay_seconds: float = DEFAULT_REPORT_DELAY_SECONDS,
        renderer: Callable[[Mapping[str, Any]], bytes] = render_json,
        clock: Callable[[], float] = time.time,
        now: Callable[[], datetime] = datetime.now,
        activity: ActivityLog | None = None,
    ) -> None:
        if delay_seconds < 0:
            raise ValueError("Report delay cannot be negative.")
        self.organization_name = organization_name
        self.delay_seconds = delay_seconds
        self.renderer = renderer
        self._clock = clock
        self._now = now
        self.activity = activity
        self._in_flight: set[str] = set()

    @classmethod
    def from_settings(cls, settings: Settings, activity: ActivityLog | None = None) -> ReportGenerator:
        return cls(
            organization_name=settings.organization_name,
            delay_seconds=settings.report_delay_seconds,
            activity=activity,
        )

    def is_pending(self, job_key: str) -> bool:
        return job_key in self._in_flight

    async def _wait(self, cancel_token: CancelToken | None) -> bool:
        """Sleep for the configured delay; return True if cancelled meanwhile."""

        if cancel_token is None:
            await asyncio.sleep(self.delay_seconds)
            return False
        if cancel_token.cancelled:
            return True
        try:
            await asyncio.wait_for(cancel_token.wait(), timeout=self.delay_seconds)
        except asyncio.TimeoutError:
            pass
        return cancel_token.cancelled

    async def generate(
        self,
        data: Any,
        report_type: str = "general",
        *,
        job_key: str | None = None,
        cancel_token: CancelToken | None = None,
    ) -> ReportResult:
        key = job_key or report_type
        if key in self._in_flight:
            logger.info("Rejected %s report for %s: already in progress.", report_type, key)
            return ReportFailure(f"A report for {key} is already being generated.")

        self._in_flight.add(key)
        try:
            result = await self._build(data, report_type, key, cancel_token)
        finally:
            self._in_flight.discard(key)
        self._note(result, report_type)
        return result

    async def _build(
        self,
        data: Any,
        report_type: str,
        key: str,
        cancel_token: CancelToken | None,
    ) -> ReportResult:
        logger.info("Generating %s report for %s.", report_type, key)
        payload = {
            "title": report_title(report_type),
            "generated": self._now().isoformat(),
            "organization": self.organization_name,
            "type": report_type,
            "data": data,
        }

        if await self._wait(cancel_token):
            logger.info("Cancelled %s report for %s.", report_type, key)
            return ReportFailure(CANCELLED)

        try:
            content = self.renderer(payload)
        except RenderError as exc:
            logger.error("Rendering %s report for %s failed: %s", report_type, key, exc)
            return ReportFailure(str(exc))

        document = GeneratedDocument(
            filename=f"{report_type}_report_{int(self._clock() * 1000)}.pdf",
            report_type=report_type,
            size_mb=report_size_mb(data),
            pages=page_count(data),
            content=content,
        )
        logger.info("Generated %s (%s pages, %s MB).", document.filename, document.pages, document.size_mb)
        return ReportSuccess(document)

    def _note(self, result: ReportResult, report_type: str) -> None:
        if self.activity is None:
            return
        if isinstance(result, ReportSuccess):
            self.activity.record(
                ActivityAction.REPORT_GENERATED,
                ActivityCategory.ANALYTICS,
                f"Generated {report_title(report_type)} ({result.document.filename})",
            )
        else:
            self.activity.record(
                ActivityAction.REPORT_FAILED,
                ActivityCategory.ANALYTICS,
                f"{report_title(report_type)} failed: {result.reason}",
                success=False,
            )

    async def generate_donor_report(
        self,
        donor: Any,
        donations: Sequence[Any] | None = None,
        cancel_token: CancelToken | None = None,
    ) -> ReportResult:
        gifts = analytics.mock_donations(donor) if donations is None else list(donations)
        data = {
            "donor": donor,
            "donations": gifts,
            "total_impact": analytics.calculate_donor_impact(gifts),
            "conservation_metrics": analytics.generate_conservation_metrics(gifts),
            "projects": analytics.projects_from_donations(gifts),
        }
        return await self.generate(
            data,
            "donor_impact",
            job_key=f"donor:{donor.id}",
            cancel_token=cancel_token,
        )

    async def generate_grant_report(
        self,
        grant: Any,
        milestones: Sequence[Any] | None = None,
        cancel_token: CancelToken | None = None,
        today: date | None = None,
    ) -> ReportResult:
        steps = list(grant.milestones if milestones is None else milestones)
        data = {
            "grant": grant,
            "milestones": steps,
            "compliance": analytics.assess_grant_compliance(grant, steps),
            "financial_summary": analytics.generate_financial_summary(grant),
            "timeline_analysis": analytics.analyze_timeline(grant, steps, today=today),
        }
        return await self.generate(
            data,
            "grant_compliance",
            job_key=f"grant:{grant.id}",
            cancel_token=cancel_token,
        )

    async def generate_survey_report(
        self,
        surveys: Sequence[Any],
        cancel_token: CancelToken | None = None,
    ) -> ReportResult:
        data = {
            "surveys": list(surveys),
            "biodiversity_analysis": analytics.analyze_biodiversity(surveys),
            "threat_assessment": analytics.assess_threats(surveys),
            "recommendations": analytics.generate_recommendations(surveys),
            "gis_data": analytics.extract_gis_data(surveys),
        }
        return await self.generate(data, "survey_analysis", job_key="surveys", cancel_token=cancel_token)

    async def generate_volunteer_report(
        self,
        volunteers: Sequence[Any],
        cancel_token: CancelToken | None = None,
    ) -> ReportResult:
        impact = analytics.calculate_volunteer_impact(volunteers)
        data = {
            "volunteers": list(volunteers),
            "total_hours": impact["total_hours"],
            "impact_metrics": impact,
            "skill_distribution": analytics.analyze_skill_distribution(volunteers),
            "project_contributions": analytics.volunteer_projects(volunteers),
        }
        return await self.generate(data, "volunteer_impact", job_key="volunteers", cancel_token=cancel_token)

    async def download_report(
        self,
        report_type: str,
        data: Mapping[str, Any],
        cancel_token: CancelToken | None = None,
    ) -> ReportResult:
        if report_type == "donor":
            return await self.generate_donor_report(data["donor"], data.get("donations"), cancel_token)
        if report_type == "grant":
            return await self.generate_grant_report(data["grant"], data.get("milestones"), cancel_token)
        if report_type == "survey":
            return await self.generate_survey_report(data["surveys"], cancel_token)
        if report_type == "volunteer":
            return await self.generate_volunteer_report(data["volunteers"], cancel_token)
        return await self.generate(data, report_type, cancel_token=cancel_token)
