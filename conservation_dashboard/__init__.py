"""Data, pipeline and simulated operations for the conservation dashboard."""

from .activity import ActivityLog
from .config import Settings, configure_logging, load_settings
from .exports import export_csv, export_records, records_frame, write_export
from .mapping import MapPoint, map_frame, site_points, survey_points
from .models import Severity, ValidationError
from .outreach import UpdateMailer
from .pipeline import (
    Criteria,
    ViewResult,
    compute_aggregates,
    filter_records,
    run_view,
    safe_average,
    sort_records,
)
from .reports import (
    CancelToken,
    GeneratedDocument,
    RenderError,
    ReportFailure,
    ReportGenerator,
    ReportSuccess,
)
from .store import RecordStore, Workspace
from .views import DOMAINS, format_currency, format_percent, get_domain

__all__ = [
    "ActivityLog",
    "CancelToken",
    "compute_aggregates",
    "configure_logging",
    "Criteria",
    "DOMAINS",
    "export_csv",
    "export_records",
    "filter_records",
    "format_currency",
    "format_percent",
    "GeneratedDocument",
    "get_domain",
    "load_settings",
    "map_frame",
    "MapPoint",
    "RecordStore",
    "records_frame",
    "RenderError",
    "ReportFailure",
    "ReportGenerator",
    "ReportSuccess",
    "run_view",
    "safe_average",
    "Settings",
    "Severity",
    "site_points",
    "sort_records",
    "survey_points",
    "UpdateMailer",
    "ValidationError",
    "ViewResult",
    "Workspace",
    "write_export",
]
