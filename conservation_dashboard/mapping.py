"""Map points for survey locations and project sites."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from .models import ProjectSite, Survey

MAP_COLUMNS = ["lat", "lon", "name", "kind", "status"]


@dataclass(frozen=True)
class MapPoint:
    lat: float
    lon: float
    name: str
    kind: str
    status: str = ""


def survey_points(surveys: Iterable[Survey]) -> list[MapPoint]:
    # surveys without coordinates are not plotted
    return [
        MapPoint(
            lat=survey.coordinates.lat,
            lon=survey.coordinates.lng,
            name=survey.name,
            kind="survey",
            status=survey.status.value,
        )
        for survey in surveys
        if survey.coordinates is not None
    ]


def site_points(sites: Iterable[ProjectSite]) -> list[MapPoint]:
    return [
        MapPoint(lat=site.latitude, lon=site.longitude, name=site.name, kind="site", status=site.status)
        for site in sites
    ]


def map_frame(points: Iterable[MapPoint]) -> pd.DataFrame:
    rows = [
        {"lat": point.lat, "lon": point.lon, "name": point.name, "kind": point.kind, "status": point.status}
        for point in points
    ]
    return pd.DataFrame(rows, columns=MAP_COLUMNS)
