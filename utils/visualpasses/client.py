"""Visual pass client - fetch and decode reports from a data source."""

from __future__ import annotations

import json
from typing import Iterable

from utils.logging import get_logger

from .errors import DecodeError, FetchReportsError, VisualPassError
from .models import VisualPassReport
from .sources import PassDataSource

logger = get_logger('satwatch.client')


def decode_report(raw: bytes | str) -> VisualPassReport:
    """
    Decode a ``visualpasses`` JSON document into a report.

    Raises:
        DecodeError: If the JSON is malformed or does not match the schema
    """
    try:
        data = json.loads(raw)
    except (ValueError, TypeError, RecursionError) as e:
        raise DecodeError(str(e)) from e

    report = VisualPassReport.from_dict(data)

    if report.info.passes_count != len(report.passes):
        logger.debug(
            f"Satellite {report.info.satellite_id} reports {report.info.passes_count} "
            f"passes but {len(report.passes)} were returned"
        )

    return report


def fetch_report(source: PassDataSource, satellite_id: int) -> VisualPassReport:
    """Fetch and decode the visual pass report for one satellite."""
    return decode_report(source.fetch_raw(satellite_id))


def fetch_reports(source: PassDataSource, satellite_ids: Iterable[int]) -> list[VisualPassReport]:
    """
    Fetch reports for several satellites, one after another, in order.

    Stops at the first failure.

    Raises:
        FetchReportsError: Carries the reports fetched before the failure
    """
    reports: list[VisualPassReport] = []

    for satellite_id in satellite_ids:
        try:
            raw = source.fetch_raw(satellite_id)
        except VisualPassError as e:
            raise FetchReportsError(
                f"obtaining visual pass information: {e}", reports, satellite_id
            ) from e

        try:
            report = decode_report(raw)
        except DecodeError as e:
            raise FetchReportsError(
                f"reading visual pass information: {e}", reports, satellite_id
            ) from e

        reports.append(report)

    return reports
