"""
Formatting of visual pass reports.

HTML fragments are returned as ``Markup`` so the page template inserts them
unescaped; every value taken from the API is escaped while the fragment is
built. A plain-text rendering is provided for console output.
"""

from __future__ import annotations

from datetime import datetime, timezone

from markupsafe import Markup

from .models import MAGNITUDE_UNKNOWN, Pass, VisualPassReport

# RFC 822 layout, e.g. "02 Jan 06 15:04 MST"
RFC822_FORMAT = '%d %b %y %H:%M %Z'

PASS_COLUMNS = (
    'Magnitude',
    'Duration',
    'Start Visibility',
    'Start',
    'Start Azimuth',
    'Start Elevation',
    'Max',
    'Max Azimuth',
    'Max Elevation',
    'End',
    'End Azimuth',
    'End Elevation',
)

# Shown in place of a value that cannot be displayed
UNAVAILABLE = '-'

SUMMARY_HTML = Markup('''
    <h2>{name} ({satellite_id})</h2>
    <ul>
        <li>Transaction count: {transactions_count}</li>
        <li>Pass count: {pass_count}</li>
    </ul>''')


def format_magnitude(mag: float) -> str:
    """Magnitude to 2 decimals, or '-' when the API did not compute it."""
    if mag == MAGNITUDE_UNKNOWN:
        return UNAVAILABLE
    return f'{mag:.2f}'


def seconds_to_duration(total_seconds: int) -> str:
    """
    Format seconds as minutes and seconds, e.g. 125 -> '2m  5s'.

    Division truncates toward zero, so negative input keeps its sign on
    both parts: -125 -> '-2m -5s'.
    """
    total_seconds = int(total_seconds)
    minutes, seconds = divmod(abs(total_seconds), 60)
    if total_seconds < 0:
        minutes, seconds = -minutes, -seconds
    return f'{minutes}m {seconds:2d}s'


def utc_seconds_to_local_time(utc_seconds: int) -> str:
    """
    Format a Unix timestamp in the server's local timezone (RFC 822).

    Timestamps outside the range the platform can represent give '-'.
    """
    try:
        local = datetime.fromtimestamp(utc_seconds, tz=timezone.utc).astimezone()
    except (ValueError, OverflowError, OSError):
        return UNAVAILABLE
    return local.strftime(RFC822_FORMAT)


def format_angle(degrees: float, compass: str | None = None) -> Markup:
    """Angle to 2 decimals with a degree sign and optional compass label."""
    if compass is None:
        return Markup('{:.2f}&deg;').format(degrees)
    return Markup('{:.2f}&deg; ({})').format(degrees, compass)


def pass_row(visual_pass: Pass) -> list[str | Markup]:
    """Cell values for one pass, in PASS_COLUMNS order."""
    return [
        format_magnitude(visual_pass.mag),
        seconds_to_duration(visual_pass.duration),
        utc_seconds_to_local_time(visual_pass.start_visibility),
        utc_seconds_to_local_time(visual_pass.start_utc),
        format_angle(visual_pass.start_az, visual_pass.start_az_compass),
        format_angle(visual_pass.start_el),
        utc_seconds_to_local_time(visual_pass.max_utc),
        format_angle(visual_pass.max_az, visual_pass.max_az_compass),
        format_angle(visual_pass.max_el),
        utc_seconds_to_local_time(visual_pass.end_utc),
        format_angle(visual_pass.end_az, visual_pass.end_az_compass),
        format_angle(visual_pass.end_el),
    ]


def _table_row(tag: str, cells: list) -> Markup:
    cell_html = Markup('').join(
        Markup('\n            <{tag}>{value}</{tag}>').format(tag=Markup(tag), value=cell)
        for cell in cells
    )
    return Markup('\n        <tr>{cells}\n        </tr>').format(cells=cell_html)


def format_summary(report: VisualPassReport) -> Markup:
    """Heading with name and id plus transaction and pass counts."""
    return SUMMARY_HTML.format(
        name=report.info.satellite_name,
        satellite_id=report.info.satellite_id,
        transactions_count=report.info.transactions_count,
        pass_count=len(report.passes),
    )


def format_pass_table(report: VisualPassReport) -> Markup:
    """One table with a header row and a row per pass."""
    rows = [_table_row('th', list(PASS_COLUMNS))]
    rows.extend(_table_row('td', pass_row(p)) for p in report.passes)

    return Markup('\n    <table>{rows}\n    </table>').format(rows=Markup('').join(rows))


def format_console_report(report: VisualPassReport) -> str:
    """Plain-text rendering of a report for terminal output."""
    info = report.info
    lines = [
        f'Satellite name     : {info.satellite_name}',
        f'Satellite ID       : {info.satellite_id}',
        f'Transactions Count : {info.transactions_count}',
        f'Passes Count       : {info.passes_count}',
    ]

    for index, p in enumerate(report.passes):
        lines.extend([
            f'Pass {index:2d}:',
            f'  Magnitude         : {format_magnitude(p.mag)} (brightness)',
            f'  Duration          : {p.duration}s ({seconds_to_duration(p.duration)})',
            f'  Start Visibility  : {utc_seconds_to_local_time(p.start_visibility)}',
            '',
            f'  Start             : {utc_seconds_to_local_time(p.start_utc)}',
            f'  Start Azimuth     : {p.start_az:.2f}° ({p.start_az_compass})',
            f'  Start Elevation   : {p.start_el:.2f}°',
            '',
            f'  Max               : {utc_seconds_to_local_time(p.max_utc)}',
            f'  Max Azimuth       : {p.max_az:.2f}° ({p.max_az_compass})',
            f'  Max Elevation     : {p.max_el:.2f}°',
            '',
            f'  End               : {utc_seconds_to_local_time(p.end_utc)}',
            f'  End Azimuth       : {p.end_az:.2f}° ({p.end_az_compass})',
            f'  End Elevation     : {p.end_el:.2f}°',
            '',
        ])

    return '\n'.join(lines)
