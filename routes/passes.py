"""Visual pass page - the single catch-all route."""

from __future__ import annotations

from pathlib import Path

from flask import Blueprint, Response, current_app, render_template
from jinja2 import Template, TemplateError
from markupsafe import Markup

import config
from config import WatchConfig
from utils.logging import get_logger
from utils.visualpasses.client import fetch_reports
from utils.visualpasses.errors import FetchReportsError
from utils.visualpasses.formatting import format_pass_table, format_summary
from utils.visualpasses.models import VisualPassReport
from utils.visualpasses.sources import get_pass_source

logger = get_logger('satwatch.passes')

passes_bp = Blueprint('passes', __name__)

ALL_METHODS = ['GET', 'HEAD', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS', 'TRACE']

REPORT_SEPARATOR = Markup('<br/>')


def _error_response(error: Exception) -> Response:
    return Response(f'{error}\n', status=500, mimetype='text/plain')


def load_page_template(path: Path) -> Template:
    """Read and compile the page template. Not cached; read on every call."""
    source = Path(path).read_text(encoding='utf-8')
    return current_app.jinja_env.from_string(source)


def build_content(reports: list[VisualPassReport]) -> Markup:
    """Summary and pass table for every report, in order."""
    content = Markup('')
    for report in reports:
        content += format_summary(report)
        content += REPORT_SEPARATOR
        content += format_pass_table(report)
        content += REPORT_SEPARATOR
    return content


@passes_bp.route('/', defaults={'path': ''}, methods=ALL_METHODS)
@passes_bp.route('/<path:path>', methods=ALL_METHODS)
def satellite_watch(path: str) -> Response | str:
    """
    Render visual passes for the configured satellites.

    Every path and method is served by this view. A fetch failure degrades
    the page to the reports obtained so far plus an error status; only
    template failures produce a 500.
    """
    watch_config: WatchConfig = current_app.config['SATWATCH']

    try:
        template = load_page_template(watch_config.template_path)
    except (OSError, TemplateError) as e:
        logger.error(f"Error loading page template: {e}")
        return _error_response(e)

    status = 'OK'
    source = get_pass_source(watch_config)
    try:
        reports = fetch_reports(source, watch_config.satellite_ids)
    except FetchReportsError as e:
        logger.warning(f"Visual pass fetch failed: {e}")
        reports = e.reports
        status = f'Error: {e}'

    try:
        return render_template(
            template,
            title=config.PAGE_TITLE,
            heading=config.PAGE_TITLE,
            count=len(reports),
            content=build_content(reports),
            status=status,
        )
    except TemplateError as e:
        logger.error(f"Error rendering page template: {e}")
        return _error_response(e)
