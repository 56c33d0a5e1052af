#!/usr/bin/env python3
"""
Satellite Watcher - visual pass predictions for a fixed set of satellites.

Serves one HTML page summarising upcoming visible passes fetched from the
N2YO API (or local fixtures when offline).
"""

from __future__ import annotations

import argparse
import sys

from flask import Flask

import config
from config import WatchConfig, load_watch_config
from routes import register_blueprints
from utils.logging import configure_logging, get_logger
from utils.visualpasses.client import fetch_reports
from utils.visualpasses.errors import FetchReportsError
from utils.visualpasses.formatting import format_console_report
from utils.visualpasses.sources import get_pass_source

logger = get_logger('satwatch.app')


def create_app(watch_config: WatchConfig | None = None) -> Flask:
    """Create the Flask application for the given configuration."""
    flask_app = Flask(__name__)
    flask_app.config['SATWATCH'] = watch_config or load_watch_config()
    register_blueprints(flask_app)
    return flask_app


app = create_app()


def print_reports(watch_config: WatchConfig) -> int:
    """Print the configured reports to stdout. Returns a process exit code."""
    source = get_pass_source(watch_config)
    try:
        reports = fetch_reports(source, watch_config.satellite_ids)
        error = None
    except FetchReportsError as e:
        reports = e.reports
        error = e

    for report in reports:
        print(format_console_report(report))

    if error is not None:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description='Satellite Watcher - visual satellite pass predictions'
    )
    parser.add_argument('--host', default=config.HOST, help='Address to listen on')
    parser.add_argument('-p', '--port', type=int, default=config.PORT, help='Port to listen on')

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--offline', dest='offline', action='store_true', default=None,
                      help='Read pass data from local fixture files')
    mode.add_argument('--live', dest='offline', action='store_false',
                      help='Fetch pass data from the N2YO API')

    parser.add_argument('--print', dest='print_reports', action='store_true',
                        help='Print reports to the console instead of serving')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    configure_logging('DEBUG' if args.debug else config.LOG_LEVEL)

    overrides = {'host': args.host, 'port': args.port}
    if args.offline is not None:
        overrides['offline'] = args.offline
    watch_config = load_watch_config(**overrides)

    if args.print_reports:
        return print_reports(watch_config)

    server = create_app(watch_config)
    source_name = 'offline fixtures' if watch_config.offline else watch_config.api_base_url
    logger.info(f"Satellite Watcher {config.VERSION} serving on http://{watch_config.host}:{watch_config.port} ({source_name})")

    try:
        server.run(host=watch_config.host, port=watch_config.port, debug=args.debug, threaded=True)
    except OSError as e:
        logger.critical(f"Cannot listen on {watch_config.host}:{watch_config.port}: {e}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
