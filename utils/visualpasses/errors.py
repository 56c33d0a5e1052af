"""Errors raised while obtaining visual pass reports."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import VisualPassReport


class VisualPassError(Exception):
    """Base class for visual pass pipeline errors."""


class FileError(VisualPassError):
    """A dotfile or fixture file is missing or unreadable."""


class ConfigError(VisualPassError):
    """Location or preference values needed for the request are missing."""


class NetworkError(VisualPassError):
    """The API request could not be built, sent or read."""


class DecodeError(VisualPassError):
    """The pass data is not valid JSON or does not match the report schema."""


class FetchReportsError(VisualPassError):
    """Fetching a list of reports stopped at the first failure.

    ``reports`` holds the reports obtained before the failing satellite.
    """

    def __init__(self, message: str, reports: list[VisualPassReport], satellite_id: int | None = None):
        super().__init__(message)
        self.reports = reports
        self.satellite_id = satellite_id
