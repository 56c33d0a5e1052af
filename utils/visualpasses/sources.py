"""
Visual pass data sources.

A source turns a satellite id into the raw JSON bytes of a ``visualpasses``
response, either from local fixture files or from the N2YO REST API.
"""

from __future__ import annotations

import http.client
from abc import ABC, abstractmethod
from pathlib import Path
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from config import VERSION, WatchConfig
from utils.dotfile import read_dotfile
from utils.logging import get_logger

from .errors import ConfigError, FileError, NetworkError

logger = get_logger('satwatch.sources')

FIXTURE_NAME = 'visualpasses-{satellite_id}.json'


class PassDataSource(ABC):
    """Something that can produce raw visual pass JSON for a satellite."""

    @abstractmethod
    def fetch_raw(self, satellite_id: int) -> bytes:
        """Return the raw JSON bytes for one satellite."""


class FixturePassSource(PassDataSource):
    """Reads ``visualpasses-<id>.json`` files from a directory."""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def path_for(self, satellite_id: int) -> Path:
        return self.directory / FIXTURE_NAME.format(satellite_id=satellite_id)

    def fetch_raw(self, satellite_id: int) -> bytes:
        path = self.path_for(satellite_id)
        logger.debug(f"Reading offline pass data from {path}")
        try:
            return path.read_bytes()
        except OSError as e:
            raise FileError(str(e)) from e


def build_request_path(
    satellite_id: int,
    credentials: dict[str, str],
    location: dict[str, str],
    preferences: dict[str, str],
) -> str:
    """
    Build the API path and query for a visual passes request.

    Every credential pair becomes a query parameter.

    Raises:
        ConfigError: If a location or preference value is missing or empty
    """
    segments = [
        'visualpasses',
        str(satellite_id),
        location.get('latitude', ''),
        location.get('longitude', ''),
        location.get('altitude', ''),
        preferences.get('days', ''),
        preferences.get('minimum_visibility', ''),
    ]
    path = '/' + '/'.join(segments)

    if not all(segments):
        raise ConfigError(f"some location or preference information is missing: {path}")

    return f"{path}?{urlencode(sorted(credentials.items()))}"


class N2YOPassSource(PassDataSource):
    """Fetches visual passes from the N2YO REST API.

    Credentials, location and preferences are re-read from their dotfiles
    on every fetch.
    """

    def __init__(
        self,
        base_url: str,
        credentials_file: str | Path,
        location_file: str | Path,
        preferences_file: str | Path,
        timeout: float | None = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.credentials_file = credentials_file
        self.location_file = location_file
        self.preferences_file = preferences_file
        self.timeout = timeout

    def _read_settings(self) -> tuple[dict[str, str], dict[str, str], dict[str, str]]:
        try:
            credentials = read_dotfile(self.credentials_file)
        except FileError as e:
            raise FileError(f"reading header information: {e}") from e

        try:
            location = read_dotfile(self.location_file)
        except FileError as e:
            raise FileError(f"reading location detail: {e}") from e

        try:
            preferences = read_dotfile(self.preferences_file)
        except FileError as e:
            raise FileError(f"reading preferences: {e}") from e

        return credentials, location, preferences

    def fetch_raw(self, satellite_id: int) -> bytes:
        """
        Request the visual passes for one satellite and return the body.

        Only a 2xx response yields a body. ``urlopen`` raises ``HTTPError``
        for any other status, so the error body is never decoded.

        Raises:
            FileError: If a dotfile cannot be read
            ConfigError: If location or preference values are missing
            NetworkError: If the request fails or the status is not 2xx
        """
        credentials, location, preferences = self._read_settings()
        request_path = build_request_path(satellite_id, credentials, location, preferences)

        try:
            req = Request(f'{self.base_url}{request_path}', headers={
                'User-Agent': f'SatelliteWatcher/{VERSION}',
                'Accept': 'application/json',
            })
        except ValueError as e:
            raise NetworkError(f"creating request: {e}") from e

        logger.debug(f"Requesting visual passes for satellite {satellite_id}")

        kwargs = {}
        if self.timeout is not None:
            kwargs['timeout'] = self.timeout

        try:
            response = urlopen(req, **kwargs)
        except (OSError, http.client.HTTPException) as e:
            raise NetworkError(f"sending request: {e}") from e

        with response:
            try:
                return response.read()
            except (http.client.HTTPException, OSError) as e:
                raise NetworkError(f"reading response: {e}") from e


def get_pass_source(watch_config: WatchConfig) -> PassDataSource:
    """Select the data source described by the configuration."""
    if watch_config.offline:
        return FixturePassSource(watch_config.fixture_dir)

    return N2YOPassSource(
        base_url=watch_config.api_base_url,
        credentials_file=watch_config.credentials_file,
        location_file=watch_config.location_file,
        preferences_file=watch_config.preferences_file,
        timeout=watch_config.request_timeout,
    )
