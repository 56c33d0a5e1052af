"""Configuration settings for Satellite Watcher.

Values are read once at import from ``SATWATCH_*`` environment variables and
collected into an immutable :class:`WatchConfig` at application startup.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

VERSION = '1.0.0'

PROJECT_ROOT = Path(__file__).resolve().parent

_logger = logging.getLogger('satwatch.config')


def _get_env(key: str, default: str) -> str:
    """Get environment variable with default."""
    return os.environ.get(f'SATWATCH_{key}', default)


def _get_env_int(key: str, default: int) -> int:
    """Get environment variable as integer with default."""
    value = os.environ.get(f'SATWATCH_{key}')
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        _logger.warning(f"Invalid integer for SATWATCH_{key}: {value!r}, using {default}")
        return default


def _get_env_float(key: str, default: float | None) -> float | None:
    """Get environment variable as float with default."""
    value = os.environ.get(f'SATWATCH_{key}')
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        _logger.warning(f"Invalid number for SATWATCH_{key}: {value!r}, using {default}")
        return default


def _get_env_bool(key: str, default: bool) -> bool:
    """Get environment variable as boolean with default."""
    value = os.environ.get(f'SATWATCH_{key}')
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _get_env_int_list(key: str, default: list[int]) -> list[int]:
    """Get a comma separated environment variable as a list of integers."""
    value = os.environ.get(f'SATWATCH_{key}')
    if not value:
        return list(default)
    try:
        return [int(part) for part in value.split(',') if part.strip()]
    except ValueError:
        _logger.warning(f"Invalid id list for SATWATCH_{key}: {value!r}, using {default}")
        return list(default)


# ISS, TianGong, HST
DEFAULT_SATELLITE_IDS = [25544, 48274, 20580]

# Server settings
HOST = _get_env('HOST', '0.0.0.0')
PORT = _get_env_int('PORT', 8081)

# Read pass data from local fixtures instead of the live API
OFFLINE = _get_env_bool('OFFLINE', True)

SATELLITE_IDS = _get_env_int_list('SATELLITE_IDS', DEFAULT_SATELLITE_IDS)

TEMPLATE_PATH = _get_env('TEMPLATE_PATH', str(PROJECT_ROOT / 'templates' / 'satellite-passes.html'))
FIXTURE_DIR = _get_env('FIXTURE_DIR', str(PROJECT_ROOT / 'data' / 'visualpasses'))

# Property-style dotfiles, resolved against the working directory
CREDENTIALS_FILE = _get_env('CREDENTIALS_FILE', '.env')
LOCATION_FILE = _get_env('LOCATION_FILE', '.location')
PREFERENCES_FILE = _get_env('PREFERENCES_FILE', '.preferences')

# N2YO REST API
API_BASE_URL = _get_env('API_BASE_URL', 'https://api.n2yo.com/rest/v1/satellite')
REQUEST_TIMEOUT = _get_env_float('REQUEST_TIMEOUT', None)

LOG_LEVEL = _get_env('LOG_LEVEL', 'INFO').upper()

PAGE_TITLE = 'Satellite Watcher'


@dataclass(frozen=True)
class WatchConfig:
    """Startup configuration shared read-only by every request."""
    satellite_ids: tuple[int, ...] = field(default_factory=lambda: tuple(DEFAULT_SATELLITE_IDS))
    template_path: Path = PROJECT_ROOT / 'templates' / 'satellite-passes.html'
    fixture_dir: Path = PROJECT_ROOT / 'data' / 'visualpasses'
    credentials_file: Path = Path('.env')
    location_file: Path = Path('.location')
    preferences_file: Path = Path('.preferences')
    api_base_url: str = 'https://api.n2yo.com/rest/v1/satellite'
    request_timeout: float | None = None
    offline: bool = True
    host: str = '0.0.0.0'
    port: int = 8081


_PATH_FIELDS = ('template_path', 'fixture_dir', 'credentials_file', 'location_file', 'preferences_file')


def load_watch_config(**overrides) -> WatchConfig:
    """Build a WatchConfig from the module settings, applying any overrides."""
    watch_config = WatchConfig(
        satellite_ids=tuple(SATELLITE_IDS),
        template_path=Path(TEMPLATE_PATH),
        fixture_dir=Path(FIXTURE_DIR),
        credentials_file=Path(CREDENTIALS_FILE),
        location_file=Path(LOCATION_FILE),
        preferences_file=Path(PREFERENCES_FILE),
        api_base_url=API_BASE_URL,
        request_timeout=REQUEST_TIMEOUT,
        offline=OFFLINE,
        host=HOST,
        port=PORT,
    )
    if not overrides:
        return watch_config

    for name in _PATH_FIELDS:
        if overrides.get(name) is not None:
            overrides[name] = Path(overrides[name])
    if 'satellite_ids' in overrides:
        overrides['satellite_ids'] = tuple(overrides['satellite_ids'])
    return replace(watch_config, **overrides)
