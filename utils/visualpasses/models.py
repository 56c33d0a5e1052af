"""
Visual pass data models.

Field names follow Python conventions; ``from_dict``/``to_dict`` map them to
the N2YO ``visualpasses`` JSON keys.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from .errors import DecodeError

# N2YO reports this magnitude when brightness was not computed
MAGNITUDE_UNKNOWN = 100000

# Integer fields are 64-bit signed in the API schema
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


def _int_field(data: dict, key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"field '{key}': expected integer, got {value!r}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise DecodeError(f"field '{key}': integer out of range")
    return value


def _float_field(data: dict, key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"field '{key}': expected number, got {value!r}")
    try:
        number = float(value)
    except OverflowError as e:
        raise DecodeError(f"field '{key}': number out of range") from e
    if not math.isfinite(number):
        raise DecodeError(f"field '{key}': number out of range")
    return number


def _str_field(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise DecodeError(f"field '{key}': expected string, got {value!r}")
    return value


def _object_field(data: dict, key: str) -> dict:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"field '{key}': expected object, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class SatelliteInfo:
    """Satellite identity and API bookkeeping returned with every report."""

    satellite_id: int = 0
    satellite_name: str = ''
    transactions_count: int = 0
    passes_count: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SatelliteInfo:
        return cls(
            satellite_id=_int_field(data, 'satid'),
            satellite_name=_str_field(data, 'satname'),
            transactions_count=_int_field(data, 'transactionscount'),
            passes_count=_int_field(data, 'passescount'),
        )

    def to_dict(self) -> dict:
        return {
            'satid': self.satellite_id,
            'satname': self.satellite_name,
            'transactionscount': self.transactions_count,
            'passescount': self.passes_count,
        }


@dataclass(frozen=True)
class Pass:
    """A single predicted visual pass. Times are Unix epoch seconds (UTC)."""

    start_az: float = 0.0
    start_az_compass: str = ''
    start_el: float = 0.0
    start_utc: int = 0
    max_az: float = 0.0
    max_az_compass: str = ''
    max_el: float = 0.0
    max_utc: int = 0
    end_az: float = 0.0
    end_az_compass: str = ''
    end_el: float = 0.0
    end_utc: int = 0
    mag: float = 0.0
    duration: int = 0
    start_visibility: int = 0

    @property
    def magnitude_known(self) -> bool:
        return self.mag != MAGNITUDE_UNKNOWN

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Pass:
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise DecodeError(f"pass entry: expected object, got {type(data).__name__}")
        return cls(
            start_az=_float_field(data, 'startAz'),
            start_az_compass=_str_field(data, 'startAzCompass'),
            start_el=_float_field(data, 'startEl'),
            start_utc=_int_field(data, 'startUTC'),
            max_az=_float_field(data, 'maxAz'),
            max_az_compass=_str_field(data, 'maxAzCompass'),
            max_el=_float_field(data, 'maxEl'),
            max_utc=_int_field(data, 'maxUTC'),
            end_az=_float_field(data, 'endAz'),
            end_az_compass=_str_field(data, 'endAzCompass'),
            end_el=_float_field(data, 'endEl'),
            end_utc=_int_field(data, 'endUTC'),
            mag=_float_field(data, 'mag'),
            duration=_int_field(data, 'duration'),
            start_visibility=_int_field(data, 'startVisibility'),
        )

    def to_dict(self) -> dict:
        return {
            'startAz': self.start_az,
            'startAzCompass': self.start_az_compass,
            'startEl': self.start_el,
            'startUTC': self.start_utc,
            'maxAz': self.max_az,
            'maxAzCompass': self.max_az_compass,
            'maxEl': self.max_el,
            'maxUTC': self.max_utc,
            'endAz': self.end_az,
            'endAzCompass': self.end_az_compass,
            'endEl': self.end_el,
            'endUTC': self.end_utc,
            'mag': self.mag,
            'duration': self.duration,
            'startVisibility': self.start_visibility,
        }


@dataclass(frozen=True)
class VisualPassReport:
    """Satellite info plus its passes, in the order the API returned them."""

    info: SatelliteInfo = field(default_factory=SatelliteInfo)
    passes: tuple[Pass, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> VisualPassReport:
        """
        Build a report from decoded JSON.

        Unknown keys are ignored and missing or null values take zero
        defaults. Values of the wrong JSON type raise DecodeError.
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise DecodeError(f"expected JSON object, got {type(data).__name__}")

        raw_passes = data.get('passes')
        if raw_passes is None:
            raw_passes = []
        elif not isinstance(raw_passes, list):
            raise DecodeError(f"field 'passes': expected list, got {type(raw_passes).__name__}")

        return cls(
            info=SatelliteInfo.from_dict(_object_field(data, 'info')),
            passes=tuple(Pass.from_dict(p) for p in raw_passes),
        )

    def to_dict(self) -> dict:
        return {
            'info': self.info.to_dict(),
            'passes': [p.to_dict() for p in self.passes],
        }
