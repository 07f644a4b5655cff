"""Data models for coordinates and distance reports."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, asdict


class InvalidCoordinate(ValueError):
    """Raised when a latitude/longitude pair is not a usable position."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Invalid coordinate: {'; '.join(errors)}")


@dataclass(frozen=True)
class Coordinate:
    """A point on the Earth's surface in decimal degrees."""

    latitude: float             # [-90, 90]
    longitude: float            # [-180, 180]

    def __post_init__(self) -> None:
        errors = validate(self.latitude, self.longitude)
        if errors:
            raise InvalidCoordinate(errors)

    @classmethod
    def parse(cls, lat_text: str, lon_text: str) -> Coordinate:
        """Build a Coordinate from two user-entered strings.

        Raises:
            InvalidCoordinate: if either string is not a number or the
                resulting position is out of range.
        """
        errors: list[str] = []
        lat = _parse_float("latitude", lat_text, errors)
        lon = _parse_float("longitude", lon_text, errors)
        if errors:
            raise InvalidCoordinate(errors)
        return cls(lat, lon)


def validate(latitude: float, longitude: float) -> list[str]:
    """Validate a latitude/longitude pair. Returns list of error messages (empty = valid)."""
    errors: list[str] = []

    if not math.isfinite(latitude):
        errors.append(f"latitude {latitude} is not finite")
    elif not -90 <= latitude <= 90:
        errors.append(f"latitude {latitude} out of range [-90, 90]")

    if not math.isfinite(longitude):
        errors.append(f"longitude {longitude} is not finite")
    elif not -180 <= longitude <= 180:
        errors.append(f"longitude {longitude} out of range [-180, 180]")

    return errors


def _parse_float(field: str, text: str, errors: list[str]) -> float:
    try:
        return float(str(text).strip())
    except (TypeError, ValueError):
        errors.append(f"{field} {text!r} is not a number")
        return math.nan


@dataclass
class DistanceReport:
    """Distance and bearing from an origin to a reference point, ready for display."""

    origin: Coordinate
    reference: Coordinate
    reference_name: str
    distance_km: float
    bearing_deg: float
    unit: str                   # "metric" or "imperial"
    display: str                # e.g. "1832.5 mi"

    def to_json(self) -> str:
        return json.dumps(asdict(self))

    @classmethod
    def from_json(cls, raw: str) -> DistanceReport:
        d = json.loads(raw)
        d["origin"] = Coordinate(**d["origin"])
        d["reference"] = Coordinate(**d["reference"])
        return cls(**d)
