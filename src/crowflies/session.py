"""Presentation state: where the user is, and how far that is from the reference.

The session owns the status of the *location source* (idle, locating, located,
error). Distance and bearing are never stored; they are recomputed from the
current position and the injected reference point on every call.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum

from crowflies.formatting import Unit, format_distance
from crowflies.geo import bearing_deg, distance_km
from crowflies.locators.base import LocationError, LocationSource
from crowflies.locators.manual import ManualLocationSource
from crowflies.models import Coordinate, DistanceReport, InvalidCoordinate
from crowflies.references import LAMBEAU_FIELD, ReferencePoint

logger = logging.getLogger(__name__)

DEFAULT_LOCATE_TIMEOUT = 10.0


class LocationStatus(str, Enum):
    IDLE = "idle"
    LOCATING = "locating"
    LOCATED = "located"
    ERROR = "error"


class LocationSession:
    """Tracks the user's position relative to a fixed reference point."""

    def __init__(
        self,
        reference: ReferencePoint = LAMBEAU_FIELD,
        unit: Unit | str = Unit.IMPERIAL,
        timeout: float = DEFAULT_LOCATE_TIMEOUT,
    ):
        self.reference = reference
        self.unit = Unit.parse(unit)
        self.timeout = timeout
        self.status = LocationStatus.IDLE
        self.error: str | None = None
        self.position: Coordinate | None = None

    async def locate(self, source: LocationSource) -> Coordinate | None:
        """Ask ``source`` for the current position.

        Failures are recorded on the session rather than raised; the previous
        position, if any, is kept.
        """
        self.status = LocationStatus.LOCATING
        self.error = None
        logger.debug("locating via %s", source.name)

        try:
            coord = await asyncio.wait_for(source.resolve(), timeout=self.timeout)
        except asyncio.TimeoutError:
            self._fail(source, f"Timed out after {self.timeout:g}s waiting for location.")
            return None
        except (LocationError, InvalidCoordinate) as exc:
            self._fail(source, str(exc))
            return None

        self._located(source, coord)
        return coord

    def use_manual(self, lat_text: str, lon_text: str) -> Coordinate | None:
        """Synchronous manual entry."""
        source = ManualLocationSource(lat_text, lon_text)
        try:
            coord = source.coordinate()
        except InvalidCoordinate as exc:
            self._fail(source, str(exc))
            return None

        self._located(source, coord)
        return coord

    def clear(self) -> None:
        self.position = None
        self.error = None
        self.status = LocationStatus.IDLE

    def _located(self, source: LocationSource, coord: Coordinate) -> None:
        self.position = coord
        self.error = None
        self.status = LocationStatus.LOCATED
        logger.info("located via %s at %.4f, %.4f", source.name, coord.latitude, coord.longitude)

    def _fail(self, source: LocationSource, message: str) -> None:
        self.error = message
        self.status = LocationStatus.ERROR
        logger.warning("%s: %s", source.name, message)

    def distance_km(self) -> float | None:
        if self.position is None:
            return None
        return distance_km(self.position, self.reference.coordinate)

    def bearing_deg(self) -> float | None:
        if self.position is None:
            return None
        return bearing_deg(self.position, self.reference.coordinate)

    def display_distance(self) -> str | None:
        km = self.distance_km()
        if km is None:
            return None
        return format_distance(km, self.unit)

    def report(self) -> DistanceReport | None:
        if self.position is None:
            return None
        km = distance_km(self.position, self.reference.coordinate)
        return DistanceReport(
            origin=self.position,
            reference=self.reference.coordinate,
            reference_name=self.reference.name,
            distance_km=km,
            bearing_deg=bearing_deg(self.position, self.reference.coordinate),
            unit=self.unit.value,
            display=format_distance(km, self.unit),
        )
