"""Human-readable rendering of distances, bearings and coordinates."""

from __future__ import annotations

from decimal import Context, Decimal, ROUND_HALF_UP
from enum import Enum

from crowflies.models import Coordinate

MILES_PER_KM = 0.62137119223733
FEET_PER_MILE = 5280

# Enough digits for the largest finite float plus decimals
_WIDE = Context(prec=400)


class Unit(str, Enum):
    """Unit system used for display. Does not affect the computed distance."""

    METRIC = "metric"
    IMPERIAL = "imperial"

    @classmethod
    def parse(cls, value: str | Unit) -> Unit:
        """Accept "metric"/"imperial" or the short codes "km"/"mi"."""
        if isinstance(value, Unit):
            return value
        key = str(value).strip().lower()
        alias = _UNIT_ALIASES.get(key)
        if alias is None:
            raise ValueError(f"unknown unit {value!r} (expected metric, imperial, km or mi)")
        return alias


_UNIT_ALIASES = {
    "metric": Unit.METRIC,
    "km": Unit.METRIC,
    "imperial": Unit.IMPERIAL,
    "mi": Unit.IMPERIAL,
}


def _fixed(value: float, places: int) -> str:
    # Half-up on the exact binary value, same digits as JavaScript's toFixed()
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_WIDE))


def format_distance(km: float, unit: Unit | str) -> str:
    """Format a distance with precision that adapts to its magnitude.

    Imperial switches to feet under 0.1 mi, metric to meters under 1 km.
    ``km`` must be non-negative and finite.
    """
    if Unit.parse(unit) is Unit.IMPERIAL:
        mi = km * MILES_PER_KM
        if mi < 0.1:
            return f"{_fixed(mi * FEET_PER_MILE, 0)} ft"
        if mi < 1:
            return f"{_fixed(mi, 2)} mi"
        return f"{_fixed(mi, 1)} mi"

    if km < 1:
        return f"{_fixed(km * 1000, 0)} m"
    if km < 10:
        return f"{_fixed(km, 2)} km"
    return f"{_fixed(km, 1)} km"


def format_coordinate(coord: Coordinate) -> str:
    return f"{_fixed(coord.latitude, 4)}°, {_fixed(coord.longitude, 4)}°"


def format_bearing(deg: float) -> str:
    """Whole-degree bearing, e.g. "64°"."""
    return f"{_fixed(deg, 0)}°"


def format_summary(km: float, deg: float) -> str:
    return f"{_fixed(km, 2)} km • Bearing {format_bearing(deg)}"
