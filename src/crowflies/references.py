"""Registry of fixed reference points that distances are measured to."""

from __future__ import annotations

from dataclasses import dataclass

from crowflies.models import Coordinate


@dataclass(frozen=True)
class ReferencePoint:
    """A named, well-known destination."""

    key: str
    name: str
    place: str
    coordinate: Coordinate


LAMBEAU_FIELD = ReferencePoint(
    key="lambeau",
    name="Lambeau Field",
    place="Green Bay, WI",
    coordinate=Coordinate(44.5013, -88.0622),
)

REFERENCE_POINTS: dict[str, ReferencePoint] = {
    LAMBEAU_FIELD.key: LAMBEAU_FIELD,
}

DEFAULT_REFERENCE = LAMBEAU_FIELD.key


def get_reference(key: str = DEFAULT_REFERENCE) -> ReferencePoint:
    try:
        return REFERENCE_POINTS[key]
    except KeyError:
        known = ", ".join(sorted(REFERENCE_POINTS))
        raise KeyError(f"unknown reference point {key!r} (known: {known})") from None
