"""Crowflies — as-the-crow-flies distance and bearing to a fixed reference point."""

from crowflies.formatting import Unit, format_distance
from crowflies.geo import EARTH_RADIUS_KM, bearing_deg, distance_km, haversine_km
from crowflies.models import Coordinate, InvalidCoordinate

__all__ = [
    "EARTH_RADIUS_KM",
    "Coordinate",
    "InvalidCoordinate",
    "Unit",
    "bearing_deg",
    "distance_km",
    "format_distance",
    "haversine_km",
]
