"""Sources of the user's position."""

from crowflies.locators.base import LocationError, LocationSource
from crowflies.locators.geoip import GeoIPLocationSource
from crowflies.locators.manual import ManualLocationSource

__all__ = ["LocationError", "LocationSource", "GeoIPLocationSource", "ManualLocationSource"]
