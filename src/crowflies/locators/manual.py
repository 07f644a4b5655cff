"""Location typed in by the user."""

from __future__ import annotations

from crowflies.locators.base import LocationSource
from crowflies.models import Coordinate


class ManualLocationSource(LocationSource):
    """Parses a latitude/longitude pair entered as text."""

    name = "manual"

    def __init__(self, lat_text: str, lon_text: str):
        self.lat_text = lat_text
        self.lon_text = lon_text

    def coordinate(self) -> Coordinate:
        return Coordinate.parse(self.lat_text, self.lon_text)

    async def resolve(self) -> Coordinate:
        return self.coordinate()
