"""Abstract location source."""

from __future__ import annotations

import abc

from crowflies.models import Coordinate


class LocationError(Exception):
    """Raised when a location source cannot produce a position."""


class LocationSource(abc.ABC):
    """Something that can tell us where the user is."""

    name: str = "unknown"

    @abc.abstractmethod
    async def resolve(self) -> Coordinate:
        """Obtain the user's current position.

        Returns:
            The resolved Coordinate.

        Raises:
            LocationError: if the position is unavailable.
            InvalidCoordinate: if the source produced an unusable position.
        """
