"""Approximate device location via an IP geolocation web service."""

from __future__ import annotations

import asyncio
import logging

import httpx

from crowflies.config import LocatorConfig
from crowflies.locators.base import LocationError, LocationSource
from crowflies.models import Coordinate

logger = logging.getLogger(__name__)


class GeoIPLocationSource(LocationSource):
    """Async HTTP lookup of the caller's position from their public IP.

    Works with ip-api.com style payloads (``lat``/``lon``) and ipapi.co style
    payloads (``latitude``/``longitude``).
    """

    name = "geoip"

    def __init__(self, config: LocatorConfig | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self.config = config or LocatorConfig()
        self._transport = transport

    async def resolve(self) -> Coordinate:
        async with httpx.AsyncClient(timeout=self.config.timeout_seconds, transport=self._transport) as client:
            payload = await self._request_with_retry(client)
        return parse_payload(payload)

    async def _request_with_retry(self, client: httpx.AsyncClient) -> dict:
        """Make HTTP request with exponential backoff retry."""
        last_exc: Exception | None = None

        for attempt in range(self.config.max_retries + 1):
            try:
                resp = await client.get(self.config.base_url)
                resp.raise_for_status()
                return resp.json()
            except (httpx.HTTPStatusError, httpx.RequestError) as exc:
                last_exc = exc
                if attempt < self.config.max_retries:
                    backoff = self.config.retry_backoff_base ** attempt
                    logger.warning(
                        "geoip: attempt %d/%d failed (%s), retrying in %.1fs",
                        attempt + 1, self.config.max_retries + 1, exc, backoff,
                    )
                    await asyncio.sleep(backoff)
            except ValueError as exc:
                raise LocationError(f"Location service returned invalid JSON: {exc}") from exc

        raise LocationError(
            f"Failed to get location after {self.config.max_retries + 1} attempts"
        ) from last_exc


def parse_payload(payload: dict) -> Coordinate:
    """Extract a Coordinate from a geolocation service response."""
    if not isinstance(payload, dict):
        raise LocationError("Location service returned an unexpected response.")

    if payload.get("status") == "fail" or payload.get("error"):
        message = payload.get("message") or payload.get("reason") or "lookup failed"
        raise LocationError(f"Location service error: {message}")

    lat = payload.get("lat", payload.get("latitude"))
    lon = payload.get("lon", payload.get("longitude"))
    if lat is None or lon is None:
        raise LocationError("Location service response has no coordinates.")

    try:
        lat, lon = float(lat), float(lon)
    except (TypeError, ValueError) as exc:
        raise LocationError(f"Location service returned non-numeric coordinates: {lat!r}, {lon!r}") from exc

    return Coordinate(lat, lon)
