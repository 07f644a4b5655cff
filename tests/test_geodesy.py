"""Tests for coordinates, great-circle math and distance formatting."""

from __future__ import annotations

import dataclasses
import math
import sys

import pytest

from crowflies.formatting import (
    Unit,
    format_bearing,
    format_coordinate,
    format_distance,
    format_summary,
)
from crowflies.geo import bearing_deg, distance_km, haversine_km, initial_bearing
from crowflies.models import Coordinate, DistanceReport, InvalidCoordinate
from crowflies.references import LAMBEAU_FIELD, get_reference

LAMBEAU = LAMBEAU_FIELD.coordinate
SAN_FRANCISCO = Coordinate(37.7749, -122.4194)

SAMPLE_POINTS = [
    Coordinate(0, 0),
    Coordinate(90, 0),
    Coordinate(-90, 180),
    Coordinate(51.5074, -0.1278),
    Coordinate(-33.8688, 151.2093),
    Coordinate(35.6762, 139.6503),
    Coordinate(0, -180),
    SAN_FRANCISCO,
    LAMBEAU,
]


# ── Coordinate tests ─────────────────────────────────────────────────────


class TestCoordinate:
    def test_valid(self):
        c = Coordinate(44.5013, -88.0622)
        assert c.latitude == 44.5013
        assert c.longitude == -88.0622

    def test_value_equality(self):
        assert Coordinate(1.5, 2.5) == Coordinate(1.5, 2.5)

    def test_immutable(self):
        c = Coordinate(0, 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.latitude = 10

    def test_boundaries_accepted(self):
        Coordinate(90, 180)
        Coordinate(-90, -180)

    def test_latitude_out_of_range(self):
        with pytest.raises(InvalidCoordinate) as exc_info:
            Coordinate(95.0, 0)
        assert any("latitude" in e for e in exc_info.value.errors)

    def test_longitude_out_of_range(self):
        with pytest.raises(InvalidCoordinate) as exc_info:
            Coordinate(0, 200.0)
        assert any("longitude" in e for e in exc_info.value.errors)

    def test_not_finite(self):
        with pytest.raises(InvalidCoordinate):
            Coordinate(math.nan, 0)
        with pytest.raises(InvalidCoordinate):
            Coordinate(0, math.inf)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            Coordinate(-91, 0)

    def test_parse(self):
        assert Coordinate.parse(" 37.7749 ", "-122.4194") == SAN_FRANCISCO

    def test_parse_not_a_number(self):
        with pytest.raises(InvalidCoordinate) as exc_info:
            Coordinate.parse("abc", "")
        errors = exc_info.value.errors
        assert len(errors) == 2
        assert "latitude" in errors[0]
        assert "longitude" in errors[1]

    def test_parse_nan_text(self):
        with pytest.raises(InvalidCoordinate):
            Coordinate.parse("nan", "0")

    def test_parse_out_of_range(self):
        with pytest.raises(InvalidCoordinate):
            Coordinate.parse("120", "10")


# ── Great-circle tests ───────────────────────────────────────────────────


class TestHaversine:
    def test_same_point(self):
        assert haversine_km(0, 0, 0, 0) == 0.0

    def test_known_distance(self):
        # New York to London ≈ 5570 km
        dist = haversine_km(40.7128, -74.0060, 51.5074, -0.1278)
        assert 5550 < dist < 5590

    def test_antipodal(self):
        # North pole to south pole ≈ 20015 km (half circumference)
        dist = haversine_km(90, 0, -90, 0)
        assert 20000 < dist < 20100

    def test_equator_one_degree(self):
        dist = haversine_km(0, 0, 0, 1)
        assert 110 < dist < 113

    def test_san_francisco_to_lambeau(self):
        dist = distance_km(SAN_FRANCISCO, LAMBEAU)
        assert 2940 < dist < 2960

    def test_origin_equals_reference(self):
        assert distance_km(LAMBEAU, LAMBEAU) == 0.0

    @pytest.mark.parametrize("a", SAMPLE_POINTS)
    def test_zero_to_self(self, a):
        assert distance_km(a, a) == 0.0

    @pytest.mark.parametrize("a", SAMPLE_POINTS)
    @pytest.mark.parametrize("b", SAMPLE_POINTS[::2])
    def test_symmetric_and_non_negative(self, a, b):
        d_ab = distance_km(a, b)
        d_ba = distance_km(b, a)
        assert d_ab >= 0
        assert d_ab == pytest.approx(d_ba, rel=1e-9, abs=1e-9)


class TestBearing:
    def test_due_north(self):
        assert initial_bearing(0, 0, 10, 0) == pytest.approx(0.0)

    def test_due_east(self):
        assert initial_bearing(0, 0, 0, 10) == pytest.approx(90.0)

    def test_due_south(self):
        assert initial_bearing(10, 0, 0, 0) == pytest.approx(180.0)

    def test_due_west(self):
        assert initial_bearing(0, 10, 0, 0) == pytest.approx(270.0)

    def test_degenerate_is_zero(self):
        assert bearing_deg(LAMBEAU, LAMBEAU) == 0.0

    def test_san_francisco_heads_east_northeast(self):
        assert 60 < bearing_deg(SAN_FRANCISCO, LAMBEAU) < 68

    @pytest.mark.parametrize("a", SAMPLE_POINTS)
    @pytest.mark.parametrize("b", SAMPLE_POINTS)
    def test_range(self, a, b):
        assert 0 <= bearing_deg(a, b) < 360


# ── Formatting tests ─────────────────────────────────────────────────────


class TestUnit:
    @pytest.mark.parametrize("raw, expected", [
        ("metric", Unit.METRIC),
        ("km", Unit.METRIC),
        ("imperial", Unit.IMPERIAL),
        ("MI", Unit.IMPERIAL),
        (Unit.METRIC, Unit.METRIC),
    ])
    def test_parse(self, raw, expected):
        assert Unit.parse(raw) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Unit.parse("furlongs")


class TestFormatDistance:
    def test_metric_meters(self):
        assert format_distance(0.05, Unit.METRIC) == "50 m"

    def test_metric_two_decimals(self):
        assert format_distance(5, Unit.METRIC) == "5.00 km"

    def test_metric_one_decimal(self):
        assert format_distance(15, Unit.METRIC) == "15.0 km"

    def test_metric_ten_km_boundary(self):
        assert format_distance(10.0, Unit.METRIC) == "10.0 km"

    def test_metric_one_km_boundary(self):
        assert format_distance(1.0, Unit.METRIC) == "1.00 km"

    def test_metric_rounds_half_up(self):
        assert format_distance(0.0125, Unit.METRIC) == "13 m"
        assert format_distance(2.125, Unit.METRIC) == "2.13 km"

    def test_imperial_fraction_of_mile(self):
        assert format_distance(1, Unit.IMPERIAL) == "0.62 mi"

    def test_imperial_feet(self):
        assert format_distance(0.1, Unit.IMPERIAL) == "328 ft"

    def test_imperial_miles(self):
        assert format_distance(2, Unit.IMPERIAL) == "1.2 mi"

    def test_zero(self):
        assert format_distance(0, Unit.IMPERIAL) == "0 ft"
        assert format_distance(0, Unit.METRIC) == "0 m"

    def test_huge_distance(self):
        metric = format_distance(1e30, Unit.METRIC)
        assert metric.endswith(".0 km")
        assert metric.startswith("1000000000000000019")
        assert format_distance(1e30, Unit.IMPERIAL).endswith(" mi")

    def test_largest_float(self):
        assert format_distance(sys.float_info.max, Unit.METRIC).endswith(" km")
        assert format_distance(sys.float_info.max / 2, Unit.IMPERIAL).endswith(" mi")

    def test_accepts_short_codes(self):
        assert format_distance(15, "km") == "15.0 km"
        assert format_distance(1, "mi") == "0.62 mi"

    def test_san_francisco_in_miles(self):
        text = format_distance(distance_km(SAN_FRANCISCO, LAMBEAU), Unit.IMPERIAL)
        number, suffix = text.split(" ")
        assert suffix == "mi"
        assert len(number.split(".")[1]) == 1
        assert 1820 < float(number) < 1845


class TestDisplayHelpers:
    def test_coordinate(self):
        assert format_coordinate(LAMBEAU) == "44.5013°, -88.0622°"

    def test_bearing(self):
        assert format_bearing(63.6) == "64°"
        assert format_bearing(0.0) == "0°"

    def test_summary(self):
        assert format_summary(2949.064, 64.34) == "2949.06 km • Bearing 64°"


# ── Reference & report tests ─────────────────────────────────────────────


class TestReference:
    def test_default_is_lambeau(self):
        ref = get_reference()
        assert ref.name == "Lambeau Field"
        assert ref.coordinate == Coordinate(44.5013, -88.0622)

    def test_unknown(self):
        with pytest.raises(KeyError):
            get_reference("nowhere")


class TestDistanceReport:
    def test_json_roundtrip(self):
        report = DistanceReport(
            origin=SAN_FRANCISCO,
            reference=LAMBEAU,
            reference_name="Lambeau Field",
            distance_km=2949.06,
            bearing_deg=64.3,
            unit="imperial",
            display="1832.5 mi",
        )
        restored = DistanceReport.from_json(report.to_json())
        assert restored == report
        assert isinstance(restored.origin, Coordinate)
