"""Tests for viewport-relative units."""

import pytest

from mediastyle.model import MetricsSnapshot
from mediastyle.units import ResponsiveUnits, parse_percent, round_to_nearest_pixel


class TestRoundToNearestPixel:
    def test_density_one(self):
        assert round_to_nearest_pixel(10.4) == 10
        assert round_to_nearest_pixel(10.6) == 11

    def test_half_rounds_up(self):
        assert round_to_nearest_pixel(10.5) == 11
        assert round_to_nearest_pixel(11.5) == 12

    def test_density_two(self):
        assert round_to_nearest_pixel(10.3, 2) == 10.5
        assert round_to_nearest_pixel(10.2, 2) == 10.0

    def test_density_three(self):
        assert round_to_nearest_pixel(1 / 3, 3) == pytest.approx(1 / 3)


class TestParsePercent:
    def test_number(self):
        assert parse_percent(50) == 50.0
        assert parse_percent(12.5) == 12.5

    def test_string_forms(self):
        assert parse_percent("50") == 50.0
        assert parse_percent("50%") == 50.0
        assert parse_percent("12.5vw") == 12.5
        assert parse_percent(" .5") == 0.5

    def test_not_a_number(self):
        with pytest.raises(ValueError):
            parse_percent("half")

    def test_bool_rejected(self):
        with pytest.raises(ValueError):
            parse_percent(True)


class TestResponsiveUnits:
    def test_vw_vh(self):
        units = ResponsiveUnits(width=1000, height=800)
        assert units.vw(50) == 500
        assert units.vh("25%") == 200

    def test_rounds_to_pixel_grid(self):
        units = ResponsiveUnits(width=375, height=667, pixel_density=2)
        assert units.vw(33) == 124.0  # 123.75 -> 247.5 -> 248 / 2
        assert units.vh(10) == 66.5  # 66.7 -> 133.4 -> 133 / 2

    def test_from_snapshot(self):
        snap = MetricsSnapshot(width=390, height=844, pixel_density=3)
        assert ResponsiveUnits.from_snapshot(snap) == ResponsiveUnits(
            width=390, height=844, pixel_density=3
        )

    def test_full_width(self):
        units = ResponsiveUnits(width=390, height=844, pixel_density=3)
        assert units.vw(100) == 390
