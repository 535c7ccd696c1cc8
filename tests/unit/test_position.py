"""
LUNAR NEXUS Topocentric Position Tests

Run:
    pytest tests/unit/test_position.py -v
"""

import math
from datetime import date, timedelta

import pytest

from services.lunar.angles import normalize_degrees
from services.lunar.julian import date_to_julian_day
from services.lunar.position import (
    PositionResult,
    calculate_lunar_position,
    greenwich_sidereal_time,
    julian_centuries,
    lunar_position_from_julian_day,
    mean_elements,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def observers():
    """Observer grid including both poles and the date line."""
    return [
        (0.0, 0.0),
        (40.7128, -74.0060),
        (-33.87, 151.21),
        (90.0, 0.0),
        (-90.0, 180.0),
        (64.1, -180.0),
    ]


# =============================================================================
# Mean Elements and Sidereal Time
# =============================================================================


class TestMeanElements:
    """Tests for the low-order lunar elements."""

    def test_values_at_j2000(self):
        elements = mean_elements(0.0)
        assert elements.longitude == pytest.approx(218.3164477)
        assert elements.elongation == pytest.approx(297.8501921)
        assert elements.sun_anomaly == pytest.approx(357.5291092)
        assert elements.argument_of_latitude == pytest.approx(93.2720950)

    def test_one_century(self):
        assert mean_elements(1.0).longitude == pytest.approx(218.3164477 + 481267.88123421)

    def test_julian_centuries(self):
        assert julian_centuries(2451545.0) == 0.0
        assert julian_centuries(2451545.0 + 36525.0) == pytest.approx(1.0)

    def test_gmst_at_j2000(self):
        assert greenwich_sidereal_time(2451545.0) == pytest.approx(280.46061837)


# =============================================================================
# Position Calculation
# =============================================================================


class TestCalculateLunarPosition:
    """Tests for calculate_lunar_position."""

    def test_finite_over_synodic_month_at_origin(self):
        """No NaN from asin/atan2 domain errors at lat=0, lng=0."""
        start = date(2024, 1, 1)
        for offset in range(30):
            position = calculate_lunar_position(start + timedelta(days=offset), 0.0, 0.0)
            assert math.isfinite(position.altitude_deg)
            assert math.isfinite(position.azimuth_deg)

    def test_ranges(self, observers):
        start = date(1998, 3, 1)
        for offset in range(0, 400, 7):
            when = start + timedelta(days=offset)
            for lat, lng in observers:
                position = calculate_lunar_position(when, lat, lng)
                assert -90.0 <= position.altitude_deg <= 90.0
                assert 0.0 <= position.azimuth_deg < 360.0
                assert 0.0 <= position.right_ascension_deg < 360.0
                assert -90.0 <= position.declination_deg <= 90.0

    def test_right_ascension_is_normalized_mean_longitude(self):
        when = date(2010, 5, 17)
        t = julian_centuries(date_to_julian_day(when))
        position = calculate_lunar_position(when, 10.0, 20.0)
        assert position.right_ascension_deg == pytest.approx(mean_elements(t).longitude % 360)

    def test_right_ascension_is_exact_mean_longitude(self):
        """No degree-radian round trip between the mean longitude and RA."""
        start = date(2024, 1, 1)
        for offset in range(60):
            when = start + timedelta(days=offset)
            t = julian_centuries(date_to_julian_day(when))
            position = calculate_lunar_position(when, 0.0, 0.0)
            assert position.right_ascension_deg == normalize_degrees(mean_elements(t).longitude)
            assert position.right_ascension_deg < 360.0

    def test_declination_proxy(self):
        """Declination is asin(sin(L)), independent of the observer."""
        when = date(2010, 5, 17)
        a = calculate_lunar_position(when, 10.0, 20.0)
        b = calculate_lunar_position(when, -45.0, -120.0)
        assert a.declination_deg == b.declination_deg
        expected = math.degrees(math.asin(math.sin(math.radians(a.right_ascension_deg))))
        assert a.declination_deg == pytest.approx(expected)

    def test_north_pole_altitude_equals_declination(self):
        """At the pole the hour-angle term vanishes."""
        position = calculate_lunar_position(date(2022, 9, 10), 90.0, 0.0)
        assert position.altitude_deg == pytest.approx(position.declination_deg, abs=1e-9)

    def test_matches_julian_day_entry_point(self):
        when = date(2024, 4, 8)
        assert calculate_lunar_position(when, 32.0, -97.0) == lunar_position_from_julian_day(
            date_to_julian_day(when), 32.0, -97.0
        )

    def test_dates_before_j2000(self):
        position = calculate_lunar_position(date(1900, 1, 1), 51.5, -0.13)
        assert 0.0 <= position.azimuth_deg < 360.0
        assert math.isfinite(position.altitude_deg)

    def test_idempotent(self):
        when = date(2031, 12, 25)
        assert calculate_lunar_position(when, 1.0, 2.0) == calculate_lunar_position(when, 1.0, 2.0)


class TestPositionResult:
    """Tests for PositionResult helper properties."""

    def test_is_visible(self):
        assert PositionResult(10.0, 100.0, 0.0, 0.0).is_visible
        assert not PositionResult(-0.5, 100.0, 0.0, 0.0).is_visible

    @pytest.mark.parametrize(
        "azimuth, direction",
        [(0.0, "N"), (90.0, "E"), (180.0, "S"), (270.0, "W"), (45.0, "NE"), (359.0, "N")],
    )
    def test_compass_direction(self, azimuth, direction):
        assert PositionResult(0.0, azimuth, 0.0, 0.0).compass_direction == direction
