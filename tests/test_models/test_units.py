"""
Tests for the value types shared by all aggregates.
"""

from datetime import datetime

import pytest

from metar_simple.models import (
    BrakingAction,
    CardinalDirection,
    Current,
    Distance,
    DistanceFraction,
    DistanceUnit,
    Essentials,
    Precipitation,
    PrecipitationUnit,
    Pressure,
    PressureUnit,
    Runway,
    RunwayData,
    RunwayDesignator,
    SkyCondition,
    Speed,
    SpeedUnit,
    StateOfSurface,
    Temperature,
    TemperatureUnit,
    Time,
    WaveHeight,
    is_reported,
)


class TestTime:
    """Test cases for day-hour-minute times."""

    def test_is_set(self):
        assert Time(hour=12).is_set()
        assert not Time().is_set()

    def test_to_datetime_same_month(self):
        reference = datetime(2023, 5, 6, 18, 30)
        assert Time(6, 17, 0).to_datetime(reference) == datetime(2023, 5, 6, 17, 0)

    def test_to_datetime_previous_month(self):
        reference = datetime(2023, 5, 1, 0, 30)
        assert Time(30, 23, 50).to_datetime(reference) == datetime(2023, 4, 30, 23, 50)

    def test_to_datetime_next_day_is_previous_month(self):
        reference = datetime(2023, 5, 6, 23, 50)
        assert Time(7, 0, 10).to_datetime(reference) == datetime(2023, 4, 7, 0, 10)

    def test_to_datetime_hour_24(self):
        reference = datetime(2023, 5, 6, 12, 0)
        assert Time(6, 24, 0).to_datetime(reference) == datetime(2023, 5, 7, 0, 0)

    def test_to_datetime_without_day(self):
        reference = datetime(2023, 5, 6, 10, 0)
        assert Time(hour=12).to_datetime(reference) == datetime(2023, 5, 6, 12, 0)

    def test_to_datetime_without_hour(self):
        assert Time(6).to_datetime(datetime(2023, 5, 6)) is None

    def test_to_datetime_invalid_day(self):
        # April has no 31st
        assert Time(31, 12, 0).to_datetime(datetime(2023, 5, 1)) is None


class TestConversions:
    """Test cases for unit conversions."""

    def test_temperature(self):
        assert Temperature(-2, TemperatureUnit.TENTH_C).to_unit(TemperatureUnit.C) == pytest.approx(-0.2)
        assert Temperature(100, TemperatureUnit.C).to_unit(TemperatureUnit.F) == pytest.approx(212)
        assert Temperature(None).to_unit(TemperatureUnit.F) is None

    def test_speed(self):
        assert Speed(10, SpeedUnit.MPS).to_unit(SpeedUnit.KT) == pytest.approx(19.43844)
        assert Speed(36, SpeedUnit.KMH).to_unit(SpeedUnit.MPS) == pytest.approx(10)

    def test_distance_miles(self):
        assert Distance(24, DistanceUnit.STATUTE_MILE_1_16S).miles() == (1, DistanceFraction.F_1_2)
        assert Distance(3, DistanceUnit.STATUTE_MILES).miles() == (3, DistanceFraction.F_0)
        assert Distance(None).miles() == (None, DistanceFraction.F_0)

    def test_distance_meters(self):
        assert Distance(1, DistanceUnit.STATUTE_MILES).to_unit(DistanceUnit.METERS) == pytest.approx(1609.344)

    def test_pressure(self):
        assert Pressure(2992, PressureUnit.HUNDREDTHS_IN_HG).to_unit(PressureUnit.HPA) == pytest.approx(1013.2, abs=0.1)
        assert Pressure(10132, PressureUnit.TENTHS_HPA).to_unit(PressureUnit.HPA) == pytest.approx(1013.2)

    def test_precipitation(self):
        assert Precipitation(1, PrecipitationUnit.IN).to_unit(PrecipitationUnit.MM) == pytest.approx(25.4)

    def test_wave_height_state_of_surface(self):
        assert WaveHeight(0).state_of_surface() == StateOfSurface.CALM_GLASSY
        assert WaveHeight(10).state_of_surface() == StateOfSurface.SLIGHT
        assert WaveHeight(200).state_of_surface() == StateOfSurface.PHENOMENAL
        assert WaveHeight(None).state_of_surface() == StateOfSurface.NOT_SPECIFIED


class TestOrdering:
    """Test cases for runway and direction ordering."""

    def test_runway_order(self):
        runways = [
            Runway(24, RunwayDesignator.RIGHT),
            Runway(6),
            Runway(24, RunwayDesignator.LEFT),
            Runway(24),
        ]
        assert sorted(runways) == [
            Runway(6),
            Runway(24),
            Runway(24, RunwayDesignator.LEFT),
            Runway(24, RunwayDesignator.RIGHT),
        ]

    def test_runway_str(self):
        assert str(Runway(6, RunwayDesignator.CENTER)) == "06C"

    def test_cardinal_order(self):
        directions = [CardinalDirection.UNKNOWN, CardinalDirection.W, CardinalDirection.N, CardinalDirection.SE]
        assert sorted(directions) == [
            CardinalDirection.N,
            CardinalDirection.SE,
            CardinalDirection.W,
            CardinalDirection.UNKNOWN,
        ]

    @pytest.mark.parametrize("degrees,expected", [
        (0, CardinalDirection.N),
        (20, CardinalDirection.N),
        (22, CardinalDirection.N),
        (23, CardinalDirection.NE),
        (45, CardinalDirection.NE),
        (67, CardinalDirection.NE),
        (68, CardinalDirection.E),
        (338, CardinalDirection.N),
        (100, CardinalDirection.E),
        (270, CardinalDirection.W),
        (350, CardinalDirection.N),
        (None, CardinalDirection.NOT_SPECIFIED),
    ])
    def test_from_degrees(self, degrees, expected):
        assert CardinalDirection.from_degrees(degrees) == expected


class TestIsReported:
    """Test cases for the three-state reported check."""

    def test_unset_and_not_reported(self):
        assert not is_reported(None)
        assert not is_reported(Speed(None, SpeedUnit.KT))
        assert not is_reported(SkyCondition.UNKNOWN)
        assert not is_reported(False)

    def test_reported(self):
        assert is_reported(Speed(0, SpeedUnit.KT))
        assert is_reported(SkyCondition.CLOUDS)
        assert is_reported(True)

    def test_aggregates(self):
        assert Essentials().is_empty()
        assert Essentials(wind_speed=Speed(None)).is_empty()
        assert not Current(air_temperature=Temperature(5)).is_empty()


class TestBrakingAction:
    """Test cases for braking action derived from the friction coefficient."""

    @pytest.mark.parametrize("coefficient,expected", [
        (25, BrakingAction.POOR),
        (29, BrakingAction.MEDIUM_POOR),
        (35, BrakingAction.MEDIUM),
        (40, BrakingAction.MEDIUM_GOOD),
        (41, BrakingAction.GOOD),
        (None, BrakingAction.UNKNOWN),
    ])
    def test_coefficient(self, coefficient, expected):
        assert RunwayData(Runway(24), coefficient=coefficient).braking_action() == expected

    def test_unreliable(self):
        rd = RunwayData(Runway(24), coefficient=50, surface_friction_unreliable=True)
        assert rd.braking_action() == BrakingAction.UNRELIABLE
