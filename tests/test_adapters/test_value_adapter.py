"""
Tests for the conversion of coded values to domain value types.
"""

from fractions import Fraction

import pytest

from metar_simple.adapters import CAVOK_VISIBILITY, ValueAdapter
from metar_simple.groups import (
    CardinalCode,
    CodedDirection,
    CodedDistance,
    CodedDistanceUnit,
    CodedPrecipitation,
    CodedPrecipitationUnit,
    CodedPressure,
    CodedPressureUnit,
    CodedRunway,
    CodedSpeed,
    CodedSpeedUnit,
    CodedTemperature,
    CodedTime,
    CodedWaveHeight,
    DirectionType,
    DistanceModifier,
    WaveHeightType,
)
from metar_simple.models import (
    CardinalDirection,
    Distance,
    DistanceDetails,
    DistanceUnit,
    Height,
    Precipitation,
    PrecipitationUnit,
    Pressure,
    PressureUnit,
    Runway,
    RunwayDesignator,
    Speed,
    SpeedUnit,
    Temperature,
    TemperatureUnit,
    Time,
    WaveHeight,
)


class TestTemperature:
    """Test cases for temperature conversion."""

    def test_whole_degrees(self):
        assert ValueAdapter.temperature(CodedTemperature(7)) == Temperature(7, TemperatureUnit.C)
        assert ValueAdapter.temperature(CodedTemperature(-13, freezing=True)) == Temperature(-13, TemperatureUnit.C)

    def test_freezing_zero(self):
        # M00 keeps the sign as -0.2 degrees
        assert ValueAdapter.temperature(CodedTemperature(0, freezing=True)) == Temperature(-2, TemperatureUnit.TENTH_C)

    def test_precise(self):
        coded = CodedTemperature(Fraction(-3, 10), precise=True)
        assert ValueAdapter.temperature(coded) == Temperature(-3, TemperatureUnit.TENTH_C)

    def test_not_reported(self):
        assert ValueAdapter.temperature(CodedTemperature()) == Temperature(None, TemperatureUnit.C)
        assert ValueAdapter.temperature(None) == Temperature(None, TemperatureUnit.C)


class TestDistance:
    """Test cases for visibility and distance conversion."""

    def test_meters(self):
        assert ValueAdapter.distance(CodedDistance(9999)) == Distance(9999, DistanceUnit.METERS)

    def test_whole_miles(self):
        coded = CodedDistance(10, CodedDistanceUnit.STATUTE_MILES, DistanceModifier.MORE_THAN)
        assert ValueAdapter.distance(coded) == Distance(10, DistanceUnit.STATUTE_MILES, DistanceDetails.MORE_THAN)

    def test_fractional_miles(self):
        coded = CodedDistance(Fraction(3, 2), CodedDistanceUnit.STATUTE_MILES)
        assert ValueAdapter.distance(coded) == Distance(24, DistanceUnit.STATUTE_MILE_1_16S)

    def test_less_than_quarter_mile(self):
        coded = CodedDistance(Fraction(1, 4), CodedDistanceUnit.STATUTE_MILES, DistanceModifier.LESS_THAN)
        assert ValueAdapter.distance(coded) == Distance(4, DistanceUnit.STATUTE_MILE_1_16S, DistanceDetails.LESS_THAN)

    def test_vicinity_has_no_single_distance(self):
        assert ValueAdapter.distance(CodedDistance(modifier=DistanceModifier.VICINITY)) is None

    def test_vicinity_range(self):
        distance_range = ValueAdapter.distance_range(CodedDistance(modifier=DistanceModifier.VICINITY))
        assert distance_range.minimum == Distance(9260, DistanceUnit.METERS)
        assert distance_range.maximum == Distance(18520, DistanceUnit.METERS)
        assert distance_range.prevailing is None

    def test_distant_range(self):
        distance_range = ValueAdapter.distance_range(CodedDistance(modifier=DistanceModifier.DISTANT))
        assert distance_range.minimum == Distance(18520, DistanceUnit.METERS)
        assert distance_range.maximum == Distance(55560, DistanceUnit.METERS)

    def test_cavok_visibility(self):
        assert CAVOK_VISIBILITY == Distance(10000, DistanceUnit.METERS, DistanceDetails.MORE_THAN)


class TestHeight:
    """Test cases for heights."""

    def test_feet(self):
        assert ValueAdapter.height(CodedDistance(800, CodedDistanceUnit.FEET)) == Height(800)

    def test_meters(self):
        assert ValueAdapter.height(CodedDistance(Fraction(3048, 10), CodedDistanceUnit.METERS)) == Height(1000)

    def test_not_reported(self):
        assert ValueAdapter.height(CodedDistance(None, CodedDistanceUnit.FEET)) == Height(None)


class TestPressure:
    """Test cases for pressure conversion."""

    def test_hectopascal(self):
        assert ValueAdapter.pressure(CodedPressure(1016)) == Pressure(1016, PressureUnit.HPA)

    def test_tenths_hectopascal(self):
        assert ValueAdapter.pressure(CodedPressure(Fraction(10132, 10))) == Pressure(10132, PressureUnit.TENTHS_HPA)

    def test_inches(self):
        coded = CodedPressure(Fraction(2992, 100), CodedPressureUnit.INCHES_HG)
        assert ValueAdapter.pressure(coded) == Pressure(2992, PressureUnit.HUNDREDTHS_IN_HG)

    def test_tendency_difference(self):
        assert ValueAdapter.pressure_tenths(CodedPressure(Fraction(132, 10))) == Pressure(132, PressureUnit.TENTHS_HPA)
        assert ValueAdapter.pressure_tenths(CodedPressure(2)) == Pressure(20, PressureUnit.TENTHS_HPA)


class TestPrecipitation:
    """Test cases for precipitation amounts."""

    def test_hundredths_of_inch(self):
        coded = CodedPrecipitation(Fraction(9, 100), CodedPrecipitationUnit.INCHES)
        assert ValueAdapter.precipitation(coded) == Precipitation(9, PrecipitationUnit.HUNDREDTHS_IN)

    def test_whole_inches_collapse(self):
        coded = CodedPrecipitation(2, CodedPrecipitationUnit.INCHES)
        assert ValueAdapter.precipitation(coded) == Precipitation(2, PrecipitationUnit.IN)

    def test_tenths_of_mm(self):
        coded = CodedPrecipitation(Fraction(27, 10))
        assert ValueAdapter.precipitation(coded) == Precipitation(27, PrecipitationUnit.TENTHS_MM)

    def test_not_reported(self):
        assert ValueAdapter.precipitation(CodedPrecipitation()) == Precipitation(None, PrecipitationUnit.MM)


class TestOtherValues:
    """Test cases for time, speed, runway, wave height and direction."""

    def test_time(self):
        assert ValueAdapter.time(CodedTime(6, 17, 0)) == Time(6, 17, 0)
        assert ValueAdapter.time(None) is None

    def test_speed(self):
        assert ValueAdapter.speed(CodedSpeed(5, CodedSpeedUnit.METERS_PER_SECOND)) == Speed(5, SpeedUnit.MPS)
        assert ValueAdapter.speed(CodedSpeed(None)) == Speed(None, SpeedUnit.KT)

    def test_runway(self):
        assert ValueAdapter.runway(CodedRunway(24, "L")) == Runway(24, RunwayDesignator.LEFT)
        assert ValueAdapter.runway(CodedRunway(6)) == Runway(6, RunwayDesignator.NONE)

    def test_wave_height(self):
        assert ValueAdapter.wave_height(CodedWaveHeight(WaveHeightType.WAVE_HEIGHT, 12)) == WaveHeight(12)
        assert ValueAdapter.wave_height(CodedWaveHeight(WaveHeightType.STATE_OF_SURFACE, 3)) == WaveHeight(12)

    @pytest.mark.parametrize("coded,expected", [
        (CodedDirection(DirectionType.VALUE_CARDINAL, cardinal=CardinalCode.E), CardinalDirection.E),
        (CodedDirection(DirectionType.VALUE_CARDINAL, cardinal=CardinalCode.TRUE_W), CardinalDirection.W),
        (CodedDirection(DirectionType.VALUE_DEGREES, degrees=180), CardinalDirection.S),
        (CodedDirection(DirectionType.OVERHEAD), CardinalDirection.OVERHEAD),
        (CodedDirection(DirectionType.ALQDS), CardinalDirection.ALL_QUADRANTS),
        (CodedDirection(DirectionType.UNKNOWN), CardinalDirection.UNKNOWN),
        (None, CardinalDirection.NOT_SPECIFIED),
    ])
    def test_cardinal_direction(self, coded, expected):
        assert ValueAdapter.cardinal_direction(coded) == expected

    def test_degrees(self):
        assert ValueAdapter.degrees(CodedDirection(DirectionType.VALUE_DEGREES, degrees=240)) == 240
        assert ValueAdapter.degrees(CodedDirection(DirectionType.VARIABLE)) is None
