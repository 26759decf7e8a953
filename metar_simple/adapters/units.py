"""Conversion of coded values (time, distance, pressure, ...) to domain value types."""

import math
from typing import Optional

from metar_simple.groups.values import (
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
    Number,
    WaveHeightType,
)
from metar_simple.models.units import (
    METERS_PER_FOOT,
    METERS_PER_NAUTICAL_MILE,
    CardinalDirection,
    Distance,
    DistanceDetails,
    DistanceRange,
    DistanceUnit,
    Height,
    HeightUnit,
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
    WaveHeightUnit,
)

# Visibility coded as CAVOK
CAVOK_VISIBILITY = Distance(10000, DistanceUnit.METERS, DistanceDetails.MORE_THAN)

_SPEED_UNITS = {
    CodedSpeedUnit.KNOTS: SpeedUnit.KT,
    CodedSpeedUnit.METERS_PER_SECOND: SpeedUnit.MPS,
    CodedSpeedUnit.KILOMETERS_PER_HOUR: SpeedUnit.KMH,
    CodedSpeedUnit.MILES_PER_HOUR: SpeedUnit.MPH,
}

_DISTANCE_DETAILS = {
    DistanceModifier.NONE: DistanceDetails.EXACTLY,
    DistanceModifier.LESS_THAN: DistanceDetails.LESS_THAN,
    DistanceModifier.MORE_THAN: DistanceDetails.MORE_THAN,
}

# Distance ranges implied by VC and DSNT, in nautical miles
_MODIFIER_RANGES_NM = {
    DistanceModifier.VICINITY: (5, 10),
    DistanceModifier.DISTANT: (10, 30),
}

_DESIGNATORS = {
    "": RunwayDesignator.NONE,
    "L": RunwayDesignator.LEFT,
    "C": RunwayDesignator.CENTER,
    "R": RunwayDesignator.RIGHT,
}

_CARDINALS = {
    CardinalCode.N: CardinalDirection.N,
    CardinalCode.TRUE_N: CardinalDirection.N,
    CardinalCode.NE: CardinalDirection.NE,
    CardinalCode.E: CardinalDirection.E,
    CardinalCode.TRUE_E: CardinalDirection.E,
    CardinalCode.SE: CardinalDirection.SE,
    CardinalCode.S: CardinalDirection.S,
    CardinalCode.TRUE_S: CardinalDirection.S,
    CardinalCode.SW: CardinalDirection.SW,
    CardinalCode.W: CardinalDirection.W,
    CardinalCode.TRUE_W: CardinalDirection.W,
    CardinalCode.NW: CardinalDirection.NW,
}


def _is_whole(value: Number) -> bool:
    return value == math.floor(value)


class ValueAdapter:
    """
    Map coded values to domain value types.

    All conversions are total: a coded value that is missing its magnitude
    becomes a domain value with a ``None`` magnitude (not reported), never a
    made-up default. Arithmetic is exact since coded numbers are ``int`` or
    ``Fraction``.
    """

    @classmethod
    def time(cls, coded: Optional[CodedTime]) -> Optional[Time]:
        if coded is None:
            return None
        return Time(coded.day, coded.hour, coded.minute)

    @classmethod
    def runway(cls, coded: CodedRunway) -> Runway:
        designator = _DESIGNATORS.get(coded.designator.upper(), RunwayDesignator.NONE)
        return Runway(coded.number, designator)

    @classmethod
    def temperature(cls, coded: Optional[CodedTemperature]) -> Temperature:
        """
        Convert a temperature.

        Precise remark values (``T01720106``) are kept in tenths of a degree.
        ``M00`` means a value between -0.5 and 0 degrees and is encoded as
        -0.2 degrees so that the sign is not lost.
        """
        if coded is None or coded.value is None:
            return Temperature(None, TemperatureUnit.C)
        if coded.precise:
            return Temperature(math.floor(coded.value * 10), TemperatureUnit.TENTH_C)
        if coded.value == 0 and coded.freezing:
            return Temperature(-2, TemperatureUnit.TENTH_C)
        return Temperature(int(coded.value), TemperatureUnit.C)

    @classmethod
    def speed(cls, coded: Optional[CodedSpeed]) -> Speed:
        if coded is None:
            return Speed(None, SpeedUnit.KT)
        return Speed(coded.value, _SPEED_UNITS[coded.unit])

    @classmethod
    def distance(cls, coded: Optional[CodedDistance]) -> Optional[Distance]:
        """
        Convert a visibility or distance.

        Fractional statute miles are expressed in sixteenths of a mile.

        Returns:
            The distance, or None when the coded value is a range (VC, DSNT)
            that has no single distance equivalent
        """
        if coded is None:
            return Distance(None, DistanceUnit.METERS)
        details = _DISTANCE_DETAILS.get(coded.modifier)
        if details is None:
            return None
        if coded.value is None:
            return Distance(None, DistanceUnit.METERS, details)
        if coded.unit == CodedDistanceUnit.STATUTE_MILES:
            if _is_whole(coded.value):
                return Distance(int(coded.value), DistanceUnit.STATUTE_MILES, details)
            return Distance(math.floor(coded.value * 16), DistanceUnit.STATUTE_MILE_1_16S, details)
        if coded.unit == CodedDistanceUnit.FEET:
            return Distance(math.floor(coded.value), DistanceUnit.FEET, details)
        return Distance(math.floor(coded.value), DistanceUnit.METERS, details)

    @classmethod
    def distance_range(cls, coded: Optional[CodedDistance]) -> DistanceRange:
        """
        Convert a distance that may be coded as a range.

        ``VC`` means 5 to 10 nautical miles and ``DSNT`` 10 to 30 nautical
        miles; any other distance becomes the prevailing value.

        Example:
            >>> ValueAdapter.distance_range(CodedDistance(modifier=DistanceModifier.VICINITY)).minimum.value
            9260
        """
        if coded is not None and coded.modifier in _MODIFIER_RANGES_NM:
            low, high = _MODIFIER_RANGES_NM[coded.modifier]
            return DistanceRange(
                minimum=Distance(low * METERS_PER_NAUTICAL_MILE, DistanceUnit.METERS),
                maximum=Distance(high * METERS_PER_NAUTICAL_MILE, DistanceUnit.METERS),
            )
        return DistanceRange(prevailing=cls.distance(coded))

    @classmethod
    def height(cls, coded: Optional[CodedDistance]) -> Height:
        """Convert a cloud base or layer height to whole feet."""
        if coded is None or coded.value is None:
            return Height(None, HeightUnit.FEET)
        if coded.unit == CodedDistanceUnit.METERS:
            # Round before flooring so exact feet survive the float division
            return Height(math.floor(round(coded.value / METERS_PER_FOOT, 6)), HeightUnit.FEET)
        if coded.unit == CodedDistanceUnit.STATUTE_MILES:
            return Height(math.floor(coded.value * 5280), HeightUnit.FEET)
        return Height(math.floor(coded.value), HeightUnit.FEET)

    @classmethod
    def pressure(cls, coded: Optional[CodedPressure]) -> Pressure:
        """
        Convert an atmospheric pressure.

        Whole hectopascals stay in hPa, fractional ones become tenths of hPa;
        inches of mercury are kept in hundredths.
        """
        if coded is None or coded.value is None:
            return Pressure(None, PressureUnit.HPA)
        if coded.unit == CodedPressureUnit.INCHES_HG:
            return Pressure(math.floor(coded.value * 100), PressureUnit.HUNDREDTHS_IN_HG)
        if coded.unit == CodedPressureUnit.MM_HG:
            return Pressure(math.floor(coded.value), PressureUnit.MM_HG)
        if _is_whole(coded.value):
            return Pressure(int(coded.value), PressureUnit.HPA)
        return Pressure(math.floor(coded.value * 10), PressureUnit.TENTHS_HPA)

    @classmethod
    def pressure_tenths(cls, coded: Optional[CodedPressure]) -> Pressure:
        """Convert a pressure change, always expressed in tenths of hPa when coded in hPa."""
        if coded is None or coded.value is None:
            return Pressure(None, PressureUnit.TENTHS_HPA)
        if coded.unit != CodedPressureUnit.HECTOPASCAL:
            return cls.pressure(coded)
        return Pressure(math.floor(coded.value * 10), PressureUnit.TENTHS_HPA)

    @classmethod
    def precipitation(cls, coded: Optional[CodedPrecipitation]) -> Precipitation:
        """
        Convert a precipitation amount or deposit depth.

        Inches are kept in hundredths, collapsing to whole inches when the
        amount divides evenly; millimeters with a fractional part are kept in
        tenths.
        """
        if coded is None or coded.amount is None:
            return Precipitation(None, PrecipitationUnit.MM)
        if coded.unit == CodedPrecipitationUnit.INCHES:
            hundredths = math.floor(coded.amount * 100)
            if hundredths % 100 == 0:
                return Precipitation(hundredths // 100, PrecipitationUnit.IN)
            return Precipitation(hundredths, PrecipitationUnit.HUNDREDTHS_IN)
        if _is_whole(coded.amount):
            return Precipitation(int(coded.amount), PrecipitationUnit.MM)
        return Precipitation(math.floor(coded.amount * 10), PrecipitationUnit.TENTHS_MM)

    @classmethod
    def wave_height(cls, coded: Optional[CodedWaveHeight]) -> WaveHeight:
        """Convert a sea state digit or a wave height to decimeters."""
        if coded is None or coded.value is None:
            return WaveHeight(None, WaveHeightUnit.DECIMETERS)
        if coded.type == WaveHeightType.STATE_OF_SURFACE:
            return WaveHeight(_STATE_OF_SURFACE_DECIMETERS.get(coded.value), WaveHeightUnit.DECIMETERS)
        return WaveHeight(coded.value, WaveHeightUnit.DECIMETERS)

    @classmethod
    def cardinal_direction(cls, coded: Optional[CodedDirection]) -> CardinalDirection:
        """
        Convert a direction to a cardinal direction.

        Directions in degrees are rounded to the nearest octant.
        """
        if coded is None:
            return CardinalDirection.NOT_SPECIFIED
        if coded.type == DirectionType.VALUE_CARDINAL and coded.cardinal is not None:
            return _CARDINALS[coded.cardinal]
        if coded.type == DirectionType.VALUE_DEGREES:
            return CardinalDirection.from_degrees(coded.degrees)
        if coded.type == DirectionType.OVERHEAD:
            return CardinalDirection.OVERHEAD
        if coded.type == DirectionType.ALQDS:
            return CardinalDirection.ALL_QUADRANTS
        if coded.type == DirectionType.UNKNOWN:
            return CardinalDirection.UNKNOWN
        return CardinalDirection.NOT_SPECIFIED

    @classmethod
    def degrees(cls, coded: Optional[CodedDirection]) -> Optional[int]:
        """Direction in degrees, or None when not coded in degrees."""
        if coded is None or coded.type != DirectionType.VALUE_DEGREES:
            return None
        return coded.degrees


# Upper bound in decimeters of each state of surface digit (WMO code table 3700)
_STATE_OF_SURFACE_DECIMETERS = {
    0: 0,
    1: 1,
    2: 5,
    3: 12,
    4: 25,
    5: 40,
    6: 60,
    7: 90,
    8: 140,
    9: 141,
}
