"""
Value types shared by all report aggregates.

Every value type is a frozen dataclass whose magnitude may be ``None``.
A field holding ``None`` is unset; a field holding a value object with a
``None`` magnitude was explicitly reported as missing (for example
``/////KT`` gives ``Speed(None, SpeedUnit.KT)``).
"""

from dataclasses import dataclass, fields, is_dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Optional, Tuple

from dateutil.relativedelta import relativedelta

KT_PER_MPS = 1.943844
KMH_PER_MPS = 3.6
MPH_PER_MPS = 2.236936
METERS_PER_MILE = 1609.344
METERS_PER_FOOT = 0.3048
METERS_PER_YARD = 0.9144
METERS_PER_NAUTICAL_MILE = 1852
HPA_PER_IN_HG = 33.8639
HPA_PER_MM_HG = 1.3332239
MM_PER_INCH = 25.4


def _convert(value, unit, target, factors) -> Optional[float]:
    """Convert through a common base unit; ``factors`` maps unit to base units per unit."""
    if value is None:
        return None
    return value * factors[unit] / factors[target]


@dataclass(frozen=True)
class Time:
    """Day-hour-minute time; each part may be missing (e.g. ``FM1200`` has no day)."""

    day: Optional[int] = None
    hour: Optional[int] = None
    minute: Optional[int] = None

    def is_set(self) -> bool:
        return self.day is not None or self.hour is not None or self.minute is not None

    def to_datetime(self, reference: datetime) -> Optional[datetime]:
        """
        Resolve this time against a reference datetime.

        Reports only carry day of month, so the month and year come from the
        reference. A day later than the reference day belongs to the previous
        month; hour 24 means midnight at the end of the day.

        Args:
            reference: Datetime the report is known to be close to (typically
                the time it was received)

        Returns:
            Resolved datetime, or None when the hour is missing
        """
        if self.hour is None:
            return None
        day = self.day if self.day is not None else reference.day
        base = reference.replace(hour=0, minute=0, second=0, microsecond=0)
        if day > reference.day:
            base = base - relativedelta(months=1)
        try:
            result = base.replace(day=day)
        except ValueError:
            # Day does not exist in that month (e.g. 31 in a 30-day month)
            return None
        return result + timedelta(hours=self.hour, minutes=self.minute or 0)


class TemperatureUnit(Enum):
    C = "C"
    TENTH_C = "TENTH_C"
    F = "F"


@dataclass(frozen=True)
class Temperature:
    """Temperature in degrees Celsius, tenths of degree Celsius or Fahrenheit."""

    value: Optional[int] = None
    unit: TemperatureUnit = TemperatureUnit.C

    def to_unit(self, unit: TemperatureUnit) -> Optional[float]:
        if self.value is None:
            return None
        celsius = float(self.value)
        if self.unit == TemperatureUnit.TENTH_C:
            celsius = self.value / 10
        elif self.unit == TemperatureUnit.F:
            celsius = (self.value - 32) * 5 / 9
        if unit == TemperatureUnit.TENTH_C:
            return celsius * 10
        if unit == TemperatureUnit.F:
            return celsius * 9 / 5 + 32
        return celsius


class SpeedUnit(Enum):
    KT = "KT"
    MPS = "MPS"
    KMH = "KMH"
    MPH = "MPH"


_SPEED_FACTORS = {
    SpeedUnit.MPS: 1.0,
    SpeedUnit.KT: 1 / KT_PER_MPS,
    SpeedUnit.KMH: 1 / KMH_PER_MPS,
    SpeedUnit.MPH: 1 / MPH_PER_MPS,
}


@dataclass(frozen=True)
class Speed:
    """Speed in knots, meters per second, kilometers per hour or miles per hour."""

    value: Optional[int] = None
    unit: SpeedUnit = SpeedUnit.KT

    def to_unit(self, unit: SpeedUnit) -> Optional[float]:
        return _convert(self.value, self.unit, unit, _SPEED_FACTORS)


class DistanceUnit(Enum):
    METERS = "METERS"
    STATUTE_MILES = "STATUTE_MILES"
    STATUTE_MILE_1_16S = "STATUTE_MILE_1_16S"
    FEET = "FEET"


class DistanceDetails(Enum):
    EXACTLY = "EXACTLY"
    LESS_THAN = "LESS_THAN"
    MORE_THAN = "MORE_THAN"


class DistanceFraction(Enum):
    """Fractional part of a statute mile distance, in sixteenths."""

    F_0 = 0
    F_1_16 = 1
    F_1_8 = 2
    F_3_16 = 3
    F_1_4 = 4
    F_5_16 = 5
    F_3_8 = 6
    F_7_16 = 7
    F_1_2 = 8
    F_9_16 = 9
    F_5_8 = 10
    F_11_16 = 11
    F_3_4 = 12
    F_13_16 = 13
    F_7_8 = 14
    F_15_16 = 15


_DISTANCE_FACTORS = {
    DistanceUnit.METERS: 1.0,
    DistanceUnit.STATUTE_MILES: METERS_PER_MILE,
    DistanceUnit.STATUTE_MILE_1_16S: METERS_PER_MILE / 16,
    DistanceUnit.FEET: METERS_PER_FOOT,
}


@dataclass(frozen=True)
class Distance:
    """
    Visibility or distance value with its unit and qualifier.

    Fractional statute miles are kept exactly as a whole number of
    sixteenths (``STATUTE_MILE_1_16S``), so ``1 1/2SM`` is ``Distance(24,
    STATUTE_MILE_1_16S)``.
    """

    value: Optional[int] = None
    unit: DistanceUnit = DistanceUnit.METERS
    details: DistanceDetails = DistanceDetails.EXACTLY

    def to_unit(self, unit: DistanceUnit) -> Optional[float]:
        return _convert(self.value, self.unit, unit, _DISTANCE_FACTORS)

    def miles(self) -> Tuple[Optional[int], DistanceFraction]:
        """Split the distance into whole statute miles and a sixteenths fraction."""
        sixteenths = self.to_unit(DistanceUnit.STATUTE_MILE_1_16S)
        if sixteenths is None:
            return None, DistanceFraction.F_0
        # Guard against float noise for values stored in miles already
        whole = int(round(sixteenths, 6))
        return whole // 16, DistanceFraction(whole % 16)


@dataclass(frozen=True)
class DistanceRange:
    """Prevailing distance or a minimum/maximum pair."""

    prevailing: Optional[Distance] = None
    minimum: Optional[Distance] = None
    maximum: Optional[Distance] = None


class HeightUnit(Enum):
    METERS = "METERS"
    FEET = "FEET"


_HEIGHT_FACTORS = {
    HeightUnit.METERS: 1.0,
    HeightUnit.FEET: METERS_PER_FOOT,
}


@dataclass(frozen=True)
class Height:
    """Height above ground level (cloud base, vertical visibility, etc)."""

    value: Optional[int] = None
    unit: HeightUnit = HeightUnit.FEET

    def to_unit(self, unit: HeightUnit) -> Optional[float]:
        return _convert(self.value, self.unit, unit, _HEIGHT_FACTORS)


@dataclass(frozen=True)
class Ceiling:
    """Ceiling height, either exact or a minimum/maximum pair."""

    exact: Optional[Height] = None
    minimum: Optional[Height] = None
    maximum: Optional[Height] = None


class PressureUnit(Enum):
    HPA = "HPA"
    TENTHS_HPA = "TENTHS_HPA"
    IN_HG = "IN_HG"
    HUNDREDTHS_IN_HG = "HUNDREDTHS_IN_HG"
    MM_HG = "MM_HG"


_PRESSURE_FACTORS = {
    PressureUnit.HPA: 1.0,
    PressureUnit.TENTHS_HPA: 0.1,
    PressureUnit.IN_HG: HPA_PER_IN_HG,
    PressureUnit.HUNDREDTHS_IN_HG: HPA_PER_IN_HG / 100,
    PressureUnit.MM_HG: HPA_PER_MM_HG,
}


@dataclass(frozen=True)
class Pressure:
    """Atmospheric pressure or pressure change."""

    value: Optional[int] = None
    unit: PressureUnit = PressureUnit.HPA

    def to_unit(self, unit: PressureUnit) -> Optional[float]:
        return _convert(self.value, self.unit, unit, _PRESSURE_FACTORS)


class PrecipitationUnit(Enum):
    MM = "MM"
    TENTHS_MM = "TENTHS_MM"
    IN = "IN"
    HUNDREDTHS_IN = "HUNDREDTHS_IN"


_PRECIPITATION_FACTORS = {
    PrecipitationUnit.MM: 1.0,
    PrecipitationUnit.TENTHS_MM: 0.1,
    PrecipitationUnit.IN: MM_PER_INCH,
    PrecipitationUnit.HUNDREDTHS_IN: MM_PER_INCH / 100,
}


@dataclass(frozen=True)
class Precipitation:
    """Precipitation amount, deposit depth, snow depth or ice accretion."""

    amount: Optional[int] = None
    unit: PrecipitationUnit = PrecipitationUnit.MM

    def to_unit(self, unit: PrecipitationUnit) -> Optional[float]:
        return _convert(self.amount, self.unit, unit, _PRECIPITATION_FACTORS)


class WaveHeightUnit(Enum):
    METERS = "METERS"
    DECIMETERS = "DECIMETERS"
    FEET = "FEET"
    YARDS = "YARDS"


class StateOfSurface(Enum):
    """Descriptive state of sea surface (WMO code table 3700)."""

    NOT_SPECIFIED = "NOT_SPECIFIED"
    CALM_GLASSY = "CALM_GLASSY"
    CALM_RIPPLED = "CALM_RIPPLED"
    SMOOTH = "SMOOTH"
    SLIGHT = "SLIGHT"
    MODERATE = "MODERATE"
    ROUGH = "ROUGH"
    VERY_ROUGH = "VERY_ROUGH"
    HIGH = "HIGH"
    VERY_HIGH = "VERY_HIGH"
    PHENOMENAL = "PHENOMENAL"


# Upper bound of each state of surface, in decimeters
_STATE_OF_SURFACE_LIMITS = [
    (0, StateOfSurface.CALM_GLASSY),
    (1, StateOfSurface.CALM_RIPPLED),
    (5, StateOfSurface.SMOOTH),
    (12, StateOfSurface.SLIGHT),
    (25, StateOfSurface.MODERATE),
    (40, StateOfSurface.ROUGH),
    (60, StateOfSurface.VERY_ROUGH),
    (90, StateOfSurface.HIGH),
    (140, StateOfSurface.VERY_HIGH),
]

_WAVE_HEIGHT_FACTORS = {
    WaveHeightUnit.METERS: 1.0,
    WaveHeightUnit.DECIMETERS: 0.1,
    WaveHeightUnit.FEET: METERS_PER_FOOT,
    WaveHeightUnit.YARDS: METERS_PER_YARD,
}


@dataclass(frozen=True)
class WaveHeight:
    """Wave height, normally in decimeters."""

    value: Optional[int] = None
    unit: WaveHeightUnit = WaveHeightUnit.DECIMETERS

    def to_unit(self, unit: WaveHeightUnit) -> Optional[float]:
        return _convert(self.value, self.unit, unit, _WAVE_HEIGHT_FACTORS)

    def state_of_surface(self) -> StateOfSurface:
        decimeters = self.to_unit(WaveHeightUnit.DECIMETERS)
        if decimeters is None or decimeters < 0:
            return StateOfSurface.NOT_SPECIFIED
        height = round(decimeters)
        for limit, state in _STATE_OF_SURFACE_LIMITS:
            if height <= limit:
                return state
        return StateOfSurface.PHENOMENAL


class RunwayDesignator(Enum):
    NONE = "NONE"
    LEFT = "LEFT"
    CENTER = "CENTER"
    RIGHT = "RIGHT"

    @property
    def order(self) -> int:
        return _DESIGNATOR_ORDER[self]


_DESIGNATOR_ORDER = {
    RunwayDesignator.NONE: 0,
    RunwayDesignator.LEFT: 1,
    RunwayDesignator.CENTER: 2,
    RunwayDesignator.RIGHT: 3,
}


@dataclass(frozen=True)
class Runway:
    """
    Runway identified by heading number and designator.

    Runways sort by number, then designator (NONE < LEFT < CENTER < RIGHT),
    so they can be used as deterministic set and dict keys.
    """

    number: int = 0
    designator: RunwayDesignator = RunwayDesignator.NONE

    @property
    def sort_key(self) -> Tuple[int, int]:
        return (self.number, self.designator.order)

    def __lt__(self, other: 'Runway') -> bool:
        if not isinstance(other, Runway):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: 'Runway') -> bool:
        if not isinstance(other, Runway):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: 'Runway') -> bool:
        if not isinstance(other, Runway):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: 'Runway') -> bool:
        if not isinstance(other, Runway):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def __str__(self) -> str:
        suffix = {
            RunwayDesignator.LEFT: "L",
            RunwayDesignator.CENTER: "C",
            RunwayDesignator.RIGHT: "R",
        }.get(self.designator, "")
        return f"{self.number:02d}{suffix}"


class CardinalDirection(Enum):
    """
    Cardinal direction used for directional visibility, ceiling and vicinity.

    Compass points sort by bearing (N first, clockwise); non-compass members
    sort after them.
    """

    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"
    NOT_SPECIFIED = "NOT_SPECIFIED"
    OVERHEAD = "OVERHEAD"
    ALL_QUADRANTS = "ALL_QUADRANTS"
    UNKNOWN = "UNKNOWN"

    @property
    def bearing(self) -> Optional[int]:
        """Compass bearing in degrees, or None for non-compass members."""
        return _BEARINGS.get(self)

    @property
    def order(self) -> int:
        return _DIRECTION_ORDER[self]

    @classmethod
    def from_degrees(cls, degrees: Optional[int]) -> 'CardinalDirection':
        """
        Nearest octant for a bearing in degrees.

        Example:
            >>> CardinalDirection.from_degrees(100)
            <CardinalDirection.E: 'E'>
        """
        if degrees is None:
            return cls.NOT_SPECIFIED
        octant = 45
        half = octant // 2
        d = degrees % 360
        for index, direction in enumerate(_COMPASS):
            if d <= half + octant * index:
                return direction
        return cls.N

    def __lt__(self, other: 'CardinalDirection') -> bool:
        if not isinstance(other, CardinalDirection):
            return NotImplemented
        return self.order < other.order

    def __le__(self, other: 'CardinalDirection') -> bool:
        if not isinstance(other, CardinalDirection):
            return NotImplemented
        return self.order <= other.order

    def __gt__(self, other: 'CardinalDirection') -> bool:
        if not isinstance(other, CardinalDirection):
            return NotImplemented
        return self.order > other.order

    def __ge__(self, other: 'CardinalDirection') -> bool:
        if not isinstance(other, CardinalDirection):
            return NotImplemented
        return self.order >= other.order


_COMPASS = [
    CardinalDirection.N,
    CardinalDirection.NE,
    CardinalDirection.E,
    CardinalDirection.SE,
    CardinalDirection.S,
    CardinalDirection.SW,
    CardinalDirection.W,
    CardinalDirection.NW,
]

_BEARINGS = {direction: index * 45 for index, direction in enumerate(_COMPASS)}

_DIRECTION_ORDER = {direction: index for index, direction in enumerate(CardinalDirection)}


def is_reported(value: Any) -> bool:
    """
    True when a field carries an actually reported value.

    Unset fields (``None``), cleared flags, ``UNKNOWN`` enumeration members
    and value objects whose magnitude is ``None`` (reported as missing) all
    count as not reported. Collections and other dataclasses are reported
    when any of their items or fields is.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, Enum):
        return value.name != "UNKNOWN"
    if isinstance(value, (Temperature, Speed, Distance, Height, Pressure, WaveHeight)):
        return value.value is not None
    if isinstance(value, Precipitation):
        return value.amount is not None
    if isinstance(value, str):
        return len(value) > 0
    if isinstance(value, (list, tuple, set, frozenset)):
        return any(is_reported(item) for item in value)
    if isinstance(value, dict):
        return any(is_reported(item) for item in value.values())
    if is_dataclass(value):
        return any(is_reported(getattr(value, f.name)) for f in fields(value))
    return True
