"""
Coded values carried by classified report groups.

These types describe values exactly as a report codes them: units as
written, digits from WMO code tables, fractions of statute miles as
``Fraction``. Mapping them to the domain model is the job of
``metar_simple.adapters``.
"""

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Optional, Tuple, Union

# Numeric payloads are exact: whole numbers as int, anything else as Fraction
Number = Union[int, Fraction]


@dataclass(frozen=True)
class CodedTime:
    """Day-hour-minute as coded (e.g. ``061700Z``, ``FM1200``, ``0612/0618``)."""

    day: Optional[int] = None
    hour: Optional[int] = None
    minute: Optional[int] = None


@dataclass(frozen=True)
class CodedTemperature:
    """
    Temperature in degrees Celsius.

    ``freezing`` marks the ``M`` prefix (so ``M00`` is freezing with value 0);
    ``precise`` marks tenth-degree values from ``Tsnnnsnnn`` remarks.
    """

    value: Optional[Number] = None
    freezing: bool = False
    precise: bool = False


class CodedSpeedUnit(Enum):
    KNOTS = "KT"
    METERS_PER_SECOND = "MPS"
    KILOMETERS_PER_HOUR = "KMH"
    MILES_PER_HOUR = "MPH"


@dataclass(frozen=True)
class CodedSpeed:
    value: Optional[int] = None
    unit: CodedSpeedUnit = CodedSpeedUnit.KNOTS


class CodedDistanceUnit(Enum):
    METERS = "M"
    STATUTE_MILES = "SM"
    FEET = "FT"


class DistanceModifier(Enum):
    NONE = ""
    LESS_THAN = "M"
    MORE_THAN = "P"
    DISTANT = "DSNT"
    VICINITY = "VC"


@dataclass(frozen=True)
class CodedDistance:
    """Visibility, RVR, height or distance; statute miles may be fractional."""

    value: Optional[Number] = None
    unit: CodedDistanceUnit = CodedDistanceUnit.METERS
    modifier: DistanceModifier = DistanceModifier.NONE


class DirectionType(Enum):
    OMITTED = "OMITTED"
    NOT_REPORTED = "NOT_REPORTED"
    VARIABLE = "VARIABLE"
    NDV = "NDV"
    VALUE_DEGREES = "VALUE_DEGREES"
    VALUE_CARDINAL = "VALUE_CARDINAL"
    OVERHEAD = "OVERHEAD"
    ALQDS = "ALQDS"
    UNKNOWN = "UNKNOWN"


class CardinalCode(Enum):
    N = "N"
    NE = "NE"
    E = "E"
    SE = "SE"
    S = "S"
    SW = "SW"
    W = "W"
    NW = "NW"
    TRUE_N = "TRUE_N"
    TRUE_E = "TRUE_E"
    TRUE_S = "TRUE_S"
    TRUE_W = "TRUE_W"


@dataclass(frozen=True)
class CodedDirection:
    type: DirectionType = DirectionType.OMITTED
    degrees: Optional[int] = None
    cardinal: Optional[CardinalCode] = None


@dataclass(frozen=True)
class CodedRunway:
    """Runway as coded, designator is ``""``, ``"L"``, ``"C"`` or ``"R"``."""

    number: int
    designator: str = ""


class CodedPressureUnit(Enum):
    HECTOPASCAL = "HPA"
    INCHES_HG = "INHG"
    MM_HG = "MMHG"


@dataclass(frozen=True)
class CodedPressure:
    value: Optional[Number] = None
    unit: CodedPressureUnit = CodedPressureUnit.HECTOPASCAL


class CodedPrecipitationUnit(Enum):
    MM = "MM"
    INCHES = "IN"


@dataclass(frozen=True)
class CodedPrecipitation:
    amount: Optional[Number] = None
    unit: CodedPrecipitationUnit = CodedPrecipitationUnit.MM


class WaveHeightType(Enum):
    STATE_OF_SURFACE = "S"
    WAVE_HEIGHT = "H"


@dataclass(frozen=True)
class CodedWaveHeight:
    """
    Sea state from a ``Wtt/Sn`` or ``Wtt/Hhhh`` group.

    ``value`` is the state-of-surface digit or the wave height in decimeters.
    """

    type: WaveHeightType = WaveHeightType.WAVE_HEIGHT
    value: Optional[int] = None


class WeatherQualifier(Enum):
    NONE = ""
    RECENT = "RE"
    VICINITY = "VC"
    LIGHT = "-"
    MODERATE = "MOD"
    HEAVY = "+"


class WeatherDescriptor(Enum):
    NONE = ""
    SHALLOW = "MI"
    PARTIAL = "PR"
    PATCHES = "BC"
    LOW_DRIFTING = "DR"
    BLOWING = "BL"
    SHOWERS = "SH"
    THUNDERSTORM = "TS"
    FREEZING = "FZ"


class WeatherCode(Enum):
    NOT_REPORTED = "//"
    DRIZZLE = "DZ"
    RAIN = "RA"
    SNOW = "SN"
    SNOW_GRAINS = "SG"
    ICE_CRYSTALS = "IC"
    ICE_PELLETS = "PL"
    HAIL = "GR"
    SMALL_HAIL = "GS"
    UNDETERMINED = "UP"
    MIST = "BR"
    FOG = "FG"
    SMOKE = "FU"
    VOLCANIC_ASH = "VA"
    DUST = "DU"
    SAND = "SA"
    HAZE = "HZ"
    SPRAY = "PY"
    DUST_WHIRLS = "PO"
    SQUALLS = "SQ"
    FUNNEL_CLOUD = "FC"
    SANDSTORM = "SS"
    DUSTSTORM = "DS"


class WeatherEventCode(Enum):
    NONE = ""
    BEGINNING = "B"
    ENDING = "E"


@dataclass(frozen=True)
class CodedWeather:
    """One weather phenomenon (e.g. ``-SHRA``, ``VCFG``, or ``RAB15`` in remarks)."""

    qualifier: WeatherQualifier = WeatherQualifier.NONE
    descriptor: WeatherDescriptor = WeatherDescriptor.NONE
    weather: Tuple[WeatherCode, ...] = ()
    event: WeatherEventCode = WeatherEventCode.NONE
    time: Optional[CodedTime] = None


class CodedCloudAmount(Enum):
    NOT_REPORTED = "///"
    NSC = "NSC"
    NCD = "NCD"
    NONE_CLR = "CLR"
    NONE_SKC = "SKC"
    FEW = "FEW"
    SCATTERED = "SCT"
    BROKEN = "BKN"
    OVERCAST = "OVC"
    OBSCURED = "VV"
    VARIABLE_FEW_SCATTERED = "FEW V SCT"
    VARIABLE_SCATTERED_BROKEN = "SCT V BKN"
    VARIABLE_BROKEN_OVERCAST = "BKN V OVC"


class ConvectiveType(Enum):
    NONE = ""
    NOT_REPORTED = "///"
    TOWERING_CUMULUS = "TCU"
    CUMULONIMBUS = "CB"


class CodedCloudType(Enum):
    """Cloud or obscuration type named in remarks (e.g. ``BKN FU 020``, ``SC3``)."""

    NOT_REPORTED = "//"
    CUMULONIMBUS = "CB"
    TOWERING_CUMULUS = "TCU"
    CUMULUS = "CU"
    CUMULUS_FRACTUS = "CF"
    STRATOCUMULUS = "SC"
    NIMBOSTRATUS = "NS"
    STRATUS = "ST"
    STRATUS_FRACTUS = "SF"
    ALTOSTRATUS = "AS"
    ALTOCUMULUS = "AC"
    ALTOCUMULUS_CASTELLANUS = "ACC"
    CIRRUS = "CI"
    CIRROSTRATUS = "CS"
    CIRROCUMULUS = "CC"
    BLOWING_SNOW = "BLSN"
    BLOWING_DUST = "BLDU"
    BLOWING_SAND = "BLSA"
    ICE_CRYSTALS = "IC"
    RAIN = "RA"
    DRIZZLE = "DZ"
    SNOW = "SN"
    ICE_PELLETS = "PL"
    SMOKE = "FU"
    FOG = "FG"
    MIST = "BR"
    HAZE = "HZ"
    VOLCANIC_ASH = "VA"
    CUMULONIMBUS_MAMMATUS = "CBMAM"


class RvrTrendCode(Enum):
    NONE = ""
    NOT_REPORTED = "/"
    UPWARD = "U"
    NEUTRAL = "N"
    DOWNWARD = "D"


class LightningTypeCode(Enum):
    IN_CLOUD = "IC"
    CLOUD_CLOUD = "CC"
    CLOUD_GROUND = "CG"
    CLOUD_AIR = "CA"
    UNKNOWN = "?"


class LightningFrequencyCode(Enum):
    NONE = ""
    OCCASIONAL = "OCNL"
    FREQUENT = "FRQ"
    CONSTANT = "CONS"
