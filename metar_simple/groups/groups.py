"""
Classified report groups, as delivered by a tokenizer.

Each group is a frozen dataclass carrying the group's raw source text
(``raw``) and its kind-specific payload. Most families carry a ``type``
discriminator naming the exact variant within the family. ``Group`` is the
union of all families; consumers dispatch on the group class and must cover
every member of the union.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from metar_simple.groups.values import (
    CodedCloudAmount,
    CodedCloudType,
    CodedDirection,
    CodedDistance,
    CodedPrecipitation,
    CodedPressure,
    CodedRunway,
    CodedSpeed,
    CodedTemperature,
    CodedTime,
    CodedWaveHeight,
    CodedWeather,
    ConvectiveType,
    LightningFrequencyCode,
    LightningTypeCode,
    Number,
    RvrTrendCode,
)
from metar_simple.models.report import ReportError, ReportType


@dataclass(frozen=True)
class ReportHeader:
    """
    Context accompanying the group sequence of one report.

    ``type`` is None when the tokenizer could not tell the report type;
    ``error`` carries any error the tokenizer already detected.
    """

    type: Optional[ReportType] = None
    error: ReportError = ReportError.NO_ERROR


class KeywordType(Enum):
    METAR = "METAR"
    SPECI = "SPECI"
    TAF = "TAF"
    AMD = "AMD"
    NIL = "NIL"
    CNL = "CNL"
    COR = "COR"
    AUTO = "AUTO"
    CAVOK = "CAVOK"
    RMK = "RMK"
    MAINTENANCE_INDICATOR = "$"
    NOSPECI = "NOSPECI"
    AO1 = "AO1"
    AO1A = "AO1A"
    AO2 = "AO2"
    AO2A = "AO2A"


@dataclass(frozen=True)
class KeywordGroup:
    raw: str
    type: KeywordType
    correction_number: Optional[int] = None


@dataclass(frozen=True)
class LocationGroup:
    raw: str
    icao: str


@dataclass(frozen=True)
class ReportTimeGroup:
    raw: str
    time: CodedTime


class TrendGroupType(Enum):
    NOSIG = "NOSIG"
    BECMG = "BECMG"
    TEMPO = "TEMPO"
    INTER = "INTER"
    FROM = "FM"
    UNTIL = "TL"
    AT = "AT"
    TIME_SPAN = "TIME_SPAN"
    PROB = "PROB"


@dataclass(frozen=True)
class TrendGroup:
    """
    Trend introducer with its time qualifiers.

    Consecutive trend tokens are delivered as one group: ``PROB30 TEMPO
    0512/0520`` has type TEMPO, probability 30 and both times; a bare
    ``PROB30 0512/0520`` has type PROB.
    """

    raw: str
    type: TrendGroupType
    probability: Optional[int] = None
    time_from: Optional[CodedTime] = None
    time_until: Optional[CodedTime] = None
    time_at: Optional[CodedTime] = None


class WindType(Enum):
    SURFACE_WIND = "SURFACE_WIND"
    SURFACE_WIND_CALM = "SURFACE_WIND_CALM"
    SURFACE_WIND_WITH_VARIABLE_SECTOR = "SURFACE_WIND_WITH_VARIABLE_SECTOR"
    VARIABLE_WIND_SECTOR = "VARIABLE_WIND_SECTOR"
    WIND_SHEAR = "WIND_SHEAR"
    WIND_SHEAR_IN_LOWER_LAYERS = "WIND_SHEAR_IN_LOWER_LAYERS"
    WIND_SHIFT = "WIND_SHIFT"
    WIND_SHIFT_FROPA = "WIND_SHIFT_FROPA"
    PEAK_WIND = "PEAK_WIND"
    WSCONDS = "WSCONDS"
    WND_MISG = "WND_MISG"


@dataclass(frozen=True)
class WindGroup:
    raw: str
    type: WindType
    direction: CodedDirection = CodedDirection()
    speed: Optional[CodedSpeed] = None
    gust: Optional[CodedSpeed] = None
    var_sector_begin: Optional[CodedDirection] = None
    var_sector_end: Optional[CodedDirection] = None
    height: Optional[CodedDistance] = None
    runway: Optional[CodedRunway] = None
    event_time: Optional[CodedTime] = None


class VisibilityType(Enum):
    PREVAILING = "PREVAILING"
    PREVAILING_NDV = "PREVAILING_NDV"
    DIRECTIONAL = "DIRECTIONAL"
    RUNWAY = "RUNWAY"
    RVR = "RVR"
    SURFACE = "SURFACE"
    TOWER = "TOWER"
    SECTOR = "SECTOR"
    VARIABLE_PREVAILING = "VARIABLE_PREVAILING"
    VARIABLE_DIRECTIONAL = "VARIABLE_DIRECTIONAL"
    VARIABLE_RUNWAY = "VARIABLE_RUNWAY"
    VARIABLE_RVR = "VARIABLE_RVR"
    VARIABLE_SECTOR = "VARIABLE_SECTOR"
    VIS_MISG = "VIS_MISG"
    RVR_MISG = "RVR_MISG"
    RVRNO = "RVRNO"
    VISNO = "VISNO"


@dataclass(frozen=True)
class VisibilityGroup:
    """
    Visibility or runway visual range.

    Variable types carry the lower bound in ``visibility`` and the upper
    bound in ``max_visibility``. Sector types list their ``directions``.
    """

    raw: str
    type: VisibilityType
    visibility: Optional[CodedDistance] = None
    max_visibility: Optional[CodedDistance] = None
    direction: Optional[CodedDirection] = None
    directions: Tuple[CodedDirection, ...] = ()
    runway: Optional[CodedRunway] = None
    trend: RvrTrendCode = RvrTrendCode.NONE


class CloudGroupType(Enum):
    CLOUD_LAYER = "CLOUD_LAYER"
    VERTICAL_VISIBILITY = "VERTICAL_VISIBILITY"
    NO_CLOUDS = "NO_CLOUDS"
    CEILING = "CEILING"
    VARIABLE_CEILING = "VARIABLE_CEILING"
    CHINO = "CHINO"
    CLD_MISG = "CLD_MISG"
    OBSCURATION = "OBSCURATION"


@dataclass(frozen=True)
class CloudGroup:
    """Cloud layer, sky condition, ceiling or obscuration; heights are in feet."""

    raw: str
    type: CloudGroupType
    amount: CodedCloudAmount = CodedCloudAmount.NOT_REPORTED
    height: Optional[CodedDistance] = None
    convective_type: ConvectiveType = ConvectiveType.NONE
    cloud_type: Optional[CodedCloudType] = None
    min_height: Optional[CodedDistance] = None
    max_height: Optional[CodedDistance] = None
    runway: Optional[CodedRunway] = None
    direction: Optional[CodedDirection] = None


class WeatherGroupType(Enum):
    CURRENT = "CURRENT"
    RECENT = "RECENT"
    EVENT = "EVENT"
    NSW = "NSW"
    PWINO = "PWINO"
    TSNO = "TSNO"
    TS_LTNG_TEMPO_UNAVBL = "TS_LTNG_TEMPO_UNAVBL"
    WX_MISG = "WX_MISG"


@dataclass(frozen=True)
class WeatherGroup:
    raw: str
    type: WeatherGroupType
    phenomena: Tuple[CodedWeather, ...] = ()


class TemperatureType(Enum):
    TEMPERATURE_AND_DEW_POINT = "TEMPERATURE_AND_DEW_POINT"
    T_MISG = "T_MISG"
    TD_MISG = "TD_MISG"


@dataclass(frozen=True)
class TemperatureGroup:
    raw: str
    type: TemperatureType
    air_temperature: Optional[CodedTemperature] = None
    dew_point: Optional[CodedTemperature] = None


class PressureType(Enum):
    OBSERVED_QNH = "OBSERVED_QNH"
    OBSERVED_SLP = "OBSERVED_SLP"
    OBSERVED_QFE = "OBSERVED_QFE"
    FORECAST_LOWEST_QNH = "FORECAST_LOWEST_QNH"
    SLPNO = "SLPNO"
    PRES_MISG = "PRES_MISG"


@dataclass(frozen=True)
class PressureGroup:
    raw: str
    type: PressureType
    pressure: Optional[CodedPressure] = None


class RunwayStateType(Enum):
    RUNWAY_STATE = "RUNWAY_STATE"
    RUNWAY_CLRD = "RUNWAY_CLRD"
    RUNWAY_SNOCLO = "RUNWAY_SNOCLO"
    RUNWAY_NOT_OPERATIONAL = "RUNWAY_NOT_OPERATIONAL"
    AERODROME_SNOCLO = "AERODROME_SNOCLO"


@dataclass(frozen=True)
class RunwayStateGroup:
    """
    Runway state (``R24/290155``, ``R88/CLRD//``, ``R/SNOCLO``).

    ``deposits`` and ``extent`` are the coded digits (None for ``/``);
    ``friction`` is the two-digit friction or braking action code.
    """

    raw: str
    type: RunwayStateType
    runway: Optional[CodedRunway] = None
    deposits: Optional[int] = None
    extent: Optional[int] = None
    deposit_depth: Optional[CodedPrecipitation] = None
    friction: Optional[int] = None


@dataclass(frozen=True)
class SeaSurfaceGroup:
    raw: str
    temperature: Optional[CodedTemperature] = None
    waves: Optional[CodedWaveHeight] = None


class MinMaxTemperatureType(Enum):
    OBSERVED_6_HOURLY = "OBSERVED_6_HOURLY"
    OBSERVED_24_HOURLY = "OBSERVED_24_HOURLY"
    FORECAST = "FORECAST"


@dataclass(frozen=True)
class MinMaxTemperatureGroup:
    raw: str
    type: MinMaxTemperatureType
    minimum: Optional[CodedTemperature] = None
    maximum: Optional[CodedTemperature] = None
    minimum_time: Optional[CodedTime] = None
    maximum_time: Optional[CodedTime] = None


class PrecipitationAmountType(Enum):
    TOTAL_PRECIPITATION_HOURLY = "TOTAL_PRECIPITATION_HOURLY"
    FROZEN_PRECIP_3_OR_6_HOURLY = "FROZEN_PRECIP_3_OR_6_HOURLY"
    FROZEN_PRECIP_3_HOURLY = "FROZEN_PRECIP_3_HOURLY"
    FROZEN_PRECIP_6_HOURLY = "FROZEN_PRECIP_6_HOURLY"
    FROZEN_PRECIP_24_HOURLY = "FROZEN_PRECIP_24_HOURLY"
    SNOW_6_HOURLY = "SNOW_6_HOURLY"
    WATER_EQUIV_OF_SNOW_ON_GROUND = "WATER_EQUIV_OF_SNOW_ON_GROUND"
    ICE_ACCRETION_FOR_LAST_HOUR = "ICE_ACCRETION_FOR_LAST_HOUR"
    ICE_ACCRETION_FOR_LAST_3_HOURS = "ICE_ACCRETION_FOR_LAST_3_HOURS"
    ICE_ACCRETION_FOR_LAST_6_HOURS = "ICE_ACCRETION_FOR_LAST_6_HOURS"
    PRECIPITATION_ACCUMULATION_SINCE_LAST_REPORT = "PRECIPITATION_ACCUMULATION_SINCE_LAST_REPORT"
    SNOW_DEPTH_ON_GROUND = "SNOW_DEPTH_ON_GROUND"
    SNOW_INCREASING_RAPIDLY = "SNOW_INCREASING_RAPIDLY"
    RAINFALL_9AM_10MIN = "RAINFALL_9AM_10MIN"
    PNO = "PNO"
    FZRANO = "FZRANO"
    ICG_MISG = "ICG_MISG"
    PCPN_MISG = "PCPN_MISG"


@dataclass(frozen=True)
class PrecipitationGroup:
    """
    Precipitation, snow or ice accretion amount.

    ``recent`` is the short-window amount of two-value groups: the last hour
    increase of ``SNINCR 2/10`` or the last 10 minutes of ``RF02.7/010.5``.
    """

    raw: str
    type: PrecipitationAmountType
    amount: Optional[CodedPrecipitation] = None
    recent: Optional[CodedPrecipitation] = None


class LayerForecastType(Enum):
    ICING_TRACE_OR_NONE = "ICING_TRACE_OR_NONE"
    ICING_LIGHT_MIXED = "ICING_LIGHT_MIXED"
    ICING_LIGHT_RIME_IN_CLOUD = "ICING_LIGHT_RIME_IN_CLOUD"
    ICING_LIGHT_CLEAR_IN_PRECIPITATION = "ICING_LIGHT_CLEAR_IN_PRECIPITATION"
    ICING_MODERATE_MIXED = "ICING_MODERATE_MIXED"
    ICING_MODERATE_RIME_IN_CLOUD = "ICING_MODERATE_RIME_IN_CLOUD"
    ICING_MODERATE_CLEAR_IN_PRECIPITATION = "ICING_MODERATE_CLEAR_IN_PRECIPITATION"
    ICING_SEVERE_MIXED = "ICING_SEVERE_MIXED"
    ICING_SEVERE_RIME_IN_CLOUD = "ICING_SEVERE_RIME_IN_CLOUD"
    ICING_SEVERE_CLEAR_IN_PRECIPITATION = "ICING_SEVERE_CLEAR_IN_PRECIPITATION"
    TURBULENCE_NONE = "TURBULENCE_NONE"
    TURBULENCE_LIGHT = "TURBULENCE_LIGHT"
    TURBULENCE_MODERATE_IN_CLEAR_AIR_OCCASIONAL = "TURBULENCE_MODERATE_IN_CLEAR_AIR_OCCASIONAL"
    TURBULENCE_MODERATE_IN_CLEAR_AIR_FREQUENT = "TURBULENCE_MODERATE_IN_CLEAR_AIR_FREQUENT"
    TURBULENCE_MODERATE_IN_CLOUD_OCCASIONAL = "TURBULENCE_MODERATE_IN_CLOUD_OCCASIONAL"
    TURBULENCE_MODERATE_IN_CLOUD_FREQUENT = "TURBULENCE_MODERATE_IN_CLOUD_FREQUENT"
    TURBULENCE_SEVERE_IN_CLEAR_AIR_OCCASIONAL = "TURBULENCE_SEVERE_IN_CLEAR_AIR_OCCASIONAL"
    TURBULENCE_SEVERE_IN_CLEAR_AIR_FREQUENT = "TURBULENCE_SEVERE_IN_CLEAR_AIR_FREQUENT"
    TURBULENCE_SEVERE_IN_CLOUD_OCCASIONAL = "TURBULENCE_SEVERE_IN_CLOUD_OCCASIONAL"
    TURBULENCE_SEVERE_IN_CLOUD_FREQUENT = "TURBULENCE_SEVERE_IN_CLOUD_FREQUENT"
    TURBULENCE_EXTREME = "TURBULENCE_EXTREME"


@dataclass(frozen=True)
class LayerForecastGroup:
    """Icing (``6ihhht``) or turbulence (``5Bhhht``) layer forecast; heights in feet."""

    raw: str
    type: LayerForecastType
    base_height: Optional[CodedDistance] = None
    top_height: Optional[CodedDistance] = None


class PressureTendencyType(Enum):
    TENDENCY_CODE = "TENDENCY_CODE"
    RISING_RAPIDLY = "PRESRR"
    FALLING_RAPIDLY = "PRESFR"


@dataclass(frozen=True)
class PressureTendencyGroup:
    """
    Pressure tendency (``5appp``) or PRESRR/PRESFR remark.

    ``code`` is the ``a`` digit (None for ``/``); ``difference`` is the
    3-hour pressure change.
    """

    raw: str
    type: PressureTendencyType = PressureTendencyType.TENDENCY_CODE
    code: Optional[int] = None
    difference: Optional[CodedPressure] = None


@dataclass(frozen=True)
class LowMidHighCloudGroup:
    """``8/LMH`` remark; each digit is None when coded as ``/``."""

    raw: str
    low: Optional[int] = None
    mid: Optional[int] = None
    high: Optional[int] = None


@dataclass(frozen=True)
class LightningGroup:
    raw: str
    frequency: LightningFrequencyCode = LightningFrequencyCode.NONE
    types: Tuple[LightningTypeCode, ...] = ()
    distance: Optional[CodedDistance] = None
    directions: Tuple[CodedDirection, ...] = ()


class VicinityType(Enum):
    THUNDERSTORM = "TS"
    CUMULONIMBUS = "CB"
    CUMULONIMBUS_MAMMATUS = "CBMAM"
    TOWERING_CUMULUS = "TCU"
    ALTOCUMULUS_CASTELLANUS = "ACC"
    STRATOCUMULUS_STANDING_LENTICULAR = "SCSL"
    ALTOCUMULUS_STANDING_LENTICULAR = "ACSL"
    CIRROCUMULUS_STANDING_LENTICULAR = "CCSL"
    ROTOR_CLOUD = "ROTOR CLD"
    VIRGA = "VIRGA"
    PRECIPITATION_IN_VICINITY = "VCSH"
    FOG = "FG"
    FOG_SHALLOW = "MIFG"
    FOG_PATCHES = "BCFG"
    HAZE = "HZ"
    SMOKE = "FU"
    BLOWING_SNOW = "BLSN"
    BLOWING_SAND = "BLSA"
    BLOWING_DUST = "BLDU"


@dataclass(frozen=True)
class VicinityGroup:
    raw: str
    type: VicinityType
    distance: Optional[CodedDistance] = None
    directions: Tuple[CodedDirection, ...] = ()
    moving: CodedDirection = CodedDirection()


class MiscType(Enum):
    SUNSHINE_DURATION_MINUTES = "SUNSHINE_DURATION_MINUTES"
    CORRECTED_WEATHER_OBSERVATION = "CORRECTED_WEATHER_OBSERVATION"
    DENSITY_ALTITUDE = "DENSITY_ALTITUDE"
    HAILSTONE_SIZE = "HAILSTONE_SIZE"
    FROIN = "FROIN"
    COLOUR_CODE_BLUE = "BLU"
    COLOUR_CODE_WHITE = "WHT"
    COLOUR_CODE_GREEN = "GRN"
    COLOUR_CODE_YELLOW1 = "YLO1"
    COLOUR_CODE_YELLOW2 = "YLO2"
    COLOUR_CODE_AMBER = "AMB"
    COLOUR_CODE_RED = "RED"
    COLOUR_CODE_BLACKBLUE = "BLACKBLU"
    COLOUR_CODE_BLACKWHITE = "BLACKWHT"
    COLOUR_CODE_BLACKGREEN = "BLACKGRN"
    COLOUR_CODE_BLACKYELLOW1 = "BLACKYLO1"
    COLOUR_CODE_BLACKYELLOW2 = "BLACKYLO2"
    COLOUR_CODE_BLACKAMBER = "BLACKAMB"
    COLOUR_CODE_BLACKRED = "BLACKRED"


@dataclass(frozen=True)
class MiscGroup:
    """
    Miscellaneous remark or colour code.

    ``value`` holds minutes of sunshine, the correction number (``CCA`` is
    1), density altitude in feet or hailstone size in inches.
    """

    raw: str
    type: MiscType
    value: Optional[Number] = None


@dataclass(frozen=True)
class UnknownGroup:
    """Group the tokenizer could not classify; kept as plain text."""

    raw: str


Group = Union[
    KeywordGroup,
    LocationGroup,
    ReportTimeGroup,
    TrendGroup,
    WindGroup,
    VisibilityGroup,
    CloudGroup,
    WeatherGroup,
    TemperatureGroup,
    PressureGroup,
    RunwayStateGroup,
    SeaSurfaceGroup,
    MinMaxTemperatureGroup,
    PrecipitationGroup,
    LayerForecastGroup,
    PressureTendencyGroup,
    LowMidHighCloudGroup,
    LightningGroup,
    VicinityGroup,
    MiscGroup,
    UnknownGroup,
]
