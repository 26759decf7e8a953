"""Forecast data: prevailing conditions, trends, icing and turbulence."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from metar_simple.models.essentials import Essentials
from metar_simple.models.units import Height, Pressure, Temperature, Time, is_reported


class TrendType(Enum):
    """
    Kind of trend.

    FM/TL/AT groups and bare time spans produce TIMED trends. PROB30/PROB40
    without TEMPO/INTER/BECMG produce PROB trends; with one of those the
    qualifier is kept and the probability is carried alongside.
    """

    BECMG = "BECMG"
    TEMPO = "TEMPO"
    INTER = "INTER"
    TIMED = "TIMED"
    PROB = "PROB"


@dataclass
class Trend:
    """A trend or TAF change group with its forecast conditions."""

    type: TrendType
    probability: Optional[int] = None
    time_from: Optional[Time] = None
    time_until: Optional[Time] = None
    time_at: Optional[Time] = None
    forecast: Essentials = field(default_factory=Essentials)
    metar: bool = False


class IcingSeverity(Enum):
    NONE_OR_TRACE = "NONE_OR_TRACE"
    LIGHT = "LIGHT"
    MODERATE = "MODERATE"
    SEVERE = "SEVERE"


class IcingType(Enum):
    NONE = "NONE"
    RIME_IN_CLOUD = "RIME_IN_CLOUD"
    CLEAR_IN_PRECIPITATION = "CLEAR_IN_PRECIPITATION"
    MIXED = "MIXED"


@dataclass(frozen=True)
class IcingForecast:
    severity: IcingSeverity
    type: IcingType
    min_height: Optional[Height] = None
    max_height: Optional[Height] = None


class TurbulenceSeverity(Enum):
    NONE = "NONE"
    LIGHT = "LIGHT"
    MODERATE = "MODERATE"
    SEVERE = "SEVERE"
    EXTREME = "EXTREME"


class TurbulenceLocation(Enum):
    NONE = "NONE"
    IN_CLOUD = "IN_CLOUD"
    IN_CLEAR_AIR = "IN_CLEAR_AIR"


class TurbulenceFrequency(Enum):
    NONE = "NONE"
    FREQUENT = "FREQUENT"
    OCCASIONAL = "OCCASIONAL"


@dataclass(frozen=True)
class TurbulenceForecast:
    severity: TurbulenceSeverity
    location: TurbulenceLocation = TurbulenceLocation.NONE
    frequency: TurbulenceFrequency = TurbulenceFrequency.NONE
    min_height: Optional[Height] = None
    max_height: Optional[Height] = None


@dataclass
class Forecast:
    """
    Forecast data.

    For a TAF, ``prevailing`` holds the main forecast body. For METAR and
    SPECI it stays empty and only ``trends`` (with ``metar=True``) and
    ``no_significant_changes`` may be set.
    """

    prevailing: Essentials = field(default_factory=Essentials)
    trends: List[Trend] = field(default_factory=list)
    no_significant_changes: bool = False
    wind_shear_conditions: bool = False
    min_temperature: Optional[Temperature] = None
    min_temperature_time: Optional[Time] = None
    max_temperature: Optional[Temperature] = None
    max_temperature_time: Optional[Time] = None
    icing: List[IcingForecast] = field(default_factory=list)
    turbulence: List[TurbulenceForecast] = field(default_factory=list)
    lowest_qnh: Optional[Pressure] = None

    def is_empty(self) -> bool:
        return not is_reported(self)
