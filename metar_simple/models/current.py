"""Current observation: essentials plus all non-trend, non-historical data."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional

from metar_simple.models.essentials import CloudLayer, Essentials
from metar_simple.models.units import (
    CardinalDirection,
    DistanceRange,
    Height,
    Precipitation,
    Pressure,
    Speed,
    Temperature,
    WaveHeight,
    is_reported,
)


@dataclass(frozen=True)
class WindShear:
    """Wind shear at a height (e.g. ``WS020/05065KT``)."""

    height: Optional[Height] = None
    direction_degrees: Optional[int] = None
    wind_speed: Optional[Speed] = None


class LowCloudLayer(Enum):
    """Low cloud type (WMO code table 0513)."""

    NO_CLOUDS = "NO_CLOUDS"
    CU_HU_CU_FR = "CU_HU_CU_FR"
    CU_MED_CU_CON = "CU_MED_CU_CON"
    CB_CAL = "CB_CAL"
    SC_CUGEN = "SC_CUGEN"
    SC_NON_CUGEN = "SC_NON_CUGEN"
    ST_NEB_ST_FR = "ST_NEB_ST_FR"
    ST_FR_CU_FR_PANNUS = "ST_FR_CU_FR_PANNUS"
    CU_SC_NON_CUGEN_DIFFERENT_LEVELS = "CU_SC_NON_CUGEN_DIFFERENT_LEVELS"
    CB_CAP = "CB_CAP"
    UNKNOWN = "UNKNOWN"


class MidCloudLayer(Enum):
    """Middle cloud type (WMO code table 0515)."""

    NO_CLOUDS = "NO_CLOUDS"
    AS_TR = "AS_TR"
    AS_OP_NS = "AS_OP_NS"
    AC_TR = "AC_TR"
    AC_TR_LEN_PATCHES = "AC_TR_LEN_PATCHES"
    AC_TR_AC_OP_SPREADING = "AC_TR_AC_OP_SPREADING"
    AC_CUGEN_AC_CBGEN = "AC_CUGEN_AC_CBGEN"
    AC_DU_AC_OP_AC_WITH_AS_OR_NS = "AC_DU_AC_OP_AC_WITH_AS_OR_NS"
    AC_CAS_AC_FLO = "AC_CAS_AC_FLO"
    AC_OF_CHAOTIC_SKY = "AC_OF_CHAOTIC_SKY"
    UNKNOWN = "UNKNOWN"


class HighCloudLayer(Enum):
    """High cloud type (WMO code table 0509)."""

    NO_CLOUDS = "NO_CLOUDS"
    CI_FIB_CI_UNC = "CI_FIB_CI_UNC"
    CI_SPI_CI_CAS_CI_FLO = "CI_SPI_CI_CAS_CI_FLO"
    CI_SPI_CBGEN = "CI_SPI_CBGEN"
    CI_FIB_CI_UNC_SPREADING = "CI_FIB_CI_UNC_SPREADING"
    CI_CS_LOW_ABOVE_HORIZON = "CI_CS_LOW_ABOVE_HORIZON"
    CI_CS_HIGH_ABOVE_HORIZON = "CI_CS_HIGH_ABOVE_HORIZON"
    CS_NEB_CS_FIB_COVERING_ENTIRE_SKY = "CS_NEB_CS_FIB_COVERING_ENTIRE_SKY"
    CS = "CS"
    CC = "CC"
    UNKNOWN = "UNKNOWN"


class VicinityPhenomena(Enum):
    THUNDERSTORM = "THUNDERSTORM"
    CUMULONIMBUS = "CUMULONIMBUS"
    CUMULONIMBUS_MAMMATUS = "CUMULONIMBUS_MAMMATUS"
    TOWERING_CUMULUS = "TOWERING_CUMULUS"
    ALTOCUMULUS_CASTELLANUS = "ALTOCUMULUS_CASTELLANUS"
    STRATOCUMULUS_STANDING_LENTICULAR = "STRATOCUMULUS_STANDING_LENTICULAR"
    ALTOCUMULUS_STANDING_LENTICULAR = "ALTOCUMULUS_STANDING_LENTICULAR"
    CIRROCUMULUS_STANDING_LENTICULAR = "CIRROCUMULUS_STANDING_LENTICULAR"
    ROTOR_CLOUD = "ROTOR_CLOUD"
    VIRGA = "VIRGA"
    PRECIPITATION = "PRECIPITATION"
    FOG = "FOG"
    FOG_SHALLOW = "FOG_SHALLOW"
    FOG_PATCHES = "FOG_PATCHES"
    HAZE = "HAZE"
    SMOKE = "SMOKE"
    BLOWING_SNOW = "BLOWING_SNOW"
    BLOWING_SAND = "BLOWING_SAND"
    BLOWING_DUST = "BLOWING_DUST"
    DUST_WHIRLS = "DUST_WHIRLS"
    SAND_STORM = "SAND_STORM"
    DUST_STORM = "DUST_STORM"
    VOLCANIC_ASH = "VOLCANIC_ASH"
    FUNNEL_CLOUD = "FUNNEL_CLOUD"


@dataclass(frozen=True)
class Vicinity:
    """Phenomenon observed in the vicinity, with directions, distance and movement."""

    phenomena: VicinityPhenomena
    distance: Optional[DistanceRange] = None
    moving: CardinalDirection = CardinalDirection.NOT_SPECIFIED
    directions: FrozenSet[CardinalDirection] = frozenset()


class LightningType(Enum):
    IN_CLOUD = "IN_CLOUD"
    CLOUD_CLOUD = "CLOUD_CLOUD"
    CLOUD_GROUND = "CLOUD_GROUND"
    CLOUD_AIR = "CLOUD_AIR"


class LightningFrequency(Enum):
    UNKNOWN = "UNKNOWN"
    OCCASIONAL = "OCCASIONAL"
    FREQUENT = "FREQUENT"
    CONSTANT = "CONSTANT"


@dataclass(frozen=True)
class LightningStrikes:
    frequency: LightningFrequency = LightningFrequency.UNKNOWN
    type: FrozenSet[LightningType] = frozenset()
    distance: Optional[DistanceRange] = None
    directions: FrozenSet[CardinalDirection] = frozenset()


@dataclass
class Current:
    """Current weather observed in a METAR or SPECI."""

    weather_data: Essentials = field(default_factory=Essentials)
    variable_visibility: Optional[DistanceRange] = None
    obscurations: List[CloudLayer] = field(default_factory=list)
    low_cloud_layer: Optional[LowCloudLayer] = None
    mid_cloud_layer: Optional[MidCloudLayer] = None
    high_cloud_layer: Optional[HighCloudLayer] = None
    air_temperature: Optional[Temperature] = None
    dew_point: Optional[Temperature] = None
    relative_humidity: Optional[int] = None
    pressure_sea_level: Optional[Pressure] = None
    pressure_ground_level: Optional[Pressure] = None
    sea_surface_temperature: Optional[Temperature] = None
    wave_height: Optional[WaveHeight] = None
    snow_water_equivalent: Optional[Precipitation] = None
    snow_depth_on_ground: Optional[Precipitation] = None
    snow_increasing_rapidly: bool = False
    wind_shear: List[WindShear] = field(default_factory=list)
    phenomena_in_vicinity: List[Vicinity] = field(default_factory=list)
    lightning_strikes: List[LightningStrikes] = field(default_factory=list)
    density_altitude: Optional[Height] = None
    hailstone_size_quarters_inch: Optional[int] = None
    frost_on_instrument: bool = False

    def is_empty(self) -> bool:
        return not is_reported(self)
