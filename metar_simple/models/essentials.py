"""Essential weather data shared by current observations and forecasts."""

from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Optional

from metar_simple.models.units import Distance, Height, Speed, is_reported


class WeatherPhenomena(Enum):
    """Weather phenomena, or precipitation intensity when precipitation is reported."""

    UNKNOWN = "UNKNOWN"
    NO_SIGNIFICANT_WEATHER = "NO_SIGNIFICANT_WEATHER"
    SHALLOW_FOG = "SHALLOW_FOG"
    PARTIAL_FOG = "PARTIAL_FOG"
    PATCHES_FOG = "PATCHES_FOG"
    FREEZING_FOG = "FREEZING_FOG"
    FOG = "FOG"
    DRIFTING_DUST = "DRIFTING_DUST"
    BLOWING_DUST = "BLOWING_DUST"
    DUST = "DUST"
    DRIFTING_SAND = "DRIFTING_SAND"
    BLOWING_SAND = "BLOWING_SAND"
    SAND = "SAND"
    DRIFTING_SNOW = "DRIFTING_SNOW"
    BLOWING_SNOW = "BLOWING_SNOW"
    BLOWING_SPRAY = "BLOWING_SPRAY"
    ICE_CRYSTALS = "ICE_CRYSTALS"
    MIST = "MIST"
    SMOKE = "SMOKE"
    VOLCANIC_ASH = "VOLCANIC_ASH"
    HAZE = "HAZE"
    DUST_WHIRLS = "DUST_WHIRLS"
    SQUALLS = "SQUALLS"
    FUNNEL_CLOUD = "FUNNEL_CLOUD"
    TORNADO = "TORNADO"
    SAND_STORM = "SAND_STORM"
    DUST_STORM = "DUST_STORM"
    DUST_SAND_STORM = "DUST_SAND_STORM"
    HEAVY_SAND_STORM = "HEAVY_SAND_STORM"
    HEAVY_DUST_STORM = "HEAVY_DUST_STORM"
    HEAVY_DUST_SAND_STORM = "HEAVY_DUST_SAND_STORM"
    PRECIPITATION = "PRECIPITATION"
    PRECIPITATION_LIGHT = "PRECIPITATION_LIGHT"
    PRECIPITATION_MODERATE = "PRECIPITATION_MODERATE"
    PRECIPITATION_HEAVY = "PRECIPITATION_HEAVY"
    SHOWERY_PRECIPITATION_LIGHT = "SHOWERY_PRECIPITATION_LIGHT"
    SHOWERY_PRECIPITATION_MODERATE = "SHOWERY_PRECIPITATION_MODERATE"
    SHOWERY_PRECIPITATION_HEAVY = "SHOWERY_PRECIPITATION_HEAVY"
    FREEZING_PRECIPITATION_LIGHT = "FREEZING_PRECIPITATION_LIGHT"
    FREEZING_PRECIPITATION_MODERATE = "FREEZING_PRECIPITATION_MODERATE"
    FREEZING_PRECIPITATION_HEAVY = "FREEZING_PRECIPITATION_HEAVY"
    THUNDERSTORM = "THUNDERSTORM"
    THUNDERSTORM_PRECIPITATION_LIGHT = "THUNDERSTORM_PRECIPITATION_LIGHT"
    THUNDERSTORM_PRECIPITATION_MODERATE = "THUNDERSTORM_PRECIPITATION_MODERATE"
    THUNDERSTORM_PRECIPITATION_HEAVY = "THUNDERSTORM_PRECIPITATION_HEAVY"


class PrecipitationType(Enum):
    DRIZZLE = "DRIZZLE"
    RAIN = "RAIN"
    SNOW = "SNOW"
    SNOW_GRAINS = "SNOW_GRAINS"
    ICE_PELLETS = "ICE_PELLETS"
    HAIL = "HAIL"
    SMALL_HAIL = "SMALL_HAIL"
    UNDETERMINED = "UNDETERMINED"


@dataclass(frozen=True)
class Weather:
    """
    A weather phenomenon, or precipitation of one or more kinds.

    ``-SHRA`` becomes ``Weather(SHOWERY_PRECIPITATION_LIGHT, {RAIN})``.
    """

    phenomena: WeatherPhenomena
    precipitation: FrozenSet[PrecipitationType] = frozenset()


class CloudAmount(Enum):
    UNKNOWN = "UNKNOWN"
    FEW = "FEW"
    SCATTERED = "SCATTERED"
    BROKEN = "BROKEN"
    OVERCAST = "OVERCAST"
    VARIABLE_FEW_SCATTERED = "VARIABLE_FEW_SCATTERED"
    VARIABLE_SCATTERED_BROKEN = "VARIABLE_SCATTERED_BROKEN"
    VARIABLE_BROKEN_OVERCAST = "VARIABLE_BROKEN_OVERCAST"


class CloudDetails(Enum):
    """Convective type of a cloud layer, or cloud/obscuration type from remarks."""

    UNKNOWN = "UNKNOWN"
    NOT_TOWERING_CUMULUS_NOT_CUMULONIMBUS = "NOT_TOWERING_CUMULUS_NOT_CUMULONIMBUS"
    CUMULONIMBUS = "CUMULONIMBUS"
    TOWERING_CUMULUS = "TOWERING_CUMULUS"
    CUMULUS = "CUMULUS"
    CUMULUS_FRACTUS = "CUMULUS_FRACTUS"
    STRATOCUMULUS = "STRATOCUMULUS"
    NIMBOSTRATUS = "NIMBOSTRATUS"
    STRATUS = "STRATUS"
    STRATUS_FRACTUS = "STRATUS_FRACTUS"
    ALTOSTRATUS = "ALTOSTRATUS"
    ALTOCUMULUS = "ALTOCUMULUS"
    ALTOCUMULUS_CASTELLANUS = "ALTOCUMULUS_CASTELLANUS"
    CIRRUS = "CIRRUS"
    CIRROSTRATUS = "CIRROSTRATUS"
    CIRROCUMULUS = "CIRROCUMULUS"
    BLOWING_SNOW = "BLOWING_SNOW"
    BLOWING_DUST = "BLOWING_DUST"
    BLOWING_SAND = "BLOWING_SAND"
    ICE_CRYSTALS = "ICE_CRYSTALS"
    RAIN = "RAIN"
    DRIZZLE = "DRIZZLE"
    SNOW = "SNOW"
    ICE_PELLETS = "ICE_PELLETS"
    SMOKE = "SMOKE"
    FOG = "FOG"
    MIST = "MIST"
    HAZE = "HAZE"
    VOLCANIC_ASH = "VOLCANIC_ASH"


@dataclass(frozen=True)
class CloudLayer:
    """Cloud layer, or a ground-based/aloft obscuration reported in remarks."""

    amount: CloudAmount = CloudAmount.UNKNOWN
    height: Optional[Height] = None
    details: CloudDetails = CloudDetails.UNKNOWN
    okta: Optional[int] = None


class SkyCondition(Enum):
    UNKNOWN = "UNKNOWN"
    CLEAR_CLR = "CLEAR_CLR"
    CLEAR_SKC = "CLEAR_SKC"
    CLEAR_NCD = "CLEAR_NCD"
    NO_SIGNIFICANT_CLOUD = "NO_SIGNIFICANT_CLOUD"
    CAVOK = "CAVOK"
    CLOUDS = "CLOUDS"
    OBSCURED = "OBSCURED"


@dataclass
class Essentials:
    """
    Wind, visibility, sky condition and weather.

    Used for the current observation, the prevailing TAF forecast and every
    trend forecast.
    """

    wind_direction_degrees: Optional[int] = None
    wind_direction_variable: bool = False
    wind_direction_var_from_degrees: Optional[int] = None
    wind_direction_var_to_degrees: Optional[int] = None
    wind_speed: Optional[Speed] = None
    gust_speed: Optional[Speed] = None
    wind_calm: bool = False
    visibility: Optional[Distance] = None
    cavok: bool = False
    sky_condition: Optional[SkyCondition] = None
    cloud_layers: List[CloudLayer] = field(default_factory=list)
    vertical_visibility: Optional[Height] = None
    weather: List[Weather] = field(default_factory=list)

    def is_empty(self) -> bool:
        """True when no reported value is present (not-reported values count as empty)."""
        return not is_reported(self)
