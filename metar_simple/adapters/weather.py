"""Conversion of coded weather phenomena to domain weather."""

import logging
from typing import Optional, Tuple

from metar_simple.groups.values import (
    CodedWeather,
    WeatherCode,
    WeatherDescriptor,
    WeatherEventCode,
    WeatherQualifier,
)
from metar_simple.models.essentials import PrecipitationType, Weather, WeatherPhenomena
from metar_simple.models.historical import WeatherEventType

logger = logging.getLogger(__name__)

Q = WeatherQualifier
D = WeatherDescriptor
W = WeatherCode
P = WeatherPhenomena

# Non-precipitation phenomena keyed by (qualifier, descriptor, weather codes).
# RE and VC qualifiers are stripped to NONE before the lookup.
_PHENOMENA = {
    (Q.NONE, D.SHALLOW, (W.FOG,)): P.SHALLOW_FOG,
    (Q.NONE, D.PARTIAL, (W.FOG,)): P.PARTIAL_FOG,
    (Q.NONE, D.PATCHES, (W.FOG,)): P.PATCHES_FOG,
    (Q.NONE, D.FREEZING, (W.FOG,)): P.FREEZING_FOG,
    (Q.NONE, D.NONE, (W.FOG,)): P.FOG,
    (Q.NONE, D.LOW_DRIFTING, (W.DUST,)): P.DRIFTING_DUST,
    (Q.NONE, D.BLOWING, (W.DUST,)): P.BLOWING_DUST,
    (Q.NONE, D.NONE, (W.DUST,)): P.DUST,
    (Q.NONE, D.LOW_DRIFTING, (W.SAND,)): P.DRIFTING_SAND,
    (Q.NONE, D.BLOWING, (W.SAND,)): P.BLOWING_SAND,
    (Q.NONE, D.NONE, (W.SAND,)): P.SAND,
    (Q.NONE, D.LOW_DRIFTING, (W.SNOW,)): P.DRIFTING_SNOW,
    (Q.NONE, D.BLOWING, (W.SNOW,)): P.BLOWING_SNOW,
    (Q.NONE, D.BLOWING, (W.SPRAY,)): P.BLOWING_SPRAY,
    (Q.NONE, D.THUNDERSTORM, ()): P.THUNDERSTORM,
    (Q.NONE, D.NONE, (W.ICE_CRYSTALS,)): P.ICE_CRYSTALS,
    (Q.NONE, D.NONE, (W.MIST,)): P.MIST,
    (Q.NONE, D.NONE, (W.SMOKE,)): P.SMOKE,
    (Q.NONE, D.NONE, (W.VOLCANIC_ASH,)): P.VOLCANIC_ASH,
    (Q.NONE, D.NONE, (W.HAZE,)): P.HAZE,
    (Q.NONE, D.NONE, (W.DUST_WHIRLS,)): P.DUST_WHIRLS,
    (Q.NONE, D.NONE, (W.SQUALLS,)): P.SQUALLS,
    (Q.NONE, D.NONE, (W.FUNNEL_CLOUD,)): P.FUNNEL_CLOUD,
    (Q.HEAVY, D.NONE, (W.FUNNEL_CLOUD,)): P.TORNADO,
    (Q.NONE, D.NONE, (W.DUSTSTORM,)): P.DUST_STORM,
    (Q.NONE, D.NONE, (W.SANDSTORM,)): P.SAND_STORM,
    (Q.NONE, D.NONE, (W.DUSTSTORM, W.SANDSTORM)): P.DUST_SAND_STORM,
    (Q.NONE, D.NONE, (W.SANDSTORM, W.DUSTSTORM)): P.DUST_SAND_STORM,
    (Q.HEAVY, D.NONE, (W.DUSTSTORM,)): P.HEAVY_DUST_STORM,
    (Q.HEAVY, D.NONE, (W.SANDSTORM,)): P.HEAVY_SAND_STORM,
    (Q.HEAVY, D.NONE, (W.DUSTSTORM, W.SANDSTORM)): P.HEAVY_DUST_SAND_STORM,
    (Q.HEAVY, D.NONE, (W.SANDSTORM, W.DUSTSTORM)): P.HEAVY_DUST_SAND_STORM,
}

# Precipitation intensity keyed by (qualifier, descriptor); no qualifier is moderate
_PRECIPITATION = {
    (Q.LIGHT, D.NONE): P.PRECIPITATION_LIGHT,
    (Q.MODERATE, D.NONE): P.PRECIPITATION_MODERATE,
    (Q.HEAVY, D.NONE): P.PRECIPITATION_HEAVY,
    (Q.LIGHT, D.FREEZING): P.FREEZING_PRECIPITATION_LIGHT,
    (Q.MODERATE, D.FREEZING): P.FREEZING_PRECIPITATION_MODERATE,
    (Q.HEAVY, D.FREEZING): P.FREEZING_PRECIPITATION_HEAVY,
    (Q.LIGHT, D.SHOWERS): P.SHOWERY_PRECIPITATION_LIGHT,
    (Q.MODERATE, D.SHOWERS): P.SHOWERY_PRECIPITATION_MODERATE,
    (Q.HEAVY, D.SHOWERS): P.SHOWERY_PRECIPITATION_HEAVY,
    (Q.LIGHT, D.THUNDERSTORM): P.THUNDERSTORM_PRECIPITATION_LIGHT,
    (Q.MODERATE, D.THUNDERSTORM): P.THUNDERSTORM_PRECIPITATION_MODERATE,
    (Q.HEAVY, D.THUNDERSTORM): P.THUNDERSTORM_PRECIPITATION_HEAVY,
}

_PRECIPITATION_TYPES = {
    W.DRIZZLE: PrecipitationType.DRIZZLE,
    W.RAIN: PrecipitationType.RAIN,
    W.SNOW: PrecipitationType.SNOW,
    W.SNOW_GRAINS: PrecipitationType.SNOW_GRAINS,
    W.ICE_PELLETS: PrecipitationType.ICE_PELLETS,
    W.HAIL: PrecipitationType.HAIL,
    W.SMALL_HAIL: PrecipitationType.SMALL_HAIL,
    W.UNDETERMINED: PrecipitationType.UNDETERMINED,
}

_STRIPPED_QUALIFIERS = (Q.RECENT, Q.VICINITY)


class WeatherAdapter:
    """
    Map coded weather to ``Weather`` values.

    A combination that is neither a known phenomenon nor a valid list of
    precipitation types is invalid and maps to None; callers record the
    warning.

    Example:
        >>> WeatherAdapter.weather(CodedWeather(Q.LIGHT, D.SHOWERS, (W.RAIN,))).phenomena
        <WeatherPhenomena.SHOWERY_PRECIPITATION_LIGHT: 'SHOWERY_PRECIPITATION_LIGHT'>
    """

    @classmethod
    def weather(cls, coded: CodedWeather) -> Optional[Weather]:
        qualifier = coded.qualifier
        if (
            qualifier == Q.VICINITY
            and coded.descriptor == D.SHOWERS
            and not coded.weather
        ):
            return Weather(P.PRECIPITATION)
        if qualifier in _STRIPPED_QUALIFIERS:
            qualifier = Q.NONE
        if W.NOT_REPORTED in coded.weather:
            return Weather(P.UNKNOWN)

        phenomena = _PHENOMENA.get((qualifier, coded.descriptor, tuple(coded.weather)))
        if phenomena is not None:
            return Weather(phenomena)
        return cls._precipitation(qualifier, coded.descriptor, coded.weather)

    @classmethod
    def event(cls, coded: CodedWeather) -> WeatherEventType:
        if coded.event == WeatherEventCode.BEGINNING:
            return WeatherEventType.BEGAN
        return WeatherEventType.ENDED

    @classmethod
    def is_vicinity(cls, coded: CodedWeather) -> bool:
        return coded.qualifier == Q.VICINITY

    # --- Internal builders ---

    @classmethod
    def _precipitation(
        cls,
        qualifier: WeatherQualifier,
        descriptor: WeatherDescriptor,
        codes: Tuple[WeatherCode, ...],
    ) -> Optional[Weather]:
        if not codes:
            logger.debug("No weather codes with descriptor %s", descriptor.name)
            return None
        if qualifier == Q.NONE:
            qualifier = Q.MODERATE
        phenomena = _PRECIPITATION.get((qualifier, descriptor))
        if phenomena is None:
            return None
        types = []
        for code in codes:
            precipitation = _PRECIPITATION_TYPES.get(code)
            if precipitation is None:
                logger.debug("%s is not precipitation", code.name)
                return None
            types.append(precipitation)
        return Weather(phenomena, frozenset(types))
