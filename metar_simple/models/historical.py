"""Data accumulated over past periods, reported in METAR remarks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from metar_simple.models.essentials import Weather
from metar_simple.models.units import (
    Precipitation,
    Pressure,
    Speed,
    Temperature,
    Time,
    is_reported,
)


class PressureTendency(Enum):
    """Characteristic of the pressure tendency over the last 3 hours."""

    UNKNOWN = "UNKNOWN"
    INCREASING_THEN_DECREASING = "INCREASING_THEN_DECREASING"
    INCREASING_MORE_SLOWLY = "INCREASING_MORE_SLOWLY"
    INCREASING = "INCREASING"
    INCREASING_MORE_RAPIDLY = "INCREASING_MORE_RAPIDLY"
    STEADY = "STEADY"
    DECREASING_THEN_INCREASING = "DECREASING_THEN_INCREASING"
    DECREASING_MORE_SLOWLY = "DECREASING_MORE_SLOWLY"
    DECREASING = "DECREASING"
    DECREASING_MORE_RAPIDLY = "DECREASING_MORE_RAPIDLY"
    RISING_RAPIDLY = "RISING_RAPIDLY"
    FALLING_RAPIDLY = "FALLING_RAPIDLY"


class PressureTrend(Enum):
    """Pressure now compared with 3 hours ago."""

    UNKNOWN = "UNKNOWN"
    HIGHER = "HIGHER"
    HIGHER_OR_SAME = "HIGHER_OR_SAME"
    SAME = "SAME"
    LOWER_OR_SAME = "LOWER_OR_SAME"
    LOWER = "LOWER"


class WeatherEventType(Enum):
    BEGAN = "BEGAN"
    ENDED = "ENDED"


@dataclass(frozen=True)
class WeatherEvent:
    """Beginning or ending of weather (e.g. ``RAB15E30``)."""

    event: WeatherEventType
    weather: Weather
    time: Optional[Time] = None


@dataclass
class Historical:
    """Peak wind, wind shift, temperature extremes, pressure tendency and precipitation totals."""

    peak_wind_direction_degrees: Optional[int] = None
    peak_wind_speed: Optional[Speed] = None
    peak_wind_observed: Optional[Time] = None
    wind_shift: bool = False
    wind_shift_front_passage: bool = False
    wind_shift_began: Optional[Time] = None
    temperature_min_6h: Optional[Temperature] = None
    temperature_max_6h: Optional[Temperature] = None
    temperature_min_24h: Optional[Temperature] = None
    temperature_max_24h: Optional[Temperature] = None
    pressure_tendency: Optional[PressureTendency] = None
    pressure_trend: Optional[PressureTrend] = None
    pressure_change_3h: Optional[Pressure] = None
    recent_weather: List[WeatherEvent] = field(default_factory=list)
    rainfall_10m: Optional[Precipitation] = None
    rainfall_since_0900_local_time: Optional[Precipitation] = None
    precipitation_since_last_report: Optional[Precipitation] = None
    precipitation_total_1h: Optional[Precipitation] = None
    precipitation_frozen_3or6h: Optional[Precipitation] = None
    precipitation_frozen_3h: Optional[Precipitation] = None
    precipitation_frozen_6h: Optional[Precipitation] = None
    precipitation_frozen_24h: Optional[Precipitation] = None
    snow_6h: Optional[Precipitation] = None
    snowfall_total: Optional[Precipitation] = None
    snowfall_increase_1h: Optional[Precipitation] = None
    icing_1h: Optional[Precipitation] = None
    icing_3h: Optional[Precipitation] = None
    icing_6h: Optional[Precipitation] = None
    sunshine_duration_minutes_24h: Optional[int] = None

    def is_empty(self) -> bool:
        return not is_reported(self)
