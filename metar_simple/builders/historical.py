"""Builder for historical remark data: peak wind, extremes, tendency and precipitation."""

import logging
import math
from typing import Optional

from metar_simple.adapters import CodeTables, ValueAdapter, WeatherAdapter
from metar_simple.builders.base import DataBuilder, WarningLog
from metar_simple.groups.groups import (
    MinMaxTemperatureGroup,
    MinMaxTemperatureType,
    PrecipitationAmountType,
    PrecipitationGroup,
    PressureTendencyGroup,
    PressureTendencyType,
    WindGroup,
    WindType,
)
from metar_simple.groups.values import CodedWeather, Number
from metar_simple.models.historical import (
    Historical,
    PressureTendency,
    PressureTrend,
    WeatherEvent,
)
from metar_simple.models.report import WarningMessage
from metar_simple.models.units import is_reported

logger = logging.getLogger(__name__)

# Single-window amounts and the Historical field each one fills
_PRECIPITATION_FIELDS = {
    PrecipitationAmountType.TOTAL_PRECIPITATION_HOURLY: "precipitation_total_1h",
    PrecipitationAmountType.FROZEN_PRECIP_3_OR_6_HOURLY: "precipitation_frozen_3or6h",
    PrecipitationAmountType.FROZEN_PRECIP_3_HOURLY: "precipitation_frozen_3h",
    PrecipitationAmountType.FROZEN_PRECIP_6_HOURLY: "precipitation_frozen_6h",
    PrecipitationAmountType.FROZEN_PRECIP_24_HOURLY: "precipitation_frozen_24h",
    PrecipitationAmountType.SNOW_6_HOURLY: "snow_6h",
    PrecipitationAmountType.ICE_ACCRETION_FOR_LAST_HOUR: "icing_1h",
    PrecipitationAmountType.ICE_ACCRETION_FOR_LAST_3_HOURS: "icing_3h",
    PrecipitationAmountType.ICE_ACCRETION_FOR_LAST_6_HOURS: "icing_6h",
    PrecipitationAmountType.PRECIPITATION_ACCUMULATION_SINCE_LAST_REPORT: "precipitation_since_last_report",
}

# Amounts reported with a total and a short-window value
_TWO_WINDOW_FIELDS = {
    PrecipitationAmountType.SNOW_INCREASING_RAPIDLY: ("snowfall_total", "snowfall_increase_1h"),
    PrecipitationAmountType.RAINFALL_9AM_10MIN: ("rainfall_since_0900_local_time", "rainfall_10m"),
}

_RAPID_TENDENCIES = {
    PressureTendencyType.RISING_RAPIDLY: (PressureTendency.RISING_RAPIDLY, PressureTrend.HIGHER),
    PressureTendencyType.FALLING_RAPIDLY: (PressureTendency.FALLING_RAPIDLY, PressureTrend.LOWER),
}


class HistoricalBuilder(DataBuilder):
    """Build the Historical aggregate from METAR remarks."""

    def __init__(self, warnings: WarningLog):
        super().__init__(warnings)
        self._historical = Historical()

    @property
    def historical(self) -> Historical:
        return self._historical

    def peak_wind(self, group: WindGroup) -> None:
        """Merge a ``PK WND dddff/hhmm`` remark."""
        self._check_open()
        historical = self._historical
        if historical.peak_wind_speed is not None or historical.peak_wind_direction_degrees is not None:
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        historical.peak_wind_direction_degrees = ValueAdapter.degrees(group.direction)
        historical.peak_wind_speed = ValueAdapter.speed(group.speed)
        historical.peak_wind_observed = ValueAdapter.time(group.event_time)

    def wind_shift(self, group: WindGroup) -> None:
        """Merge a ``WSHFT hhmm`` remark, with ``FROPA`` for a frontal passage."""
        self._check_open()
        historical = self._historical
        if historical.wind_shift or historical.wind_shift_front_passage or historical.wind_shift_began:
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        fropa = group.type == WindType.WIND_SHIFT_FROPA
        historical.wind_shift = not fropa
        historical.wind_shift_front_passage = fropa
        historical.wind_shift_began = ValueAdapter.time(group.event_time)

    def min_max_temperature(self, group: MinMaxTemperatureGroup) -> None:
        """Merge observed 6-hourly or 24-hourly temperature extremes; both values are required."""
        self._check_open()
        minimum = ValueAdapter.temperature(group.minimum)
        maximum = ValueAdapter.temperature(group.maximum)
        if not is_reported(minimum) or not is_reported(maximum):
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return
        if group.type == MinMaxTemperatureType.OBSERVED_24_HOURLY:
            names = ("temperature_min_24h", "temperature_max_24h")
        else:
            names = ("temperature_min_6h", "temperature_max_6h")
        current = tuple(getattr(self._historical, name) for name in names)
        if current == (minimum, maximum):
            return
        if current[0] is not None and current[1] is not None:
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        setattr(self._historical, names[0], minimum)
        setattr(self._historical, names[1], maximum)

    def pressure_tendency(self, group: PressureTendencyGroup) -> None:
        """
        Merge a pressure tendency group or a PRESRR/PRESFR remark.

        Example:
            ``52132`` gives INCREASING, HIGHER and a change of 13.2 hPa
            (``Pressure(132, TENTHS_HPA)``).
        """
        self._check_open()
        historical = self._historical
        if (
            historical.pressure_tendency is not None
            or historical.pressure_trend is not None
            or historical.pressure_change_3h is not None
        ):
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        if group.type in _RAPID_TENDENCIES:
            historical.pressure_tendency, historical.pressure_trend = _RAPID_TENDENCIES[group.type]
            return
        historical.pressure_tendency, historical.pressure_trend = CodeTables.pressure_tendency(group.code)
        historical.pressure_change_3h = ValueAdapter.pressure_tenths(group.difference)

    def precipitation(self, group: PrecipitationGroup) -> None:
        """Merge a precipitation, snowfall or ice accretion amount into its window."""
        self._check_open()
        if group.type in _TWO_WINDOW_FIELDS:
            total, recent = _TWO_WINDOW_FIELDS[group.type]
            self.set_data(self._historical, total, ValueAdapter.precipitation(group.amount))
            self.set_data(self._historical, recent, ValueAdapter.precipitation(group.recent))
            return
        name = _PRECIPITATION_FIELDS.get(group.type)
        if name is None:
            logger.debug("%s is not a historical amount", group.type.name)
            return
        if group.type == PrecipitationAmountType.FROZEN_PRECIP_3_OR_6_HOURLY:
            # The observation time does not tell which window applies
            self.log(WarningMessage.INVALID_3H_6H_REPORT_TIME)
        self.set_data(self._historical, name, ValueAdapter.precipitation(group.amount))

    def recent_weather(self, coded: CodedWeather) -> None:
        """Append a recent weather event (``RERA``, or ``RAB15E30`` from remarks)."""
        self._check_open()
        weather = WeatherAdapter.weather(coded)
        if weather is None:
            self.log(WarningMessage.INVALID_WEATHER_PHENOMENA)
            return
        self._historical.recent_weather.append(
            WeatherEvent(WeatherAdapter.event(coded), weather, ValueAdapter.time(coded.time))
        )

    def sunshine_duration(self, minutes: Optional[Number]) -> None:
        self._check_open()
        if minutes is None:
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return
        self.set_data(self._historical, "sunshine_duration_minutes_24h", math.floor(minutes))

    def build(self) -> Historical:
        self.finalize()
        return self._historical
