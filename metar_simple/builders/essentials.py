"""Builder for the essentials block shared by Current, Forecast.prevailing and trends."""

import logging
from typing import Optional

from metar_simple.adapters import CAVOK_VISIBILITY, CodeTables, ValueAdapter, WeatherAdapter
from metar_simple.builders.base import DataBuilder
from metar_simple.groups.groups import CloudGroup, CloudGroupType, WindGroup, WindType
from metar_simple.groups.values import CodedDistance, CodedWeather, ConvectiveType, DirectionType
from metar_simple.models.essentials import (
    CloudLayer,
    Essentials,
    SkyCondition,
    Weather,
    WeatherPhenomena,
)
from metar_simple.models.report import WarningMessage
from metar_simple.models.units import is_reported

logger = logging.getLogger(__name__)

_WIND_FIELDS = (
    "wind_direction_degrees",
    "wind_direction_variable",
    "wind_direction_var_from_degrees",
    "wind_direction_var_to_degrees",
    "wind_speed",
    "gust_speed",
    "wind_calm",
)

# Sky conditions that still accept cloud layers
_LAYERED_SKY = (None, SkyCondition.UNKNOWN, SkyCondition.CLOUDS)

NO_SIGNIFICANT_WEATHER = Weather(WeatherPhenomena.NO_SIGNIFICANT_WEATHER)


class EssentialsBuilder(DataBuilder):
    """
    Merge wind, visibility, sky condition and weather into an ``Essentials``.

    One builder serves every essentials block of a report; each method takes
    the target block, which the driver picks from the current scope (current
    observation, TAF prevailing forecast or the active trend).
    """

    def cavok(self, essentials: Essentials) -> None:
        """CAVOK implies visibility of 10 km or more and no cloud of significance."""
        self._check_open()
        if essentials.cavok:
            return
        if essentials.visibility is not None or essentials.sky_condition is not None:
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        essentials.cavok = True
        essentials.visibility = CAVOK_VISIBILITY
        essentials.sky_condition = SkyCondition.CAVOK

    def wind(self, essentials: Essentials, group: WindGroup) -> None:
        """
        Merge a surface wind group.

        The whole wind is one value: a second, different surface wind is
        discarded with a single warning. A variable sector reported on its
        own completes a wind that has no sector yet.

        Args:
            essentials: Target block
            group: SURFACE_WIND, SURFACE_WIND_CALM,
                SURFACE_WIND_WITH_VARIABLE_SECTOR or VARIABLE_WIND_SECTOR
        """
        self._check_open()
        if group.type == WindType.VARIABLE_WIND_SECTOR:
            self._variable_sector(essentials, group)
            return

        wind = Essentials()
        if group.type == WindType.SURFACE_WIND_CALM:
            wind.wind_calm = True
        else:
            wind.wind_direction_degrees = ValueAdapter.degrees(group.direction)
            wind.wind_direction_variable = group.direction.type == DirectionType.VARIABLE
            wind.wind_speed = ValueAdapter.speed(group.speed)
            if group.gust is not None:
                wind.gust_speed = ValueAdapter.speed(group.gust)
        if group.type == WindType.SURFACE_WIND_WITH_VARIABLE_SECTOR:
            sector = self._sector(group)
            if sector is not None:
                wind.wind_direction_var_from_degrees, wind.wind_direction_var_to_degrees = sector

        current = tuple(getattr(essentials, name) for name in _WIND_FIELDS)
        new = tuple(getattr(wind, name) for name in _WIND_FIELDS)
        if current == new:
            return
        if is_reported(current):
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        for name, value in zip(_WIND_FIELDS, new):
            setattr(essentials, name, value)

    def visibility(self, essentials: Essentials, coded: Optional[CodedDistance]) -> None:
        distance = ValueAdapter.distance(coded)
        if distance is None:
            self._check_open()
            self.log(WarningMessage.INVALID_DISTANCE_RANGE)
            return
        self.set_data(essentials, "visibility", distance)

    def cloud(self, essentials: Essentials, group: CloudGroup) -> None:
        """Merge a cloud layer or a sky condition (NSC, NCD, SKC, CLR)."""
        self._check_open()
        sky = CodeTables.sky_condition(group.amount)
        if group.type != CloudGroupType.CLOUD_LAYER or sky not in _LAYERED_SKY:
            self.set_data(essentials, "sky_condition", sky)
            return
        if essentials.sky_condition not in _LAYERED_SKY:
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        if sky == SkyCondition.CLOUDS or essentials.sky_condition is None:
            essentials.sky_condition = sky
        essentials.cloud_layers.append(self._layer(group))

    def vertical_visibility(self, essentials: Essentials, coded: Optional[CodedDistance]) -> None:
        self._check_open()
        if essentials.sky_condition not in (None, SkyCondition.UNKNOWN):
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        if self.set_data(essentials, "vertical_visibility", ValueAdapter.height(coded)):
            essentials.sky_condition = SkyCondition.OBSCURED

    def weather(self, essentials: Essentials, coded: CodedWeather) -> None:
        """Append a weather phenomenon; nothing may follow NSW."""
        self._check_open()
        weather = WeatherAdapter.weather(coded)
        if weather is None:
            self.log(WarningMessage.INVALID_WEATHER_PHENOMENA)
            return
        if NO_SIGNIFICANT_WEATHER in essentials.weather:
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        essentials.weather.append(weather)

    def nsw(self, essentials: Essentials) -> None:
        self._check_open()
        if essentials.weather == [NO_SIGNIFICANT_WEATHER]:
            return
        if essentials.weather:
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        essentials.weather.append(NO_SIGNIFICANT_WEATHER)

    def build(self) -> None:
        self.finalize()

    # --- Internal builders ---

    def _variable_sector(self, essentials: Essentials, group: WindGroup) -> None:
        sector = self._sector(group)
        if sector is None:
            return
        if essentials.wind_direction_var_from_degrees is not None:
            current = (essentials.wind_direction_var_from_degrees, essentials.wind_direction_var_to_degrees)
            if current != sector:
                self.log(WarningMessage.DUPLICATED_DATA)
            return
        essentials.wind_direction_var_from_degrees, essentials.wind_direction_var_to_degrees = sector

    def _sector(self, group: WindGroup):
        begin = ValueAdapter.degrees(group.var_sector_begin)
        end = ValueAdapter.degrees(group.var_sector_end)
        if begin is None and end is None:
            return None
        if begin is None or end is None:
            self.log(WarningMessage.INVALID_DIRECTION_SECTOR)
            return None
        return begin, end

    @staticmethod
    def _layer(group: CloudGroup) -> CloudLayer:
        if group.cloud_type is not None and group.convective_type == ConvectiveType.NONE:
            details = CodeTables.cloud_details(group.cloud_type)
        else:
            details = CodeTables.convective_details(group.convective_type)
        return CloudLayer(
            amount=CodeTables.cloud_amount(group.amount),
            height=ValueAdapter.height(group.height),
            details=details,
        )
