"""Builder for the current observation (everything observed now, outside the essentials)."""

import logging
import math
from typing import Optional

from metar_simple.adapters import CodeTables, ValueAdapter, WeatherAdapter
from metar_simple.builders.base import DataBuilder, WarningLog
from metar_simple.config import DEFAULT_OPTIONS, ConsolidationOptions
from metar_simple.groups.groups import (
    CloudGroup,
    LightningGroup,
    LowMidHighCloudGroup,
    SeaSurfaceGroup,
    VicinityGroup,
    WindGroup,
)
from metar_simple.groups.values import (
    CodedDistance,
    CodedPrecipitation,
    CodedPressure,
    CodedTemperature,
    CodedWeather,
    DistanceModifier,
    Number,
)
from metar_simple.models.current import Current, LightningStrikes, Vicinity, WindShear
from metar_simple.models.essentials import CloudLayer
from metar_simple.models.report import WarningMessage
from metar_simple.models.units import (
    DistanceRange,
    Height,
    HeightUnit,
    Temperature,
    TemperatureUnit,
    is_reported,
)

logger = logging.getLogger(__name__)

# Magnus formula coefficients (Alduchov and Eskridge)
_MAGNUS_B = 17.625
_MAGNUS_C = 243.04

# Largest difference, in degrees Celsius, between a body temperature and its
# tenth-degree remark value for the latter to refine the former
_PRECISE_TOLERANCE = 1.0

_VICINITY_RANGE = CodedDistance(modifier=DistanceModifier.VICINITY)


def relative_humidity(air_temperature: Temperature, dew_point: Temperature) -> Optional[int]:
    """
    Relative humidity in percent, rounded down.

    Example:
        >>> relative_humidity(Temperature(7), Temperature(3))
        75
    """
    t = air_temperature.to_unit(TemperatureUnit.C)
    td = dew_point.to_unit(TemperatureUnit.C)
    if t is None or td is None:
        return None
    saturation = math.exp(_MAGNUS_B * t / (_MAGNUS_C + t))
    actual = math.exp(_MAGNUS_B * td / (_MAGNUS_C + td))
    return math.floor(100 * actual / saturation)


class CurrentBuilder(DataBuilder):
    """
    Build the Current aggregate, except its essentials block.

    The essentials block (``current.weather_data``) is filled by the shared
    ``EssentialsBuilder``; relative humidity is derived on ``build()`` from
    the final air temperature and dew point.
    """

    def __init__(self, warnings: WarningLog, options: ConsolidationOptions = DEFAULT_OPTIONS):
        super().__init__(warnings)
        self._current = Current()
        self._options = options

    @property
    def current(self) -> Current:
        return self._current

    def variable_visibility(self, minimum: Optional[CodedDistance], maximum: Optional[CodedDistance]) -> None:
        self._check_open()
        low = ValueAdapter.distance(minimum)
        high = ValueAdapter.distance(maximum)
        if low is None or high is None or not is_reported(low) or not is_reported(high):
            self.log(WarningMessage.INVALID_DISTANCE_RANGE)
            return
        self.set_data(self._current, "variable_visibility", DistanceRange(minimum=low, maximum=high))

    def temperature(self, air: Optional[CodedTemperature], dew: Optional[CodedTemperature]) -> None:
        """
        Merge air temperature and dew point.

        Tenth-degree values from ``Tsnnnsnnn`` remarks refine body values
        they agree with (within one degree) without a warning.
        """
        self._check_open()
        self._set_temperature("air_temperature", ValueAdapter.temperature(air))
        if dew is not None:
            self._set_temperature("dew_point", ValueAdapter.temperature(dew))

    def qnh(self, coded: Optional[CodedPressure]) -> None:
        self.set_data(self._current, "pressure_sea_level", ValueAdapter.pressure(coded))

    def sea_level_pressure(self, coded: Optional[CodedPressure]) -> None:
        """Fill the sea-level pressure from an SLP remark if the body carried none."""
        self._check_open()
        if not self._options.remark_sea_level_pressure:
            logger.debug("Ignoring sea level pressure remark")
            return
        if self._current.pressure_sea_level is None:
            self._current.pressure_sea_level = ValueAdapter.pressure(coded)

    def qfe(self, coded: Optional[CodedPressure]) -> None:
        self.set_data(self._current, "pressure_ground_level", ValueAdapter.pressure(coded))

    def sea_surface(self, group: SeaSurfaceGroup) -> None:
        self.set_data(self._current, "sea_surface_temperature", ValueAdapter.temperature(group.temperature))
        if group.waves is not None:
            self.set_data(self._current, "wave_height", ValueAdapter.wave_height(group.waves))

    def snow_depth(self, coded: Optional[CodedPrecipitation]) -> None:
        self.set_data(self._current, "snow_depth_on_ground", ValueAdapter.precipitation(coded))

    def snow_water_equivalent(self, coded: Optional[CodedPrecipitation]) -> None:
        self.set_data(self._current, "snow_water_equivalent", ValueAdapter.precipitation(coded))

    def snow_increasing_rapidly(self) -> None:
        self.set_data(self._current, "snow_increasing_rapidly", True)

    def wind_shear(self, group: WindGroup) -> None:
        """Append wind shear at a height (``WS020/05065KT``); all three values are required."""
        self._check_open()
        height = ValueAdapter.height(group.height)
        direction = ValueAdapter.degrees(group.direction)
        speed = ValueAdapter.speed(group.speed)
        if not is_reported(height) or direction is None or not is_reported(speed):
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return
        self._current.wind_shear.append(WindShear(height, direction, speed))

    def obscuration(self, group: CloudGroup) -> None:
        self._check_open()
        if group.cloud_type is None:
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return
        self._current.obscurations.append(
            CloudLayer(
                amount=CodeTables.cloud_amount(group.amount),
                height=ValueAdapter.height(group.height),
                details=CodeTables.cloud_details(group.cloud_type),
            )
        )

    def cloud_types(self, group: LowMidHighCloudGroup) -> None:
        """Merge the ``8/LMH`` low, middle and high cloud type digits."""
        self._check_open()
        current = self._current
        if (
            current.low_cloud_layer is not None
            or current.mid_cloud_layer is not None
            or current.high_cloud_layer is not None
        ):
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        current.low_cloud_layer = CodeTables.low_cloud_layer(group.low)
        current.mid_cloud_layer = CodeTables.mid_cloud_layer(group.mid)
        current.high_cloud_layer = CodeTables.high_cloud_layer(group.high)

    def vicinity(self, group: VicinityGroup) -> None:
        self._check_open()
        self._current.phenomena_in_vicinity.append(
            Vicinity(
                phenomena=CodeTables.vicinity(group.type),
                distance=self._distance_range(group.distance),
                moving=ValueAdapter.cardinal_direction(group.moving),
                directions=frozenset(ValueAdapter.cardinal_direction(d) for d in group.directions),
            )
        )

    def vicinity_weather(self, coded: CodedWeather) -> None:
        """Weather reported with the VC qualifier, 5 to 10 nautical miles away."""
        self._check_open()
        weather = WeatherAdapter.weather(coded)
        phenomena = CodeTables.vicinity_weather(weather.phenomena) if weather is not None else None
        if phenomena is None:
            self.log(WarningMessage.INVALID_WEATHER_PHENOMENA)
            return
        self._current.phenomena_in_vicinity.append(
            Vicinity(phenomena, distance=ValueAdapter.distance_range(_VICINITY_RANGE))
        )

    def lightning(self, group: LightningGroup) -> None:
        self._check_open()
        types = [CodeTables.lightning_type(t) for t in group.types]
        if None in types:
            self.log(WarningMessage.INVALID_LIGHTNING_TYPE)
            return
        self._current.lightning_strikes.append(
            LightningStrikes(
                frequency=CodeTables.lightning_frequency(group.frequency),
                type=frozenset(types),
                distance=self._distance_range(group.distance),
                directions=frozenset(ValueAdapter.cardinal_direction(d) for d in group.directions),
            )
        )

    def density_altitude(self, value: Optional[Number]) -> None:
        self._check_open()
        if value is None:
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return
        self.set_data(self._current, "density_altitude", Height(math.floor(value), HeightUnit.FEET))

    def hailstone_size(self, inches: Optional[Number]) -> None:
        self._check_open()
        if inches is None:
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return
        self.set_data(self._current, "hailstone_size_quarters_inch", math.floor(inches * 4))

    def frost_on_instrument(self) -> None:
        self.set_data(self._current, "frost_on_instrument", True)

    def build(self) -> Current:
        current = self._current
        if (
            self._options.derive_relative_humidity
            and current.air_temperature is not None
            and current.dew_point is not None
        ):
            current.relative_humidity = relative_humidity(current.air_temperature, current.dew_point)
        self.finalize()
        return current

    # --- Internal builders ---

    def _set_temperature(self, name: str, value: Temperature) -> None:
        existing = getattr(self._current, name)
        if value.unit == TemperatureUnit.TENTH_C and is_reported(existing) and is_reported(value):
            difference = abs(value.to_unit(TemperatureUnit.C) - existing.to_unit(TemperatureUnit.C))
            if difference <= _PRECISE_TOLERANCE:
                setattr(self._current, name, value)
                return
        self.set_data(self._current, name, value)

    @staticmethod
    def _distance_range(coded: Optional[CodedDistance]) -> Optional[DistanceRange]:
        if coded is None:
            return None
        return ValueAdapter.distance_range(coded)
