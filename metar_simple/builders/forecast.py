"""Builder for forecast data: trends, NOSIG, temperature extremes, icing and turbulence."""

import logging
from typing import Optional

from metar_simple.adapters import CodeTables, ValueAdapter
from metar_simple.builders.base import DataBuilder, WarningLog
from metar_simple.groups.groups import (
    LayerForecastGroup,
    MinMaxTemperatureGroup,
    TrendGroup,
    TrendGroupType,
)
from metar_simple.groups.values import CodedPressure
from metar_simple.models.forecast import (
    Forecast,
    IcingForecast,
    Trend,
    TrendType,
    TurbulenceForecast,
)
from metar_simple.models.report import WarningMessage
from metar_simple.models.units import is_reported

logger = logging.getLogger(__name__)

_TREND_TYPES = {
    TrendGroupType.BECMG: TrendType.BECMG,
    TrendGroupType.TEMPO: TrendType.TEMPO,
    TrendGroupType.INTER: TrendType.INTER,
    TrendGroupType.FROM: TrendType.TIMED,
    TrendGroupType.UNTIL: TrendType.TIMED,
    TrendGroupType.AT: TrendType.TIMED,
    TrendGroupType.TIME_SPAN: TrendType.TIMED,
    TrendGroupType.PROB: TrendType.PROB,
}


class ForecastBuilder(DataBuilder):
    """
    Build the Forecast aggregate.

    ``forecast.prevailing`` and the forecast block of each trend are filled
    by the shared ``EssentialsBuilder``; this builder opens trends and
    merges the forecast-only groups.
    """

    def __init__(self, warnings: WarningLog):
        super().__init__(warnings)
        self._forecast = Forecast()

    @property
    def forecast(self) -> Forecast:
        return self._forecast

    def trend(self, group: TrendGroup, metar: bool = False) -> Optional[Trend]:
        """
        Open a new trend.

        Args:
            group: Trend introducer other than NOSIG
            metar: True for trends of a METAR or SPECI

        Returns:
            The new trend, now the target for essentials, or None when the
            trend is rejected because NOSIG was already reported
        """
        self._check_open()
        trend_type = _TREND_TYPES.get(group.type)
        if trend_type is None:
            logger.debug("%s does not open a trend", group.type.name)
            return None
        if self._forecast.no_significant_changes:
            self.log(WarningMessage.DUPLICATED_DATA)
            return None
        trend = Trend(
            type=trend_type,
            probability=group.probability,
            time_from=ValueAdapter.time(group.time_from),
            time_until=ValueAdapter.time(group.time_until),
            time_at=ValueAdapter.time(group.time_at),
            metar=metar,
        )
        self._forecast.trends.append(trend)
        return trend

    def nosig(self) -> None:
        self._check_open()
        if self._forecast.trends:
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        self._forecast.no_significant_changes = True

    def wind_shear_conditions(self) -> None:
        self.set_data(self._forecast, "wind_shear_conditions", True)

    def min_max_temperature(self, group: MinMaxTemperatureGroup) -> None:
        """Merge forecast ``TX``/``TN`` extremes; values and times are all required."""
        self._check_open()
        minimum = ValueAdapter.temperature(group.minimum)
        maximum = ValueAdapter.temperature(group.maximum)
        if (
            group.minimum_time is None
            or group.maximum_time is None
            or not is_reported(minimum)
            or not is_reported(maximum)
        ):
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return
        forecast = self._forecast
        self.set_data(forecast, "min_temperature", minimum)
        self.set_data(forecast, "max_temperature", maximum)
        self.set_data(forecast, "min_temperature_time", ValueAdapter.time(group.minimum_time))
        self.set_data(forecast, "max_temperature_time", ValueAdapter.time(group.maximum_time))

    def layer(self, group: LayerForecastGroup) -> None:
        """Append an icing or turbulence layer forecast; the base height is required."""
        self._check_open()
        base = ValueAdapter.height(group.base_height)
        if not is_reported(base):
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return
        top = ValueAdapter.height(group.top_height)
        icing = CodeTables.icing(group.type)
        if icing is not None:
            severity, icing_type = icing
            self._forecast.icing.append(IcingForecast(severity, icing_type, base, top))
            return
        severity, location, frequency = CodeTables.turbulence(group.type)
        self._forecast.turbulence.append(TurbulenceForecast(severity, location, frequency, base, top))

    def lowest_qnh(self, coded: Optional[CodedPressure]) -> None:
        self._check_open()
        pressure = ValueAdapter.pressure(coded)
        if not is_reported(pressure):
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return
        self.set_data(self._forecast, "lowest_qnh", pressure)

    def build(self) -> Forecast:
        self.finalize()
        return self._forecast
