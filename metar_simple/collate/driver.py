"""
Consolidation of a report's group sequence into the six-aggregate snapshot.

A single left-to-right pass: each group is classified, the scope is
advanced, and the group is dispatched on its class to the builder owning
the aggregate it updates.
"""

import logging
from typing import Iterable, Optional, get_args

from metar_simple.adapters import WeatherAdapter
from metar_simple.builders import (
    AerodromeBuilder,
    CurrentBuilder,
    EssentialsBuilder,
    ForecastBuilder,
    HistoricalBuilder,
    ReportBuilder,
    StationBuilder,
    WarningLog,
)
from metar_simple.collate.scope import GroupRole, Scope, ScopeTracker
from metar_simple.config import DEFAULT_OPTIONS, ConsolidationOptions
from metar_simple.groups.groups import (
    CloudGroup,
    CloudGroupType,
    Group,
    KeywordGroup,
    KeywordType,
    LayerForecastGroup,
    LightningGroup,
    LocationGroup,
    LowMidHighCloudGroup,
    MinMaxTemperatureGroup,
    MinMaxTemperatureType,
    MiscGroup,
    MiscType,
    PrecipitationAmountType,
    PrecipitationGroup,
    PressureGroup,
    PressureTendencyGroup,
    PressureType,
    ReportHeader,
    ReportTimeGroup,
    RunwayStateGroup,
    SeaSurfaceGroup,
    TemperatureGroup,
    TemperatureType,
    TrendGroup,
    TrendGroupType,
    UnknownGroup,
    VicinityGroup,
    VisibilityGroup,
    VisibilityType,
    WeatherGroup,
    WeatherGroupType,
    WindGroup,
    WindType,
)
from metar_simple.models.essentials import Essentials
from metar_simple.models.forecast import Trend, TrendType
from metar_simple.models.report import Report, ReportError, WarningMessage
from metar_simple.models.simple import Simple
from metar_simple.models.station import MissingData

logger = logging.getLogger(__name__)

_REPORT_KEYWORDS = frozenset(
    [
        KeywordType.METAR,
        KeywordType.SPECI,
        KeywordType.TAF,
        KeywordType.AMD,
        KeywordType.NIL,
        KeywordType.CNL,
        KeywordType.COR,
        KeywordType.AUTO,
    ]
)

_SURFACE_WIND = frozenset(
    [
        WindType.SURFACE_WIND,
        WindType.SURFACE_WIND_CALM,
        WindType.SURFACE_WIND_WITH_VARIABLE_SECTOR,
        WindType.VARIABLE_WIND_SECTOR,
    ]
)

_OBSERVED_SNOW = {
    PrecipitationAmountType.SNOW_DEPTH_ON_GROUND: "snow_depth",
    PrecipitationAmountType.WATER_EQUIV_OF_SNOW_ON_GROUND: "snow_water_equivalent",
}

_MISSING_PRECIPITATION = frozenset(
    [
        PrecipitationAmountType.PNO,
        PrecipitationAmountType.FZRANO,
        PrecipitationAmountType.ICG_MISG,
        PrecipitationAmountType.PCPN_MISG,
    ]
)

_MISSING_WEATHER = frozenset(
    [
        WeatherGroupType.PWINO,
        WeatherGroupType.TSNO,
        WeatherGroupType.TS_LTNG_TEMPO_UNAVBL,
        WeatherGroupType.WX_MISG,
    ]
)

_VARIABLE_VISIBILITY = {
    VisibilityType.VARIABLE_DIRECTIONAL: VisibilityType.DIRECTIONAL,
    VisibilityType.VARIABLE_RUNWAY: VisibilityType.RUNWAY,
    VisibilityType.VARIABLE_RVR: VisibilityType.RVR,
    VisibilityType.VARIABLE_SECTOR: VisibilityType.SECTOR,
}

_MISSING_VISIBILITY = frozenset([VisibilityType.VIS_MISG, VisibilityType.RVR_MISG, VisibilityType.RVRNO])

# Group class -> Consolidator method merging it
_HANDLERS = {
    KeywordGroup: "_keyword",
    LocationGroup: "_location",
    ReportTimeGroup: "_report_time",
    TrendGroup: "_trend_group",
    WindGroup: "_wind",
    VisibilityGroup: "_visibility",
    CloudGroup: "_cloud",
    WeatherGroup: "_weather",
    TemperatureGroup: "_temperature",
    PressureGroup: "_pressure",
    RunwayStateGroup: "_runway_state",
    SeaSurfaceGroup: "_sea_surface",
    MinMaxTemperatureGroup: "_min_max_temperature",
    PrecipitationGroup: "_precipitation",
    LayerForecastGroup: "_layer_forecast",
    PressureTendencyGroup: "_pressure_tendency",
    LowMidHighCloudGroup: "_cloud_types",
    LightningGroup: "_lightning",
    VicinityGroup: "_vicinity",
    MiscGroup: "_misc",
    UnknownGroup: "_unknown",
}


def _check_handlers() -> None:
    """Fail at import if a group class has no handler, or a handler no group class."""
    groups = set(get_args(Group))
    handled = set(_HANDLERS)
    if groups != handled:
        missing = sorted(cls.__name__ for cls in groups - handled)
        extra = sorted(cls.__name__ for cls in handled - groups)
        raise TypeError(f"Group dispatch mismatch: missing {missing}, extra {extra}")


_check_handlers()


class Consolidator:
    """
    Consolidate the groups of one report.

    A Consolidator is used once: create it with the report header, then
    call ``consolidate()`` with the group sequence.

    Example:
        >>> simple = Consolidator(ReportHeader(ReportType.METAR)).consolidate(groups)
        >>> simple.station.icao_code
        'SCCH'
    """

    def __init__(self, header: ReportHeader, options: ConsolidationOptions = DEFAULT_OPTIONS):
        self.header = header
        self.options = options
        self.warnings = WarningLog()
        self.report = ReportBuilder(header, self.warnings)
        self.station = StationBuilder(self.warnings)
        self.essentials = EssentialsBuilder(self.warnings)
        self.aerodrome = AerodromeBuilder(self.warnings)
        self.current = CurrentBuilder(self.warnings, options)
        self.historical = HistoricalBuilder(self.warnings)
        self.forecast = ForecastBuilder(self.warnings)
        self.tracker = ScopeTracker()
        self._trend: Optional[Trend] = None
        self._error: Optional[ReportError] = None

    def consolidate(self, groups: Iterable[Group]) -> Simple:
        groups = list(groups)
        if self.header.error != ReportError.NO_ERROR:
            return self._fail(self.header.error)
        if not groups:
            return self._fail(ReportError.EMPTY_REPORT)
        if len(groups) > self.options.max_groups:
            return self._fail(ReportError.REPORT_TOO_LARGE)

        for group in groups:
            self.warnings.current_id = group.raw
            role = self.tracker.classify(group)
            if self.tracker.in_header and role != GroupRole.HEADER:
                error = self._close_header()
                if error is not None:
                    return self._fail(error)
                if self.report.is_nil_or_cancelled:
                    return self._fail(ReportError.NIL_OR_CNL_FORMAT)
            if not self.tracker.advance(role):
                self._reject(group)
                continue
            logger.debug("Merging %s in %s", group.raw, self.tracker.scope.name)
            getattr(self, _HANDLERS[type(group)])(group)
            if self._error is not None:
                return self._fail(self._error)

        if self.tracker.in_header:
            error = self._close_header()
            if error is not None:
                return self._fail(error)
            if not self.report.is_nil_or_cancelled:
                return self._fail(ReportError.UNEXPECTED_REPORT_END)
        return self._build()

    # --- Internal builders ---

    def _close_header(self) -> Optional[ReportError]:
        if self.report.type is None:
            return ReportError.UNKNOWN_REPORT_TYPE
        if not self.station.has_location:
            return ReportError.REPORT_HEADER_FORMAT
        self.report.close_header()
        return None

    def _build(self) -> Simple:
        self.essentials.build()
        return Simple(
            report=self.report.build(),
            station=self.station.build(),
            aerodrome=self.aerodrome.build(),
            current=self.current.build(),
            historical=self.historical.build(),
            forecast=self.forecast.build(),
        )

    def _fail(self, error: ReportError) -> Simple:
        logger.debug("Report error %s", error.name)
        return Simple(report=self.report.build_error(error))

    def _reject(self, group: Group) -> None:
        """Keep a group that has no place where it appears as plain text."""
        self.warnings.add(WarningMessage.INVALID_GROUP)
        self.report.plain_text(group.raw)

    def _essentials_target(self) -> Optional[Essentials]:
        """Essentials block for the current scope, or None where essentials are not allowed."""
        scope = self.tracker.scope
        if scope == Scope.TREND and self._trend is not None:
            return self._trend.forecast
        if self.report.is_forecast:
            if scope == Scope.REMARK:
                return None
            return self.forecast.forecast.prevailing
        return self.current.current.weather_data

    def _observed(self, group: Group) -> bool:
        """True if observed data may be merged; observations are not allowed in a TAF."""
        if self.report.is_forecast:
            self._reject(group)
            return False
        return True

    def _forecasted(self, group: Group) -> bool:
        """True if forecast-only data may be merged: TAF outside remarks."""
        if not self.report.is_forecast or self.tracker.scope == Scope.REMARK:
            self._reject(group)
            return False
        return True

    def _keyword(self, group: KeywordGroup) -> None:
        if group.type in _REPORT_KEYWORDS:
            self.report.keyword(group)
        elif group.type == KeywordType.CAVOK:
            target = self._essentials_target()
            if target is None:
                self._reject(group)
                return
            self.essentials.cavok(target)
        elif group.type == KeywordType.RMK:
            logger.debug("Remarks start")
        else:
            if group.type == KeywordType.MAINTENANCE_INDICATOR and self.report.is_forecast:
                self._error = ReportError.GROUP_NOT_ALLOWED
                return
            self.station.keyword(group.type)

    def _location(self, group: LocationGroup) -> None:
        self.station.location(group.icao)

    def _report_time(self, group: ReportTimeGroup) -> None:
        self.report.report_time(group.time)

    def _trend_group(self, group: TrendGroup) -> None:
        if self.tracker.in_header:
            self.report.applicable_period(group)
            return
        if group.type == TrendGroupType.NOSIG:
            self.forecast.nosig()
            # Groups following NOSIG belong to no trend and are dropped
            self._trend = Trend(TrendType.TIMED)
            return
        trend = self.forecast.trend(group, metar=not self.report.is_forecast)
        if trend is None:
            # Groups of a rejected trend are dropped along with it
            trend = Trend(TrendType.TIMED)
        self._trend = trend

    def _wind(self, group: WindGroup) -> None:
        kind = group.type
        if kind in _SURFACE_WIND:
            target = self._essentials_target()
            if target is None:
                self._reject(group)
                return
            self.essentials.wind(target, group)
        elif kind == WindType.WND_MISG:
            self.station.missing(MissingData.WND_MISG)
        elif kind == WindType.WIND_SHEAR_IN_LOWER_LAYERS:
            self.aerodrome.wind_shear_lower_layers(group.runway)
        elif kind == WindType.WSCONDS:
            if self._forecasted(group):
                self.forecast.wind_shear_conditions()
        elif self._observed(group):
            if kind == WindType.WIND_SHEAR:
                self.current.wind_shear(group)
            elif kind == WindType.PEAK_WIND:
                self.historical.peak_wind(group)
            else:
                self.historical.wind_shift(group)

    def _visibility(self, group: VisibilityGroup) -> None:
        kind = group.type
        variable = kind in _VARIABLE_VISIBILITY
        kind = _VARIABLE_VISIBILITY.get(kind, kind)
        maximum = group.max_visibility
        if kind in (VisibilityType.PREVAILING, VisibilityType.PREVAILING_NDV):
            target = self._essentials_target()
            if target is None:
                self._reject(group)
                return
            if kind == VisibilityType.PREVAILING_NDV:
                self.station.no_directional_variation()
            self.essentials.visibility(target, group.visibility)
        elif kind == VisibilityType.VARIABLE_PREVAILING:
            if self._observed(group):
                self.current.variable_visibility(group.visibility, maximum)
        elif kind == VisibilityType.DIRECTIONAL:
            self.aerodrome.direction_visibility(group.direction, group.visibility, maximum, variable)
        elif kind == VisibilityType.SECTOR:
            for direction in group.directions:
                self.aerodrome.direction_visibility(direction, group.visibility, maximum, variable)
        elif kind == VisibilityType.RUNWAY:
            self.aerodrome.runway_visibility(group.runway, group.visibility, maximum, variable)
        elif kind == VisibilityType.RVR:
            self.aerodrome.rvr(group.runway, group.visibility, group.trend, maximum, variable)
        elif kind == VisibilityType.SURFACE:
            self.aerodrome.surface_visibility(group.visibility)
        elif kind == VisibilityType.TOWER:
            self.aerodrome.tower_visibility(group.visibility)
        elif kind == VisibilityType.VISNO:
            self.station.visno(group.runway, group.direction)
        elif kind in _MISSING_VISIBILITY:
            self.station.missing(MissingData[kind.name])

    def _cloud(self, group: CloudGroup) -> None:
        kind = group.type
        if kind in (CloudGroupType.CLOUD_LAYER, CloudGroupType.NO_CLOUDS, CloudGroupType.VERTICAL_VISIBILITY):
            target = self._essentials_target()
            if target is None:
                self._reject(group)
            elif kind == CloudGroupType.VERTICAL_VISIBILITY:
                self.essentials.vertical_visibility(target, group.height)
            else:
                self.essentials.cloud(target, group)
        elif kind == CloudGroupType.CEILING:
            self.aerodrome.ceiling(group.runway, group.direction, group.height)
        elif kind == CloudGroupType.VARIABLE_CEILING:
            self.aerodrome.variable_ceiling(group.runway, group.direction, group.min_height, group.max_height)
        elif kind == CloudGroupType.CHINO:
            self.station.chino(group.runway, group.direction)
        elif kind == CloudGroupType.CLD_MISG:
            self.station.missing(MissingData.CLD_MISG)
        elif self._observed(group):
            self.current.obscuration(group)

    def _weather(self, group: WeatherGroup) -> None:
        kind = group.type
        if kind in _MISSING_WEATHER:
            self.station.missing(MissingData[kind.name])
            return
        if kind in (WeatherGroupType.RECENT, WeatherGroupType.EVENT):
            if self._observed(group):
                for coded in group.phenomena:
                    self.historical.recent_weather(coded)
            return
        target = self._essentials_target()
        if target is None:
            self._reject(group)
            return
        if kind == WeatherGroupType.NSW:
            self.essentials.nsw(target)
            return
        # Vicinity weather is an observation; in forecasts the adapter drops the qualifier
        observed = not self.report.is_forecast and self.tracker.scope != Scope.TREND
        for coded in group.phenomena:
            if observed and WeatherAdapter.is_vicinity(coded):
                self.current.vicinity_weather(coded)
            else:
                self.essentials.weather(target, coded)

    def _temperature(self, group: TemperatureGroup) -> None:
        if group.type != TemperatureType.TEMPERATURE_AND_DEW_POINT:
            self.station.missing(MissingData[group.type.name])
        elif self._observed(group):
            self.current.temperature(group.air_temperature, group.dew_point)

    def _pressure(self, group: PressureGroup) -> None:
        kind = group.type
        if kind in (PressureType.SLPNO, PressureType.PRES_MISG):
            self.station.missing(MissingData[kind.name])
        elif kind == PressureType.FORECAST_LOWEST_QNH:
            if self._forecasted(group):
                self.forecast.lowest_qnh(group.pressure)
        elif self._observed(group):
            if kind == PressureType.OBSERVED_QNH:
                self.current.qnh(group.pressure)
            elif kind == PressureType.OBSERVED_SLP:
                self.current.sea_level_pressure(group.pressure)
            else:
                self.current.qfe(group.pressure)

    def _runway_state(self, group: RunwayStateGroup) -> None:
        self.aerodrome.runway_state(group)

    def _sea_surface(self, group: SeaSurfaceGroup) -> None:
        if self._observed(group):
            self.current.sea_surface(group)

    def _min_max_temperature(self, group: MinMaxTemperatureGroup) -> None:
        if group.type == MinMaxTemperatureType.FORECAST:
            if self._forecasted(group):
                self.forecast.min_max_temperature(group)
        elif self._observed(group):
            self.historical.min_max_temperature(group)

    def _precipitation(self, group: PrecipitationGroup) -> None:
        kind = group.type
        if kind in _MISSING_PRECIPITATION:
            self.station.missing(MissingData[kind.name])
        elif not self._observed(group):
            return
        elif kind in _OBSERVED_SNOW:
            getattr(self.current, _OBSERVED_SNOW[kind])(group.amount)
        else:
            self.historical.precipitation(group)
            if kind == PrecipitationAmountType.SNOW_INCREASING_RAPIDLY:
                self.current.snow_increasing_rapidly()

    def _layer_forecast(self, group: LayerForecastGroup) -> None:
        if self._forecasted(group):
            self.forecast.layer(group)

    def _pressure_tendency(self, group: PressureTendencyGroup) -> None:
        if self._observed(group):
            self.historical.pressure_tendency(group)

    def _cloud_types(self, group: LowMidHighCloudGroup) -> None:
        if self._observed(group):
            self.current.cloud_types(group)

    def _lightning(self, group: LightningGroup) -> None:
        if self._observed(group):
            self.current.lightning(group)

    def _vicinity(self, group: VicinityGroup) -> None:
        if self._observed(group):
            self.current.vicinity(group)

    def _misc(self, group: MiscGroup) -> None:
        kind = group.type
        if kind == MiscType.CORRECTED_WEATHER_OBSERVATION:
            number = int(group.value) if group.value is not None else None
            self.report.correction_number(number)
        elif kind.name.startswith("COLOUR_CODE_"):
            self.aerodrome.colour_code(kind)
        elif not self._observed(group):
            return
        elif kind == MiscType.SUNSHINE_DURATION_MINUTES:
            self.historical.sunshine_duration(group.value)
        elif kind == MiscType.DENSITY_ALTITUDE:
            self.current.density_altitude(group.value)
        elif kind == MiscType.HAILSTONE_SIZE:
            self.current.hailstone_size(group.value)
        elif kind == MiscType.FROIN:
            self.current.frost_on_instrument()

    def _unknown(self, group: UnknownGroup) -> None:
        self.report.plain_text(group.raw)


def simplify(
    header: ReportHeader,
    groups: Iterable[Group],
    options: Optional[ConsolidationOptions] = None,
) -> Simple:
    """
    Consolidate a report into its six aggregates.

    Never raises: an unexpected internal failure is logged and returned as
    a report with error UNEXPECTED_REPORT_END.

    Args:
        header: Report type and tokenizer error
        groups: Classified groups, in report order
        options: Consolidation settings, defaults when omitted

    Returns:
        The consolidated snapshot
    """
    try:
        return Consolidator(header, options or DEFAULT_OPTIONS).consolidate(groups)
    except Exception:
        logger.warning("Failed to consolidate %s report", header.type, exc_info=True)
        return Simple(report=Report(type=header.type, error=ReportError.UNEXPECTED_REPORT_END))
