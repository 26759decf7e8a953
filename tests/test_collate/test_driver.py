"""
Tests for the Consolidator driver: dispatch, routing and report errors.
"""

from typing import get_args

from metar_simple import ConsolidationOptions, Consolidator, simplify
from metar_simple.collate.driver import _HANDLERS
from metar_simple.groups import (
    CloudGroup,
    CloudGroupType,
    CodedCloudAmount,
    CodedDirection,
    CodedDistance,
    CodedDistanceUnit,
    CodedSpeed,
    CodedTemperature,
    CodedTime,
    CodedWeather,
    DirectionType,
    Group,
    KeywordGroup,
    KeywordType,
    LayerForecastGroup,
    LayerForecastType,
    LocationGroup,
    MinMaxTemperatureGroup,
    MinMaxTemperatureType,
    ReportHeader,
    ReportTimeGroup,
    TemperatureGroup,
    TemperatureType,
    TrendGroup,
    TrendGroupType,
    UnknownGroup,
    WeatherCode,
    WeatherDescriptor,
    WeatherGroup,
    WeatherGroupType,
    WeatherQualifier,
    WindGroup,
    WindType,
)
from metar_simple.models import (
    ReportError,
    ReportType,
    Speed,
    VicinityPhenomena,
    Warning,
    WarningMessage,
    WeatherPhenomena,
)

CAVOK = KeywordGroup("CAVOK", KeywordType.CAVOK)
RMK = KeywordGroup("RMK", KeywordType.RMK)
TEMPO = TrendGroup("TEMPO", TrendGroupType.TEMPO)
NOSIG = TrendGroup("NOSIG", TrendGroupType.NOSIG)


def wind(direction, speed, raw=None):
    return WindGroup(raw or "%03d%02dKT" % (direction, speed), WindType.SURFACE_WIND,
                     CodedDirection(DirectionType.VALUE_DEGREES, degrees=direction), CodedSpeed(speed))


def temperature(air, dew):
    return TemperatureGroup("%02d/%02d" % (air, dew), TemperatureType.TEMPERATURE_AND_DEW_POINT,
                            CodedTemperature(air), CodedTemperature(dew))


class TestDispatch:
    """Test cases for the group dispatch table."""

    def test_every_group_has_handler(self):
        assert set(_HANDLERS) == set(get_args(Group))

    def test_handlers_exist(self):
        for name in _HANDLERS.values():
            assert callable(getattr(Consolidator, name))


class TestReportErrors:
    """Test cases for fatal report errors."""

    def test_empty_report(self):
        simple = simplify(ReportHeader(ReportType.METAR), [])
        assert simple.report.error == ReportError.EMPTY_REPORT
        assert simple.report.type == ReportType.METAR

    def test_header_error_passed_through(self, metar_header):
        simple = simplify(ReportHeader(ReportType.METAR, ReportError.REPORT_HEADER_FORMAT), metar_header)
        assert simple.report.error == ReportError.REPORT_HEADER_FORMAT

    def test_report_too_large(self, metar):
        simple = metar(CAVOK, options=ConsolidationOptions(max_groups=3))
        assert simple.report.error == ReportError.REPORT_TOO_LARGE
        assert simple.current.weather_data.cavok is False

    def test_unknown_report_type(self):
        groups = [LocationGroup("ZZZZ", "ZZZZ"), ReportTimeGroup("061700Z", CodedTime(6, 17, 0)), CAVOK]
        simple = simplify(ReportHeader(), groups)
        assert simple.report.error == ReportError.UNKNOWN_REPORT_TYPE
        assert simple.report.type is None

    def test_type_from_keyword(self):
        groups = [KeywordGroup("METAR", KeywordType.METAR), LocationGroup("ZZZZ", "ZZZZ"),
                  ReportTimeGroup("061700Z", CodedTime(6, 17, 0)), CAVOK]
        simple = simplify(ReportHeader(), groups)
        assert simple.report.type == ReportType.METAR
        assert not simple.report.has_error

    def test_missing_location(self):
        groups = [KeywordGroup("METAR", KeywordType.METAR), ReportTimeGroup("061700Z", CodedTime(6, 17, 0)), CAVOK]
        simple = simplify(ReportHeader(ReportType.METAR), groups)
        assert simple.report.error == ReportError.REPORT_HEADER_FORMAT

    def test_groups_after_nil(self, metar):
        simple = metar(KeywordGroup("NIL", KeywordType.NIL), CAVOK)
        assert simple.report.error == ReportError.NIL_OR_CNL_FORMAT

    def test_nil_report(self, metar):
        simple = metar(KeywordGroup("NIL", KeywordType.NIL))
        assert simple.report.missing
        assert not simple.report.has_error

    def test_header_only(self, metar_header):
        simple = simplify(ReportHeader(ReportType.METAR), metar_header)
        assert simple.report.error == ReportError.UNEXPECTED_REPORT_END

    def test_maintenance_indicator_in_taf(self, taf):
        simple = taf(wind(240, 10), KeywordGroup("$", KeywordType.MAINTENANCE_INDICATOR))
        assert simple.report.error == ReportError.GROUP_NOT_ALLOWED
        assert simple.forecast.is_empty()

    def test_maintenance_indicator_in_metar(self, metar):
        simple = metar(KeywordGroup("$", KeywordType.MAINTENANCE_INDICATOR))
        assert simple.station.requires_maintenance

    def test_error_discards_aggregates(self, metar):
        simple = metar(wind(240, 10), UnknownGroup("XYZ"), options=ConsolidationOptions(max_groups=4))
        assert simple.report.error == ReportError.REPORT_TOO_LARGE
        assert simple.report.plain_text == []
        assert simple.station.icao_code == ""

    def test_internal_failure(self, monkeypatch, metar_header):
        def fail(self, groups):
            raise RuntimeError("boom")

        monkeypatch.setattr(Consolidator, "consolidate", fail)
        simple = simplify(ReportHeader(ReportType.METAR), metar_header)

        assert simple.report.error == ReportError.UNEXPECTED_REPORT_END
        assert simple.report.type == ReportType.METAR


class TestRouting:
    """Test cases for routing groups by scope and report type."""

    def test_header_group_in_body(self, metar):
        simple = metar(CAVOK, LocationGroup("ABCD", "ABCD"))

        assert simple.station.icao_code == "ZZZZ"
        assert simple.report.plain_text == ["ABCD"]
        assert simple.report.warnings == [Warning(WarningMessage.INVALID_GROUP, "ABCD")]

    def test_unknown_group(self, metar):
        simple = metar(CAVOK, UnknownGroup("XYZ"))
        assert simple.report.plain_text == ["XYZ"]
        assert simple.report.warnings == []

    def test_trend_in_remarks(self, metar):
        simple = metar(CAVOK, RMK, TEMPO)
        assert simple.forecast.trends == []
        assert simple.report.warnings == [Warning(WarningMessage.INVALID_GROUP, "TEMPO")]

    def test_second_remark(self, metar):
        simple = metar(RMK, RMK)
        assert [w.message for w in simple.report.warnings] == [WarningMessage.INVALID_GROUP]

    def test_observation_in_taf(self, taf):
        simple = taf(wind(240, 10), temperature(7, 3))

        assert simple.current.air_temperature is None
        assert simple.report.plain_text == ["07/03"]
        assert [w.message for w in simple.report.warnings] == [WarningMessage.INVALID_GROUP]

    def test_forecast_group_in_metar(self, metar):
        simple = metar(CAVOK, LayerForecastGroup("620304", LayerForecastType.ICING_LIGHT_MIXED,
                                                 CodedDistance(3000, CodedDistanceUnit.FEET)))
        assert simple.forecast.icing == []
        assert [w.message for w in simple.report.warnings] == [WarningMessage.INVALID_GROUP]

    def test_forecast_group_in_taf_remarks(self, taf):
        group = MinMaxTemperatureGroup("TX15/0515Z TN03/0606Z", MinMaxTemperatureType.FORECAST,
                                       CodedTemperature(3), CodedTemperature(15), CodedTime(6, 6), CodedTime(5, 15))
        simple = taf(wind(240, 10), RMK, group)
        assert simple.forecast.max_temperature is None
        assert simple.report.plain_text == ["TX15/0515Z TN03/0606Z"]

    def test_essentials_in_taf_remarks(self, taf):
        simple = taf(wind(240, 10), RMK, CAVOK)
        assert not simple.forecast.prevailing.cavok
        assert simple.report.plain_text == ["CAVOK"]

    def test_taf_body(self, taf):
        simple = taf(wind(240, 10), CAVOK)

        assert simple.forecast.prevailing.wind_speed == Speed(10)
        assert simple.forecast.prevailing.cavok
        assert simple.current.is_empty()

    def test_metar_trend(self, metar):
        simple = metar(wind(240, 10), TEMPO, wind(270, 25, raw="27025KT"))

        assert simple.current.weather_data.wind_speed == Speed(10)
        assert simple.forecast.trends[0].forecast.wind_speed == Speed(25)
        assert simple.forecast.trends[0].metar
        assert simple.report.warnings == []

    def test_warning_ids_are_raw_groups(self, metar):
        simple = metar(wind(240, 10), wind(250, 12))
        assert simple.report.warnings == [Warning(WarningMessage.DUPLICATED_DATA, "25012KT")]

    def test_vicinity_weather_in_metar(self, metar):
        showers = CodedWeather(WeatherQualifier.VICINITY, WeatherDescriptor.SHOWERS)
        simple = metar(WeatherGroup("VCSH", WeatherGroupType.CURRENT, (showers,)))

        assert simple.current.weather_data.weather == []
        assert simple.current.phenomena_in_vicinity[0].phenomena == VicinityPhenomena.PRECIPITATION

    def test_vicinity_weather_in_taf(self, taf):
        fog = CodedWeather(WeatherQualifier.VICINITY, weather=(WeatherCode.FOG,))
        simple = taf(WeatherGroup("VCFG", WeatherGroupType.CURRENT, (fog,)))

        assert [w.phenomena for w in simple.forecast.prevailing.weather] == [WeatherPhenomena.FOG]
        assert simple.current.phenomena_in_vicinity == []

    def test_obscuration_in_taf(self, taf):
        group = CloudGroup("FG FEW000", CloudGroupType.OBSCURATION, CodedCloudAmount.FEW,
                           CodedDistance(0, CodedDistanceUnit.FEET))
        simple = taf(wind(240, 10), group)
        assert simple.report.plain_text == ["FG FEW000"]

    def test_vicinity_showers_in_taf(self, taf):
        showers = CodedWeather(WeatherQualifier.VICINITY, WeatherDescriptor.SHOWERS)
        simple = taf(wind(240, 10), WeatherGroup("VCSH", WeatherGroupType.CURRENT, (showers,)))

        assert [w.phenomena for w in simple.forecast.prevailing.weather] == [WeatherPhenomena.PRECIPITATION]
        assert simple.report.warnings == []

    def test_vicinity_showers_in_metar_trend(self, metar):
        showers = CodedWeather(WeatherQualifier.VICINITY, WeatherDescriptor.SHOWERS)
        simple = metar(wind(240, 10), TEMPO, WeatherGroup("VCSH", WeatherGroupType.CURRENT, (showers,)))

        assert [w.phenomena for w in simple.forecast.trends[0].forecast.weather] == [WeatherPhenomena.PRECIPITATION]
        assert simple.current.phenomena_in_vicinity == []
        assert simple.report.warnings == []

    def test_groups_after_nosig(self, metar):
        simple = metar(wind(240, 10), NOSIG, wind(300, 20))

        assert simple.current.weather_data.wind_direction_degrees == 240
        assert simple.forecast.no_significant_changes
        assert simple.forecast.trends == []
        assert simple.report.warnings == []

    def test_groups_after_nosig_following_trend(self, metar):
        simple = metar(wind(240, 10), TEMPO, wind(270, 25), NOSIG, wind(300, 20))
        trend = simple.forecast.trends[0]

        assert trend.forecast.wind_direction_degrees == 270
        assert simple.current.weather_data.wind_direction_degrees == 240
        assert simple.report.warnings == [Warning(WarningMessage.DUPLICATED_DATA, "NOSIG")]
