"""
Tests for the EssentialsBuilder class.
"""

import pytest

from metar_simple.adapters import CAVOK_VISIBILITY
from metar_simple.builders import EssentialsBuilder
from metar_simple.groups import (
    CloudGroup,
    CloudGroupType,
    CodedCloudAmount,
    CodedCloudType,
    CodedDirection,
    CodedDistance,
    CodedDistanceUnit,
    CodedSpeed,
    CodedWeather,
    ConvectiveType,
    DirectionType,
    DistanceModifier,
    WeatherCode,
    WeatherDescriptor,
    WindGroup,
    WindType,
)
from metar_simple.models import (
    CloudAmount,
    CloudDetails,
    CloudLayer,
    Distance,
    Essentials,
    Height,
    SkyCondition,
    Speed,
    Weather,
    WeatherPhenomena,
    WarningMessage,
)


def degrees(value):
    return CodedDirection(DirectionType.VALUE_DEGREES, degrees=value)


def surface_wind(direction, speed, gust=None, raw="WIND"):
    return WindGroup(raw, WindType.SURFACE_WIND, degrees(direction), CodedSpeed(speed),
                     CodedSpeed(gust) if gust is not None else None)


def layer(amount, height, convective=ConvectiveType.NONE, cloud_type=None):
    return CloudGroup("CLD", CloudGroupType.CLOUD_LAYER, amount, CodedDistance(height, CodedDistanceUnit.FEET),
                      convective, cloud_type)


@pytest.fixture
def builder(warnings):
    return EssentialsBuilder(warnings)


@pytest.fixture
def essentials():
    return Essentials()


class TestCavok:
    """Test cases for CAVOK."""

    def test_cavok(self, builder, essentials, warnings):
        builder.cavok(essentials)

        assert essentials.cavok
        assert essentials.visibility == CAVOK_VISIBILITY
        assert essentials.sky_condition == SkyCondition.CAVOK
        assert len(warnings) == 0

    def test_repeated_cavok(self, builder, essentials, warnings):
        builder.cavok(essentials)
        builder.cavok(essentials)
        assert len(warnings) == 0

    def test_cavok_after_visibility(self, builder, essentials, warnings):
        builder.visibility(essentials, CodedDistance(5000))
        builder.cavok(essentials)

        assert not essentials.cavok
        assert essentials.visibility == Distance(5000)
        assert warnings.messages() == [WarningMessage.DUPLICATED_DATA]

    def test_clouds_after_cavok(self, builder, essentials, warnings):
        builder.cavok(essentials)
        builder.cloud(essentials, layer(CodedCloudAmount.FEW, 3000))

        assert essentials.cloud_layers == []
        assert warnings.messages() == [WarningMessage.DUPLICATED_DATA]


class TestWind:
    """Test cases for surface wind."""

    def test_wind_with_gust(self, builder, essentials):
        builder.wind(essentials, surface_wind(240, 15, gust=25))

        assert essentials.wind_direction_degrees == 240
        assert essentials.wind_speed == Speed(15)
        assert essentials.gust_speed == Speed(25)
        assert not essentials.wind_direction_variable

    def test_variable_wind(self, builder, essentials):
        group = WindGroup("VRB03KT", WindType.SURFACE_WIND, CodedDirection(DirectionType.VARIABLE), CodedSpeed(3))
        builder.wind(essentials, group)

        assert essentials.wind_direction_variable
        assert essentials.wind_direction_degrees is None
        assert essentials.wind_speed == Speed(3)

    def test_calm(self, builder, essentials):
        builder.wind(essentials, WindGroup("00000KT", WindType.SURFACE_WIND_CALM))
        assert essentials.wind_calm
        assert essentials.wind_speed is None

    def test_wind_with_sector(self, builder, essentials):
        group = WindGroup("24015KT 210V270", WindType.SURFACE_WIND_WITH_VARIABLE_SECTOR, degrees(240),
                          CodedSpeed(15), var_sector_begin=degrees(210), var_sector_end=degrees(270))
        builder.wind(essentials, group)

        assert essentials.wind_direction_var_from_degrees == 210
        assert essentials.wind_direction_var_to_degrees == 270

    def test_separate_sector(self, builder, essentials, warnings):
        builder.wind(essentials, surface_wind(240, 15))
        builder.wind(essentials, WindGroup("210V270", WindType.VARIABLE_WIND_SECTOR,
                                           var_sector_begin=degrees(210), var_sector_end=degrees(270)))

        assert essentials.wind_direction_degrees == 240
        assert essentials.wind_direction_var_from_degrees == 210
        assert len(warnings) == 0

    def test_sector_with_missing_bound(self, builder, essentials, warnings):
        builder.wind(essentials, WindGroup("210V///", WindType.VARIABLE_WIND_SECTOR,
                                           var_sector_begin=degrees(210)))

        assert essentials.wind_direction_var_from_degrees is None
        assert warnings.messages() == [WarningMessage.INVALID_DIRECTION_SECTOR]

    def test_second_wind_discarded_once(self, builder, essentials, warnings):
        builder.wind(essentials, surface_wind(240, 15, gust=25))
        builder.wind(essentials, surface_wind(250, 10, raw="25010KT"))

        assert essentials.wind_direction_degrees == 240
        assert essentials.wind_speed == Speed(15)
        assert essentials.gust_speed == Speed(25)
        assert [(w.message, w.id) for w in warnings.warnings] == [(WarningMessage.DUPLICATED_DATA, "GROUP")]

    def test_identical_wind_silent(self, builder, essentials, warnings):
        builder.wind(essentials, surface_wind(240, 15))
        builder.wind(essentials, surface_wind(240, 15))
        assert len(warnings) == 0

    def test_not_reported_wind_replaced(self, builder, essentials, warnings):
        builder.wind(essentials, WindGroup("/////KT", WindType.SURFACE_WIND,
                                           CodedDirection(DirectionType.NOT_REPORTED), CodedSpeed(None)))
        builder.wind(essentials, surface_wind(240, 15))

        assert essentials.wind_speed == Speed(15)
        assert len(warnings) == 0


class TestVisibility:
    """Test cases for prevailing visibility."""

    def test_visibility(self, builder, essentials):
        builder.visibility(essentials, CodedDistance(9999))
        assert essentials.visibility == Distance(9999)

    def test_vicinity_visibility_invalid(self, builder, essentials, warnings):
        builder.visibility(essentials, CodedDistance(modifier=DistanceModifier.VICINITY))
        assert essentials.visibility is None
        assert warnings.messages() == [WarningMessage.INVALID_DISTANCE_RANGE]


class TestClouds:
    """Test cases for cloud layers and sky condition."""

    def test_layers_in_order(self, builder, essentials):
        builder.cloud(essentials, layer(CodedCloudAmount.FEW, 1500))
        builder.cloud(essentials, layer(CodedCloudAmount.BROKEN, 3000, ConvectiveType.CUMULONIMBUS))

        assert essentials.sky_condition == SkyCondition.CLOUDS
        assert essentials.cloud_layers == [
            CloudLayer(CloudAmount.FEW, Height(1500), CloudDetails.NOT_TOWERING_CUMULUS_NOT_CUMULONIMBUS),
            CloudLayer(CloudAmount.BROKEN, Height(3000), CloudDetails.CUMULONIMBUS),
        ]

    def test_layer_with_cloud_type(self, builder, essentials):
        builder.cloud(essentials, layer(CodedCloudAmount.SCATTERED, 2000, cloud_type=CodedCloudType.STRATOCUMULUS))
        assert essentials.cloud_layers[0].details == CloudDetails.STRATOCUMULUS

    def test_not_reported_layer(self, builder, essentials):
        builder.cloud(essentials, layer(CodedCloudAmount.NOT_REPORTED, None, ConvectiveType.NOT_REPORTED))

        assert essentials.sky_condition == SkyCondition.UNKNOWN
        assert essentials.cloud_layers == [CloudLayer(CloudAmount.UNKNOWN, Height(None), CloudDetails.UNKNOWN)]

    def test_no_clouds(self, builder, essentials):
        builder.cloud(essentials, CloudGroup("NSC", CloudGroupType.NO_CLOUDS, CodedCloudAmount.NSC))
        assert essentials.sky_condition == SkyCondition.NO_SIGNIFICANT_CLOUD
        assert essentials.cloud_layers == []

    def test_layer_after_ncd(self, builder, essentials, warnings):
        builder.cloud(essentials, CloudGroup("NCD", CloudGroupType.NO_CLOUDS, CodedCloudAmount.NCD))
        builder.cloud(essentials, layer(CodedCloudAmount.FEW, 1500))

        assert essentials.sky_condition == SkyCondition.CLEAR_NCD
        assert essentials.cloud_layers == []
        assert warnings.messages() == [WarningMessage.DUPLICATED_DATA]

    def test_vertical_visibility(self, builder, essentials):
        builder.vertical_visibility(essentials, CodedDistance(200, CodedDistanceUnit.FEET))
        assert essentials.sky_condition == SkyCondition.OBSCURED
        assert essentials.vertical_visibility == Height(200)


class TestWeather:
    """Test cases for weather phenomena."""

    def test_weather_in_order(self, builder, essentials):
        builder.weather(essentials, CodedWeather(weather=(WeatherCode.MIST,)))
        builder.weather(essentials, CodedWeather(descriptor=WeatherDescriptor.THUNDERSTORM))

        assert [w.phenomena for w in essentials.weather] == [WeatherPhenomena.MIST, WeatherPhenomena.THUNDERSTORM]

    def test_invalid_weather(self, builder, essentials, warnings):
        builder.weather(essentials, CodedWeather(descriptor=WeatherDescriptor.BLOWING))
        assert essentials.weather == []
        assert warnings.messages() == [WarningMessage.INVALID_WEATHER_PHENOMENA]

    def test_nsw(self, builder, essentials, warnings):
        builder.nsw(essentials)
        builder.nsw(essentials)
        assert essentials.weather == [Weather(WeatherPhenomena.NO_SIGNIFICANT_WEATHER)]
        assert len(warnings) == 0

    def test_weather_after_nsw(self, builder, essentials, warnings):
        builder.nsw(essentials)
        builder.weather(essentials, CodedWeather(weather=(WeatherCode.RAIN,)))
        assert essentials.weather == [Weather(WeatherPhenomena.NO_SIGNIFICANT_WEATHER)]
        assert warnings.messages() == [WarningMessage.DUPLICATED_DATA]

    def test_nsw_after_weather(self, builder, essentials, warnings):
        builder.weather(essentials, CodedWeather(weather=(WeatherCode.RAIN,)))
        builder.nsw(essentials)
        assert len(essentials.weather) == 1
        assert warnings.messages() == [WarningMessage.DUPLICATED_DATA]
