"""
Classified report groups consumed by the consolidation engine.

A tokenizer turns raw report text into a ``ReportHeader`` and an ordered
sequence of ``Group`` values; this package only defines that interface.
"""

from .values import (
    CardinalCode,
    CodedCloudAmount,
    CodedCloudType,
    CodedDirection,
    CodedDistance,
    CodedDistanceUnit,
    CodedPrecipitation,
    CodedPrecipitationUnit,
    CodedPressure,
    CodedPressureUnit,
    CodedRunway,
    CodedSpeed,
    CodedSpeedUnit,
    CodedTemperature,
    CodedTime,
    CodedWaveHeight,
    CodedWeather,
    ConvectiveType,
    DirectionType,
    DistanceModifier,
    LightningFrequencyCode,
    LightningTypeCode,
    Number,
    RvrTrendCode,
    WaveHeightType,
    WeatherCode,
    WeatherDescriptor,
    WeatherEventCode,
    WeatherQualifier,
)
from .groups import (
    CloudGroup,
    CloudGroupType,
    Group,
    KeywordGroup,
    KeywordType,
    LayerForecastGroup,
    LayerForecastType,
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
    PressureTendencyType,
    PressureType,
    ReportHeader,
    ReportTimeGroup,
    RunwayStateGroup,
    RunwayStateType,
    SeaSurfaceGroup,
    TemperatureGroup,
    TemperatureType,
    TrendGroup,
    TrendGroupType,
    UnknownGroup,
    VicinityGroup,
    VicinityType,
    VisibilityGroup,
    VisibilityType,
    WeatherGroup,
    WeatherGroupType,
    WindGroup,
    WindType,
)

__all__ = [
    # Coded values
    'CardinalCode',
    'CodedCloudAmount',
    'CodedCloudType',
    'CodedDirection',
    'CodedDistance',
    'CodedDistanceUnit',
    'CodedPrecipitation',
    'CodedPrecipitationUnit',
    'CodedPressure',
    'CodedPressureUnit',
    'CodedRunway',
    'CodedSpeed',
    'CodedSpeedUnit',
    'CodedTemperature',
    'CodedTime',
    'CodedWaveHeight',
    'CodedWeather',
    'ConvectiveType',
    'DirectionType',
    'DistanceModifier',
    'LightningFrequencyCode',
    'LightningTypeCode',
    'Number',
    'RvrTrendCode',
    'WaveHeightType',
    'WeatherCode',
    'WeatherDescriptor',
    'WeatherEventCode',
    'WeatherQualifier',
    # Groups
    'Group',
    'ReportHeader',
    'CloudGroup',
    'CloudGroupType',
    'KeywordGroup',
    'KeywordType',
    'LayerForecastGroup',
    'LayerForecastType',
    'LightningGroup',
    'LocationGroup',
    'LowMidHighCloudGroup',
    'MinMaxTemperatureGroup',
    'MinMaxTemperatureType',
    'MiscGroup',
    'MiscType',
    'PrecipitationAmountType',
    'PrecipitationGroup',
    'PressureGroup',
    'PressureTendencyGroup',
    'PressureTendencyType',
    'PressureType',
    'ReportTimeGroup',
    'RunwayStateGroup',
    'RunwayStateType',
    'SeaSurfaceGroup',
    'TemperatureGroup',
    'TemperatureType',
    'TrendGroup',
    'TrendGroupType',
    'UnknownGroup',
    'VicinityGroup',
    'VicinityType',
    'VisibilityGroup',
    'VisibilityType',
    'WeatherGroup',
    'WeatherGroupType',
    'WindGroup',
    'WindType',
]
