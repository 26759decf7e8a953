"""
Data models for consolidated weather reports.

This package contains the value types (speed, distance, pressure, ...) and
the six aggregates produced for every report: Report, Station, Aerodrome,
Current, Historical and Forecast, collected in a Simple snapshot.
"""

from .units import (
    CardinalDirection,
    Ceiling,
    Distance,
    DistanceDetails,
    DistanceFraction,
    DistanceRange,
    DistanceUnit,
    Height,
    HeightUnit,
    Precipitation,
    PrecipitationUnit,
    Pressure,
    PressureUnit,
    Runway,
    RunwayDesignator,
    Speed,
    SpeedUnit,
    StateOfSurface,
    Temperature,
    TemperatureUnit,
    Time,
    WaveHeight,
    WaveHeightUnit,
    is_reported,
)
from .essentials import (
    CloudAmount,
    CloudDetails,
    CloudLayer,
    Essentials,
    PrecipitationType,
    SkyCondition,
    Weather,
    WeatherPhenomena,
)
from .report import Report, ReportError, ReportType, Warning, WarningMessage
from .station import AutoType, MissingData, Station
from .aerodrome import (
    Aerodrome,
    BrakingAction,
    ColourCode,
    DirectionData,
    RunwayContamExtent,
    RunwayData,
    RunwayDeposits,
    RvrTrend,
)
from .current import (
    Current,
    HighCloudLayer,
    LightningFrequency,
    LightningStrikes,
    LightningType,
    LowCloudLayer,
    MidCloudLayer,
    Vicinity,
    VicinityPhenomena,
    WindShear,
)
from .historical import (
    Historical,
    PressureTendency,
    PressureTrend,
    WeatherEvent,
    WeatherEventType,
)
from .forecast import (
    Forecast,
    IcingForecast,
    IcingSeverity,
    IcingType,
    Trend,
    TrendType,
    TurbulenceForecast,
    TurbulenceFrequency,
    TurbulenceLocation,
    TurbulenceSeverity,
)
from .simple import Simple

__all__ = [
    # Value types
    'CardinalDirection',
    'Ceiling',
    'Distance',
    'DistanceDetails',
    'DistanceFraction',
    'DistanceRange',
    'DistanceUnit',
    'Height',
    'HeightUnit',
    'Precipitation',
    'PrecipitationUnit',
    'Pressure',
    'PressureUnit',
    'Runway',
    'RunwayDesignator',
    'Speed',
    'SpeedUnit',
    'StateOfSurface',
    'Temperature',
    'TemperatureUnit',
    'Time',
    'WaveHeight',
    'WaveHeightUnit',
    'is_reported',
    # Essentials
    'CloudAmount',
    'CloudDetails',
    'CloudLayer',
    'Essentials',
    'PrecipitationType',
    'SkyCondition',
    'Weather',
    'WeatherPhenomena',
    # Aggregates
    'Report',
    'ReportError',
    'ReportType',
    'Warning',
    'WarningMessage',
    'AutoType',
    'MissingData',
    'Station',
    'Aerodrome',
    'BrakingAction',
    'ColourCode',
    'DirectionData',
    'RunwayContamExtent',
    'RunwayData',
    'RunwayDeposits',
    'RvrTrend',
    'Current',
    'HighCloudLayer',
    'LightningFrequency',
    'LightningStrikes',
    'LightningType',
    'LowCloudLayer',
    'MidCloudLayer',
    'Vicinity',
    'VicinityPhenomena',
    'WindShear',
    'Historical',
    'PressureTendency',
    'PressureTrend',
    'WeatherEvent',
    'WeatherEventType',
    'Forecast',
    'IcingForecast',
    'IcingSeverity',
    'IcingType',
    'Trend',
    'TrendType',
    'TurbulenceForecast',
    'TurbulenceFrequency',
    'TurbulenceLocation',
    'TurbulenceSeverity',
    'Simple',
]
