"""
Aggregate builders.

Each builder owns one aggregate of the consolidated report and merges
groups into it with the shared first-value-wins rule of ``DataBuilder``.
All builders of one report record warnings into the same ``WarningLog``.
"""

from .base import BuilderFinalizedError, DataBuilder, WarningLog
from .report import ReportBuilder
from .station import StationBuilder
from .essentials import EssentialsBuilder
from .aerodrome import AerodromeBuilder
from .current import CurrentBuilder, relative_humidity
from .historical import HistoricalBuilder
from .forecast import ForecastBuilder

__all__ = [
    # Shared
    'BuilderFinalizedError',
    'DataBuilder',
    'WarningLog',
    # Builders
    'ReportBuilder',
    'StationBuilder',
    'EssentialsBuilder',
    'AerodromeBuilder',
    'CurrentBuilder',
    'HistoricalBuilder',
    'ForecastBuilder',
    # Derived values
    'relative_humidity',
]
