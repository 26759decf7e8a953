"""Consolidated report snapshot."""

from dataclasses import dataclass, field

from metar_simple.models.aerodrome import Aerodrome
from metar_simple.models.current import Current
from metar_simple.models.forecast import Forecast
from metar_simple.models.historical import Historical
from metar_simple.models.report import Report
from metar_simple.models.station import Station


@dataclass
class Simple:
    """
    The six aggregates produced from one report.

    Two snapshots are equal when every field of every aggregate is equal;
    lists compare in order, sets regardless of order.
    """

    report: Report = field(default_factory=Report)
    station: Station = field(default_factory=Station)
    aerodrome: Aerodrome = field(default_factory=Aerodrome)
    current: Current = field(default_factory=Current)
    historical: Historical = field(default_factory=Historical)
    forecast: Forecast = field(default_factory=Forecast)
