"""
metar_simple - consolidation of METAR, SPECI and TAF reports.

Takes the classified groups of one report and merges them into a
``Simple`` snapshot of six aggregates: Report, Station, Aerodrome,
Current, Historical and Forecast.

Example:
    >>> from metar_simple import simplify
    >>> from metar_simple.groups import (
    ...     KeywordGroup, KeywordType, LocationGroup, ReportHeader,
    ... )
    >>> simple = simplify(ReportHeader(), [
    ...     KeywordGroup("METAR", KeywordType.METAR),
    ...     LocationGroup("ZZZZ", "ZZZZ"),
    ...     KeywordGroup("NIL", KeywordType.NIL),
    ... ])
    >>> simple.report.missing
    True
"""

from .config import DEFAULT_OPTIONS, ConsolidationOptions
from .collate import Consolidator, simplify
from .models import Simple

__version__ = '0.1.0'

__all__ = [
    'ConsolidationOptions',
    'Consolidator',
    'DEFAULT_OPTIONS',
    'Simple',
    'simplify',
]
