"""
Field adapters: total conversions from coded group values to domain values.

Unknown, not reported and reserved codes never raise; they map to an
``UNKNOWN`` enumeration member or a value with no magnitude.
"""

from .units import CAVOK_VISIBILITY, ValueAdapter
from .tables import CodeTables
from .weather import WeatherAdapter

__all__ = [
    'CAVOK_VISIBILITY',
    'ValueAdapter',
    'CodeTables',
    'WeatherAdapter',
]
