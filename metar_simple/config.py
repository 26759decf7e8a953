"""Options controlling a consolidation pass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConsolidationOptions:
    """
    Consolidation settings.

    Attributes:
        max_groups: Reports with more groups than this are rejected with
            REPORT_TOO_LARGE
        derive_relative_humidity: Compute relative humidity from the final
            air temperature and dew point
        remark_sea_level_pressure: Fill the sea-level pressure from an SLP
            remark when the report body carried none
    """

    max_groups: int = 100
    derive_relative_humidity: bool = True
    remark_sea_level_pressure: bool = True


DEFAULT_OPTIONS = ConsolidationOptions()
