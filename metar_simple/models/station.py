"""Station metadata: location, automated station type and missing data."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Set

from metar_simple.models.units import CardinalDirection, Runway


class AutoType(Enum):
    """Automated station type from AO1/AO1A/AO2/AO2A remarks."""

    NONE = "NONE"
    AO1 = "AO1"
    AO1A = "AO1A"
    AO2 = "AO2"
    AO2A = "AO2A"


class MissingData(Enum):
    """Missing-data and sensor-status indicators reported in remarks."""

    WND_MISG = "WND_MISG"
    VIS_MISG = "VIS_MISG"
    RVR_MISG = "RVR_MISG"
    RVRNO = "RVRNO"
    VISNO = "VISNO"
    VISNO_RUNWAY = "VISNO_RUNWAY"
    VISNO_DIRECTION = "VISNO_DIRECTION"
    CHINO = "CHINO"
    CHINO_RUNWAY = "CHINO_RUNWAY"
    CHINO_DIRECTION = "CHINO_DIRECTION"
    PWINO = "PWINO"
    TSNO = "TSNO"
    PNO = "PNO"
    FZRANO = "FZRANO"
    SLPNO = "SLPNO"
    TS_LTNG_TEMPO_UNAVBL = "TS_LTNG_TEMPO_UNAVBL"
    CLD_MISG = "CLD_MISG"
    WX_MISG = "WX_MISG"
    T_MISG = "T_MISG"
    TD_MISG = "TD_MISG"
    PRES_MISG = "PRES_MISG"
    ICG_MISG = "ICG_MISG"
    PCPN_MISG = "PCPN_MISG"


@dataclass
class Station:
    """
    Reporting station.

    The ICAO code is always present in a report consolidated without error.
    """

    icao_code: str = ""
    auto_type: AutoType = AutoType.NONE
    requires_maintenance: bool = False
    no_speci_reports: bool = False
    no_vis_directional_variation: bool = False
    missing_data: Set[MissingData] = field(default_factory=set)
    runways_no_ceiling_data: Set[Runway] = field(default_factory=set)
    runways_no_vis_data: Set[Runway] = field(default_factory=set)
    directions_no_ceiling_data: Set[CardinalDirection] = field(default_factory=set)
    directions_no_vis_data: Set[CardinalDirection] = field(default_factory=set)
