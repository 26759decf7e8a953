"""Builder for station metadata: location, automated station type and missing data."""

import logging
from typing import Optional

from metar_simple.adapters import ValueAdapter
from metar_simple.builders.base import DataBuilder, WarningLog
from metar_simple.groups.groups import KeywordType
from metar_simple.groups.values import CodedDirection, CodedRunway
from metar_simple.models.report import WarningMessage
from metar_simple.models.station import AutoType, MissingData, Station

logger = logging.getLogger(__name__)

_AUTO_TYPES = {
    KeywordType.AO1: AutoType.AO1,
    KeywordType.AO1A: AutoType.AO1A,
    KeywordType.AO2: AutoType.AO2,
    KeywordType.AO2A: AutoType.AO2A,
}


class StationBuilder(DataBuilder):
    """Build the Station aggregate."""

    def __init__(self, warnings: WarningLog):
        super().__init__(warnings)
        self._station = Station()
        self._auto_type_conflict = False

    @property
    def station(self) -> Station:
        return self._station

    @property
    def has_location(self) -> bool:
        return bool(self._station.icao_code)

    def location(self, icao: str) -> None:
        self._check_open()
        if self._station.icao_code and self._station.icao_code != icao:
            self.log(WarningMessage.INCONSISTENT_DATA)
            return
        self._station.icao_code = icao

    def keyword(self, kind: KeywordType) -> None:
        """Merge AO1/AO1A/AO2/AO2A, NOSPECI and the maintenance indicator."""
        self._check_open()
        if kind in _AUTO_TYPES:
            self._auto_type(_AUTO_TYPES[kind])
        elif kind == KeywordType.NOSPECI:
            self._station.no_speci_reports = True
        elif kind == KeywordType.MAINTENANCE_INDICATOR:
            self._station.requires_maintenance = True
        else:
            logger.debug("Keyword %s is not a station attribute", kind.name)

    def no_directional_variation(self) -> None:
        self.set_data(self._station, "no_vis_directional_variation", True)

    def missing(self, data: MissingData) -> None:
        """Add a missing data indicator; repeating one is a duplicate."""
        self._check_open()
        if data in self._station.missing_data:
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        self._station.missing_data.add(data)

    def chino(self, runway: Optional[CodedRunway], direction: Optional[CodedDirection]) -> None:
        """Ceiling not available, at the secondary location given by runway or direction."""
        self._not_available(
            runway,
            direction,
            MissingData.CHINO,
            MissingData.CHINO_RUNWAY,
            MissingData.CHINO_DIRECTION,
            self._station.runways_no_ceiling_data,
            self._station.directions_no_ceiling_data,
        )

    def visno(self, runway: Optional[CodedRunway], direction: Optional[CodedDirection]) -> None:
        """Visibility not available, at the secondary location given by runway or direction."""
        self._not_available(
            runway,
            direction,
            MissingData.VISNO,
            MissingData.VISNO_RUNWAY,
            MissingData.VISNO_DIRECTION,
            self._station.runways_no_vis_data,
            self._station.directions_no_vis_data,
        )

    def build(self) -> Station:
        self.finalize()
        return self._station

    # --- Internal builders ---

    def _auto_type(self, auto_type: AutoType) -> None:
        current = self._station.auto_type
        if not self._auto_type_conflict and current in (AutoType.NONE, auto_type):
            self._station.auto_type = auto_type
            return
        # Conflicting automated station types leave the type unknown
        self.log(WarningMessage.INVALID_AUTOTYPE)
        self._station.auto_type = AutoType.NONE
        self._auto_type_conflict = True

    def _not_available(self, runway, direction, bare, on_runway, on_direction, runways, directions):
        self._check_open()
        if runway is None and direction is None:
            self.missing(bare)
            return
        if runway is not None:
            self._station.missing_data.add(on_runway)
            self._add_unique(runways, ValueAdapter.runway(runway))
        if direction is not None:
            self._station.missing_data.add(on_direction)
            self._add_unique(directions, ValueAdapter.cardinal_direction(direction))

    def _add_unique(self, items: set, item) -> None:
        if item in items:
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        items.add(item)
