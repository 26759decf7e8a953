"""Builder for aerodrome data: runways, directions, ceiling and colour code."""

import logging
from typing import Dict, Optional

from metar_simple.adapters import CodeTables, ValueAdapter
from metar_simple.adapters.tables import FRICTION_UNRELIABLE
from metar_simple.builders.base import DataBuilder, WarningLog
from metar_simple.groups.groups import MiscType, RunwayStateGroup, RunwayStateType
from metar_simple.groups.values import CodedDirection, CodedDistance, CodedRunway, RvrTrendCode
from metar_simple.models.aerodrome import Aerodrome, DirectionData, RunwayData
from metar_simple.models.report import WarningMessage
from metar_simple.models.units import CardinalDirection, Ceiling, DistanceRange, Runway

logger = logging.getLogger(__name__)


class AerodromeBuilder(DataBuilder):
    """
    Build the Aerodrome aggregate.

    Runway and direction entries are created on first use and kept in
    insertion order; they become the aggregate's lists on ``build()``.
    """

    def __init__(self, warnings: WarningLog):
        super().__init__(warnings)
        self._aerodrome = Aerodrome()
        self._runways: Dict[Runway, RunwayData] = {}
        self._directions: Dict[CardinalDirection, DirectionData] = {}

    @property
    def aerodrome(self) -> Aerodrome:
        return self._aerodrome

    def colour_code(self, kind: MiscType) -> None:
        self._check_open()
        code = CodeTables.colour_code(kind)
        if code is None:
            logger.debug("%s is not a colour code", kind.name)
            return
        current = (self._aerodrome.colour_code, self._aerodrome.colour_code_black)
        if self._aerodrome.colour_code is not None:
            if current != code:
                self.log(WarningMessage.DUPLICATED_DATA)
            return
        self._aerodrome.colour_code, self._aerodrome.colour_code_black = code

    def surface_visibility(self, coded: Optional[CodedDistance]) -> None:
        self._set_distance(self._aerodrome, "surface_visibility", coded)

    def tower_visibility(self, coded: Optional[CodedDistance]) -> None:
        self._set_distance(self._aerodrome, "tower_visibility", coded)

    def runway_visibility(
        self,
        runway: Optional[CodedRunway],
        coded: Optional[CodedDistance],
        maximum: Optional[CodedDistance] = None,
        variable: bool = False,
    ) -> None:
        """Visibility along a runway, or its variation range when ``variable``."""
        rd = self._runway(runway)
        if rd is None:
            return
        self._set_range(rd, "visibility", coded, maximum, variable)

    def direction_visibility(
        self,
        direction: Optional[CodedDirection],
        coded: Optional[CodedDistance],
        maximum: Optional[CodedDistance] = None,
        variable: bool = False,
    ) -> None:
        """Visibility towards a direction, or its variation range when ``variable``."""
        dd = self._direction(direction)
        if dd is None:
            return
        self._set_range(dd, "visibility", coded, maximum, variable)

    def rvr(
        self,
        runway: Optional[CodedRunway],
        coded: Optional[CodedDistance],
        trend: RvrTrendCode,
        maximum: Optional[CodedDistance] = None,
        variable: bool = False,
    ) -> None:
        """
        Merge a runway visual range and its tendency.

        Args:
            runway: Runway the range applies to; required
            coded: Visual range, or its lower bound when ``variable``
            trend: Coded tendency (U, N, D)
            maximum: Upper bound when ``variable``
            variable: True for ``R24/0600V1000FT`` style groups
        """
        rd = self._runway(runway)
        if rd is None:
            return
        visual_range = self._range(coded, maximum, variable)
        if visual_range is None:
            return
        merged = (visual_range, CodeTables.rvr_trend(trend))
        if rd.visual_range is not None or rd.visual_range_trend is not None:
            if (rd.visual_range, rd.visual_range_trend) != merged:
                self.log(WarningMessage.DUPLICATED_DATA)
            return
        rd.visual_range, rd.visual_range_trend = merged

    def ceiling(
        self,
        runway: Optional[CodedRunway],
        direction: Optional[CodedDirection],
        coded: Optional[CodedDistance],
    ) -> None:
        """Ceiling of the aerodrome, or at a runway or in a direction."""
        target = self._ceiling_target(runway, direction)
        if target is None:
            return
        self.set_data(target, "ceiling", Ceiling(exact=ValueAdapter.height(coded)))

    def variable_ceiling(
        self,
        runway: Optional[CodedRunway],
        direction: Optional[CodedDirection],
        minimum: Optional[CodedDistance],
        maximum: Optional[CodedDistance],
    ) -> None:
        self._check_open()
        if minimum is None or maximum is None or minimum.value is None or maximum.value is None:
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return
        target = self._ceiling_target(runway, direction)
        if target is None:
            return
        ceiling = Ceiling(minimum=ValueAdapter.height(minimum), maximum=ValueAdapter.height(maximum))
        self.set_data(target, "ceiling", ceiling)

    def runway_state(self, group: RunwayStateGroup) -> None:
        """Merge a runway state, CLRD, SNOCLO or closed runway group."""
        self._check_open()
        if group.type == RunwayStateType.AERODROME_SNOCLO:
            self.set_data(self._aerodrome, "snoclo", True)
            return
        rd = self._runway(group.runway)
        if rd is None:
            return
        if rd.has_state():
            self.log(WarningMessage.DUPLICATED_DATA)
            return
        if group.type == RunwayStateType.RUNWAY_STATE:
            rd.deposits = CodeTables.runway_deposits(group.deposits)
            rd.contamination_extent = CodeTables.contamination_extent(group.extent)
            rd.deposit_depth = ValueAdapter.precipitation(group.deposit_depth)
            self._friction(rd, group.friction)
        elif group.type == RunwayStateType.RUNWAY_CLRD:
            rd.clrd = True
            self._friction(rd, group.friction)
        elif group.type == RunwayStateType.RUNWAY_SNOCLO:
            rd.snoclo = True
        elif group.type == RunwayStateType.RUNWAY_NOT_OPERATIONAL:
            rd.not_operational = True

    def wind_shear_lower_layers(self, runway: Optional[CodedRunway]) -> None:
        rd = self._runway(runway)
        if rd is not None:
            self.set_data(rd, "wind_shear_lower_layers", True)

    def build(self) -> Aerodrome:
        self._aerodrome.runways = list(self._runways.values())
        self._aerodrome.directions = list(self._directions.values())
        self.finalize()
        return self._aerodrome

    # --- Internal builders ---

    def _runway(self, coded: Optional[CodedRunway]) -> Optional[RunwayData]:
        self._check_open()
        if coded is None:
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return None
        runway = ValueAdapter.runway(coded)
        if runway not in self._runways:
            self._runways[runway] = RunwayData(runway)
        return self._runways[runway]

    def _direction(self, coded: Optional[CodedDirection]) -> Optional[DirectionData]:
        self._check_open()
        if coded is None:
            self.log(WarningMessage.REQUIRED_DATA_MISSING)
            return None
        direction = ValueAdapter.cardinal_direction(coded)
        if direction not in self._directions:
            self._directions[direction] = DirectionData(direction)
        return self._directions[direction]

    def _ceiling_target(self, runway, direction):
        self._check_open()
        if runway is not None and direction is not None:
            self.log(WarningMessage.INCONSISTENT_DATA)
            return None
        if runway is not None:
            return self._runway(runway)
        if direction is not None:
            return self._direction(direction)
        return self._aerodrome

    def _set_distance(self, target, name: str, coded: Optional[CodedDistance]) -> bool:
        distance = ValueAdapter.distance(coded)
        if distance is None:
            self._check_open()
            self.log(WarningMessage.INVALID_DISTANCE_RANGE)
            return False
        return self.set_data(target, name, distance)

    def _set_range(self, target, name: str, coded, maximum, variable: bool) -> bool:
        distance_range = self._range(coded, maximum, variable)
        if distance_range is None:
            return False
        return self.set_data(target, name, distance_range)

    def _range(self, coded, maximum, variable: bool) -> Optional[DistanceRange]:
        """Prevailing distance, or a min/max range when ``variable``; None if invalid."""
        low = ValueAdapter.distance(coded)
        if not variable:
            if low is None:
                self.log(WarningMessage.INVALID_DISTANCE_RANGE)
                return None
            return DistanceRange(prevailing=low)
        high = ValueAdapter.distance(maximum)
        if low is None or high is None or low.value is None or high.value is None:
            self.log(WarningMessage.INVALID_DISTANCE_RANGE)
            return None
        return DistanceRange(minimum=low, maximum=high)

    @staticmethod
    def _friction(rd: RunwayData, code: Optional[int]) -> None:
        if code == FRICTION_UNRELIABLE:
            rd.surface_friction_unreliable = True
            return
        rd.coefficient = CodeTables.friction_coefficient(code)
