"""Aerodrome state: colour code, runways, directional data and ceiling."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from metar_simple.models.units import (
    CardinalDirection,
    Ceiling,
    Distance,
    DistanceRange,
    Precipitation,
    Runway,
    is_reported,
)


class ColourCode(Enum):
    """Military airfield colour state."""

    NOT_SPECIFIED = "NOT_SPECIFIED"
    BLUE = "BLUE"
    WHITE = "WHITE"
    GREEN = "GREEN"
    YELLOW1 = "YELLOW1"
    YELLOW2 = "YELLOW2"
    AMBER = "AMBER"
    RED = "RED"


class RvrTrend(Enum):
    UNKNOWN = "UNKNOWN"
    DOWNWARD = "DOWNWARD"
    NEUTRAL = "NEUTRAL"
    UPWARD = "UPWARD"


class RunwayDeposits(Enum):
    UNKNOWN = "UNKNOWN"
    CLEAR_AND_DRY = "CLEAR_AND_DRY"
    DAMP = "DAMP"
    WET_AND_WATER_PATCHES = "WET_AND_WATER_PATCHES"
    RIME_AND_FROST_COVERED = "RIME_AND_FROST_COVERED"
    DRY_SNOW = "DRY_SNOW"
    WET_SNOW = "WET_SNOW"
    SLUSH = "SLUSH"
    ICE = "ICE"
    COMPACTED_OR_ROLLED_SNOW = "COMPACTED_OR_ROLLED_SNOW"
    FROZEN_RUTS_OR_RIDGES = "FROZEN_RUTS_OR_RIDGES"


class RunwayContamExtent(Enum):
    UNKNOWN = "UNKNOWN"
    NO_DEPOSITS = "NO_DEPOSITS"
    LESS_THAN_11_PERCENT = "LESS_THAN_11_PERCENT"
    FROM_11_TO_25_PERCENT = "FROM_11_TO_25_PERCENT"
    FROM_26_TO_50_PERCENT = "FROM_26_TO_50_PERCENT"
    MORE_THAN_50_PERCENT = "MORE_THAN_50_PERCENT"


class BrakingAction(Enum):
    POOR = "POOR"
    MEDIUM_POOR = "MEDIUM_POOR"
    MEDIUM = "MEDIUM"
    MEDIUM_GOOD = "MEDIUM_GOOD"
    GOOD = "GOOD"
    UNRELIABLE = "UNRELIABLE"
    UNKNOWN = "UNKNOWN"


# Upper bound of the friction coefficient (hundredths) for each braking action
_BRAKING_ACTION_LIMITS = [
    (25, BrakingAction.POOR),
    (29, BrakingAction.MEDIUM_POOR),
    (35, BrakingAction.MEDIUM),
    (40, BrakingAction.MEDIUM_GOOD),
]


@dataclass
class RunwayData:
    """Runway surface state, visual range, visibility and ceiling for one runway."""

    runway: Runway
    not_operational: bool = False
    snoclo: bool = False
    clrd: bool = False
    wind_shear_lower_layers: bool = False
    deposits: Optional[RunwayDeposits] = None
    contamination_extent: Optional[RunwayContamExtent] = None
    deposit_depth: Optional[Precipitation] = None
    coefficient: Optional[int] = None
    surface_friction_unreliable: bool = False
    visual_range: Optional[DistanceRange] = None
    visual_range_trend: Optional[RvrTrend] = None
    ceiling: Optional[Ceiling] = None
    visibility: Optional[DistanceRange] = None

    def has_state(self) -> bool:
        """True once a runway state group (deposits, CLRD, SNOCLO, closed) was merged."""
        return (
            self.not_operational
            or self.snoclo
            or self.clrd
            or self.deposits is not None
            or self.contamination_extent is not None
            or self.deposit_depth is not None
            or self.coefficient is not None
            or self.surface_friction_unreliable
        )

    def braking_action(self) -> BrakingAction:
        """
        Descriptive braking action derived from the friction coefficient.

        Returns:
            UNRELIABLE when friction is reported unreliable, UNKNOWN when no
            usable coefficient is available
        """
        if self.surface_friction_unreliable:
            return BrakingAction.UNRELIABLE
        if self.coefficient is None or not 0 <= self.coefficient <= 100:
            return BrakingAction.UNKNOWN
        for limit, action in _BRAKING_ACTION_LIMITS:
            if self.coefficient <= limit:
                return action
        return BrakingAction.GOOD


@dataclass
class DirectionData:
    """Visibility and ceiling in one direction from the aerodrome."""

    cardinal_direction: CardinalDirection
    visibility: Optional[DistanceRange] = None
    ceiling: Optional[Ceiling] = None


@dataclass
class Aerodrome:
    """Aerodrome-related data."""

    snoclo: bool = False
    colour_code: Optional[ColourCode] = None
    colour_code_black: bool = False
    runways: List[RunwayData] = field(default_factory=list)
    directions: List[DirectionData] = field(default_factory=list)
    ceiling: Optional[Ceiling] = None
    surface_visibility: Optional[Distance] = None
    tower_visibility: Optional[Distance] = None

    def is_empty(self) -> bool:
        return not is_reported(self)

    def runway(self, runway: Runway) -> Optional[RunwayData]:
        """Find data for a runway, or None."""
        for data in self.runways:
            if data.runway == runway:
                return data
        return None

    def direction(self, direction: CardinalDirection) -> Optional[DirectionData]:
        """Find data for a cardinal direction, or None."""
        for data in self.directions:
            if data.cardinal_direction == direction:
                return data
        return None
