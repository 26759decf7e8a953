"""Report part tracking: which part of the report (header, body, trend, remarks) a group is in."""

import logging
from enum import Enum

from metar_simple.groups.groups import (
    Group,
    KeywordGroup,
    KeywordType,
    LocationGroup,
    ReportTimeGroup,
    TrendGroup,
    TrendGroupType,
)

logger = logging.getLogger(__name__)


class Scope(Enum):
    """Part of the report the groups are currently read from."""

    HEADER = "HEADER"
    BODY = "BODY"
    TREND = "TREND"
    REMARK = "REMARK"


class GroupRole(Enum):
    """What a group does to the scope."""

    HEADER = "HEADER"
    CONTENT = "CONTENT"
    TREND = "TREND"
    REMARK = "REMARK"


_HEADER_KEYWORDS = frozenset(
    [
        KeywordType.METAR,
        KeywordType.SPECI,
        KeywordType.TAF,
        KeywordType.AMD,
        KeywordType.NIL,
        KeywordType.CNL,
        KeywordType.COR,
        KeywordType.AUTO,
    ]
)


class ScopeTracker:
    """
    State machine over the report parts.

    The scope starts at HEADER, moves to BODY on the first content group,
    to TREND on a trend introducer and to REMARK on ``RMK``. REMARK is
    final. ``advance()`` tells whether a group is acceptable where it
    appears; an unacceptable group leaves the scope unchanged.

    Example:
        >>> tracker = ScopeTracker()
        >>> tracker.advance(GroupRole.CONTENT)
        True
        >>> tracker.scope
        <Scope.BODY: 'BODY'>
    """

    def __init__(self):
        self.scope = Scope.HEADER

    @property
    def in_header(self) -> bool:
        return self.scope == Scope.HEADER

    def classify(self, group: Group) -> GroupRole:
        """
        Role of a group given the current scope.

        A bare time span without probability read in the header is the
        validity period of a TAF, not a trend.
        """
        if isinstance(group, (LocationGroup, ReportTimeGroup)):
            return GroupRole.HEADER
        if isinstance(group, KeywordGroup):
            if group.type in _HEADER_KEYWORDS:
                return GroupRole.HEADER
            if group.type == KeywordType.RMK:
                return GroupRole.REMARK
            return GroupRole.CONTENT
        if isinstance(group, TrendGroup):
            if (
                self.scope == Scope.HEADER
                and group.type == TrendGroupType.TIME_SPAN
                and group.probability is None
            ):
                return GroupRole.HEADER
            return GroupRole.TREND
        return GroupRole.CONTENT

    def advance(self, role: GroupRole) -> bool:
        """
        Apply the transition for a group with ``role``.

        Returns:
            True if the group is acceptable in the current scope
        """
        scope = self.scope
        if role == GroupRole.HEADER:
            return scope == Scope.HEADER
        if role == GroupRole.CONTENT:
            if scope == Scope.HEADER:
                self.scope = Scope.BODY
            return True
        if role == GroupRole.TREND:
            if scope == Scope.REMARK:
                logger.debug("Trend in remarks")
                return False
            self.scope = Scope.TREND
            return True
        if scope == Scope.REMARK:
            logger.debug("Remarks already started")
            return False
        self.scope = Scope.REMARK
        return True
