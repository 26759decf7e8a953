"""
Tests for the ScopeTracker state machine.
"""

import pytest

from metar_simple.collate import GroupRole, Scope, ScopeTracker
from metar_simple.groups import (
    CodedTime,
    KeywordGroup,
    KeywordType,
    LocationGroup,
    ReportTimeGroup,
    TrendGroup,
    TrendGroupType,
    UnknownGroup,
)

TIME_SPAN = TrendGroup("0512/0618", TrendGroupType.TIME_SPAN, time_from=CodedTime(5, 12), time_until=CodedTime(6, 18))


@pytest.fixture
def tracker():
    return ScopeTracker()


class TestClassify:
    """Test cases for group roles."""

    @pytest.mark.parametrize("group,role", [
        (LocationGroup("ZZZZ", "ZZZZ"), GroupRole.HEADER),
        (ReportTimeGroup("061700Z", CodedTime(6, 17, 0)), GroupRole.HEADER),
        (KeywordGroup("METAR", KeywordType.METAR), GroupRole.HEADER),
        (KeywordGroup("NIL", KeywordType.NIL), GroupRole.HEADER),
        (KeywordGroup("RMK", KeywordType.RMK), GroupRole.REMARK),
        (KeywordGroup("CAVOK", KeywordType.CAVOK), GroupRole.CONTENT),
        (TrendGroup("TEMPO", TrendGroupType.TEMPO), GroupRole.TREND),
        (UnknownGroup("XYZ"), GroupRole.CONTENT),
    ])
    def test_roles(self, tracker, group, role):
        assert tracker.classify(group) == role

    def test_time_span_in_header(self, tracker):
        assert tracker.classify(TIME_SPAN) == GroupRole.HEADER

    def test_time_span_after_header(self, tracker):
        tracker.advance(GroupRole.CONTENT)
        assert tracker.classify(TIME_SPAN) == GroupRole.TREND

    def test_probability_time_span_in_header(self, tracker):
        group = TrendGroup("PROB30 0512/0518", TrendGroupType.TIME_SPAN, probability=30)
        assert tracker.classify(group) == GroupRole.TREND


class TestAdvance:
    """Test cases for scope transitions."""

    def test_initial_scope(self, tracker):
        assert tracker.scope == Scope.HEADER
        assert tracker.in_header

    def test_header_then_body(self, tracker):
        assert tracker.advance(GroupRole.HEADER)
        assert tracker.advance(GroupRole.CONTENT)
        assert tracker.scope == Scope.BODY

    def test_header_group_in_body(self, tracker):
        tracker.advance(GroupRole.CONTENT)
        assert not tracker.advance(GroupRole.HEADER)
        assert tracker.scope == Scope.BODY

    def test_body_trend_remark(self, tracker):
        tracker.advance(GroupRole.CONTENT)
        assert tracker.advance(GroupRole.TREND)
        assert tracker.scope == Scope.TREND
        assert tracker.advance(GroupRole.CONTENT)
        assert tracker.scope == Scope.TREND
        assert tracker.advance(GroupRole.REMARK)
        assert tracker.scope == Scope.REMARK

    def test_trend_from_header(self, tracker):
        assert tracker.advance(GroupRole.TREND)
        assert tracker.scope == Scope.TREND

    def test_remark_is_final(self, tracker):
        tracker.advance(GroupRole.REMARK)

        assert not tracker.advance(GroupRole.TREND)
        assert not tracker.advance(GroupRole.REMARK)
        assert not tracker.advance(GroupRole.HEADER)
        assert tracker.advance(GroupRole.CONTENT)
        assert tracker.scope == Scope.REMARK
