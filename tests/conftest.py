import pytest

from metar_simple import simplify
from metar_simple.builders import WarningLog
from metar_simple.groups import (
    CodedTime,
    KeywordGroup,
    KeywordType,
    LocationGroup,
    ReportHeader,
    ReportTimeGroup,
    TrendGroup,
    TrendGroupType,
)
from metar_simple.models import ReportType


@pytest.fixture
def warnings() -> WarningLog:
    """Return an empty warning log with a current group id set."""
    log = WarningLog()
    log.current_id = "GROUP"
    return log


@pytest.fixture
def metar_header():
    """Return groups for ``METAR ZZZZ 061700Z``."""
    return [
        KeywordGroup("METAR", KeywordType.METAR),
        LocationGroup("ZZZZ", "ZZZZ"),
        ReportTimeGroup("061700Z", CodedTime(6, 17, 0)),
    ]


@pytest.fixture
def taf_header():
    """Return groups for ``TAF ZZZZ 051130Z 0512/0618``."""
    return [
        KeywordGroup("TAF", KeywordType.TAF),
        LocationGroup("ZZZZ", "ZZZZ"),
        ReportTimeGroup("051130Z", CodedTime(5, 11, 30)),
        TrendGroup("0512/0618", TrendGroupType.TIME_SPAN, time_from=CodedTime(5, 12), time_until=CodedTime(6, 18)),
    ]


@pytest.fixture
def metar(metar_header):
    """Return a function consolidating a METAR body after the standard header."""
    def consolidate(*groups, options=None):
        return simplify(ReportHeader(ReportType.METAR), metar_header + list(groups), options)
    return consolidate


@pytest.fixture
def taf(taf_header):
    """Return a function consolidating a TAF body after the standard header."""
    def consolidate(*groups, options=None):
        return simplify(ReportHeader(ReportType.TAF), taf_header + list(groups), options)
    return consolidate
