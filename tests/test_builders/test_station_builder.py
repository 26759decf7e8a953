"""
Tests for the StationBuilder class.
"""

import pytest

from metar_simple.builders import StationBuilder
from metar_simple.groups import CardinalCode, CodedDirection, CodedRunway, DirectionType, KeywordType
from metar_simple.models import (
    AutoType,
    CardinalDirection,
    MissingData,
    Runway,
    RunwayDesignator,
    WarningMessage,
)

EAST = CodedDirection(DirectionType.VALUE_CARDINAL, cardinal=CardinalCode.E)


@pytest.fixture
def builder(warnings):
    return StationBuilder(warnings)


class TestLocation:
    """Test cases for the station location."""

    def test_location(self, builder):
        assert not builder.has_location
        builder.location("SCCH")
        assert builder.station.icao_code == "SCCH"
        assert builder.has_location

    def test_conflicting_location(self, builder, warnings):
        builder.location("SCCH")
        builder.location("ZZZZ")
        assert builder.station.icao_code == "SCCH"
        assert warnings.messages() == [WarningMessage.INCONSISTENT_DATA]


class TestKeywords:
    """Test cases for automated station type and station keywords."""

    def test_auto_type(self, builder, warnings):
        builder.keyword(KeywordType.AO2)
        builder.keyword(KeywordType.AO2)
        assert builder.station.auto_type == AutoType.AO2
        assert len(warnings) == 0

    def test_conflicting_auto_type(self, builder, warnings):
        builder.keyword(KeywordType.AO1)
        builder.keyword(KeywordType.AO2A)
        assert builder.station.auto_type == AutoType.NONE
        assert warnings.messages() == [WarningMessage.INVALID_AUTOTYPE]

    def test_conflict_is_final(self, builder, warnings):
        builder.keyword(KeywordType.AO1)
        builder.keyword(KeywordType.AO2)
        builder.keyword(KeywordType.AO1)
        assert builder.station.auto_type == AutoType.NONE
        assert warnings.messages() == [WarningMessage.INVALID_AUTOTYPE] * 2

    def test_nospeci_and_maintenance(self, builder):
        builder.keyword(KeywordType.NOSPECI)
        builder.keyword(KeywordType.MAINTENANCE_INDICATOR)
        assert builder.station.no_speci_reports
        assert builder.station.requires_maintenance

    def test_no_directional_variation(self, builder):
        builder.no_directional_variation()
        assert builder.station.no_vis_directional_variation


class TestMissingData:
    """Test cases for missing data indicators."""

    def test_missing(self, builder, warnings):
        builder.missing(MissingData.PWINO)
        builder.missing(MissingData.SLPNO)
        assert builder.station.missing_data == {MissingData.PWINO, MissingData.SLPNO}
        assert len(warnings) == 0

    def test_duplicate_missing(self, builder, warnings):
        builder.missing(MissingData.PWINO)
        builder.missing(MissingData.PWINO)
        assert warnings.messages() == [WarningMessage.DUPLICATED_DATA]

    def test_visno_direction(self, builder, warnings):
        builder.visno(None, EAST)
        assert builder.station.missing_data == {MissingData.VISNO_DIRECTION}
        assert builder.station.directions_no_vis_data == {CardinalDirection.E}
        assert len(warnings) == 0

    def test_chino_runway(self, builder):
        builder.chino(CodedRunway(24, "L"), None)
        assert builder.station.missing_data == {MissingData.CHINO_RUNWAY}
        assert builder.station.runways_no_ceiling_data == {Runway(24, RunwayDesignator.LEFT)}

    def test_chino_bare(self, builder):
        builder.chino(None, None)
        assert builder.station.missing_data == {MissingData.CHINO}
        assert not builder.station.runways_no_ceiling_data

    def test_repeated_location_warns(self, builder, warnings):
        builder.visno(None, EAST)
        builder.visno(None, EAST)
        assert warnings.messages() == [WarningMessage.DUPLICATED_DATA]

    def test_several_directions(self, builder, warnings):
        builder.visno(None, EAST)
        builder.visno(None, CodedDirection(DirectionType.VALUE_CARDINAL, cardinal=CardinalCode.SW))
        assert builder.station.directions_no_vis_data == {CardinalDirection.E, CardinalDirection.SW}
        assert len(warnings) == 0
