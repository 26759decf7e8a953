"""Report metadata, warnings and errors."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from metar_simple.models.units import Time


class ReportType(Enum):
    """Type of weather report."""

    METAR = "METAR"
    SPECI = "SPECI"
    TAF = "TAF"


class ReportError(Enum):
    """
    Fatal consolidation errors.

    When the error is anything other than NO_ERROR, only the header fields of
    the Report are meaningful and the other aggregates are empty.
    """

    NO_ERROR = "NO_ERROR"
    EMPTY_REPORT = "EMPTY_REPORT"
    UNKNOWN_REPORT_TYPE = "UNKNOWN_REPORT_TYPE"
    REPORT_TOO_LARGE = "REPORT_TOO_LARGE"
    UNEXPECTED_REPORT_END = "UNEXPECTED_REPORT_END"
    REPORT_HEADER_FORMAT = "REPORT_HEADER_FORMAT"
    NIL_OR_CNL_FORMAT = "NIL_OR_CNL_FORMAT"
    GROUP_NOT_ALLOWED = "GROUP_NOT_ALLOWED"


class WarningMessage(Enum):
    """Recoverable problems found while consolidating a report."""

    SPECI_IN_TAF = "SPECI_IN_TAF"
    BOTH_NIL_AND_CNL = "BOTH_NIL_AND_CNL"
    BOTH_AMD_AND_COR = "BOTH_AMD_AND_COR"
    CNL_IN_NON_TAF = "CNL_IN_NON_TAF"
    AMD_IN_NON_TAF = "AMD_IN_NON_TAF"
    NO_REPORT_TIME_IN_METAR = "NO_REPORT_TIME_IN_METAR"
    APPLICABLE_TIME_IN_METAR = "APPLICABLE_TIME_IN_METAR"
    NO_APPLICABLE_TIME_IN_TAF = "NO_APPLICABLE_TIME_IN_TAF"
    INCONSISTENT_CORRECTION_NUMBER = "INCONSISTENT_CORRECTION_NUMBER"
    INCONSISTENT_DATA = "INCONSISTENT_DATA"
    DUPLICATED_DATA = "DUPLICATED_DATA"
    REQUIRED_DATA_MISSING = "REQUIRED_DATA_MISSING"
    INVALID_GROUP = "INVALID_GROUP"
    INVALID_AUTOTYPE = "INVALID_AUTOTYPE"
    INVALID_DIRECTION_SECTOR = "INVALID_DIRECTION_SECTOR"
    INVALID_DISTANCE_RANGE = "INVALID_DISTANCE_RANGE"
    INVALID_3H_6H_REPORT_TIME = "INVALID_3H_6H_REPORT_TIME"
    INVALID_WEATHER_PHENOMENA = "INVALID_WEATHER_PHENOMENA"
    INVALID_LIGHTNING_TYPE = "INVALID_LIGHTNING_TYPE"


@dataclass(frozen=True)
class Warning:
    """A warning with the raw text of the group that caused it."""

    message: WarningMessage
    id: str = ""

    def __str__(self) -> str:
        if self.id:
            return f"{self.message.value}: {self.id}"
        return self.message.value


@dataclass
class Report:
    """
    Report metadata.

    ``type`` is None when the report type could not be determined; in that
    case ``error`` is UNKNOWN_REPORT_TYPE.
    """

    type: Optional[ReportType] = None
    missing: bool = False
    cancelled: bool = False
    correctional: bool = False
    amended: bool = False
    automated: bool = False
    correction_number: int = 0
    report_time: Optional[Time] = None
    applicable_from: Optional[Time] = None
    applicable_until: Optional[Time] = None
    error: ReportError = ReportError.NO_ERROR
    warnings: List[Warning] = field(default_factory=list)
    plain_text: List[str] = field(default_factory=list)

    @property
    def is_forecast(self) -> bool:
        return self.type == ReportType.TAF

    @property
    def has_error(self) -> bool:
        return self.error != ReportError.NO_ERROR
