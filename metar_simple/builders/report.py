"""Builder for report metadata (type, flags, times, warnings, plain text)."""

import logging
from typing import Optional

from metar_simple.adapters import ValueAdapter
from metar_simple.builders.base import DataBuilder, WarningLog
from metar_simple.groups.groups import KeywordGroup, KeywordType, ReportHeader, TrendGroup
from metar_simple.groups.values import CodedTime
from metar_simple.models.report import Report, ReportError, ReportType, WarningMessage

logger = logging.getLogger(__name__)

_REPORT_TYPES = {
    KeywordType.METAR: ReportType.METAR,
    KeywordType.SPECI: ReportType.SPECI,
    KeywordType.TAF: ReportType.TAF,
}


class ReportBuilder(DataBuilder):
    """
    Build the Report aggregate.

    The report type starts from the tokenizer's ``ReportHeader`` and may be
    set or refined by METAR/SPECI/TAF keywords. Conflicting flags are
    resolved the way the header keywords are read: NIL wins over CNL, COR
    wins over AMD, and AMD/CNL are dropped outside a TAF.
    """

    def __init__(self, header: ReportHeader, warnings: WarningLog):
        super().__init__(warnings)
        self._report = Report(type=header.type, error=header.error)

    @property
    def report(self) -> Report:
        return self._report

    @property
    def type(self) -> Optional[ReportType]:
        return self._report.type

    @property
    def is_forecast(self) -> bool:
        return self._report.is_forecast

    @property
    def is_nil_or_cancelled(self) -> bool:
        return self._report.missing or self._report.cancelled

    def keyword(self, group: KeywordGroup) -> None:
        """Merge a report type or report attribute keyword."""
        self._check_open()
        report = self._report
        kind = group.type

        if kind in _REPORT_TYPES:
            self._set_type(_REPORT_TYPES[kind])
        elif kind == KeywordType.NIL:
            if report.cancelled:
                self.log(WarningMessage.BOTH_NIL_AND_CNL)
                report.cancelled = False
            report.missing = True
        elif kind == KeywordType.CNL:
            if report.missing:
                self.log(WarningMessage.BOTH_NIL_AND_CNL)
            elif not self.is_forecast:
                self.log(WarningMessage.CNL_IN_NON_TAF)
            else:
                report.cancelled = True
        elif kind == KeywordType.AMD:
            if report.correctional:
                self.log(WarningMessage.BOTH_AMD_AND_COR)
            elif not self.is_forecast:
                self.log(WarningMessage.AMD_IN_NON_TAF)
            else:
                report.amended = True
        elif kind == KeywordType.COR:
            if report.amended:
                self.log(WarningMessage.BOTH_AMD_AND_COR)
                report.amended = False
            report.correctional = True
            if group.correction_number:
                report.correction_number = group.correction_number
        elif kind == KeywordType.AUTO:
            report.automated = True
        else:
            logger.debug("Keyword %s is not a report attribute", kind.name)

    def report_time(self, time: CodedTime) -> None:
        self.set_data(self._report, "report_time", ValueAdapter.time(time))

    def applicable_period(self, group: TrendGroup) -> None:
        """Merge the validity period of a TAF; METARs carry none."""
        self._check_open()
        if not self.is_forecast:
            self.log(WarningMessage.APPLICABLE_TIME_IN_METAR)
            return
        self.set_data(self._report, "applicable_from", ValueAdapter.time(group.time_from))
        self.set_data(self._report, "applicable_until", ValueAdapter.time(group.time_until))

    def correction_number(self, number: Optional[int]) -> None:
        """Merge a correction number from a remark (``CCA`` is 1)."""
        self._check_open()
        if not number:
            return
        if not self._report.correctional:
            self.log(WarningMessage.INCONSISTENT_CORRECTION_NUMBER)
            return
        if self._report.correction_number == 0:
            self._report.correction_number = number
        elif self._report.correction_number != number:
            self.log(WarningMessage.INCONSISTENT_CORRECTION_NUMBER)

    def plain_text(self, raw: str) -> None:
        self._check_open()
        self._report.plain_text.append(raw)

    def close_header(self) -> None:
        """Check header completeness once the first non-header group is seen."""
        report = self._report
        if report.type in (ReportType.METAR, ReportType.SPECI) and report.report_time is None:
            self.log(WarningMessage.NO_REPORT_TIME_IN_METAR)
        if (
            report.type == ReportType.TAF
            and not report.missing
            and (report.applicable_from is None or report.applicable_until is None)
        ):
            self.log(WarningMessage.NO_APPLICABLE_TIME_IN_TAF)

    def build(self) -> Report:
        self._report.warnings = list(self.warnings.warnings)
        self.finalize()
        return self._report

    def build_error(self, error: ReportError) -> Report:
        """Report reduced to its header fields plus ``error``."""
        report = self._report
        report.error = error
        report.plain_text = []
        return self.build()

    # --- Internal builders ---

    def _set_type(self, report_type: ReportType) -> None:
        current = self._report.type
        if current is None:
            self._report.type = report_type
        elif report_type == ReportType.SPECI:
            if current == ReportType.TAF:
                self.log(WarningMessage.SPECI_IN_TAF)
            else:
                self._report.type = ReportType.SPECI
        elif report_type != current and current != ReportType.SPECI:
            self.log(WarningMessage.INCONSISTENT_DATA)
