"""
Warning collection and the shared first-value-wins merge rule.

Every builder records diagnostics in one ``WarningLog`` per consolidation.
The driver sets ``current_id`` to the raw text of the group being merged, so
each warning names the group that caused it.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from metar_simple.models.report import Warning, WarningMessage
from metar_simple.models.units import is_reported

logger = logging.getLogger(__name__)


class BuilderFinalizedError(RuntimeError):
    """Raised when data is merged into a builder after ``finalize()``."""


@dataclass
class WarningLog:
    """Append-only, ordered collection of warnings for one report."""

    warnings: List[Warning] = field(default_factory=list)
    current_id: str = ""

    def add(self, message: WarningMessage, id: Optional[str] = None) -> None:
        """Record a warning for the current group, or for ``id`` when given."""
        warning = Warning(message, self.current_id if id is None else id)
        logger.debug("Warning %s", warning)
        self.warnings.append(warning)

    def messages(self) -> List[WarningMessage]:
        return [w.message for w in self.warnings]

    def __len__(self) -> int:
        return len(self.warnings)


class DataBuilder:
    """
    Base class for the aggregate builders.

    Provides the merge rule shared by every field: the first value wins, a
    not reported value may be replaced by a reported one, an identical
    repeat is accepted silently and anything else is discarded with one
    DUPLICATED_DATA warning.
    """

    def __init__(self, warnings: WarningLog):
        self.warnings = warnings
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def finalize(self) -> None:
        """Close the builder; any later merge raises ``BuilderFinalizedError``."""
        self._finalized = True

    def log(self, message: WarningMessage) -> None:
        self.warnings.add(message)

    def set_data(self, target: Any, name: str, value: Any) -> bool:
        """
        Merge ``value`` into attribute ``name`` of ``target``.

        Args:
            target: Aggregate or nested data object holding the field
            name: Attribute name
            value: New value; None leaves the field untouched

        Returns:
            True if the field now holds ``value``, False if it was discarded
        """
        self._check_open()
        if value is None:
            return False
        current = getattr(target, name)
        if current is None or (not is_reported(current) and is_reported(value)):
            setattr(target, name, value)
            return True
        if current == value:
            return True
        logger.debug("Discarding %s=%r, already %r", name, value, current)
        self.log(WarningMessage.DUPLICATED_DATA)
        return False

    def _check_open(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError(f"{type(self).__name__} is finalized")
