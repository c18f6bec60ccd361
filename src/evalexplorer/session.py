"""Explicit report session state for a display layer.

Holds the current report and selected case. A failed load leaves the
previous report in place; a successful one replaces it wholesale and
drops the selection and cached stats.
"""

from __future__ import annotations

from pathlib import Path

from evalexplorer.evaluation.aggregation import StatsCache
from evalexplorer.loader.validator import (
    ValidationErrorDetail,
    validate_report_file,
    validate_report_string,
)
from evalexplorer.logging import get_logger
from evalexplorer.models.report import Case, Report
from evalexplorer.models.stats import Stats

logger = get_logger(__name__)


class ReportSession:
    """One report at a time, loaded wholesale and discarded on reset."""

    def __init__(self) -> None:
        self.report: Report | None = None
        self.selected: Case | None = None
        self._stats = StatsCache()

    def _replace(
        self,
        report: Report | None,
        errors: list[ValidationErrorDetail],
    ) -> list[ValidationErrorDetail]:
        if report is None:
            return errors
        self.report = report
        self.selected = None
        self._stats.clear()
        return []

    def load_file(self, filepath: Path) -> list[ValidationErrorDetail]:
        """Load a report file. Returns the errors, empty on success."""
        report, errors = validate_report_file(filepath)
        return self._replace(report, errors)

    def load_string(
        self,
        source: str | bytes,
        filename: str = "<string>",
    ) -> list[ValidationErrorDetail]:
        """Load a report from JSON text. Returns the errors, empty on success."""
        report, errors = validate_report_string(source, filename=filename)
        return self._replace(report, errors)

    def reset(self) -> None:
        self.report = None
        self.selected = None
        self._stats.clear()

    @property
    def stats(self) -> Stats | None:
        if self.report is None:
            return None
        return self._stats.get(self.report)

    def find_case(self, ref: str) -> Case | None:
        """Find a case by 1-based index or exact name.

        A purely numeric reference is tried as an index first, then as
        a name. Names are not unique; the first match wins.
        """
        if self.report is None:
            return None
        cases = self.report.cases
        if ref.isdigit():
            index = int(ref)
            if 1 <= index <= len(cases):
                return cases[index - 1]
        return next((case for case in cases if case.name == ref), None)

    def select(self, ref: str) -> Case | None:
        """Select a case by reference. Clears the selection on a miss."""
        self.selected = self.find_case(ref)
        if self.selected is None:
            logger.debug("No case matches %r", ref)
        return self.selected
