"""Case and assertion filtering for list and detail views.

Both filters are pure and stable: they return new lists holding the
matching items in their original relative order.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from evalexplorer.evaluation.assertions import evaluate_assertions
from evalexplorer.models.report import Assertion, Case


class StatusFilter(str, Enum):
    """Which verdicts a view keeps."""

    all = "all"
    passed = "pass"
    failed = "fail"


def _coerce_status(status: StatusFilter | str) -> StatusFilter:
    """Accept an enum member or its string value.

    Raises:
        ValueError: If the string is not 'all', 'pass' or 'fail'.
    """
    return StatusFilter(status)


def _status_matches(status: StatusFilter, is_pass: bool) -> bool:
    if status is StatusFilter.all:
        return True
    if status is StatusFilter.passed:
        return is_pass
    return not is_pass


def filter_cases(
    cases: Iterable[Case],
    status: StatusFilter | str = StatusFilter.all,
    query: str = "",
) -> list[Case]:
    """Keep cases matching both the status filter and the name search.

    Args:
        cases: Cases in display order.
        status: 'all', 'pass' (case has no failing assertion) or 'fail'.
        query: Case-insensitive substring of the case name. Empty
            matches every case.

    Returns:
        Matching cases in their original order.
    """
    status = _coerce_status(status)
    needle = query.casefold()
    return [
        case
        for case in cases
        if _status_matches(status, evaluate_assertions(case.assertions).is_case_pass)
        and (not needle or needle in case.name.casefold())
    ]


def filter_assertions(
    assertions: Iterable[tuple[str, Assertion]],
    status: StatusFilter | str = StatusFilter.all,
) -> list[tuple[str, Assertion]]:
    """Keep (key, assertion) pairs whose value matches the status filter."""
    status = _coerce_status(status)
    return [
        (key, assertion)
        for key, assertion in assertions
        if _status_matches(status, assertion.value)
    ]
