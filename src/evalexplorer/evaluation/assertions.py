"""Assertion evaluator -- per-case pass/fail status from an assertion map.

A case passes iff none of its assertions failed, so a case without
assertions passes vacuously. Enumeration follows the mapping's own
order (JSON document order), which makes ``first_failure`` stable for
a given report.
"""

from __future__ import annotations

from collections.abc import Mapping

from evalexplorer.evaluation.resolver import resolve_judge_model
from evalexplorer.models.report import Assertion
from evalexplorer.models.stats import AssertionView, CaseEvaluation


def assertion_view(key: str, assertion: Assertion) -> AssertionView:
    """Build display data for one assertion, labelled by name or key."""
    return AssertionView(
        key=key,
        label=assertion.name or key,
        value=assertion.value,
        reason=assertion.reason,
        judge_model=resolve_judge_model(assertion),
        source_name=assertion.source.name if assertion.source is not None else None,
    )


def assertion_views(assertions: Mapping[str, Assertion]) -> list[AssertionView]:
    return [assertion_view(key, assertion) for key, assertion in assertions.items()]


def evaluate_assertions(assertions: Mapping[str, Assertion]) -> CaseEvaluation:
    """Count passing and failing assertions of one case.

    Args:
        assertions: Assertion key -> Assertion mapping of a case.

    Returns:
        CaseEvaluation with totals, the case verdict, the first failing
        assertion (or None) and display data for every assertion.
    """
    views = assertion_views(assertions)
    passed = sum(1 for view in views if view.value)
    failed = len(views) - passed
    first_failure = next((view for view in views if not view.value), None)

    return CaseEvaluation(
        total=len(views),
        passed=passed,
        failed=failed,
        is_case_pass=failed == 0,
        first_failure=first_failure,
        assertions=views,
    )
