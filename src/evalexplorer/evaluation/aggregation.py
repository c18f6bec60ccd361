"""Suite-level statistics computed from a report's cases.

A single pure fold over ``report.cases``: case verdicts and assertion
counts come from the assertion evaluator, metrics and model names from
the field resolver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from evalexplorer.evaluation.assertions import evaluate_assertions
from evalexplorer.evaluation.resolver import resolve_case_fields
from evalexplorer.models.stats import Stats

if TYPE_CHECKING:
    from evalexplorer.models.report import Report


def aggregate(report: Report) -> Stats:
    """Compute suite statistics for a report.

    Averages divide by the case count. With zero cases every average
    and the pass rate are 0. Model sets are de-duplicated by exact
    string equality and listed sorted.

    Args:
        report: A validated Report.

    Returns:
        Stats for the whole report. Calling this twice on the same
        report returns equal values.
    """
    passed = 0
    failed = 0
    passed_assertions = 0
    failed_assertions = 0
    total_duration = 0.0
    total_input_tokens = 0.0
    total_output_tokens = 0.0
    models: set[str] = set()
    judge_models: set[str] = set()

    for case in report.cases:
        evaluation = evaluate_assertions(case.assertions)
        if evaluation.is_case_pass:
            passed += 1
        else:
            failed += 1
        passed_assertions += evaluation.passed
        failed_assertions += evaluation.failed

        fields = resolve_case_fields(case)
        total_duration += fields.duration
        total_input_tokens += fields.input_tokens
        total_output_tokens += fields.output_tokens
        if fields.target_model is not None:
            models.add(fields.target_model)
        judge_models.update(fields.judge_models)

    n = len(report.cases)
    if n == 0:
        return Stats()

    return Stats(
        total=n,
        passed=passed,
        failed=failed,
        pass_rate=passed / n,
        total_assertions=passed_assertions + failed_assertions,
        passed_assertions=passed_assertions,
        failed_assertions=failed_assertions,
        total_duration=total_duration,
        total_input_tokens=total_input_tokens,
        total_output_tokens=total_output_tokens,
        avg_duration=total_duration / n,
        avg_input_tokens=total_input_tokens / n,
        avg_output_tokens=total_output_tokens / n,
        models=sorted(models),
        judge_models=sorted(judge_models),
    )


class StatsCache:
    """Memoize Stats for the current report, keyed by report identity.

    Handing the cache a different Report object (even an equal one)
    recomputes. ``clear()`` drops the cached entry.
    """

    def __init__(self) -> None:
        self._report: Report | None = None
        self._stats: Stats | None = None

    def get(self, report: Report) -> Stats:
        if self._report is not report or self._stats is None:
            self._report = report
            self._stats = aggregate(report)
        return self._stats

    def clear(self) -> None:
        self._report = None
        self._stats = None
