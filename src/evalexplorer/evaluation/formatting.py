"""Plain-text formatting of stats and case evaluations for display.

No Rich markup here; the CLI decides on styling.
"""

from __future__ import annotations

from evalexplorer.models.stats import CaseEvaluation, Stats

NO_REASON = "Check details"
ALL_PASSED = "All checks passed"
UNKNOWN_MODEL = "Unknown Model"


def model_label(stats: Stats) -> str:
    """'N/A' for no known model, the name for one, 'N Models' otherwise."""
    if not stats.models:
        return "N/A"
    if len(stats.models) == 1:
        return stats.models[0]
    return f"{len(stats.models)} Models"


def model_caption(stats: Stats) -> str:
    return "Multiple targets" if len(stats.models) > 1 else "Target LLM"


def pass_rate_text(stats: Stats) -> str:
    return f"{stats.pass_rate:.1%}"


def duration_text(seconds: float, precision: int = 3) -> str:
    return f"{seconds:.{precision}f}s"


def score_text(evaluation: CaseEvaluation) -> str:
    """'passed/total' assertion count for a case."""
    return f"{evaluation.passed}/{evaluation.total}"


def truncate(text: str, width: int) -> str:
    if len(text) <= width:
        return text
    return text[: max(width - 3, 0)] + "..."


def first_failure_text(evaluation: CaseEvaluation, width: int = 60) -> str:
    """Summarize the first failing assertion as 'label: reason'.

    A missing reason reads 'Check details'; a passing case reads
    'All checks passed'.
    """
    failure = evaluation.first_failure
    if failure is None:
        return ALL_PASSED
    return truncate(f"{failure.label}: {failure.reason or NO_REASON}", width)


def tokens_text(value: float) -> str:
    """Token count, or '-' when none was reported."""
    if not value:
        return "-"
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"
