"""Evaluation package: field resolution, case verdicts, aggregation, filtering.

These are the only entry points a display layer needs; none of them
raise on report content.
"""

from __future__ import annotations

from evalexplorer.evaluation.aggregation import StatsCache, aggregate
from evalexplorer.evaluation.assertions import assertion_views, evaluate_assertions
from evalexplorer.evaluation.filtering import StatusFilter, filter_assertions, filter_cases
from evalexplorer.evaluation.resolver import (
    resolve_case_fields,
    resolve_duration,
    resolve_input_tokens,
    resolve_judge_model,
    resolve_output_tokens,
    resolve_provider,
    resolve_target_model,
)

__all__ = [
    "StatsCache",
    "StatusFilter",
    "aggregate",
    "assertion_views",
    "evaluate_assertions",
    "filter_assertions",
    "filter_cases",
    "resolve_case_fields",
    "resolve_duration",
    "resolve_input_tokens",
    "resolve_judge_model",
    "resolve_output_tokens",
    "resolve_provider",
    "resolve_target_model",
]
