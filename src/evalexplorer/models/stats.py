"""Derived data models: resolved case fields, case evaluations, suite stats.

None of these are persisted. They are fresh projections computed from a
Report and never mutated afterwards.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ResolvedFields(BaseModel):
    """Canonical metric values for one case after fallback resolution."""

    model_config = {"frozen": True}

    input_tokens: int | float = 0
    output_tokens: int | float = 0
    duration: int | float = 0
    target_model: str | None = None
    provider: str | None = None
    judge_models: list[str] = Field(default_factory=list)


class AssertionView(BaseModel):
    """Display data for a single assertion within a case.

    ``label`` is the assertion name, falling back to its mapping key.
    """

    model_config = {"frozen": True}

    key: str
    label: str
    value: bool
    reason: str | None = None
    judge_model: str | None = None
    source_name: str | None = None


class CaseEvaluation(BaseModel):
    """Pass/fail breakdown of one case's assertion map."""

    model_config = {"frozen": True}

    total: int
    passed: int
    failed: int
    is_case_pass: bool
    first_failure: AssertionView | None = None
    assertions: list[AssertionView] = Field(default_factory=list)


class Stats(BaseModel):
    """Suite-level aggregate over every case of a report.

    ``pass_rate`` is a fraction in [0, 1]. Averages divide by the case
    count and are 0 for an empty report. ``models`` and ``judge_models``
    are the distinct resolved model names, sorted.
    """

    model_config = {"frozen": True}

    total: int = 0
    passed: int = 0
    failed: int = 0
    pass_rate: float = 0.0
    total_assertions: int = 0
    passed_assertions: int = 0
    failed_assertions: int = 0
    total_duration: float = 0.0
    total_input_tokens: float = 0.0
    total_output_tokens: float = 0.0
    avg_duration: float = 0.0
    avg_input_tokens: float = 0.0
    avg_output_tokens: float = 0.0
    models: list[str] = Field(default_factory=list)
    judge_models: list[str] = Field(default_factory=list)
