"""Field resolver -- one canonical value per logical case metric.

Exporters place the same fact in different report locations depending
on their version. Each logical field is described here once, as an
ordered chain of dotted paths. The first path holding a present,
non-null value of the right type wins, otherwise the field's default
applies.

Chains:
- input tokens:  attributes.input_tokens -> inputs.meta.usage.input_tokens (0)
- output tokens: attributes.output_tokens -> inputs.meta.usage.output_tokens (0)
- duration:      task_duration -> total_duration -> inputs.meta.duration (0)
- target model:  attributes.model -> inputs.meta.request.model (None)
- provider:      inputs.meta.provider.name (None)
- judge model:   source.arguments.model on each assertion (None)

A numeric default of 0 cannot be told apart from a reported zero.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel

from evalexplorer.models.report import Assertion, Case
from evalexplorer.models.stats import ResolvedFields

FieldPath = tuple[str, ...]

INPUT_TOKENS_CHAIN: tuple[FieldPath, ...] = (
    ("attributes", "input_tokens"),
    ("inputs", "meta", "usage", "input_tokens"),
)
OUTPUT_TOKENS_CHAIN: tuple[FieldPath, ...] = (
    ("attributes", "output_tokens"),
    ("inputs", "meta", "usage", "output_tokens"),
)
DURATION_CHAIN: tuple[FieldPath, ...] = (
    ("task_duration",),
    ("total_duration",),
    ("inputs", "meta", "duration"),
)
TARGET_MODEL_CHAIN: tuple[FieldPath, ...] = (
    ("attributes", "model"),
    ("inputs", "meta", "request", "model"),
)
PROVIDER_CHAIN: tuple[FieldPath, ...] = (
    ("inputs", "meta", "provider", "name"),
)
JUDGE_MODEL_CHAIN: tuple[FieldPath, ...] = (
    ("source", "arguments", "model"),
)


def is_number(value: Any) -> bool:
    """True for finite JSON numbers (bools excluded).

    Integers too large to convert to a float are rejected too.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int beyond float range
        return False


def is_name(value: Any) -> bool:
    """True for non-empty strings."""
    return isinstance(value, str) and value != ""


def lookup(root: Any, path: FieldPath) -> Any:
    """Walk a dotted path through models and mappings.

    Returns None as soon as a step is missing or lands on a value that
    cannot be descended into.
    """
    current = root
    for part in path:
        if isinstance(current, BaseModel):
            current = getattr(current, part, None)
        elif isinstance(current, Mapping):
            current = current.get(part)
        else:
            return None
        if current is None:
            return None
    return current


def resolve_first(
    root: Any,
    chain: tuple[FieldPath, ...],
    accept: Callable[[Any], bool],
    default: Any = None,
) -> Any:
    """Return the first value along ``chain`` that ``accept`` admits."""
    for path in chain:
        value = lookup(root, path)
        if value is not None and accept(value):
            return value
    return default


def resolve_input_tokens(case: Case) -> int | float:
    return resolve_first(case, INPUT_TOKENS_CHAIN, is_number, 0)


def resolve_output_tokens(case: Case) -> int | float:
    return resolve_first(case, OUTPUT_TOKENS_CHAIN, is_number, 0)


def resolve_duration(case: Case) -> int | float:
    """Case duration in seconds, 0 when no source reports one."""
    return resolve_first(case, DURATION_CHAIN, is_number, 0)


def resolve_target_model(case: Case) -> str | None:
    """Model under evaluation, or None when unknown."""
    return resolve_first(case, TARGET_MODEL_CHAIN, is_name)


def resolve_provider(case: Case) -> str | None:
    return resolve_first(case, PROVIDER_CHAIN, is_name)


def resolve_judge_model(assertion: Assertion) -> str | None:
    """Model that produced an assertion's verdict, or None."""
    return resolve_first(assertion, JUDGE_MODEL_CHAIN, is_name)


def resolve_case_fields(case: Case) -> ResolvedFields:
    """Resolve every logical field of a case in one pass.

    ``judge_models`` lists the distinct judge models of the case's
    assertions in assertion order.
    """
    judge_models: list[str] = []
    for assertion in case.assertions.values():
        judge = resolve_judge_model(assertion)
        if judge is not None and judge not in judge_models:
            judge_models.append(judge)

    return ResolvedFields(
        input_tokens=resolve_input_tokens(case),
        output_tokens=resolve_output_tokens(case),
        duration=resolve_duration(case),
        target_model=resolve_target_model(case),
        provider=resolve_provider(case),
        judge_models=judge_models,
    )
