"""Report data models for evaluation report input.

These models encode the report envelope contract: a named run holding
an ordered list of cases, each with a mapping of assertions. Only the
envelope is strict. Everything inside a case degrades to defaults so a
single odd case never rejects the whole report.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class AssertionSource(BaseModel):
    """Descriptor of the evaluator that produced an assertion verdict.

    ``arguments.model``, when present, names the judge model.
    """

    model_config = {"extra": "allow", "frozen": True}

    name: str | None = None
    arguments: dict[str, Any] | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            return {}
        coerced = dict(data)
        if not isinstance(coerced.get("name"), str):
            coerced["name"] = None
        if not isinstance(coerced.get("arguments"), dict):
            coerced["arguments"] = None
        return coerced


class Assertion(BaseModel):
    """A single named pass/fail check applied to a case output.

    ``value`` is always a definite bool. Only a JSON ``true`` passes;
    a missing, null or non-boolean value is a failure.
    """

    model_config = {"extra": "allow", "frozen": True}

    name: str | None = None
    value: bool = False
    reason: str | None = None
    source: AssertionSource | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            return {"value": False}
        coerced = dict(data)
        coerced["value"] = coerced.get("value") is True

        name = coerced.get("name")
        coerced["name"] = name if isinstance(name, str) and name else None

        reason = coerced.get("reason")
        if reason is not None and not isinstance(reason, str):
            coerced["reason"] = str(reason)

        if not isinstance(coerced.get("source"), (dict, AssertionSource)):
            coerced["source"] = None
        return coerced


class Case(BaseModel):
    """One evaluated sample: prompt/response pair plus its verdicts.

    Metric locations (``inputs.meta``, ``attributes``, the duration
    fields, ``metadata``) are kept as raw JSON values. They are only
    interpreted by the field resolver.
    """

    model_config = {"extra": "allow", "frozen": True}

    name: str = ""
    inputs: Any = None
    output: Any = None
    expected_output: Any = None
    attributes: Any = None
    assertions: dict[str, Assertion] = Field(default_factory=dict)
    task_duration: Any = None
    total_duration: Any = None
    metadata: Any = None
    metrics: Any = None
    scores: Any = None
    labels: Any = None
    trace_id: Any = None
    span_id: Any = None
    evaluator_failures: Any = None

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, cls):
            return data
        if not isinstance(data, dict):
            return {}
        coerced = dict(data)
        name = coerced.get("name")
        coerced["name"] = "" if name is None else str(name)
        if not isinstance(coerced.get("assertions"), dict):
            coerced["assertions"] = {}
        return coerced


class Report(BaseModel):
    """Complete output of one evaluation run.

    ``cases`` is required and must be a list; its order is the display
    order. The remaining envelope fields are optional and tolerated in
    any shape.
    """

    model_config = {"extra": "allow", "frozen": True}

    name: str = ""
    cases: list[Case]
    failures: list[Any] = Field(default_factory=list)
    experiment_metadata: Any = None
    trace_id: str | None = None
    span_id: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        coerced = dict(data)
        name = coerced.get("name")
        coerced["name"] = "" if name is None else str(name)
        if not isinstance(coerced.get("failures"), list):
            coerced["failures"] = []
        for key in ("trace_id", "span_id"):
            if not isinstance(coerced.get(key), str):
                coerced[key] = None
        return coerced
