"""Tests for evalexplorer.evaluation.resolver - ordered fallback chains."""

from __future__ import annotations

import pytest

from evalexplorer.evaluation.resolver import (
    lookup,
    resolve_case_fields,
    resolve_duration,
    resolve_input_tokens,
    resolve_judge_model,
    resolve_output_tokens,
    resolve_provider,
    resolve_target_model,
)
from evalexplorer.models.report import Assertion, Case


def _case(**fields) -> Case:
    return Case.model_validate({"name": "c", **fields})


def _meta(**meta) -> dict:
    return {"inputs": {"prompt": "p", "response": "r", "meta": meta}}


class TestLookup:
    """Test dotted path walking."""

    def test_walks_models_and_mappings(self):
        case = _case(**_meta(usage={"input_tokens": 5}))
        assert lookup(case, ("inputs", "meta", "usage", "input_tokens")) == 5

    def test_missing_step_returns_none(self):
        case = _case(inputs={"meta": {}})
        assert lookup(case, ("inputs", "meta", "usage", "input_tokens")) is None

    def test_non_container_step_returns_none(self):
        case = _case(inputs={"meta": "flat string"})
        assert lookup(case, ("inputs", "meta", "usage")) is None


class TestInputTokens:
    """Input token precedence: attributes, then inputs.meta.usage, then 0."""

    def test_attributes_win(self):
        case = _case(
            attributes={"input_tokens": 10},
            **_meta(usage={"input_tokens": 99}),
        )
        assert resolve_input_tokens(case) == 10

    def test_falls_back_to_usage(self):
        case = _case(**_meta(usage={"input_tokens": 99}))
        assert resolve_input_tokens(case) == 99

    def test_default_zero(self):
        assert resolve_input_tokens(_case()) == 0

    def test_attribute_zero_is_kept(self):
        """A present zero is a value, not a missing field."""
        case = _case(
            attributes={"input_tokens": 0},
            **_meta(usage={"input_tokens": 99}),
        )
        assert resolve_input_tokens(case) == 0

    @pytest.mark.parametrize("bad", [None, "10", True, [10], {"n": 10}])
    def test_wrong_type_skipped(self, bad):
        case = _case(
            attributes={"input_tokens": bad},
            **_meta(usage={"input_tokens": 7}),
        )
        assert resolve_input_tokens(case) == 7

    def test_non_finite_skipped(self):
        case = _case(attributes={"input_tokens": float("nan")})
        assert resolve_input_tokens(case) == 0

    def test_int_beyond_float_range_skipped(self):
        case = _case(
            attributes={"input_tokens": 10**400},
            **_meta(usage={"input_tokens": 7}),
        )
        assert resolve_input_tokens(case) == 7
        assert resolve_input_tokens(_case(attributes={"input_tokens": 10**400})) == 0


class TestOutputTokens:
    """Output token precedence mirrors input tokens."""

    def test_attributes_win(self):
        case = _case(
            attributes={"output_tokens": 3},
            **_meta(usage={"output_tokens": 30}),
        )
        assert resolve_output_tokens(case) == 3

    def test_falls_back_to_usage(self):
        case = _case(**_meta(usage={"output_tokens": 30}))
        assert resolve_output_tokens(case) == 30

    def test_default_zero(self):
        assert resolve_output_tokens(_case(attributes="not a mapping")) == 0


class TestDuration:
    """Duration precedence: task_duration, total_duration, inputs.meta.duration."""

    def test_task_duration_first(self):
        case = _case(task_duration=1.0, total_duration=2.0, **_meta(duration=3.0))
        assert resolve_duration(case) == 1.0

    def test_total_duration_second(self):
        case = _case(total_duration=2.0, **_meta(duration=3.0))
        assert resolve_duration(case) == 2.0

    def test_meta_duration_last(self):
        case = _case(**_meta(duration=3.0))
        assert resolve_duration(case) == 3.0

    def test_default_zero(self):
        assert resolve_duration(_case()) == 0

    def test_wrong_type_skipped(self):
        case = _case(task_duration="fast", total_duration=2.5)
        assert resolve_duration(case) == 2.5

    def test_huge_int_skipped(self):
        case = _case(task_duration=10**400, total_duration=2.5)
        assert resolve_duration(case) == 2.5


class TestTargetModel:
    """Target model precedence: attributes.model, then inputs.meta.request.model."""

    def test_attributes_win(self):
        case = _case(attributes={"model": "a-model"}, **_meta(request={"model": "b-model"}))
        assert resolve_target_model(case) == "a-model"

    def test_falls_back_to_request(self):
        case = _case(**_meta(request={"model": "b-model"}))
        assert resolve_target_model(case) == "b-model"

    def test_absent_is_none(self):
        assert resolve_target_model(_case()) is None

    def test_empty_string_skipped(self):
        case = _case(attributes={"model": ""}, **_meta(request={"model": "b-model"}))
        assert resolve_target_model(case) == "b-model"

    def test_legacy_metadata_not_consulted(self):
        case = _case(metadata={"request": {"model": "legacy"}})
        assert resolve_target_model(case) is None


class TestProvider:
    def test_provider_name(self):
        case = _case(**_meta(provider={"name": "openai"}))
        assert resolve_provider(case) == "openai"

    def test_absent_is_none(self):
        assert resolve_provider(_case()) is None


class TestJudgeModel:
    """Judge model comes from source.arguments.model."""

    def test_judge_model_present(self):
        assertion = Assertion.model_validate(
            {"value": True, "source": {"name": "LLMJudge", "arguments": {"model": "judge-1"}}}
        )
        assert resolve_judge_model(assertion) == "judge-1"

    def test_no_source(self):
        assert resolve_judge_model(Assertion.model_validate({"value": True})) is None

    def test_null_arguments(self):
        assertion = Assertion.model_validate(
            {"value": True, "source": {"name": "Equals", "arguments": None}}
        )
        assert resolve_judge_model(assertion) is None

    def test_non_string_model(self):
        assertion = Assertion.model_validate(
            {"value": True, "source": {"name": "J", "arguments": {"model": 3}}}
        )
        assert resolve_judge_model(assertion) is None


class TestResolveCaseFields:
    """Test resolving every field at once."""

    def test_all_fields(self):
        case = _case(
            attributes={"model": "target", "input_tokens": 12},
            task_duration=0.5,
            assertions={
                "a": {"value": True, "source": {"arguments": {"model": "judge-b"}}},
                "b": {"value": False, "source": {"arguments": {"model": "judge-a"}}},
                "c": {"value": True, "source": {"arguments": {"model": "judge-b"}}},
                "d": {"value": True},
            },
            **_meta(usage={"output_tokens": 34}, provider={"name": "anthropic"}),
        )
        fields = resolve_case_fields(case)
        assert fields.input_tokens == 12
        assert fields.output_tokens == 34
        assert fields.duration == 0.5
        assert fields.target_model == "target"
        assert fields.provider == "anthropic"
        assert fields.judge_models == ["judge-b", "judge-a"]

    def test_empty_case_defaults(self):
        fields = resolve_case_fields(_case())
        assert fields.input_tokens == 0
        assert fields.output_tokens == 0
        assert fields.duration == 0
        assert fields.target_model is None
        assert fields.provider is None
        assert fields.judge_models == []

    def test_resolution_does_not_mutate_case(self):
        case = _case(attributes={"input_tokens": 1}, **_meta(usage={"input_tokens": 2}))
        before = case.model_dump()
        resolve_case_fields(case)
        assert case.model_dump() == before
