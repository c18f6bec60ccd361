"""Tests for the report error formatter."""

from evalexplorer.loader.errors import ErrorFormatter
from evalexplorer.loader.validator import ValidationErrorDetail


def _json_error() -> ValidationErrorDetail:
    return ValidationErrorDetail(
        field="<json>",
        message="Expecting value",
        type="malformed_json",
        line=2,
        col=13,
    )


def _schema_error() -> ValidationErrorDetail:
    return ValidationErrorDetail(
        field="cases",
        message="Invalid report format: 'cases' array missing.",
        type="invalid_schema",
        suggestion="Found 'case'. Did you mean 'cases'?",
    )


class TestErrorFormatterRichMode:
    """Tests for human-readable error formatting."""

    def test_includes_error_code_and_description(self):
        result = ErrorFormatter(ci_mode=False).format_error(_json_error(), [], "r.json")
        assert "error[E101]" in result
        assert "malformed JSON" in result

    def test_includes_snippet_and_caret(self):
        source_lines = ["{", '  "cases": [,]', "}"]
        result = ErrorFormatter(ci_mode=False).format_error(_json_error(), source_lines, "r.json")
        assert "r.json:2:13" in result
        assert '"cases": [,]' in result
        assert " " * 12 + "^ Expecting value" in result

    def test_line_out_of_range(self):
        result = ErrorFormatter(ci_mode=False).format_error(_json_error(), ["{"], "r.json")
        assert "Expecting value" in result

    def test_no_line_number(self):
        result = ErrorFormatter(ci_mode=False).format_error(_schema_error(), [], "r.json")
        assert "error[E102]" in result
        assert "--> r.json" in result
        assert "cases: Invalid report format" in result

    def test_suggestion_shown(self):
        result = ErrorFormatter(ci_mode=False).format_error(_schema_error(), [], "r.json")
        assert "= help: Found 'case'" in result

    def test_unknown_type_gets_fallback_code(self):
        error = ValidationErrorDetail(field="x", message="m", type="mystery")
        result = ErrorFormatter(ci_mode=False).format_error(error, [], "r.json")
        assert "error[E999]" in result

    def test_config_error_code(self):
        error = ValidationErrorDetail(
            field="colour",
            message="Extra inputs are not permitted",
            type="invalid_config",
        )
        result = ErrorFormatter(ci_mode=False).format_error(error, [], "evalexplorer.yaml")
        assert "error[E106]" in result
        assert "invalid configuration" in result
        assert "colour: Extra inputs are not permitted" in result


class TestErrorFormatterCIMode:
    """Tests for concise CI formatting."""

    def test_ci_format(self):
        result = ErrorFormatter(ci_mode=True).format_error(_json_error(), [], "r.json")
        assert result == "r.json:2:13 -- <json>: Expecting value"

    def test_ci_format_without_position(self):
        result = ErrorFormatter(ci_mode=True).format_error(_schema_error(), [], "r.json")
        assert result.startswith("r.json:0:0 -- cases:")
        assert "(Found 'case'. Did you mean 'cases'?)" in result

    def test_auto_detect_from_env(self, monkeypatch):
        monkeypatch.setenv("CI", "true")
        assert ErrorFormatter().ci_mode is True
        monkeypatch.setenv("CI", "")
        assert ErrorFormatter().ci_mode is False


class TestFormatAll:
    def test_joins_with_blank_line(self):
        formatter = ErrorFormatter(ci_mode=True)
        result = formatter.format_all([_json_error(), _schema_error()], "", "r.json")
        assert result.count("\n\n") == 1

    def test_print_success(self, capsys):
        ErrorFormatter(ci_mode=True).print_success("r.json", 3)
        assert "r.json ... valid (3 cases)" in capsys.readouterr().out
