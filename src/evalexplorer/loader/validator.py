"""Report validation pipeline combining JSON parsing with envelope checks.

Two-stage validation: first parse JSON with position tracking, then
check the report envelope and build the Report model. Only the
envelope is checked here; per-case content degrades gracefully inside
the models and the field resolver.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from evalexplorer.loader.json_parser import JSONParseError, parse_json, parse_json_file
from evalexplorer.logging import get_logger
from evalexplorer.models.config import ExplorerConfig
from evalexplorer.models.report import Report

logger = get_logger(__name__)

REPORT_SUFFIX = ".json"


@dataclass
class ValidationErrorDetail:
    """A single report loading error with source position and context.

    Attributes:
        field: The field name or dotted path that caused the error.
        message: Human-readable error description.
        type: Error type string (e.g. 'malformed_json', 'invalid_schema').
        line: 1-indexed line number in the source, or None if unknown.
        col: 1-indexed column number in the source, or None if unknown.
        suggestion: 'Did you mean X?' hint, or None.
        input_value: The offending input value, if available.
    """

    field: str
    message: str
    type: str
    line: int | None = None
    col: int | None = None
    suggestion: str | None = None
    input_value: Any = field(default=None)


def _json_type(value: Any) -> str:
    """Name a decoded JSON value by its JSON type."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _get_suggestion(keys: list[str]) -> str | None:
    """Suggest 'cases' when a near-miss key is present instead."""
    matches = difflib.get_close_matches("cases", keys, n=1, cutoff=0.6)
    if matches:
        return f"Found '{matches[0]}'. Did you mean 'cases'?"
    return None


def _schema_error(
    field_path: str,
    message: str,
    *,
    suggestion: str | None = None,
    input_value: Any = None,
) -> ValidationErrorDetail:
    return ValidationErrorDetail(
        field=field_path,
        message=message,
        type="invalid_schema",
        suggestion=suggestion,
        input_value=input_value,
    )


def validate_report(raw: Any) -> tuple[Report | None, list[ValidationErrorDetail]]:
    """Validate a decoded JSON value as a report envelope.

    The value must be an object carrying a ``cases`` array. Nothing
    inside the cases is checked.

    Args:
        raw: Result of parsing arbitrary content as JSON.

    Returns:
        Tuple of (Report, []) on success, or (None, errors) on failure.
    """
    if not isinstance(raw, dict):
        return None, [
            _schema_error(
                "<root>",
                f"Invalid report format: expected a JSON object, got {_json_type(raw)}.",
            )
        ]

    if "cases" not in raw:
        return None, [
            _schema_error(
                "cases",
                "Invalid report format: 'cases' array missing.",
                suggestion=_get_suggestion([str(k) for k in raw]),
            )
        ]

    cases = raw["cases"]
    if not isinstance(cases, list):
        return None, [
            _schema_error(
                "cases",
                f"Invalid report format: 'cases' must be an array, got {_json_type(cases)}.",
                input_value=cases,
            )
        ]

    try:
        report = Report.model_validate(raw)
    except ValidationError as e:
        errors: list[ValidationErrorDetail] = []
        for err in e.errors():
            loc = err.get("loc", ())
            errors.append(
                _schema_error(
                    ".".join(str(part) for part in loc) or "<root>",
                    err.get("msg", "Validation error"),
                    input_value=err.get("input"),
                )
            )
        return None, errors

    logger.debug("Loaded report %r with %d case(s)", report.name, len(report.cases))
    return report, []


def validate_report_string(
    source: str | bytes,
    filename: str = "<string>",
) -> tuple[Report | None, list[ValidationErrorDetail]]:
    """Validate a report from JSON text.

    Args:
        source: JSON content as a string or UTF-8 bytes.
        filename: Filename for error messages.

    Returns:
        Tuple of (Report, []) on success, or (None, errors) on failure.
    """
    try:
        raw = parse_json(source, filename=filename)
    except JSONParseError as e:
        logger.info("Failed to parse JSON from %s: %s", filename, e.message)
        return None, [
            ValidationErrorDetail(
                field="<json>",
                message=e.message,
                type="malformed_json",
                line=e.line,
                col=e.column,
            )
        ]

    return validate_report(raw)


def validate_report_file(
    filepath: Path,
) -> tuple[Report | None, list[ValidationErrorDetail]]:
    """Validate a report JSON file.

    Rejects files without a ``.json`` suffix, then reads, parses and
    validates the content.

    Args:
        filepath: Path to the report file.

    Returns:
        Tuple of (Report, []) on success, or (None, errors) on failure.
    """
    if filepath.suffix.lower() != REPORT_SUFFIX:
        return None, [
            ValidationErrorDetail(
                field="<file>",
                message="Please upload a valid JSON file.",
                type="unsupported_file",
            )
        ]

    if not filepath.is_file():
        return None, [
            ValidationErrorDetail(
                field="<file>",
                message=f"File not found: {filepath}",
                type="file_not_found",
            )
        ]

    try:
        raw = parse_json_file(filepath)
    except JSONParseError as e:
        logger.info("Failed to parse JSON from %s: %s", filepath, e.message)
        return None, [
            ValidationErrorDetail(
                field="<json>",
                message=e.message,
                type="malformed_json",
                line=e.line,
                col=e.column,
            )
        ]
    except OSError as e:
        logger.warning("Could not read %s: %s", filepath, e)
        return None, [
            ValidationErrorDetail(
                field="<file>",
                message=f"Could not read file: {e.strerror or e}",
                type="read_error",
            )
        ]

    return validate_report(raw)


def _config_error(
    field_path: str,
    message: str,
    *,
    line: int | None = None,
    col: int | None = None,
    input_value: Any = None,
) -> ValidationErrorDetail:
    return ValidationErrorDetail(
        field=field_path,
        message=message,
        type="invalid_config",
        line=line,
        col=col,
        input_value=input_value,
    )


def validate_config_file(
    config_path: Path,
) -> tuple[ExplorerConfig | None, list[ValidationErrorDetail]]:
    """Validate an evalexplorer.yaml file.

    A missing or empty file yields the default configuration.

    Args:
        config_path: Path to the config file.

    Returns:
        Tuple of (ExplorerConfig, []) on success, or (None, errors) on failure.
    """
    if not config_path.exists():
        return ExplorerConfig(), []

    import yaml

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        problem = getattr(e, "problem", None) or str(e)
        logger.info("Failed to parse YAML from %s: %s", config_path, problem)
        return None, [
            _config_error(
                "<yaml>",
                problem,
                line=mark.line + 1 if mark is not None else None,
                col=mark.column + 1 if mark is not None else None,
            )
        ]
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", config_path, e)
        return None, [_config_error("<file>", f"Could not read file: {e}")]

    if raw is None:
        return ExplorerConfig(), []

    try:
        return ExplorerConfig.model_validate(raw), []
    except ValidationError as e:
        return None, [
            _config_error(
                ".".join(str(part) for part in err.get("loc", ())) or "<root>",
                err.get("msg", "Validation error"),
                input_value=err.get("input"),
            )
            for err in e.errors()
        ]
