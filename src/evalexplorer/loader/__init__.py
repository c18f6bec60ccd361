"""evalexplorer report loader - JSON parsing, envelope validation, error reporting."""

from evalexplorer.loader.json_parser import (
    JSONParseError,
    parse_json,
    parse_json_file,
)
from evalexplorer.loader.validator import (
    ValidationErrorDetail,
    validate_config_file,
    validate_report,
    validate_report_file,
    validate_report_string,
)

__all__ = [
    "JSONParseError",
    "ValidationErrorDetail",
    "parse_json",
    "parse_json_file",
    "validate_config_file",
    "validate_report",
    "validate_report_file",
    "validate_report_string",
]
