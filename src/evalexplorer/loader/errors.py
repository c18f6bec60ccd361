"""Error formatter with dual-mode output (rich human and CI concise).

Produces annotated error messages pointing into the report source in
human mode and concise file:line:col -- message lines in CI mode.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from evalexplorer.loader.validator import ValidationErrorDetail


# Map loader error types to error codes
ERROR_CODES: dict[str, str] = {
    "malformed_json": "E101",
    "invalid_schema": "E102",
    "unsupported_file": "E103",
    "file_not_found": "E104",
    "read_error": "E105",
    "invalid_config": "E106",
}

# Human-readable descriptions for error codes
ERROR_DESCRIPTIONS: dict[str, str] = {
    "E101": "malformed JSON",
    "E102": "invalid report schema",
    "E103": "unsupported file type",
    "E104": "file not found",
    "E105": "file could not be read",
    "E106": "invalid configuration",
}


class ErrorFormatter:
    """Formats report loading errors for human or CI consumption.

    Args:
        ci_mode: If True, use CI-friendly concise output. If None,
            auto-detect from the CI environment variable.
    """

    def __init__(self, ci_mode: bool | None = None) -> None:
        if ci_mode is None:
            self.ci_mode = os.environ.get("CI", "").lower() in ("true", "1", "yes")
        else:
            self.ci_mode = ci_mode

    def _get_error_code(self, error_type: str) -> str:
        return ERROR_CODES.get(error_type, "E999")

    def _get_error_description(self, error_code: str) -> str:
        return ERROR_DESCRIPTIONS.get(error_code, "report error")

    def format_error(
        self,
        error: ValidationErrorDetail,
        source_lines: list[str],
        filename: str,
    ) -> str:
        """Format a single error for display.

        Args:
            error: The validation error detail.
            source_lines: Lines of the original JSON source (may be empty).
            filename: Filename being loaded.

        Returns:
            Formatted error string.
        """
        if self.ci_mode:
            return self._format_ci(error, filename)
        return self._format_rich(error, source_lines, filename)

    def _format_ci(self, error: ValidationErrorDetail, filename: str) -> str:
        """Format: filename:line:col -- field: message (suggestion)"""
        line = error.line if error.line is not None else 0
        col = error.col if error.col is not None else 0
        suggestion_suffix = f" ({error.suggestion})" if error.suggestion else ""
        return f"{filename}:{line}:{col} -- {error.field}: {error.message}{suggestion_suffix}"

    def _format_rich(
        self,
        error: ValidationErrorDetail,
        source_lines: list[str],
        filename: str,
    ) -> str:
        """Format error with a source snippet when the position is known.

        Produces output like:
            error[E101]: malformed JSON
              --> report.json:2:12
               |
             2 |   "cases": [,]
               |            ^ Expecting value
               |
        """
        error_code = self._get_error_code(error.type)
        description = self._get_error_description(error_code)

        lines = [f"error[{error_code}]: {description}"]

        if error.line is not None:
            col = error.col if error.col is not None else 1
            lines.append(f"  --> {filename}:{error.line}:{col}")
            lines.append("   |")

            line_idx = error.line - 1
            if 0 <= line_idx < len(source_lines):
                src_line = source_lines[line_idx].rstrip()
                line_num_str = str(error.line)
                padding = " " * len(line_num_str)
                lines.append(f" {line_num_str} | {src_line}")
                arrow_padding = " " * max(col - 1, 0)
                lines.append(f" {padding} | {arrow_padding}^ {error.message}")
            else:
                lines.append(f"   | {error.message}")

            lines.append("   |")
        else:
            lines.append(f"  --> {filename}")
            lines.append("   |")
            lines.append(f"   | {error.field}: {error.message}")
            lines.append("   |")

        if error.suggestion:
            lines.append(f"   = help: {error.suggestion}")

        return "\n".join(lines)

    def format_all(
        self,
        errors: list[ValidationErrorDetail],
        source: str,
        filename: str,
    ) -> str:
        """Format all errors, joined with blank line separators."""
        source_lines = source.splitlines()
        return "\n\n".join(
            self.format_error(error, source_lines, filename) for error in errors
        )

    def print_errors(
        self,
        errors: list[ValidationErrorDetail],
        source: str,
        filename: str,
    ) -> None:
        """Print formatted errors to stderr."""
        print(self.format_all(errors, source, filename), file=sys.stderr)

    def print_success(self, filename: str, case_count: int) -> None:
        """Print a success message for a valid report."""
        print(f"  {filename} ... valid ({case_count} cases)")
