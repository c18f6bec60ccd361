"""JSON parser with source positions for rich error reporting.

Wraps the standard json module so syntax errors surface with the
parser's own message plus 1-indexed line and column numbers.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class JSONParseError(Exception):
    """Raised when report content is not syntactically valid JSON.

    Attributes:
        message: The parser's description of the syntax error.
        line: 1-indexed line number where the error occurred.
        column: 1-indexed column number where the error occurred.
        filename: Name of the file being parsed, or '<string>'.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        filename: str = "<string>",
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        super().__init__(message)


def parse_json(source: str | bytes, filename: str = "<string>") -> Any:
    """Parse a JSON document and return the decoded value.

    Args:
        source: JSON content. Bytes are decoded as UTF-8 (a leading
            BOM is accepted).
        filename: Filename for error messages.

    Returns:
        The decoded JSON value, of any type.

    Raises:
        JSONParseError: If the content is not valid JSON.
    """
    if isinstance(source, bytes):
        try:
            source = source.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise JSONParseError(
                message=f"Content is not valid UTF-8: {e.reason}",
                filename=filename,
            ) from e

    try:
        return json.loads(source)
    except json.JSONDecodeError as e:
        raise JSONParseError(
            message=e.msg,
            line=e.lineno,
            column=e.colno,
            filename=filename,
        ) from e
    except (ValueError, RecursionError) as e:
        # digit-limit overflow or nesting too deep for the decoder
        raise JSONParseError(message=str(e), filename=filename) from e


def parse_json_file(filepath: Path) -> Any:
    """Parse a JSON file and return the decoded value.

    Raises:
        JSONParseError: If the file contains invalid JSON.
        OSError: If the file cannot be read.
    """
    return parse_json(filepath.read_bytes(), filename=str(filepath))
