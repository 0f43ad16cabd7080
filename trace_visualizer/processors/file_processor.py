"""
Trace file and text parsing.
"""

import json
from typing import Any

import ijson

from ..core.errors import ParseError


class TraceFileProcessor:
    """Reads raw trace content into a parsed JSON value."""

    @staticmethod
    def process_file(file_path: str) -> Any:
        """
        Parse a trace JSON file using the streaming parser.

        Args:
            file_path: Path to the trace JSON file

        Returns:
            The parsed top-level JSON value

        Raises:
            ParseError: If the file is not valid JSON
            FileNotFoundError: If the file does not exist
        """
        print(f"Processing {file_path}...")

        with open(file_path, 'rb') as f:
            try:
                data = next(ijson.items(f, '', use_float=True))
            except StopIteration:
                raise ParseError(f"{file_path} is empty") from None
            except (ijson.JSONError, UnicodeDecodeError) as e:
                raise ParseError(f"Invalid JSON in {file_path}: {e}") from e

        print(f"Completed reading file: {file_path}")
        return data

    @staticmethod
    def process_text(text: str) -> Any:
        """
        Parse trace JSON from a string.

        Raises:
            ParseError: If the text is not valid JSON
        """
        try:
            return json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            raise ParseError(f"Invalid JSON: {e}") from e
