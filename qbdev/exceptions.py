"""
Custom exception types and message templates for the qbdev toolkit.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):

    # --- Caller Errors ---
    INVALID_CHECK_LEVEL = "Unknown check level '{level}'. Expected one of: {allowed}."
    INVALID_SOURCE_TYPE = "Source code must be a string, got '{type_name}'."

    # --- Knowledge Base Errors ---
    KEYWORD_DATABASE_NOT_FOUND = "Keyword database file not found: '{path}'"
    KEYWORD_DATABASE_INVALID = "Keyword database '{path}' could not be read. Details: {details}"

    # --- Input Errors ---
    INPUT_FILE_NOT_FOUND = "Source file not found: '{path}'"
    INPUT_NOT_READABLE = "Source file '{path}' could not be read. Details: {details}"


class FindingMessage(Enum):
    """Message templates for the findings reported by the validators."""

    # --- Block Structure ---
    CLOSER_WITHOUT_OPENER = "{closer} without matching {opener}"
    UNCLOSED_LOOP = "Unclosed {kind} loop"
    UNCLOSED_PROCEDURE = "Unclosed {kind} '{name}'"

    # --- Line Syntax ---
    UNMATCHED_QUOTES = "Unmatched quotes"
    UNMATCHED_PARENTHESES = "Unmatched parentheses"
    INVALID_LINE_CONTINUATION = "Line continuation character '_' must be preceded by a space"
    IMPLICIT_DECLARATION = "Variable '{name}' may be implicitly declared"
    NON_QB64PE_SYNTAX = "'{construct}' is not valid QB64PE syntax"
    DEPRECATED_CONSTRUCT = "'{construct}' is deprecated"
    STRING_ASSIGNED_NUMBER = "String variable '{name}' is assigned a numeric value"
    NUMBER_ASSIGNED_STRING = "Numeric variable '{name}' is assigned a string value"
    LINE_TOO_LONG = "Line is {length} characters long (limit {limit})"
    MAGIC_NUMBER = "Magic number {value} should be a named constant"

    # --- Keywords ---
    UNKNOWN_KEYWORD = 'Unknown keyword "{name}". Did you mean one of: {suggestions}?'
    DEPRECATED_KEYWORD = 'Keyword "{name}" is deprecated.'
    VERSION_SPECIFIC_KEYWORD = 'Keyword "{name}" is QB64PE specific and may not work in older BASIC versions.'

    def format(self, **kwargs) -> str:
        return self.value.format(**kwargs)


class QBDevError(Exception):
    def __init__(
        self,
        code: ErrorCode,
        line: Optional[int] = None,
        file_path: Optional[str] = None,
        **kwargs,
    ):
        self.code = code
        self.line = line
        self.details = kwargs

        core_message = code.value.format(**kwargs)

        # --- Location prefix, most specific first ---
        location_prefix = ""
        if file_path and line:
            location_prefix = f"Error in '{file_path}' (Line: {line}):\n"
        elif file_path:
            location_prefix = f"Error in '{file_path}': "
        elif line:
            location_prefix = f"Error (Line: {line}): "

        self.message = location_prefix + core_message

        super().__init__(self.message)
