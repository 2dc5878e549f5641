"""
Utility helpers for the qbdev toolkit: terminal colouring, a JSON encoder for
reports and artifacts, and small line helpers shared by the rewriters.
"""

import json
from datetime import datetime
from enum import Enum
from typing import List

from lark import Token
from pydantic import BaseModel


class TerminalColors:
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    RESET = "\033[0m"


SEVERITY_COLORS = {
    "error": TerminalColors.RED,
    "warning": TerminalColors.YELLOW,
    "info": TerminalColors.CYAN,
}


class ReportEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, BaseModel):
            return o.model_dump(mode="json")
        if isinstance(o, Token):
            return o.value
        if isinstance(o, Enum):
            return o.value
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, set):
            return sorted(o)
        return super().default(o)


def leading_whitespace(text: str) -> str:
    return text[: len(text) - len(text.lstrip())]


def join_lines(lines: List[str], trailing_newline: bool) -> str:
    text = "\n".join(lines)
    return text + "\n" if trailing_newline else text
