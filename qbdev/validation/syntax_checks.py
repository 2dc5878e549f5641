"""
Line-level syntax checks that run before the keyword and compatibility passes.

The checks are grouped by check level: every level runs the basic checks,
'strict' adds deprecated constructs and obvious type mismatches, and
'best-practices' adds readability checks plus general suggestions.
"""

import re
from typing import Callable, List, Optional, Set, Tuple

from ..config.config import CHECK_LEVELS, LONG_PROGRAM_LINES, MAX_LINE_LENGTH
from ..core.classes import Finding, FindingSource, Severity, SourceLine
from ..exceptions import FindingMessage
from .block_structure import LINE_LABEL_REGEX
from .tokenizer import tokenize_line

# --- Patterns ---

NON_QB64PE_CONSTRUCTS = [
    (re.compile(r"\bMsgBox\b", re.IGNORECASE), "MsgBox", "Use INPUT or PRINT statements instead"),
    (re.compile(r"\bDeclare\s+Function\b(?!.*\bLIBRARY\b)", re.IGNORECASE), "Declare Function", "Use $INCLUDE or built-in QB64PE functions"),
    (re.compile(r"\bByVal\b|\bByRef\b", re.IGNORECASE), "ByVal/ByRef", "QB64PE passes arguments by reference, use BYVAL only in DECLARE LIBRARY"),
    (re.compile(r"\bPrivate\b|\bPublic\b", re.IGNORECASE), "Private/Public", "Use DIM SHARED for global variables"),
    (re.compile(r"\bLet\b\s*=", re.IGNORECASE), "Let =", "Direct assignment is preferred in QB64PE"),
    (re.compile(r"\bOption\s+Explicit\b", re.IGNORECASE), "Option Explicit", "Use OPTION _EXPLICIT in QB64PE"),
]

DEPRECATED_CONSTRUCTS = [
    (re.compile(r"\bDEF\s+FN", re.IGNORECASE), "DEF FN", "Use FUNCTION instead"),
    (re.compile(r"\bGOSUB\b", re.IGNORECASE), "GOSUB", "Use SUB procedures instead"),
    (re.compile(r"\bON\s+ERROR\s+RESUME\s+NEXT\b", re.IGNORECASE), "ON ERROR RESUME NEXT", "Use an ON ERROR GOTO handler instead"),
]

ASSIGNMENT_REGEX = re.compile(r"^(?:LET\s+|FOR\s+)?([A-Za-z][A-Za-z0-9_]*[$%!#&]?)\s*=(?!=)", re.IGNORECASE)
DECLARATION_LINE_REGEX = re.compile(r"^(?:DIM|REDIM|CONST|STATIC|COMMON)\b", re.IGNORECASE)
DECLARED_NAME_REGEX = re.compile(r"\b([A-Za-z][A-Za-z0-9_]*[$%!#&]?)\s*(?:\([^)]*\))?\s*(?:AS\b|=)", re.IGNORECASE)
PARAMETER_LIST_REGEX = re.compile(r"^(?:SUB|FUNCTION)\s+[\w.]+[$%&!#~]*\s*\(([^)]*)\)", re.IGNORECASE)

STRING_ASSIGNED_NUMBER_REGEX = re.compile(r"(\w+\$)\s*=\s*(\d+)")
NUMBER_ASSIGNED_STRING_REGEX = re.compile(r"(\b[A-Za-z_]\w*[%!#&])\s*=\s*\"")

MAGIC_NUMBER_EXCEPTIONS = {"100", "1000"}


def _statement_text(line: SourceLine) -> str:
    return LINE_LABEL_REGEX.sub("", line.stripped, count=1)


def _strip_comment(text: str) -> str:
    """Drops a trailing ' comment, ignoring apostrophes inside strings."""
    in_string = False
    for i, char in enumerate(text):
        if char == '"':
            in_string = not in_string
        elif char == "'" and not in_string:
            return text[:i]
    return text


def _finding(line: SourceLine, column: int, severity: Severity, category: str, message: str, suggestion: Optional[str] = None) -> Finding:
    return Finding(
        line=line.number,
        column=column,
        severity=severity,
        category=category,
        message=message,
        suggestion=suggestion,
        source=FindingSource.SYNTAX,
    )


class LineSyntaxChecker:
    def __init__(self, lines: List[SourceLine], check_level: str = "basic", is_keyword: Optional[Callable[[str], bool]] = None):
        self.lines = lines
        self.level_index = CHECK_LEVELS.index(check_level)
        self.is_keyword = is_keyword or (lambda name: False)
        self.findings: List[Finding] = []
        self.suggestions: List[str] = []

    def run(self) -> Tuple[List[Finding], List[str]]:
        declared = self._collect_declared_names()
        reported: Set[str] = set()

        for line in self.lines:
            if line.is_blank or line.is_comment:
                continue
            self._check_basic(line)
            self._check_non_qb64pe(line)
            self._check_implicit_declaration(line, declared, reported)
            if self.level_index >= 1:
                self._check_deprecated(line)
                self._check_type_mismatch(line)
            if self.level_index >= 2:
                self._check_readability(line)

        if self.level_index >= 2:
            self._general_suggestions()
        return self.findings, self.suggestions

    # --- Basic ---

    def _check_basic(self, line: SourceLine):
        text = line.text
        code = _strip_comment(text)

        if code.count('"') % 2 != 0:
            self.findings.append(
                _finding(line, code.rfind('"') + 1, Severity.ERROR, "unmatched-quotes", FindingMessage.UNMATCHED_QUOTES.value, "Ensure all quotes are properly closed")
            )

        depth = 0
        balanced = True
        for token in tokenize_line(text):
            if token.type != "PUNCT":
                continue
            if token.value == "(":
                depth += 1
            elif token.value == ")":
                depth -= 1
                if depth < 0:
                    balanced = False
        if depth != 0 or not balanced:
            self.findings.append(
                _finding(
                    line,
                    max(len(text.rstrip()), 1),
                    Severity.ERROR,
                    "unmatched-parentheses",
                    FindingMessage.UNMATCHED_PARENTHESES.value,
                    "Check that all parentheses are properly matched",
                )
            )

        stripped = text.rstrip()
        if stripped.endswith("_") and not stripped.endswith(" _") and len(stripped.strip()) > 1:
            # A lone identifier ending in '_' is not a continuation.
            if not re.search(r"[A-Za-z0-9]_$", stripped):
                self.findings.append(
                    _finding(
                        line,
                        stripped.rfind("_") + 1,
                        Severity.WARNING,
                        "invalid-line-continuation",
                        FindingMessage.INVALID_LINE_CONTINUATION.value,
                        "Add a space before the underscore",
                    )
                )

    def _check_non_qb64pe(self, line: SourceLine):
        for pattern, construct, suggestion in NON_QB64PE_CONSTRUCTS:
            match = pattern.search(line.text)
            if match:
                self.findings.append(
                    _finding(line, match.start() + 1, Severity.WARNING, "non-qb64pe-syntax", FindingMessage.NON_QB64PE_SYNTAX.format(construct=construct), suggestion)
                )

    def _collect_declared_names(self) -> Set[str]:
        declared = set()
        for line in self.lines:
            text = _statement_text(line)
            if DECLARATION_LINE_REGEX.match(text):
                body = re.sub(r"^\w+\s+(?:SHARED\s+)?(?:_PRESERVE\s+)?", "", text, flags=re.IGNORECASE)
                declared.update(name.upper() for name in DECLARED_NAME_REGEX.findall(body))
                continue
            params = PARAMETER_LIST_REGEX.match(text)
            if params:
                for param in params.group(1).split(","):
                    words = param.split()
                    if words and words[0].upper() in ("BYVAL", "BYREF"):
                        words = words[1:]
                    if words:
                        declared.add(re.sub(r"\(\s*\)$", "", words[0]).upper())
        return declared

    def _check_implicit_declaration(self, line: SourceLine, declared: Set[str], reported: Set[str]):
        match = ASSIGNMENT_REGEX.match(_statement_text(line))
        if not match:
            return
        name = match.group(1)
        key = name.upper()
        if key in declared or key in reported or self.is_keyword(key) or self.is_keyword(key.rstrip("$%!#&")):
            return
        reported.add(key)
        self.findings.append(
            _finding(
                line,
                line.text.find(name) + 1,
                Severity.WARNING,
                "implicit-declaration",
                FindingMessage.IMPLICIT_DECLARATION.format(name=name),
                f"Consider adding 'DIM {name} AS <type>' before first use",
            )
        )

    # --- Strict ---

    def _check_deprecated(self, line: SourceLine):
        for pattern, construct, suggestion in DEPRECATED_CONSTRUCTS:
            match = pattern.search(line.text)
            if match:
                self.findings.append(
                    _finding(line, match.start() + 1, Severity.WARNING, "deprecated-construct", FindingMessage.DEPRECATED_CONSTRUCT.format(construct=construct), suggestion)
                )

    def _check_type_mismatch(self, line: SourceLine):
        for match in STRING_ASSIGNED_NUMBER_REGEX.finditer(line.text):
            self.findings.append(
                _finding(
                    line,
                    match.start() + 1,
                    Severity.WARNING,
                    "type-mismatch",
                    FindingMessage.STRING_ASSIGNED_NUMBER.format(name=match.group(1)),
                    "Use STR$() to convert a number to a string",
                )
            )
        for match in NUMBER_ASSIGNED_STRING_REGEX.finditer(line.text):
            self.findings.append(
                _finding(
                    line,
                    match.start() + 1,
                    Severity.WARNING,
                    "type-mismatch",
                    FindingMessage.NUMBER_ASSIGNED_STRING.format(name=match.group(1)),
                    "Use VAL() to convert a string to a number, or add the $ sigil",
                )
            )

    # --- Best practices ---

    def _check_readability(self, line: SourceLine):
        if len(line.text) > MAX_LINE_LENGTH:
            self.findings.append(
                _finding(
                    line,
                    MAX_LINE_LENGTH + 1,
                    Severity.INFO,
                    "line-length",
                    FindingMessage.LINE_TOO_LONG.format(length=len(line.text), limit=MAX_LINE_LENGTH),
                    "Consider breaking long lines with ' _' continuations",
                )
            )

        if re.match(r"^CONST\b", _statement_text(line), re.IGNORECASE):
            return
        for token in tokenize_line(line.text):
            digits = token.value.rstrip("%&!#~")
            if token.type == "NUMBER" and digits.isdigit() and len(digits) >= 3 and digits not in MAGIC_NUMBER_EXCEPTIONS:
                self.findings.append(
                    _finding(line, token.column, Severity.INFO, "magic-number", FindingMessage.MAGIC_NUMBER.format(value=token.value), "Consider using a named CONST")
                )

    def _general_suggestions(self):
        if not any(line.is_comment or "'" in line.text for line in self.lines):
            self.suggestions.append("Add comments to explain complex logic")
        has_error_handling = any(re.search(r"\bON\s+ERROR\b", line.text, re.IGNORECASE) for line in self.lines)
        if not has_error_handling and len(self.lines) > LONG_PROGRAM_LINES:
            self.suggestions.append("Consider adding error handling for larger programs")


def check_line_syntax(lines: List[SourceLine], check_level: str = "basic", is_keyword: Optional[Callable[[str], bool]] = None) -> Tuple[List[Finding], List[str]]:
    """Runs every line check enabled by the check level."""
    return LineSyntaxChecker(lines, check_level, is_keyword).run()
