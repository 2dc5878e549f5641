"""
Dialect-compatibility rules for QB64PE.

Each rule is a declarative record: adding a rule never touches the matching
loop. Rules are independent, so one line may produce several findings, but a
single rule reports at most its first match on a line.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Pattern

from ..core.classes import CodeExample, Finding, FindingSource, Severity, SourceLine

logger = logging.getLogger(__name__)

BUILTIN_TYPES = r"(?:INTEGER|LONG|SINGLE|DOUBLE|STRING|_INTEGER64|_FLOAT|_BYTE|_BIT|_OFFSET|_UNSIGNED|_MEM)"


@dataclass(frozen=True)
class CompatibilityRule:
    category: str
    pattern: Pattern
    severity: Severity
    message: str
    suggestion: str
    example: Optional[CodeExample] = None

    def match(self, line: SourceLine) -> Optional[Finding]:
        found = self.pattern.search(line.text)
        if not found:
            return None
        return Finding(
            line=line.number,
            column=found.start() + 1,
            severity=self.severity,
            category=self.category,
            message=self.message,
            suggestion=self.suggestion,
            example=self.example,
            source=FindingSource.COMPATIBILITY,
            pattern=found.group(0),
        )


def _rule(category, regex, severity, message, suggestion, incorrect=None, correct=None) -> CompatibilityRule:
    example = CodeExample(incorrect=incorrect, correct=correct) if incorrect is not None else None
    return CompatibilityRule(category, re.compile(regex, re.IGNORECASE), severity, message, suggestion, example)


COMPATIBILITY_RULES: List[CompatibilityRule] = [
    _rule(
        "function_return_types",
        r"FUNCTION\s+(\w+)\s*\([^)]*\)\s+AS\s+(\w+)",
        Severity.ERROR,
        "Function return types must use type sigils, not AS clauses",
        "Use FUNCTION name%(params) instead of FUNCTION name(params) AS INTEGER",
        "FUNCTION NearestPaletteIndex(r AS INTEGER, g AS INTEGER, b AS INTEGER) AS INTEGER",
        "FUNCTION NearestPaletteIndex%(r AS INTEGER, g AS INTEGER, b AS INTEGER)",
    ),
    _rule(
        "udt_return_types",
        r"FUNCTION\s+(\w+)\s*\([^)]*\)\s+AS\s+(?!" + BUILTIN_TYPES + r"\b)(\w+)",
        Severity.ERROR,
        "Functions cannot return user-defined types",
        "Pass a variable of the user-defined type as an extra parameter and fill it in a SUB",
        "FUNCTION MakePoint(x AS SINGLE, y AS SINGLE) AS Point2D",
        "SUB MakePoint (x AS SINGLE, y AS SINGLE, result AS Point2D)",
    ),
    _rule(
        "console_directives",
        r"\$CONSOLE\s*:\s*OFF",
        Severity.ERROR,
        "$CONSOLE:OFF is not valid syntax",
        "Use $CONSOLE or $CONSOLE:ONLY instead",
        "$CONSOLE:OFF",
        "$CONSOLE",
    ),
    _rule(
        "multi_statement_lines",
        r"IF\s+.+\s+THEN\s+.+:\s*IF\s+.+\s+THEN",
        Severity.WARNING,
        "Chained IF statements on one line can cause parsing errors",
        "Split IF statements onto separate lines",
        "IF r < 0 THEN r = 0: IF r > 255 THEN r = 255",
        "IF r < 0 THEN r = 0\nIF r > 255 THEN r = 255",
    ),
    _rule(
        "array_declarations",
        r"DIM\s+\w+[$%&!#]*\s*\([^)]+\)\s+AS\s+\w+\s*,\s*\w+[$%&!#]*\s*\([^)]+\)\s+AS\s+\w+",
        Severity.ERROR,
        "Multiple array declarations with dimensions on one line not supported",
        "Declare each array on a separate line",
        "DIM er#(0 TO w) AS DOUBLE, eg#(0 TO w) AS DOUBLE",
        "DIM er(0 TO w) AS DOUBLE\nDIM eg(0 TO w) AS DOUBLE",
    ),
    _rule(
        "variable_operations",
        r"DIM\s+\w+\s+AS\s+\w+:\s*\w+\s*=",
        Severity.WARNING,
        "Combining declarations and assignments can cause parsing issues",
        "Separate variable declarations and assignments onto different lines",
        "DIM oldS AS LONG: oldS = _SOURCE",
        "DIM oldS AS LONG\noldS = _SOURCE",
    ),
    _rule(
        "missing_functions",
        r"(?<![\w$])(_WORD\$|_TRIM\$)(?![\w$])",
        Severity.ERROR,
        "Function does not exist in QB64PE",
        "Use built-in string functions like INSTR, MID$, LEFT$, RIGHT$, LTRIM$ and RTRIM$ instead",
        'r = VAL(_TRIM$(_WORD$(line$, 1, " ")))',
        'pos1 = INSTR(line$, " ")\nIF pos1 > 0 THEN r = VAL(LEFT$(line$, pos1 - 1))',
    ),
    _rule(
        "legacy_keywords",
        r"\b(DEF\s+FN|TRON|TROFF|SETMEM|SIGNAL|ERDEV\$?|FILEATTR|FRE|IOCTL\$?)(?![\w$])",
        Severity.ERROR,
        "Legacy BASIC keyword not supported in QB64PE",
        "Use modern QB64PE alternatives",
        "DEF FN Square(x) = x * x",
        "FUNCTION Square%(x AS INTEGER)\n    Square% = x * x\nEND FUNCTION",
    ),
    _rule(
        "device_access",
        r"\b(ON\s+PEN|PEN\s+(ON|OFF|STOP)|ON\s+PLAY\(\d+\)|PLAY\(\d+\)\s+(ON|OFF|STOP)|ON\s+UEVENT|UEVENT)\b",
        Severity.ERROR,
        "Device access keyword not supported in QB64PE",
        "Use modern QB64PE input/output methods",
        "ON PEN GOSUB HandlePen",
        "Use _MOUSEINPUT and _MOUSEBUTTON for mouse input",
    ),
    _rule(
        "device_open",
        r"OPEN\s+\"(LPT\d*:|CON:|KBRD:)",
        Severity.ERROR,
        "Device OPEN statements not supported in QB64PE",
        "Use LPRINT for printer output or modern I/O methods",
        'OPEN "LPT1:" FOR OUTPUT AS #1',
        'LPRINT "text to printer"',
    ),
    _rule(
        "platform_specific",
        r"\b(_ACCEPTFILEDROP|_TOTALDROPPEDFILES|_DROPPEDFILE|_FINISHDROP|_SCREENPRINT|_SCREENCLICK|_WINDOWHANDLE)\b",
        Severity.WARNING,
        "Function may not be available on all platforms (Linux/macOS)",
        "Check platform compatibility or provide alternatives",
        "_SCREENPRINT",
        'IF INSTR(_OS$, "[WINDOWS]") THEN _SCREENPRINT text$',
    ),
    _rule(
        "console_platform",
        r"\b(_CONSOLETITLE|_CONSOLECURSOR|_CONSOLEFONT|_CONSOLEINPUT|_CINP)\b",
        Severity.WARNING,
        "Console function may not be available on Linux/macOS",
        "Use standard INPUT/PRINT or check platform compatibility",
        '_CONSOLETITLE "My Program"',
        '_TITLE "My Program"',
    ),
    _rule(
        "program_control",
        r"\b(CHAIN|RUN)\b",
        Severity.WARNING,
        "Program control statement may not be available on Linux/macOS",
        "Use SHELL or restructure program logic",
        'CHAIN "otherprog.bas"',
        'SHELL "qb64pe otherprog.bas"',
    ),
    _rule(
        "dynamic_arrays",
        r"^\s*DIM\s+(?:SHARED\s+)?\w+[$%&!#]*\s*\(\s*[A-Za-z]\w*\s*(?:TO\s+[A-Za-z]\w*)?\s*\)\s+AS",
        Severity.WARNING,
        "Dynamic array without $DYNAMIC directive may cause issues",
        "Add '$DYNAMIC or use REDIM for arrays sized at runtime",
        "DIM arr(size) AS INTEGER",
        "'$DYNAMIC\nDIM arr() AS INTEGER\nREDIM arr(size)",
    ),
    _rule(
        "shared_syntax",
        r"^\s*SHARED\s+\w+",
        Severity.ERROR,
        "SHARED keyword must be used with DIM statement",
        "Use 'DIM SHARED variableName AS type' instead of 'SHARED variableName'",
        "SHARED myVar",
        "DIM SHARED myVar AS INTEGER",
    ),
    _rule(
        "boolean_constants",
        r"(?<![\w_])(TRUE|FALSE)\b(?!\s*=)",
        Severity.WARNING,
        "TRUE and FALSE are not built-in constants in QB64PE",
        "Use _TRUE (-1) and _FALSE (0), or define CONST TRUE = -1, FALSE = 0",
        "IF condition = FALSE THEN",
        "IF condition = _FALSE THEN",
    ),
    _rule(
        "unnecessary_declarations",
        r"^\s*DECLARE\s+(SUB|FUNCTION)\s+\w+(?!.*LIBRARY)",
        Severity.INFO,
        "DECLARE SUB/FUNCTION is unnecessary in QB64PE - procedures are automatically available",
        "Remove DECLARE statements. DECLARE is only needed for DECLARE LIBRARY",
        "DECLARE SUB MyProcedure",
        "SUB MyProcedure\n    PRINT \"Hello\"\nEND SUB",
    ),
]


class CompatibilityMatcher:
    def __init__(self, rules: Optional[List[CompatibilityRule]] = None):
        self.rules = COMPATIBILITY_RULES if rules is None else rules

    def scan(self, lines: List[SourceLine]) -> List[Finding]:
        findings = []
        dynamic = False
        for line in lines:
            if line.is_blank:
                continue
            if "$DYNAMIC" in line.text.upper():
                dynamic = True
            if line.is_comment:
                continue
            for rule in self.rules:
                if rule.category == "dynamic_arrays" and dynamic:
                    continue
                finding = rule.match(line)
                if finding:
                    findings.append(finding)
        logger.debug("Compatibility scan produced %d finding(s)", len(findings))
        return findings


def check_compatibility(lines: List[SourceLine]) -> List[Finding]:
    """Runs the full compatibility rule table over every line."""
    return CompatibilityMatcher().scan(lines)
