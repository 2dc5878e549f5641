"""
Detection of automation-hostile patterns: idioms that behave well when a
person runs the program but stall or misbehave under unattended execution.
"""

import logging
import re
from typing import List

from ..config.config import GRAPHICS_KEYWORDS
from ..core.classes import DetectedIssue, ExecutionMode, IssueSeverity, IssueType

logger = logging.getLogger(__name__)

CONSOLE_DIRECTIVE_REGEX = re.compile(r"\$CONSOLE", re.IGNORECASE)
GRAPHICS_REGEX = re.compile(r"(?<![\w$])(" + "|".join(re.escape(k) for k in GRAPHICS_KEYWORDS) + r")\b", re.IGNORECASE)
PRESS_ANY_KEY_REGEX = re.compile(r"PRINT\s+\"Press any key[^\"]*\"\s*[\r\n]+\s*SLEEP\b", re.IGNORECASE)
FREEFILE_REGEX = re.compile(r"\bFREEFILE\b", re.IGNORECASE)
NEWIMAGE_REGEX = re.compile(r"\b_NEWIMAGE\b", re.IGNORECASE)
FREEIMAGE_REGEX = re.compile(r"\b_FREEIMAGE\b", re.IGNORECASE)
SYSTEM_REGEX = re.compile(r"^\s*SYSTEM\b", re.IGNORECASE | re.MULTILINE)
DELAY_REGEX = re.compile(r"\b_DELAY\b", re.IGNORECASE)


def detect_execution_mode(code: str) -> ExecutionMode:
    has_console = bool(CONSOLE_DIRECTIVE_REGEX.search(code))
    has_graphics = bool(GRAPHICS_REGEX.search(code))
    if has_graphics and has_console:
        return ExecutionMode.MIXED
    if has_graphics:
        return ExecutionMode.GRAPHICS
    return ExecutionMode.CONSOLE


def _line_of(code: str, offset: int) -> int:
    return code.count("\n", 0, offset) + 1


def _file_handle_severity(count: int) -> IssueSeverity:
    if count >= 5:
        return IssueSeverity.HIGH
    if count >= 2:
        return IssueSeverity.MEDIUM
    return IssueSeverity.LOW


class IssueDetector:
    def __init__(self, code: str, mode: ExecutionMode = None):
        self.code = code
        self.mode = mode if mode is not None else detect_execution_mode(code)
        self.issues: List[DetectedIssue] = []
        self._counters = {}

    def detect(self) -> List[DetectedIssue]:
        self._check_console_visibility()
        self._check_blocking_wait()
        self._check_file_handles()
        self._check_graphics_context()
        self._check_premature_exit()
        logger.debug("Detected %d issue(s) in %s program", len(self.issues), self.mode.value)
        return self.issues

    def _add(self, issue_type: IssueType, severity: IssueSeverity, description: str, symptoms: List[str], line: int = None):
        self._counters[issue_type] = self._counters.get(issue_type, 0) + 1
        self.issues.append(
            DetectedIssue(
                id=f"{issue_type.value}_{self._counters[issue_type]}",
                type=issue_type,
                severity=severity,
                description=description,
                symptoms=symptoms,
                line=line,
            )
        )

    # --- Rules ---

    def _check_console_visibility(self):
        if CONSOLE_DIRECTIVE_REGEX.search(self.code) or self.mode == ExecutionMode.GRAPHICS:
            return
        self._add(
            IssueType.CONSOLE_VISIBILITY,
            IssueSeverity.HIGH,
            "Program may exit immediately without showing console output",
            ["Program compiles but no output visible", "Process exits immediately", "Console window not visible"],
        )

    def _check_blocking_wait(self):
        match = PRESS_ANY_KEY_REGEX.search(self.code)
        if not match:
            return
        self._add(
            IssueType.FLOW_CONTROL,
            IssueSeverity.HIGH,
            'Program contains blocking "Press any key" prompts that prevent automation',
            ["Program hangs waiting for user input", "Automated testing fails"],
            line=_line_of(self.code, match.start()),
        )

    def _check_file_handles(self):
        matches = list(FREEFILE_REGEX.finditer(self.code))
        if not matches:
            return
        self._add(
            IssueType.FILE_HANDLE,
            _file_handle_severity(len(matches)),
            f"Code uses {len(matches)} file handles without tracking or cleanup",
            ["Cannot CREATE because file is already in use", "Compilation errors after failed runs", "File locking issues"],
            line=_line_of(self.code, matches[0].start()),
        )

    def _check_graphics_context(self):
        matches = list(NEWIMAGE_REGEX.finditer(self.code))
        if not matches or FREEIMAGE_REGEX.search(self.code):
            return
        self._add(
            IssueType.GRAPHICS_CONTEXT,
            IssueSeverity.MEDIUM,
            f"Code creates {len(matches)} images without proper cleanup",
            ["Memory leaks", "Graphics operations fail", "Image handle errors"],
            line=_line_of(self.code, matches[0].start()),
        )

    def _check_premature_exit(self):
        match = SYSTEM_REGEX.search(self.code)
        if not match or DELAY_REGEX.search(self.code, 0, match.start()):
            return
        self._add(
            IssueType.PROCESS_MANAGEMENT,
            IssueSeverity.LOW,
            "Program exits immediately without allowing observation",
            ["Process terminates too quickly to see output", "No time to analyze graphics"],
            line=_line_of(self.code, match.start()),
        )


def detect_issues(code: str, mode: ExecutionMode = None) -> List[DetectedIssue]:
    """Runs every detection rule over the whole program text."""
    return IssueDetector(code, mode).detect()
