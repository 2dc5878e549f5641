"""
Rewrites a program into an automation-friendly variant.

Each pass is a pure `code -> (code, changes)` function. A pass first checks
for its own DEBUG BEGIN marker or directive, so running the transformer on
its own output adds nothing. Substitutions skip every line that belongs to
an injected block.
"""

import logging
import re
from datetime import datetime
from typing import Callable, List, Optional, Tuple

from ..config.config import FEATURE_NAMES, FLOW_HEADER_PREFIXES
from ..core.classes import DebugModeConfig, ExecutionMode, TransformResult
from ..utils import join_lines, leading_whitespace
from . import scaffolds
from .detection import detect_execution_mode

logger = logging.getLogger(__name__)

PassResult = Tuple[str, List[str]]

CONSOLE_DIRECTIVE_REGEX = re.compile(r"^\s*\$CONSOLE\b", re.IGNORECASE)
CONSOLE_OFF_REGEX = re.compile(r"^\s*\$CONSOLE\s*:\s*OFF\s*$", re.IGNORECASE)
PRESS_ANY_KEY_REGEX = re.compile(r'^(\s*)PRINT\s+"Press any key[^"]*"\s*$', re.IGNORECASE)
SLEEP_REGEX = re.compile(r"^\s*SLEEP\b", re.IGNORECASE)
BARE_END_REGEX = re.compile(r"^(\s*)END\s*$", re.IGNORECASE)
BARE_SYSTEM_REGEX = re.compile(r"^\s*SYSTEM(\s+\d+)?\s*$", re.IGNORECASE)
DEBUG_EXIT_CALL_REGEX = re.compile(r"^\s*CALL\s+DebugExit\s*\(", re.IGNORECASE)
FREEFILE_REGEX = re.compile(r"\bFREEFILE\b", re.IGNORECASE)
NEWIMAGE_CALL_REGEX = re.compile(r"_NEWIMAGE\s*\(\s*([^,]+),\s*([^,]+),\s*([^)]+)\)", re.IGNORECASE)
PSET_STATEMENT_REGEX = re.compile(r"(?<!\w)PSET\s*\(\s*([^,]+),\s*([^)]+)\)\s*,\s*([^:']+?)(?=\s*(?:$|[:']))", re.IGNORECASE)
OPEN_STATEMENT_REGEX = re.compile(r"^(\s*)OPEN\s+(.+?)\s+FOR\s+\w+\s+AS\s+#?\s*\w+", re.IGNORECASE)
GRAPHICS_DRAW_REGEX = re.compile(r"^(\s*)(?:CIRCLE|LINE|_PUTIMAGE)(?![$\w])(?!\s+INPUT)", re.IGNORECASE)
PROCEDURE_START_REGEX = re.compile(r"^\s*(SUB|FUNCTION)\s", re.IGNORECASE)
PROCEDURE_END_REGEX = re.compile(r"^\s*END\s+(SUB|FUNCTION)\b", re.IGNORECASE)
WRAPPER_REGEX = re.compile(r"^\s*SUB\s+AutoTestWrapper\b", re.IGNORECASE)

CLEANUP_CALL = "CALL ResourceManager_Cleanup"
SCREENSHOT_CALL = "CALL AutoScreenshot"
FILE_LOG_CALL = 'CALL LogMessage("FILE"'


# --- Line helpers ---


def _has_block(lines: List[str], feature: str) -> bool:
    marker = scaffolds.begin_marker(feature)
    return any(line.strip() == marker for line in lines)


def _header_end(lines: List[str]) -> int:
    """Index just past the leading directives, comments, blanks and injected blocks."""
    mask = scaffolds.debug_block_mask(lines)
    index = 0
    for i, line in enumerate(lines):
        stripped = line.strip()
        if mask[i] or not stripped or stripped.startswith(("$", "'")):
            index = i + 1
        else:
            break
    return index


def _insert_block(lines: List[str], block: List[str]) -> List[str]:
    index = _header_end(lines)
    return lines[:index] + block + [""] + lines[index:]


def _rewrite_outside_blocks(lines: List[str], rewrite: Callable[[str], str]) -> Tuple[List[str], int]:
    mask = scaffolds.debug_block_mask(lines)
    result = []
    count = 0
    for line, inside in zip(lines, mask):
        new_line = line if inside else rewrite(line)
        if new_line != line:
            count += 1
        result.append(new_line)
    return result, count


def _append_after_matches(lines: List[str], regex, make_line: Callable, already_done: Callable[[str], bool]) -> Tuple[List[str], int]:
    """Adds a follow-up statement after each matching line unless the next line already carries it."""
    mask = scaffolds.debug_block_mask(lines)
    result = []
    count = 0
    for i, line in enumerate(lines):
        result.append(line)
        if mask[i]:
            continue
        match = regex.match(line)
        if not match:
            continue
        next_line = lines[i + 1] if i + 1 < len(lines) else ""
        if already_done(next_line):
            continue
        result.append(make_line(match))
        count += 1
    return result, count


def _finish(lines: List[str], original: str) -> str:
    return join_lines(lines, original.endswith("\n"))


# --- Passes ---


def _replace_blocking_waits(lines: List[str]) -> Tuple[List[str], int]:
    mask = scaffolds.debug_block_mask(lines)
    result = []
    count = 0
    i = 0
    while i < len(lines):
        match = None if mask[i] else PRESS_ANY_KEY_REGEX.match(lines[i])
        if match:
            j = i + 1
            while j < len(lines) and not lines[j].strip():
                j += 1
            if j < len(lines) and not mask[j] and SLEEP_REGEX.match(lines[j]):
                result.append(f'{match.group(1)}CALL DebugPause("Press any key to continue...")')
                count += 1
                i = j + 1
                continue
        result.append(lines[i])
        i += 1
    return result, count


def console_pass(code: str, config: DebugModeConfig) -> PassResult:
    lines = code.splitlines()
    changes = []

    normalized = ["$CONSOLE" if CONSOLE_OFF_REGEX.match(line) else line for line in lines]
    if normalized != lines:
        lines = normalized
        changes.append("Normalized $CONSOLE:OFF to $CONSOLE")

    if not any(CONSOLE_DIRECTIVE_REGEX.match(line) for line in lines):
        lines = ["$CONSOLE"] + lines
        changes.append("Added $CONSOLE directive for console visibility")

    if not _has_block(lines, "console"):
        lines = _insert_block(lines, scaffolds.console_block(config.timeout_seconds, config.auto_exit))
        changes.append("Injected console management system")

    lines, count = _replace_blocking_waits(lines)
    if count:
        changes.append("Replaced blocking SLEEP statements with conditional pauses")

    if config.auto_exit:
        lines, count = _rewrite_outside_blocks(lines, lambda line: BARE_END_REGEX.sub(r'\1CALL DebugExit("Program completed")', line))
        if count:
            changes.append("Replaced END statements with explicit debugging exit")

    return _finish(lines, code), changes


def flow_control_pass(code: str, config: DebugModeConfig) -> PassResult:
    """
    Moves the main-level statements into `SUB OriginalMainProgram` and runs
    them through `SUB AutoTestWrapper`.

    The partition is line based: leading directives, comments, blanks and
    declarations stay on top, SUB/FUNCTION bodies are kept whole after the
    wrapper, and everything else from the first executable line onwards is
    main code. Multi-statement lines are not split.
    """
    lines = code.splitlines()
    if any(WRAPPER_REGEX.match(line) for line in lines):
        return code, []

    mask = scaffolds.debug_block_mask(lines)
    top, main, procedures = [], [], []
    in_procedure = False
    for line, inside in zip(lines, mask):
        stripped = line.strip().upper()
        if inside:
            (procedures if main else top).append(line)
        elif in_procedure:
            procedures.append(line)
            if PROCEDURE_END_REGEX.match(line):
                in_procedure = False
        elif PROCEDURE_START_REGEX.match(line):
            procedures.append(line)
            in_procedure = True
        elif not main and (not stripped or stripped.startswith(FLOW_HEADER_PREFIXES)):
            top.append(line)
        else:
            main.append(line)

    if not main:
        return code, []
    while not main[-1].strip():
        main.pop()

    if _has_block(lines, "console"):
        opening = ['    CALL DebugPause("Starting automated test session...")']
        closing = ['    CALL DebugExit("Test session completed successfully")']
    else:
        opening = ['    PRINT "Starting automated test session..."']
        closing = ['    PRINT "Test session completed successfully"'] + (["    SYSTEM"] if config.auto_exit else [])

    rewritten = (
        top
        + ["CALL AutoTestWrapper", ""]
        + ["SUB AutoTestWrapper", *opening, "    CALL OriginalMainProgram", *closing, "END SUB", ""]
        + ["SUB OriginalMainProgram"]
        + [f"    {line}" if line.strip() else "" for line in main]
        + ["END SUB"]
    )
    if procedures:
        rewritten += [""] + procedures

    changes = ["Wrapped main execution in automated test framework", "Added timeout and flow control management"]
    return _finish(rewritten, code), changes


def _insert_cleanup(lines: List[str]) -> Tuple[List[str], int]:
    mask = scaffolds.debug_block_mask(lines)
    result = []
    count = 0
    for line, inside in zip(lines, mask):
        is_exit = BARE_SYSTEM_REGEX.match(line) or BARE_END_REGEX.match(line) or DEBUG_EXIT_CALL_REGEX.match(line)
        if not inside and is_exit:
            if not (result and result[-1].strip().upper() == CLEANUP_CALL.upper()):
                result.append(leading_whitespace(line) + CLEANUP_CALL)
                count += 1
        result.append(line)
    return result, count


def resource_tracking_pass(code: str) -> PassResult:
    lines = code.splitlines()
    changes = []

    if not _has_block(lines, "resource_tracking"):
        lines = _insert_block(lines, scaffolds.resource_block())
        changes.append("Added resource management system")

    lines, count = _rewrite_outside_blocks(lines, lambda line: FREEFILE_REGEX.sub("ResourceManager_GetFileHandle%", line))
    if count:
        changes.append("Replaced FREEFILE with tracked resource allocation")

    lines, count = _insert_cleanup(lines)
    if count:
        changes.append("Added resource cleanup before program exit")

    return _finish(lines, code), changes


def _tracked_image(match) -> str:
    return f"GraphicsManager_CreateImage&({match.group(1).strip()}, {match.group(2).strip()})"


def _safe_pset(match) -> str:
    return f"CALL GraphicsManager_SafePSET({match.group(1).strip()}, {match.group(2).strip()}, {match.group(3).strip()})"


def graphics_pass(code: str) -> PassResult:
    lines = code.splitlines()
    changes = []

    if not _has_block(lines, "graphics"):
        lines = _insert_block(lines, scaffolds.graphics_block(_has_block(lines, "resource_tracking")))
        changes.append("Added graphics context management system")

    lines, count = _rewrite_outside_blocks(lines, lambda line: NEWIMAGE_CALL_REGEX.sub(_tracked_image, line))
    if count:
        changes.append("Replaced _NEWIMAGE with tracked image creation")

    lines, count = _rewrite_outside_blocks(lines, lambda line: PSET_STATEMENT_REGEX.sub(_safe_pset, line))
    if count:
        changes.append("Replaced PSET with bounds-checked version")

    return _finish(lines, code), changes


def logging_pass(code: str, config: DebugModeConfig, timestamp: str) -> PassResult:
    lines = code.splitlines()
    changes = []

    if not _has_block(lines, "logging"):
        lines = _insert_block(lines, scaffolds.logging_block(timestamp, config.verbose_output))
        changes.append("Added comprehensive logging system")

    lines, count = _append_after_matches(
        lines,
        OPEN_STATEMENT_REGEX,
        lambda m: f'{m.group(1)}{FILE_LOG_CALL}, "Opened file: " + {m.group(2)})',
        lambda next_line: next_line.strip().startswith(FILE_LOG_CALL),
    )
    if count:
        changes.append("Added file operation logging")

    return _finish(lines, code), changes


def screenshot_pass(code: str, timestamp: str) -> PassResult:
    lines = code.splitlines()
    changes = []

    if not _has_block(lines, "screenshots"):
        lines = _insert_block(lines, scaffolds.screenshot_block(timestamp, _has_block(lines, "logging")))
        changes.append("Added automated screenshot system")

    lines, count = _append_after_matches(
        lines,
        GRAPHICS_DRAW_REGEX,
        lambda m: f"{m.group(1)}{SCREENSHOT_CALL}",
        lambda next_line: next_line.strip().upper() == SCREENSHOT_CALL.upper(),
    )
    if count:
        changes.append("Added automatic screenshots after graphics operations")

    return _finish(lines, code), changes


# --- Transformer ---


class CodeTransformer:
    """Applies the enabled passes in a fixed order: console, flow control, resources, graphics, logging, screenshots."""

    def __init__(self, config: Optional[DebugModeConfig] = None, mode: ExecutionMode = ExecutionMode.CONSOLE, timestamp: Optional[str] = None):
        self.config = config if config is not None else DebugModeConfig()
        self.mode = mode
        self.timestamp = timestamp or datetime.now().strftime("%Y-%m-%dT%H-%M-%S")

    @property
    def draws_graphics(self) -> bool:
        return self.mode in (ExecutionMode.GRAPHICS, ExecutionMode.MIXED)

    def passes(self) -> List[Tuple[str, Callable[[str], PassResult]]]:
        config = self.config
        selected = []
        if config.enable_console:
            selected.append(("console", lambda code: console_pass(code, config)))
        if config.enable_flow_control:
            selected.append(("flow_control", lambda code: flow_control_pass(code, config)))
        if config.enable_resource_tracking:
            selected.append(("resource_tracking", resource_tracking_pass))
        if self.draws_graphics:
            selected.append(("graphics", graphics_pass))
        if config.enable_logging:
            selected.append(("logging", lambda code: logging_pass(code, config, self.timestamp)))
        if config.enable_screenshots and self.draws_graphics:
            selected.append(("screenshots", lambda code: screenshot_pass(code, self.timestamp)))
        return selected

    def transform(self, code: str) -> TransformResult:
        applied_changes = []
        features_enabled = []
        for feature, run_pass in self.passes():
            code, changes = run_pass(code)
            logger.debug("Pass '%s' made %d change(s)", feature, len(changes))
            applied_changes.extend(changes)
            features_enabled.append(FEATURE_NAMES[feature])
        return TransformResult(rewritten_code=code, applied_changes=applied_changes, features_enabled=features_enabled)


def transform_code(code: str, config: Optional[DebugModeConfig] = None, mode: Optional[ExecutionMode] = None) -> TransformResult:
    if mode is None:
        mode = detect_execution_mode(code)
    return CodeTransformer(config, mode).transform(code)
