"""
Single-pass validation of FOR/WHILE/DO loops and SUB/FUNCTION procedures.

Loops and procedures are tracked on two independent stacks. Nesting is
assumed to be LIFO: a closer that does not match the top of its stack is
reported immediately and the stack is left as it is, so a single mismatch
never triggers resynchronisation on a later closer.
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from ..config.config import BLOCK_CONFIG, CLOSER_TO_OPENER, UNCLOSED_LOOP_CATEGORY, UNCLOSED_PROCEDURE_CATEGORY
from ..core.classes import BlockFrame, BlockKind, Finding, FindingSource, Severity, SourceLine
from ..exceptions import FindingMessage

logger = logging.getLogger(__name__)

LINE_LABEL_REGEX = re.compile(r"^\d+\s*:?\s*")

OPENER_PATTERNS = [
    (BlockKind.FOR, re.compile(r"^FOR\s", re.IGNORECASE)),
    (BlockKind.WHILE, re.compile(r"^WHILE\b", re.IGNORECASE)),
    (BlockKind.DO, re.compile(r"^DO\b", re.IGNORECASE)),
    (BlockKind.SUB, re.compile(r"^SUB\s+([A-Za-z_][\w.]*)", re.IGNORECASE)),
    (BlockKind.FUNCTION, re.compile(r"^FUNCTION\s+([A-Za-z_][\w.]*[$%&!#~]*)", re.IGNORECASE)),
]

CLOSER_PATTERNS = [
    ("NEXT", re.compile(r"^NEXT\b", re.IGNORECASE)),
    ("WEND", re.compile(r"^WEND\b", re.IGNORECASE)),
    ("LOOP", re.compile(r"^LOOP\b", re.IGNORECASE)),
    ("END SUB", re.compile(r"^END\s+SUB\b", re.IGNORECASE)),
    ("END FUNCTION", re.compile(r"^END\s+FUNCTION\b", re.IGNORECASE)),
]


def _statement_text(line: SourceLine) -> str:
    """The line without indentation or a leading numeric line label."""
    return LINE_LABEL_REGEX.sub("", line.stripped, count=1)


def classify_line(text: str) -> Tuple[Optional[str], Optional[BlockKind], Optional[str]]:
    """
    Classifies a statement by its leading keyword.
    Returns ("open", kind, name), ("close", kind, None) or (None, None, None).
    """
    for kind, pattern in OPENER_PATTERNS:
        match = pattern.match(text)
        if match:
            name = match.group(1) if match.groups() else None
            return "open", kind, name
    for closer, pattern in CLOSER_PATTERNS:
        if pattern.match(text):
            return "close", BlockKind(CLOSER_TO_OPENER[closer]), None
    return None, None, None


class BlockStructureValidator:
    def __init__(self, lines: List[SourceLine]):
        self.lines = lines
        self.stacks: Dict[str, List[BlockFrame]] = {"loop": [], "procedure": []}
        self.findings: List[Finding] = []

    def validate(self) -> List[Finding]:
        for line in self.lines:
            if line.is_blank or line.is_comment:
                continue
            action, kind, name = classify_line(_statement_text(line))
            if action == "open":
                self._push(kind, name, line.number)
            elif action == "close":
                self._pop(kind, line)

        for stack_name in ("loop", "procedure"):
            for frame in self.stacks[stack_name]:
                self.findings.append(self._unclosed(frame))

        self.findings.sort(key=lambda f: (f.line, f.column))
        logger.debug("Block structure check produced %d finding(s)", len(self.findings))
        return self.findings

    def _push(self, kind: BlockKind, name: Optional[str], line_number: int):
        stack = self.stacks[BLOCK_CONFIG[kind.value]["stack"]]
        stack.append(BlockFrame(kind=kind, name=name, opened_at_line=line_number))

    def _pop(self, kind: BlockKind, line: SourceLine):
        config = BLOCK_CONFIG[kind.value]
        stack = self.stacks[config["stack"]]
        if stack and stack[-1].kind == kind:
            stack.pop()
            return

        self.findings.append(
            Finding(
                line=line.number,
                column=1,
                severity=Severity.ERROR,
                category=config["category"],
                message=FindingMessage.CLOSER_WITHOUT_OPENER.format(closer=config["closer"], opener=kind.value),
                suggestion=f"Remove the {config['closer']} or add a matching {kind.value} before it",
                source=FindingSource.STRUCTURE,
            )
        )

    def _unclosed(self, frame: BlockFrame) -> Finding:
        config = BLOCK_CONFIG[frame.kind.value]
        if config["stack"] == "loop":
            category = UNCLOSED_LOOP_CATEGORY
            message = FindingMessage.UNCLOSED_LOOP.format(kind=frame.kind.value)
        else:
            category = UNCLOSED_PROCEDURE_CATEGORY
            message = FindingMessage.UNCLOSED_PROCEDURE.format(kind=frame.kind.value, name=frame.name or "")
        return Finding(
            line=frame.opened_at_line,
            column=1,
            severity=Severity.ERROR,
            category=category,
            message=message,
            suggestion=config["suggestion"],
            source=FindingSource.STRUCTURE,
        )


def validate_block_structure(lines: List[SourceLine]) -> List[Finding]:
    """Convenience wrapper to run the block-structure validator."""
    return BlockStructureValidator(lines).validate()
