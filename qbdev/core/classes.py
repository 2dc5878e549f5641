"""
Defines the formal data structures (contracts) shared by the validators,
the keyword knowledge base and the debugging engine.

Values produced by an analysis pass (lines, frames, findings) are frozen:
a report is recomputed on every call rather than patched in place. The
DebugSession is the only mutable aggregate and is owned by the SessionStore.
"""

from datetime import datetime
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Source Text ---


class SourceLine(BaseModel):
    """One physical line of the original source, numbered from 1."""

    model_config = ConfigDict(frozen=True)

    number: int
    text: str

    @property
    def stripped(self) -> str:
        return self.text.strip()

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()

    @property
    def is_comment(self) -> bool:
        stripped = self.text.strip()
        upper = stripped.upper()
        return stripped.startswith("'") or upper == "REM" or upper.startswith("REM ")


def split_source(source: str) -> List[SourceLine]:
    """Splits source text into an immutable, 1-based list of lines."""
    return [SourceLine(number=i + 1, text=text) for i, text in enumerate(source.splitlines())]


# --- Block Structure ---


class BlockKind(str, Enum):
    FOR = "FOR"
    WHILE = "WHILE"
    DO = "DO"
    SUB = "SUB"
    FUNCTION = "FUNCTION"


class BlockFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    name: Optional[str] = None
    opened_at_line: int


# --- Keyword Knowledge Base ---

KeywordType = Literal["statement", "function", "operator", "metacommand", "opengl", "type", "constant", "legacy"]
KeywordVersion = Literal["QBasic", "QB64", "QB64PE"]


class KeywordParameter(BaseModel):
    name: str
    type: str = "any"
    description: str = ""
    optional: bool = False


class KeywordInfo(BaseModel):
    """A single entry of the keyword knowledge base."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: KeywordType
    category: str
    description: str
    syntax: str = ""
    parameters: List[KeywordParameter] = []
    returns: Optional[str] = None
    example: str = ""
    related: List[str] = []
    version: KeywordVersion = "QBasic"
    availability: str = "All platforms"
    deprecated: bool = False
    aliases: List[str] = []
    tags: List[str] = []


class KeywordMatch(BaseModel):
    keyword: KeywordInfo
    relevance: int
    match_type: Literal["exact", "prefix", "fuzzy", "contains", "related"] = "contains"


class KeywordValidation(BaseModel):
    is_valid: bool
    keyword: Optional[KeywordInfo] = None
    suggestions: List[str] = []


# --- Findings & Reports ---


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class FindingSource(str, Enum):
    STRUCTURE = "structure"
    SYNTAX = "syntax"
    COMPATIBILITY = "compatibility"
    KEYWORD = "keyword"


class CodeExample(BaseModel):
    model_config = ConfigDict(frozen=True)

    incorrect: str
    correct: str


class Finding(BaseModel):
    """
    A single problem reported by one of the validators.

    `line` and `column` are 1-based and always refer to the text that was
    validated, never to rewritten output.
    """

    model_config = ConfigDict(frozen=True)

    line: int
    column: int = 1
    severity: Severity
    category: str
    message: str
    suggestion: Optional[str] = None
    example: Optional[CodeExample] = None
    source: FindingSource
    pattern: Optional[str] = None
    keyword: Optional[str] = None
    keyword_info: Optional[KeywordInfo] = None
    suggestions: List[str] = []


class ValidationReport(BaseModel):
    check_level: str
    findings: List[Finding] = []
    suggestions: List[str] = []
    score: int = 100
    is_valid: bool = True

    @property
    def errors(self) -> List[Finding]:
        return [f for f in self.findings if f.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[Finding]:
        return [f for f in self.findings if f.severity == Severity.WARNING]

    @property
    def infos(self) -> List[Finding]:
        return [f for f in self.findings if f.severity == Severity.INFO]

    def by_source(self, source: FindingSource) -> List[Finding]:
        return [f for f in self.findings if f.source == source]


# --- Debugging Engine ---


class ExecutionMode(str, Enum):
    CONSOLE = "console"
    GRAPHICS = "graphics"
    MIXED = "mixed"


class IssueType(str, Enum):
    CONSOLE_VISIBILITY = "console_visibility"
    FLOW_CONTROL = "flow_control"
    FILE_HANDLE = "file_handle"
    GRAPHICS_CONTEXT = "graphics_context"
    PROCESS_MANAGEMENT = "process_management"


class IssueSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class DetectedIssue(BaseModel):
    id: str
    type: IssueType
    severity: IssueSeverity
    description: str
    symptoms: List[str] = []
    detected_at: datetime = Field(default_factory=datetime.now)
    resolved: bool = False
    auto_fixable: bool = True
    line: Optional[int] = None


class SolutionStrategy(str, Enum):
    CODE_INJECTION = "code_injection"
    TEMPLATE_REPLACEMENT = "template_replacement"


class Solution(BaseModel):
    issue_id: str
    strategy: SolutionStrategy
    priority: int
    description: str
    implementation: str
    rationale: str
    code_changes: List[str] = []


class DebugModeConfig(BaseModel):
    """Caller options for the debugging transformer. Accepts camelCase keys too."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    enable_console: bool = True
    enable_logging: bool = True
    enable_screenshots: bool = True
    enable_flow_control: bool = True
    enable_resource_tracking: bool = True
    timeout_seconds: int = Field(default=30, gt=0)
    auto_exit: bool = True
    verbose_output: bool = True


class SessionStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


class DebugSession(BaseModel):
    id: str
    source_code: str
    project_path: Optional[str] = None
    config: DebugModeConfig = Field(default_factory=DebugModeConfig)
    start_time: datetime = Field(default_factory=datetime.now)
    last_activity: datetime = Field(default_factory=datetime.now)
    issues: List[DetectedIssue] = []
    solutions: List[Solution] = []
    status: SessionStatus = SessionStatus.ACTIVE
    execution_mode: ExecutionMode = ExecutionMode.CONSOLE


class TransformResult(BaseModel):
    rewritten_code: str
    applied_changes: List[str] = []
    features_enabled: List[str] = []


class EnhancementSummary(BaseModel):
    original_lines: int
    enhanced_lines: int
    issues_detected: int
    solutions_applied: int


class EnhancementResult(BaseModel):
    session_id: str
    execution_mode: ExecutionMode
    transform: TransformResult
    issues: List[DetectedIssue] = []
    solutions: List[Solution] = []
    summary: EnhancementSummary
