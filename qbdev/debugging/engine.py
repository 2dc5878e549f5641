import asyncio
import logging
from typing import Any, Dict, List, Optional, Union

from ..config.config import DEFAULT_CHECK_LEVEL, FEATURE_NAMES
from ..core.classes import DebugModeConfig, DebugSession, EnhancementResult, EnhancementSummary, ValidationReport
from ..keywords.database import KeywordDatabase
from ..validation.validator import validate
from .detection import detect_execution_mode, detect_issues
from .session_log import ProblemLogWriter
from .sessions import SessionStore
from .solutions import generate_solutions
from .transformer import CodeTransformer

logger = logging.getLogger(__name__)

ConfigInput = Union[DebugModeConfig, Dict[str, Any], None]


def coerce_config(config: ConfigInput) -> DebugModeConfig:
    """Accepts a model, a (snake_case or camelCase) dict, or None for the defaults."""
    if config is None:
        return DebugModeConfig()
    if isinstance(config, DebugModeConfig):
        return config
    return DebugModeConfig.model_validate(config)


class DebuggingEngine:
    """
    Facade over issue detection, solution generation and the code
    transformer. Every enhancement is recorded as a session in the store;
    a JSON record is written only when a `log_writer` is supplied.
    """

    def __init__(self, store: Optional[SessionStore] = None, log_writer: Optional[ProblemLogWriter] = None):
        self.store = store if store is not None else SessionStore()
        self.log_writer = log_writer

    def create_session(self, source_code: str, project_path: Optional[str] = None, config: ConfigInput = None) -> DebugSession:
        config = coerce_config(config)
        mode = detect_execution_mode(source_code)
        issues = detect_issues(source_code, mode)
        solutions = generate_solutions(issues)
        return self.store.create(source_code, project_path, config, mode, issues, solutions)

    def get_session(self, session_id: str) -> Optional[DebugSession]:
        return self.store.get(session_id)

    def list_active_sessions(self) -> List[DebugSession]:
        return self.store.list_active()

    def close_session(self, session_id: str) -> bool:
        return self.store.close(session_id)

    def enhance_for_debugging(self, source_code: str, config: ConfigInput = None, project_path: Optional[str] = None) -> EnhancementResult:
        session = self.create_session(source_code, project_path, config)
        transform = CodeTransformer(session.config, session.execution_mode).transform(source_code)

        applied = [s for s in session.solutions if FEATURE_NAMES.get(s.implementation) in transform.features_enabled]
        summary = EnhancementSummary(
            original_lines=len(source_code.splitlines()),
            enhanced_lines=len(transform.rewritten_code.splitlines()),
            issues_detected=len(session.issues),
            solutions_applied=len(applied),
        )
        result = EnhancementResult(
            session_id=session.id,
            execution_mode=session.execution_mode,
            transform=transform,
            issues=session.issues,
            solutions=session.solutions,
            summary=summary,
        )
        self.store.touch(session.id)
        if self.log_writer is not None:
            self.log_writer.write(session, result)
        logger.info(
            "Enhanced %d line(s) into %d, %d issue(s) detected",
            summary.original_lines,
            summary.enhanced_lines,
            summary.issues_detected,
        )
        return result

    # --- Async entry points ---

    async def enhance_for_debugging_async(
        self, source_code: str, config: ConfigInput = None, project_path: Optional[str] = None
    ) -> EnhancementResult:
        return await asyncio.to_thread(self.enhance_for_debugging, source_code, config, project_path)

    async def validate_async(
        self, source_code: str, check_level: str = DEFAULT_CHECK_LEVEL, keyword_db: Optional[KeywordDatabase] = None
    ) -> ValidationReport:
        return await asyncio.to_thread(validate, source_code, check_level, keyword_db)
