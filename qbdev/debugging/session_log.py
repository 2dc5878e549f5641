import json
import logging
import os
from typing import Optional

from ..config.config import DEFAULT_PROBLEM_LOG_DIR
from ..core.classes import DebugSession, EnhancementResult
from ..utils import ReportEncoder

logger = logging.getLogger(__name__)


class ProblemLogWriter:
    """
    Writes one JSON record per enhancement run. Writing is best effort: a
    failure is logged and the enhancement result is returned regardless.
    """

    def __init__(self, log_dir: str = DEFAULT_PROBLEM_LOG_DIR, enabled: bool = True):
        self.log_dir = log_dir
        self.enabled = enabled

    def record_for(self, session: DebugSession, result: EnhancementResult) -> dict:
        return {
            "session_id": session.id,
            "project_path": session.project_path,
            "execution_mode": session.execution_mode,
            "started_at": session.start_time,
            "config": session.config.model_dump(),
            "issues": result.issues,
            "solutions": result.solutions,
            "applied_changes": result.transform.applied_changes,
            "features_enabled": result.transform.features_enabled,
            "summary": result.summary,
        }

    def write(self, session: DebugSession, result: EnhancementResult) -> Optional[str]:
        if not self.enabled:
            return None

        output_path = os.path.join(self.log_dir, f"{session.id}.json")
        try:
            os.makedirs(self.log_dir, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(self.record_for(session, result), f, indent=2, cls=ReportEncoder)
        except OSError as e:
            logger.warning("Could not write session log to %s: %s", output_path, e)
            return None

        logger.debug("Session log written to %s", output_path)
        return output_path
