import logging
import random
import string
import threading
import time
from datetime import datetime
from typing import Dict, List, Optional

from ..core.classes import DebugModeConfig, DebugSession, DetectedIssue, ExecutionMode, SessionStatus, Solution

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_session_id() -> str:
    """`debug_<epoch millis>_<9 base36 chars>`."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"debug_{int(time.time() * 1000)}_{suffix}"


class SessionStore:
    """
    In-memory registry of debugging sessions. Every access goes through a
    lock so the engine can be shared between threads or async tasks.
    Sessions are kept until the store is discarded; closing only marks them
    completed.
    """

    def __init__(self):
        self._sessions: Dict[str, DebugSession] = {}
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._sessions)

    def create(
        self,
        source_code: str,
        project_path: Optional[str] = None,
        config: Optional[DebugModeConfig] = None,
        execution_mode: ExecutionMode = ExecutionMode.CONSOLE,
        issues: Optional[List[DetectedIssue]] = None,
        solutions: Optional[List[Solution]] = None,
    ) -> DebugSession:
        session = DebugSession(
            id=new_session_id(),
            source_code=source_code,
            project_path=project_path,
            config=config if config is not None else DebugModeConfig(),
            execution_mode=execution_mode,
            issues=issues or [],
            solutions=solutions or [],
        )
        with self._lock:
            while session.id in self._sessions:
                session.id = new_session_id()
            self._sessions[session.id] = session
        logger.info("Created debugging session %s (%s mode)", session.id, execution_mode.value)
        return session

    def get(self, session_id: str) -> Optional[DebugSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def list_active(self) -> List[DebugSession]:
        with self._lock:
            return [s for s in self._sessions.values() if s.status == SessionStatus.ACTIVE]

    def touch(self, session_id: str) -> bool:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False
            session.last_activity = datetime.now()
            return True

    def close(self, session_id: str) -> bool:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False
            session.status = SessionStatus.COMPLETED
            session.last_activity = datetime.now()
        logger.info("Closed debugging session %s", session_id)
        return True
