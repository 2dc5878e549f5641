from .detection import detect_execution_mode, detect_issues
from .engine import DebuggingEngine
from .sessions import SessionStore
from .solutions import generate_solutions
from .transformer import CodeTransformer, transform_code

__all__ = [
    "CodeTransformer",
    "DebuggingEngine",
    "SessionStore",
    "detect_execution_mode",
    "detect_issues",
    "generate_solutions",
    "transform_code",
]
