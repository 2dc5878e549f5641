__version__ = "1.0.0"

from .debugging.engine import DebuggingEngine
from .exceptions import ErrorCode, QBDevError
from .keywords.database import KeywordDatabase, load_default_database
from .validation.validator import ValidationPipeline, validate

__all__ = [
    "DebuggingEngine",
    "ErrorCode",
    "KeywordDatabase",
    "QBDevError",
    "ValidationPipeline",
    "load_default_database",
    "validate",
]
