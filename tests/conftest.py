import os
import sys

import pytest

# Make the package importable without installing it
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from qbdev.debugging.engine import DebuggingEngine
from qbdev.debugging.session_log import ProblemLogWriter
from qbdev.keywords.database import load_default_database


@pytest.fixture
def keyword_db():
    return load_default_database()


@pytest.fixture
def engine(tmp_path):
    """An engine whose session records land in a temporary directory."""
    return DebuggingEngine(log_writer=ProblemLogWriter(str(tmp_path / "sessions")))
