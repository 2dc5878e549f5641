"""
The built-in keyword knowledge base.

Each submodule contributes a `KEYWORDS` dict keyed by the upper-case keyword
name. They are merged here into the single table used by KeywordDatabase.
"""

from . import functions, graphics, legacy, metacommands, statements

KEYWORDS = {}
for _module in (statements, functions, metacommands, graphics, legacy):
    KEYWORDS.update(_module.KEYWORDS)

from .database import KeywordDatabase, levenshtein, load_default_database  # noqa: E402

__all__ = ["KEYWORDS", "KeywordDatabase", "levenshtein", "load_default_database"]
