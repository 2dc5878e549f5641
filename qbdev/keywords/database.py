import json
import logging
import os
from functools import lru_cache
from typing import Dict, Iterable, List, Optional

from pydantic import ValidationError

from ..core.classes import KeywordInfo, KeywordMatch, KeywordValidation
from ..exceptions import ErrorCode, QBDevError

logger = logging.getLogger(__name__)


def levenshtein(a: str, b: str) -> int:
    """Classic edit distance between two strings (insert, delete, substitute)."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


class KeywordDatabase:
    """
    Name -> metadata lookup over the QB64PE keyword knowledge base, with
    ranked fuzzy search and prefix autocompletion.

    Ranking is deterministic: ties on relevance are broken by keyword name.
    """

    def __init__(self, keywords: Iterable[KeywordInfo] = ()):
        self._keywords: Dict[str, KeywordInfo] = {}
        self._aliases: Dict[str, str] = {}
        for info in keywords:
            self.add(info)

    def __len__(self) -> int:
        return len(self._keywords)

    def __contains__(self, name: str) -> bool:
        return self.lookup(name) is not None

    @property
    def is_empty(self) -> bool:
        return not self._keywords

    def add(self, info: KeywordInfo):
        key = info.name.upper()
        self._keywords[key] = info
        for alias in info.aliases:
            self._aliases[alias.upper()] = key

    @classmethod
    def from_mapping(cls, mapping: Dict[str, dict]) -> "KeywordDatabase":
        return cls(KeywordInfo(name=name, **{k: v for k, v in data.items() if k != "name"}) for name, data in mapping.items())

    @classmethod
    def from_json(cls, path: str) -> "KeywordDatabase":
        """
        Loads a knowledge base from a JSON file shaped either as
        {"keywords": {NAME: {...}}} or directly as {NAME: {...}}.
        """
        if not os.path.exists(path):
            raise QBDevError(ErrorCode.KEYWORD_DATABASE_NOT_FOUND, path=path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            mapping = data.get("keywords", data)
            return cls.from_mapping(mapping)
        except (OSError, ValueError, AttributeError, TypeError, ValidationError) as e:
            raise QBDevError(ErrorCode.KEYWORD_DATABASE_INVALID, path=path, details=str(e)) from e

    # --- Queries ---

    def lookup(self, name: str) -> Optional[KeywordInfo]:
        key = name.upper()
        if key in self._keywords:
            return self._keywords[key]
        if key in self._aliases:
            return self._keywords[self._aliases[key]]
        return None

    def search(self, query: str, max_results: int = 10) -> List[KeywordMatch]:
        if not query:
            return []

        lower_query = query.lower()
        query_without_underscore = query[1:] if query.startswith("_") else query
        component_words = [w.lower() for w in _split_components(query_without_underscore) if len(w) > 2]

        matches = []
        for key, info in self._keywords.items():
            relevance, match_type = self._score(key.lower(), info, lower_query, component_words)
            if relevance > 0:
                matches.append(KeywordMatch(keyword=info, relevance=relevance, match_type=match_type))

        matches.sort(key=lambda m: (-m.relevance, m.keyword.name))
        return matches[:max_results]

    def autocomplete(self, prefix: str, max_results: int = 10) -> List[str]:
        upper_prefix = prefix.upper()
        names = sorted(info.name for key, info in self._keywords.items() if key.startswith(upper_prefix))
        return names[:max_results]

    def validate_keyword(self, name: str) -> KeywordValidation:
        info = self.lookup(name)
        if info:
            return KeywordValidation(is_valid=True, keyword=info)
        suggestions = [m.keyword.name for m in self.search(name, 5) if m.keyword.name.upper() != name.upper()]
        return KeywordValidation(is_valid=False, suggestions=suggestions)

    def by_type(self, keyword_type: str) -> List[KeywordInfo]:
        return sorted((info for info in self._keywords.values() if info.type == keyword_type), key=lambda info: info.name)

    def by_version(self, version: str) -> List[KeywordInfo]:
        return sorted((info for info in self._keywords.values() if info.version == version), key=lambda info: info.name)

    def deprecated(self) -> List[KeywordInfo]:
        """Keywords kept for QBasic compatibility but flagged for replacement."""
        return sorted((info for info in self._keywords.values() if info.deprecated), key=lambda info: info.name)

    # --- Ranking ---

    @staticmethod
    def _score(lower_name: str, info: KeywordInfo, lower_query: str, component_words: List[str]):
        name_without_underscore = lower_name[1:] if lower_name.startswith("_") else lower_name
        query_without_underscore = lower_query[1:] if lower_query.startswith("_") else lower_query

        if lower_name == lower_query:
            return 100, "exact"
        if name_without_underscore == query_without_underscore:
            return 95, "exact"
        if lower_name.startswith(lower_query):
            return 80, "prefix"

        if len(lower_query) > 3:
            max_distance = 3 if len(lower_query) > 10 else 2
            distance = levenshtein(lower_name, lower_query)
            if distance <= max_distance:
                return 75 - distance * 10, "fuzzy"

        if component_words:
            matched = [w for w in component_words if w in lower_name]
            if len(matched) == len(component_words):
                return 70, "contains"
            if matched:
                return 50 + len(matched) * 10, "contains"

        if lower_query in lower_name:
            return 60, "contains"
        if lower_query in info.description.lower():
            return 40, "contains"
        if any(lower_query in rel.lower() for rel in info.related):
            return 20, "related"
        return 0, None


def _split_components(text: str) -> List[str]:
    return [w for w in text.replace(" ", "_").split("_") if w]


@lru_cache(maxsize=None)
def load_default_database(path: Optional[str] = None) -> KeywordDatabase:
    """
    Returns the shared knowledge base: the built-in tables, or the JSON file
    at `path`. A file that cannot be loaded yields an empty database, which
    turns keyword validation into a no-op.
    """
    if path is None:
        from . import KEYWORDS

        return KeywordDatabase.from_mapping(KEYWORDS)
    try:
        return KeywordDatabase.from_json(path)
    except QBDevError as e:
        logger.warning("Keyword checks disabled: %s", e)
        return KeywordDatabase()
