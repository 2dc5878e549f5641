import logging
import re
from typing import List

from lark import Token

from ..config.config import MAX_KEYWORD_SUGGESTIONS, SHORT_KEYWORD_ALLOWLIST
from ..core.classes import Finding, FindingSource, Severity, SourceLine
from ..exceptions import FindingMessage
from ..keywords.database import KeywordDatabase
from .tokenizer import identifier_tokens

logger = logging.getLogger(__name__)

KEYWORD_SHAPE_REGEX = re.compile(r"^\$?[A-Z_][A-Z0-9_]*[$%&!#~]*$")


def looks_like_keyword(token: str) -> bool:
    """
    Ordinary variable names are left alone: only upper-case identifiers that
    are prefixed (`_NAME`, `$NAME`), at least three letters long, or on the
    short-keyword allow-list are worth a knowledge-base lookup.
    """
    if token != token.upper() or not KEYWORD_SHAPE_REGEX.match(token):
        return False
    bare = token.rstrip("$%&!#~")
    if token.startswith(("_", "$")):
        return len(bare) > 1
    return len(bare) >= 3 or bare in SHORT_KEYWORD_ALLOWLIST


class KeywordValidator:
    def __init__(self, keyword_db: KeywordDatabase):
        self.keyword_db = keyword_db

    def validate(self, lines: List[SourceLine]) -> List[Finding]:
        if self.keyword_db.is_empty:
            logger.debug("Keyword database is empty, skipping keyword validation")
            return []

        findings = []
        for line in lines:
            if line.is_blank or line.is_comment:
                continue
            tokens = identifier_tokens(line.text)
            if line.stripped.startswith("$"):
                # Only the directive itself, not its arguments.
                tokens = tokens[:1]
            for token in tokens:
                findings.extend(self._check_token(line, token))
        return findings

    def _check_token(self, line: SourceLine, token: Token) -> List[Finding]:
        name = str(token.value)
        if not looks_like_keyword(name):
            return []

        info = self.keyword_db.lookup(name)
        if info is None:
            # A sigil on a sigil-less keyword (TIMER#) still resolves.
            bare = name.rstrip("$%&!#~")
            info = self.keyword_db.lookup(bare) if bare != name else None

        if info is not None:
            findings = []
            if info.deprecated:
                findings.append(self._finding(line, token, Severity.WARNING, "deprecated-keyword", FindingMessage.DEPRECATED_KEYWORD.format(name=name), info=info))
            if info.version == "QB64PE" and not name.startswith("_"):
                findings.append(self._finding(line, token, Severity.INFO, "version-specific", FindingMessage.VERSION_SPECIFIC_KEYWORD.format(name=name), info=info))
            return findings

        validation = self.keyword_db.validate_keyword(name)
        suggestions = validation.suggestions[:MAX_KEYWORD_SUGGESTIONS]
        if not suggestions:
            return []
        message = FindingMessage.UNKNOWN_KEYWORD.format(name=name, suggestions=", ".join(suggestions))
        return [self._finding(line, token, Severity.WARNING, "unknown-keyword", message, suggestions=suggestions)]

    @staticmethod
    def _finding(line: SourceLine, token: Token, severity: Severity, category: str, message: str, info=None, suggestions=None) -> Finding:
        return Finding(
            line=line.number,
            column=token.column or 1,
            severity=severity,
            category=category,
            message=message,
            suggestion=f"Check the spelling of {token.value}" if suggestions else None,
            source=FindingSource.KEYWORD,
            keyword=str(token.value),
            keyword_info=info,
            suggestions=suggestions or [],
        )


def validate_keywords(lines: List[SourceLine], keyword_db: KeywordDatabase) -> List[Finding]:
    """Convenience wrapper to run the keyword validator."""
    return KeywordValidator(keyword_db).validate(lines)
