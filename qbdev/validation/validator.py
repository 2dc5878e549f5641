import json
import logging
import os
from typing import Any, Dict, List, Optional

from ..config.config import CHECK_LEVELS, DEFAULT_CHECK_LEVEL
from ..core.classes import FindingSource, Severity, ValidationReport, split_source
from ..exceptions import ErrorCode, QBDevError
from ..keywords.database import KeywordDatabase, load_default_database
from ..utils import ReportEncoder
from .block_structure import validate_block_structure
from .compatibility import check_compatibility
from .keyword_validator import validate_keywords
from .scoring import calculate_score
from .syntax_checks import check_line_syntax

logger = logging.getLogger(__name__)

# Findings from these sources decide validity; compatibility findings are advisory.
BLOCKING_SOURCES = {FindingSource.STRUCTURE, FindingSource.SYNTAX, FindingSource.KEYWORD}


class ValidationPipeline:
    """
    Runs every validator over one source text and merges their findings into
    a single report. The validators are independent pure functions of the
    source lines, so their order only affects the order of the findings.
    """

    def __init__(
        self,
        source_content: str,
        check_level: str = DEFAULT_CHECK_LEVEL,
        keyword_db: Optional[KeywordDatabase] = None,
        file_path: Optional[str] = None,
        dump_stages: List[str] = [],
    ):
        if not isinstance(source_content, str):
            raise QBDevError(ErrorCode.INVALID_SOURCE_TYPE, type_name=type(source_content).__name__)
        if check_level not in CHECK_LEVELS:
            raise QBDevError(ErrorCode.INVALID_CHECK_LEVEL, level=check_level, allowed=", ".join(CHECK_LEVELS))

        self.source_content = source_content
        self.check_level = check_level
        self.keyword_db = keyword_db if keyword_db is not None else load_default_database()
        self.file_path = os.path.abspath(file_path) if file_path else "<stdin>"
        self.dump_stages = dump_stages
        self.lines = split_source(source_content)
        self.artifacts: Dict[str, Any] = {}

    def run(self) -> ValidationReport:
        self._run_stage("structure", validate_block_structure, self.lines)
        syntax_findings, suggestions = self._run_stage("syntax", check_line_syntax, self.lines, self.check_level, self.keyword_db.__contains__)
        self._run_stage("compatibility", check_compatibility, self.lines)
        self._run_stage("keywords", validate_keywords, self.lines, self.keyword_db)

        findings = self.artifacts["structure"] + syntax_findings + self.artifacts["compatibility"] + self.artifacts["keywords"]
        score = self._run_stage("score", calculate_score, findings, self.lines)
        is_valid = not any(f.severity == Severity.ERROR and f.source in BLOCKING_SOURCES for f in findings)

        report = ValidationReport(
            check_level=self.check_level,
            findings=findings,
            suggestions=suggestions,
            score=score,
            is_valid=is_valid,
        )
        logger.debug("Validation finished: %d finding(s), score %d, valid=%s", len(findings), score, is_valid)
        return report

    def _run_stage(self, name: str, func, *args) -> Any:
        """Runs a single validator as a stage, storing and returning its result."""
        result = func(*args)
        self.artifacts[name] = result
        if name in self.dump_stages:
            self.save_artifact(name, result)
        return result

    def save_artifact(self, name: str, data: Any):
        """Saves a stage result next to the source file as JSON."""
        if self.file_path == "<stdin>":
            base_name = "stdin_output"
        else:
            base_name = os.path.splitext(self.file_path)[0]

        output_path = f"{base_name}.{name}.json"
        logger.info("Saving artifact '%s' to %s", name, output_path)

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=False, cls=ReportEncoder)
        except OSError as e:
            logger.warning("Could not save artifact '%s': %s", name, e)


def validate(
    source: str,
    check_level: str = DEFAULT_CHECK_LEVEL,
    keyword_db: Optional[KeywordDatabase] = None,
    file_path: Optional[str] = None,
    dump_stages: List[str] = [],
) -> ValidationReport:
    """High-level entry point for the validation pipeline."""
    pipeline = ValidationPipeline(source, check_level, keyword_db, file_path, dump_stages)
    return pipeline.run()
