import json

import pytest

from qbdev.core.classes import FindingSource, Severity
from qbdev.exceptions import ErrorCode, QBDevError
from qbdev.validation.validator import ValidationPipeline, validate


# --- 1. End-to-end reports ---


def test_clean_program(keyword_db):
    report = validate('PRINT "hi"', "basic", keyword_db)
    assert report.is_valid
    assert report.errors == []
    assert report.findings == []
    assert report.score == 100


def test_unclosed_loop_program(keyword_db):
    report = validate("FOR i = 1 TO 10\nPRINT i", "basic", keyword_db)
    assert not report.is_valid
    assert len(report.errors) == 1
    error = report.errors[0]
    assert error.category == "unclosed-loop"
    assert error.line == 1
    assert error.source == FindingSource.STRUCTURE
    # One error plus the implicit declaration warning for the counter.
    assert report.score == 88


def test_chained_conditional_is_a_compatibility_warning(keyword_db):
    report = validate("IF a THEN b: IF c THEN d", "basic", keyword_db)
    assert len(report.findings) == 1
    finding = report.findings[0]
    assert finding.severity == Severity.WARNING
    assert finding.category == "multi_statement_lines"
    assert finding.source == FindingSource.COMPATIBILITY
    assert report.is_valid
    assert report.score == 98


def test_compatibility_errors_do_not_invalidate(keyword_db):
    report = validate("$CONSOLE:OFF\nPRINT 1", "basic", keyword_db)
    assert [f.category for f in report.errors] == ["console_directives"]
    assert report.is_valid


def test_findings_are_grouped_by_validator(keyword_db):
    report = validate("FOR i = 1 TO 2\nIF a THEN b: IF c THEN d\nPRNT 1", "basic", keyword_db)
    sources = [f.source for f in report.findings]
    assert list(dict.fromkeys(sources)) == [FindingSource.STRUCTURE, FindingSource.SYNTAX, FindingSource.COMPATIBILITY, FindingSource.KEYWORD]


def test_validation_is_deterministic(keyword_db):
    source = "FOR i = 1 TO 2\nIF a THEN b: IF c THEN d\nPRNT 1\nx$ = 5"
    first = validate(source, "strict", keyword_db)
    second = validate(source, "strict", keyword_db)
    assert first.model_dump() == second.model_dump()


# --- 2. Caller errors ---


def test_unknown_check_level():
    with pytest.raises(QBDevError) as e:
        validate("PRINT 1", "pedantic")
    assert e.value.code == ErrorCode.INVALID_CHECK_LEVEL
    assert "pedantic" in str(e.value)


def test_source_must_be_text():
    with pytest.raises(QBDevError) as e:
        validate(b"PRINT 1")
    assert e.value.code == ErrorCode.INVALID_SOURCE_TYPE


# --- 3. Stage artifacts ---


def test_stage_artifact_is_dumped_next_to_source(tmp_path, keyword_db):
    source_file = tmp_path / "prog.bas"
    pipeline = ValidationPipeline("FOR i = 1 TO 3", keyword_db=keyword_db, file_path=str(source_file), dump_stages=["structure"])
    pipeline.run()

    artifact = tmp_path / "prog.structure.json"
    assert artifact.exists()
    data = json.loads(artifact.read_text())
    assert data[0]["category"] == "unclosed-loop"
    assert data[0]["severity"] == "error"
    assert not (tmp_path / "prog.syntax.json").exists()


def test_artifacts_are_kept_on_the_pipeline(keyword_db):
    pipeline = ValidationPipeline("PRINT 1", keyword_db=keyword_db)
    report = pipeline.run()
    assert set(pipeline.artifacts) == {"structure", "syntax", "compatibility", "keywords", "score"}
    assert pipeline.artifacts["score"] == report.score
