from qbdev.core.classes import Finding, FindingSource, Severity, split_source
from qbdev.validation.scoring import calculate_score, comment_ratio


def make_finding(severity: Severity) -> Finding:
    return Finding(line=1, severity=severity, category="test", message="test", source=FindingSource.SYNTAX)


def test_comment_ratio_ignores_blank_lines():
    lines = split_source("' setup\nPRINT 1\n\nPRINT 2")
    assert comment_ratio(lines) == 0.5


def test_comment_ratio_without_code():
    assert comment_ratio(split_source("' only a comment")) == 0.0


def test_score_weights_per_severity():
    findings = [make_finding(Severity.ERROR), make_finding(Severity.WARNING), make_finding(Severity.WARNING), make_finding(Severity.INFO)]
    assert calculate_score(findings, split_source("PRINT 1")) == 86
    assert calculate_score(findings, split_source("' greet\nPRINT 1")) == 91


def test_score_is_clamped():
    errors = [make_finding(Severity.ERROR)] * 12
    assert calculate_score(errors, split_source("PRINT 1")) == 0
    assert calculate_score([], split_source("' greet\nPRINT 1")) == 100
