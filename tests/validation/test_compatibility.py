import re

import pytest

from qbdev.core.classes import FindingSource, Severity, split_source
from qbdev.validation.compatibility import COMPATIBILITY_RULES, CompatibilityMatcher, CompatibilityRule, check_compatibility


def compat_categories(source: str):
    return [f.category for f in check_compatibility(split_source(source))]


# --- 1. Every rule fires on its canonical example ---


@pytest.mark.parametrize(
    "line, category, severity",
    [
        pytest.param("FUNCTION Add(a AS INTEGER, b AS INTEGER) AS INTEGER", "function_return_types", Severity.ERROR, id="function_return_types"),
        pytest.param("FUNCTION MakePoint(x AS SINGLE) AS Point2D", "udt_return_types", Severity.ERROR, id="udt_return_types"),
        pytest.param("$CONSOLE:OFF", "console_directives", Severity.ERROR, id="console_directives"),
        pytest.param("IF r < 0 THEN r = 0: IF r > 255 THEN r = 255", "multi_statement_lines", Severity.WARNING, id="multi_statement_lines"),
        pytest.param("DIM a(10) AS INTEGER, b(10) AS INTEGER", "array_declarations", Severity.ERROR, id="array_declarations"),
        pytest.param("DIM oldS AS LONG: oldS = _SOURCE", "variable_operations", Severity.WARNING, id="variable_operations"),
        pytest.param("x$ = _TRIM$(y$)", "missing_functions", Severity.ERROR, id="missing_functions"),
        pytest.param("TRON", "legacy_keywords", Severity.ERROR, id="legacy_keywords"),
        pytest.param("ON PEN GOSUB Handler", "device_access", Severity.ERROR, id="device_access"),
        pytest.param('OPEN "LPT1:" FOR OUTPUT AS #1', "device_open", Severity.ERROR, id="device_open"),
        pytest.param('_SCREENPRINT "hi"', "platform_specific", Severity.WARNING, id="platform_specific"),
        pytest.param('_CONSOLETITLE "Tool"', "console_platform", Severity.WARNING, id="console_platform"),
        pytest.param('CHAIN "other.bas"', "program_control", Severity.WARNING, id="program_control"),
        pytest.param("DIM arr(size) AS INTEGER", "dynamic_arrays", Severity.WARNING, id="dynamic_arrays"),
        pytest.param("SHARED counter", "shared_syntax", Severity.ERROR, id="shared_syntax"),
        pytest.param("IF done = FALSE THEN PRINT 1", "boolean_constants", Severity.WARNING, id="boolean_constants"),
        pytest.param("DECLARE SUB Helper", "unnecessary_declarations", Severity.INFO, id="unnecessary_declarations"),
    ],
)
def test_rule_matches_its_example(line, category, severity):
    findings = [f for f in check_compatibility(split_source(line)) if f.category == category]
    assert len(findings) == 1
    assert findings[0].severity == severity
    assert findings[0].source == FindingSource.COMPATIBILITY


def test_rule_table_has_unique_categories():
    names = [rule.category for rule in COMPATIBILITY_RULES]
    assert len(names) == len(set(names)) == 17


# --- 2. Near misses ---


@pytest.mark.parametrize(
    "source",
    [
        pytest.param("x$ = MY_TRIM$(y$)", id="longer_identifier_is_not_trim"),
        pytest.param("DIM arr(10) AS INTEGER", id="constant_array_size"),
        pytest.param("CONST TRUE = -1", id="defining_true"),
        pytest.param("' TRON", id="comment_line"),
        pytest.param("IF a THEN b", id="single_if"),
        pytest.param("FUNCTION Area# (r AS DOUBLE)", id="sigil_return_type"),
    ],
)
def test_no_false_positive(source):
    assert compat_categories(source) == []


@pytest.mark.parametrize("directive", ["$DYNAMIC", "'$DYNAMIC"])
def test_dynamic_directive_silences_dynamic_arrays(directive):
    assert "dynamic_arrays" not in compat_categories(f"{directive}\nDIM arr(size) AS INTEGER")


# --- 3. Finding details ---


def test_finding_carries_pattern_column_and_example():
    findings = check_compatibility(split_source("PRINT 1\n  $CONSOLE:OFF"))
    assert len(findings) == 1
    finding = findings[0]
    assert finding.line == 2
    assert finding.column == 3
    assert finding.pattern == "$CONSOLE:OFF"
    assert finding.example.correct == "$CONSOLE"


def test_one_line_can_trigger_several_rules():
    categories = compat_categories("FUNCTION MakePoint(x AS SINGLE) AS Point2D")
    assert categories == ["function_return_types", "udt_return_types"]


def test_custom_rule_table():
    rule = CompatibilityRule("goto_usage", re.compile(r"\bGOTO\b", re.IGNORECASE), Severity.INFO, "GOTO found", "Use a loop")
    findings = CompatibilityMatcher([rule]).scan(split_source("10 PRINT 1\nGOTO 10"))
    assert [(f.line, f.category) for f in findings] == [(2, "goto_usage")]
