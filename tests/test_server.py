import pytest
import sys
import os

# Ensure the server and its dependencies can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from lsprotocol.types import DiagnosticSeverity, Position
from pygls.workspace import TextDocument

from qbdev.server import _findings_to_diagnostics, _get_word_at_position, _keyword_hover_markdown
from qbdev.validation.validator import validate


def test_findings_become_zero_based_diagnostics(keyword_db):
    source = "FOR i = 1 TO 10\nPRINT i"
    report = validate(source, keyword_db=keyword_db)
    diagnostics = _findings_to_diagnostics(report, source)

    assert len(diagnostics) == len(report.findings)
    first = diagnostics[0]
    assert first.severity == DiagnosticSeverity.Error
    assert first.code == "unclosed-loop"
    assert first.source == "qbdev"
    assert (first.range.start.line, first.range.start.character) == (0, 0)
    assert (first.range.end.line, first.range.end.character) == (0, 15)
    assert first.message.startswith("Unclosed FOR loop")


def test_warning_and_info_severities(keyword_db):
    source = "x = 4096"
    report = validate(source, "best-practices", keyword_db)
    severities = {d.code: d.severity for d in _findings_to_diagnostics(report, source)}
    assert severities["implicit-declaration"] == DiagnosticSeverity.Warning
    assert severities["magic-number"] == DiagnosticSeverity.Information


@pytest.mark.parametrize(
    "character, expected",
    [
        pytest.param(6, "LEFT$", id="inside_keyword"),
        pytest.param(5, "LEFT$", id="start_of_keyword"),
        pytest.param(1, "x$", id="string_variable"),
        pytest.param(4, "", id="between_words"),
    ],
)
def test_word_at_position(character, expected):
    document = TextDocument("file:///test.bas", "x$ = LEFT$(a$, 2)")
    assert _get_word_at_position(document, Position(line=0, character=character)) == expected


def test_word_at_position_past_the_last_line():
    document = TextDocument("file:///test.bas", "PRINT 1")
    assert _get_word_at_position(document, Position(line=5, character=0)) == ""


def test_hover_markdown(keyword_db):
    markdown = _keyword_hover_markdown(keyword_db.lookup("PRINT"))
    assert "**PRINT** (statement, QBasic)" in markdown
    assert "```qb64\nPRINT [expression][{;|,}expression]...\n```" in markdown
    assert "See also: PRINT USING, WRITE, LOCATE, CLS" in markdown
    assert "_Deprecated._" not in markdown

    assert "_Deprecated._" in _keyword_hover_markdown(keyword_db.lookup("GOSUB"))
