import logging
from typing import List, Optional

from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_SAVE,
    TEXT_DOCUMENT_HOVER,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    DidSaveTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    PublishDiagnosticsParams,
    Range,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import TextDocument

from .core.classes import KeywordInfo, Severity, ValidationReport
from .exceptions import QBDevError
from .keywords.database import load_default_database
from .validation.validator import validate

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

server = LanguageServer("qbdev-lsp", "v1")

DIAGNOSTIC_SEVERITY = {
    Severity.ERROR: DiagnosticSeverity.Error,
    Severity.WARNING: DiagnosticSeverity.Warning,
    Severity.INFO: DiagnosticSeverity.Information,
}


def _findings_to_diagnostics(report: ValidationReport, source: str) -> List[Diagnostic]:
    """Converts 1-based findings into 0-based LSP diagnostics spanning the rest of the line."""
    lines = source.splitlines()
    diagnostics = []
    for finding in report.findings:
        line_index = max(finding.line - 1, 0)
        line_text = lines[line_index] if line_index < len(lines) else ""
        start = max(finding.column - 1, 0)
        end = max(len(line_text), start + 1)
        message = finding.message if not finding.suggestion else f"{finding.message}\n{finding.suggestion}"
        diagnostics.append(
            Diagnostic(
                range=Range(start=Position(line=line_index, character=start), end=Position(line=line_index, character=end)),
                message=message,
                severity=DIAGNOSTIC_SEVERITY[finding.severity],
                source="qbdev",
                code=finding.category,
            )
        )
    return diagnostics


def _validate(ls: LanguageServer, uri: str):
    document = ls.workspace.get_text_document(uri)
    try:
        report = validate(document.source, keyword_db=load_default_database())
        diagnostics = _findings_to_diagnostics(report, document.source)
    except QBDevError as e:
        logger.error("Validation of %s failed: %s", uri, e)
        diagnostics = []
    ls.text_document_publish_diagnostics(PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics))


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams):
    logger.info("Opened: %s", params.text_document.uri)
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams):
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_SAVE)
def did_save(ls: LanguageServer, params: DidSaveTextDocumentParams):
    _validate(ls, params.text_document.uri)


def _is_word_char(char: str) -> bool:
    return char.isalnum() or char in "_$"


def _get_word_at_position(document: TextDocument, position: Position) -> str:
    if position.line >= len(document.lines):
        return ""
    line = document.lines[position.line]
    start, end = position.character, position.character
    while start > 0 and _is_word_char(line[start - 1]):
        start -= 1
    while end < len(line) and _is_word_char(line[end]):
        end += 1
    return line[start:end]


def _keyword_hover_markdown(info: KeywordInfo) -> str:
    contents = [f"```qb64\n{info.syntax or info.name}\n```", "---", f"**{info.name}** ({info.type}, {info.version})", "", info.description]
    if info.deprecated:
        contents.extend(["", "_Deprecated._"])
    if info.example:
        contents.extend(["", "Example:", f"```qb64\n{info.example}\n```"])
    if info.related:
        contents.extend(["", f"See also: {', '.join(info.related)}"])
    return "\n".join(contents)


@server.feature(TEXT_DOCUMENT_HOVER)
def hover(ls: LanguageServer, params: HoverParams) -> Optional[Hover]:
    document = ls.workspace.get_text_document(params.text_document.uri)
    word = _get_word_at_position(document, params.position)
    if not word:
        return None

    info = load_default_database().lookup(word)
    if info is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.Markdown, value=_keyword_hover_markdown(info)))


@server.feature(TEXT_DOCUMENT_COMPLETION)
def completions(ls: LanguageServer, params: CompletionParams) -> CompletionList:
    document = ls.workspace.get_text_document(params.text_document.uri)
    prefix = _get_word_at_position(document, params.position)
    keyword_db = load_default_database()

    items = []
    for name in keyword_db.autocomplete(prefix, max_results=50):
        info = keyword_db.lookup(name)
        items.append(
            CompletionItem(
                label=name,
                kind=CompletionItemKind.Keyword,
                detail=f"{info.type} ({info.version})",
                documentation=info.description,
            )
        )
    return CompletionList(items=items, is_incomplete=len(items) >= 50)


def main():
    server.start_io()


if __name__ == "__main__":
    main()
