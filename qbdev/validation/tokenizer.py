import os
from typing import List

from lark import Lark, Token

LARK_LEXER = None

try:
    # Use importlib.resources for robust package data access
    from importlib.resources import files as pkg_files

    basic_grammar = (pkg_files("qbdev.validation") / "basic.lark").read_text()
    LARK_LEXER = Lark(basic_grammar, start="start", parser="lalr", lexer="basic")
except Exception:
    # Fallback for development checkouts where the package data is not installed
    grammar_path = os.path.join(os.path.dirname(__file__), "basic.lark")
    with open(grammar_path, "r") as f:
        basic_grammar = f.read()
    LARK_LEXER = Lark(basic_grammar, start="start", parser="lalr", lexer="basic")


def tokenize_line(text: str) -> List[Token]:
    """
    Splits one source line into lark tokens. Comments (both ' and REM) are
    dropped, strings stay intact even when unterminated, and every token keeps
    its 1-based column.
    """
    tokens = []
    for token in LARK_LEXER.lex(text):
        if token.type == "NAME" and token.value.upper() == "REM":
            break
        tokens.append(token)
    return tokens


def identifier_tokens(text: str) -> List[Token]:
    """Only the NAME tokens of a line: candidate keywords and variable names."""
    return [t for t in tokenize_line(text) if t.type == "NAME"]
