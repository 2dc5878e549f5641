import json

import pytest

from qbdev.exceptions import ErrorCode, QBDevError
from qbdev.keywords.database import KeywordDatabase, levenshtein, load_default_database


def entry(description: str, **extra):
    return {"type": "statement", "category": "test", "description": description, **extra}


SMALL_TABLE = {
    "PRINT": entry("Outputs text to the screen.", related=["WRITE"]),
    "_TITLE": entry("Sets the window title."),
    "LOCATE": entry("Moves the cursor.", aliases=["POSITION"]),
    "LOF": entry("Length of an open file.", type="function"),
    "LOG": entry("Natural logarithm.", type="function"),
    "_MOUSEBUTTON": entry("State of a pointer button.", type="function"),
}


@pytest.fixture
def small_db():
    return KeywordDatabase.from_mapping(SMALL_TABLE)


def ranking(db: KeywordDatabase, query: str):
    return {m.keyword.name: (m.relevance, m.match_type) for m in db.search(query)}


# --- 1. Lookup ---


def test_lookup_is_case_insensitive(small_db):
    assert small_db.lookup("print").name == "PRINT"
    assert small_db.lookup("Print") is small_db.lookup("PRINT")
    assert small_db.lookup("PRINTX") is None


def test_lookup_by_alias(small_db):
    assert small_db.lookup("position").name == "LOCATE"
    assert "POSITION" in small_db


# --- 2. Ranked search ---


@pytest.mark.parametrize(
    "query, name, expected",
    [
        pytest.param("PRINT", "PRINT", (100, "exact"), id="exact"),
        pytest.param("TITLE", "_TITLE", (95, "exact"), id="exact_without_underscore"),
        pytest.param("PRI", "PRINT", (80, "prefix"), id="prefix"),
        pytest.param("PRINF", "PRINT", (65, "fuzzy"), id="one_edit"),
        pytest.param("button mouse", "_MOUSEBUTTON", (70, "contains"), id="all_components"),
        pytest.param("mouse wheel", "_MOUSEBUTTON", (60, "contains"), id="some_components"),
        pytest.param("screen", "PRINT", (40, "contains"), id="description"),
        pytest.param("write", "PRINT", (20, "related"), id="related"),
    ],
)
def test_relevance_tiers(small_db, query, name, expected):
    assert ranking(small_db, query)[name] == expected


def test_ties_are_broken_by_name(small_db):
    names = [m.keyword.name for m in small_db.search("LO")]
    assert names[:3] == ["LOCATE", "LOF", "LOG"]


def test_search_limits(small_db):
    assert len(small_db.search("LO", max_results=2)) == 2
    assert small_db.search("") == []
    assert small_db.search("qqqqqqqq") == []


def test_autocomplete(small_db, keyword_db):
    assert small_db.autocomplete("lo") == ["LOCATE", "LOF", "LOG"]
    assert small_db.autocomplete("lo", max_results=1) == ["LOCATE"]
    assert keyword_db.autocomplete("_M", 2) == ["_MOUSEBUTTON", "_MOUSEINPUT"]


def test_validate_keyword(small_db):
    valid = small_db.validate_keyword("locate")
    assert valid.is_valid
    assert valid.keyword.name == "LOCATE"

    invalid = small_db.validate_keyword("PRINF")
    assert not invalid.is_valid
    assert invalid.keyword is None
    assert "PRINT" in invalid.suggestions


def test_filters(small_db):
    assert [info.name for info in small_db.by_type("function")] == ["LOF", "LOG", "_MOUSEBUTTON"]
    assert [info.name for info in small_db.by_version("QBasic")] == sorted(SMALL_TABLE)
    assert small_db.by_version("QB64PE") == []
    assert small_db.deprecated() == []


def test_filters_on_builtin_database(keyword_db):
    assert "GOSUB" in [info.name for info in keyword_db.deprecated()]
    assert "$DEBUG" in [info.name for info in keyword_db.by_version("QB64PE")]
    metacommands = keyword_db.by_type("metacommand")
    assert metacommands and all(info.type == "metacommand" for info in metacommands)


# --- 3. Loading ---


@pytest.mark.parametrize("wrapped", [True, False], ids=["keywords_wrapper", "flat_mapping"])
def test_from_json(tmp_path, wrapped):
    path = tmp_path / "keywords.json"
    path.write_text(json.dumps({"keywords": SMALL_TABLE} if wrapped else SMALL_TABLE))
    db = KeywordDatabase.from_json(str(path))
    assert len(db) == len(SMALL_TABLE)
    assert db.lookup("_TITLE").description == "Sets the window title."


def test_from_json_missing_file(tmp_path):
    with pytest.raises(QBDevError) as e:
        KeywordDatabase.from_json(str(tmp_path / "missing.json"))
    assert e.value.code == ErrorCode.KEYWORD_DATABASE_NOT_FOUND


@pytest.mark.parametrize(
    "content",
    [
        pytest.param("{not json", id="malformed_json"),
        pytest.param(json.dumps({"PRINT": {"category": "console", "description": "x"}}), id="missing_type"),
        pytest.param(json.dumps({"PRINT": {"type": "spell", "category": "console", "description": "x"}}), id="unknown_type"),
    ],
)
def test_from_json_invalid_content(tmp_path, content):
    path = tmp_path / "keywords.json"
    path.write_text(content)
    with pytest.raises(QBDevError) as e:
        KeywordDatabase.from_json(str(path))
    assert e.value.code == ErrorCode.KEYWORD_DATABASE_INVALID


def test_unloadable_database_is_empty(tmp_path):
    db = load_default_database(str(tmp_path / "missing.json"))
    assert db.is_empty
    assert db.search("PRINT") == []


def test_builtin_database(keyword_db):
    assert len(keyword_db) > 100
    assert keyword_db.lookup("GOSUB").deprecated
    assert keyword_db.lookup("$DEBUG").version == "QB64PE"
    assert keyword_db.lookup("PRINT").related == ["PRINT USING", "WRITE", "LOCATE", "CLS"]


@pytest.mark.parametrize(
    "a, b, distance",
    [
        ("", "", 0),
        ("abc", "", 3),
        ("PRINT", "PRINT", 0),
        ("PRINT", "PRNT", 1),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
    ],
)
def test_levenshtein(a, b, distance):
    assert levenshtein(a, b) == distance
    assert levenshtein(b, a) == distance
