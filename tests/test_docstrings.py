from frscript_symbol_db.docstrings import parse_docstrings


def test_block_attaches_to_next_line():
    lines = ["/// Adds numbers", "/// @param a first", "int add(int a, int b) {"]
    assert parse_docstrings(lines) == {2: "Adds numbers\n@param a first"}


def test_bare_continuation_lines():
    lines = ["/// Summary", "///", "/// More", "void f() {"]
    assert parse_docstrings(lines) == {3: "Summary\nMore"}


def test_separate_blocks():
    lines = ["/// one", "int a = 1", "/// two", "int b = 2"]
    assert parse_docstrings(lines) == {1: "one", 3: "two"}


def test_trailing_block_is_dropped():
    assert parse_docstrings(["int x = 1", "/// dangling"]) == {}


def test_plain_comments_are_not_docs():
    assert parse_docstrings(["// not a doc", "int x = 1"]) == {}


def test_rescan_appends_to_existing_text():
    docs = parse_docstrings(["/// first", "void f() {"])
    merged = parse_docstrings(["/// second", "void f() {"], docs)
    assert merged is docs
    assert merged == {1: "first\n\nsecond"}
