from frscript_symbol_db.index import WorkspaceIndex, matches_query


def test_cache_reuses_symbols_until_content_changes():
    index = WorkspaceIndex()
    first = index.get_symbols("a.fr", "int x = 1")
    assert index.get_symbols("a.fr", "int x = 1") is first

    changed = index.get_symbols("a.fr", "int y = 1")
    assert [s.name for s in changed] == ["y"]


def test_invalidate_and_clear():
    index = WorkspaceIndex()
    index.get_symbols("a.fr", "int x = 1")
    index.get_symbols("b.fr", "int y = 1")
    assert len(index) == 2

    index.invalidate("a.fr")
    assert "a.fr" not in index
    assert "b.fr" in index

    index.clear()
    assert len(index) == 0


def test_search_across_documents():
    index = WorkspaceIndex()
    index.get_symbols("a.fr", "void getUserData() {\n}")
    index.get_symbols("b.fr", "int userCount = 0")

    matches = index.search("user")
    assert sorted((m.document_id, m.symbol.name) for m in matches) == [
        ("a.fr", "getUserData"),
        ("b.fr", "userCount"),
    ]


def test_matches_query():
    assert matches_query("getUserData", "getUserData")
    assert matches_query("getUserData", "get")
    assert matches_query("getUserData", "userdata")
    assert matches_query("getUserData", "gUD")
    assert not matches_query("getUserData", "xyz")
    assert not matches_query("getUserData", "DUg")
