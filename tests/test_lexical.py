from frscript_symbol_db.lexical import (
    count_braces,
    find_block,
    is_inside_comment,
    is_inside_string,
    is_string_literal,
    matching_paren,
    split_top_level,
    strip_comment,
    strip_strings,
)


def test_inside_plain_string():
    line = 'x = "abc"'
    assert is_inside_string(line, 6)
    assert not is_inside_string(line, 2)


def test_fstring_interpolation_is_code():
    line = 'f"a {x} b"'
    assert is_inside_string(line, 3)
    # column 5 is the `x` inside the interpolation block
    assert not is_inside_string(line, 5)


def test_escaped_quote_does_not_close_string():
    line = 'x = "a\\"b" + y'
    assert is_inside_string(line, line.index("b"))
    assert not is_inside_string(line, len(line) - 1)


def test_inside_comment():
    assert is_inside_comment("x = 1 // note", 9)
    assert not is_inside_comment("x = 1 // note", 2)
    assert not is_inside_comment('s = "//"', 6)


def test_strip_strings_keeps_interpolation():
    assert strip_strings('print("hi")') == "print()"
    assert strip_strings('f"a {x} b"') == "x"


def test_strip_comment_ignores_slashes_in_strings():
    assert strip_comment("x = 1 // note") == "x = 1 "
    assert strip_comment('url = "http://a"') == 'url = "http://a"'


def test_count_braces_skips_string_content():
    assert count_braces('if x { s = "{" }') == (1, 1)


def test_find_block():
    lines = ["int f() {", "    if x {", "    }", "}", "int y = 2"]
    assert find_block(lines, 0) == (0, 3)


def test_find_block_ignores_braces_in_strings():
    lines = ["void f() {", '    print("}")', "}"]
    assert find_block(lines, 0) == (0, 2)


def test_find_block_unclosed():
    assert find_block(["void f() {", "    print(1)"], 0) is None


def test_split_top_level_respects_strings():
    assert split_top_level('"a,b", 2') == ['"a,b"', " 2"]


def test_split_top_level_respects_brackets():
    assert split_top_level("f(a, b), c") == ["f(a, b)", " c"]
    assert split_top_level("[1, 2], {3: 4}") == ["[1, 2]", " {3: 4}"]
    assert split_top_level("f(a; b)", ";", brackets=False) == ["f(a", " b)"]


def test_is_string_literal():
    assert is_string_literal('"abc"')
    assert is_string_literal('b"raw"')
    assert is_string_literal("f'{x}'")
    assert not is_string_literal('"a" + "b"')
    assert not is_string_literal("abc")


def test_matching_paren_skips_strings():
    text = 'f(a, ")")'
    assert matching_paren(text, 1) == len(text) - 1
    assert matching_paren("f(a", 1) == -1


def test_strip_strings_placeholder():
    assert strip_strings('"a" + b', placeholder='""') == '"" + b'
