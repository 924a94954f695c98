from frscript_linter.metrics import calculate_file_metrics, summarize

SOURCE = """void check(int n) {
    if n > 0 && n < 10 {
        print("if while for")
    }
    // if commented
}

int flat() {
    return 1
}
"""


def test_function_metrics():
    check, flat = calculate_file_metrics(SOURCE)

    assert check.name == "check"
    assert check.line == 0
    # base + `if` line + `&&`; keywords in strings and comments don't count
    assert check.complexity == 3
    assert check.function_length == 6
    assert check.nesting_depth == 2

    assert flat.complexity == 1
    assert flat.function_length == 3
    assert flat.nesting_depth == 1


def test_unclosed_function_is_skipped():
    assert calculate_file_metrics("int broken() {\n    return 1") == []


def test_summarize():
    summary = summarize(calculate_file_metrics(SOURCE))
    assert summary == {
        "functions": 2,
        "total_lines": 9,
        "average_complexity": 2.0,
        "max_complexity": 3,
        "max_nesting_depth": 2,
    }


def test_summarize_empty():
    assert summarize([])["functions"] == 0
