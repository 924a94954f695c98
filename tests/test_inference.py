import pytest

from frscript_symbol_db.extractor import get_symbols
from frscript_symbol_db.inference import infer_expression_type, infer_return_type, infer_type
from frscript_symbol_db.models import SymbolKind, VariableDeclaration

SOURCE = """struct Point {
    float x
    float y
}

int square(int n) {
    return n * n
}

Point p = Point(1.0, 2.0)
int count = 3
float ratio = 0.5
list items = [1, 2]
"""


@pytest.fixture
def symbols():
    return get_symbols(SOURCE)


@pytest.mark.parametrize(
    "expr, expected",
    [
        ('"hi"', "str"),
        ("f'x {y}'", "str"),
        ('b"raw"', "bytes"),
        ("42", "int"),
        ("-3", "int"),
        ("3.14", "float"),
        ("true", "bool"),
        ("[1, 2]", "list"),
        ("{}", "dict"),
        ('{"a": 1}', "dict"),
        ("{1, 2}", "set"),
        ("x", None),
        ("", None),
    ],
)
def test_infer_type_literals(expr, expected):
    assert infer_type(expr) == expected


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("square(2)", "int"),
        ("Point(1.0, 2.0)", "Point"),
        ("len(items)", "int"),
        ("sqrt(2)", "float"),
        ("count / 2", "float"),
        ("count + 1", "int"),
        ("count * ratio", "float"),
        ("p.x + 1", "float"),
        ("3.0 * 2", "float"),
        ('"a" + name', "str"),
        ('str(count) + "x"', "str"),
        ("count > 3", "bool"),
        ("len(items) > 3", "bool"),
        ("count != -1", "bool"),
        ("a && b", "bool"),
        ("flags & 4", "int"),
        ("not done", "bool"),
        ("count", "int"),
        ("p.x", "float"),
        ("items[0]", None),
        ("unknown", None),
        ("mystery()", None),
    ],
)
def test_infer_return_type(symbols, expr, expected):
    assert infer_return_type(expr, symbols) == expected


def test_earlier_symbols_shadow_later_ones():
    context = [
        VariableDeclaration(name="v", kind=SymbolKind.VARIABLE, line=5, var_type="str"),
        VariableDeclaration(name="v", kind=SymbolKind.VARIABLE, line=0, var_type="int"),
    ]
    assert infer_expression_type("v", context) == "str"
