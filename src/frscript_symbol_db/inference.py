"""
Expression type inference.

Frscript has no parser here, so inference is an ordered series of
conservative pattern matches. The most specific patterns run first. A
result of ``None`` means "no opinion": callers skip their check rather than
treating the expression as ``any``.
"""

import re
from collections.abc import Sequence

from .builtins import BUILTIN_RETURN_TYPES
from .lexical import (
    FLOAT_LITERAL_RE,
    IDENTIFIER_RE,
    INT_LITERAL_RE,
    is_string_literal,
    matching_paren,
    strip_strings,
)
from .models import (
    FunctionDefinition,
    StructDefinition,
    SymbolInfo,
    VariableDeclaration,
)

CALL_RE = re.compile(r"^(\w+)\s*\(")
FIELD_ACCESS_RE = re.compile(r"^(\w+)\.(\w+)$")
INDEX_RE = re.compile(r"\w+\[[^\]]*\]")
DECIMAL_RE = re.compile(r"\d+\.\d+")
FLOAT_CALL_RE = re.compile(r"\bfloat\s*\(")
STR_CALL_RE = re.compile(r"\bstr\s*\(")
OPERAND_SPLIT_RE = re.compile(r"\*\*|[+\-*/]")
LOGICAL_RE = re.compile(r"&&|\|\|")
BITWISE_RE = re.compile(r"<<|>>|[&|^]")
COMPARISON_RE = re.compile(r"==|!=|<=|>=|(?<![<>])<(?![<=])|(?<![<>=])>(?![>=])|\b(?:and|or|not)\b")

# After one of these, `+` / `-` is a sign rather than a binary operator
_UNARY_CONTEXT = set("=<>!(,[{+-*/%&|^:")


def infer_type(expr: str) -> str | None:
    """Type of a bare literal, or None. Identifiers are never resolved here."""
    value = expr.strip()
    if not value:
        return None

    if is_string_literal(value):
        if value[0] == "b":
            return "bytes"
        return "str"

    if INT_LITERAL_RE.match(value):
        return "int"
    if FLOAT_LITERAL_RE.match(value):
        return "float"
    if value in ("true", "false"):
        return "bool"

    if value.startswith("[") and value.endswith("]"):
        return "list"

    if value.startswith("{") and value.endswith("}"):
        if value == "{}":
            return "dict"
        return "dict" if _has_top_level_colon(value[1:-1]) else "set"

    return None


def _has_top_level_colon(body: str) -> bool:
    depth = 0
    for ch in strip_strings(body):
        if ch in "([{":
            depth += 1
        elif ch in ")]}":
            depth -= 1
        elif ch == ":" and depth == 0:
            return True
    return False


def infer_return_type(expr: str, symbols: Sequence[SymbolInfo]) -> str | None:
    """Type of an arbitrary expression given a symbol context.

    ``symbols`` is searched front to back, so locals placed before globals
    shadow them.
    """
    value = expr.strip()
    if not value:
        return None

    literal = infer_type(value)
    if literal:
        return literal

    call_type = _infer_call(value, symbols)
    if call_type:
        return call_type

    code = strip_strings(value, placeholder='""')

    if _has_arithmetic(code):
        return _infer_arithmetic(value, code, symbols)

    if LOGICAL_RE.search(code):
        return "bool"

    if BITWISE_RE.search(code):
        return "int"

    if COMPARISON_RE.search(code):
        return "bool"

    if IDENTIFIER_RE.match(value):
        variable = find_variable(symbols, value)
        if variable and variable.var_type:
            return variable.var_type
        return None

    match = FIELD_ACCESS_RE.match(value)
    if match:
        return _field_type(symbols, match.group(1), match.group(2))

    if INDEX_RE.search(value):
        # element type is unknown
        return None

    return None


def _infer_call(value: str, symbols: Sequence[SymbolInfo]) -> str | None:
    match = CALL_RE.match(value)
    if not match or matching_paren(value, match.end() - 1) != len(value) - 1:
        return None

    name = match.group(1)
    func = find_function(symbols, name)
    if func and func.return_type:
        return func.return_type

    if find_struct(symbols, name):
        return name

    return BUILTIN_RETURN_TYPES.get(name)


def _has_arithmetic(code: str) -> bool:
    prev = ""
    for ch in code:
        if ch in "*/":
            return True
        if ch in "+-":
            if prev and prev not in _UNARY_CONTEXT:
                return True
        if not ch.isspace():
            prev = ch
    return False


def _infer_arithmetic(value: str, code: str, symbols: Sequence[SymbolInfo]) -> str:
    if "/" in code:
        return "float"

    # string concatenation
    if "+" in code and (('"' in value or "'" in value) or STR_CALL_RE.search(code)):
        return "str"

    if DECIMAL_RE.search(code) or FLOAT_CALL_RE.search(code):
        return "float"

    for operand in OPERAND_SPLIT_RE.split(code):
        operand = operand.strip()
        if _operand_type(symbols, operand) == "float":
            return "float"

    return "int"


def _operand_type(symbols: Sequence[SymbolInfo], operand: str) -> str | None:
    if IDENTIFIER_RE.match(operand):
        variable = find_variable(symbols, operand)
        return variable.var_type if variable else None
    match = FIELD_ACCESS_RE.match(operand)
    if match:
        return _field_type(symbols, match.group(1), match.group(2))
    return None


def _field_type(symbols: Sequence[SymbolInfo], var_name: str, field_name: str) -> str | None:
    variable = find_variable(symbols, var_name)
    if not variable or not variable.var_type:
        return None
    struct = find_struct(symbols, variable.var_type)
    if not struct:
        return None
    return struct.field_type(field_name)


def find_function(symbols: Sequence[SymbolInfo], name: str) -> FunctionDefinition | None:
    for s in symbols:
        if isinstance(s, FunctionDefinition) and s.name == name:
            return s
    return None


def find_struct(symbols: Sequence[SymbolInfo], name: str) -> StructDefinition | None:
    for s in symbols:
        if isinstance(s, StructDefinition) and s.name == name:
            return s
    return None


def find_variable(symbols: Sequence[SymbolInfo], name: str) -> VariableDeclaration | None:
    for s in symbols:
        if isinstance(s, VariableDeclaration) and s.name == name:
            return s
    return None


def infer_expression_type(expr: str, symbol_context: Sequence[SymbolInfo]) -> str | None:
    return infer_return_type(expr, symbol_context)
