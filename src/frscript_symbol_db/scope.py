"""Scope resolution: which function encloses a line, and what names it sees."""

from collections.abc import Sequence

from .lexical import code_text, find_block
from .models import FunctionDefinition, SymbolInfo, SymbolKind, VariableDeclaration

# Declared type of a variadic parameter inside the function body
_VARIADIC_TYPES = {"*": "list", "**": "dict"}


def function_body(func: FunctionDefinition, lines: list[str]) -> tuple[int, int] | None:
    """Line range of a function's braces, cached on ``func.end_line``."""
    if func.end_line is not None:
        return func.line, func.end_line
    block = find_block(lines, func.line)
    if block is not None:
        func.end_line = block[1]
    return block


def _still_open(func: FunctionDefinition, lines: list[str], line: int) -> bool:
    depth = 0
    for i in range(func.line, min(line, len(lines) - 1) + 1):
        for ch in code_text(lines[i]):
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return False
    return depth > 0


def enclosing_function(
    symbols: Sequence[SymbolInfo], lines: list[str], line: int
) -> FunctionDefinition | None:
    """The innermost function whose braces are still open at ``line``."""
    innermost = None
    for s in symbols:
        if not isinstance(s, FunctionDefinition) or s.line >= line:
            continue
        if _still_open(s, lines, line):
            if innermost is None or s.line > innermost.line:
                innermost = s
    return innermost


def parameter_variables(func: FunctionDefinition) -> list[VariableDeclaration]:
    variables = []
    for param in func.parameters:
        var_type = param.type
        if param.is_variadic:
            var_type = _VARIADIC_TYPES["**" if param.type.endswith("**") else "*"]
        variables.append(
            VariableDeclaration(
                name=param.name,
                kind=SymbolKind.VARIABLE,
                line=func.line,
                var_type=var_type,
            )
        )
    return variables


def symbol_context(
    symbols: Sequence[SymbolInfo],
    func: FunctionDefinition | None,
    before_line: int | None = None,
) -> list[SymbolInfo]:
    """Locals-then-globals list of the symbols visible inside ``func``.

    Parameters come first, then variables declared in the body (latest
    first, up to ``before_line`` when given), then every document symbol.
    """
    if func is None:
        return list(symbols)

    end = func.end_line if func.end_line is not None else float("inf")
    if before_line is not None:
        end = min(end, before_line - 1)

    local_vars = [
        s
        for s in symbols
        if isinstance(s, VariableDeclaration) and func.line < s.line <= end
    ]
    local_vars.reverse()
    return [*parameter_variables(func), *local_vars, *symbols]
