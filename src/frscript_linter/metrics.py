"""Per-function code metrics: cyclomatic complexity, length and nesting depth."""

import re
from dataclasses import asdict, dataclass

from frscript_symbol_db.extractor import get_symbols
from frscript_symbol_db.lexical import code_text, count_braces, split_lines
from frscript_symbol_db.models import FunctionDefinition
from frscript_symbol_db.scope import function_body

BRANCH_RE = re.compile(r"\b(if|elif|while|for|switch|case)\b")
LOGICAL_OP_RE = re.compile(r"&&|\|\|")


@dataclass
class FunctionMetrics:
    name: str
    line: int
    complexity: int
    function_length: int
    nesting_depth: int

    def to_dict(self) -> dict:
        return asdict(self)


def calculate_complexity(lines: list[str], start: int, end: int) -> int:
    """1 + one per branching line + one per `&&`/`||`"""
    complexity = 1
    for i in range(start, end + 1):
        code = code_text(lines[i])
        if BRANCH_RE.search(code):
            complexity += 1
        complexity += len(LOGICAL_OP_RE.findall(code))
    return complexity


def calculate_nesting_depth(lines: list[str], start: int, end: int) -> int:
    max_depth = 0
    depth = 0
    for i in range(start, end + 1):
        opened, closed = count_braces(lines[i])
        depth += opened
        max_depth = max(max_depth, depth)
        depth -= closed
    return max_depth


def calculate_file_metrics(source: str, symbols=None) -> list[FunctionMetrics]:
    """Metrics for every function whose block closes, in source order."""
    lines = split_lines(source)
    if symbols is None:
        symbols = get_symbols(source)

    metrics = []
    for func in symbols:
        if not isinstance(func, FunctionDefinition):
            continue
        body = function_body(func, lines)
        if body is None:
            continue
        start, end = body
        metrics.append(
            FunctionMetrics(
                name=func.name,
                line=func.line,
                complexity=calculate_complexity(lines, start, end),
                function_length=end - start + 1,
                nesting_depth=calculate_nesting_depth(lines, start, end),
            )
        )
    return metrics


def summarize(metrics: list[FunctionMetrics]) -> dict:
    if not metrics:
        return {
            "functions": 0,
            "total_lines": 0,
            "average_complexity": 0.0,
            "max_complexity": 0,
            "max_nesting_depth": 0,
        }
    return {
        "functions": len(metrics),
        "total_lines": sum(m.function_length for m in metrics),
        "average_complexity": round(sum(m.complexity for m in metrics) / len(metrics), 2),
        "max_complexity": max(m.complexity for m in metrics),
        "max_nesting_depth": max(m.nesting_depth for m in metrics),
    }
