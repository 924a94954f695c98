from pathlib import Path

from frscript_linter.models import Diagnostic
from frscript_symbol_db.models import FunctionDefinition, StructDefinition, SymbolInfo, VariableDeclaration

from .models import LintIssue, SymbolEntry


def diagnostic_to_lint_issue(diagnostic: Diagnostic, file_path: Path) -> LintIssue:
    """Convert an internal dataclass diagnostic to an external Pydantic issue"""
    return LintIssue(
        severity=diagnostic.severity.value.upper(),  # dataclass uses 'error', Pydantic uses 'ERROR'
        file_path=str(file_path),
        line_number=diagnostic.range.line + 1,
        column=diagnostic.range.start + 1,
        rule_id=diagnostic.code or diagnostic.rule_id or "",
        message=diagnostic.message,
        tags=[t.value for t in diagnostic.tags],
        auto_fixable=diagnostic.auto_fixable,
    )


def symbol_to_entry(symbol: SymbolInfo, file_path: Path | str) -> SymbolEntry:
    entry = SymbolEntry(
        file_path=str(file_path),
        name=symbol.name,
        kind=symbol.kind.value,
        line_number=symbol.line + 1,
        documentation=symbol.documentation,
    )
    if isinstance(symbol, FunctionDefinition):
        entry.type = symbol.return_type
        entry.signature = symbol.signature
    elif isinstance(symbol, StructDefinition):
        fields = " ".join(f"{f.type} {f.name}" for f in symbol.fields)
        entry.signature = f"struct {symbol.name} {{ {fields} }}" if fields else f"struct {symbol.name} {{}}"
    elif isinstance(symbol, VariableDeclaration):
        entry.type = symbol.var_type
    return entry
