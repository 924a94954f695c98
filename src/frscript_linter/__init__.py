"""
Frscript linter - diagnostics, code metrics, auto-fixes and docstring generation

The rules run over a symbol table built by ``frscript_symbol_db``; the
engine runs each registered rule independently and sorts the findings.
"""

__version__ = "0.1.0"

from .autofix import AutoFixEngine
from .docgen import generate_all_docstrings, generate_docstring
from .engine import LinterEngine
from .metrics import FunctionMetrics, calculate_file_metrics, summarize
from .models import AutoFixAction, Diagnostic, DiagnosticTag, LinterConfig, Range, Severity
from .registry import RuleRegistry


def get_diagnostics(source: str, config: LinterConfig | None = None) -> list[Diagnostic]:
    """Validate one document's text and return its diagnostics, sorted by position."""
    return LinterEngine(config=config).validate(source)


__all__ = [
    "get_diagnostics",
    "LinterEngine",
    "RuleRegistry",
    "AutoFixEngine",
    "AutoFixAction",
    "Diagnostic",
    "DiagnosticTag",
    "LinterConfig",
    "Range",
    "Severity",
    "FunctionMetrics",
    "calculate_file_metrics",
    "summarize",
    "generate_docstring",
    "generate_all_docstrings",
]
