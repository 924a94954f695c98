from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import cached_property

from frscript_symbol_db.language import UNIVERSAL_TYPES, collect_struct_names
from frscript_symbol_db.lexical import split_lines, strip_comment
from frscript_symbol_db.models import (
    FunctionDefinition,
    StructDefinition,
    SymbolInfo,
    VariableDeclaration,
)
from frscript_symbol_db.recognizers import LinePatterns, compile_patterns
from frscript_symbol_db.scope import function_body

from ..models import Diagnostic, DiagnosticTag, LinterConfig, Range, Severity

# Spellings that name the same runtime type
TYPE_ALIASES = {"string": "str", "pyobj": "pyobject"}

IMPLICIT_CAST = "implicit-cast"
TYPE_MISMATCH = "type-mismatch"


@dataclass
class LintContext:
    """Everything a rule needs about one document, computed once per pass"""

    source: str
    symbols: list[SymbolInfo]
    config: LinterConfig = field(default_factory=LinterConfig)

    @cached_property
    def lines(self) -> list[str]:
        return split_lines(self.source)

    @cached_property
    def code_lines(self) -> list[str]:
        """Lines with trailing comments removed"""
        return [strip_comment(line) for line in self.lines]

    @cached_property
    def patterns(self) -> LinePatterns:
        return compile_patterns(tuple(collect_struct_names(self.lines)))

    @property
    def functions(self) -> list[FunctionDefinition]:
        return [s for s in self.symbols if isinstance(s, FunctionDefinition)]

    @property
    def structs(self) -> list[StructDefinition]:
        return [s for s in self.symbols if isinstance(s, StructDefinition)]

    @property
    def variables(self) -> list[VariableDeclaration]:
        return [s for s in self.symbols if isinstance(s, VariableDeclaration)]

    def body(self, func: FunctionDefinition) -> tuple[int, int] | None:
        return function_body(func, self.lines)


def classify_mismatch(expected: str, inferred: str | None) -> str | None:
    """Compare a declared type with an inferred one.

    Returns None when compatible, ``implicit-cast`` for a float where an int
    is declared, and ``type-mismatch`` otherwise. Unknown types (None) and
    ``any`` on either side are always compatible, as is int -> float.
    """
    if inferred is None or expected.endswith("*"):
        return None
    expected = TYPE_ALIASES.get(expected, expected)
    inferred = TYPE_ALIASES.get(inferred, inferred)
    if UNIVERSAL_TYPES & {expected, inferred} or expected == inferred:
        return None
    if expected == "int" and inferred == "float":
        return IMPLICIT_CAST
    if expected == "float" and inferred == "int":
        return None
    return TYPE_MISMATCH


def is_compatible(expected: str, inferred: str | None) -> bool:
    """Strict equality up to aliases, with unknown and `any` always compatible"""
    if inferred is None:
        return True
    expected = TYPE_ALIASES.get(expected, expected)
    inferred = TYPE_ALIASES.get(inferred, inferred)
    return bool(UNIVERSAL_TYPES & {expected, inferred}) or expected == inferred


class BaseRule(ABC):
    """Abstract base class for all linting rules."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'call-sites', 'unused-symbols')."""
        pass

    @property
    @abstractmethod
    def severity(self) -> Severity:
        """Default severity for this rule."""
        pass

    @property
    def auto_fixable(self) -> bool:
        """Can this rule automatically fix violations?"""
        return False

    @property
    def description(self) -> str:
        return ""

    @abstractmethod
    def check(self, context: LintContext) -> list[Diagnostic]:
        """Run the check and return found issues."""
        pass

    # Helper method for consistent issue creation
    def _create_issue(
        self,
        line: int,
        message: str,
        code: str,
        start: int = 0,
        end: int | None = None,
        severity: Severity | None = None,
        tags: list[DiagnosticTag] | None = None,
    ) -> Diagnostic:
        return Diagnostic(
            range=Range(line=line, start=max(start, 0), end=end),
            message=message,
            severity=severity or self.severity,
            code=code,
            rule_id=self.rule_id,
            tags=tags or [],
            auto_fixable=self.auto_fixable,
        )
