from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    HINT = "hint"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.ERROR: 4,
    Severity.WARNING: 3,
    Severity.INFORMATION: 2,
    Severity.HINT: 1,
}


class DiagnosticTag(str, Enum):
    UNNECESSARY = "unnecessary"


@dataclass
class Range:
    """0-based line with an optional column span"""

    line: int
    start: int = 0
    end: int | None = None


@dataclass
class Diagnostic:
    """A finding produced by one validation pass"""

    range: Range
    message: str
    severity: Severity
    code: str | None = None
    rule_id: str | None = None
    tags: list[DiagnosticTag] = field(default_factory=list)
    auto_fixable: bool = False
    source: str = "frscript"

    @property
    def line(self) -> int:
        return self.range.line


@dataclass
class LinterConfig:
    """Engine-side settings; the CLI builds this from `.frscript-lint.toml`"""

    select: list[str] = field(default_factory=lambda: ["all"])
    ignore: list[str] = field(default_factory=list)
    unused_variable_severity: Severity = Severity.HINT
    metrics_enabled: bool = True
    max_complexity: int = 10
    max_function_length: int = 50
    max_nesting_depth: int = 4

    def is_enabled(self, *names: str | None) -> bool:
        keys = {n for n in names if n}
        if keys & set(self.ignore):
            return False
        return "all" in self.select or bool(keys & set(self.select))


@dataclass
class AutoFixAction:
    """Action to take for an auto-fix"""

    action_type: str  # 'replace'
    line_number: int
    old_text: str | None = None
    new_text: str | None = None
