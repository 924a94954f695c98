import re

from frscript_symbol_db.language import CONTROL_FLOW_KEYWORDS, is_type_name
from frscript_symbol_db.lexical import is_inside_string

from ..models import Diagnostic, Severity
from .base import BaseRule, LintContext

# Only top-level lines (no indentation) can be function definitions
UNTYPED_FUNCTION_RE = re.compile(r"^(\w+)\s*\([^)]*\)\s*\{")


class MissingReturnTypeRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "missing-return-type"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, context: LintContext) -> list[Diagnostic]:
        issues = []
        for i, text in enumerate(context.lines):
            match = UNTYPED_FUNCTION_RE.match(text)
            if not match:
                continue
            name = match.group(1)
            if is_type_name(name) or name == "struct" or name in CONTROL_FLOW_KEYWORDS:
                continue
            issues.append(
                self._create_issue(
                    line=i,
                    message=f"Missing return type for function. Did you mean 'void {name}'?",
                    code=self.rule_id,
                    end=len(text),
                )
            )
        return issues


class NoSemicolonsRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "no-semicolons"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, context: LintContext) -> list[Diagnostic]:
        issues = []
        for i, code in enumerate(context.code_lines):
            col = _first_code_semicolon(code)
            if col is None:
                continue
            issues.append(
                self._create_issue(
                    line=i,
                    message="Frscript does not use semicolons",
                    code=self.rule_id,
                    start=col,
                    end=col + 1,
                )
            )
        return issues


def _first_code_semicolon(code: str) -> int | None:
    col = code.find(";")
    while col != -1:
        if not is_inside_string(code, col):
            return col
        col = code.find(";", col + 1)
    return None
