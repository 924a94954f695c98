import re

from ..models import Diagnostic, DiagnosticTag, Severity
from .base import BaseRule, LintContext


class UnusedFunctionRule(BaseRule):
    """Functions with no call other than their own definition.

    ``main`` and decorated functions are entry points and always count as
    used. Passing a function by name (``map(f, xs)``, ``g = f``) also counts.
    """

    @property
    def rule_id(self) -> str:
        return "unused-function"

    @property
    def severity(self) -> Severity:
        return Severity.HINT

    def check(self, context: LintContext) -> list[Diagnostic]:
        issues = []
        text = context.source
        for func in context.functions:
            if func.name == "main":
                continue
            if func.line > 0 and context.lines[func.line - 1].strip().startswith("@"):
                continue

            name = re.escape(func.name)
            calls = re.findall(rf"\b{name}\s*\(", text)
            refs = re.findall(rf"(?m)[\(,=\[]\s*{name}\s*[\),\]\s]|[\(,]\s*{name}\s*$", text)
            # The definition itself is one call-shaped occurrence
            if len(calls) > 1 or refs:
                continue

            start = context.lines[func.line].find(func.name)
            issues.append(
                self._create_issue(
                    line=func.line,
                    message=f"Function '{func.name}' is declared but never used",
                    code=self.rule_id,
                    start=start,
                    end=start + len(func.name),
                    tags=[DiagnosticTag.UNNECESSARY],
                )
            )
        return issues


class UnusedVariableRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "unused-variable"

    @property
    def severity(self) -> Severity:
        return Severity.HINT

    def check(self, context: LintContext) -> list[Diagnostic]:
        issues = []
        severity = context.config.unused_variable_severity
        for var in context.variables:
            uses = re.findall(rf"\b{re.escape(var.name)}\b", context.source)
            if len(uses) > 1:
                continue

            start = context.lines[var.line].find(var.name)
            issues.append(
                self._create_issue(
                    line=var.line,
                    message=f"Variable '{var.name}' is declared but never used",
                    code=self.rule_id,
                    start=start,
                    end=start + len(var.name),
                    severity=severity,
                    tags=[DiagnosticTag.UNNECESSARY],
                )
            )
        return issues
