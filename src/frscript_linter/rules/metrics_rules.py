from ..metrics import calculate_file_metrics
from ..models import Diagnostic, Severity
from .base import BaseRule, LintContext


class FunctionMetricsRule(BaseRule):
    """Threshold checks over per-function complexity, length and nesting"""

    @property
    def rule_id(self) -> str:
        return "metrics"

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    def check(self, context: LintContext) -> list[Diagnostic]:
        config = context.config
        if not config.metrics_enabled:
            return []

        issues = []
        for metric in calculate_file_metrics(context.source, context.symbols):
            start = context.lines[metric.line].find(metric.name)
            span = {"line": metric.line, "start": start, "end": start + len(metric.name)}

            if metric.complexity > config.max_complexity:
                issues.append(
                    self._create_issue(
                        message=(
                            f"Function '{metric.name}' has high cyclomatic complexity ({metric.complexity}). "
                            f"Consider refactoring to reduce complexity below {config.max_complexity}."
                        ),
                        code="high-complexity",
                        **span,
                    )
                )
            if metric.function_length > config.max_function_length:
                issues.append(
                    self._create_issue(
                        message=(
                            f"Function '{metric.name}' is too long ({metric.function_length} lines). "
                            f"Consider splitting into smaller functions (max: {config.max_function_length} lines)."
                        ),
                        code="long-function",
                        severity=Severity.INFORMATION,
                        **span,
                    )
                )
            if metric.nesting_depth > config.max_nesting_depth:
                issues.append(
                    self._create_issue(
                        message=(
                            f"Function '{metric.name}' has deep nesting ({metric.nesting_depth} levels). "
                            f"Consider reducing nesting below {config.max_nesting_depth} levels."
                        ),
                        code="deep-nesting",
                        severity=Severity.INFORMATION,
                        **span,
                    )
                )

        for issue in issues:
            issue.source = "frscript-metrics"
        return issues
