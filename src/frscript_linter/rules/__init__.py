from .base import BaseRule, LintContext, classify_mismatch, is_compatible
from .call_rules import CallSiteRule
from .metrics_rules import FunctionMetricsRule
from .syntax_rules import MissingReturnTypeRule, NoSemicolonsRule
from .type_rules import AssignmentTypeRule, ReturnTypeRule
from .usage_rules import UnusedFunctionRule, UnusedVariableRule

__all__ = [
    "BaseRule",
    "LintContext",
    "classify_mismatch",
    "is_compatible",
    "CallSiteRule",
    "FunctionMetricsRule",
    "MissingReturnTypeRule",
    "NoSemicolonsRule",
    "AssignmentTypeRule",
    "ReturnTypeRule",
    "UnusedFunctionRule",
    "UnusedVariableRule",
]
