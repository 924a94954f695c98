from .rules.base import BaseRule


class RuleRegistry:
    """Registry for managing and loading linting rules"""

    def __init__(self):
        self._rules: list[BaseRule] = []
        self._load_builtin_rules()

    def register(self, rule: BaseRule):
        self._rules.append(rule)

    def get_enabled_rules(self, select: list[str] | None = None, ignore: list[str] | None = None) -> list[BaseRule]:
        """Rules left after applying select/ignore lists of rule ids"""
        select = select or ["all"]
        ignore = ignore or []
        return [
            r
            for r in self._rules
            if r.rule_id not in ignore and ("all" in select or r.rule_id in select)
        ]

    def _load_builtin_rules(self):
        from .rules.call_rules import CallSiteRule
        from .rules.metrics_rules import FunctionMetricsRule
        from .rules.syntax_rules import MissingReturnTypeRule, NoSemicolonsRule
        from .rules.type_rules import AssignmentTypeRule, ReturnTypeRule
        from .rules.usage_rules import UnusedFunctionRule, UnusedVariableRule

        self.register(MissingReturnTypeRule())
        self.register(NoSemicolonsRule())
        self.register(CallSiteRule())
        self.register(AssignmentTypeRule())
        self.register(ReturnTypeRule())
        self.register(UnusedFunctionRule())
        self.register(UnusedVariableRule())
        self.register(FunctionMetricsRule())
