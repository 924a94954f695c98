import logging

from frscript_symbol_db.extractor import SymbolExtractor
from frscript_symbol_db.models import SymbolInfo

from .models import Diagnostic, LinterConfig
from .registry import RuleRegistry
from .rules.base import BaseRule, LintContext

logger = logging.getLogger(__name__)


class LinterEngine:
    """Core engine for Frscript linting"""

    def __init__(self, config: LinterConfig | None = None, registry: RuleRegistry | None = None):
        self.config = config or LinterConfig()
        self.registry = registry or RuleRegistry()
        self.extractor = SymbolExtractor()
        self.issues: list[Diagnostic] = []

    def validate(
        self,
        source: str,
        symbols: list[SymbolInfo] | None = None,
        rules: list[BaseRule] | None = None,
    ) -> list[Diagnostic]:
        """Run all lint checks on one document's text.

        A rule that fails is logged and skipped; the remaining rules still run.
        """
        if symbols is None:
            symbols = self.extractor.extract_all(source)
        context = LintContext(source=source, symbols=symbols, config=self.config)

        if rules is None:
            rules = self.registry.get_enabled_rules(ignore=self.config.ignore)

        self.issues = []
        for rule in rules:
            try:
                found = rule.check(context)
            except Exception:
                logger.exception("rule '%s' failed", rule.rule_id)
                continue
            logger.debug("rule '%s' reported %d issue(s)", rule.rule_id, len(found))
            self.issues.extend(d for d in found if self.config.is_enabled(d.code, d.rule_id))

        return sorted(self.issues, key=lambda d: (d.range.line, d.range.start))
