import logging
import re

from frscript_symbol_db.inference import infer_return_type
from frscript_symbol_db.scope import enclosing_function, symbol_context

from ..models import Diagnostic, Severity
from .base import IMPLICIT_CAST, BaseRule, LintContext, classify_mismatch, is_compatible

logger = logging.getLogger(__name__)

RETURN_RE = re.compile(r"^\s*return\s+(.+?)\s*$")


class AssignmentTypeRule(BaseRule):
    """`TYPE name = expr` where the expression's type disagrees with TYPE"""

    @property
    def rule_id(self) -> str:
        return "assignment-types"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    def check(self, context: LintContext) -> list[Diagnostic]:
        issues = []
        declaration_re = re.compile(rf"^\s*({context.patterns.types})\s+(\w+)\s*=(?!=)\s*(.+)$")

        for i, code in enumerate(context.code_lines):
            match = declaration_re.match(code)
            if not match:
                continue
            declared = match.group(1)
            value = match.group(3).strip()
            if declared == "any" or not value:
                continue

            func = enclosing_function(context.symbols, context.lines, i)
            visible = symbol_context(context.symbols, func, before_line=i)
            inferred = infer_return_type(value, visible)

            verdict = classify_mismatch(declared, inferred)
            if verdict is None:
                continue

            start = code.find(value, match.start(3))
            if verdict == IMPLICIT_CAST:
                issues.append(
                    self._create_issue(
                        line=i,
                        message="Implicit conversion from 'float' to 'int' (value will be truncated)",
                        code=IMPLICIT_CAST,
                        start=start,
                        end=start + len(value),
                        severity=Severity.WARNING,
                    )
                )
            else:
                issues.append(
                    self._create_issue(
                        line=i,
                        message=f"Type mismatch: cannot assign '{inferred}' to variable of type '{declared}'",
                        code=verdict,
                        start=start,
                        end=start + len(value),
                    )
                )
        return issues


class ReturnTypeRule(BaseRule):
    """Return statements of typed functions, and typed functions that never return"""

    @property
    def rule_id(self) -> str:
        return "return-types"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    def check(self, context: LintContext) -> list[Diagnostic]:
        issues = []
        for func in context.functions:
            if func.return_type in ("void", "any"):
                continue

            body = context.body(func)
            if body is None:
                logger.debug("skipping '%s': block never closes", func.name)
                continue

            visible = symbol_context(context.symbols, func)
            has_return = False

            for line, segment, offset in _body_segments(context.code_lines, *body):
                match = RETURN_RE.match(segment)
                if not match:
                    continue
                has_return = True

                value = match.group(1)
                inferred = infer_return_type(value, visible)
                # Returns are exact: no widening from int to float either
                if is_compatible(func.return_type, inferred):
                    continue

                start = offset + match.start(1)
                issues.append(
                    self._create_issue(
                        line=line,
                        message=(
                            f"Return type mismatch in function '{func.name}': "
                            f"expected '{func.return_type}', but got '{inferred}'"
                        ),
                        code="return-type-mismatch",
                        start=start,
                        end=start + len(value),
                    )
                )

            if not has_return:
                header = context.lines[func.line]
                start = header.find(func.name)
                issues.append(
                    self._create_issue(
                        line=func.line,
                        message=f"Function '{func.name}' with return type '{func.return_type}' must return a value",
                        code="missing-return",
                        start=start,
                        end=start + len(func.name),
                        severity=Severity.WARNING,
                    )
                )
        return issues


def _body_segments(code_lines: list[str], start: int, end: int):
    """Yield (line, text, column offset) for the code inside a function's braces."""
    for i in range(start, end + 1):
        text = code_lines[i]
        offset = 0
        if i == start:
            brace = text.find("{")
            if brace == -1:
                continue
            offset = brace + 1
            text = text[offset:]
        if i == end:
            close = text.rfind("}")
            if close != -1:
                text = text[:close]
        yield i, text, offset
