import re
from typing import NamedTuple

from frscript_symbol_db.inference import find_function, find_struct, infer_type
from frscript_symbol_db.language import KEYWORDS
from frscript_symbol_db.lexical import is_inside_string, matching_paren, split_top_level

from ..models import Diagnostic, Severity
from .base import IMPLICIT_CAST, BaseRule, LintContext, classify_mismatch

CALL_HEAD_RE = re.compile(r"(\w+)\s*\(")
ARITY_MISMATCH = "arity-mismatch"


class _Call(NamedTuple):
    code: str
    start: int
    end: int
    args_start: int


def split_arguments(args_text: str) -> list[str]:
    if not args_text.strip():
        return []
    return [a.strip() for a in split_top_level(args_text)]


class CallSiteRule(BaseRule):
    """Arity and literal argument types at every call and struct construction.

    Structs are looked up before functions: both are written `Name(args)`.
    Argument types use literal inference only, so nested expressions that
    cannot be resolved never produce a finding.
    """

    @property
    def rule_id(self) -> str:
        return "call-sites"

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    def check(self, context: LintContext) -> list[Diagnostic]:
        issues = []
        definition_re = re.compile(
            rf"^\s*({context.patterns.types}|[A-Z][a-zA-Z0-9_]*)\s+\w+\s*\([^)]*\)\s*(\{{|$)"
        )

        for i, code in enumerate(context.code_lines):
            if definition_re.match(code):
                continue

            # Nested calls are matched too: finditer resumes inside the argument list
            for match in CALL_HEAD_RE.finditer(code):
                name = match.group(1)
                if name in KEYWORDS or is_inside_string(code, match.start()):
                    continue
                close = matching_paren(code, match.end() - 1)
                if close == -1:
                    continue

                call = _Call(code, match.start(), close + 1, match.end())
                args = split_arguments(code[match.end() : close])
                struct = find_struct(context.structs, name)
                if struct is not None:
                    issues.extend(self._check_struct(i, call, struct, args))
                    continue

                func = find_function(context.functions, name)
                if func is not None:
                    issues.extend(self._check_function(i, call, func, args))

        return issues

    def _check_struct(self, line, call, struct, args) -> list[Diagnostic]:
        name = struct.name
        if len(args) != len(struct.fields):
            return [
                self._create_issue(
                    line=line,
                    message=f"Struct '{name}' expects {len(struct.fields)} field(s), but got {len(args)}",
                    code=ARITY_MISMATCH,
                    start=call.start,
                    end=call.end,
                )
            ]

        issues = []
        for arg, fld in zip(args, struct.fields):
            inferred = infer_type(arg)
            verdict = classify_mismatch(fld.type, inferred)
            if verdict is None:
                continue
            if verdict == IMPLICIT_CAST:
                message = f"Implicit conversion from 'float' to 'int' in struct '{name}' field '{fld.name}'"
            else:
                message = (
                    f"Type mismatch in struct '{name}': field '{fld.name}' "
                    f"expects '{fld.type}', but got '{inferred}'"
                )
            issues.append(self._argument_issue(line, call, arg, message, verdict))
        return issues

    def _check_function(self, line, call, func, args) -> list[Diagnostic]:
        name = func.name
        if not func.is_variadic and len(args) != len(func.parameters):
            return [
                self._create_issue(
                    line=line,
                    message=f"Function '{name}' expects {len(func.parameters)} argument(s), but got {len(args)}",
                    code=ARITY_MISMATCH,
                    start=call.start,
                    end=call.end,
                )
            ]

        issues = []
        for arg, param in zip(args, func.parameters):
            if param.is_variadic:
                break
            inferred = infer_type(arg)
            verdict = classify_mismatch(param.type, inferred)
            if verdict is None:
                continue
            if verdict == IMPLICIT_CAST:
                message = f"Implicit conversion from 'float' to 'int' in function '{name}' parameter '{param.name}'"
            else:
                message = f"Type mismatch: expected '{param.type}', but got '{inferred}'"
            issues.append(self._argument_issue(line, call, arg, message, verdict))
        return issues

    def _argument_issue(self, line, call, arg, message, verdict) -> Diagnostic:
        start = call.code.find(arg, call.args_start)
        return self._create_issue(
            line=line,
            message=message,
            code=verdict,
            start=start,
            end=start + len(arg),
            severity=Severity.WARNING if verdict == IMPLICIT_CAST else Severity.ERROR,
        )
