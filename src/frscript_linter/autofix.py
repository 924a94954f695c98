import re
from collections.abc import Callable

from frscript_symbol_db.lexical import split_lines, split_top_level, strip_comment

from .models import AutoFixAction, Diagnostic

UNTYPED_HEADER_RE = re.compile(r"^(\w+)(\s*\()")


class AutoFixEngine:
    """Automatically fix linting issues using registered fixers"""

    def __init__(self):
        self._fixers: dict[str, Callable[[list[str], list[Diagnostic]], list[AutoFixAction]]] = {
            "no-semicolons": self._fix_semicolons,
            "missing-return-type": self._fix_missing_return_type,
        }

    def can_fix(self, code: str | None) -> bool:
        return code in self._fixers

    def apply_fixes(self, content: str, issues: list[Diagnostic]) -> str:
        """Apply the fixer for the first issue's code to every issue with that code.

        One kind of fix per call; callers re-lint before the next pass.
        """
        if not issues or not self.can_fix(issues[0].code):
            return content

        code = issues[0].code
        targets = [i for i in issues if i.code == code]
        lines = split_lines(content)
        actions = self._fixers[code](lines, targets)
        return "\n".join(self._apply_actions(lines, actions))

    def _apply_actions(self, lines: list[str], actions: list[AutoFixAction]) -> list[str]:
        # Bottom-up so earlier line numbers stay valid
        for action in sorted(actions, key=lambda a: a.line_number, reverse=True):
            idx = action.line_number
            if idx >= len(lines):
                continue
            if action.action_type == "replace":
                lines[idx : idx + 1] = action.new_text.split("\n")
        return lines

    def _fix_semicolons(self, lines: list[str], issues: list[Diagnostic]) -> list[AutoFixAction]:
        actions = []
        for line_number in sorted({i.line for i in issues}):
            if line_number >= len(lines):
                continue
            old = lines[line_number]
            new = _drop_semicolons(old)
            if new != old:
                actions.append(AutoFixAction("replace", line_number, old_text=old, new_text=new))
        return actions

    def _fix_missing_return_type(self, lines: list[str], issues: list[Diagnostic]) -> list[AutoFixAction]:
        actions = []
        for issue in issues:
            if issue.line >= len(lines):
                continue
            old = lines[issue.line]
            new = UNTYPED_HEADER_RE.sub(r"void \1\2", old, count=1)
            if new != old:
                actions.append(AutoFixAction("replace", issue.line, old_text=old, new_text=new))
        return actions


def _drop_semicolons(line: str) -> str:
    """Remove code semicolons; statements they separated go on their own lines."""
    code = strip_comment(line)
    comment = line[len(code):]
    indent = code[: len(code) - len(code.lstrip())]

    statements = [s.strip() for s in split_top_level(code, ";", brackets=False)]
    statements = [s for s in statements if s]
    if not statements:
        return (indent + comment).rstrip() if comment else ""

    fixed = "\n".join(indent + s for s in statements)
    if comment:
        fixed += " " + comment
    return fixed
