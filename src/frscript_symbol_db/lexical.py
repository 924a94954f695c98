"""
Lexical helpers for line-oriented Frscript scanning.

Everything here works on single lines of text. Strings may be plain
(``"..."`` / ``'...'``), byte strings (``b"..."``) or f-strings
(``f"..."``) whose ``{...}`` interpolation blocks hold live code.
Comments are ``//`` to end of line; there are no block comments.
"""

import re

IDENTIFIER_RE = re.compile(r"^[A-Za-z_]\w*$")
INT_LITERAL_RE = re.compile(r"^-?\d+$")
FLOAT_LITERAL_RE = re.compile(r"^-?\d+\.\d+$")

# Per-character roles produced by _scan
CODE = "code"
STRING = "string"
INTERPOLATION = "interpolation"

_QUOTES = ('"', "'")


def _starts_fstring(text: str, quote_index: int) -> bool:
    if quote_index == 0 or text[quote_index - 1] != "f":
        return False
    if quote_index >= 2:
        before = text[quote_index - 2]
        if before.isalnum() or before == "_":
            return False
    return True


def _scan(text: str) -> tuple[list[str], bool]:
    """Classify every character of ``text``.

    Returns the role of each character and whether the scan ended inside
    string content (outside any interpolation block).
    """
    roles: list[str] = []
    in_string = False
    quote = ""
    fstring = False
    depth = 0
    escaped = False

    for i, ch in enumerate(text):
        if in_string and depth == 0:
            roles.append(STRING)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                in_string = False
                fstring = False
            elif fstring and ch == "{":
                depth = 1
            continue

        if in_string:
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    roles.append(STRING)
                    continue
            roles.append(INTERPOLATION)
            continue

        if ch in _QUOTES:
            in_string = True
            quote = ch
            fstring = _starts_fstring(text, i)
            if fstring:
                roles[-1] = STRING
            roles.append(STRING)
            continue

        roles.append(CODE)

    return roles, in_string and depth == 0


def is_inside_string(line: str, column: int) -> bool:
    """True when ``column`` falls inside string content.

    Interpolation blocks of an f-string are code, so a column inside
    ``{...}`` is not inside the string.
    """
    _, inside = _scan(line[:column])
    return inside


def _comment_start(line: str) -> int | None:
    roles, _ = _scan(line)
    for i in range(len(line) - 1):
        if line[i] == "/" and line[i + 1] == "/" and roles[i] == CODE and roles[i + 1] == CODE:
            return i
    return None


def is_inside_comment(line: str, column: int) -> bool:
    start = _comment_start(line)
    return start is not None and start < column


def strip_comment(line: str) -> str:
    """Drop a trailing ``//`` comment that is not part of a string."""
    start = _comment_start(line)
    return line if start is None else line[:start]


def strip_strings(line: str, placeholder: str = "") -> str:
    """Remove string bodies, keeping the code inside f-string interpolations.

    Each run of string characters becomes ``placeholder``.
    """
    roles, _ = _scan(line)
    out = []
    previous = CODE
    for ch, role in zip(line, roles):
        if role != STRING:
            out.append(ch)
        elif previous != STRING:
            out.append(placeholder)
        previous = role
    return "".join(out)


def code_text(line: str) -> str:
    """The part of a line that is live code: no comment, no string content."""
    return strip_strings(strip_comment(line))


def count_braces(line: str) -> tuple[int, int]:
    code = code_text(line)
    return code.count("{"), code.count("}")


def find_block(lines: list[str], start: int) -> tuple[int, int] | None:
    """Find the line range of the brace block opened at or after ``start``.

    Scanning stops at the ``}`` that brings the depth back to zero. Returns
    ``None`` when the document ends before the block closes.
    """
    depth = 0
    opened = False
    for i in range(start, len(lines)):
        for ch in code_text(lines[i]):
            if ch == "{":
                depth += 1
                opened = True
            elif ch == "}":
                depth -= 1
                if opened and depth == 0:
                    return start, i
    return None


def split_top_level(text: str, separator: str = ",", brackets: bool = True) -> list[str]:
    """Split on ``separator`` where it is not inside a string literal.

    With ``brackets`` the separator also has to sit outside any `()`, `[]`
    or `{}` pair, so `f(a, b), c` splits into two parts.
    """
    roles, _ = _scan(text)
    parts = []
    current = []
    depth = 0
    for ch, role in zip(text, roles):
        if role == CODE and brackets:
            if ch in "([{":
                depth += 1
            elif ch in ")]}" and depth > 0:
                depth -= 1
        if ch == separator and role == CODE and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(ch)
    parts.append("".join(current))
    return parts


def split_lines(source: str) -> list[str]:
    return source.replace("\r\n", "\n").split("\n")


def is_string_literal(text: str) -> bool:
    """True when the whole of ``text`` is a single (optionally f/b prefixed) string literal."""
    body = text[1:] if text[:1] in ("f", "b") else text
    if len(body) < 2 or body[0] not in _QUOTES or body[-1] != body[0]:
        return False
    roles, inside = _scan(body)
    return not inside and CODE not in roles


def matching_paren(text: str, open_index: int) -> int:
    """Index of the `)` closing the `(` at ``open_index``, ignoring string content; -1 if unclosed."""
    roles, _ = _scan(text)
    depth = 0
    for i in range(open_index, len(text)):
        if roles[i] != CODE:
            continue
        if text[i] == "(":
            depth += 1
        elif text[i] == ")":
            depth -= 1
            if depth == 0:
                return i
    return -1
