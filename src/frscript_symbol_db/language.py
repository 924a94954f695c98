"""Frscript language vocabulary shared by the recognizers and rules."""

import re
from collections.abc import Iterable

PRIMITIVE_TYPES = (
    "void",
    "int",
    "float",
    "str",
    "string",
    "bool",
    "list",
    "dict",
    "set",
    "bytes",
    "any",
    "pyobject",
    "pyobj",
    "function",
)

CONTROL_FLOW_KEYWORDS = frozenset(
    {"if", "elif", "else", "while", "for", "switch", "case", "default"}
)

KEYWORDS = frozenset(
    {
        "if",
        "elif",
        "else",
        "while",
        "for",
        "in",
        "switch",
        "case",
        "default",
        "break",
        "continue",
        "return",
        "assert",
        "const",
        "struct",
        "py_import",
        "from",
        "as",
        "try",
        "except",
        "raise",
        "goto",
        "global",
        "c_import",
        "c_link",
    }
)

# Types that never produce a mismatch in either direction
UNIVERSAL_TYPES = frozenset({"any"})

STRUCT_HEADER_RE = re.compile(r"^\s*struct\s+(\w+)\s*\{")
STRUCT_END_RE = re.compile(r"^\s*\}")


def collect_struct_names(lines: Iterable[str]) -> list[str]:
    """First pass: every `struct Name {` header, in source order."""
    names = []
    for text in lines:
        match = STRUCT_HEADER_RE.match(text)
        if match:
            names.append(match.group(1))
    return names


def type_pattern(struct_names: Iterable[str] = ()) -> str:
    """Regex alternation of every token that may appear in a type position."""
    names = list(dict.fromkeys([*PRIMITIVE_TYPES, *struct_names]))
    names.sort(key=len, reverse=True)
    return "|".join(re.escape(n) for n in names)


def is_type_name(name: str, struct_names: Iterable[str] = ()) -> bool:
    return name in PRIMITIVE_TYPES or name in set(struct_names)
