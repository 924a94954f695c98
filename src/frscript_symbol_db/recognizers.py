"""
Line recognizers.

Each recognizer looks at one source line and reports what it declares as a
tagged variant. Swapping these for a real tokenizer only touches this module.
"""

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Union

from .language import STRUCT_END_RE, STRUCT_HEADER_RE, type_pattern
from .models import Parameter, StructField


@dataclass(frozen=True)
class FunctionDecl:
    return_type: str
    name: str
    params_text: str


@dataclass(frozen=True)
class StructDecl:
    name: str
    inline_body: str | None = None  # text between braces for one-line structs


@dataclass(frozen=True)
class VarDecl:
    var_type: str
    name: str


@dataclass(frozen=True)
class Unrecognized:
    pass


Declaration = Union[FunctionDecl, StructDecl, VarDecl, Unrecognized]


@dataclass(frozen=True)
class LinePatterns:
    """Compiled declaration patterns for one set of known struct names"""

    types: str
    function: re.Pattern = field(repr=False)
    variable: re.Pattern = field(repr=False)
    field_decl: re.Pattern = field(repr=False)
    typed_param: re.Pattern = field(repr=False)
    args_param: re.Pattern = field(repr=False)
    kwargs_param: re.Pattern = field(repr=False)
    inline_field: re.Pattern = field(repr=False)


UNTYPED_PARAM_RE = re.compile(r"^(\w+)$")


@lru_cache(maxsize=64)
def compile_patterns(struct_names: tuple[str, ...] = ()) -> LinePatterns:
    types = type_pattern(struct_names)
    return LinePatterns(
        types=types,
        function=re.compile(rf"^\s*({types})\s+(\w+)\s*\(([^)]*)\)"),
        variable=re.compile(rf"^\s*({types})\s+(\w+)\s*="),
        field_decl=re.compile(rf"^\s*({types})\s+(\w+)\s*"),
        typed_param=re.compile(rf"^({types})\s+(\w+)$"),
        args_param=re.compile(rf"^({types})\s+\*(\w+)$"),
        kwargs_param=re.compile(rf"^({types})\s+\*\*(\w+)$"),
        inline_field=re.compile(rf"\b({types})\s+(\w+)\b"),
    )


def recognize_function(text: str, patterns: LinePatterns) -> FunctionDecl | None:
    match = patterns.function.match(text)
    if not match:
        return None
    return FunctionDecl(return_type=match.group(1), name=match.group(2), params_text=match.group(3))


def recognize_struct(text: str) -> StructDecl | None:
    match = STRUCT_HEADER_RE.match(text)
    if not match:
        return None
    rest = text[match.end():]
    close = rest.find("}")
    inline_body = rest[:close] if close != -1 else None
    return StructDecl(name=match.group(1), inline_body=inline_body)


def recognize_variable(text: str, patterns: LinePatterns) -> VarDecl | None:
    match = patterns.variable.match(text)
    if not match:
        return None
    return VarDecl(var_type=match.group(1), name=match.group(2))


def recognize_line(text: str, patterns: LinePatterns) -> Declaration:
    """Function, then struct, then variable; the first recognizer that matches wins."""
    return (
        recognize_function(text, patterns)
        or recognize_struct(text)
        or recognize_variable(text, patterns)
        or Unrecognized()
    )


def parse_parameters(params_text: str, patterns: LinePatterns) -> list[Parameter]:
    """Split a parameter list on commas and classify every entry.

    Nested parentheses are not understood: a default value that contains a
    comma-separated call splits into bogus entries, which are dropped.
    """
    params: list[Parameter] = []
    if not params_text.strip():
        return params

    for raw in params_text.split(","):
        entry = raw.split("=", 1)[0].strip()
        if not entry:
            continue

        match = patterns.kwargs_param.match(entry)
        if match:
            params.append(Parameter(name=match.group(2), type=match.group(1) + "**"))
            continue

        match = patterns.args_param.match(entry)
        if match:
            params.append(Parameter(name=match.group(2), type=match.group(1) + "*"))
            continue

        match = patterns.typed_param.match(entry)
        if match:
            params.append(Parameter(name=match.group(2), type=match.group(1)))
            continue

        match = UNTYPED_PARAM_RE.match(entry)
        if match:
            params.append(Parameter(name=match.group(1), type="any"))

    return params


def parse_struct_fields(lines: list[str], header_line: int, patterns: LinePatterns) -> list[StructField]:
    """Read `TYPE name` fields after a struct header up to the first `}` line."""
    fields: list[StructField] = []
    for text in lines[header_line + 1:]:
        if STRUCT_END_RE.match(text):
            break
        match = patterns.field_decl.match(text)
        if match:
            fields.append(StructField(name=match.group(2), type=match.group(1)))
    return fields


def parse_inline_fields(body: str, patterns: LinePatterns) -> list[StructField]:
    return [
        StructField(name=m.group(2), type=m.group(1))
        for m in patterns.inline_field.finditer(body)
    ]
