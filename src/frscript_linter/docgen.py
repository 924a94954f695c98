"""Generate `///` documentation blocks for function declarations."""

import re

from frscript_symbol_db.language import collect_struct_names
from frscript_symbol_db.lexical import split_lines
from frscript_symbol_db.models import Parameter
from frscript_symbol_db.recognizers import LinePatterns, compile_patterns, parse_parameters, recognize_function

EXAMPLE_VALUES = {
    "int": "0",
    "float": "0.0",
    "str": '"example"',
    "string": '"example"',
    "bool": "true",
    "list": "[]",
    "dict": "{}",
}


def summarize_name(name: str) -> str:
    """`getUserData` / `get_user_data` -> `Get user data`"""
    words = re.sub(r"([A-Z])", r" \1", name).replace("_", " ")
    words = " ".join(words.split()).lower()
    return words[:1].upper() + words[1:]


def example_call(name: str, params: list[Parameter]) -> str:
    args = ", ".join(EXAMPLE_VALUES.get(p.base_type, "value") for p in params)
    return f"{name}({args})"


def generate_docstring(
    line: str, include_examples: bool = True, patterns: LinePatterns | None = None
) -> str | None:
    """Build the `///` block for a declaration line, or None if it declares no function.

    The result ends with a newline and carries the declaration's indentation.
    """
    patterns = patterns or compile_patterns()
    decl = recognize_function(line, patterns)
    if decl is None:
        return None

    params = parse_parameters(decl.params_text, patterns)
    indent = line[: len(line) - len(line.lstrip())]

    block = [summarize_name(decl.name)]
    if params:
        block.append("")
        block.extend(f"@param {p.name} - Description of {p.name} ({p.type})" for p in params)
    if decl.return_type != "void":
        block.append("")
        block.append(f"@returns {decl.return_type} - Description of return value")
    if include_examples:
        block.append("")
        block.append("@example")
        block.append(example_call(decl.name, params))

    return "".join(f"{indent}/// {text}\n" if text else f"{indent}///\n" for text in block)


def generate_all_docstrings(source: str, include_examples: bool = True) -> tuple[str, int]:
    """Insert a block above every undocumented function.

    Blocks go above a function's decorators so the decorator stays on the
    line right before the declaration. Returns the new text and the number
    of blocks inserted.
    """
    lines = split_lines(source)
    patterns = compile_patterns(tuple(collect_struct_names(lines)))

    blocks: dict[int, str] = {}
    for i, text in enumerate(lines):
        top = _first_decorator(lines, i)
        if top > 0 and lines[top - 1].strip().startswith("///"):
            continue
        block = generate_docstring(text, include_examples, patterns)
        if block is not None:
            blocks[top] = block

    out = []
    for i, text in enumerate(lines):
        if i in blocks:
            out.extend(blocks[i].rstrip("\n").split("\n"))
        out.append(text)

    return "\n".join(out), len(blocks)


def _first_decorator(lines: list[str], line: int) -> int:
    """Index of the topmost `@decorator` line directly above ``line``, or ``line`` itself."""
    top = line
    while top > 0 and lines[top - 1].strip().startswith("@"):
        top -= 1
    return top
