import re

DOC_PREFIX_RE = re.compile(r"^\s*///")
DOC_LINE_RE = re.compile(r"^\s*///\s*(.+)$")


def parse_docstrings(lines: list[str], docs: dict[int, str] | None = None) -> dict[int, str]:
    """Map each documented line to the text of the `///` block above it.

    A block attaches to the first line after it that is not a `///` line.
    Blocks that end the document have no target and are dropped.

    Passing the mapping from an earlier scan re-scans into it: a line that
    already has text keeps it, with the new block appended after a blank line.
    """
    if docs is None:
        docs = {}
    pending: list[str] = []
    in_block = False

    for i, text in enumerate(lines):
        if DOC_PREFIX_RE.match(text):
            in_block = True
            match = DOC_LINE_RE.match(text)
            if match:
                pending.append(match.group(1).strip())
            continue

        if in_block and pending:
            _attach(docs, i, "\n".join(pending))
        pending = []
        in_block = False

    return docs


def _attach(docs: dict[int, str], target: int, text: str) -> None:
    existing = docs.get(target)
    docs[target] = f"{existing}\n\n{text}" if existing else text
