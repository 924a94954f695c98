import logging
from pathlib import Path

from .docstrings import parse_docstrings
from .language import collect_struct_names
from .lexical import split_lines
from .models import (
    FunctionDefinition,
    StructDefinition,
    SymbolInfo,
    SymbolKind,
    VariableDeclaration,
)
from .recognizers import (
    FunctionDecl,
    LinePatterns,
    StructDecl,
    VarDecl,
    compile_patterns,
    parse_inline_fields,
    parse_parameters,
    parse_struct_fields,
    recognize_line,
)

logger = logging.getLogger(__name__)


class SymbolExtractor:
    """Extracts functions, structs and variables from Frscript source text"""

    def extract_all(self, source: str) -> list[SymbolInfo]:
        """Full extraction of symbols, in source-line order"""
        lines = split_lines(source)
        struct_names = tuple(collect_struct_names(lines))
        patterns = compile_patterns(struct_names)
        docstrings = parse_docstrings(lines)

        symbols: list[SymbolInfo] = []
        for i, text in enumerate(lines):
            decl = recognize_line(text, patterns)
            symbol = self._build_symbol(decl, i, lines, patterns)
            if symbol is None:
                continue
            symbol.documentation = docstrings.get(i)
            symbols.append(symbol)

        logger.debug(
            "extracted %d symbols (%d structs) from %d lines",
            len(symbols),
            len(struct_names),
            len(lines),
        )
        return symbols

    def extract_file(self, file_path: Path) -> list[SymbolInfo]:
        return self.extract_all(file_path.read_text(encoding="utf-8"))

    def _build_symbol(
        self, decl, line: int, lines: list[str], patterns: LinePatterns
    ) -> SymbolInfo | None:
        if isinstance(decl, FunctionDecl):
            return FunctionDefinition(
                name=decl.name,
                kind=SymbolKind.FUNCTION,
                line=line,
                return_type=decl.return_type,
                parameters=parse_parameters(decl.params_text, patterns),
            )

        if isinstance(decl, StructDecl):
            if decl.inline_body is not None:
                fields = parse_inline_fields(decl.inline_body, patterns)
            else:
                fields = parse_struct_fields(lines, line, patterns)
            return StructDefinition(
                name=decl.name,
                kind=SymbolKind.STRUCT,
                line=line,
                fields=fields,
            )

        if isinstance(decl, VarDecl):
            return VariableDeclaration(
                name=decl.name,
                kind=SymbolKind.VARIABLE,
                line=line,
                var_type=decl.var_type,
            )

        return None


def get_symbols(source: str) -> list[SymbolInfo]:
    return SymbolExtractor().extract_all(source)
