"""
Frscript symbol database - symbol extraction and type inference for Frscript

This package provides:
- Lexical helpers (string/comment awareness, brace-balanced scanning)
- Docstring extraction from `///` blocks
- Symbol extraction (functions, structs, variables)
- Expression type inference
- A caller-owned workspace index
"""

__version__ = "0.1.0"

from .extractor import SymbolExtractor, get_symbols
from .index import WorkspaceIndex
from .inference import infer_expression_type, infer_return_type, infer_type
from .models import (
    FunctionDefinition,
    Parameter,
    StructDefinition,
    StructField,
    SymbolInfo,
    SymbolKind,
    VariableDeclaration,
)

__all__ = [
    "SymbolExtractor",
    "get_symbols",
    "WorkspaceIndex",
    "infer_type",
    "infer_return_type",
    "infer_expression_type",
    "SymbolInfo",
    "SymbolKind",
    "FunctionDefinition",
    "StructDefinition",
    "VariableDeclaration",
    "Parameter",
    "StructField",
]
