from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List


class SymbolKind(str, Enum):
    FUNCTION = "function"
    STRUCT = "struct"
    VARIABLE = "variable"


@dataclass
class Parameter:
    """A function parameter; `type` keeps the `*` / `**` variadic suffix"""

    name: str
    type: str

    @property
    def is_variadic(self) -> bool:
        return self.type.endswith("*")

    @property
    def base_type(self) -> str:
        return self.type.rstrip("*")


@dataclass
class StructField:
    name: str
    type: str


@dataclass
class SymbolInfo:
    """Represents a symbol found in Frscript code"""

    name: str
    kind: SymbolKind
    line: int  # 0-based declaration line
    documentation: Optional[str] = None


@dataclass
class FunctionDefinition(SymbolInfo):
    return_type: str = "any"
    parameters: List[Parameter] = field(default_factory=list)
    end_line: Optional[int] = None  # filled in lazily by brace counting

    @property
    def is_variadic(self) -> bool:
        return any(p.is_variadic for p in self.parameters)

    @property
    def signature(self) -> str:
        params = ", ".join(_format_parameter(p) for p in self.parameters)
        return f"{self.return_type} {self.name}({params})"


@dataclass
class StructDefinition(SymbolInfo):
    fields: List[StructField] = field(default_factory=list)

    def field_type(self, name: str) -> Optional[str]:
        for f in self.fields:
            if f.name == name:
                return f.type
        return None


@dataclass
class VariableDeclaration(SymbolInfo):
    var_type: Optional[str] = None


def _format_parameter(param: Parameter) -> str:
    if param.type.endswith("**"):
        return f"{param.base_type} **{param.name}"
    if param.type.endswith("*"):
        return f"{param.base_type} *{param.name}"
    return f"{param.type} {param.name}"
