from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFORMATION = "INFORMATION"
    HINT = "HINT"


class LintIssue(BaseModel):
    severity: Severity
    file_path: str
    line_number: int
    column: int
    rule_id: str
    message: str
    tags: List[str] = []
    auto_fixable: bool = False


class SymbolEntry(BaseModel):
    file_path: str
    name: str
    kind: str
    line_number: int
    type: Optional[str] = None
    signature: Optional[str] = None
    documentation: Optional[str] = None
