from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"


class LintIssue(BaseModel):
    severity: Severity
    file_path: str
    line_number: int
    column: int
    rule_id: str
    message: str


class LintReport(BaseModel):
    issues: List[LintIssue] = Field(default_factory=list)
    files_checked: int = 0
    error_count: int = 0
    warning_count: int = 0
