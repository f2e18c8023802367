from pathlib import Path

from e2e_linter.models import Diagnostic

from .models import LintIssue, LintReport


def diagnostic_to_lint_issue(diagnostic: Diagnostic, file_path: Path | str) -> LintIssue:
    """Convert an internal diagnostic to an external Pydantic issue"""
    return LintIssue(
        severity=diagnostic.severity.value.upper(),  # internal uses 'error', external 'ERROR'
        file_path=str(file_path),
        line_number=diagnostic.line,
        column=diagnostic.column,
        rule_id=diagnostic.rule_name,
        message=diagnostic.message,
    )


def build_report(issues: list[LintIssue], files_checked: int) -> LintReport:
    return LintReport(
        issues=issues,
        files_checked=files_checked,
        error_count=sum(1 for i in issues if i.severity == "ERROR"),
        warning_count=sum(1 for i in issues if i.severity == "WARNING"),
    )
