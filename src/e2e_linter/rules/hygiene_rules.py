"""Rules about general test-file hygiene."""

from e2e_tree_sitter import PlaywrightPatterns
from e2e_tree_sitter.node_types import CALL_EXPRESSION, PROGRAM
from pydantic import BaseModel, ConfigDict, Field
from tree_sitter import Node

from ..models import Diagnostic, Severity
from .base import BaseRule, RuleContext

CONSOLE_METHODS = frozenset({"log", "warn", "error", "info", "debug"})
MAX_LINES_DEFAULT = 300


class NoConsoleInTestsRule(BaseRule):
    @property
    def name(self) -> str:
        return "no-console-in-tests"

    @property
    def node_kinds(self) -> frozenset[str]:
        return frozenset({CALL_EXPRESSION})

    @property
    def default_severity(self) -> Severity:
        return Severity.ERROR

    @property
    def messages(self) -> dict[str, str]:
        return {
            "noConsole": (
                "Remove console.{{method}}(). Use Playwright tracing/reporting for debugging "
                "instead of console statements in tests."
            )
        }

    @property
    def description(self) -> str:
        return "Disallow console.log/warn/error/info/debug in E2E test files."

    def check(self, node: Node, context: RuleContext) -> Diagnostic | None:
        call = PlaywrightPatterns.member_call(node)
        if call is None:
            return None
        receiver, method = call
        if method in CONSOLE_METHODS and PlaywrightPatterns.is_identifier(receiver, "console"):
            return self._report(node, context, "noConsole", method=method)
        return None


class MaxFileLinesOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # 0 means "use the default", as an unset option would
    max: int = Field(default=MAX_LINES_DEFAULT, ge=0)


class MaxFileLinesRule(BaseRule):
    """One diagnostic per file, on the program node, when it is too long."""

    options_model = MaxFileLinesOptions

    @property
    def name(self) -> str:
        return "max-file-lines"

    @property
    def node_kinds(self) -> frozenset[str]:
        return frozenset({PROGRAM})

    @property
    def default_severity(self) -> Severity:
        return Severity.WARNING

    @property
    def messages(self) -> dict[str, str]:
        return {"tooManyLines": "File has {{actual}} lines (max {{max}}). Split into smaller, focused test files."}

    @property
    def description(self) -> str:
        return "Warn when files exceed the maximum line count."

    def check(self, node: Node, context: RuleContext) -> Diagnostic | None:
        options = context.options if isinstance(context.options, MaxFileLinesOptions) else MaxFileLinesOptions()
        limit = options.max or MAX_LINES_DEFAULT
        actual = context.line_count
        if actual > limit:
            return self._report(node, context, "tooManyLines", actual=str(actual), max=str(limit))
        return None
