"""Rules against hard-coded waits and slow load strategies."""

from e2e_tree_sitter import ASTWalker, PlaywrightPatterns
from e2e_tree_sitter.node_types import CALL_EXPRESSION, NEW_EXPRESSION, PAIR, PROPERTY_IDENTIFIER, STRING
from tree_sitter import Node

from ..models import Diagnostic, Severity
from .base import BaseRule, RuleContext

SLOW_WAIT_UNTIL_VALUES = frozenset({"load", "networkidle"})


class NoWaitForTimeoutRule(BaseRule):
    """Flags any `<receiver>.waitForTimeout(...)`.

    Only the method name is checked, so `page.` and `locator.` variants are
    both caught without knowing what the receiver is.
    """

    @property
    def name(self) -> str:
        return "no-wait-for-timeout"

    @property
    def node_kinds(self) -> frozenset[str]:
        return frozenset({CALL_EXPRESSION})

    @property
    def default_severity(self) -> Severity:
        return Severity.ERROR

    @property
    def messages(self) -> dict[str, str]:
        return {
            "noWaitForTimeout": (
                "Avoid waitForTimeout(). Use actionable waits like waitForSelector(), "
                "waitForResponse(), or expect().toBeVisible() instead."
            )
        }

    @property
    def description(self) -> str:
        return "Disallow waitForTimeout(). Use actionable waits instead."

    def check(self, node: Node, context: RuleContext) -> Diagnostic | None:
        call = PlaywrightPatterns.member_call(node)
        if call and call[1] == "waitForTimeout":
            return self._report(node, context, "noWaitForTimeout")
        return None


class NoSetTimeoutInPromiseRule(BaseRule):
    @property
    def name(self) -> str:
        return "no-set-timeout-in-promise"

    @property
    def node_kinds(self) -> frozenset[str]:
        return frozenset({NEW_EXPRESSION})

    @property
    def default_severity(self) -> Severity:
        return Severity.ERROR

    @property
    def messages(self) -> dict[str, str]:
        return {
            "noSetTimeoutInPromise": (
                "Avoid new Promise(r => setTimeout(r, N)). Use actionable waits like waitForSelector(), "
                "waitForResponse(), or expect().toBeVisible() instead."
            )
        }

    @property
    def description(self) -> str:
        return "Disallow new Promise(r => setTimeout(r, N)) hard-coded waits."

    def check(self, node: Node, context: RuleContext) -> Diagnostic | None:
        if not PlaywrightPatterns.is_identifier(node.child_by_field_name("constructor"), "Promise"):
            return None

        args = PlaywrightPatterns.call_arguments(node)
        if not args:
            return None

        callback = ASTWalker.unwrap_parens(args[0])
        if not PlaywrightPatterns.is_function_like(callback):
            return None

        expr = PlaywrightPatterns.single_expression_body(callback)
        if expr is None or expr.type != CALL_EXPRESSION:
            return None
        if not PlaywrightPatterns.is_identifier(expr.child_by_field_name("function"), "setTimeout"):
            return None

        return self._report(node, context, "noSetTimeoutInPromise")


class NoWaitUntilSlowRule(BaseRule):
    @property
    def name(self) -> str:
        return "no-wait-until-slow"

    @property
    def node_kinds(self) -> frozenset[str]:
        return frozenset({PAIR})

    @property
    def default_severity(self) -> Severity:
        return Severity.ERROR

    @property
    def messages(self) -> dict[str, str]:
        return {
            "noSlowWaitUntil": (
                "Avoid waitUntil: '{{value}}'. Use 'domcontentloaded' or 'commit' with actionable waits instead."
            )
        }

    @property
    def description(self) -> str:
        return "Disallow waitUntil: 'load' and waitUntil: 'networkidle'."

    def check(self, node: Node, context: RuleContext) -> Diagnostic | None:
        key = node.child_by_field_name("key")
        # Quoted and computed keys are not plain identifiers
        if key is None or key.type != PROPERTY_IDENTIFIER or context.get_text(key) != "waitUntil":
            return None

        value = PlaywrightPatterns.string_value(ASTWalker.unwrap_parens(node.child_by_field_name("value")))
        if value not in SLOW_WAIT_UNTIL_VALUES:
            return None

        return self._report(node, context, "noSlowWaitUntil", value=value)


class NoNetworkidleRule(BaseRule):
    """Flags the string 'networkidle' wherever it appears."""

    @property
    def name(self) -> str:
        return "no-networkidle"

    @property
    def node_kinds(self) -> frozenset[str]:
        return frozenset({STRING})

    @property
    def default_severity(self) -> Severity:
        return Severity.ERROR

    @property
    def messages(self) -> dict[str, str]:
        return {
            "noNetworkidle": (
                "Avoid 'networkidle'. It waits for 500ms of no network activity, making tests slow and flaky. "
                "Use 'domcontentloaded' or 'commit' with actionable waits instead."
            )
        }

    @property
    def description(self) -> str:
        return "Disallow the 'networkidle' string."

    def check(self, node: Node, context: RuleContext) -> Diagnostic | None:
        if PlaywrightPatterns.string_value(node) == "networkidle":
            return self._report(node, context, "noNetworkidle")
        return None
