"""Rules about page state and visibility guards."""

from e2e_tree_sitter import ASTWalker, PlaywrightPatterns
from e2e_tree_sitter.node_types import AWAIT_EXPRESSION, CALL_EXPRESSION, IF_STATEMENT, STATEMENT_BLOCK
from tree_sitter import Node

from ..models import Diagnostic, Severity
from .base import BaseRule, RuleContext


class NoPageReloadRule(BaseRule):
    """Warns on `page.reload()` and `<expr>.page.reload()`.

    Persistence tests may reload on purpose, hence the warning default.
    """

    @property
    def name(self) -> str:
        return "no-page-reload"

    @property
    def node_kinds(self) -> frozenset[str]:
        return frozenset({CALL_EXPRESSION})

    @property
    def default_severity(self) -> Severity:
        return Severity.WARNING

    @property
    def messages(self) -> dict[str, str]:
        return {
            "noPageReload": (
                "Avoid page.reload(). Navigate directly or use UI actions instead. "
                "If testing persistence, add a comment explaining why reload is needed."
            )
        }

    @property
    def description(self) -> str:
        return "Warn against page.reload(). Navigate directly or use UI actions."

    def check(self, node: Node, context: RuleContext) -> Diagnostic | None:
        call = PlaywrightPatterns.member_call(node)
        if call is None:
            return None
        receiver, method = call
        if method == "reload" and PlaywrightPatterns.is_page_receiver(receiver):
            return self._report(node, context, "noPageReload")
        return None


class NoRedundantVisibilityRule(BaseRule):
    """Warns on `if (await x.isVisible()) { ... toBeVisible ... }`.

    The guard passes silently when the element is hidden, so the assertion
    inside it can never fail.
    """

    @property
    def name(self) -> str:
        return "no-redundant-visibility"

    @property
    def node_kinds(self) -> frozenset[str]:
        return frozenset({IF_STATEMENT})

    @property
    def default_severity(self) -> Severity:
        return Severity.WARNING

    @property
    def messages(self) -> dict[str, str]:
        return {
            "redundantVisibility": (
                "Remove the isVisible() guard. expect(x).toBeVisible() already waits and asserts. "
                "The if guard silently passes when the element is NOT visible."
            )
        }

    @property
    def description(self) -> str:
        return "Warn against guarding toBeVisible() with isVisible()."

    def check(self, node: Node, context: RuleContext) -> Diagnostic | None:
        condition = ASTWalker.unwrap_parens(node.child_by_field_name("condition"))
        if condition is None or condition.type != AWAIT_EXPRESSION:
            return None

        awaited = ASTWalker.unwrap_parens(ASTWalker.first_named_child(condition))
        if awaited is None:
            return None
        call = PlaywrightPatterns.member_call(awaited)
        if call is None or call[1] != "isVisible":
            return None

        consequence = node.child_by_field_name("consequence")
        if consequence is None:
            return None
        if consequence.type == STATEMENT_BLOCK:
            statements = ASTWalker.named_children(consequence)
        else:
            statements = [consequence]

        block_text = " ".join(context.get_text(s) for s in statements)
        if "toBeVisible" in block_text:
            return self._report(node, context, "redundantVisibility")
        return None
