"""Rules against brittle locator construction."""

from e2e_tree_sitter import ASTWalker, PlaywrightPatterns
from e2e_tree_sitter.node_types import CALL_EXPRESSION, NUMBER
from tree_sitter import Node

from ..models import Diagnostic, Severity
from .base import BaseRule, RuleContext

# Substrings of the receiver text that suggest a Playwright locator chain
LOCATOR_HINTS = ("locator", "getBy", "page.", "this.page.")
XPATH_PREFIXES = ("//", "xpath=")


class NoLocatorOrChainRule(BaseRule):
    """Flags `.or(...)` on receivers whose source text looks like a locator.

    No type information is available, so the receiver is matched on its
    text. Calls on unrelated objects that mention `locator` are flagged too.
    """

    @property
    def name(self) -> str:
        return "no-locator-or-chain"

    @property
    def node_kinds(self) -> frozenset[str]:
        return frozenset({CALL_EXPRESSION})

    @property
    def default_severity(self) -> Severity:
        return Severity.ERROR

    @property
    def messages(self) -> dict[str, str]:
        return {
            "noLocatorOr": (
                "Avoid .or() on locator chains. Use a single stable selector (testID, role, text) "
                "instead of combining multiple fragile selectors."
            )
        }

    @property
    def description(self) -> str:
        return "Disallow .or() on Playwright locator chains."

    def check(self, node: Node, context: RuleContext) -> Diagnostic | None:
        call = PlaywrightPatterns.member_call(node)
        if call is None:
            return None
        receiver, method = call
        if method != "or" or not PlaywrightPatterns.call_arguments(node):
            return None

        receiver_text = context.get_text(receiver)
        if any(hint in receiver_text for hint in LOCATOR_HINTS):
            return self._report(node, context, "noLocatorOr")
        return None


class NoFragileSelectorsRule(BaseRule):
    """XPath inside locator() and nth() with a literal index."""

    @property
    def name(self) -> str:
        return "no-fragile-selectors"

    @property
    def node_kinds(self) -> frozenset[str]:
        return frozenset({CALL_EXPRESSION})

    @property
    def default_severity(self) -> Severity:
        return Severity.ERROR

    @property
    def messages(self) -> dict[str, str]:
        return {
            "noXPath": "Avoid XPath selectors in locator(). Use testID, role, or text-based selectors instead.",
            "noNthLiteral": (
                "Avoid .nth({{index}}) with a literal index. "
                "Use a more specific selector (testID, role, text) instead."
            ),
        }

    @property
    def description(self) -> str:
        return "Disallow XPath selectors and .nth(N) with a literal index."

    def check(self, node: Node, context: RuleContext) -> Diagnostic | None:
        call = PlaywrightPatterns.member_call(node)
        if call is None:
            return None
        method = call[1]
        if method not in ("locator", "nth"):
            return None

        args = PlaywrightPatterns.call_arguments(node)
        if not args:
            return None
        arg = ASTWalker.unwrap_parens(args[0])

        if method == "locator":
            value = PlaywrightPatterns.string_value(arg)
            if value is not None and value.strip().startswith(XPATH_PREFIXES):
                return self._report(arg, context, "noXPath")
            head = PlaywrightPatterns.template_head(arg)
            if head is not None and head.startswith(XPATH_PREFIXES):
                return self._report(arg, context, "noXPath")
            return None

        if arg.type == NUMBER:
            index = _number_literal_value(context.get_text(arg))
            if index is not None:
                return self._report(node, context, "noNthLiteral", index=index)
        return None


def _number_literal_value(text: str) -> str | None:
    """Render a numeric literal the way JavaScript's String() would.

    BigInt literals (`2n`) are not numbers and give None.
    """
    text = text.replace("_", "")
    if text.endswith("n"):
        return None
    try:
        if text[:2].lower() in ("0x", "0o", "0b"):
            return str(int(text, 0))
        value = float(text)
    except ValueError:
        return None
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)
