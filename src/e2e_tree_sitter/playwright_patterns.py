"""Playwright-specific AST pattern recognition."""

from tree_sitter import Node

from .ast_walker import ASTWalker
from .node_types import (
    ARROW_FUNCTION,
    CALL_EXPRESSION,
    EXPRESSION_STATEMENT,
    FUNCTION_EXPRESSIONS,
    IDENTIFIER,
    MEMBER_EXPRESSION,
    PROPERTY_IDENTIFIER,
    STATEMENT_BLOCK,
    STRING,
    TEMPLATE_STRING,
)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


class PlaywrightPatterns:
    """Recognize the call and literal shapes used by Playwright tests.

    Every helper returns None (or False) when the node does not have the
    expected shape, including when the parser left a child out.
    """

    @staticmethod
    def member_call(node: Node) -> tuple[Node, str] | None:
        """Split `receiver.method(...)` into (receiver node, method name).

        Computed access (`obj['or']`) and private names are not member calls
        in this sense.
        """
        if node.type != CALL_EXPRESSION:
            return None
        callee = ASTWalker.unwrap_parens(node.child_by_field_name("function"))
        if callee is None or callee.type != MEMBER_EXPRESSION:
            return None
        receiver = callee.child_by_field_name("object")
        prop = callee.child_by_field_name("property")
        if receiver is None or prop is None or prop.type != PROPERTY_IDENTIFIER:
            return None
        return receiver, ASTWalker.get_text(prop)

    @staticmethod
    def call_arguments(node: Node) -> list[Node]:
        """Argument expressions of a call or `new` expression."""
        return ASTWalker.named_children(node.child_by_field_name("arguments"))

    @staticmethod
    def is_identifier(node: Node | None, name: str) -> bool:
        node = ASTWalker.unwrap_parens(node)
        return node is not None and node.type == IDENTIFIER and ASTWalker.get_text(node) == name

    @staticmethod
    def is_page_receiver(node: Node | None) -> bool:
        """True for `page` and for any `<expr>.page` member access."""
        node = ASTWalker.unwrap_parens(node)
        if node is None:
            return False
        if node.type == IDENTIFIER:
            return ASTWalker.get_text(node) == "page"
        if node.type == MEMBER_EXPRESSION:
            prop = node.child_by_field_name("property")
            return prop is not None and prop.type == PROPERTY_IDENTIFIER and ASTWalker.get_text(prop) == "page"
        return False

    @staticmethod
    def string_value(node: Node | None) -> str | None:
        """Cooked value of a quoted string literal, None for anything else."""
        if node is None or node.type != STRING:
            return None
        parts = []
        for child in node.named_children:
            text = ASTWalker.get_text(child)
            if child.type == "escape_sequence":
                parts.append(PlaywrightPatterns._decode_escape(text))
            else:
                parts.append(text)
        return "".join(parts)

    @staticmethod
    def template_head(node: Node | None) -> str | None:
        """Raw text of a template string up to its first `${` substitution."""
        if node is None or node.type != TEMPLATE_STRING:
            return None
        body_start = node.start_byte + 1
        head_end = node.end_byte - 1
        for child in node.named_children:
            if child.type == "template_substitution":
                head_end = child.start_byte
                break
        raw = (node.text or b"")[: head_end - node.start_byte]
        return raw[body_start - node.start_byte :].decode("utf8", errors="replace")

    @staticmethod
    def is_function_like(node: Node | None) -> bool:
        return node is not None and (node.type == ARROW_FUNCTION or node.type in FUNCTION_EXPRESSIONS)

    @staticmethod
    def single_expression_body(func: Node) -> Node | None:
        """The expression a function evaluates when its body is that one expression.

        `r => expr` yields `expr`; `function (r) { expr; }` yields `expr`;
        anything with more (or fewer) statements yields None.
        """
        body = func.child_by_field_name("body")
        if body is None:
            return None
        if body.type != STATEMENT_BLOCK:
            return ASTWalker.unwrap_parens(body)
        statements = ASTWalker.named_children(body)
        if len(statements) != 1 or statements[0].type != EXPRESSION_STATEMENT:
            return None
        return ASTWalker.unwrap_parens(ASTWalker.first_named_child(statements[0]))

    @staticmethod
    def _decode_escape(text: str) -> str:
        body = text[1:]
        if not body:
            return ""
        if body[0] in _SIMPLE_ESCAPES and len(body) == 1:
            return _SIMPLE_ESCAPES[body[0]]
        if body[0] in "\r\n\u2028\u2029":
            return ""
        if body[0] in "xu":
            digits = body[1:].strip("{}")
            try:
                return chr(int(digits, 16))
            except ValueError:
                return body
        return body
