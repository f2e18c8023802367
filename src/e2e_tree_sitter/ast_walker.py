from tree_sitter import Node
from typing import Iterator, Optional, List

from .node_types import COMMENT, PARENTHESIZED_EXPRESSION


class ASTWalker:
    """Utilities for traversing and searching the TypeScript AST"""

    @staticmethod
    def iter_preorder(node: Node) -> Iterator[Node]:
        """Yield every node of the subtree in document order (parents first).

        Uses an explicit stack so deeply nested test files do not hit the
        recursion limit.
        """
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    @staticmethod
    def get_text(node: Optional[Node], source: bytes | str | None = None) -> str:
        """Source text covered by a node.

        tree-sitter offsets are byte offsets, so a str source is encoded
        before slicing.
        """
        if node is None:
            return ""
        if source is None:
            raw = node.text or b""
        else:
            data = source.encode("utf8") if isinstance(source, str) else source
            raw = data[node.start_byte : node.end_byte]
        return raw.decode("utf8", errors="replace")

    @staticmethod
    def named_children(node: Optional[Node]) -> List[Node]:
        """Named children without comments, the way ESTree lists them."""
        if node is None:
            return []
        return [c for c in node.named_children if c.type != COMMENT]

    @staticmethod
    def first_named_child(node: Optional[Node]) -> Optional[Node]:
        children = ASTWalker.named_children(node)
        return children[0] if children else None

    @staticmethod
    def unwrap_parens(node: Optional[Node]) -> Optional[Node]:
        """Strip any number of enclosing parenthesized_expression wrappers."""
        while node is not None and node.type == PARENTHESIZED_EXPRESSION:
            node = ASTWalker.first_named_child(node)
        return node

    @staticmethod
    def find_all_by_type(node: Node, type_name: str) -> List[Node]:
        """Find all descendant nodes of a specific type"""
        return [n for n in ASTWalker.iter_preorder(node) if n.type == type_name]
