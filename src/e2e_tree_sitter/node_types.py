from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from tree_sitter import Tree

# Node kinds produced by tree-sitter-typescript that the rules subscribe to
PROGRAM = "program"
CALL_EXPRESSION = "call_expression"
NEW_EXPRESSION = "new_expression"
MEMBER_EXPRESSION = "member_expression"
AWAIT_EXPRESSION = "await_expression"
PARENTHESIZED_EXPRESSION = "parenthesized_expression"
ARROW_FUNCTION = "arrow_function"
# "function" on grammars older than 0.21
FUNCTION_EXPRESSIONS = frozenset({"function_expression", "function"})
IF_STATEMENT = "if_statement"
STATEMENT_BLOCK = "statement_block"
EXPRESSION_STATEMENT = "expression_statement"
PAIR = "pair"
STRING = "string"
TEMPLATE_STRING = "template_string"
NUMBER = "number"
IDENTIFIER = "identifier"
PROPERTY_IDENTIFIER = "property_identifier"
COMMENT = "comment"
ERROR = "ERROR"


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""
    tree: Tree
    source: str
    file_path: Optional[Path] = None
    errors: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
