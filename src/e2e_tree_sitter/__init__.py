from .ast_walker import ASTWalker
from .node_types import ParseResult
from .parser import TypeScriptParser
from .playwright_patterns import PlaywrightPatterns

__all__ = ["ASTWalker", "ParseResult", "PlaywrightPatterns", "TypeScriptParser"]
