"""tree-sitter front end for Playwright test sources."""

import logging
from pathlib import Path

import tree_sitter_typescript as tsts
from tree_sitter import Language, Parser

from .ast_walker import ASTWalker
from .node_types import ERROR, ParseResult

logger = logging.getLogger(__name__)

TSX_SUFFIXES = {".tsx", ".jsx"}


class TypeScriptParser:
    """Parses TypeScript (and plain JavaScript) test files.

    The TSX grammar is only used for .tsx/.jsx files because it rejects the
    `<T>expr` cast syntax that plain TypeScript allows.
    """

    def __init__(self):
        self.ts_language = Language(tsts.language_typescript())
        self.tsx_language = Language(tsts.language_tsx())
        self._ts_parser = Parser(self.ts_language)
        self._tsx_parser = Parser(self.tsx_language)

    def parse_string(self, source: str, file_path: Path | None = None, tsx: bool = False) -> ParseResult:
        parser = self._tsx_parser if tsx else self._ts_parser
        tree = parser.parse(source.encode("utf8"))
        errors = self._collect_errors(tree.root_node)
        if errors:
            logger.warning("%s: %d syntax error(s), rules run on a partial tree", file_path or "<string>", len(errors))
        return ParseResult(tree=tree, source=source, file_path=file_path, errors=errors)

    def parse_file(self, file_path: Path) -> ParseResult:
        file_path = Path(file_path)
        source = file_path.read_text(encoding="utf-8")
        logger.debug("Parsing %s", file_path)
        return self.parse_string(source, file_path=file_path, tsx=file_path.suffix.lower() in TSX_SUFFIXES)

    @staticmethod
    def _collect_errors(root) -> list[str]:
        if not root.has_error:
            return []
        errors = []
        for node in ASTWalker.iter_preorder(root):
            if node.type == ERROR:
                line, col = node.start_point
                errors.append(f"{line + 1}:{col}: unexpected syntax")
            elif node.is_missing:
                line, col = node.start_point
                errors.append(f"{line + 1}:{col}: missing '{node.type}'")
        return errors
