import logging
from pathlib import Path
from typing import List, Mapping

from e2e_tree_sitter import ASTWalker, TypeScriptParser
from e2e_tree_sitter.parser import TSX_SUFFIXES
from tree_sitter import Node, Tree

from .models import Diagnostic, RuleSetting
from .options import RuleOptions, resolve_settings
from .registry import RuleRegistry
from .reporter import DiagnosticReporter
from .rules.base import BaseRule, RuleContext, SourceText

logger = logging.getLogger(__name__)


def analyze(
    tree: Tree,
    registry: RuleRegistry,
    options: RuleOptions | None = None,
    *,
    source: str | None = None,
    file_path: Path | None = None,
    reporter: DiagnosticReporter | None = None,
) -> List[Diagnostic]:
    """Run every enabled rule over one parsed file.

    Diagnostics come back in traversal order, and in registry order for
    rules firing on the same node. Rules resolved to `off` are never called.
    """
    settings = resolve_settings(registry, options)
    text = SourceText(source if source is not None else _source_from_tree(tree))

    dispatch: dict[str, list[tuple[BaseRule, RuleContext]]] = {}
    for rule in registry.all():
        setting = settings[rule.name]
        if not setting.enabled:
            continue
        context = RuleContext(source=text, severity=setting.severity, options=setting.options, file_path=file_path)
        for kind in rule.node_kinds:
            dispatch.setdefault(kind, []).append((rule, context))

    if reporter is None:
        reporter = DiagnosticReporter()
    if dispatch:
        for node in ASTWalker.iter_preorder(tree.root_node):
            # anonymous tokens share names with node kinds (the `string` type keyword)
            if not node.is_named:
                continue
            for rule, context in dispatch.get(node.type, ()):
                diagnostic = _run_rule(rule, node, context)
                if diagnostic is not None:
                    reporter.report(diagnostic)

    diagnostics = reporter.flush()
    logger.debug("%s: %d diagnostic(s)", file_path or "<tree>", len(diagnostics))
    return diagnostics


def _source_from_tree(tree: Tree) -> str:
    # The root node starts past leading whitespace but node offsets are absolute:
    # pad the skipped bytes back in, keeping the same byte and row counts
    root = tree.root_node
    row = root.start_point[0]
    prefix = "\n" * row + " " * (root.start_byte - row)
    return prefix + (root.text or b"").decode("utf8", errors="replace")


def _run_rule(rule: BaseRule, node: Node, context: RuleContext) -> Diagnostic | None:
    # A rule tripping over an odd tree must not hide the other rules' results
    try:
        return rule.check(node, context)
    except Exception:
        line, col = node.start_point
        logger.warning(
            "Rule %s failed on %s at %s:%d:%d", rule.name, node.type, context.file_path or "<tree>", line + 1, col,
            exc_info=True,
        )
        return None


class LinterEngine:
    """Core engine for linting Playwright test files"""

    def __init__(self, registry: RuleRegistry | None = None, options: RuleOptions | None = None):
        self.parser = TypeScriptParser()
        self.registry = registry if registry is not None else RuleRegistry.with_builtin_rules()
        # Resolved once so configuration errors surface before any file is read
        self.settings: Mapping[str, RuleSetting] = resolve_settings(self.registry, options)
        self.reporter = DiagnosticReporter()

    def lint_source(
        self, source: str, file_path: Path | None = None, options: RuleOptions | None = None
    ) -> List[Diagnostic]:
        tsx = file_path is not None and Path(file_path).suffix.lower() in TSX_SUFFIXES
        result = self.parser.parse_string(source, file_path=file_path, tsx=tsx)
        return self._analyze(result.tree, result.source, file_path, options)

    def lint_file(self, file_path: Path, options: RuleOptions | None = None) -> List[Diagnostic]:
        """Run all lint checks on a file"""
        result = self.parser.parse_file(Path(file_path))
        return self._analyze(result.tree, result.source, result.file_path, options)

    def _analyze(self, tree: Tree, source: str, file_path: Path | None, options: RuleOptions | None):
        settings = resolve_settings(self.registry, options, base=self.settings)
        return analyze(tree, self.registry, settings, source=source, file_path=file_path, reporter=self.reporter)
