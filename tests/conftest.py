import textwrap

import pytest
from e2e_linter.engine import LinterEngine
from e2e_tree_sitter import TypeScriptParser


@pytest.fixture(scope="session")
def engine():
    return LinterEngine()


@pytest.fixture(scope="session")
def parser():
    return TypeScriptParser()


@pytest.fixture
def lint(engine):
    """Lint a snippet and keep only the diagnostics of one rule."""

    def _lint(code, rule=None, options=None):
        diagnostics = engine.lint_source(textwrap.dedent(code), options=options)
        if rule is None:
            return diagnostics
        return [d for d in diagnostics if d.rule_name == rule]

    return _lint
