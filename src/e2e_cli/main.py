import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from e2e_linter.engine import LinterEngine
from e2e_linter.exceptions import ConfigError, LintError
from e2e_linter.models import Severity
from e2e_linter.registry import RuleRegistry
from e2e_tree_sitter import ASTWalker, TypeScriptParser
from e2e_tree_sitter.node_types import ERROR

from .config import LintConfig
from .converters import build_report, diagnostic_to_lint_issue

app = typer.Typer(help="Playwright E2E Linter - Catch flaky waits and brittle selectors in test code")

logger = logging.getLogger(__name__)

CONFIG_ERROR_EXIT = 2


class OutputFormat(str, Enum):
    text = "text"
    json = "json"


class MinSeverity(str, Enum):
    warning = "warning"
    error = "error"


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def lint(
    paths: list[Path] = typer.Argument(None, help="Files or directories to lint (default: current directory)"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    severity: MinSeverity = typer.Option(MinSeverity.warning, help="Minimum severity to show"),
    output_format: OutputFormat = typer.Option(OutputFormat.text, "--format", help="Output format"),
):
    """Run linter on Playwright test files"""
    registry = RuleRegistry.with_builtin_rules()
    try:
        if config_file and not config_file.is_file():
            raise ConfigError(f"{config_file}: no such file")
        config = LintConfig(config_file) if config_file else LintConfig.discover()
        config.validate(registry)
        engine = LinterEngine(registry=registry, options=config.rules)
    except LintError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=CONFIG_ERROR_EXIT)

    files = config.collect_files(paths or [Path.cwd()])
    if not files:
        typer.echo("No files to lint", err=True)
        raise typer.Exit(code=0)

    all_issues = []
    failed_files = 0
    for file_path in files:
        try:
            diagnostics = engine.lint_file(file_path, options=config.rules_for(file_path))
        except (OSError, UnicodeDecodeError) as e:
            typer.echo(f"ERROR: {file_path}: could not read file ({e})", err=True)
            failed_files += 1
            continue
        all_issues.extend(diagnostic_to_lint_issue(d, file_path) for d in diagnostics)

    report = build_report(all_issues, files_checked=len(files))

    min_rank = Severity.parse(severity.value).rank
    shown = [i for i in report.issues if Severity.parse(i.severity.value).rank >= min_rank]

    if output_format == OutputFormat.json:
        typer.echo(report.model_copy(update={"issues": shown}).model_dump_json(indent=2))
    else:
        for issue in shown:
            typer.echo(
                f"{issue.severity.value}: {issue.file_path}:{issue.line_number}:{issue.column} "
                f"[{issue.rule_id}] {issue.message}"
            )
        typer.echo(
            f"\n{len(report.issues)} problem(s) ({report.error_count} errors, "
            f"{report.warning_count} warnings) in {report.files_checked} file(s)"
        )

    if report.error_count > 0 or failed_files:
        raise typer.Exit(code=1)


@app.command()
def rules():
    """List the built-in rules"""
    registry = RuleRegistry.with_builtin_rules()
    for rule in registry.all():
        typer.echo(f"{rule.name:<28} {rule.default_severity.value:<8} {rule.description}")


@app.command("dump-ast")
def dump_ast(file: Path = typer.Argument(..., help="File to parse")):
    """Print the syntax tree of a file (for writing new rules)"""
    result = TypeScriptParser().parse_file(file)
    _dump_tree(result.tree.root_node, result.source)


def _dump_tree(node, source: str, indent: int = 0):
    typer.echo("  " * indent + f"{node.type} [{node.start_point[0] + 1}:{node.start_point[1]}]")
    if node.type == ERROR:
        typer.echo("  " * (indent + 1) + f"ERROR TEXT: {ASTWalker.get_text(node, source)!r}")
    for child in node.named_children:
        _dump_tree(child, source, indent + 1)


if __name__ == "__main__":
    app()
