import json

from e2e_cli.main import app
from typer.testing import CliRunner

runner = CliRunner()

DIRTY_SPEC = """test('login', async ({ page }) => {
  await page.waitForTimeout(1000);
  console.log('logged in');
});
"""


def test_cli_lint_help():
    result = runner.invoke(app, ["lint", "--help"])
    assert result.exit_code == 0
    assert "Run linter on Playwright test files" in result.stdout


def test_cli_rules_lists_builtins():
    result = runner.invoke(app, ["rules"])
    assert result.exit_code == 0
    assert "no-wait-for-timeout" in result.stdout
    assert "max-file-lines" in result.stdout


def test_cli_lint_errors_exit_1(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    spec = tmp_path / "login.spec.ts"
    spec.write_text(DIRTY_SPEC)

    result = runner.invoke(app, ["lint", str(spec)])
    assert result.exit_code == 1
    assert f"ERROR: {spec}:2:8 [no-wait-for-timeout]" in result.stdout
    assert "[no-console-in-tests]" in result.stdout
    assert "2 problem(s) (2 errors, 0 warnings) in 1 file(s)" in result.stdout


def test_cli_lint_warnings_only_exit_0(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    spec = tmp_path / "reload.spec.ts"
    spec.write_text("await page.reload();\n")

    result = runner.invoke(app, ["lint", str(spec)])
    assert result.exit_code == 0
    assert "WARNING" in result.stdout
    assert "[no-page-reload]" in result.stdout


def test_cli_severity_filter_hides_warnings(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    spec = tmp_path / "reload.spec.ts"
    spec.write_text("await page.reload();\n")

    result = runner.invoke(app, ["lint", str(spec), "--severity", "error"])
    assert result.exit_code == 0
    assert "[no-page-reload]" not in result.stdout


def test_cli_override_disables_console_rule(tmp_path):
    config = tmp_path / ".e2e-lint.toml"
    config.write_text('[[tool.e2e-lint.overrides]]\nfiles = ["fixtures/**/*.ts"]\nrules = { "no-console-in-tests" = "off" }\n')
    fixture = tmp_path / "fixtures" / "auth.fixture.ts"
    fixture.parent.mkdir()
    fixture.write_text("console.log('setup');\n")

    result = runner.invoke(app, ["lint", str(tmp_path), "--config", str(config)])
    assert result.exit_code == 0
    assert "0 problem(s)" in result.stdout


def test_cli_unknown_rule_exit_2(tmp_path):
    config = tmp_path / ".e2e-lint.toml"
    config.write_text('[tool.e2e-lint.rules]\n"no-sleep" = "error"\n')
    spec = tmp_path / "a.spec.ts"
    spec.write_text("await page.waitForTimeout(1);\n")

    result = runner.invoke(app, ["lint", str(spec), "--config", str(config)])
    assert result.exit_code == 2
    assert "Unknown rule 'no-sleep'" in result.output
    assert "no-wait-for-timeout" not in result.output


def test_cli_json_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    spec = tmp_path / "login.spec.ts"
    spec.write_text(DIRTY_SPEC)

    result = runner.invoke(app, ["lint", str(spec), "--format", "json"])
    report = json.loads(result.stdout)
    assert report["files_checked"] == 1
    assert report["error_count"] == 2
    assert [i["rule_id"] for i in report["issues"]] == ["no-wait-for-timeout", "no-console-in-tests"]
    assert report["issues"][0]["line_number"] == 2


def test_cli_dump_ast(tmp_path):
    spec = tmp_path / "a.spec.ts"
    spec.write_text("page.reload();\n")

    result = runner.invoke(app, ["dump-ast", str(spec)])
    assert result.exit_code == 0
    assert "program" in result.stdout
    assert "call_expression" in result.stdout
