from e2e_linter.models import Severity


# no-console-in-tests

def test_console_methods_are_flagged(lint):
    code = """
console.log('a');
console.warn('a');
console.error('a');
console.info('a');
console.debug('a');
"""
    issues = lint(code, "no-console-in-tests")
    assert [i.message_data["method"] for i in issues] == ["log", "warn", "error", "info", "debug"]
    assert "console.log()" in issues[0].message


def test_console_other_methods_and_receivers_ignored(lint):
    code = """
console.trace('a');
console.table(rows);
customConsole.log('a');
logger.console.log('a');
"""
    assert lint(code, "no-console-in-tests") == []


# max-file-lines

def test_max_file_lines_boundary(lint):
    at_limit = "\n".join(["const a = 1;"] * 300)
    over_limit = "\n".join(["const a = 1;"] * 301)

    assert lint(at_limit, "max-file-lines") == []

    issues = lint(over_limit, "max-file-lines")
    assert len(issues) == 1
    assert issues[0].message_data == {"actual": "301", "max": "300"}
    assert issues[0].node.type == "program"
    assert issues[0].severity == Severity.WARNING


def test_max_file_lines_custom_max(lint):
    code = "\n".join(["const a = 1;"] * 6)
    issues = lint(code, "max-file-lines", options={"max-file-lines": ["warn", {"max": 5}]})
    assert len(issues) == 1
    assert issues[0].message == "File has 6 lines (max 5). Split into smaller, focused test files."


def test_max_file_lines_counts_trailing_newline_as_line(lint):
    code = "const a = 1;\n" * 5
    options = {"max-file-lines": ["warn", {"max": 5}]}
    assert len(lint(code, "max-file-lines", options=options)) == 1


def test_max_file_lines_zero_falls_back_to_default(lint):
    code = "\n".join(["const a = 1;"] * 10)
    assert lint(code, "max-file-lines", options={"max-file-lines": ["warn", {"max": 0}]}) == []


# no-wait-for-timeout

def test_wait_for_timeout_any_receiver(lint):
    code = """
await page.waitForTimeout(1000);
await locator.waitForTimeout(500);
await this.page.waitForTimeout(100);
"""
    issues = lint(code, "no-wait-for-timeout")
    assert [i.line for i in issues] == [2, 3, 4]


def test_wait_for_selector_not_flagged(lint):
    code = "await page.waitForSelector('[data-testid=\"loaded\"]');"
    assert lint(code, "no-wait-for-timeout") == []


def test_bare_wait_for_timeout_function_not_flagged(lint):
    assert lint("waitForTimeout(1000);", "no-wait-for-timeout") == []


# no-locator-or-chain

def test_locator_or_chain_flagged(lint):
    code = """
page.locator('.a').or(page.locator('.b'));
page.getByRole('button').or(page.getByText('Save'));
this.page.getByTestId('x').or(other);
"""
    assert len(lint(code, "no-locator-or-chain")) == 3


def test_or_on_unrelated_receiver_not_flagged(lint):
    code = """
arrayOfThings.or(x);
page.locator('.a').or();
"""
    assert lint(code, "no-locator-or-chain") == []


# no-page-reload

def test_page_reload_flagged(lint):
    code = """
await page.reload();
await this.page.reload();
await fixtures.page.reload({ waitUntil: 'domcontentloaded' });
"""
    issues = lint(code, "no-page-reload")
    assert len(issues) == 3
    assert all(i.severity == Severity.WARNING for i in issues)


def test_other_reload_not_flagged(lint):
    code = """
window.location.reload();
await store.reload();
await pages[0].reload();
"""
    assert lint(code, "no-page-reload") == []


# no-redundant-visibility

def test_visibility_guard_around_assertion_flagged(lint):
    code = """
if (await banner.isVisible()) {
  await expect(banner).toBeVisible();
}
if (await page.getByText('Hi').isVisible()) await expect(page.getByText('Hi')).toBeVisible();
"""
    issues = lint(code, "no-redundant-visibility")
    assert [i.line for i in issues] == [2, 5]


def test_visibility_guard_without_assertion_not_flagged(lint):
    code = """
if (await banner.isVisible()) {
  await banner.click();
} else {
  await expect(banner).toBeVisible();
}
if (banner.isVisible()) {
  await expect(banner).toBeVisible();
}
if (await banner.isEnabled()) {
  await expect(banner).toBeVisible();
}
"""
    assert lint(code, "no-redundant-visibility") == []


# no-set-timeout-in-promise

def test_set_timeout_promise_flagged(lint):
    code = """
await new Promise(resolve => setTimeout(resolve, 2000));
await new Promise(function(r){ setTimeout(r, 500) });
await new Promise<void>((r) => setTimeout(r, 100));
await new Promise((r) => { setTimeout(r, 100); });
"""
    issues = lint(code, "no-set-timeout-in-promise")
    assert [i.line for i in issues] == [2, 3, 4, 5]


def test_promise_without_bare_set_timeout_not_flagged(lint):
    code = """
await new Promise((resolve, reject) => fetch(url).then(resolve));
await new Promise((r) => { log(); setTimeout(r, 100); });
await new Promise(executor);
await new Deferred(r => setTimeout(r, 100));
"""
    assert lint(code, "no-set-timeout-in-promise") == []


# no-wait-until-slow

def test_slow_wait_until_values_flagged(lint):
    code = """
await page.goto(url, { waitUntil: 'load' });
await page.goto(url, { waitUntil: 'networkidle' });
"""
    issues = lint(code, "no-wait-until-slow")
    assert [i.message_data["value"] for i in issues] == ["load", "networkidle"]
    assert issues[0].message.startswith("Avoid waitUntil: 'load'.")


def test_fast_wait_until_values_not_flagged(lint):
    code = """
await page.goto(url, { waitUntil: 'domcontentloaded' });
await page.goto(url, { waitUntil: 'commit' });
await page.goto(url, { 'waitUntil': 'load' });
await page.goto(url, { waitUntil });
"""
    assert lint(code, "no-wait-until-slow") == []


# no-networkidle

def test_networkidle_literal_anywhere(lint):
    code = """
await page.waitForLoadState('networkidle');
if (state === "networkidle") {}
const states = ['load', 'networkidle'];
"""
    assert [i.line for i in lint(code, "no-networkidle")] == [2, 3, 4]


def test_networkidle_partial_or_template_not_flagged(lint):
    code = """
const a = 'networkidle0';
const b = `networkidle`;
"""
    assert lint(code, "no-networkidle") == []


# no-fragile-selectors

def test_xpath_locators_flagged(lint):
    code = """
page.locator('//div[@class="item"]');
page.locator('  xpath=//button');
page.locator(`//li[${index}]`);
"""
    issues = lint(code, "no-fragile-selectors")
    assert [i.message_id for i in issues] == ["noXPath"] * 3
    # reported on the selector argument, not the call
    assert issues[0].node.type == "string"
    assert issues[0].column == 13


def test_nth_literal_flagged(lint):
    issues = lint("page.locator('.item').nth(2);", "no-fragile-selectors")
    assert len(issues) == 1
    assert issues[0].message_id == "noNthLiteral"
    assert issues[0].message.startswith("Avoid .nth(2) with a literal index.")


def test_stable_selectors_not_flagged(lint):
    code = """
page.getByTestId('item');
page.locator('[data-testid="row"]');
page.locator(`[data-row="${i}"]`);
rows.nth(i);
rows.nth(-1);
"""
    assert lint(code, "no-fragile-selectors") == []
