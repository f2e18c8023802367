from .base import BaseRule, RuleContext, SourceText
from .hygiene_rules import MaxFileLinesRule, NoConsoleInTestsRule
from .locator_rules import NoFragileSelectorsRule, NoLocatorOrChainRule
from .page_rules import NoPageReloadRule, NoRedundantVisibilityRule
from .wait_rules import NoNetworkidleRule, NoSetTimeoutInPromiseRule, NoWaitForTimeoutRule, NoWaitUntilSlowRule

__all__ = [
    "BaseRule",
    "RuleContext",
    "SourceText",
    "MaxFileLinesRule",
    "NoConsoleInTestsRule",
    "NoFragileSelectorsRule",
    "NoLocatorOrChainRule",
    "NoNetworkidleRule",
    "NoPageReloadRule",
    "NoRedundantVisibilityRule",
    "NoSetTimeoutInPromiseRule",
    "NoWaitForTimeoutRule",
    "NoWaitUntilSlowRule",
]
