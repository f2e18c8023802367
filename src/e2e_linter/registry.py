import logging
from typing import Iterable, Iterator

from .exceptions import DuplicateRuleError, UnknownRuleError
from .rules.base import BaseRule

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Registry for managing and loading linting rules.

    Rules keep their registration order, which is also the order in which
    they run on a node.
    """

    def __init__(self, rules: Iterable[BaseRule] = ()):
        self._rules: dict[str, BaseRule] = {}
        for rule in rules:
            self.register(rule)

    @classmethod
    def with_builtin_rules(cls) -> "RuleRegistry":
        registry = cls()
        registry._load_builtin_rules()
        return registry

    def register(self, rule: BaseRule) -> None:
        if rule.name in self._rules:
            raise DuplicateRuleError(rule.name)
        self._rules[rule.name] = rule

    def get(self, name: str) -> BaseRule:
        try:
            return self._rules[name]
        except KeyError:
            raise UnknownRuleError(name) from None

    def all(self) -> Iterator[BaseRule]:
        """Fresh iterator over the rules on every call."""
        return iter(self._rules.values())

    def names(self) -> list[str]:
        return list(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def _load_builtin_rules(self):
        from .rules.hygiene_rules import MaxFileLinesRule, NoConsoleInTestsRule
        from .rules.locator_rules import NoFragileSelectorsRule, NoLocatorOrChainRule
        from .rules.page_rules import NoPageReloadRule, NoRedundantVisibilityRule
        from .rules.wait_rules import (
            NoNetworkidleRule,
            NoSetTimeoutInPromiseRule,
            NoWaitForTimeoutRule,
            NoWaitUntilSlowRule,
        )

        self.register(NoWaitForTimeoutRule())
        self.register(NoSetTimeoutInPromiseRule())
        self.register(NoNetworkidleRule())
        self.register(NoConsoleInTestsRule())
        self.register(NoLocatorOrChainRule())
        self.register(NoFragileSelectorsRule())
        self.register(NoWaitUntilSlowRule())
        self.register(NoPageReloadRule())
        self.register(MaxFileLinesRule())
        self.register(NoRedundantVisibilityRule())
        logger.debug("Loaded %d built-in rules", len(self._rules))
