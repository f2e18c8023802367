class LintError(Exception):
    """Base class for configuration-level linter failures."""


class UnknownRuleError(LintError, KeyError):
    """A rule name was requested that the registry does not hold."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown rule '{self.name}'"


class DuplicateRuleError(LintError, ValueError):
    """Two rules were registered under the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Rule '{name}' is already registered")


class ConfigError(LintError, ValueError):
    """Configuration could not be read or failed validation."""
