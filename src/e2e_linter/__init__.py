from .engine import LinterEngine, analyze
from .exceptions import ConfigError, DuplicateRuleError, LintError, UnknownRuleError
from .models import Diagnostic, RuleSetting, Severity
from .registry import RuleRegistry
from .reporter import DiagnosticReporter

__all__ = [
    "ConfigError",
    "Diagnostic",
    "DiagnosticReporter",
    "DuplicateRuleError",
    "LintError",
    "LinterEngine",
    "RuleRegistry",
    "RuleSetting",
    "Severity",
    "UnknownRuleError",
    "analyze",
]
