"""Turns per-rule configuration values into RuleSetting objects."""

from typing import Any, Mapping

from pydantic import ValidationError

from .exceptions import ConfigError
from .models import RuleSetting, Severity
from .registry import RuleRegistry
from .rules.base import BaseRule

RuleOptions = Mapping[str, Any]


def default_settings(registry: RuleRegistry) -> dict[str, RuleSetting]:
    return {rule.name: RuleSetting(rule.default_severity, rule.default_options()) for rule in registry.all()}


def resolve_settings(
    registry: RuleRegistry,
    overrides: RuleOptions | None = None,
    base: Mapping[str, RuleSetting] | None = None,
) -> dict[str, RuleSetting]:
    """Apply configuration values on top of `base` (or the rule defaults).

    Values may be a RuleSetting, a severity (`"warn"`, `"off"`, `2`, ...),
    or a `[severity, {options}]` list as in an ESLint config. Every name is
    checked against the registry before anything else happens, so a typo
    fails the whole run up front.
    """
    settings = dict(base) if base is not None else default_settings(registry)
    for name, value in (overrides or {}).items():
        rule = registry.get(name)
        settings[name] = _resolve_one(rule, value)
    return settings


def _resolve_one(rule: BaseRule, value: Any) -> RuleSetting:
    if isinstance(value, RuleSetting):
        return value

    raw_options: Any = None
    if isinstance(value, (list, tuple)):
        if not value or len(value) > 2:
            raise ConfigError(f"{rule.name}: expected [severity] or [severity, options], got {value!r}")
        severity_value = value[0]
        if len(value) == 2:
            raw_options = value[1]
    else:
        severity_value = value

    try:
        severity = Severity.parse(severity_value)
    except ValueError as e:
        raise ConfigError(f"{rule.name}: {e}") from e

    return RuleSetting(severity, _validate_options(rule, raw_options))


def _validate_options(rule: BaseRule, raw_options: Any):
    if raw_options is None:
        return rule.default_options()
    if rule.options_model is None:
        raise ConfigError(f"{rule.name}: rule takes no options")
    if not isinstance(raw_options, Mapping):
        raise ConfigError(f"{rule.name}: options must be a table, got {raw_options!r}")
    try:
        return rule.options_model.model_validate(dict(raw_options))
    except ValidationError as e:
        raise ConfigError(f"{rule.name}: invalid options: {e}") from e
