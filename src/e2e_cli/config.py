import logging
import tomllib
from fnmatch import fnmatch
from pathlib import Path
from typing import Any, Dict, List

from e2e_linter.exceptions import ConfigError
from e2e_linter.options import resolve_settings
from e2e_linter.registry import RuleRegistry
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = (".e2e-lint.toml", "pyproject.toml")
DEFAULT_INCLUDE = ["**/*.ts"]
DEFAULT_IGNORE = ["node_modules/**", "dist/**", "reports/**", "playwright/**"]


class OverrideConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    files: List[str]
    rules: Dict[str, Any] = Field(default_factory=dict)


class ConfigFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    include: List[str] = Field(default_factory=lambda: list(DEFAULT_INCLUDE))
    ignore: List[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE))
    rules: Dict[str, Any] = Field(default_factory=dict)
    overrides: List[OverrideConfig] = Field(default_factory=list)


def matches_glob(rel_path: str, pattern: str) -> bool:
    """Match a posix path one segment at a time.

    `*` and `?` stay inside a segment, `**` spans zero or more directories,
    so `*.ts` only matches files at the config root.
    """
    pattern_parts = pattern.split("/")
    path_parts = rel_path.split("/")

    def match_from(p_idx: int, path_idx: int) -> bool:
        if p_idx == len(pattern_parts):
            return path_idx == len(path_parts)
        part = pattern_parts[p_idx]
        if part == "**":
            if p_idx == len(pattern_parts) - 1:
                return True
            return any(match_from(p_idx + 1, i) for i in range(path_idx, len(path_parts) + 1))
        if path_idx == len(path_parts) or not fnmatch(path_parts[path_idx], part):
            return False
        return match_from(p_idx + 1, path_idx + 1)

    return match_from(0, 0)


class LintConfig:
    """Handles loading and validation of .e2e-lint.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.settings = ConfigFile()
        self.root = Path.cwd()
        self.source: Path | None = None

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    @classmethod
    def discover(cls, start: Path | None = None) -> "LintConfig":
        """Use the first config file found walking up from `start`."""
        start = (start or Path.cwd()).resolve()
        for directory in (start, *start.parents):
            for name in CONFIG_FILE_NAMES:
                candidate = directory / name
                if candidate.is_file() and cls._has_section(candidate):
                    return cls(candidate)
        return cls()

    @property
    def include(self) -> List[str]:
        return self.settings.include

    @property
    def ignore(self) -> List[str]:
        return self.settings.ignore

    @property
    def rules(self) -> Dict[str, Any]:
        return self.settings.rules

    @property
    def overrides(self) -> List[OverrideConfig]:
        return self.settings.overrides

    def _load_from_file(self, path: Path):
        data = self._read_toml(path)

        if path.name == "pyproject.toml" or "tool" in data:
            lint_data = data.get("tool", {}).get("e2e-lint", {})
        else:
            lint_data = data

        try:
            self.settings = ConfigFile.model_validate(lint_data)
        except ValidationError as e:
            raise ConfigError(f"{path}: {e}") from e

        self.root = path.resolve().parent
        self.source = path
        logger.debug("Loaded configuration from %s", path)

    @staticmethod
    def _read_toml(path: Path) -> dict:
        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{path}: {e}") from e

    @classmethod
    def _has_section(cls, path: Path) -> bool:
        if path.name != "pyproject.toml":
            return True
        return "e2e-lint" in cls._read_toml(path).get("tool", {})

    def validate(self, registry: RuleRegistry) -> None:
        """Resolve every rule table once so bad names or options fail before linting."""
        resolve_settings(registry, self.rules)
        for override in self.overrides:
            resolve_settings(registry, override.rules)

    def relative(self, path: Path) -> str:
        resolved = path.resolve()
        try:
            return resolved.relative_to(self.root).as_posix()
        except ValueError:
            return resolved.as_posix()

    def is_ignored(self, path: Path) -> bool:
        rel = self.relative(path)
        return any(matches_glob(rel, pattern) for pattern in self.ignore)

    def rules_for(self, path: Path) -> Dict[str, Any]:
        """Rule table for one file: base rules, then every matching override in order."""
        rel = self.relative(path)
        merged = dict(self.rules)
        for override in self.overrides:
            if any(matches_glob(rel, pattern) for pattern in override.files):
                merged.update(override.rules)
        return merged

    def collect_files(self, paths: List[Path]) -> List[Path]:
        """Expand directories with the include globs and drop ignored files."""
        files: List[Path] = []
        seen = set()
        for path in paths:
            if path.is_dir():
                candidates = sorted(p for p in path.rglob("*") if p.is_file())
                candidates = [p for p in candidates if any(matches_glob(self.relative(p), g) for g in self.include)]
            else:
                candidates = [path]
            for candidate in candidates:
                key = candidate.resolve()
                if key in seen or self.is_ignored(candidate):
                    continue
                seen.add(key)
                files.append(candidate)
        return files
