import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel
from tree_sitter import Node

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class Severity(str, Enum):
    OFF = "off"
    WARNING = "warning"
    ERROR = "error"

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        """Accept the spellings ESLint configs use: off/warn/error and 0/1/2."""
        if isinstance(value, Severity):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid severity: {value!r}")
        if isinstance(value, int):
            by_level = {0: cls.OFF, 1: cls.WARNING, 2: cls.ERROR}
            if value in by_level:
                return by_level[value]
        elif isinstance(value, str):
            text = value.strip().lower()
            if text in ("0", "1", "2"):
                return cls.parse(int(text))
            if text == "warn":
                return cls.WARNING
            for member in cls:
                if member.value == text:
                    return member
        raise ValueError(f"Invalid severity: {value!r}")

    @property
    def rank(self) -> int:
        return {"off": 0, "warning": 1, "error": 2}[self.value]


@dataclass(frozen=True)
class RuleSetting:
    """Resolved severity and validated options for one rule"""

    severity: Severity
    options: BaseModel | None = None

    @property
    def enabled(self) -> bool:
        return self.severity is not Severity.OFF


def render_message(template: str, data: dict[str, str]) -> str:
    """Fill `{{name}}` placeholders; unknown names are left as written."""
    return _PLACEHOLDER.sub(lambda m: str(data.get(m.group(1), m.group(0))), template)


@dataclass
class Diagnostic:
    """One finding reported by a rule for a single file pass"""

    rule_name: str
    node: Node
    message_id: str
    severity: Severity
    message_data: dict[str, str] = field(default_factory=dict)
    template: str = field(default="", repr=False)

    @property
    def line(self) -> int:
        return self.node.start_point[0] + 1

    @property
    def column(self) -> int:
        return self.node.start_point[1]

    @property
    def message(self) -> str:
        return render_message(self.template, self.message_data)
