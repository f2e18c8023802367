import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

from e2e_tree_sitter import ASTWalker
from pydantic import BaseModel
from tree_sitter import Node

from ..models import Diagnostic, Severity

# Line terminators recognised by JavaScript source text
_LINE_BREAK = re.compile(r"\r\n|[\r\n\u2028\u2029]")


class SourceText:
    """Text of one file, encoded once and shared by every rule of a pass."""

    def __init__(self, text: str):
        self.text = text
        self.encoded = text.encode("utf8")

    @cached_property
    def line_count(self) -> int:
        return len(_LINE_BREAK.split(self.text))


@dataclass
class RuleContext:
    """What a rule may read besides the node it is looking at."""

    source: SourceText
    severity: Severity
    options: BaseModel | None = None
    file_path: Path | None = None

    def get_text(self, node: Node | None) -> str:
        return ASTWalker.get_text(node, self.source.encoded)

    @property
    def line_count(self) -> int:
        return self.source.line_count


class BaseRule(ABC):
    """Abstract base class for all linting rules.

    A rule subscribes to a set of node kinds and gets called once per
    matching node. It must not keep anything between calls.
    """

    options_model: type[BaseModel] | None = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique rule identifier (e.g., 'no-wait-for-timeout')."""
        pass

    @property
    @abstractmethod
    def node_kinds(self) -> frozenset[str]:
        """tree-sitter node types this rule wants to inspect."""
        pass

    @property
    @abstractmethod
    def default_severity(self) -> Severity:
        pass

    @property
    @abstractmethod
    def messages(self) -> dict[str, str]:
        """Message templates keyed by message id, with {{placeholders}}."""
        pass

    @property
    def description(self) -> str:
        return ""

    @abstractmethod
    def check(self, node: Node, context: RuleContext) -> Diagnostic | None:
        """Return a diagnostic when the node matches, None otherwise."""
        pass

    def default_options(self) -> BaseModel | None:
        return self.options_model() if self.options_model else None

    # Helper method for consistent diagnostic creation
    def _report(self, node: Node, context: RuleContext, message_id: str, **data: str) -> Diagnostic:
        return Diagnostic(
            rule_name=self.name,
            node=node,
            message_id=message_id,
            severity=context.severity,
            message_data=data,
            template=self.messages[message_id],
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
