from typing import List

from .models import Diagnostic


class DiagnosticReporter:
    """Collects diagnostics for the file currently being analysed"""

    def __init__(self):
        self._diagnostics: List[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    def flush(self) -> List[Diagnostic]:
        """Hand back everything reported since the last flush and start over."""
        collected, self._diagnostics = self._diagnostics, []
        return collected

    def __len__(self) -> int:
        return len(self._diagnostics)
