"""Reporter protocol for output formatting.

Users extend exportcheck by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from exportcheck.domain.model.classification import ClassificationResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    exportcheck provides ConsoleReporter and JsonReporter as defaults.
    Output is str, not print(). Caller decides destination.
    """

    def report(self, results: Sequence[ClassificationResult]) -> str:
        """Format classification results.

        Args:
            results: One result per checked project, in check order.

        Returns:
            Formatted report.
        """
        ...
