"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from exportcheck.domain.model.classification import ClassificationResult, EntryPointFinding


class JsonReporter:
    """JSON reporter: schema follows the domain objects 1:1 with ``passed`` added."""

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, results: Sequence[ClassificationResult]) -> str:
        """Format classification results as JSON string."""
        data = {
            "passed": all(r.valid for r in results),
            "results": [_result_to_dict(r) for r in results],
        }
        return json.dumps(data, indent=self._indent)


def _result_to_dict(result: ClassificationResult) -> dict[str, object]:
    return {
        "project_root": result.project_root,
        "manifest_path": str(result.manifest_path) if result.manifest_path else None,
        "valid": result.valid,
        "findings": [_finding_to_dict(f) for f in result.findings],
    }


def _finding_to_dict(finding: EntryPointFinding) -> dict[str, object]:
    return {
        "field": finding.field,
        "path": finding.path,
        "kind": finding.kind.name.lower(),
    }
