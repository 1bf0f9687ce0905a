"""Entry-point classification result."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from exportcheck.domain.model.enums import PathKind


@dataclass(frozen=True, slots=True)
class EntryPointFinding:
    """One manifest path and how it was classified.

    Attributes:
        field: Manifest location, e.g. ``exports["."]["import"]`` or ``main``.
        path: Path as written in the manifest.
        kind: SOURCE or ARTIFACT.
    """

    field: str
    path: str
    kind: PathKind

    @property
    def is_source(self) -> bool:
        """Path points at an authored source file."""
        return self.kind is PathKind.SOURCE

    def __str__(self) -> str:
        """Format as field -> path (kind)."""
        return f"{self.field} -> {self.path} ({self.kind.name.lower()})"


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Verdict for one project plus the entries that decided it.

    Attributes:
        project_root: Workspace-relative project root.
        manifest_path: package.json inspected, None when there is none.
        valid: Every consulted entry point is build output.
        findings: Consulted entries, in manifest order.
    """

    project_root: str
    manifest_path: Path | None
    valid: bool
    findings: tuple[EntryPointFinding, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.manifest_path is None and not self.valid:
            raise ValueError("result without a manifest must be valid")

    @property
    def source_findings(self) -> tuple[EntryPointFinding, ...]:
        """Findings that point at source files."""
        return tuple(f for f in self.findings if f.is_source)

    @property
    def has_manifest(self) -> bool:
        """A package.json was found and inspected."""
        return self.manifest_path is not None
