"""Domain exceptions: all public errors of exportcheck.

Infrastructure/Application raise these, not their own public exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ExportCheckError(Exception):
    """Base for all exportcheck error exceptions.

    Allows: except ExportCheckError to catch all library errors.
    """


class ManifestParseError(ExportCheckError, ValueError):
    """JSON file on disk is malformed.

    FAIL-FIRST: never recovered locally. A broken manifest is a
    configuration error for the whole project, not a per-path condition.

    Attributes:
        path: File that failed to parse.
        reason: Decoder error description.
    """

    def __init__(self, *, path: Path, reason: str) -> None:
        """Initialize with file path and error reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class ConfigLoadError(ExportCheckError, ValueError):
    """TypeScript project configuration cannot be loaded.

    Attributes:
        path: Config file involved.
        reason: Why loading failed.
    """

    def __init__(self, *, path: Path, reason: str) -> None:
        """Initialize with config path and reason."""
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load {path}: {reason}")


class UnknownPackageManagerError(ExportCheckError, ValueError):
    """Package manager name is not one of npm, yarn, pnpm, bun.

    Attributes:
        name: Rejected name.
    """

    def __init__(self, name: str) -> None:
        """Initialize with rejected name."""
        self.name = name
        super().__init__(f"unknown package manager: {name!r}")
