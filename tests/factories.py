"""Test factories for workspace fixtures.

Centralized helpers writing real manifests into a tmp workspace.
"""

import json
from pathlib import Path

from exportcheck.domain.model.classification import EntryPointFinding
from exportcheck.domain.model.enums import PathKind

# Default project root used across tests
DEFAULT_PROJECT = "libs/pkg"


def write_json(path: Path, data: object) -> Path:
    """Write data as JSON, creating parent directories.

    Args:
        path: Destination file
        data: JSON-serializable document

    Returns:
        The written path
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def make_package(
    workspace: Path,
    manifest: dict[str, object] | None = None,
    project: str = DEFAULT_PROJECT,
) -> Path:
    """Create a project directory with an optional package.json.

    Args:
        workspace: Workspace root
        manifest: package.json content, None = no package.json
        project: Workspace-relative project root

    Returns:
        Absolute project directory
    """
    project_dir = workspace / project
    project_dir.mkdir(parents=True, exist_ok=True)
    if manifest is not None:
        write_json(project_dir / "package.json", manifest)
    return project_dir


def make_finding(field: str, path: str, *, source: bool) -> EntryPointFinding:
    """Create an EntryPointFinding for tests."""
    return EntryPointFinding(
        field=field,
        path=path,
        kind=PathKind.SOURCE if source else PathKind.ARTIFACT,
    )
