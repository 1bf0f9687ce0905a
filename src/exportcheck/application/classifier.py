"""Entry-point classification: source paths vs build output.

A package's published entry points (package.json ``exports``, ``main``,
``module``) are valid build config when none of the consulted paths
resolves into project source.

Decision order:
    1. no ``exports``: ``main`` and ``module`` are checked
    2. ``exports`` string: that path alone
    3. ``exports`` mapping with ``.``: the root export alone
    4. ``exports`` mapping without ``.``: every subpath export

Condition mappings are inspected one level deep. ``types`` and
``development`` conditions are never classified.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from exportcheck.domain.model.classification import ClassificationResult, EntryPointFinding
from exportcheck.domain.model.enums import PathKind
from exportcheck.domain.model.manifest import BUILD_PATH_FIELDS, PackageManifest
from exportcheck.infrastructure.json_file import read_json_file
from exportcheck.infrastructure.matching import match_any

if TYPE_CHECKING:
    from exportcheck.domain.model.tsconfig import ParsedTsconfigData

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = frozenset({".ts", ".tsx", ".cts", ".mts"})

# Typing/dev aids, never build artifacts
SKIPPED_CONDITIONS = frozenset({"types", "development"})

ROOT_EXPORT = "."

MANIFEST_FILE = "package.json"


class EntryPointClassifier:
    """Classifies one project's manifest entry points.

    Stateless between calls: the manifest is read fresh by every
    classify(), so repeated calls on an unchanged tree agree.
    """

    def __init__(
        self,
        ts_config: ParsedTsconfigData,
        workspace_root: str | Path,
        project_root: str | Path,
    ) -> None:
        """Initialize classifier.

        Args:
            ts_config: Parsed project config; only ``raw.include`` is used.
            workspace_root: Workspace root directory.
            project_root: Project root, absolute or workspace-relative.
        """
        self._include = ts_config.include
        self._workspace_root = os.path.abspath(workspace_root)

        project = os.fspath(project_root)
        self._project_root = (
            os.path.relpath(project, self._workspace_root) if os.path.isabs(project) else project
        )
        # Lexical normalization, symlinks are not followed
        self._project_path = os.path.normpath(os.path.join(self._workspace_root, self._project_root))

    @property
    def project_root(self) -> str:
        """Workspace-relative project root."""
        return self._project_root

    @property
    def manifest_path(self) -> Path:
        """Location of the project's package.json."""
        return Path(self._workspace_root, self._project_root, MANIFEST_FILE)

    def is_valid(self) -> bool:
        """True when no consulted entry point is a source path."""
        return self.classify().valid

    def classify(self) -> ClassificationResult:
        """Classify the manifest's entry points.

        Returns:
            Verdict with the consulted entries.

        Raises:
            ManifestParseError: If package.json is malformed.
        """
        manifest_path = self.manifest_path
        if not manifest_path.exists():
            # Project is described by another descriptor, nothing to validate
            logger.debug("no %s for %s, assuming valid", MANIFEST_FILE, self._project_root)
            return ClassificationResult(project_root=self._project_root, manifest_path=None, valid=True)

        manifest = PackageManifest.from_mapping(read_json_file(manifest_path))
        findings = self._consulted_entries(manifest)

        return ClassificationResult(
            project_root=self._project_root,
            manifest_path=manifest_path,
            valid=not any(f.is_source for f in findings),
            findings=findings,
        )

    def is_source_path(self, path: str) -> bool:
        """Check whether a manifest path points at project source.

        Absolute paths are workspace-root-relative. With include patterns,
        a match decides alone (a project may emit .ts output). Without
        them, the extension decides.
        """
        if os.path.isabs(path):
            without_leading_slash = path[1:] if path.startswith("/") else path
            resolved = os.path.normpath(os.path.join(self._workspace_root, without_leading_slash))
        else:
            resolved = os.path.normpath(os.path.join(self._project_path, path))

        if self._include:
            relative_to_project = os.path.relpath(resolved, self._project_path)
            return match_any(self._include, relative_to_project)

        return os.path.splitext(path)[1] in SOURCE_EXTENSIONS

    def has_invalid_export(self, value: object) -> bool:
        """Check one export entry (path string or condition mapping)."""
        return any(f.is_source for f in self._inspect_export("exports", value))

    def _consulted_entries(self, manifest: PackageManifest) -> tuple[EntryPointFinding, ...]:
        exports = manifest.exports

        if not _is_set(exports):
            return tuple(
                self._finding(field, value)
                for field in BUILD_PATH_FIELDS
                if _is_set(value := getattr(manifest, field)) and isinstance(value, str)
            )

        if isinstance(exports, str):
            return (self._finding("exports", exports),)

        if isinstance(exports, Mapping):
            if ROOT_EXPORT in exports:
                return tuple(self._inspect_export(_key("exports", ROOT_EXPORT), exports[ROOT_EXPORT]))

            findings: list[EntryPointFinding] = []
            for key, value in exports.items():
                findings.extend(self._inspect_export(_key("exports", key), value))
            return tuple(findings)

        # Unrecognized shape, nothing to classify
        return ()

    def _inspect_export(self, field: str, value: object) -> list[EntryPointFinding]:
        if isinstance(value, str):
            return [self._finding(field, value)]

        if isinstance(value, Mapping):
            # One level only, nested condition mappings are not walked
            return [
                self._finding(_key(field, condition), sub_value)
                for condition, sub_value in value.items()
                if condition not in SKIPPED_CONDITIONS and isinstance(sub_value, str)
            ]

        return []

    def _finding(self, field: str, path: str) -> EntryPointFinding:
        kind = PathKind.SOURCE if self.is_source_path(path) else PathKind.ARTIFACT
        logger.debug("%s: %s = %s is %s", self._project_root, field, path, kind.name)
        return EntryPointFinding(field=field, path=path, kind=kind)


def is_valid_package_json_build_config(
    ts_config: ParsedTsconfigData,
    workspace_root: str | Path,
    project_root: str | Path,
) -> bool:
    """Check that package.json entry points reference build output.

    Args:
        ts_config: Parsed project config; only ``raw.include`` is used.
        workspace_root: Workspace root directory.
        project_root: Project root, absolute or workspace-relative.

    Returns:
        True when no consulted entry point is a source path, or when the
        project has no package.json.

    Raises:
        ManifestParseError: If package.json is malformed.

    Example:
        >>> is_valid_package_json_build_config(
        ...     ParsedTsconfigData.from_include("src/**/*.ts"), "/repo", "libs/ui"
        ... )
        True
    """
    return EntryPointClassifier(ts_config, workspace_root, project_root).is_valid()


def _is_set(value: object) -> bool:
    """Presence test for manifest fields: null, "" and false count as absent."""
    return value is not None and value is not False and value != ""


def _key(field: str, key: str) -> str:
    return f'{field}["{key}"]'
