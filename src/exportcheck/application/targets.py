"""Build/watch dependency targets for incremental builds.

Lets projects using incremental builds run ``nx watch-deps`` to
continuously build all their dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from pathlib import Path
from typing import TYPE_CHECKING

from exportcheck.domain.model.manifest import PackageManifest
from exportcheck.domain.model.target import BuildDepsOptions, TargetConfiguration
from exportcheck.infrastructure.json_file import read_json_file

if TYPE_CHECKING:
    from exportcheck.domain.model.package_manager import PackageManagerCommands

logger = logging.getLogger(__name__)


def add_build_and_watch_deps_targets(
    workspace_root: str | Path,
    project_root: str | Path,
    targets: MutableMapping[str, TargetConfiguration],
    options: BuildDepsOptions | Mapping[str, object] | None,
    pmc: PackageManagerCommands,
) -> None:
    """Add build-deps and watch-deps targets to ``targets`` in place.

    No-op when the project name cannot be resolved.

    Args:
        workspace_root: Workspace root directory.
        project_root: Workspace-relative project root.
        targets: Target mapping to extend.
        options: Target names. None = defaults.
        pmc: Commands of the workspace package manager.

    Raises:
        ManifestParseError: If project.json or package.json is malformed.
    """
    project_name = resolve_project_name(workspace_root, project_root)
    if not project_name:
        logger.debug("no project name for %s, targets left unchanged", project_root)
        return

    if options is None:
        options = BuildDepsOptions()
    elif not isinstance(options, BuildDepsOptions):
        options = BuildDepsOptions.from_mapping(options)

    build_deps = options.build_target
    targets[build_deps] = TargetConfiguration(depends_on=("^build",))
    targets[options.watch_target] = TargetConfiguration(
        continuous=True,
        depends_on=(build_deps,),
        command=(
            f"{pmc.exec} nx watch --projects {project_name} --includeDependentProjects"
            f" -- {pmc.exec} nx {build_deps} {project_name}"
        ),
    )


def resolve_project_name(workspace_root: str | Path, project_root: str | Path) -> str | None:
    """Project name from project.json, else package.json's nx.name or name.

    project.json wins whenever it exists, even without a name.
    """
    project_dir = Path(workspace_root, project_root)
    project_json = project_dir / "project.json"
    package_json = project_dir / "package.json"

    if project_json.exists():
        data = read_json_file(project_json)
        name = data.get("name") if isinstance(data, Mapping) else None
        return name if isinstance(name, str) else None

    if package_json.exists():
        return PackageManifest.from_mapping(read_json_file(package_json)).project_name

    return None
