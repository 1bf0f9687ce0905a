"""Task target descriptor and synthesizer options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_BUILD_DEPS_TARGET = "build-deps"
DEFAULT_WATCH_DEPS_TARGET = "watch-deps"


@dataclass(frozen=True, slots=True)
class TargetConfiguration:
    """One named target of a project.

    Attributes:
        depends_on: Target references (``^build`` = dependencies' build).
        continuous: Target keeps running (watchers, dev servers).
        command: Shell command, None for dependency-only targets.
    """

    depends_on: tuple[str, ...] = ()
    continuous: bool = False
    command: str | None = None

    def to_dict(self) -> dict[str, object]:
        """JSON descriptor shape. Unset fields are omitted."""
        data: dict[str, object] = {}
        if self.continuous:
            data["continuous"] = True
        if self.depends_on:
            data["dependsOn"] = list(self.depends_on)
        if self.command is not None:
            data["command"] = self.command
        return data


@dataclass(frozen=True, slots=True)
class BuildDepsOptions:
    """Names of the synthesized targets. None = default name.

    Names are used as given: an empty string is a name, and equal names
    make the watch target overwrite the build target.

    Attributes:
        build_deps_target_name: Target that builds all dependencies.
        watch_deps_target_name: Continuous target re-running it on change.
    """

    build_deps_target_name: str | None = None
    watch_deps_target_name: str | None = None

    @property
    def build_target(self) -> str:
        """Effective build-deps target name."""
        name = self.build_deps_target_name
        return DEFAULT_BUILD_DEPS_TARGET if name is None else name

    @property
    def watch_target(self) -> str:
        """Effective watch-deps target name."""
        name = self.watch_deps_target_name
        return DEFAULT_WATCH_DEPS_TARGET if name is None else name

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> BuildDepsOptions:
        """Accept plugin-style camelCase keys."""
        build = data.get("buildDepsTargetName")
        watch = data.get("watchDepsTargetName")
        return cls(
            build_deps_target_name=build if isinstance(build, str) else None,
            watch_deps_target_name=watch if isinstance(watch, str) else None,
        )
