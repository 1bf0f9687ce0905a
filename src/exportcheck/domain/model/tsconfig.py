"""Parsed TypeScript project configuration value objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class ExtendedConfigFile:
    """One link of a tsconfig ``extends`` chain.

    Attributes:
        file_path: Resolved file path, or the bare specifier for packages.
        external_package: Package name when the config lives in a dependency.
    """

    file_path: str
    external_package: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.file_path:
            raise ValueError("file_path must not be empty")


@dataclass(frozen=True, slots=True)
class ParsedTsconfigData:
    """Parsed tsconfig as seen by the entry-point classifier.

    Caller-owned and immutable. Only ``raw["include"]`` takes part in
    classification; the other fields are carried for callers.

    Attributes:
        options: ``compilerOptions`` mapping.
        raw: Raw JSON of the config file itself (not merged with ``extends``).
        project_references: ``references[].path`` entries, in order.
        extended_config_files: ``extends`` chain, nearest first.
    """

    options: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))
    raw: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))
    project_references: tuple[str, ...] = ()
    extended_config_files: tuple[ExtendedConfigFile, ...] = ()

    @property
    def include(self) -> tuple[str, ...] | None:
        """Include patterns, or None when ``raw.include`` is not a list."""
        include = self.raw.get("include")
        if not isinstance(include, (list, tuple)):
            return None
        return tuple(p for p in include if isinstance(p, str))

    @classmethod
    def empty(cls) -> ParsedTsconfigData:
        """Config with no include patterns (extension fallback applies)."""
        return cls()

    @classmethod
    def from_include(cls, *patterns: str) -> ParsedTsconfigData:
        """Config whose raw JSON declares only ``include``."""
        return cls(raw=MappingProxyType({"include": list(patterns)}))
