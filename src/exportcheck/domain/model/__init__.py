"""Domain model value objects."""

from exportcheck.domain.model.classification import ClassificationResult, EntryPointFinding
from exportcheck.domain.model.enums import PackageManager, PathKind
from exportcheck.domain.model.manifest import BUILD_PATH_FIELDS, PackageManifest
from exportcheck.domain.model.package_manager import PackageManagerCommands
from exportcheck.domain.model.target import (
    DEFAULT_BUILD_DEPS_TARGET,
    DEFAULT_WATCH_DEPS_TARGET,
    BuildDepsOptions,
    TargetConfiguration,
)
from exportcheck.domain.model.tsconfig import ExtendedConfigFile, ParsedTsconfigData

__all__ = [
    "BUILD_PATH_FIELDS",
    "DEFAULT_BUILD_DEPS_TARGET",
    "DEFAULT_WATCH_DEPS_TARGET",
    "BuildDepsOptions",
    "ClassificationResult",
    "EntryPointFinding",
    "ExtendedConfigFile",
    "PackageManager",
    "PackageManagerCommands",
    "PackageManifest",
    "ParsedTsconfigData",
    "PathKind",
    "TargetConfiguration",
]
