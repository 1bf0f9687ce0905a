"""exportcheck - classify workspace package entry points as source or build output."""

__version__ = "0.1.0"

from exportcheck.application.classifier import (
    EntryPointClassifier,
    is_valid_package_json_build_config,
)
from exportcheck.application.targets import add_build_and_watch_deps_targets

__all__ = [
    "EntryPointClassifier",
    "__version__",
    "add_build_and_watch_deps_targets",
    "is_valid_package_json_build_config",
]
