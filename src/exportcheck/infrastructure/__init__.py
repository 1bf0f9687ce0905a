"""Infrastructure layer: filesystem adapters.

- read_json_file: JSON reader, FAIL-FIRST on malformed input
- match: glob predicate factory, match(pattern)(path) -> bool
- load_tsconfig: tsconfig*.json -> ParsedTsconfigData
- detect_package_manager: lock file -> PackageManager
"""

from exportcheck.infrastructure.json_file import read_json_file
from exportcheck.infrastructure.matching import match, match_any
from exportcheck.infrastructure.package_manager import (
    detect_package_manager,
    get_package_manager_command,
)
from exportcheck.infrastructure.tsconfig_loader import load_tsconfig

__all__ = [
    "detect_package_manager",
    "get_package_manager_command",
    "load_tsconfig",
    "match",
    "match_any",
    "read_json_file",
]
