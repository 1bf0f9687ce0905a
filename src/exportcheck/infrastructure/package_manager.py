"""Package manager detection from lock files."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from exportcheck.domain.exceptions import UnknownPackageManagerError
from exportcheck.domain.model.enums import PackageManager
from exportcheck.domain.model.package_manager import PackageManagerCommands

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# Checked in order, first existing lock file wins
_LOCK_FILES: tuple[tuple[str, PackageManager], ...] = (
    ("bun.lockb", PackageManager.BUN),
    ("bun.lock", PackageManager.BUN),
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("yarn.lock", PackageManager.YARN),
    ("package-lock.json", PackageManager.NPM),
)


def detect_package_manager(workspace_root: Path) -> PackageManager:
    """Detect the workspace package manager.

    Args:
        workspace_root: Directory holding the lock file.

    Returns:
        Manager owning the first lock file found, NPM when there is none.
    """
    for lock_file, manager in _LOCK_FILES:
        if (workspace_root / lock_file).exists():
            logger.debug("found %s, using %s", lock_file, manager.value)
            return manager

    return PackageManager.NPM


def get_package_manager_command(
    manager: PackageManager | str | None = None,
    workspace_root: Path | None = None,
) -> PackageManagerCommands:
    """Command set for a manager given by value, name, or detection.

    Args:
        manager: Manager or its name. None = detect from workspace_root.
        workspace_root: Used for detection when manager is None.

    Returns:
        Commands of the resolved manager.

    Raises:
        UnknownPackageManagerError: If manager is an unknown name.
        ValueError: If both arguments are None.
    """
    if manager is None:
        if workspace_root is None:
            raise ValueError("manager or workspace_root is required")
        manager = detect_package_manager(workspace_root)
    elif isinstance(manager, str):
        try:
            manager = PackageManager(manager)
        except ValueError as e:
            raise UnknownPackageManagerError(manager) from e

    return PackageManagerCommands.for_manager(manager)
