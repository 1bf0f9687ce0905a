"""Package-manager command set."""

from __future__ import annotations

from dataclasses import dataclass

from exportcheck.domain.model.enums import PackageManager


@dataclass(frozen=True, slots=True)
class PackageManagerCommands:
    """Shell command prefixes for one package manager.

    Attributes:
        exec: Runs a binary from installed packages (``npx``, ``pnpm exec``).
    """

    exec: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.exec:
            raise ValueError("exec must not be empty")

    @classmethod
    def for_manager(cls, manager: PackageManager) -> PackageManagerCommands:
        """Commands for a known package manager."""
        return _COMMANDS[manager]


_COMMANDS: dict[PackageManager, PackageManagerCommands] = {
    PackageManager.NPM: PackageManagerCommands(exec="npx"),
    PackageManager.YARN: PackageManagerCommands(exec="yarn"),
    PackageManager.PNPM: PackageManagerCommands(exec="pnpm exec"),
    PackageManager.BUN: PackageManagerCommands(exec="bunx"),
}
