"""Domain enumerations."""

from enum import Enum, auto


class PathKind(Enum):
    """What an entry-point path points at."""

    SOURCE = auto()  # authored input, must be compiled
    ARTIFACT = auto()  # compiled output


class PackageManager(Enum):
    """Workspace package manager."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"
