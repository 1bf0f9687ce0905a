"""Package manifest (package.json) value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

# Build-field fallbacks consulted when `exports` is absent, in order
BUILD_PATH_FIELDS = ("main", "module")


@dataclass(frozen=True, slots=True)
class PackageManifest:
    """Fields of package.json relevant to entry points and naming.

    Values are kept as found in JSON; shape checks happen in the classifier.

    Attributes:
        exports: None, a path string, or a condition mapping.
        main: ``main`` field.
        module: ``module`` field.
        name: ``name`` field.
        nx_name: ``nx.name`` override.
        raw: Whole decoded document.
    """

    exports: object = None
    main: object = None
    module: object = None
    name: str | None = None
    nx_name: str | None = None
    raw: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def project_name(self) -> str | None:
        """``nx.name`` when present (even empty), else ``name``."""
        return self.name if self.nx_name is None else self.nx_name

    @classmethod
    def from_mapping(cls, data: object) -> PackageManifest:
        """Build from decoded JSON. Non-object documents give an empty manifest."""
        if not isinstance(data, Mapping):
            return cls()

        nx = data.get("nx")
        nx_name = nx.get("name") if isinstance(nx, Mapping) else None
        name = data.get("name")

        return cls(
            exports=data.get("exports"),
            main=data.get("main"),
            module=data.get("module"),
            name=name if isinstance(name, str) else None,
            nx_name=nx_name if isinstance(nx_name, str) else None,
            raw=MappingProxyType(dict(data)),
        )
