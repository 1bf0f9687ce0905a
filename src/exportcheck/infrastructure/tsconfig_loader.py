"""tsconfig*.json loading."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from exportcheck.domain.exceptions import ConfigLoadError
from exportcheck.domain.model.tsconfig import ExtendedConfigFile, ParsedTsconfigData
from exportcheck.infrastructure.json_file import read_json_file

logger = logging.getLogger(__name__)


def load_tsconfig(path: Path) -> ParsedTsconfigData:
    """Load a TypeScript project configuration.

    ``raw`` is the file's own JSON. The ``extends`` chain is walked only
    to record it: local configs are followed transitively, package
    specifiers are recorded without resolution.

    Args:
        path: tsconfig file.

    Returns:
        Parsed configuration.

    Raises:
        ConfigLoadError: If the file is missing, not a JSON object,
            or the local extends chain is circular.
        ManifestParseError: If a file in the chain is malformed JSON.

    Example:
        >>> load_tsconfig(Path("libs/ui/tsconfig.lib.json")).include
        ('src/**/*.ts',)
    """
    raw = _read_config(path)
    extended = _walk_extends(path, raw, seen=(path.resolve(),))

    options = raw.get("compilerOptions")
    references = raw.get("references")

    return ParsedTsconfigData(
        options=MappingProxyType(dict(options)) if isinstance(options, Mapping) else MappingProxyType({}),
        raw=MappingProxyType(dict(raw)),
        project_references=_reference_paths(references),
        extended_config_files=extended,
    )


def _read_config(path: Path) -> Mapping[str, object]:
    if not path.is_file():
        raise ConfigLoadError(path=path, reason="file not found")

    data = read_json_file(path)
    if not isinstance(data, Mapping):
        raise ConfigLoadError(path=path, reason="expected a JSON object")
    return data


def _walk_extends(
    path: Path,
    raw: Mapping[str, object],
    seen: tuple[Path, ...],
) -> tuple[ExtendedConfigFile, ...]:
    extends = raw.get("extends")
    if isinstance(extends, str):
        specifiers = [extends]
    elif isinstance(extends, list):
        specifiers = [s for s in extends if isinstance(s, str)]
    else:
        return ()

    result: list[ExtendedConfigFile] = []
    for specifier in specifiers:
        if not _is_local(specifier):
            result.append(
                ExtendedConfigFile(file_path=specifier, external_package=_package_name(specifier))
            )
            continue

        parent = _resolve_local(path.parent, specifier)
        if parent.resolve() in seen:
            raise ConfigLoadError(path=path, reason=f"circular extends via {parent}")

        result.append(ExtendedConfigFile(file_path=str(parent)))
        logger.debug("%s extends %s", path, parent)
        result.extend(_walk_extends(parent, _read_config(parent), (*seen, parent.resolve())))

    return tuple(result)


def _is_local(specifier: str) -> bool:
    return specifier.startswith(".") or Path(specifier).is_absolute()


def _resolve_local(base: Path, specifier: str) -> Path:
    candidate = base / specifier
    if candidate.suffix != ".json" and not candidate.is_file():
        return candidate.with_name(candidate.name + ".json")
    return candidate


def _package_name(specifier: str) -> str:
    """Package part of a module specifier (keeps @scope/)."""
    parts = specifier.split("/")
    if specifier.startswith("@") and len(parts) > 1:
        return "/".join(parts[:2])
    return parts[0]


def _reference_paths(references: object) -> tuple[str, ...]:
    if not isinstance(references, list):
        return ()
    return tuple(
        ref["path"]
        for ref in references
        if isinstance(ref, Mapping) and isinstance(ref.get("path"), str)
    )
