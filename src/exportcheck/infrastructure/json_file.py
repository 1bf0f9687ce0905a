"""JSON file reader."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from exportcheck.domain.exceptions import ManifestParseError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def read_json_file(path: Path) -> object:
    """Read and decode a JSON file.

    Read fresh on every call, no caching.

    Args:
        path: File to read.

    Returns:
        Decoded document.

    Raises:
        FileNotFoundError: If path does not exist.
        ManifestParseError: If the content is not valid JSON.
    """
    text = path.read_text(encoding="utf-8")
    logger.debug("read %s (%d bytes)", path, len(text))

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestParseError(
            path=path,
            reason=f"{e.msg} at line {e.lineno}, column {e.colno}",
        ) from e
