"""Durable key/value storage backed by one JSON file per key.

Reads never raise: a missing file, an unreadable file and a file that
does not hold valid JSON all read as ``None``.  Writes go through a
temporary file and ``os.replace`` so a crash never leaves a truncated
record behind.  ``OSError`` is wrapped in ``PersistenceError`` so
callers can decide whether to degrade.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from storefront.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileStore:

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def get(self, key: str) -> Any | None:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable record '%s' at %s", key, path, exc_info=True)
            return None

    def set(self, key: str, value: Any) -> None:
        """Write *value* to a sibling temp file, then swap it into place."""
        path = self._path_for(key)
        tmp_path = path.with_name(f"{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(value, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, path)
        except OSError as exc:
            raise PersistenceError(f"Could not write record '{key}' to {path}") from exc

    # --- File helpers ---------------------------------------------------------

    def _path_for(self, key: str) -> Path:
        return self._directory / f"{key}.json"
