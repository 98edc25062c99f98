"""JSON-file slot storage: one ``<root>/<key>.json`` file per slot."""

import os
from pathlib import Path
from typing import Any

from ..core import JSONParseError, get_logger, parse_json, safe_json_dumps
from .base import StorageError

logger = get_logger(__name__)


class JSONFileStore:
    """Persists each slot as an indented JSON file under ``root``."""

    def __init__(self, root: str | Path, indent: int = 2) -> None:
        self.root = Path(root)
        self.indent = indent

    def path_for(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.root / f"{key}.json"

    def get(self, key: str) -> Any | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return parse_json(path.read_bytes())
        except JSONParseError as e:
            raise StorageError(f"Corrupt storage slot {key!r}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read storage slot {key!r}: {e}") from e

    def set(self, key: str, value: Any) -> None:
        path = self.path_for(key)
        tmp = path.with_suffix(".json.tmp")
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            tmp.write_text(safe_json_dumps(value, indent=self.indent), encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            raise StorageError(f"Cannot write storage slot {key!r}: {e}") from e
        logger.debug("slot_written", key=key, backend="file", path=str(path))
