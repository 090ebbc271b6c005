"""Key-value blob store persisted as one JSON file (the server-side stand-in for device storage)."""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any, Optional

from mart.infra import paths

logger = logging.getLogger(__name__)

# uvicorn serves sync handlers from a thread pool; guards read-modify-write of the file
_write_lock = Lock()


class KeyValueStore:
    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path:
        # resolved lazily so tests can repoint paths.STORAGE_FILE
        return self._path or Path(paths.STORAGE_FILE)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in storage file %s: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".storage_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(data, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def get_item(self, key: str) -> Optional[str]:
        '''Raw serialized value for key, or None.'''
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str):
        with _write_lock:
            data = self._read_all()
            data[key] = value
            self._write_all(data)

    def remove_item(self, key: str):
        with _write_lock:
            data = self._read_all()
            if data.pop(key, None) is not None:
                self._write_all(data)

    def get_json(self, key: str) -> Any:
        """Decoded value for key; None when missing or not valid JSON."""
        raw = self.get_item(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored value under %s is not valid JSON; ignoring it", key)
            return None

    def set_json(self, key: str, value: Any):
        self.set_item(key, json.dumps(value, ensure_ascii=False))


__all__ = ["KeyValueStore"]
