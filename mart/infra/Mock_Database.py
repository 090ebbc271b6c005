"""Mock document database: users, products and orders held in one JSON file."""
import json
import logging
from pathlib import Path
from typing import Optional

from mart.infra import paths

logger = logging.getLogger(__name__)

COLLECTIONS = ("users", "products", "orders")


def _db_path(path: Optional[Path] = None) -> Path:
    return Path(path) if path is not None else Path(paths.DB_FILE)


def load_db(path: Optional[Path] = None) -> dict:
    """Read the whole database; missing collections come back as empty lists."""
    db_file = _db_path(path)
    try:
        with open(db_file, "r", encoding="utf-8") as f:
            data = json.load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Database file not found: {db_file}. Returning empty database.")
        data = {}
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in database file: {e}")
        data = {}
    if not isinstance(data, dict):
        data = {}
    for name in COLLECTIONS:
        if not isinstance(data.get(name), list):
            data[name] = []
    return data


def save_db(data: dict, path: Optional[Path] = None):
    db_file = _db_path(path)
    db_file.parent.mkdir(parents=True, exist_ok=True)
    with open(db_file, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


__all__ = ["load_db", "save_db"]
