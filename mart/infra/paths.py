from mart.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
DB_FILE = (DATA_DIR / 'db.json').resolve()
STORAGE_FILE = (DATA_DIR / 'local_storage.json').resolve()

__all__ = ['DATA_DIR', 'DB_FILE', 'STORAGE_FILE']
