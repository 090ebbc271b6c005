"""Shared test setup: run against throwaway copies of the data files."""
import shutil
import tempfile
from pathlib import Path
from unittest import mock

from mart.infra import paths
from mart.utilities.config import BASE_DIR

SEED_DB = BASE_DIR / 'data' / 'db.json'


class TempDataMixin:
    """Points the repositories at a temporary db.json copy and an empty key-value store."""

    def setUp(self):
        super().setUp()
        self._tmp = tempfile.TemporaryDirectory()
        tmp_dir = Path(self._tmp.name)
        self.db_file = tmp_dir / 'db.json'
        self.storage_file = tmp_dir / 'local_storage.json'
        shutil.copy(SEED_DB, self.db_file)
        patches = [
            mock.patch.object(paths, 'DB_FILE', self.db_file),
            mock.patch.object(paths, 'STORAGE_FILE', self.storage_file),
        ]
        for p in patches:
            p.start()
            self.addCleanup(p.stop)
        self.addCleanup(self._tmp.cleanup)
