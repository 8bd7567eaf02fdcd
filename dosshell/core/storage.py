"""
Snapshot persistence for the filesystem tree.

The tree is stored as one JSON document of nested
``{name, type, children?, content?}`` records. A missing or damaged
snapshot is never an error for the user: loading falls back to the seed
tree and logs a warning.
"""

import json
import logging
import os
import tempfile
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, Optional

from dosshell.core.filesystem import FilesystemTree

logger = logging.getLogger(__name__)


class TreeStore:
    """Reads and writes tree snapshots at a fixed path"""

    def __init__(self, path):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> FilesystemTree:
        """Load the saved tree, or the seed tree if none can be read"""
        if not self.path.exists():
            logger.debug(f"No snapshot at {self.path}, using seed content")
            return FilesystemTree()

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            tree = FilesystemTree.from_snapshot(data)
        except (json.JSONDecodeError, ValueError, RecursionError) as e:
            logger.warning(f"Corrupt snapshot {self.path}: {e}, using seed content")
            return FilesystemTree()
        except (IOError, OSError) as e:
            logger.warning(f"Error reading snapshot {self.path}: {e}, using seed content")
            return FilesystemTree()

        logger.info(f"Loaded filesystem snapshot from {self.path}")
        return tree

    def write(self, snapshot: Dict[str, Any]):
        """
        Write a snapshot record atomically.

        The document goes to a temp file beside the target first, then
        replaces it, so readers never see a partial file.
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(snapshot, f, indent=2)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.debug(f"Wrote filesystem snapshot to {self.path}")

    def save(self, tree: FilesystemTree):
        """Snapshot and write a tree synchronously"""
        self.write(tree.snapshot())


class SnapshotWriter:
    """
    Fire-and-forget snapshot writes.

    Snapshots are taken by the caller (under the tree lock) and handed over
    as plain dicts; one background worker writes them in order. Failures are
    logged and otherwise ignored.
    """

    def __init__(self, store: TreeStore, async_writes: bool = True):
        self.store = store
        self.async_writes = async_writes
        self._executor: Optional[ThreadPoolExecutor] = None
        self._pending: Optional[Future] = None

    def submit(self, snapshot: Dict[str, Any]):
        """Queue a snapshot for writing"""
        if not self.async_writes:
            self._write(snapshot)
            return

        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="dosshell-persist")
        self._pending = self._executor.submit(self._write, snapshot)

    def _write(self, snapshot: Dict[str, Any]):
        try:
            self.store.write(snapshot)
        except Exception as e:
            logger.error(f"Failed to persist filesystem to {self.store.path}: {e}")

    def flush(self):
        """Block until every queued write has finished"""
        if self._pending is not None:
            self._pending.result()
            self._pending = None

    def close(self):
        """Flush and stop the worker"""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self._pending = None
