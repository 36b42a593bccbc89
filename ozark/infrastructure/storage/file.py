# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""JSON-file store.

Each key is one ``<prefix><key>.json`` file in a directory. A write goes
to a temporary file in the same directory and is moved into place with
``os.replace``, so a failed write leaves the previous value untouched.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from ozark.infrastructure.storage.base import KeyValueStore, StorageError

logger = logging.getLogger(__name__)


class JsonFileStore(KeyValueStore):
    """Directory of JSON files, one per collection.

    Attributes:
        directory: Where the files live. Created on first write.
    """

    def __init__(self, directory: Path, key_prefix: str = "") -> None:
        super().__init__(key_prefix)
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{self.physical_key(key)}.json"

    def load(self, key: str, default: Any = None) -> Any:
        path = self._path(key)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return default
        except (OSError, UnicodeError) as e:
            raise StorageError(f"Failed to read {path}", key, e) from e
        return self._decode(key, raw)

    def save(self, key: str, value: Any) -> None:
        path = self._path(key)
        encoded = self._encode(key, value)
        try:
            data = encoded.encode("utf-8")
        except UnicodeError as e:
            raise StorageError(f"Value for {path} is not valid UTF-8", key, e) from e

        tmp_name = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.directory, prefix=f".{path.stem}.", suffix=".tmp"
            )
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as e:
            raise StorageError(f"Failed to write {path}", key, e) from e
        finally:
            # only set while the temp file has not been moved into place
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug("Wrote %s (%d bytes)", path, len(data))

    def delete(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to delete {path}", key, e) from e
