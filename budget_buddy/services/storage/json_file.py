"""
JSON File Storage Implementation

DESIGN DECISION: A single local JSON file stands in for browser local
storage. The file holds one object mapping keys to string values, so
the transaction blob is stored exactly as it would be under a
localStorage key.

TRADEOFFS:
- The whole file is rewritten on every set (fine for personal use)
- No cross-process locking: last writer wins

Writes go to a temporary file first and are moved into place with
os.replace, so a crash never leaves a half-written file behind.
"""

import json
import os
from pathlib import Path
from typing import Optional, Union

from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from budget_buddy.services.storage.interface import (
    KeyValueStore,
    StorageReadError,
    StorageWriteError,
)


class JsonFileKeyValueStore(KeyValueStore):
    """
    Key-value store persisted to one JSON file.

    A missing file reads as an empty store; it is created on first write.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            raise StorageReadError(f"Cannot read store file {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageReadError(
                f"Store file {self._path} must contain a JSON object, got {type(data).__name__}"
            )
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    @retry(
        retry=retry_if_exception_type(OSError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.1, max=1),
        reraise=True,
    )
    def _write_all(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp, self._path)
        finally:
            if tmp.exists():
                tmp.unlink()

    def _commit(self, data: dict[str, str]) -> None:
        try:
            self._write_all(data)
        except OSError as e:
            raise StorageWriteError(f"Cannot write store file {self._path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._commit(data)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._commit(data)
